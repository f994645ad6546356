"""Common value types and enumerations shared by the Maps web service requests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class _StrEnum(str, Enum):
    """String enumeration whose string form is its wire value."""

    def __str__(self) -> str:
        return self.value


class Mode(_StrEnum):
    """Travel mode."""

    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class Avoid(_StrEnum):
    """Route features to avoid."""

    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"


class Units(_StrEnum):
    """Unit system for human readable distances."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class TransitMode(_StrEnum):
    """Transit mode of a directions or distance matrix request."""

    BUS = "bus"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"
    RAIL = "rail"


class TransitRoutingPreference(_StrEnum):
    """Bias for which transit routes are returned."""

    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


class TrafficModel(_StrEnum):
    """Traffic prediction model for future directions."""

    BEST_GUESS = "best_guess"
    OPTIMISTIC = "optimistic"
    PESSIMISTIC = "pessimistic"


class PriceLevel(_StrEnum):
    """Price level for the Places API."""

    FREE = "0"
    INEXPENSIVE = "1"
    MODERATE = "2"
    EXPENSIVE = "3"
    VERY_EXPENSIVE = "4"


class Component(_StrEnum):
    """Key for a part of a structured address used in component filtering."""

    ROUTE = "route"
    LOCALITY = "locality"
    ADMINISTRATIVE_AREA = "administrative_area"
    POSTAL_CODE = "postal_code"
    COUNTRY = "country"


class RankBy(_StrEnum):
    """Order in which place search results are listed."""

    PROMINENCE = "prominence"
    DISTANCE = "distance"


class PlaceType(_StrEnum):
    """Place type used to restrict Places API searches."""

    ACCOUNTING = "accounting"
    AIRPORT = "airport"
    AMUSEMENT_PARK = "amusement_park"
    AQUARIUM = "aquarium"
    ART_GALLERY = "art_gallery"
    ATM = "atm"
    BAKERY = "bakery"
    BANK = "bank"
    BAR = "bar"
    BEAUTY_SALON = "beauty_salon"
    BICYCLE_STORE = "bicycle_store"
    BOOK_STORE = "book_store"
    BOWLING_ALLEY = "bowling_alley"
    BUS_STATION = "bus_station"
    CAFE = "cafe"
    CAMPGROUND = "campground"
    CAR_DEALER = "car_dealer"
    CAR_RENTAL = "car_rental"
    CAR_REPAIR = "car_repair"
    CAR_WASH = "car_wash"
    CASINO = "casino"
    CEMETERY = "cemetery"
    CHURCH = "church"
    CITY_HALL = "city_hall"
    CLOTHING_STORE = "clothing_store"
    CONVENIENCE_STORE = "convenience_store"
    COURTHOUSE = "courthouse"
    DENTIST = "dentist"
    DEPARTMENT_STORE = "department_store"
    DOCTOR = "doctor"
    ELECTRICIAN = "electrician"
    ELECTRONICS_STORE = "electronics_store"
    EMBASSY = "embassy"
    FIRE_STATION = "fire_station"
    FLORIST = "florist"
    FUNERAL_HOME = "funeral_home"
    FURNITURE_STORE = "furniture_store"
    GAS_STATION = "gas_station"
    GYM = "gym"
    HAIR_CARE = "hair_care"
    HARDWARE_STORE = "hardware_store"
    HINDU_TEMPLE = "hindu_temple"
    HOME_GOODS_STORE = "home_goods_store"
    HOSPITAL = "hospital"
    INSURANCE_AGENCY = "insurance_agency"
    JEWELRY_STORE = "jewelry_store"
    LAUNDRY = "laundry"
    LAWYER = "lawyer"
    LIBRARY = "library"
    LIQUOR_STORE = "liquor_store"
    LOCAL_GOVERNMENT_OFFICE = "local_government_office"
    LOCKSMITH = "locksmith"
    LODGING = "lodging"
    MEAL_DELIVERY = "meal_delivery"
    MEAL_TAKEAWAY = "meal_takeaway"
    MOSQUE = "mosque"
    MOVIE_RENTAL = "movie_rental"
    MOVIE_THEATER = "movie_theater"
    MOVING_COMPANY = "moving_company"
    MUSEUM = "museum"
    NIGHT_CLUB = "night_club"
    PAINTER = "painter"
    PARK = "park"
    PARKING = "parking"
    PET_STORE = "pet_store"
    PHARMACY = "pharmacy"
    PHYSIOTHERAPIST = "physiotherapist"
    PLUMBER = "plumber"
    POLICE = "police"
    POST_OFFICE = "post_office"
    REAL_ESTATE_AGENCY = "real_estate_agency"
    RESTAURANT = "restaurant"
    ROOFING_CONTRACTOR = "roofing_contractor"
    RV_PARK = "rv_park"
    SCHOOL = "school"
    SHOE_STORE = "shoe_store"
    SHOPPING_MALL = "shopping_mall"
    SPA = "spa"
    STADIUM = "stadium"
    STORAGE = "storage"
    STORE = "store"
    SUBWAY_STATION = "subway_station"
    SUPERMARKET = "supermarket"
    SYNAGOGUE = "synagogue"
    TAXI_STAND = "taxi_stand"
    TRAIN_STATION = "train_station"
    TRAVEL_AGENCY = "travel_agency"
    UNIVERSITY = "university"
    VETERINARY_CARE = "veterinary_care"
    ZOO = "zoo"


class AutocompletePlaceType(_StrEnum):
    """Place type used to restrict Place Autocomplete results."""

    GEOCODE = "geocode"
    ADDRESS = "address"
    ESTABLISHMENT = "establishment"
    REGIONS = "(regions)"
    CITIES = "(cities)"


def parse_place_type(place_type: str) -> PlaceType:
    """Parse a place type name, ignoring case."""
    try:
        return PlaceType(place_type.lower())
    except ValueError:
        raise ValueError(f'Unknown PlaceType "{place_type}"') from None


def parse_autocomplete_place_type(place_type: str) -> AutocompletePlaceType:
    """Parse an autocomplete place type name, ignoring case."""
    try:
        return AutocompletePlaceType(place_type.lower())
    except ValueError:
        raise ValueError(f'Unknown AutocompletePlaceType "{place_type}"') from None


@dataclass
class Distance:
    """A distance between two points, human readable and in meters."""

    human_readable: str = ""
    meters: int = 0


@dataclass
class OpeningHoursOpenClose:
    """A day (0 is Sunday) and a time of day in hhmm form."""

    day: int = 0
    time: str = ""


@dataclass
class OpeningHoursPeriod:
    """When a place opens and when it closes."""

    open: OpeningHoursOpenClose = field(default_factory=OpeningHoursOpenClose)
    close: OpeningHoursOpenClose = field(default_factory=OpeningHoursOpenClose)


@dataclass
class OpeningHours:
    """Opening hours of a place; unknown flags are None."""

    open_now: bool | None = None
    periods: list[OpeningHoursPeriod] = field(default_factory=list)
    weekday_text: list[str] = field(default_factory=list)
    permanently_closed: bool | None = None


@dataclass
class Photo:
    """A photo available with a search result."""

    photo_reference: str = ""
    height: int = 0
    width: int = 0
    html_attributions: list[str] = field(default_factory=list)


@dataclass
class PlaceEditorialSummary:
    """A textual overview of a place and its language."""

    language: str = ""
    overview: str = ""


def _format_coordinate(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = format(Decimal(repr(float(value))).normalize(), "f")
    return text


@dataclass(frozen=True)
class LatLng:
    """A latitude and longitude pair."""

    lat: float = 0.0
    lng: float = 0.0

    def __str__(self) -> str:
        return f"{_format_coordinate(self.lat)},{_format_coordinate(self.lng)}"