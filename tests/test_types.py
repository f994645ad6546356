import pytest

from mapsclient.types import (
    AutocompletePlaceType,
    LatLng,
    OpeningHours,
    PlaceType,
    parse_autocomplete_place_type,
    parse_place_type,
)


def test_latlng_str_integers():
    assert str(LatLng(1, 2)) == "1,2"


def test_latlng_str_keeps_precision():
    assert str(LatLng(3.1225951401, 101.6404967928)) == "3.1225951401,101.6404967928"


def test_latlng_str_drops_trailing_zero():
    assert str(LatLng(39.6034810, -119.6822510)) == "39.603481,-119.682251"


def test_latlng_str_never_uses_exponent():
    text = str(LatLng(0.00001, 100.0))
    assert text == "0.00001,100"


@pytest.mark.parametrize("member", list(PlaceType))
def test_parse_place_type_round_trip(member):
    assert parse_place_type(member.value) is member
    assert parse_place_type(member.value.upper()) is member


def test_parse_place_type_unknown():
    with pytest.raises(ValueError, match='Unknown PlaceType "spaceport"'):
        parse_place_type("spaceport")


@pytest.mark.parametrize("member", list(AutocompletePlaceType))
def test_parse_autocomplete_round_trip(member):
    assert parse_autocomplete_place_type(member.value) is member
    assert parse_autocomplete_place_type(member.value.title()) is member


def test_parse_autocomplete_specific_values():
    assert parse_autocomplete_place_type("(cities)") is AutocompletePlaceType.CITIES
    assert parse_autocomplete_place_type("Geocode") is AutocompletePlaceType.GEOCODE


def test_parse_autocomplete_unknown():
    with pytest.raises(ValueError, match="Unknown AutocompletePlaceType"):
        parse_autocomplete_place_type("cities")


def test_parsed_string_form_is_wire_value():
    parsed = parse_place_type("LOCAL_GOVERNMENT_OFFICE")
    assert str(parsed) == "local_government_office"
    assert str(parse_autocomplete_place_type("(REGIONS)")) == "(regions)"


def test_opening_hours_defaults_are_unknown():
    hours = OpeningHours()
    assert hours.open_now is None
    assert hours.permanently_closed is None
    assert hours.periods == []
    other = OpeningHours()
    other.periods.append("x")
    assert hours.periods == []