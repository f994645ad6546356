"""Static Maps API: map images with markers, paths and styles."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from io import BytesIO
from urllib.parse import quote_plus

import requests
from PIL import Image, UnidentifiedImageError

from .transport import ApiError, install_user_agent
from .types import LatLng, _StrEnum

DEFAULT_HOST = "https://maps.googleapis.com"
_PATH = "/maps/api/staticmap"


class MapType(_StrEnum):
    """Kind of map to draw."""

    ROADMAP = "roadmap"
    SATELLITE = "satellite"
    TERRAIN = "terrain"
    HYBRID = "hybrid"


class Format(_StrEnum):
    """Image format of the returned map."""

    PNG8 = "png8"
    PNG32 = "png32"
    GIF = "gif"
    JPG = "jpg"
    JPG_BASELINE = "jpg-baseline"


class MarkerSize(_StrEnum):
    """Size of a marker."""

    TINY = "tiny"
    MID = "mid"
    SMALL = "small"


class Anchor(_StrEnum):
    """Placement of a custom icon relative to its marker location."""

    TOP = "top"
    BOTTOM = "Bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    TOPLEFT = "topleft"
    TOPRIGHT = "topright"
    BOTTOMLEFT = "bottomleft"
    BOTTOMRIGHT = "bottomright"


def _encode_number(value: int) -> str:
    value = ~(value << 1) if value < 0 else value << 1
    chunks = []
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1F)) + 63))
        value >>= 5
    chunks.append(chr(value + 63))
    return "".join(chunks)


def _encode_polyline(points: Iterable[LatLng]) -> str:
    """Encode points with the encoded polyline algorithm."""
    parts = []
    prev_lat = prev_lng = 0
    for point in points:
        lat = math.floor(point.lat * 1e5 + 0.5)
        lng = math.floor(point.lng * 1e5 + 0.5)
        parts.append(_encode_number(lat - prev_lat))
        parts.append(_encode_number(lng - prev_lng))
        prev_lat, prev_lng = lat, lng
    return "".join(parts)


def _encode_query(values: dict[str, list[str]]) -> str:
    """Encode query values sorted by key, keeping each key's value order."""
    return "&".join(
        f"{quote_plus(key)}={quote_plus(value)}"
        for key in sorted(values)
        for value in values[key]
    )


@dataclass
class CustomIcon:
    """An icon that replaces the default map pin."""

    icon_url: str = ""
    anchor: Anchor | str = ""
    scale: int = 0

    def __str__(self) -> str:
        parts = []
        if self.icon_url:
            parts.append(f"icon:{self.icon_url}")
        if self.anchor:
            parts.append(f"anchor:{str(self.anchor)}")
        if self.scale:
            parts.append(f"scale:{self.scale}")
        return "|".join(parts)


@dataclass
class Marker:
    """A map pin placed at one or more locations."""

    color: str = ""
    label: str = ""
    size: MarkerSize | str = ""
    custom_icon: CustomIcon = field(default_factory=CustomIcon)
    location: list[LatLng] = field(default_factory=list)
    location_address: str = ""

    def __str__(self) -> str:
        parts = []
        if self.custom_icon != CustomIcon():
            parts.append(str(self.custom_icon))
        else:
            if self.color:
                parts.append(f"color:{self.color}")
            if self.label:
                parts.append(f"label:{self.label}")
            if self.size:
                parts.append(f"size:{str(self.size)}")
        parts.extend(str(point) for point in self.location)
        if self.location_address:
            parts.append(self.location_address)
        return "|".join(parts)


@dataclass
class Path:
    """A line of connected points drawn over the map."""

    weight: int = 0
    color: str = ""
    fill_color: str = ""
    geodesic: bool = False
    location: list[LatLng] = field(default_factory=list)

    def __str__(self) -> str:
        parts = []
        if self.color:
            parts.append(f"color:{self.color}")
        if self.fill_color:
            parts.append(f"fillcolor:{self.fill_color}")
        if self.weight:
            parts.append(f"weight:{self.weight}")
        if self.geodesic:
            parts.append("geodesic:true")
        if not self.location:
            return "|".join(parts)

        encoded = f"enc:{_encode_polyline(self.location)}"
        points = [str(point) for point in self.location]
        if len("|".join(points)) > len(encoded):
            parts.append(encoded)
        else:
            parts.extend(points)
        return "|".join(parts)


@dataclass
class StaticMapRequest:
    """Parameters of a static map image request."""

    center: str = ""
    zoom: int = 0
    size: str = ""
    scale: int = 0
    format: Format | str = ""
    language: str = ""
    region: str = ""
    map_type: MapType | str = ""
    map_id: str = ""
    markers: list[Marker] = field(default_factory=list)
    paths: list[Path] = field(default_factory=list)
    visible: list[LatLng] = field(default_factory=list)
    map_styles: list[str] = field(default_factory=list)

    def params(self) -> dict[str, list[str]]:
        """Return the query values of this request, keyed by parameter name."""
        values: dict[str, list[str]] = {}
        singles = [
            ("center", self.center),
            ("zoom", str(self.zoom) if self.zoom > 0 else ""),
            ("size", self.size),
            ("scale", str(self.scale) if self.scale > 0 else ""),
            ("format", str(self.format)),
            ("language", self.language),
            ("region", self.region),
            ("maptype", str(self.map_type)),
            ("map_id", self.map_id),
        ]
        for name, value in singles:
            if value:
                values[name] = [value]
        if self.markers:
            values["markers"] = [str(marker) for marker in self.markers]
        if self.paths:
            values["path"] = [str(path) for path in self.paths]
        if self.visible:
            values["visible"] = ["|".join(str(point) for point in self.visible)]
        if self.map_styles:
            values["style"] = list(self.map_styles)
        return values


def static_map(
    request: StaticMapRequest,
    api_key: str,
    base_url: str | None = None,
    session: requests.Session | None = None,
) -> Image.Image:
    """Fetch a static map image and return it decoded."""
    if not request.markers and not request.center and request.zoom == 0:
        raise ValueError("maps: Center & Zoom required if Markers empty")
    if not request.size:
        raise ValueError("maps: Size empty")
    if not api_key:
        raise ValueError("maps: API Key missing")

    values = request.params()
    values["key"] = [api_key]
    url = f"{(base_url or DEFAULT_HOST).rstrip('/')}{_PATH}?{_encode_query(values)}"

    owned = session is None
    active = install_user_agent(session if session is not None else requests.Session())
    try:
        response = active.get(url)
    finally:
        if owned:
            active.close()

    if response.status_code != 200:
        body = response.content.decode("utf-8", errors="replace")
        raise ApiError(
            f"Maps Static API: {response.status_code} - {body}",
            status_code=response.status_code,
        )
    try:
        image = Image.open(BytesIO(response.content))
        image.load()
    except (UnidentifiedImageError, OSError) as exc:
        raise ApiError(
            f"maps: cannot decode image: {exc}", status_code=response.status_code
        ) from exc
    return image