from io import BytesIO

import pytest
import responses
from PIL import Image

from mapsclient.staticmap import (
    Anchor,
    CustomIcon,
    Format,
    MapType,
    Marker,
    MarkerSize,
    Path,
    StaticMapRequest,
    static_map,
)
from mapsclient.transport import ApiError
from mapsclient.types import LatLng

BASE_URL = "https://maps.example.com"
ENDPOINT = BASE_URL + "/maps/api/staticmap"


def _png(width, height):
    buffer = BytesIO()
    Image.new("RGBA", (width, height)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_static_map_request_and_image():
    request = StaticMapRequest(
        center="Brooklyn Bridge,New York,NY",
        size="600x300",
        zoom=13,
        scale=2,
        language="EN-us",
        format="PNG",
        region="US",
        map_type=MapType("roadmap"),
    )
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET, ENDPOINT, body=_png(640, 400), status=200,
            content_type="image/png",
        )
        image = static_map(request, "placeholder", base_url=BASE_URL)
        query = rsps.calls[0].request.url.split("?", 1)[1]
    assert image.size == (640, 400)
    assert query == (
        "center=Brooklyn+Bridge%2CNew+York%2CNY&format=PNG&key=placeholder"
        "&language=EN-us&maptype=roadmap&region=US&scale=2&size=600x300&zoom=13"
    )


def test_static_map_sends_user_agent():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, ENDPOINT, body=_png(4, 4), status=200)
        image = static_map(
            StaticMapRequest(center="Paris", zoom=3, size="10x10"),
            "placeholder",
            base_url=BASE_URL,
        )
        sent = rsps.calls[0].request.headers["User-Agent"]
    assert image.size == (4, 4)
    assert sent == "GoogleGeoApiClientGo/0.1"


def test_static_map_error_status():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, ENDPOINT, body="denied", status=403)
        with pytest.raises(ApiError, match="Maps Static API: 403 - denied") as info:
            static_map(
                StaticMapRequest(center="Paris", zoom=3, size="10x10"),
                "placeholder",
                base_url=BASE_URL,
            )
    assert info.value.status_code == 403


def test_static_map_requires_center_and_zoom_without_markers():
    with pytest.raises(ValueError, match="Center & Zoom required"):
        static_map(StaticMapRequest(size="10x10"), "placeholder", base_url=BASE_URL)


def test_static_map_requires_size():
    with pytest.raises(ValueError, match="Size empty"):
        static_map(StaticMapRequest(center="Paris", zoom=2), "placeholder")


def test_map_styles():
    request = StaticMapRequest(map_styles=["x", "y"])
    assert request.params() == {"style": ["x", "y"]}


def test_custom_icon_markers():
    marker = Marker(
        custom_icon=CustomIcon(icon_url="[email]", anchor="topleft", scale=2),
        location=[LatLng(3.1225951401, 101.6404967928)],
    )
    request = StaticMapRequest(markers=[marker])
    assert request.params()["markers"][0] == (
        "icon:[email]|anchor:topleft|scale:2|3.1225951401,101.6404967928"
    )


def test_markers_with_location_and_address():
    marker = Marker(
        location=[LatLng(3.1225951401, 101.6404967928)],
        location_address="my Marker address",
    )
    request = StaticMapRequest(markers=[marker])
    assert request.params()["markers"][0] == (
        "3.1225951401,101.6404967928|my Marker address"
    )


def test_marker_style_fields():
    marker = Marker(color="red", label="A", size=MarkerSize.MID, location=[LatLng(1, 2)])
    assert str(marker) == "color:red|label:A|size:mid|1,2"


def test_custom_icon_overrides_style_fields():
    marker = Marker(color="red", custom_icon=CustomIcon(anchor=Anchor.BOTTOM))
    assert str(marker) == "anchor:Bottom"


def test_empty_custom_icon_is_empty_string():
    assert str(CustomIcon()) == ""


def test_path_uses_encoded_form_when_shorter():
    path = Path(
        location=[LatLng(38.5, -120.2), LatLng(40.7, -120.95), LatLng(43.252, -126.453)]
    )
    assert str(path) == "enc:_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def test_path_keeps_plain_points_when_shorter():
    path = Path(color="0xff0000ff", fill_color="0xFFFF0033", weight=5, geodesic=True,
                location=[LatLng(1, 2)])
    assert str(path) == "color:0xff0000ff|fillcolor:0xFFFF0033|weight:5|geodesic:true|1,2"


def test_path_without_locations():
    assert str(Path(weight=3)) == "weight:3"


def test_params_full():
    request = StaticMapRequest(
        center="Paris",
        zoom=0,
        size="100x100",
        format=Format.PNG32,
        map_type=MapType.HYBRID,
        map_id="abc",
        paths=[Path(location=[LatLng(1, 2)])],
        visible=[LatLng(1, 2), LatLng(3, 4)],
    )
    assert request.params() == {
        "center": ["Paris"],
        "size": ["100x100"],
        "format": ["png32"],
        "maptype": ["hybrid"],
        "map_id": ["abc"],
        "path": ["1,2"],
        "visible": ["1,2|3,4"],
    }