# mapsclient

A small client for two map web services: rendering **static map images** and
looking up the **time zone** of a location. It also carries the shared value
types used by place, directions and distance requests (travel modes, place
types, field masks, opening hours and so on).

## Installation

```
pip install mapsclient
```

For running the test suite:

```
pip install "mapsclient[test]"
pytest
```

## Static maps

Describe the map with a `StaticMapRequest` and fetch it with `static_map`,
which returns a decoded `PIL.Image.Image`.

```python
from mapsclient.staticmap import StaticMapRequest, Marker, Path, MapType, static_map
from mapsclient.types import LatLng

request = StaticMapRequest(
    center="Brooklyn Bridge,New York,NY",
    zoom=13,
    size="600x300",
    scale=2,
    map_type=MapType.ROADMAP,
    markers=[Marker(color="red", label="A", location=[LatLng(40.7061, -73.9969)])],
    paths=[Path(color="0x0000ff", weight=5,
                location=[LatLng(40.70, -74.00), LatLng(40.71, -73.99)])],
)

image = static_map(request, api_key="placeholder")
image.save("bridge.png")
```

`static_map(request, api_key, base_url=None, session=None)` sends the request
to the public Maps web service host unless `base_url` is given. If `session`
is `None`, a `requests.Session` is created for the call and closed afterwards.

Errors:

- no markers, no center and a zoom of 0, an empty size, or an empty API key
  raise `ValueError`;
- a reply other than HTTP 200 raises `mapsclient.transport.ApiError`, whose
  message holds the status code and the response body;
- a reply that cannot be decoded as an image also raises `ApiError`.

`StaticMapRequest.params()` returns the query parameters as a dict of lists
without sending anything. Markers are written as `color:`, `label:` and
`size:` entries, or as the `CustomIcon` (`icon:`, `anchor:`, `scale:`) when one
is set, followed by the locations and the location address. Paths are written
either as a list of coordinates or as an `enc:` encoded polyline, whichever is
shorter.

Enumerations for the request fields: `MapType`, `Format`, `MarkerSize` and
`Anchor`.

## Time zones

```python
from datetime import datetime, timezone as tz
from mapsclient.timezone import TimezoneRequest, timezone
from mapsclient.types import LatLng

result = timezone(
    TimezoneRequest(location=LatLng(39.6034810, -119.6822510),
                    timestamp=datetime.fromtimestamp(1331161200, tz.utc)),
    api_key="placeholder",
)
print(result.time_zone_id, result.raw_offset, result.dst_offset)
```

`timezone(request, api_key, base_url=None, session=None)` returns a
`TimezoneResult`. A request without a timestamp is sent with the timestamp of
1 January of year 1, UTC; a naive `datetime` is taken as UTC.

A request without a location, or an empty API key, raises `ValueError`. A
`ZERO_RESULTS` status gives an empty `TimezoneResult`; any status other than
`OK` or `ZERO_RESULTS`, or a reply that is not a JSON object, raises
`ApiError`, which carries `status` and `status_code`.

## Shared types

`mapsclient.types` holds string enums such as `Mode`, `Avoid`, `Units`,
`TransitMode`, `TrafficModel`, `PriceLevel`, `Component`, `RankBy`,
`PlaceType` and `AutocompletePlaceType`; the dataclasses `Distance`,
`OpeningHours`, `OpeningHoursPeriod`, `OpeningHoursOpenClose`, `Photo` and
`PlaceEditorialSummary`; and `LatLng`, whose string form is `lat,lng` with
the shortest decimal spelling of each number. Parsers accept any letter case:

```python
from mapsclient.types import parse_place_type
parse_place_type("Cafe")   # PlaceType.CAFE
```

`mapsclient.fieldmasks` does the same for place details and place search
field masks (`parse_place_details_field_mask`, `parse_place_search_field_mask`)
and turns lists of masks into their wire names
(`place_details_field_masks_as_strings`,
`place_search_field_masks_as_strings`). Unknown names raise `ValueError`.

## User-Agent

`mapsclient.transport.install_user_agent(session)` mounts a
`UserAgentAdapter` on a `requests.Session` for `http://` and `https://`,
keeping the retry setting of the adapters it replaces, and returns the
session. The adapter adds the library's agent string to every outgoing
request, after any User-Agent that is already set (`user_agent_for` computes
the combined value). Both request functions install it on the session they use.

## What this package does not do

Only the Static Maps and Time Zone requests are implemented. There is no
client object holding settings, no geocoding, directions, distance matrix or
places requests (only their value types and field masks are here), no
client-ID or URL-signature authentication, and no rate limiting or retry
logic beyond what the `requests` session itself is configured for.