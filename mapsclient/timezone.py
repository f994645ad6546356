"""Time Zone API: time zone data for a location at a moment."""

from __future__ import annotations

import datetime as dt
import json
from dataclasses import dataclass
from urllib.parse import quote_plus

import requests

from .transport import ApiError, install_user_agent
from .types import LatLng

DEFAULT_HOST = "https://maps.googleapis.com"
_PATH = "/maps/api/timezone/json"
_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)
_ZERO_TIME = dt.datetime(1, 1, 1, tzinfo=dt.timezone.utc)


def _unix_seconds(moment: dt.datetime | None) -> int:
    if moment is None:
        moment = _ZERO_TIME
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=dt.timezone.utc)
    return (moment - _EPOCH) // dt.timedelta(seconds=1)


def _encode_query(values: dict[str, list[str]]) -> str:
    return "&".join(
        f"{quote_plus(key)}={quote_plus(value)}"
        for key in sorted(values)
        for value in values[key]
    )


@dataclass
class TimezoneRequest:
    """A location and moment to look up; no timestamp means year 1, UTC."""

    location: LatLng | None = None
    timestamp: dt.datetime | None = None
    language: str = ""

    def params(self) -> dict[str, list[str]]:
        """Return the query values of this request, keyed by parameter name."""
        if self.location is None:
            raise ValueError("maps: Location missing")
        values = {
            "location": [str(self.location)],
            "timestamp": [str(_unix_seconds(self.timestamp))],
        }
        if self.language:
            values["language"] = [self.language]
        return values


@dataclass
class TimezoneResult:
    """Offsets in seconds and the identifiers of a time zone."""

    dst_offset: int = 0
    raw_offset: int = 0
    time_zone_id: str = ""
    time_zone_name: str = ""


def _decode(text: str) -> dict:
    try:
        payload, _ = json.JSONDecoder().raw_decode(text.lstrip())
    except ValueError as exc:
        raise ApiError(f"maps: invalid response: {exc}") from exc
    if not isinstance(payload, dict):
        raise ApiError("maps: invalid response: expected an object")
    return payload


def timezone(
    request: TimezoneRequest,
    api_key: str,
    base_url: str | None = None,
    session: requests.Session | None = None,
) -> TimezoneResult:
    """Look up the time zone of a location at a moment."""
    if request.location is None:
        raise ValueError("maps: Location missing")
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

    payload = _decode(response.text)
    status = str(payload.get("status", ""))
    if status not in ("OK", "ZERO_RESULTS"):
        detail = payload.get("error_message", "")
        message = f"maps: {status} - {detail}" if detail else f"maps: {status}"
        raise ApiError(message, status=status, status_code=response.status_code)

    return TimezoneResult(
        dst_offset=int(payload.get("dstOffset", 0)),
        raw_offset=int(payload.get("rawOffset", 0)),
        time_zone_id=str(payload.get("timeZoneId", "")),
        time_zone_name=str(payload.get("timeZoneName", "")),
    )