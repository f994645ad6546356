"""HTTP plumbing: the User-Agent adapter and the error raised for failed calls."""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter

USER_AGENT = "GoogleGeoApiClientGo/0.1"


class ApiError(Exception):
    """A Maps web service call that failed."""

    def __init__(
        self,
        message: str,
        *,
        status: str = "",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.status_code = status_code


def user_agent_for(existing: str | None) -> str:
    """Return the User-Agent to send, given the one already on the request."""
    if not existing:
        return USER_AGENT
    return f"{existing};{USER_AGENT}"


class UserAgentAdapter(HTTPAdapter):
    """Transport adapter that appends the client's User-Agent to every request."""

    def send(self, request: requests.PreparedRequest, **kwargs):
        outgoing = request.copy()
        outgoing.headers["User-Agent"] = user_agent_for(
            request.headers.get("User-Agent")
        )
        return super().send(outgoing, **kwargs)


def install_user_agent(session: requests.Session) -> requests.Session:
    """Mount the User-Agent adapter on a session, once, and return the session."""
    for prefix in ("https://", "http://"):
        current = session.adapters.get(prefix)
        if isinstance(current, UserAgentAdapter):
            continue
        retries = current.max_retries if isinstance(current, HTTPAdapter) else 0
        session.mount(prefix, UserAgentAdapter(max_retries=retries))
    return session