"""A small HTTP client that carries fixed headers and cookies."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import requests
from requests.structures import CaseInsensitiveDict

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Response:
    """Body text and status code of a finished request."""

    payload: str
    status: int

    @classmethod
    def from_http(cls, res: requests.Response) -> Response:
        """Read a ``requests`` response into a ``Response``."""
        return cls(payload=res.content.decode("utf-8", errors="replace"), status=res.status_code)


class RequestClient:
    """Sends requests with the same headers and cookies every time."""

    def __init__(
        self,
        user_agent: str = "",
        headers: Mapping[str, str] | None = None,
        cookies: Mapping[str, str] | None = None,
    ) -> None:
        self.timeout = DEFAULT_TIMEOUT
        self.headers: CaseInsensitiveDict[str] = CaseInsensitiveDict(headers or {})
        if user_agent:
            self.headers["User-Agent"] = user_agent
        self.cookies: dict[str, str] = dict(cookies or {})

    def make_request(self, method: str, url: str) -> Response:
        """Send a request without a body and return its response."""
        res = requests.request(
            method,
            url,
            headers=dict(self.headers),
            cookies=self.cookies,
            timeout=self.timeout,
        )
        return Response.from_http(res)