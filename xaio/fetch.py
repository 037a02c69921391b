"""Plain page download with a desktop browser identity."""

from __future__ import annotations

import requests

USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/137.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 10.0


def get_page_content(url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Fetch ``url`` with GET and return its body as text, whatever the status."""
    response = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    return response.content.decode("utf-8", errors="replace")