"""Following the x.com / twitter.com migration redirect to reach the real home page."""

from __future__ import annotations

import re
from urllib.parse import urlencode

import requests
from bs4 import BeautifulSoup

HOME_URL = "https://x.com"
MIGRATION_URL = "https://x.com/x/migrate"

_MIGRATION_RE = re.compile(
    r"https?://(?:www\.)?(twitter|x)\.com(/x)?/migrate([/?])?tok=[a-zA-Z0-9%\-_]+"
)


def _parse(response: requests.Response) -> BeautifulSoup:
    return BeautifulSoup(response.content, "html.parser")


def handle_x_migration(session: requests.Session) -> BeautifulSoup:
    """Fetch the x.com home page, following a meta refresh or migration form."""
    soup = _parse(session.get(HOME_URL))

    meta = soup.select_one('meta[http-equiv="refresh"]')
    if meta is not None:
        content = meta.get("content")
        if content is not None:
            match = _MIGRATION_RE.search(content)
            if match:
                return _parse(session.get(match.group(0)))

    form = soup.select_one('form[name="f"]')
    if form is None:
        form = soup.select_one(f'form[action="{MIGRATION_URL}"]')
    if form is None:
        return soup

    action = form.get("action") or MIGRATION_URL
    method = form.get("method", "POST").strip().upper()

    data: dict[str, str] = {}
    for field in form.select("input"):
        name = field.get("name")
        value = field.get("value")
        if name is not None and value is not None:
            data[name] = value

    if method == "POST":
        response = session.post(action, data=data)
    else:
        response = session.get(f"{action}?{urlencode(sorted(data.items()))}")
    return _parse(response)