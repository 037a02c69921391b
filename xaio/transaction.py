"""Generation of the x-client-transaction-id request header value."""

from __future__ import annotations

import base64
import hashlib
import math
import random
import re
import time
from collections.abc import Sequence
from dataclasses import dataclass

import requests
from bs4 import BeautifulSoup, Tag

from xaio.cubic import Cubic
from xaio.interpolate import interpolate
from xaio.jsmath import is_odd, js_float_to_hex, js_round
from xaio.migration import handle_x_migration
from xaio.rotation import rotation_to_matrix

ONDEMAND_URL = "https://abs.twimg.com/responsive-web/client-web/ondemand.s.{}a.js"
EPOCH_OFFSET = 1682924400
TOTAL_TIME = 4096.0

_ON_DEMAND_RE = re.compile(r"""['|"]ondemand\.s['|"]:\s*['|"](\w*)['|"]""")
_INDICES_RE = re.compile(r"\(\w{1}\[(\d{1,2})\],\s*16\)")
_NON_NUMBER_RE = re.compile(r"[^0-9\-]+")


def _round_half_away(num: float) -> float:
    whole = float(math.trunc(num))
    if abs(num - whole) >= 0.5:
        whole += math.copysign(1.0, num)
    return whole


def parse_indices(script: str) -> list[int]:
    """Return every key byte index referenced in the on-demand script."""
    return [int(match) for match in _INDICES_RE.findall(script)]


def get_indices(html: str, session: requests.Session) -> tuple[int, list[int]]:
    """Download the on-demand script named in ``html`` and read the row and key byte indices."""
    match = _ON_DEMAND_RE.search(html)
    if match is None:
        raise ValueError("ondemand.js not found")

    response = session.get(ONDEMAND_URL.format(match.group(1)))
    indices = parse_indices(response.content.decode("utf-8", errors="replace"))
    if len(indices) < 2:
        raise ValueError("key byte indices missing")
    return indices[0], indices[1:]


def get_key(soup: BeautifulSoup) -> str:
    """Return the site verification key from the page's meta tag."""
    meta = soup.select_one('meta[name="twitter-site-verification"]')
    content = meta.get("content") if meta is not None else None
    if content is None:
        raise ValueError("twitter-site-verification meta tag not found")
    return content


def get_frames(soup: BeautifulSoup) -> list[Tag]:
    """Return the loading animation frames of the page."""
    return soup.select("[id^='loading-x-anim']")


def _element_children(tag: Tag) -> list[Tag]:
    return [child for child in tag.children if isinstance(child, Tag)]


def get_2d_array(
    key_bytes: bytes, soup: BeautifulSoup, frames: Sequence[Tag] | None = None
) -> list[list[int]]:
    """Read the rows of numbers out of the SVG path of the frame the key selects."""
    if frames is None:
        frames = get_frames(soup)

    frame_index = key_bytes[5] % 4
    if frame_index >= len(frames):
        raise ValueError("invalid frame index")

    outer = _element_children(frames[frame_index])
    if not outer:
        raise ValueError("no first child in frame")
    inner = _element_children(outer[0])
    if len(inner) < 2:
        raise ValueError("no second child in inner group")

    path = inner[1].get("d")
    if path is None:
        raise ValueError("missing 'd' attribute")
    if len(path) < 10:
        raise ValueError("path data too short")

    rows = []
    for segment in path[9:].split("C"):
        numbers = []
        for token in _NON_NUMBER_RE.sub(" ", segment).split():
            try:
                numbers.append(int(token))
            except ValueError:
                continue
        rows.append(numbers)
    return rows


def solve(value: float, min_val: float, max_val: float, rounding: bool) -> float:
    """Map a byte value onto [min_val, max_val], floored or rounded to two places."""
    result = value * (max_val - min_val) / 255.0 + min_val
    if rounding:
        return float(math.floor(result))
    return _round_half_away(result * 100) / 100


def animate(frames: Sequence[int], target_time: float) -> str:
    """Build the animation key from one row of frame numbers at ``target_time``."""
    from_color = [float(frames[0]), float(frames[1]), float(frames[2]), 1.0]
    to_color = [float(frames[3]), float(frames[4]), float(frames[5]), 1.0]
    from_rotation = [0.0]
    to_rotation = [solve(float(frames[6]), 60.0, 360.0, True)]

    curves = [
        solve(float(value), is_odd(index), 1.0, False)
        for index, value in enumerate(frames[7:])
    ]
    eased = Cubic(curves).get_value(target_time)

    color = [min(max(c, 0.0), 255.0) for c in interpolate(from_color, to_color, eased)]
    rotation = interpolate(from_rotation, to_rotation, eased)
    matrix = rotation_to_matrix(rotation[0])

    parts = [format(int(_round_half_away(c)), "x") for c in color[:-1]]
    for value in matrix:
        hex_value = js_float_to_hex(abs(_round_half_away(value * 100) / 100)).lower()
        if hex_value.startswith("."):
            parts.append("0" + hex_value)
        elif not hex_value:
            parts.append("0")
        else:
            parts.append(hex_value)
    parts.extend(["0", "0"])

    return "".join(parts).replace(".", "").replace("-", "")


def get_animation_key(
    key_bytes: bytes, soup: BeautifulSoup, row_index: int, key_byte_indices: Sequence[int]
) -> str:
    """Compute the animation key from the key bytes and the page's animation frames."""
    row_value = key_bytes[row_index] % 16

    frame_time = 1.0
    for index in key_byte_indices:
        frame_time *= float(key_bytes[index] % 16)
    frame_time = js_round(frame_time / 10.0) * 10.0
    target_time = frame_time / TOTAL_TIME

    rows = get_2d_array(key_bytes, soup)
    if row_value >= len(rows):
        raise ValueError("invalid row index")
    return animate(rows[row_value], target_time)


@dataclass
class ClientTransaction:
    """Everything needed to sign requests with a transaction id."""

    key_bytes: bytes
    animation_key: str
    additional_random_number: int = 3
    default_keyword: str = "obfiowerehiring"

    @classmethod
    def from_session(cls, session: requests.Session) -> ClientTransaction:
        """Fetch the home page and on-demand script and derive the signing material."""
        soup = handle_x_migration(session)
        row_index, key_byte_indices = get_indices(str(soup), session)
        key_bytes = base64.b64decode(get_key(soup), validate=True)
        animation_key = get_animation_key(key_bytes, soup, row_index, key_byte_indices)
        return cls(key_bytes=key_bytes, animation_key=animation_key)

    def generate_transaction_id(self, method: str, path: str) -> str:
        """Return the transaction id for a request with ``method`` to ``path``."""
        now = (int(time.time()) - EPOCH_OFFSET) & 0xFFFFFFFF
        hash_input = f"{method}!{path}!{now}{self.default_keyword}{self.animation_key}"
        digest = hashlib.sha256(hash_input.encode()).digest()[:16]
        random_byte = random.randint(0, 255)

        data = (
            bytes(self.key_bytes)
            + now.to_bytes(4, "little")
            + digest
            + bytes([self.additional_random_number])
        )
        out = bytes([random_byte]) + bytes(b ^ random_byte for b in data)
        return base64.b64encode(out).decode("ascii").rstrip("=")