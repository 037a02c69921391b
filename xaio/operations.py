"""Discovery of the GraphQL operations declared in the x.com main script."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from xaio.fetch import get_page_content

BASE_URL = "https://x.com"

_METADATA_KEY = "metadata:"
_OPERATION_RE = re.compile(
    r'\{queryId:"([^"]+)",operationName:"([^"]+)",operationType:"([^"]+)",metadata:'
)
_FEATURE_SWITCHES_RE = re.compile(r"featureSwitches:\[([^\]]*)\]")
_FIELD_TOGGLES_RE = re.compile(r"fieldToggles:\[([^\]]*)\]")
_MAIN_SCRIPT_RE = re.compile(
    r"<link[^>]+rel=[\"']preload[\"'][^>]+as=[\"']script[\"'][^>]+"
    r"href=[\"']([^\"']*main\.[^\"']*\.js)[\"']"
)


@dataclass
class Operation:
    """A GraphQL operation with the switches and toggles it expects."""

    query_id: str
    operation_name: str
    operation_type: str
    feature_switches: list[str] = field(default_factory=list)
    field_toggles: list[str] = field(default_factory=list)


@dataclass
class Metadata:
    """Feature switches and field toggles read from an operation's metadata."""

    feature_switches: list[str] = field(default_factory=list)
    field_toggles: list[str] = field(default_factory=list)


def split_list(s: str) -> list[str]:
    """Split a comma-separated list of quoted items, dropping empty ones."""
    items = (part.strip('"') for part in s.split(","))
    return [item for item in items if item]


def parse_metadata(meta: str) -> Metadata:
    """Read the featureSwitches and fieldToggles lists from a metadata block."""
    metadata = Metadata()
    switches = _FEATURE_SWITCHES_RE.search(meta)
    if switches:
        metadata.feature_switches = split_list(switches.group(1))
    toggles = _FIELD_TOGGLES_RE.search(meta)
    if toggles:
        metadata.field_toggles = split_list(toggles.group(1))
    return metadata


def extract_balanced_braces(data: str) -> str | None:
    """Return the ``{...}`` block that ``data`` starts with, or None if there is none."""
    if not data.startswith("{"):
        return None
    depth = 0
    for position, char in enumerate(data):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return data[: position + 1]
    return None


def parse_operations(script: str) -> list[Operation]:
    """Find every operation declared in the text of a script."""
    operations = []
    for match in _OPERATION_RE.finditer(script):
        meta_start = script.index(_METADATA_KEY, match.start()) + len(_METADATA_KEY)
        block = extract_balanced_braces(script[meta_start:])
        if block is None:
            continue
        query_id, name, kind = match.groups()
        metadata = parse_metadata(block)
        operations.append(
            Operation(
                query_id=query_id,
                operation_name=name,
                operation_type=kind,
                feature_switches=metadata.feature_switches,
                field_toggles=metadata.field_toggles,
            )
        )
    return operations


def get_main_script_href(html: str) -> str:
    """Return the address of the preloaded main script named in a page."""
    match = _MAIN_SCRIPT_RE.search(html)
    if match is None:
        raise ValueError("main script not found")
    return match.group(1)


def get_main_page() -> str:
    """Download the x.com home page."""
    return get_page_content(BASE_URL)


def get_main_script(html: str) -> str:
    """Download the main script that the given home page preloads."""
    return get_page_content(get_main_script_href(html))


def get_operations() -> list[Operation]:
    """Download x.com's main script and list the operations it declares."""
    return parse_operations(get_main_script(get_main_page()))