from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

# ao process ids and wallet addresses are 43 base64url characters
_ADDRESS_PATTERN = re.compile(r"[A-Za-z0-9_-]{43}")

Tag = Mapping[str, str]


def get_tag_value(tag_name: str, tags: Iterable[Tag] | None) -> str | None:
    """Return the value of the first tag named $tag_name, or None if there is none.

    Args:
        tag_name: Tag name to look for (case-sensitive).
        tags: Tags as `{"name": ..., "value": ...}` mappings.
    """
    for tag in tags or ():
        if tag.get("name") == tag_name:
            return tag.get("value")
    return None


def is_address(value: object) -> bool:
    """Check whether $value looks like an ao address (43 base64url characters)."""
    if not isinstance(value, str):
        return False
    return _ADDRESS_PATTERN.fullmatch(value) is not None


def make_tags(**tags: str) -> list[dict[str, str]]:
    """Build the list-of-mappings tag form, e.g. `make_tags(Action="Info")`."""
    return [{"name": name, "value": str(value)} for name, value in tags.items()]
