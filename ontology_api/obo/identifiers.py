from __future__ import annotations

import re


_NAMESPACE_PATTERN = re.compile(r"^ns\d+:(.+)$")


def normalize_id(identifier: str) -> str:
    """Strip an ``ns<digits>:`` namespace prefix (``ns4:Trait`` -> ``Trait``).

    Identifiers without the prefix are returned unchanged, so the function is
    safe to apply more than once.
    """

    match = _NAMESPACE_PATTERN.match(identifier)
    return match.group(1) if match else identifier


__all__ = ["normalize_id"]
