from __future__ import annotations

import re
from typing import Iterable, List

ROOT_CLASSES = ("Method", "Scale", "Trait", "Variable")

_ROOT_REFERENCE_PATTERN = re.compile(r"^is_a:\s*(?:ns\d+:)?([A-Za-z_]+)")


def scan_root_classes(text: str, root_classes: Iterable[str] = ROOT_CLASSES) -> List[str]:
    """Return the root classes referenced by any ``is_a:`` line, sorted.

    Works line by line on the raw text, so a root class counts only when some
    term declares it as a parent.
    """

    allowed = set(root_classes)
    found = set()
    for line in text.split("\n"):
        match = _ROOT_REFERENCE_PATTERN.match(line)
        if match and match.group(1) in allowed:
            found.add(match.group(1))
    return sorted(found)


def is_root_class(name: str) -> bool:
    return name in ROOT_CLASSES


__all__ = ["ROOT_CLASSES", "is_root_class", "scan_root_classes"]
