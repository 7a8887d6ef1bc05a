from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from pyuca import Collator


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def collation_key(text: str) -> Tuple[int, ...]:
    """Sort key following the Unicode Collation Algorithm default ordering.

    Matches root-locale comparison: spaces and punctuation sort before digits,
    digits before letters, accents and case only break ties.
    """

    return _collator().sort_key(text)


__all__ = ["collation_key"]
