from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class OboSourceError(RuntimeError):
    """Raised when the configured OBO file cannot be read."""


@dataclass(slots=True)
class OboFileSource:
    """Reads the OBO document fresh on every call; nothing is cached."""

    path: Path

    def exists(self) -> bool:
        return self.path.is_file()

    def read_text(self) -> str:
        try:
            return self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Could not read OBO file %s: %s", self.path, exc)
            raise OboSourceError(str(exc)) from exc


__all__ = ["OboFileSource", "OboSourceError"]
