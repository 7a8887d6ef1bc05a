from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Install a single console handler on the root logger.

    Safe to call more than once; existing handlers are replaced.
    """

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


__all__ = ["LOG_FORMAT", "configure_logging"]
