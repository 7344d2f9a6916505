"""Central logging configuration for the document visitors package."""
from __future__ import annotations

import logging
from typing import Optional

PACKAGE_LOGGER = "document_visitors"

_DEFAULT_LEVEL = logging.INFO
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package namespace.

    ``None`` gives the package logger itself, and a script run as ``__main__``
    is filed under ``document_visitors.main`` so :func:`set_level` reaches it.
    The root logger is configured on first use if nothing else has done so.
    """
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_DEFAULT_LEVEL, format=_LOG_FORMAT)
    if name is None:
        return logging.getLogger(PACKAGE_LOGGER)
    if name == "__main__":
        name = f"{PACKAGE_LOGGER}.main"
    return logging.getLogger(name)


def set_level(level: int) -> None:
    """Change the threshold of every package logger, e.g. for verbose runs."""
    get_logger().setLevel(level)
