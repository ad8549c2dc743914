from __future__ import annotations

"""Logger factory for matgraph modules."""

import logging
from typing import Optional

from .config import LoggingSettings, get_settings

_ROOT = "matgraph"
_handler: Optional[logging.Handler] = None


def getLogger(name: str) -> logging.Logger:
    """Return a logger below the ``matgraph`` hierarchy for module ``name``."""
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def configure_logging(settings: Optional[LoggingSettings] = None) -> logging.Logger:
    """
    Attach a stream handler to the ``matgraph`` root logger.

    Calling again replaces the previously installed handler, so level and
    format changes take effect without duplicating output.
    """
    global _handler

    if settings is None:
        settings = get_settings().logging

    root = logging.getLogger(_ROOT)
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter(settings.format))
    root.addHandler(_handler)
    root.setLevel(settings.level)
    return root


__all__ = ["getLogger", "configure_logging"]
