"""
Package logger and a helper for command-line entry points.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

logger = logging.getLogger("hobson_trains")
logger.addHandler(logging.NullHandler())

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(*, debug: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Attach a single stream handler to the package logger.

    Calling this again replaces the handler installed by the previous call.
    """
    for handler in list(logger.handlers):
        if getattr(handler, "_hobson_trains", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._hobson_trains = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
