"""Runtime configuration for cpe_names (environment driven)."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "CPE_NAMES_LOG_LEVEL"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("cpe_names")


def configure_logging(level: str | None = None) -> None:
    """Install the package log handler once; later calls only adjust the level.

    Args:
        level: Level name such as ``"DEBUG"``. Falls back to the
            ``CPE_NAMES_LOG_LEVEL`` environment variable, then ``WARNING``.
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "WARNING")).upper()
    numeric = getattr(logging, level_name, logging.WARNING)
    if not getattr(configure_logging, "_done", False):  # type: ignore[attr-defined]
        logging.basicConfig(level=numeric, format=LOG_FORMAT)
        configure_logging._done = True  # type: ignore[attr-defined]
    logger.setLevel(numeric)


__all__ = ["LOG_FORMAT", "LOG_LEVEL_ENV", "configure_logging"]
