"""
Logging setup for the API process.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    resolved = getattr(logging, (level or "").upper(), None)
    if not isinstance(resolved, int):
        resolved = logging.INFO

    # basicConfig is a no-op once the root logger has handlers (e.g. under uvicorn reload).
    logging.basicConfig(level=resolved, format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger().setLevel(resolved)
