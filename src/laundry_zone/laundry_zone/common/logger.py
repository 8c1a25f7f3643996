"""Logging setup.

Every module logs through `get_logger(__name__)`; handlers are attached once
to the package root logger by `setup_logging`.
"""
from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "laundry_zone"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.INFO) -> logging.Logger:
    log = logging.getLogger(ROOT_LOGGER)
    log.setLevel(level if isinstance(level, int) else level.upper())

    # Avoid duplicate handlers when the app factory runs more than once.
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        log.addHandler(handler)
    return log


def get_logger(name: str) -> logging.Logger:
    # Module names carry a src.laundry_zone. prefix when imported from the repo root.
    idx = name.rfind(f"{ROOT_LOGGER}.")
    if idx >= 0:
        return logging.getLogger(name[idx:])
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
