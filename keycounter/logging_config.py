"""Logging setup for applications embedding keycounter."""

from __future__ import annotations

import logging

from keycounter.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_log_level(level: str | None) -> int:
    name = level if level is not None else get_settings().log_level
    resolved = getattr(logging, name.upper(), logging.INFO)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | None = None) -> None:
    """Install the root handler; falls back to INFO for unknown level names."""

    logging.basicConfig(level=resolve_log_level(level), format=LOG_FORMAT)
