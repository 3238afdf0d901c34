"""Bounded sparse key counters exported as telemetry records."""

from keycounter.config import CounterSettings, get_settings
from keycounter.counter import BoundedKeyCounter, InvalidKeyError, KeyCountEntry
from keycounter.logging_config import configure_logging
from keycounter.records import (
    INT32_MAX,
    INT32_MIN,
    Int32Count,
    KeyCountConverter,
    to_int32_count,
)

__all__ = [
    "BoundedKeyCounter",
    "CounterSettings",
    "INT32_MAX",
    "INT32_MIN",
    "Int32Count",
    "InvalidKeyError",
    "KeyCountConverter",
    "KeyCountEntry",
    "configure_logging",
    "get_settings",
    "to_int32_count",
]

__version__ = "0.1.0"
