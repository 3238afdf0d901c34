"""Standard telemetry record shapes produced by counter exports."""

from __future__ import annotations

from typing import Protocol, TypeVar

from pydantic import BaseModel, ConfigDict

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

T_co = TypeVar("T_co", covariant=True)


class KeyCountConverter(Protocol[T_co]):
    """Callable turning a single (key, count) pair into an output record."""

    def __call__(self, key: int, count: int) -> T_co:
        """Build the record for one tracked key."""


class Int32Count(BaseModel):
    """Number of occurrences of a key, shaped like the common Int32Count protobuf message."""

    model_config = ConfigDict(extra="forbid")

    key: int
    count: int


def to_int32_count(key: int, count: int) -> Int32Count:
    return Int32Count(key=key, count=count)
