"""Bounded sparse counter for int (or IntEnum) keys."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from dataclasses import dataclass
import logging
from operator import index
from typing import Any, TypeVar

from keycounter.config import CounterSettings, get_settings
from keycounter.records import (
    INT32_MAX,
    INT32_MIN,
    Int32Count,
    KeyCountConverter,
    to_int32_count,
)

T = TypeVar("T")

logger = logging.getLogger("keycounter.counter")


class InvalidKeyError(TypeError):
    """Raised when a key, bound or delta is not an integer."""


def _as_int(value: Any, *, what: str) -> int:
    try:
        return index(value)
    except TypeError as exc:
        raise InvalidKeyError(f"{what} must be an integer, got {value!r}") from exc


@dataclass(frozen=True, slots=True)
class KeyCountEntry:
    """Number of occurrences for one int key."""

    key: int
    count: int


class BoundedKeyCounter:
    """
    Count occurrences of int keys, clamping keys into [key_lower_bound, key_upper_bound].

    Keys below the lower bound are attributed to the lower bound and keys above
    the upper bound to the upper bound. Entries are kept sorted by key, so
    iteration and exports are in ascending key order.

    Not thread-safe; callers sharing an instance must synchronize.
    """

    def __init__(self, key_lower_bound: int = INT32_MIN, key_upper_bound: int = INT32_MAX) -> None:
        self._key_lower_bound = _as_int(key_lower_bound, what="key_lower_bound")
        self._key_upper_bound = _as_int(key_upper_bound, what="key_upper_bound")
        if self._key_lower_bound > self._key_upper_bound:
            # Every key collapses into the lower bound bucket.
            logger.debug(
                "inverted_key_bounds lower=%s upper=%s",
                self._key_lower_bound,
                self._key_upper_bound,
            )
        self._keys: list[int] = []
        self._counts: list[int] = []

    @classmethod
    def from_settings(cls, settings: CounterSettings | None = None) -> BoundedKeyCounter:
        resolved = settings or get_settings()
        return cls(resolved.key_lower_bound, resolved.key_upper_bound)

    @property
    def key_lower_bound(self) -> int:
        return self._key_lower_bound

    @property
    def key_upper_bound(self) -> int:
        return self._key_upper_bound

    def clamp(self, key: int) -> int:
        value = _as_int(key, what="key")
        return max(self._key_lower_bound, min(value, self._key_upper_bound))

    def _find(self, key: int) -> tuple[int, bool]:
        position = bisect_left(self._keys, key)
        found = position < len(self._keys) and self._keys[position] == key
        return position, found

    def increment(self, key: int) -> None:
        """Increment the count of a key by 1."""

        self.add(key, 1)

    def add(self, key: int, delta: int) -> None:
        """
        Add ``delta`` to the count of the clamped key.

        Negative and zero deltas are stored as given; the count is not checked
        against going below zero.
        """

        amount = _as_int(delta, what="delta")
        bucket = self.clamp(key)
        if bucket != key:
            logger.debug("key_clamped key=%s bucket=%s", key, bucket)

        position, found = self._find(bucket)
        if found:
            self._counts[position] += amount
            return
        self._keys.insert(position, bucket)
        self._counts.insert(position, amount)

    def get(self, key: int, default: int = 0) -> int:
        position, found = self._find(self.clamp(key))
        return self._counts[position] if found else default

    def size(self) -> int:
        return len(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: object) -> bool:
        try:
            bucket = self.clamp(key)  # type: ignore[arg-type]
        except InvalidKeyError:
            return False
        return self._find(bucket)[1]

    def iterate(self) -> Iterator[KeyCountEntry]:
        """Yield every (key, count) pair in ascending key order."""

        position = 0
        while position < len(self._keys):
            yield KeyCountEntry(self._keys[position], self._counts[position])
            position += 1

    def __iter__(self) -> Iterator[KeyCountEntry]:
        return self.iterate()

    def keys(self) -> list[int]:
        return list(self._keys)

    def to_dict(self) -> dict[int, int]:
        return dict(zip(self._keys, self._counts))

    def export_as(self, converter: KeyCountConverter[T]) -> list[T]:
        """
        Convert each tracked (key, count) pair with ``converter``.

        Returns one element per tracked key, in iteration order. Errors raised
        by the converter propagate to the caller.
        """

        return [converter(entry.key, entry.count) for entry in self.iterate()]

    def export_default(self) -> list[Int32Count]:
        return self.export_as(to_int32_count)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedKeyCounter):
            return NotImplemented
        return (
            self._key_lower_bound == other._key_lower_bound
            and self._key_upper_bound == other._key_upper_bound
            and self._keys == other._keys
            and self._counts == other._counts
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"BoundedKeyCounter(lower={self._key_lower_bound}, "
            f"upper={self._key_upper_bound}, counts={self.to_dict()})"
        )
