from pydantic import ValidationError

from keycounter.counter import BoundedKeyCounter
from keycounter.records import INT32_MAX, INT32_MIN, Int32Count, to_int32_count


def test_export_default_builds_int32_count_records() -> None:
    counter = BoundedKeyCounter()
    counter.add(2, 9)
    counter.add(1, 4)

    records = counter.export_default()
    assert all(isinstance(record, Int32Count) for record in records)
    assert [record.model_dump() for record in records] == [
        {"key": 1, "count": 4},
        {"key": 2, "count": 9},
    ]


def test_default_bounds_always_produce_valid_keys() -> None:
    counter = BoundedKeyCounter()
    counter.increment(INT32_MAX + 10)
    counter.increment(INT32_MIN - 10)

    assert [record.key for record in counter.export_default()] == [INT32_MIN, INT32_MAX]


def test_export_default_accepts_keys_beyond_int32_bounds() -> None:
    counter = BoundedKeyCounter(0, 2**40)
    counter.increment(2**35)
    counter.increment(2**50)

    assert counter.export_as(lambda key, count: (key, count)) == [(2**35, 1), (2**40, 1)]
    assert [record.model_dump() for record in counter.export_default()] == [
        {"key": 2**35, "count": 1},
        {"key": 2**40, "count": 1},
    ]


def test_int32_count_keeps_large_counts() -> None:
    record = to_int32_count(5, INT32_MAX + 1)
    assert record.count == INT32_MAX + 1


def test_int32_count_forbids_extra_fields() -> None:
    try:
        Int32Count.model_validate({"key": 1, "count": 2, "bucket": 3})
    except ValidationError as exc:
        assert any(error["type"] == "extra_forbidden" for error in exc.errors())
        return
    assert False, "Expected ValidationError for unknown field"
