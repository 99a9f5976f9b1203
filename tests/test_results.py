"""Tests for the tabular result container."""

from __future__ import annotations

import pytest

from sessionsnap.accessors import MalformedRowError
from sessionsnap.results import TabularResult


class _FakeRecord:
    """Record-like row whose key order is fixed by construction."""

    def __init__(self, *pairs: tuple[str, object]) -> None:
        self._pairs = pairs

    def keys(self):  # type: ignore[no-untyped-def]
        return iter(key for key, _ in self._pairs)

    def values(self):  # type: ignore[no-untyped-def]
        return iter(value for _, value in self._pairs)

    def __getitem__(self, key: str) -> object:
        return dict(self._pairs)[key]


def test_from_records_uses_first_record_columns() -> None:
    records = [
        {"SID": 1, "EVENT": "latch free"},
        {"SID": 2, "EVENT": None},
    ]

    result = TabularResult.from_records(records)

    assert result.columns == ("SID", "EVENT")
    assert result.rows == ((1, "latch free"), (2, None))
    assert result.row_count == 2
    assert len(result) == 2


def test_from_records_handles_empty_input() -> None:
    result = TabularResult.from_records([])

    assert result.columns == ()
    assert result.rows == ()
    assert result.row_count == 0


def test_accessors_yield_one_per_row() -> None:
    result = TabularResult(columns=("SID",), rows=((5,), (6,)))

    sids = [accessor.get_integer("SID") for accessor in result.accessors()]

    assert sids == [5, 6]


def test_from_records_rejects_rows_with_extra_columns() -> None:
    records = [{"SID": 1}, {"SID": 2, "EVENT": "latch free"}]

    with pytest.raises(MalformedRowError):
        TabularResult.from_records(records)


def test_from_records_rejects_rows_with_missing_columns() -> None:
    records = [{"SID": 1, "EVENT": "latch free"}, {"SID": 2}]

    with pytest.raises(MalformedRowError):
        TabularResult.from_records(records)


def test_from_records_aligns_values_to_first_record_columns() -> None:
    records = [
        _FakeRecord(("SID", 1), ("EVENT", "latch free")),
        _FakeRecord(("EVENT", "db file sequential read"), ("SID", 2)),
    ]

    result = TabularResult.from_records(records)

    assert result.columns == ("SID", "EVENT")
    assert result.rows == ((1, "latch free"), (2, "db file sequential read"))
