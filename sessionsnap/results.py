"""Column/row containers for fetched monitoring results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Mapping

import asyncpg

from .accessors import MalformedRowError, SequenceRowAccessor


@dataclass(frozen=True, slots=True)
class TabularResult:
    """Normalized result set: ordered column names plus positional rows."""

    columns: tuple[str, ...]
    rows: tuple[tuple[object, ...], ...]
    row_count: int | None = None

    @classmethod
    def from_records(cls, records: Iterable[asyncpg.Record | Mapping[str, object]]) -> TabularResult:
        """Build a result from asyncpg records or plain mappings."""

        rows: list[tuple[object, ...]] = []
        columns: tuple[str, ...] = ()
        for record in records:
            if not columns:
                columns = tuple(str(key) for key in record.keys())
            if not columns:
                continue
            keys = {str(key) for key in record.keys()}
            if keys != set(columns):
                raise MalformedRowError(
                    f"Record {len(rows)} has columns {sorted(keys)}, expected {list(columns)}."
                )
            rows.append(tuple(record[key] for key in columns))
        return cls(columns=columns, rows=tuple(rows), row_count=len(rows))

    def accessors(self) -> Iterator[SequenceRowAccessor]:
        """Yield one accessor per row, in source order."""

        for row in self.rows:
            yield SequenceRowAccessor(self.columns, row)

    def __len__(self) -> int:
        return len(self.rows)


__all__ = ["TabularResult"]
