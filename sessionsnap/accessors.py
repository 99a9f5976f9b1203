"""Null-tolerant row accessors shared by monitoring-row decoders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterable, Mapping, Protocol, Sequence, runtime_checkable


class RowDecodeError(RuntimeError):
    """Base error for rows that cannot be decoded."""


class MalformedRowError(RowDecodeError):
    """Raised when the row source itself is structurally broken."""


class TypeCoercionError(RowDecodeError):
    """Raised when a column value cannot be coerced to its declared type."""

    def __init__(self, column: str, value: object, expected: str) -> None:
        super().__init__(
            f"Column '{column}' expected {expected}, got {type(value).__name__}: {value!r}"
        )
        self.column = column
        self.value = value
        self.expected = expected


@runtime_checkable
class RowAccessor(Protocol):
    """Typed, null-tolerant lookups by column name."""

    def get_string(self, column: str) -> str | None:
        """Return the column as text, or None when absent/NULL."""

    def get_integer(self, column: str) -> int:
        """Return the column as an integer, or 0 when absent/NULL."""

    def get_timestamp(self, column: str) -> datetime | None:
        """Return the column as a datetime, or None when absent/NULL."""


class _BaseRowAccessor(ABC):
    """Coercion shared by the concrete accessors; subclasses supply `_raw`."""

    def __init__(self) -> None:
        self._closed = False

    def close(self) -> None:
        """Invalidate the accessor; later reads raise MalformedRowError."""

        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def get_string(self, column: str) -> str | None:
        value = self._lookup(column)
        if value is None:
            return None
        return coerce_string(column, value)

    def get_integer(self, column: str) -> int:
        value = self._lookup(column)
        if value is None:
            return 0
        return coerce_integer(column, value)

    def get_timestamp(self, column: str) -> datetime | None:
        value = self._lookup(column)
        if value is None:
            return None
        return coerce_timestamp(column, value)

    @abstractmethod
    def has_column(self, column: str) -> bool:
        """Whether the underlying row carries `column` at all."""

    def missing_columns(self, columns: Iterable[str]) -> tuple[str, ...]:
        """Columns from `columns` the underlying row does not carry."""

        return tuple(column for column in columns if not self.has_column(column))

    def _lookup(self, column: str) -> object | None:
        if self._closed:
            raise MalformedRowError(f"Row accessor is closed; cannot read '{column}'.")
        return self._raw(column)

    @abstractmethod
    def _raw(self, column: str) -> object | None:
        """Return the raw value for `column`, or None when absent."""


class MappingRowAccessor(_BaseRowAccessor):
    """Accessor over a mapping-like row (dicts, asyncpg records)."""

    def __init__(self, row: Mapping[str, object]) -> None:
        super().__init__()
        self._row = row

    def has_column(self, column: str) -> bool:
        return column in self._row.keys()

    def _raw(self, column: str) -> object | None:
        return self._row.get(column)


class SequenceRowAccessor(_BaseRowAccessor):
    """Accessor over a positional row paired with its column names."""

    def __init__(self, columns: Sequence[str], values: Sequence[object]) -> None:
        super().__init__()
        if len(columns) != len(values):
            raise MalformedRowError(
                f"Row has {len(values)} value(s) for {len(columns)} column(s)."
            )
        self._index = {name: idx for idx, name in enumerate(columns)}
        self._values = tuple(values)

    def has_column(self, column: str) -> bool:
        return column in self._index

    def _raw(self, column: str) -> object | None:
        idx = self._index.get(column)
        if idx is None:
            return None
        return self._values[idx]


def coerce_integer(column: str, value: object) -> int:
    """Convert `value` to int without losing precision."""

    if isinstance(value, bool):
        raise TypeCoercionError(column, value, "integer")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if value.is_finite() and value == value.to_integral_value():
            return int(value)
        raise TypeCoercionError(column, value, "integer")
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        raise TypeCoercionError(column, value, "integer")
    if isinstance(value, str):
        text = value.strip()
        digits = text[1:] if text[:1] in "+-" else text
        if digits.isdecimal():
            return int(text)
        raise TypeCoercionError(column, value, "integer")
    raise TypeCoercionError(column, value, "integer")


def coerce_string(column: str, value: object) -> str:
    """Convert `value` to text; LOB-like objects are read in full."""

    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TypeCoercionError(column, value, "string") from exc
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return str(value)
    reader = getattr(value, "read", None)
    if callable(reader):
        return coerce_string(column, reader())
    raise TypeCoercionError(column, value, "string")


def coerce_timestamp(column: str, value: object) -> datetime:
    """Convert `value` to a datetime, keeping any tzinfo it carries."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise TypeCoercionError(column, value, "timestamp") from exc
    raise TypeCoercionError(column, value, "timestamp")


__all__ = [
    "MalformedRowError",
    "MappingRowAccessor",
    "RowAccessor",
    "RowDecodeError",
    "SequenceRowAccessor",
    "TypeCoercionError",
    "coerce_integer",
    "coerce_string",
    "coerce_timestamp",
]
