"""Decode monitoring-view rows into session snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import asyncpg

from .accessors import MappingRowAccessor, RowAccessor, TypeCoercionError
from .config import DecoderConfig
from .models import SessionProperty, SessionSnapshot, ValueKind, session_properties
from .results import TabularResult

LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _ColumnBinding:
    """One step of the decode plan: read `column` as `kind` into `name`."""

    name: str
    column: str
    kind: ValueKind

    @classmethod
    def from_property(cls, prop: SessionProperty) -> _ColumnBinding:
        return cls(name=prop.name, column=prop.column, kind=prop.kind)


_PLAN: tuple[_ColumnBinding, ...] = tuple(
    _ColumnBinding.from_property(prop)
    for prop in session_properties()
)

SESSION_COLUMNS: tuple[str, ...] = tuple(binding.column for binding in _PLAN)

_READERS = {
    ValueKind.STRING: "get_string",
    ValueKind.INTEGER: "get_integer",
    ValueKind.TIMESTAMP: "get_timestamp",
}


class SessionRecordDecoder:
    """Turns one row of the sessions view into a :class:`SessionSnapshot`.

    Missing or NULL columns decode to the field default. Accessor failures and
    coercion errors propagate to the caller unchanged.
    """

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self._config = config or DecoderConfig()

    @property
    def config(self) -> DecoderConfig:
        return self._config

    def decode(self, row: RowAccessor) -> SessionSnapshot:
        """Decode a single row."""

        values: dict[str, Any] = {}
        for binding in _PLAN:
            values[binding.name] = self._read(row, binding)
        if self._config.blank_wait_event_as_null:
            event = values["wait_event"]
            if event is not None and not event.strip():
                values["wait_event"] = None
        return SessionSnapshot(**values)

    def decode_mapping(self, row: Mapping[str, object]) -> SessionSnapshot:
        """Decode a mapping-like row such as a dict or asyncpg record."""

        accessor = MappingRowAccessor(row)
        if LOG.isEnabledFor(logging.DEBUG):
            missing = accessor.missing_columns(SESSION_COLUMNS)
            if missing:
                LOG.debug("Session row lacks columns", extra={"columns": missing})
        return self.decode(accessor)

    def decode_result(self, result: TabularResult) -> list[SessionSnapshot]:
        """Decode every row of a result, keeping source order."""

        absent = tuple(column for column in SESSION_COLUMNS if column not in result.columns)
        if absent:
            LOG.debug("Session result lacks columns", extra={"columns": absent})
        return [self.decode(accessor) for accessor in result.accessors()]

    def decode_records(
        self, records: Iterable[asyncpg.Record | Mapping[str, object]]
    ) -> list[SessionSnapshot]:
        """Decode fetched records, keeping source order."""

        return [self.decode_mapping(record) for record in records]

    def _read(self, row: RowAccessor, binding: _ColumnBinding) -> Any:
        reader = getattr(row, _READERS[binding.kind])
        try:
            return reader(binding.column)
        except TypeCoercionError:
            LOG.debug("Session column failed coercion", extra={"column": binding.column})
            raise


__all__ = ["SESSION_COLUMNS", "SessionRecordDecoder"]
