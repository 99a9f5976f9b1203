"""Session snapshot dataclasses and their display metadata."""

from __future__ import annotations

from dataclasses import Field, dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Protocol, runtime_checkable


class SessionCategory(str, Enum):
    """Display groups used by session viewers."""

    SESSION = "Session"
    SQL = "SQL"
    PROCESS = "Process"
    IO = "IO"
    WAIT = "Wait"


class ValueKind(str, Enum):
    """Semantic type a column is decoded as."""

    STRING = "string"
    INTEGER = "integer"
    TIMESTAMP = "timestamp"


_KIND_DEFAULTS: dict[ValueKind, Any] = {
    ValueKind.STRING: None,
    ValueKind.INTEGER: 0,
    ValueKind.TIMESTAMP: None,
}


def _column(
    column: str,
    kind: ValueKind,
    category: SessionCategory,
    order: int,
    *,
    label: str,
    visible: bool = False,
    identity: bool = False,
    required: bool = False,
) -> Any:
    """Declare a snapshot field bound to a monitoring-view column."""

    extra: dict[str, Any] = {} if required else {"default": _KIND_DEFAULTS[kind]}
    return field(
        **extra,
        compare=identity,
        metadata={
            "column": column,
            "kind": kind,
            "category": category,
            "order": order,
            "label": label,
            "visible": visible,
        },
    )


@runtime_checkable
class HasActiveQuery(Protocol):
    """Sessions that can report the SQL they are currently running."""

    def active_query(self) -> str | None: ...

    def active_query_id(self) -> str | None: ...


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Immutable capture of one server session.

    Equality and hashing only consider ``session_id`` and ``wait_event`` so a
    refreshed session list can match rows whose counters moved between polls.
    """

    session_id: int = _column(
        "SID", ValueKind.INTEGER, SessionCategory.SESSION, 2, label="SID", visible=True, identity=True, required=True
    )
    wait_event: str | None = _column(
        "EVENT", ValueKind.STRING, SessionCategory.WAIT, 41, label="Event", visible=True, identity=True
    )
    instance_id: int = _column("INST_ID", ValueKind.INTEGER, SessionCategory.SESSION, 1, label="Instance")
    serial_number: int = _column("SERIAL#", ValueKind.INTEGER, SessionCategory.SESSION, 3, label="Serial")
    user: str | None = _column(
        "USERNAME", ValueKind.STRING, SessionCategory.SESSION, 4, label="User", visible=True
    )
    schema: str | None = _column(
        "SCHEMANAME", ValueKind.STRING, SessionCategory.SESSION, 5, label="Schema", visible=True
    )
    type: str | None = _column("TYPE", ValueKind.STRING, SessionCategory.SESSION, 6, label="Type", visible=True)
    status: str | None = _column(
        "STATUS", ValueKind.STRING, SessionCategory.SESSION, 7, label="Status", visible=True
    )
    state: str | None = _column("STATE", ValueKind.STRING, SessionCategory.SESSION, 8, label="State", visible=True)
    elapsed_time_ms: int = _column(
        "LAST_CALL_ET", ValueKind.INTEGER, SessionCategory.SESSION, 9, label="Elapsed Time", visible=True
    )
    logon_time: datetime | None = _column(
        "LOGON_TIME", ValueKind.TIMESTAMP, SessionCategory.SESSION, 10, label="Logon Time"
    )
    service_name: str | None = _column(
        "SERVICE_NAME", ValueKind.STRING, SessionCategory.SESSION, 11, label="Service"
    )
    sql_text: str | None = _column("SQL_FULLTEXT", ValueKind.STRING, SessionCategory.SQL, 20, label="SQL")
    sql_id: str | None = _column("SQL_ID", ValueKind.STRING, SessionCategory.SQL, 21, label="SQL ID")
    sql_child_number: int = _column(
        "SQL_CHILD_NUMBER", ValueKind.INTEGER, SessionCategory.SQL, 22, label="SQL Child Number"
    )
    server: str | None = _column("SERVER", ValueKind.STRING, SessionCategory.PROCESS, 30, label="Server", visible=True)
    remote_host: str | None = _column(
        "MACHINE", ValueKind.STRING, SessionCategory.PROCESS, 30, label="Remote Host", visible=True
    )
    remote_user: str | None = _column(
        "OSUSER", ValueKind.STRING, SessionCategory.PROCESS, 31, label="Remote User", visible=True
    )
    remote_program: str | None = _column(
        "PROGRAM", ValueKind.STRING, SessionCategory.PROCESS, 32, label="Remote Program", visible=True
    )
    module: str | None = _column("MODULE", ValueKind.STRING, SessionCategory.PROCESS, 32, label="Module")
    action: str | None = _column("ACTION", ValueKind.STRING, SessionCategory.PROCESS, 32, label="Action")
    client_info: str | None = _column(
        "CLIENT_INFO", ValueKind.STRING, SessionCategory.PROCESS, 32, label="Client Info"
    )
    os_process_id: str | None = _column("PROCESS", ValueKind.STRING, SessionCategory.PROCESS, 32, label="Process")
    seconds_in_wait: int = _column(
        "SECONDS_IN_WAIT", ValueKind.INTEGER, SessionCategory.WAIT, 42, label="Seconds In Wait", visible=True
    )
    block_gets: int = _column("BLOCK_GETS", ValueKind.INTEGER, SessionCategory.IO, 70, label="Block Gets")
    consistent_gets: int = _column(
        "CONSISTENT_GETS", ValueKind.INTEGER, SessionCategory.IO, 70, label="Consistent Gets"
    )
    physical_reads: int = _column("PHYSICAL_READS", ValueKind.INTEGER, SessionCategory.IO, 70, label="Physical Reads")
    block_changes: int = _column("BLOCK_CHANGES", ValueKind.INTEGER, SessionCategory.IO, 70, label="Block Changes")
    consistent_changes: int = _column(
        "CONSISTENT_CHANGES", ValueKind.INTEGER, SessionCategory.IO, 70, label="Consistent Changes"
    )

    def active_query(self) -> str | None:
        return self.sql_text

    def active_query_id(self) -> str | None:
        return self.sql_id

    def display_label(self) -> str:
        """Compact ``"<sid> - <event>"`` label for lists and logs."""

        return f"{self.session_id} - {self.wait_event}"

    def __str__(self) -> str:
        return self.display_label()


@dataclass(frozen=True, slots=True)
class SessionProperty:
    """Display metadata for one snapshot field."""

    name: str
    label: str
    column: str
    kind: ValueKind
    category: SessionCategory
    order: int
    visible: bool

    def value_of(self, snapshot: object) -> object:
        return getattr(snapshot, self.name)

    @classmethod
    def from_field(cls, item: Field[Any]) -> SessionProperty:
        meta = item.metadata
        return cls(
            name=item.name,
            label=meta["label"],
            column=meta["column"],
            kind=meta["kind"],
            category=meta["category"],
            order=meta["order"],
            visible=meta["visible"],
        )


def session_properties(
    snapshot_type: type = SessionSnapshot,
    *,
    visible_only: bool = False,
) -> tuple[SessionProperty, ...]:
    """Return column-bound fields of `snapshot_type` in display order."""

    declared = [item for item in fields(snapshot_type) if "column" in item.metadata]
    ranked = sorted(enumerate(declared), key=lambda pair: (pair[1].metadata["order"], pair[0]))
    properties = tuple(SessionProperty.from_field(item) for _, item in ranked)
    if visible_only:
        return tuple(prop for prop in properties if prop.visible)
    return properties


__all__ = [
    "HasActiveQuery",
    "SessionCategory",
    "SessionProperty",
    "SessionSnapshot",
    "ValueKind",
    "session_properties",
]
