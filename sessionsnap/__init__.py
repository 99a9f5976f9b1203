"""Typed, comparable snapshots of database server sessions."""

from .accessors import (
    MalformedRowError,
    MappingRowAccessor,
    RowAccessor,
    RowDecodeError,
    SequenceRowAccessor,
    TypeCoercionError,
)
from .config import AppConfig, DecoderConfig, load_config
from .decoder import SESSION_COLUMNS, SessionRecordDecoder
from .diff import SessionDiff, diff_sessions
from .models import HasActiveQuery, SessionCategory, SessionProperty, SessionSnapshot, session_properties
from .results import TabularResult

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "DecoderConfig",
    "HasActiveQuery",
    "MalformedRowError",
    "MappingRowAccessor",
    "RowAccessor",
    "RowDecodeError",
    "SESSION_COLUMNS",
    "SequenceRowAccessor",
    "SessionCategory",
    "SessionDiff",
    "SessionProperty",
    "SessionRecordDecoder",
    "SessionSnapshot",
    "TabularResult",
    "TypeCoercionError",
    "__version__",
    "diff_sessions",
    "load_config",
    "session_properties",
]
