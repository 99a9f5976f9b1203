"""Tests for comparing session polls."""

from __future__ import annotations

from sessionsnap.diff import diff_sessions
from sessionsnap.models import SessionSnapshot


def test_diff_detects_added_removed_and_retained() -> None:
    previous = [
        SessionSnapshot(session_id=1, wait_event="latch free", block_gets=10),
        SessionSnapshot(session_id=2, wait_event="SQL*Net message from client"),
    ]
    current = [
        SessionSnapshot(session_id=1, wait_event="latch free", block_gets=50),
        SessionSnapshot(session_id=3, wait_event="db file sequential read"),
    ]

    diff = diff_sessions(previous, current)

    assert [s.session_id for s in diff.added] == [3]
    assert [s.session_id for s in diff.removed] == [2]
    assert [s.session_id for s in diff.retained] == [1]
    assert diff.retained[0].block_gets == 50
    assert diff.changed is True


def test_counter_changes_alone_do_not_count_as_change() -> None:
    previous = [SessionSnapshot(session_id=1, wait_event="latch free", physical_reads=1)]
    current = [SessionSnapshot(session_id=1, wait_event="latch free", physical_reads=2)]

    diff = diff_sessions(previous, current)

    assert diff.changed is False
    assert diff.added == ()
    assert diff.removed == ()


def test_wait_event_change_replaces_session_entry() -> None:
    previous = [SessionSnapshot(session_id=1, wait_event="latch free")]
    current = [SessionSnapshot(session_id=1, wait_event="enq: TX - row lock contention")]

    diff = diff_sessions(previous, current)

    assert diff.added == tuple(current)
    assert diff.removed == tuple(previous)
