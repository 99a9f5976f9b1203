"""Shared fixtures for session decoding tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest


@pytest.fixture
def full_row() -> dict[str, object]:
    """A sessions-view row with every column populated."""

    return {
        "INST_ID": 1,
        "SID": 42,
        "SERIAL#": 100,
        "USERNAME": "SCOTT",
        "SCHEMANAME": "HR",
        "TYPE": "USER",
        "STATUS": "ACTIVE",
        "STATE": "WAITING",
        "SQL_ID": "abc123",
        "SQL_CHILD_NUMBER": 3,
        "SQL_FULLTEXT": "SELECT 1 FROM dual",
        "LAST_CALL_ET": 1500,
        "LOGON_TIME": datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc),
        "SERVICE_NAME": "orclpdb",
        "SERVER": "DEDICATED",
        "MACHINE": "app-01",
        "OSUSER": "deploy",
        "PROGRAM": "python@app-01",
        "MODULE": "billing",
        "ACTION": "close_month",
        "CLIENT_INFO": "batch",
        "PROCESS": "4711",
        "BLOCK_GETS": 10,
        "CONSISTENT_GETS": 20,
        "PHYSICAL_READS": 30,
        "BLOCK_CHANGES": 40,
        "CONSISTENT_CHANGES": 50,
        "EVENT": "db file sequential read",
        "SECONDS_IN_WAIT": 5,
    }
