"""Compare successive session polls by snapshot identity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .models import SessionSnapshot


@dataclass(frozen=True, slots=True)
class SessionDiff:
    """Sessions that appeared, disappeared or stayed between two polls."""

    added: tuple[SessionSnapshot, ...]
    removed: tuple[SessionSnapshot, ...]
    retained: tuple[SessionSnapshot, ...]

    @property
    def changed(self) -> bool:
        return bool(self.added or self.removed)


def diff_sessions(
    previous: Iterable[SessionSnapshot],
    current: Iterable[SessionSnapshot],
) -> SessionDiff:
    """Match snapshots on (session_id, wait_event); retained entries come from `current`."""

    before = tuple(previous)
    after = tuple(current)
    before_keys = set(before)
    after_keys = set(after)
    added = tuple(snapshot for snapshot in after if snapshot not in before_keys)
    retained = tuple(snapshot for snapshot in after if snapshot in before_keys)
    removed = tuple(snapshot for snapshot in before if snapshot not in after_keys)
    return SessionDiff(added=added, removed=removed, retained=retained)


__all__ = ["SessionDiff", "diff_sessions"]
