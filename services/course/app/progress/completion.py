"""Completion rules derived from challenge progress rows.

Completion is never stored. Every rule here works on already-loaded objects
(ORM rows or anything exposing the same attributes) and performs no I/O.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any


def is_challenge_completed(progress_rows: Sequence[Any] | None) -> bool:
    """A challenge is done once it has progress and every row says completed."""
    if not progress_rows:
        return False
    return all(row.completed for row in progress_rows)


def is_challenge_pending(progress_rows: Sequence[Any] | None) -> bool:
    """No progress at all, or at least one row still marked incomplete."""
    if not progress_rows:
        return True
    return any(row.completed is False for row in progress_rows)


def is_lesson_completed(lesson: Any) -> bool:
    # A lesson without challenges is not completed.
    challenges = lesson.challenges or []
    if not challenges:
        return False
    return all(is_challenge_completed(c.progress) for c in challenges)


def has_pending_challenge(lesson: Any) -> bool:
    return any(is_challenge_pending(c.progress) for c in lesson.challenges or [])


def find_active_lesson(units: Iterable[Any]) -> tuple[Any, Any] | None:
    """First ``(unit, lesson)``, in unit order then lesson order, with a pending challenge.

    Expects ``units`` and each unit's ``lessons`` already sorted ascending.
    """
    for unit in units:
        for lesson in unit.lessons:
            if has_pending_challenge(lesson):
                return unit, lesson
    return None


def completion_percentage(completed: int, total: int) -> int:
    """Whole percent, halves rounded up. An empty lesson counts as 0%."""
    if total <= 0:
        return 0
    return math.floor(completed * 100 / total + 0.5)
