from types import SimpleNamespace

import pytest

from app.progress.completion import (
    completion_percentage,
    find_active_lesson,
    has_pending_challenge,
    is_challenge_completed,
    is_challenge_pending,
    is_lesson_completed,
)


def _row(completed: bool) -> SimpleNamespace:
    return SimpleNamespace(completed=completed)


def _challenge(*rows: bool) -> SimpleNamespace:
    return SimpleNamespace(progress=[_row(c) for c in rows])


def _lesson(lesson_id: int, *challenges: SimpleNamespace) -> SimpleNamespace:
    return SimpleNamespace(lesson_id=lesson_id, challenges=list(challenges))


def test_challenge_without_progress_is_not_completed() -> None:
    assert is_challenge_completed([]) is False
    assert is_challenge_completed(None) is False


def test_challenge_completed_requires_every_row() -> None:
    assert is_challenge_completed([_row(True), _row(True)]) is True
    assert is_challenge_completed([_row(True), _row(False)]) is False


def test_challenge_pending_rules() -> None:
    assert is_challenge_pending(None) is True
    assert is_challenge_pending([]) is True
    assert is_challenge_pending([_row(True), _row(False)]) is True
    assert is_challenge_pending([_row(True)]) is False


def test_lesson_without_challenges_is_not_completed() -> None:
    assert is_lesson_completed(_lesson(1)) is False


def test_lesson_completed_only_when_every_challenge_is() -> None:
    assert is_lesson_completed(_lesson(1, _challenge(True), _challenge(True, True))) is True
    assert is_lesson_completed(_lesson(1, _challenge(True), _challenge())) is False


def test_single_pending_challenge_makes_lesson_pending() -> None:
    lesson = _lesson(1, _challenge(True), _challenge(True), _challenge(False))

    assert has_pending_challenge(lesson) is True


def test_find_active_lesson_scans_units_in_order() -> None:
    done = _lesson(1, _challenge(True))
    empty = _lesson(2)
    pending = _lesson(3, _challenge(True), _challenge())
    later = _lesson(4, _challenge())
    first_unit = SimpleNamespace(lessons=[done, empty])
    second_unit = SimpleNamespace(lessons=[pending, later])

    unit, lesson = find_active_lesson([first_unit, second_unit])

    assert unit is second_unit
    assert lesson is pending


def test_find_active_lesson_none_when_everything_done() -> None:
    units = [SimpleNamespace(lessons=[_lesson(1, _challenge(True)), _lesson(2)])]

    assert find_active_lesson(units) is None
    assert find_active_lesson([]) is None


@pytest.mark.parametrize(
    ("completed", "total", "expected"),
    [
        (3, 4, 75),
        (0, 4, 0),
        (4, 4, 100),
        (2, 3, 67),
        (1, 8, 13),  # halves round up
        (0, 0, 0),
    ],
)
def test_completion_percentage(completed: int, total: int, expected: int) -> None:
    assert completion_percentage(completed, total) == expected
