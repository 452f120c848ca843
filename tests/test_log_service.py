"""Tests for log query service."""

from datetime import date

import pytest

from exercise_tracker.domain.dates import EPOCH, today
from exercise_tracker.services.logs import LogQueryService, parse_limit
from tests.conftest import InMemoryExerciseRepository, InMemoryUserRepository


@pytest.fixture
def seeded() -> tuple[LogQueryService, InMemoryExerciseRepository, str]:
    users = InMemoryUserRepository()
    exercises = InMemoryExerciseRepository()
    user = users.create_user("alice")
    for day in (date(2023, 1, 1), date(2023, 1, 15), date(2023, 2, 1)):
        exercises.create_exercise(user.id, f"run {day}", 30, day)
    exercises.create_exercise("someone-else", "bike", 60, date(2023, 1, 15))
    service = LogQueryService(repository=exercises, user_repository=users)
    return service, exercises, user.id


def test_query_defaults_to_epoch_until_today(seeded) -> None:
    service, exercises, user_id = seeded

    result = service.query_logs(user_id)

    query = exercises.queries[-1]
    assert query.start == EPOCH
    assert query.end == today()
    assert query.limit is None
    assert result.count == 3
    assert result.user is not None
    assert result.user.username == "alice"


def test_query_lower_bound_inclusive_upper_bound_exclusive(seeded) -> None:
    service, _, user_id = seeded

    result = service.query_logs(user_id, "2023-01-01", "2023-02-01")

    assert [entry.date for entry in result.entries] == [
        date(2023, 1, 1),
        date(2023, 1, 15),
    ]


def test_query_same_from_and_to_is_empty(seeded) -> None:
    service, _, user_id = seeded

    result = service.query_logs(user_id, "2023-01-01", "2023-01-01")

    assert result.count == 0
    assert result.entries == []


def test_query_applies_limit(seeded) -> None:
    service, _, user_id = seeded

    result = service.query_logs(user_id, raw_limit="2")

    assert result.count == 2
    assert len(result.entries) == 2


def test_query_for_unknown_user_is_not_an_error(seeded) -> None:
    service, _, _ = seeded

    result = service.query_logs("missing")

    assert result.user is None
    assert result.count == 0


def test_query_falls_back_on_invalid_bounds(seeded) -> None:
    service, exercises, user_id = seeded

    service.query_logs(user_id, "soon", "later")

    query = exercises.queries[-1]
    assert query.start == EPOCH
    assert query.end == today()


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (None, None),
        ("", None),
        ("abc", None),
        ("0", None),
        ("-3", None),
        ("nan", None),
        ("inf", None),
        ("5", 5),
        ("2.7", 2),
    ],
)
def test_parse_limit(raw: str | None, expected: int | None) -> None:
    assert parse_limit(raw) == expected
