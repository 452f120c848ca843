"""Exercise log queries."""

import math
from dataclasses import dataclass

from exercise_tracker.domain.dates import EPOCH, normalize_date, today
from exercise_tracker.domain.models import ExerciseLog, LogQuery
from exercise_tracker.services.exercises import ExerciseRepository
from exercise_tracker.services.users import UserRepository


@dataclass
class LogQueryService:
    """Builds date-bounded log queries and shapes their results."""

    repository: ExerciseRepository
    user_repository: UserRepository

    def build_query(
        self,
        user_id: str,
        raw_from: str | None = None,
        raw_to: str | None = None,
        raw_limit: str | None = None,
    ) -> LogQuery:
        """Resolve raw query parameters into a log query.

        ``from`` defaults to the epoch and ``to`` to today; the range excludes
        ``to`` itself.
        """
        return LogQuery(
            user_id=user_id,
            start=normalize_date(raw_from, default=EPOCH),
            end=normalize_date(raw_to, default=today()),
            limit=parse_limit(raw_limit),
        )

    def query_logs(
        self,
        user_id: str,
        raw_from: str | None = None,
        raw_to: str | None = None,
        raw_limit: str | None = None,
    ) -> ExerciseLog:
        """Return the user's exercises within the requested range."""
        query = self.build_query(user_id, raw_from, raw_to, raw_limit)
        user = self.user_repository.get_by_id(user_id)
        entries = self.repository.query_exercises(query)
        return ExerciseLog(user=user, entries=entries)


def parse_limit(raw: str | None) -> int | None:
    """Parse a limit parameter; anything that is not a positive number is no cap."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    limit = int(value)
    return limit if limit > 0 else None
