"""Exercise logging service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from exercise_tracker.domain.dates import normalize_date
from exercise_tracker.domain.errors import NotFoundError, ValidationError
from exercise_tracker.domain.models import (
    ExerciseRecord,
    LogEntry,
    LoggedExercise,
    LogQuery,
)
from exercise_tracker.services.users import UserRepository

logger = logging.getLogger(__name__)


class ExerciseRepository(Protocol):
    """Persistence interface for exercises."""

    def create_exercise(
        self, user_id: str, description: str, duration: float, day: date
    ) -> ExerciseRecord:
        """Persist an exercise and return the stored record."""

    def list_exercises(self, user_id: str) -> list[ExerciseRecord]:
        """Return every exercise for a user."""

    def query_exercises(self, query: LogQuery) -> list[LogEntry]:
        """Return projected exercises matching a log query."""


@dataclass
class ExerciseService:
    """Service that validates and persists exercises."""

    repository: ExerciseRepository
    user_repository: UserRepository

    def create(
        self,
        user_id: str | None,
        description: str | None,
        duration: float | None,
        raw_date: str | None = None,
    ) -> LoggedExercise:
        """Log an exercise for an existing user.

        The date falls back to today when it is missing or unparseable.
        """
        if not user_id or not description or not duration:
            raise ValidationError("Bad request.")
        user = self.user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("Not found user with this id.")

        exercise = self.repository.create_exercise(
            user_id=user.id,
            description=description,
            duration=duration,
            day=normalize_date(raw_date),
        )
        logger.info(
            "Logged exercise",
            extra={"user_id": user.id, "exercise_id": exercise.id},
        )
        return LoggedExercise(user=user, exercise=exercise)

    def list_all(self, user_id: str) -> list[ExerciseRecord]:
        """Return every exercise for the user, unfiltered."""
        return self.repository.list_exercises(user_id)
