"""Domain models for the exercise tracker."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: str
    username: str


@dataclass(frozen=True)
class ExerciseRecord:
    """A logged exercise as stored."""

    id: str
    user_id: str
    description: str
    duration: float
    date: date


@dataclass(frozen=True)
class LoggedExercise:
    """A newly created exercise together with its owner."""

    user: UserRecord
    exercise: ExerciseRecord


@dataclass(frozen=True)
class LogQuery:
    """Range-bounded, optionally limited query over a user's exercises.

    ``start`` is inclusive and ``end`` is exclusive. ``limit`` of None means
    no cap.
    """

    user_id: str
    start: date
    end: date
    limit: int | None = None


@dataclass(frozen=True)
class LogEntry:
    """Projection of an exercise returned in a log."""

    description: str
    duration: float
    date: date


@dataclass(frozen=True)
class ExerciseLog:
    """Result of a log query for one user."""

    user: UserRecord | None
    entries: list[LogEntry]

    @property
    def count(self) -> int:
        return len(self.entries)
