"""Supabase repository for exercises."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from exercise_tracker.domain.dates import from_storage, to_storage
from exercise_tracker.domain.errors import StoreError
from exercise_tracker.domain.models import ExerciseRecord, LogEntry, LogQuery
from exercise_tracker.services.exercises import ExerciseRepository

_EXERCISE_COLUMNS = "id, user_id, description, duration, date"
_LOG_COLUMNS = "description, duration, date"


@dataclass
class SupabaseExerciseRepository(ExerciseRepository):
    """Supabase implementation for exercise persistence and log queries."""

    client: Client

    def create_exercise(
        self, user_id: str, description: str, duration: float, day: date
    ) -> ExerciseRecord:
        """Insert an exercise row and return it."""
        response = (
            self.client.table("exercises")
            .insert(
                {
                    "user_id": user_id,
                    "description": description,
                    "duration": duration,
                    "date": to_storage(day),
                }
            )
            .execute()
        )
        if not response.data:
            raise StoreError("Failed to create exercise")
        return _parse_exercise(response.data[0])

    def list_exercises(self, user_id: str) -> list[ExerciseRecord]:
        """Return every exercise row for a user."""
        response = (
            self.client.table("exercises")
            .select(_EXERCISE_COLUMNS)
            .eq("user_id", user_id)
            .order("date", desc=False)
            .execute()
        )
        return [_parse_exercise(row) for row in response.data or []]

    def query_exercises(self, query: LogQuery) -> list[LogEntry]:
        """Return exercises with start <= date < end, capped at the limit."""
        request = (
            self.client.table("exercises")
            .select(_LOG_COLUMNS)
            .eq("user_id", query.user_id)
            .gte("date", to_storage(query.start))
            .lt("date", to_storage(query.end))
            .order("date", desc=False)
        )
        if query.limit is not None:
            request = request.limit(query.limit)
        response = request.execute()
        return [_parse_entry(row) for row in response.data or []]


def _parse_exercise(row: dict[str, object]) -> ExerciseRecord:
    return ExerciseRecord(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        description=str(row.get("description", "")),
        duration=row["duration"],
        date=from_storage(str(row["date"])),
    )


def _parse_entry(row: dict[str, object]) -> LogEntry:
    return LogEntry(
        description=str(row.get("description", "")),
        duration=row["duration"],
        date=from_storage(str(row["date"])),
    )
