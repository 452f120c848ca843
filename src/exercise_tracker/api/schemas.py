"""Request input models for the exercise tracker API."""

from pydantic import BaseModel, ConfigDict, field_validator


class CreateUserInput(BaseModel):
    """Body of ``POST /api/users``."""

    model_config = ConfigDict(extra="ignore")

    username: str | None = None


class CreateExerciseInput(BaseModel):
    """Body of ``POST /api/users/{user_id}/exercises``."""

    model_config = ConfigDict(extra="ignore")

    description: str | None = None
    duration: int | float | None = None
    date: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def drop_non_string_date(cls, value: object) -> object:
        """Non-string dates are treated as absent so they fall back to today."""
        return value if isinstance(value, str) else None
