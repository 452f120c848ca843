"""Error taxonomy for the exercise tracker."""


class ExerciseTrackerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ExerciseTrackerError):
    """Required input is missing or malformed."""

    status_code = 400


class NotFoundError(ExerciseTrackerError):
    """A referenced entity does not exist."""

    status_code = 404


class StoreError(ExerciseTrackerError):
    """The underlying store failed to persist or return data."""

    status_code = 500
