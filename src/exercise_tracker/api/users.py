"""User, exercise and log endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from fastapi import APIRouter, Query, Request, status
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from exercise_tracker.api.schemas import CreateExerciseInput, CreateUserInput
from exercise_tracker.domain.dates import to_display
from exercise_tracker.domain.errors import ValidationError

if TYPE_CHECKING:
    from exercise_tracker.containers import AppContainer
    from exercise_tracker.domain.models import ExerciseRecord, UserRecord

ModelT = TypeVar("ModelT", bound=BaseModel)

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
async def list_users(request: Request) -> list[dict[str, object]]:
    """Return every user."""
    container: AppContainer = request.app.state.container
    return [_user_payload(user) for user in container.user_service.list_users()]


@router.post("")
async def create_user(request: Request) -> dict[str, object]:
    """Create a user, or return the existing one with the same username."""
    container: AppContainer = request.app.state.container
    payload = _parse_input(
        CreateUserInput,
        await _read_body(request),
        "username is required.",
        status.HTTP_403_FORBIDDEN,
    )
    if not payload.username:
        raise ValidationError(
            "username is required.", status_code=status.HTTP_403_FORBIDDEN
        )
    user = container.user_service.create_or_get(payload.username)
    return _user_payload(user)


@router.get("/{user_id}/exercises")
async def list_exercises(user_id: str, request: Request) -> list[dict[str, object]]:
    """Return every exercise logged for a user."""
    container: AppContainer = request.app.state.container
    exercises = container.exercise_service.list_all(user_id)
    return [_exercise_payload(exercise) for exercise in exercises]


@router.post("/{user_id}/exercises")
async def create_exercise(user_id: str, request: Request) -> dict[str, object]:
    """Log an exercise for a user."""
    container: AppContainer = request.app.state.container
    payload = _parse_input(
        CreateExerciseInput,
        await _read_body(request),
        "Bad request.",
        status.HTTP_400_BAD_REQUEST,
    )
    logged = container.exercise_service.create(
        user_id=user_id,
        description=payload.description,
        duration=payload.duration,
        raw_date=payload.date,
    )
    return {
        "username": logged.user.username,
        "_id": logged.user.id,
        "date": to_display(logged.exercise.date),
        "description": logged.exercise.description,
        "duration": logged.exercise.duration,
    }


@router.get("/{user_id}/logs")
async def get_logs(
    user_id: str,
    request: Request,
    from_: str | None = Query(default=None, alias="from"),
    to: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> dict[str, object]:
    """Return a user's exercises in ``[from, to)``, optionally limited."""
    container: AppContainer = request.app.state.container
    result = container.log_service.query_logs(user_id, from_, to, limit)
    body: dict[str, object] = {}
    if result.user is not None:
        body["_id"] = result.user.id
        body["username"] = result.user.username
    body["count"] = result.count
    body["log"] = [
        {
            "description": entry.description,
            "duration": entry.duration,
            "date": to_display(entry.date),
        }
        for entry in result.entries
    ]
    return body


async def _read_body(request: Request) -> dict[str, object]:
    """Read a JSON or form-encoded body into a plain dict."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError as exc:
            raise ValidationError("Malformed JSON body.") from exc
        return data if isinstance(data, dict) else {}
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


def _parse_input(
    model: type[ModelT], data: dict[str, object], message: str, status_code: int
) -> ModelT:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(message, status_code=status_code) from exc


def _user_payload(user: UserRecord) -> dict[str, object]:
    return {"username": user.username, "_id": user.id}


def _exercise_payload(exercise: ExerciseRecord) -> dict[str, object]:
    return {
        "_id": exercise.id,
        "userId": exercise.user_id,
        "description": exercise.description,
        "duration": exercise.duration,
        "date": to_display(exercise.date),
    }
