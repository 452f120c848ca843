"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx
from supabase import Client, ClientOptions, create_client

from exercise_tracker.adapters.supabase_exercise_repository import (
    SupabaseExerciseRepository,
)
from exercise_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from exercise_tracker.config import Settings
from exercise_tracker.services.exercises import ExerciseService
from exercise_tracker.services.logs import LogQueryService
from exercise_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    exercise_service: ExerciseService
    log_service: LogQueryService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    http_client = build_http_client(resolved_settings)
    supabase_client = build_store_client(resolved_settings, http_client)
    user_repository = SupabaseUserRepository(supabase_client)
    exercise_repository = SupabaseExerciseRepository(supabase_client)
    user_service = UserService(user_repository)
    exercise_service = ExerciseService(
        repository=exercise_repository,
        user_repository=user_repository,
    )
    log_service = LogQueryService(
        repository=exercise_repository,
        user_repository=user_repository,
    )

    async def close_resources() -> None:
        http_client.close()

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        exercise_service=exercise_service,
        log_service=log_service,
        close_resources=close_resources,
    )


def build_http_client(settings: Settings) -> httpx.Client:
    """Create the HTTP client that carries every store request."""
    return httpx.Client(timeout=settings.store_timeout_seconds)


def build_store_client(settings: Settings, http_client: httpx.Client) -> Client:
    """Create the Supabase client on top of a shared HTTP client."""
    return create_client(
        settings.supabase_url,
        settings.supabase_service_key,
        options=ClientOptions(httpx_client=http_client),
    )
