"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol

from exercise_tracker.domain.errors import ValidationError
from exercise_tracker.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with exactly this username, if present."""

    def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user for an id, if present."""

    def create_user(self, username: str) -> UserRecord:
        """Create and return a new user record."""

    def list_users(self) -> list[UserRecord]:
        """Return every user."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create_or_get(self, username: str | None) -> UserRecord:
        """Return the user with this name, creating it on first use."""
        if not username:
            raise ValidationError("username is required.")
        existing = self.repository.get_by_username(username)
        if existing:
            return existing

        created = self.repository.create_user(username)
        logger.info("Created user", extra={"user_id": created.id})
        return created

    def get_by_id(self, user_id: str) -> UserRecord | None:
        """Return the user for an id, or None when it does not resolve."""
        return self.repository.get_by_id(user_id)

    def list_users(self) -> list[UserRecord]:
        """Return every known user."""
        return self.repository.list_users()
