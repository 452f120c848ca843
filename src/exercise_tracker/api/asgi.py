"""ASGI entrypoint: settings are read once and shared by the container."""

from exercise_tracker.api.app import create_app
from exercise_tracker.config import Settings
from exercise_tracker.containers import build_container

settings = Settings()
app = create_app(build_container(settings))
