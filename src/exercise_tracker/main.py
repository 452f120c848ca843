"""Command-line entry point that serves the API with uvicorn."""

import uvicorn

from exercise_tracker.config import Settings


def main() -> None:
    """Run the exercise tracker API."""
    settings = Settings()
    uvicorn.run(
        "exercise_tracker.api.asgi:app",
        host=settings.host,
        port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
