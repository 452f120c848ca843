"""Date normalization for exercise records and log queries.

Every stored exercise date has day granularity. The ISO form (``2023-01-15``)
is what the store compares in range queries; the display form
(``Sun Jan 15 2023``) is what API responses return.
"""

from datetime import UTC, date, datetime

from dateutil import parser as dateutil_parser

EPOCH = date(1970, 1, 1)
DISPLAY_FORMAT = "%a %b %d %Y"


def today() -> date:
    """Return the current UTC calendar date."""
    return datetime.now(tz=UTC).date()


def parse_date(raw: str | None) -> date | None:
    """Parse a date or timestamp, returning None when it is not a valid date.

    ISO input takes the fast path; anything else goes through dateutil, which
    also reads the display form this service returns.
    """
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        try:
            parsed = dateutil_parser.parse(value)
        except (ValueError, OverflowError):
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC)
    return parsed.date()


def normalize_date(raw: str | None, default: date | None = None) -> date:
    """Resolve optional input to a calendar date.

    Missing or unparseable input falls back to ``default``, or to today when
    no default is given.
    """
    parsed = parse_date(raw)
    if parsed is not None:
        return parsed
    return default if default is not None else today()


def to_storage(value: date) -> str:
    """Render a date in the sortable form used by the store."""
    return value.isoformat()


def from_storage(raw: str) -> date:
    """Read a stored date back, tolerating timestamp columns."""
    return date.fromisoformat(raw[:10])


def to_display(value: date) -> str:
    """Render a date the way API responses show it."""
    return value.strftime(DISPLAY_FORMAT)
