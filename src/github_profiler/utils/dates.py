"""Timestamp parsing helpers shared by the record models."""

from datetime import date, datetime, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator


def parse_datetime(value: Any) -> datetime | None:
    """Parse an ISO datetime string into an aware UTC datetime.

    Missing or malformed values yield None so that a single bad record
    drops out of a metric's sample instead of failing the whole analysis.
    Naive datetimes are assumed to be UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def parse_date(value: Any) -> date | None:
    """Parse an ISO date string (YYYY-MM-DD)."""
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


# Field type for record timestamps: lenient parse, always UTC-aware or None.
LenientDatetime = Annotated[datetime | None, BeforeValidator(parse_datetime)]
