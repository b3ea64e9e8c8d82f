"""Registration and expiration dates with the ``Unknown`` sentinel."""

from datetime import UTC, date, datetime

from ..exceptions import ValidationError

UNKNOWN = "Unknown"


def parse_record_date(value: object, field: str = "date") -> date | None:
    """
    Parse a record date.

    ``None``, empty strings and ``"Unknown"`` map to ``None``. Datetime values
    and ISO datetime strings are reduced to their UTC calendar date.

    Raises:
        ValidationError: If the value is not a recognisable date.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _to_utc(value).date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(field, f"expected an ISO date, got {type(value).__name__}")

    text = value.strip()
    if not text or text.lower() == UNKNOWN.lower():
        return None

    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return _to_utc(datetime.fromisoformat(text.replace("Z", "+00:00"))).date()
    except ValueError as e:
        raise ValidationError(field, f"invalid date {value!r}") from e


def format_record_date(value: date | None) -> str:
    """Render a record date as ISO text or the ``Unknown`` sentinel."""
    return value.isoformat() if value is not None else UNKNOWN


def _to_utc(value: datetime) -> datetime:
    return value.astimezone(UTC) if value.tzinfo else value.replace(tzinfo=UTC)
