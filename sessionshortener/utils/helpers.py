"""Helper utilities for time handling.

Functions:
    utcnow() -> datetime
        Current moment as an aware UTC datetime
    compute_expiry(minutes, now) -> datetime | str
        Absolute expiry moment for an optional duration, or 'never'
    format_timestamp(value) -> str
        Human-readable rendering of a timestamp or the 'never' sentinel

Example:
    >>> from datetime import datetime, UTC
    >>> now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    >>> compute_expiry(30, now)
    datetime.datetime(2026, 1, 1, 12, 30, tzinfo=datetime.timezone.utc)
    >>> compute_expiry(None, now)
    'never'
"""

from datetime import datetime, timedelta, UTC

from sessionshortener.constants import NEVER, MS_PER_MINUTE, Messages
from sessionshortener.exceptions import InvalidExpiryError
from sessionshortener.types import Expiry


def utcnow() -> datetime:
    return datetime.now(UTC)


def compute_expiry(minutes: float | None, now: datetime) -> Expiry:
    """Compute the absolute expiry moment of a link.

    Args:
        minutes (float | None):
            Expiry duration in minutes. None means the link never expires.
        now (datetime):
            Creation moment of the link.

    Returns:
        datetime | str:
            `now + minutes * 60 000 ms`, or 'never' when no duration is given.

    Raises:
        InvalidExpiryError:
            If the expiry moment falls outside the representable datetime range.
    """
    if minutes is None:
        return NEVER
    try:
        return now + timedelta(milliseconds=minutes * MS_PER_MINUTE)
    except OverflowError as e:
        raise InvalidExpiryError(Messages.INVALID_EXPIRY) from e


def format_timestamp(value: Expiry) -> str:
    """Render a timestamp for display.

    Example:
        >>> format_timestamp(datetime(2026, 1, 1, 12, 30, 5, tzinfo=UTC))
        '2026-01-01 12:30:05 UTC'
        >>> format_timestamp('never')
        'Never'
    """
    if value == NEVER:
        return 'Never'
    return value.astimezone(UTC).strftime('%Y-%m-%d %H:%M:%S UTC')
