"""Input validation for pending entries.

Functions:
    is_valid_url(url) -> bool
        True for a well-formed absolute URL (scheme and host present).
    validate_url(url) -> str
        Return the URL unchanged or raise InvalidURLError.
    parse_expiry_minutes(value) -> float | None
        Parse an optional expiry duration or raise InvalidExpiryError.
"""

import math
import string
from datetime import timedelta
from urllib.parse import urlsplit

from sessionshortener.constants import Messages
from sessionshortener.exceptions import InvalidURLError, InvalidExpiryError


_SCHEME_CHARS = frozenset(string.ascii_letters + string.digits + '+-.')
MAX_EXPIRY_MINUTES = timedelta.max / timedelta(minutes=1)


def is_valid_url(url: str) -> bool:
    """Check that `url` is a syntactically well-formed absolute URL

    Example:
        >>> is_valid_url('https://example.com')
        True
        >>> is_valid_url('not-a-url')
        False
    """
    if not isinstance(url, str) or not url or url != url.strip():
        return False
    if any(character.isspace() for character in url):
        return False

    try:
        components = urlsplit(url)
        # Accessing port validates it (raises ValueError when out of range or non-numeric)
        components.port
    except ValueError:
        return False

    scheme = components.scheme
    if not scheme or not scheme[0].isalpha() or not set(scheme) <= _SCHEME_CHARS:
        return False
    return bool(components.hostname)


def validate_url(url: str) -> str:
    if not is_valid_url(url):
        raise InvalidURLError(Messages.INVALID_URL)
    return url


def parse_expiry_minutes(value: str | int | float | None) -> float | None:
    """Parse an optional expiry duration in minutes

    Args:
        value (str | int | float | None):
            Raw expiry value. None, or a blank string, means "no expiry".

    Returns:
        float | None: The duration in minutes, or None when absent.

    Raises:
        InvalidExpiryError:
            If the value is not a number between 0 and the largest timedelta in minutes.

    Example:
        >>> parse_expiry_minutes('30')
        30.0
        >>> parse_expiry_minutes('') is None
        True
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidExpiryError(Messages.INVALID_EXPIRY)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None

    try:
        minutes = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidExpiryError(Messages.INVALID_EXPIRY) from e

    if not math.isfinite(minutes) or not 0 <= minutes <= MAX_EXPIRY_MINUTES:
        raise InvalidExpiryError(Messages.INVALID_EXPIRY)
    return minutes
