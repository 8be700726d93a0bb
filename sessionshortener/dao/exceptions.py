"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a ShortenedResult is not found in the result store.

Example:
    >>> from sessionshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc123' not found.")
    Traceback (most recent call last):
        ...
    sessionshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc123' not found.
"""

from sessionshortener.exceptions import SessionShortenerError


class DAOError(SessionShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortURLNotFoundError(DAOError):
    """Exception raised when a ShortenedResult is not found in the result store."""

    error_code = 'dao:short_url_not_found_error'
