class SessionShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:session_shortener_error'


class ValidationError(SessionShortenerError):
    """Base exception for user input that fails validation.

    The exception message is the text shown next to the offending entry.
    """

    error_code = 'input:validation_error'


class InvalidURLError(ValidationError):
    """Raised when a URL is not a well-formed absolute URL."""

    error_code = 'input:invalid_url_error'


class InvalidExpiryError(ValidationError):
    """Raised when an expiry duration is not a non-negative number of minutes."""

    error_code = 'input:invalid_expiry_error'


class CapacityError(SessionShortenerError):
    """Base exception for collector capacity violations."""

    error_code = 'input:capacity_error'


class TooManyEntriesError(CapacityError):
    """Raised when a batch holds more entries than the collector allows."""

    error_code = 'input:too_many_entries_error'


class ShortcodeGenerationError(SessionShortenerError):
    """Raised when no unused shortcode could be drawn."""

    error_code = 'app:shortcode_generation_error'


class ConfigurationError(SessionShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
