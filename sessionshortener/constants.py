from enum import StrEnum


class Limits:
    """Collector and shortcode limits."""

    MAX_PENDING_ENTRIES = 5  # Max URLs shortened in one batch
    SHORTCODE_LENGTH = 6  # Length of randomly generated shortcodes
    MAX_SHORTCODE_LENGTH = 32
    SHORTCODE_MAX_ATTEMPTS = 1_000  # Consecutive collisions tolerated before giving up


# Expiry sentinel for links created without an expiry duration
NEVER = 'never'

# Milliseconds in one minute of expiry duration
MS_PER_MINUTE = 60_000


class ClickPlaceholder:
    """Fixed metadata attached to every simulated click."""

    SOURCE = 'localhost'
    LOCATION = 'India'


class Severity(StrEnum):
    INFO = 'info'
    SUCCESS = 'success'
    WARNING = 'warning'
    ERROR = 'error'


class Messages:
    """User-facing messages."""

    INVALID_URL = 'Invalid URL'
    INVALID_EXPIRY = 'Invalid expiry'
    TOO_MANY_ENTRIES = 'Max {limit} URLs allowed'
    SHORTENED = 'URLs shortened successfully!'
    CORRECT_ERRORS = 'Please correct the errors.'
    NO_CLICKS = 'No clicks recorded yet.'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        LOG_LEVEL = 'LOG_LEVEL'

    class Shortener(StrEnum):
        SHORTCODE_LENGTH = 'SHORTCODE_LENGTH'
        MAX_PENDING_ENTRIES = 'MAX_PENDING_ENTRIES'


# Editable PendingEntry fields
EDITABLE_FIELDS = frozenset({'original', 'expiry_minutes', 'custom_code'})
