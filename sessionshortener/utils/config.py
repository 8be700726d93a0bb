"""Utility functions for application configuration management.

Configuration is read from environment variables once at start-up and
frozen into a `Settings` value which is handed to the session:

    APP_ENV              - environment label, 'local' by default
    LOG_LEVEL            - root log level, 'INFO' by default
    SHORTCODE_LENGTH     - length of generated shortcodes, 6 by default
    MAX_PENDING_ENTRIES  - collector capacity, 5 by default

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    log_level() -> str
        Return the configured log level (`LOG_LEVEL`), defaulting to `'INFO'`.

    load_config() -> Settings
        Read and validate all settings from the environment.

Example:
    >>> from sessionshortener.utils.config import load_config
    >>> settings = load_config()
    >>> settings.shortcode_length
    6
"""

import os
import logging
from dataclasses import dataclass

from sessionshortener.constants import ENV, Limits
from sessionshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({'CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG'})


@dataclass(frozen=True)
class Settings:
    """Validated application settings.

    Attributes:
        app_env (str):
            Environment label (e.g. 'local', 'dev').
        log_level (str):
            Root log level name.
        shortcode_length (int):
            Length of randomly generated shortcodes.
        max_pending_entries (int):
            Number of URLs the collector may hold in one batch.
    """

    app_env: str = 'local'
    log_level: str = 'INFO'
    shortcode_length: int = Limits.SHORTCODE_LENGTH
    max_pending_entries: int = Limits.MAX_PENDING_ENTRIES


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def log_level() -> str:
    """Return the configured log level by reading 'LOG_LEVEL'

    Raises:
        BadConfigurationError:
            If the value is not a standard logging level name.
    """
    level = os.environ.get(ENV.App.LOG_LEVEL, 'INFO').strip().upper()
    if level not in _LOG_LEVELS:
        raise BadConfigurationError(f"Invalid {ENV.App.LOG_LEVEL} '{level}' (expected one of {sorted(_LOG_LEVELS)}).")
    return level


def _int_from_env(name: str, default: int, minimum: int, maximum: int | None = None) -> int:
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default

    try:
        value = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f"{name} must be an integer (given value: '{raw}').") from e

    if value < minimum or (maximum is not None and value > maximum):
        bounds = f'>= {minimum}' if maximum is None else f'between {minimum} and {maximum}'
        raise BadConfigurationError(f'{name} must be {bounds} (given value: {value}).')
    return value


def load_config() -> Settings:
    """Load application settings from the environment

    Returns:
        Settings: validated settings, with defaults for unset variables.

    Raises:
        BadConfigurationError:
            If any variable holds an invalid value.
    """
    settings = Settings(
        app_env=app_env(),
        log_level=log_level(),
        shortcode_length=_int_from_env(ENV.Shortener.SHORTCODE_LENGTH, Limits.SHORTCODE_LENGTH, 1, Limits.MAX_SHORTCODE_LENGTH),
        max_pending_entries=_int_from_env(ENV.Shortener.MAX_PENDING_ENTRIES, Limits.MAX_PENDING_ENTRIES, 1),
    )
    logger.debug('Loaded configuration.', extra={'appEnv': settings.app_env, 'shortcodeLength': settings.shortcode_length})
    return settings
