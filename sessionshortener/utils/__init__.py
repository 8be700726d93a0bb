from sessionshortener.utils.config import Settings, app_env, log_level, load_config
from sessionshortener.utils.helpers import utcnow, compute_expiry, format_timestamp
from sessionshortener.utils.shortener import random_token, generate_shortcode
from sessionshortener.utils.validation import is_valid_url, validate_url, parse_expiry_minutes
from sessionshortener.utils.logging import initialize_logging


__all__ = [
    'Settings',
    'app_env',
    'log_level',
    'load_config',
    'utcnow',
    'compute_expiry',
    'format_timestamp',
    'random_token',
    'generate_shortcode',
    'is_valid_url',
    'validate_url',
    'parse_expiry_minutes',
    'initialize_logging',
]
