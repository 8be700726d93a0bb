"""Shortcode generation utility

This module draws short random base-36 tokens and assigns shortcodes that
are unique against a set of codes already in use.

Functions:
    random_token(rng=None, length=6):
        Draw a random lowercase base-36 token.

    generate_shortcode(used_codes, draw=None, max_attempts=1000):
        Draw tokens until one is not already used.

Example:
    >>> import random
    >>> from sessionshortener.utils import random_token, generate_shortcode
    >>> len(random_token(random.Random(42)))
    6
    >>> generate_shortcode({'a0wbbx'}, draw=iter(['a0wbbx', 'q81mz0']).__next__)
    'q81mz0'
"""

import random
import string
import logging
from collections.abc import Callable, Collection

from sessionshortener.constants import Limits
from sessionshortener.exceptions import ShortcodeGenerationError


logger = logging.getLogger(__name__)

ALPHABET = string.digits + string.ascii_lowercase
BASE = len(ALPHABET)  # 10 digits + 26 lowercase letters

_default_rng = random.Random()


def random_token(rng: random.Random | None = None, length: int = Limits.SHORTCODE_LENGTH) -> str:
    """Draw a random lowercase base-36 token.

    Args:
        rng (random.Random, optional):
            Random source. Defaults to a module-level generator.

        length (int, optional):
            Number of characters in the token.
            Defaults to 6.

    Returns:
        str: `length` characters from [0-9a-z].
    """
    if not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    rng = rng or _default_rng
    return ''.join(rng.choice(ALPHABET) for _ in range(length))


def generate_shortcode(
    used_codes: Collection[str],
    draw: Callable[[], str] | None = None,
    max_attempts: int = Limits.SHORTCODE_MAX_ATTEMPTS,
) -> str:
    """Draw a shortcode that is not in `used_codes`.

    Candidates come from `draw()`; a candidate colliding with a used code is
    discarded and redrawn. `used_codes` is never modified: the caller records
    the returned code itself.

    Args:
        used_codes (Collection[str]):
            Codes already assigned in the session.

        draw (Callable[[], str], optional):
            Zero-argument source of candidate codes.
            Defaults to `random_token` with the default length.

        max_attempts (int, optional):
            Number of draws before giving up.
            Defaults to 1000.

    Returns:
        str: A code not present in `used_codes`.

    Raises:
        ShortcodeGenerationError:
            If every one of `max_attempts` draws collided.

    Example:
        >>> draws = iter(['aaaaaa', 'aaaaaa', 'bbbbbb'])
        >>> generate_shortcode({'aaaaaa'}, draw=draws.__next__)
        'bbbbbb'
    """
    if max_attempts < 1:
        raise ValueError(f'Max attempts must be a positive integer (given value: {max_attempts}).')

    draw = draw or random_token
    for attempt in range(1, max_attempts + 1):
        candidate = draw()
        if candidate not in used_codes:
            return candidate
        logger.debug('Shortcode collision, redrawing.', extra={'shortcode': candidate, 'attempt': attempt})

    raise ShortcodeGenerationError(f'Could not draw an unused shortcode in {max_attempts} attempts.')
