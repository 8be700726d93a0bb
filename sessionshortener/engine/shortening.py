"""Shortening engine: validate a batch of pending entries and assign shortcodes

Every entry of a batch is processed in input order:

    1. Validate the original URL (scheme and host required) and the optional
       expiry duration, and compute the expiry moment ('never' without a
       duration, rejected when it falls past the datetime range). A failing
       entry gets an error message and produces no result; the remaining
       entries are still processed.
    2. Assign a shortcode. A custom code is used verbatim. Otherwise a random
       code is drawn until it is unused by the session and by earlier entries
       of the same batch.
    3. Collect the result.
    4. Stamp the creation moment.

`shorten_batch` is pure: it reads the entries and the set of existing codes
and returns a BatchOutcome. Committing the results (all-or-nothing) and
writing error messages back to the entries is left to the caller.

Example:
    >>> outcome = shorten_batch([PendingEntry(original='https://example.com')], existing_codes=set())
    >>> outcome.ok
    True
    >>> outcome.results[0].expires_at
    'never'
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from collections.abc import Collection, Mapping, Sequence

from sessionshortener.constants import Limits
from sessionshortener.exceptions import ValidationError, TooManyEntriesError
from sessionshortener.models import PendingEntry, ShortenedResult
from sessionshortener.types import ShortcodeDraw
from sessionshortener.utils.helpers import utcnow, compute_expiry
from sessionshortener.utils.shortener import generate_shortcode
from sessionshortener.utils.validation import validate_url, parse_expiry_minutes


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BatchOutcome:
    """Result of shortening one batch.

    Attributes:
        results (tuple[ShortenedResult, ...]):
            Results for the entries that validated, in input order.
        errors (Mapping[str, str]):
            Validation message per failing entry id.
    """

    results: tuple[ShortenedResult, ...] = ()
    errors: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def ok(self) -> bool:
        return not self.errors


def shorten_batch(
    entries: Sequence[PendingEntry],
    existing_codes: Collection[str],
    *,
    draw: ShortcodeDraw | None = None,
    now: datetime | None = None,
    max_entries: int = Limits.MAX_PENDING_ENTRIES,
) -> BatchOutcome:
    """Shorten a batch of pending entries.

    Args:
        entries (Sequence[PendingEntry]):
            Up to `max_entries` entries, in display order.

        existing_codes (Collection[str]):
            Shortcodes already present in the result store.

        draw (Callable[[], str], optional):
            Source of random shortcode candidates.
            Defaults to `random_token`.

        now (datetime, optional):
            Creation moment shared by the whole batch.
            Defaults to the current UTC time.

        max_entries (int, optional):
            Largest accepted batch.
            Defaults to 5.

    Returns:
        BatchOutcome: results of valid entries and errors of invalid ones.

    Raises:
        TooManyEntriesError:
            If the batch holds more than `max_entries` entries.
        ShortcodeGenerationError:
            If no unused random shortcode could be drawn.
    """
    if len(entries) > max_entries:
        raise TooManyEntriesError(f'Batch holds {len(entries)} entries (max {max_entries}).')

    now = now or utcnow()
    used_codes = set(existing_codes)
    results: list[ShortenedResult] = []
    errors: dict[str, str] = {}

    for entry in entries:
        try:
            original = validate_url(entry.original)
            expires_at = compute_expiry(parse_expiry_minutes(entry.expiry_minutes), now)
        except ValidationError as e:
            errors[entry.id] = str(e)
            logger.info('Rejected pending entry.', extra={'entryId': entry.id, 'reason': e.error_code})
            continue

        if entry.custom_code:
            shortcode = entry.custom_code
            # NOTE: custom codes are taken as-is; a duplicate is only reported
            if shortcode in used_codes:
                logger.warning('Custom shortcode is already in use.', extra={'shortcode': shortcode})
        else:
            shortcode = generate_shortcode(used_codes, draw=draw)
        used_codes.add(shortcode)

        results.append(
            ShortenedResult(
                shortcode=shortcode,
                original=original,
                expires_at=expires_at,
                created_at=now,
            )
        )

    return BatchOutcome(results=tuple(results), errors=MappingProxyType(errors))
