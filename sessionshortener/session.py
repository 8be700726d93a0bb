"""Session coordinator

A ShortenerSession is the whole application state of one run: the collector
of pending entries, the result store and the notification banner. Every user
action goes through one of its methods; rendering functions only read from it.

Example:
    >>> session = ShortenerSession()
    >>> session.update_entry(0, 'original', 'https://example.com')
    >>> session.shorten().ok
    True
    >>> session.notification.message
    'URLs shortened successfully!'
    >>> code = session.results()[0].shortcode
    >>> session.simulate_click(code)
    >>> session.statistics()[0].click_count
    1
"""

import random
import logging
import functools

from sessionshortener.constants import EDITABLE_FIELDS, Messages, Severity
from sessionshortener.dao import ResultStoreBaseDAO, ResultStoreMemoryDAO
from sessionshortener.engine import BatchOutcome, shorten_batch, record_click
from sessionshortener.models import PendingEntry, ShortenedResult, StatisticsRow, Notification
from sessionshortener.utils.config import Settings
from sessionshortener.utils.helpers import utcnow
from sessionshortener.utils.shortener import random_token
from sessionshortener.types import Clock, ShortcodeDraw


logger = logging.getLogger(__name__)


class ShortenerSession:
    """Explicit application state for one shortening session.

    Attributes:
        entries (list[PendingEntry]):
            The collector. Never empty.
        store (ResultStoreBaseDAO):
            Result store owning every ShortenedResult.
        notification (Notification):
            Current banner state.

    Args:
        settings (Settings, optional):
            Collector capacity and shortcode length. Defaults to `Settings()`.
        store (ResultStoreBaseDAO, optional):
            Result store. Defaults to a fresh ResultStoreMemoryDAO.
        draw (Callable[[], str], optional):
            Source of random shortcode candidates.
            Defaults to `random_token` with the configured length.
        clock (Callable[[], datetime], optional):
            Source of the current time. Defaults to `utcnow`.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        store: ResultStoreBaseDAO | None = None,
        draw: ShortcodeDraw | None = None,
        clock: Clock | None = None,
    ):
        self.settings = settings or Settings()
        self.store = store if store is not None else ResultStoreMemoryDAO()
        self.draw = draw or functools.partial(random_token, random.Random(), length=self.settings.shortcode_length)
        self.clock = clock or utcnow
        self.entries: list[PendingEntry] = [PendingEntry()]
        self.notification = Notification()

    # -------------------------------
    # Collector
    # -------------------------------

    @property
    def at_capacity(self) -> bool:
        return len(self.entries) >= self.settings.max_pending_entries

    def add_entry(self) -> PendingEntry | None:
        """Append an empty entry to the collector.

        At capacity the collector is left unchanged and a warning banner is shown.

        Returns:
            PendingEntry | None: the new entry, or None when the collector is full.
        """
        if self.at_capacity:
            self._notify(Messages.TOO_MANY_ENTRIES.format(limit=self.settings.max_pending_entries), Severity.WARNING)
            return None

        entry = PendingEntry()
        self.entries.append(entry)
        return entry

    def update_entry(self, index: int, field: str, value: str) -> None:
        """Edit one field of a pending entry.

        Raises:
            IndexError: If there is no entry at `index`.
            ValueError: If `field` is not an editable field.
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown entry field '{field}' (expected one of {sorted(EDITABLE_FIELDS)}).")
        setattr(self._entry_at(index), field, value)

    def remove_entry(self, index: int) -> PendingEntry:
        entry = self._entry_at(index)
        del self.entries[index]
        if not self.entries:
            self.entries.append(PendingEntry())
        return entry

    def reset_entries(self) -> None:
        self.entries = [PendingEntry()]

    # -------------------------------
    # Shortening and clicks
    # -------------------------------

    def shorten(self) -> BatchOutcome:
        """Shorten every pending entry as one batch.

        The batch is committed all-or-nothing: when any entry fails validation
        no result is stored, failing entries keep their error message and the
        collector is left as it is. Otherwise every result is appended to the
        store in input order and the collector is reset.

        Returns:
            BatchOutcome: the engine's outcome for this batch.
        """
        outcome = shorten_batch(
            self.entries,
            self.store.codes(),
            draw=self.draw,
            now=self.clock(),
            max_entries=self.settings.max_pending_entries,
        )

        for entry in self.entries:
            entry.error = outcome.errors.get(entry.id, '')

        if not outcome.ok:
            logger.info('Rejected batch.', extra={'entries': len(self.entries), 'errors': len(outcome.errors)})
            self._notify(Messages.CORRECT_ERRORS, Severity.ERROR)
            return outcome

        self.store.insert_many(outcome.results)
        self.reset_entries()
        logger.info('Batch shortened.', extra={'shortcodes': [result.shortcode for result in outcome.results]})
        self._notify(Messages.SHORTENED, Severity.SUCCESS)
        return outcome

    def simulate_click(self, shortcode: str) -> None:
        record_click(self.store, shortcode, now=self.clock())

    # -------------------------------
    # Views
    # -------------------------------

    def results(self) -> tuple[ShortenedResult, ...]:
        return self.store.all()

    def statistics(self) -> tuple[StatisticsRow, ...]:
        return tuple(StatisticsRow.from_result(result) for result in self.store.all())

    def dismiss_notification(self) -> None:
        self.notification = self.notification.close()

    # -------------------------------
    # Internals
    # -------------------------------

    def _entry_at(self, index: int) -> PendingEntry:
        if not 0 <= index < len(self.entries):
            raise IndexError(f'No pending entry at position {index + 1} (have {len(self.entries)}).')
        return self.entries[index]

    def _notify(self, message: str, severity: Severity) -> None:
        self.notification = Notification(message=message, severity=severity, open=True)
