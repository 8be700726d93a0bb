"""Domain models for a shortening session.

Classes:
    PendingEntry:
        Mutable form state for one URL waiting to be shortened.

    ClickEvent:
        A single simulated click on a short URL.

    ShortenedResult:
        A shortened URL owned by the result store.

    StatisticsRow:
        Read-only projection of a ShortenedResult for the statistics view.

    Notification:
        The transient banner shown after user actions.

Example:
    >>> from datetime import datetime, UTC
    >>> result = ShortenedResult(
    ...     shortcode='k3x9qa',
    ...     original='https://example.com',
    ...     expires_at='never',
    ...     created_at=datetime(2026, 1, 1, tzinfo=UTC),
    ... )
    >>> result.click_count
    0
"""

import uuid
import dataclasses
from dataclasses import dataclass, field
from datetime import datetime

from sessionshortener.constants import NEVER, Severity
from sessionshortener.types import Expiry


def _new_entry_id() -> str:
    return str(uuid.uuid4())


@dataclass
class PendingEntry:
    """Represent one URL in the collector.

    Attributes:
        original (str):
            URL candidate exactly as typed.
        expiry_minutes (str):
            Optional expiry duration in minutes. Empty means the link never expires.
        custom_code (str):
            Optional user-supplied shortcode. Empty means a random one is drawn.
        error (str):
            Last validation message for this entry, empty when valid.
        id (str):
            Opaque identifier used to address the entry while editing.
    """

    original: str = ''
    expiry_minutes: str = ''
    custom_code: str = ''
    error: str = ''
    id: str = field(default_factory=_new_entry_id)


# fmt: off
@dataclass(frozen=True)
class ClickEvent:
    timestamp: datetime  # Moment the click was simulated (UTC)
    source: str          # Placeholder click source
    location: str        # Placeholder click location
# fmt: on


@dataclass(frozen=True)
class ShortenedResult:
    """Represent a shortened URL.

    Attributes:
        shortcode (str):
            Short identifier, unique within the session for generated codes.
        original (str):
            The validated original URL.
        expires_at (datetime | str):
            Absolute expiry moment in UTC, or 'never'.
        created_at (datetime):
            Moment the batch holding this URL was shortened (UTC).
        clicks (tuple[ClickEvent, ...]):
            Simulated clicks, oldest first.
    """

    shortcode: str
    original: str
    expires_at: Expiry
    created_at: datetime
    clicks: tuple[ClickEvent, ...] = ()

    @property
    def click_count(self) -> int:
        return len(self.clicks)

    @property
    def never_expires(self) -> bool:
        return self.expires_at == NEVER

    def with_click(self, click: ClickEvent) -> 'ShortenedResult':
        """Return a copy of this result with `click` appended."""
        return dataclasses.replace(self, clicks=(*self.clicks, click))


# fmt: off
@dataclass(frozen=True)
class StatisticsRow:
    shortcode: str                  # Shortcode of the tracked URL
    click_count: int                # Number of simulated clicks
    expires_at: Expiry              # Expiry moment or 'never'
    clicks: tuple[ClickEvent, ...]  # Click details, oldest first

    @classmethod
    def from_result(cls, result: ShortenedResult) -> 'StatisticsRow':
        return cls(
            shortcode=result.shortcode,
            click_count=result.click_count,
            expires_at=result.expires_at,
            clicks=result.clicks,
        )
# fmt: on


@dataclass(frozen=True)
class Notification:
    message: str = ''
    severity: Severity = Severity.INFO
    open: bool = False

    def close(self) -> 'Notification':
        return dataclasses.replace(self, open=False)
