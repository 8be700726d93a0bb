"""In-memory implementation of the result store

Results live in a plain list for the lifetime of the process. Stored
ShortenedResult instances are frozen; recording a click swaps the record for
a copy holding the extra click, so previously returned snapshots never change.

Classes:
    ResultStoreMemoryDAO:
        DAO for storing and retrieving ShortenedResult in process memory.
"""

import logging
from collections.abc import Iterable

from beartype import beartype

from sessionshortener.models import ShortenedResult, ClickEvent
from sessionshortener.dao.base import ResultStoreBaseDAO
from sessionshortener.dao.exceptions import ShortURLNotFoundError


logger = logging.getLogger(__name__)


class ResultStoreMemoryDAO(ResultStoreBaseDAO):
    """List-backed result store.

    Example:
        >>> dao = ResultStoreMemoryDAO()
        >>> len(dao)
        0
    """

    def __init__(self, results: Iterable[ShortenedResult] = ()):
        self._results: list[ShortenedResult] = []
        if results:
            self.insert_many(results)

    def __repr__(self) -> str:
        return f'<ResultStoreMemoryDAO results={len(self._results)}>'

    @beartype
    def insert_many(self, results: Iterable[ShortenedResult]) -> 'ResultStoreMemoryDAO':
        results = list(results)
        for result in results:
            if not isinstance(result, ShortenedResult):
                raise TypeError(f'Expected ShortenedResult (given type: {type(result)}).')

        self._results.extend(results)
        logger.debug('Inserted results.', extra={'count': len(results), 'total': len(self._results)})
        return self

    @beartype
    def get(self, shortcode: str) -> ShortenedResult:
        for result in self._results:
            if result.shortcode == shortcode:
                return result
        raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

    def all(self) -> tuple[ShortenedResult, ...]:
        return tuple(self._results)

    def codes(self) -> frozenset[str]:
        return frozenset(result.shortcode for result in self._results)

    @beartype
    def append_click(self, shortcode: str, click: ClickEvent) -> int:
        updated = 0
        for index, result in enumerate(self._results):
            if result.shortcode == shortcode:
                self._results[index] = result.with_click(click)
                updated += 1
        return updated

    def __len__(self) -> int:
        return len(self._results)
