"""Abstract base class for result store data access objects (DAOs).

The result store owns every ShortenedResult created during a session and the
click events recorded against them. Records are appended batch by batch and
only ever change by gaining clicks.

Example:
    Typical usage with the in-memory implementation:

        >>> from sessionshortener.dao import ResultStoreMemoryDAO
        >>> dao = ResultStoreMemoryDAO()
        >>> dao.insert_many([result])
        <ResultStoreMemoryDAO>
        >>> dao.get(result.shortcode).original
        'https://example.com'
        >>> dao.codes()
        frozenset({'k3x9qa'})
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from sessionshortener.models import ShortenedResult, ClickEvent


class ResultStoreBaseDAO(ABC):
    """Interface for result store data access objects (DAOs).

    Methods:
        insert_many(results: Iterable[ShortenedResult]) -> ResultStoreBaseDAO:
            Append results in the given order.

        get(shortcode: str) -> ShortenedResult:
            Retrieve the first result with the given shortcode.
            Raises ShortURLNotFoundError if none exists.

        all() -> tuple[ShortenedResult, ...]:
            Every stored result in insertion order.

        codes() -> frozenset[str]:
            Every shortcode currently in the store.

        append_click(shortcode: str, click: ClickEvent) -> int:
            Append a click to every result with the given shortcode.
            Returns the number of results updated.

    NOTE:
        - Results are never deleted or edited apart from appending clicks.
    """

    @abstractmethod
    def insert_many(self, results: Iterable[ShortenedResult]) -> 'ResultStoreBaseDAO':
        """Append results to the store, preserving their order.

        Args:
            results (Iterable[ShortenedResult]):
                Results produced by one successful batch.

        Returns:
            ResultStoreBaseDAO: self (for method chaining)
        """
        pass

    @abstractmethod
    def get(self, shortcode: str) -> ShortenedResult:
        """Retrieve a result by its shortcode.

        Raises:
            ShortURLNotFoundError:
                If no result with the given shortcode exists.
        """
        pass

    @abstractmethod
    def all(self) -> tuple[ShortenedResult, ...]:
        pass

    @abstractmethod
    def codes(self) -> frozenset[str]:
        pass

    @abstractmethod
    def append_click(self, shortcode: str, click: ClickEvent) -> int:
        """Append `click` to every result whose shortcode matches.

        Args:
            shortcode (str):
                Shortcode of the clicked URL.
            click (ClickEvent):
                The click to record.

        Returns:
            int: number of results updated (0 for an unknown shortcode).
        """
        pass

    def __len__(self) -> int:
        return len(self.all())

    def __contains__(self, shortcode: object) -> bool:
        return shortcode in self.codes()
