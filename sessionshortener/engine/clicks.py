"""Click simulator

Functions:
    record_click(store, shortcode, *, now=None, source='localhost', location='India') -> ResultStoreBaseDAO
        Append one simulated click to the result(s) with the given shortcode.
"""

import logging
from datetime import datetime

from sessionshortener.constants import ClickPlaceholder
from sessionshortener.dao.base import ResultStoreBaseDAO
from sessionshortener.models import ClickEvent
from sessionshortener.utils.helpers import utcnow


logger = logging.getLogger(__name__)


def record_click(
    store: ResultStoreBaseDAO,
    shortcode: str,
    *,
    now: datetime | None = None,
    source: str = ClickPlaceholder.SOURCE,
    location: str = ClickPlaceholder.LOCATION,
) -> ResultStoreBaseDAO:
    """Record a simulated click

    An unknown shortcode is silently ignored: the store is returned unchanged.

    Args:
        store (ResultStoreBaseDAO):
            Result store holding the clicked URL.
        shortcode (str):
            Shortcode of the clicked URL.
        now (datetime, optional):
            Click moment. Defaults to the current UTC time.
        source (str, optional):
            Click source placeholder.
        location (str, optional):
            Click location placeholder.

    Returns:
        ResultStoreBaseDAO: the same store (for method chaining)

    Example:
        >>> record_click(dao, 'k3x9qa').get('k3x9qa').click_count
        1
    """
    if shortcode not in store:
        logger.debug('Ignored click on unknown shortcode.', extra={'shortcode': shortcode})
        return store

    store.append_click(shortcode, ClickEvent(timestamp=now or utcnow(), source=source, location=location))
    return store
