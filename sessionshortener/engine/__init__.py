from sessionshortener.engine.shortening import BatchOutcome, shorten_batch
from sessionshortener.engine.clicks import record_click


__all__ = [
    'BatchOutcome',
    'shorten_batch',
    'record_click',
]
