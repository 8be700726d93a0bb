"""In-memory, single-session URL shortener demo."""

__version__ = '0.1.0'
