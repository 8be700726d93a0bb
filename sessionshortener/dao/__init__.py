from sessionshortener.dao.base import ResultStoreBaseDAO
from sessionshortener.dao.memory import ResultStoreMemoryDAO


__all__ = [
    'ResultStoreBaseDAO',
    'ResultStoreMemoryDAO',
]
