from sessionshortener.dao.memory.result_store_memory_dao import ResultStoreMemoryDAO


__all__ = [
    'ResultStoreMemoryDAO',
]
