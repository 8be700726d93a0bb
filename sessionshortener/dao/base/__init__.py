from sessionshortener.dao.base.result_store_base_dao import ResultStoreBaseDAO


__all__ = [
    'ResultStoreBaseDAO',
]
