from linkshortener.store.mapping_store import MappingStore
from linkshortener.store.factory import build_store, default_store, init_store


__all__ = [
    'MappingStore',
    'build_store',
    'default_store',
    'init_store',
]
