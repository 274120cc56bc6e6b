"""
Infrastructure package for store-check.

Centralizes database connectivity concerns (connection factory, store client).
Keep this layer focused on I/O and resource management, decoupled from the
verification flow.
"""

from store_check.infrastructure.abstract import StoreClient, StoreState
from store_check.infrastructure.db_factory import build_dsn, get_async_connection
from store_check.infrastructure.record_store import RecordStore

__all__ = [
    "RecordStore",
    "StoreClient",
    "StoreState",
    "build_dsn",
    "get_async_connection",
]
