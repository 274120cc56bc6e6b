"""
Database connection factory utilities for store-check.

Centralizes how the store location is resolved from settings and how async
psycopg connections are opened. Connections come back in autocommit mode with
dict rows, which is what the record store expects.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from psycopg import AsyncConnection
from psycopg.rows import dict_row

from store_check.config import get_settings


def build_dsn(dsn_override: Optional[str] = None) -> str:
    """Compose a DSN string from settings unless an override is given."""
    if dsn_override:
        return dsn_override
    return get_settings().dsn()


async def get_async_connection(
    conninfo: Optional[str] = None,
    connect_timeout: Optional[int] = None,
) -> AsyncConnection[Dict[str, Any]]:
    """
    Open a dedicated asynchronous connection.

    Parameters
    ----------
    conninfo : str, optional
        Connection string. Defaults to the one built from settings.
    connect_timeout : int, optional
        Seconds to wait for the server. Defaults to settings.db_connect_timeout.

    Returns
    -------
    AsyncConnection
        A new psycopg connection in autocommit mode using `dict_row`.

    Raises
    ------
    psycopg.OperationalError
        If the server cannot be reached or rejects the credentials.
    """
    settings = get_settings()
    timeout = connect_timeout if connect_timeout is not None else settings.db_connect_timeout
    return await AsyncConnection.connect(
        build_dsn(conninfo),
        autocommit=True,
        row_factory=dict_row,
        connect_timeout=timeout,
    )


__all__ = [
    "build_dsn",
    "get_async_connection",
]
