"""
Postgres-backed record store for store-check.

`RecordStore` owns a single psycopg async connection for its whole lifetime and
moves through Idle -> Connected -> Closed exactly once. Driver, network and
row-decoding failures are re-raised as `StoreError`.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import psycopg
from psycopg import AsyncConnection, sql
from pydantic import ValidationError

from store_check.config import get_settings
from store_check.domain.models import Record
from store_check.errors import StoreError
from store_check.infrastructure.abstract import StoreState
from store_check.infrastructure.db_factory import get_async_connection
from store_check.utils.logging import get_logger

log = get_logger(__name__)

_RETURNING = sql.SQL(", ").join(map(sql.Identifier, ("id", "name", "created_at")))


def _to_record(row: Optional[Mapping[str, Any]]) -> Record:
    if row is None:
        raise StoreError("store returned no row")
    try:
        return Record.model_validate(dict(row))
    except ValidationError as exc:
        raise StoreError(f"could not decode row {dict(row)!r}: {exc}") from exc


class RecordStore:
    """
    Store client for one table of records.

    Example
    -------
        async with RecordStore() as store:
            created = await store.insert({"name": "Test Entry"})
            records = await store.find_all()
    """

    def __init__(
        self,
        conninfo: Optional[str] = None,
        table: Optional[str] = None,
        connect_timeout: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self._conninfo = conninfo
        self.table = table or settings.store_table
        self._connect_timeout = connect_timeout
        self._conn: Optional[AsyncConnection[Dict[str, Any]]] = None
        self._state = StoreState.IDLE
        self.close_count = 0

    @property
    def state(self) -> StoreState:
        return self._state

    async def connect(self) -> None:
        """
        Open the connection. No-op when already connected.

        Raises
        ------
        StoreError
            If the store is unreachable or this store was already closed.
        """
        if self._state is StoreState.CONNECTED:
            return
        if self._state is StoreState.CLOSED:
            raise StoreError("store connection already closed")
        try:
            self._conn = await get_async_connection(self._conninfo, self._connect_timeout)
        except (psycopg.Error, OSError) as exc:
            raise StoreError(f"could not connect to store: {exc}") from exc
        self._state = StoreState.CONNECTED
        log.debug("Store connected", extra={"table": self.table})

    async def _connection(self) -> AsyncConnection[Dict[str, Any]]:
        # First use connects implicitly.
        await self.connect()
        assert self._conn is not None
        return self._conn

    async def insert(self, fields: Mapping[str, Any]) -> Record:
        """
        Insert one row and return it as stored.

        Parameters
        ----------
        fields : Mapping[str, Any]
            Column values. Must not be empty.

        Returns
        -------
        Record
            The created record including `id` and `created_at`.
        """
        if not fields:
            raise StoreError("insert requires at least one field")
        conn = await self._connection()
        columns = list(fields)
        query = sql.SQL("INSERT INTO {table} ({columns}) VALUES ({values}) RETURNING {returning}").format(
            table=sql.Identifier(self.table),
            columns=sql.SQL(", ").join(map(sql.Identifier, columns)),
            values=sql.SQL(", ").join(sql.Placeholder() * len(columns)),
            returning=_RETURNING,
        )
        try:
            async with conn.cursor() as cur:
                await cur.execute(query, [fields[column] for column in columns])
                row = await cur.fetchone()
        except psycopg.Error as exc:
            raise StoreError(f"insert into {self.table!r} failed: {exc}") from exc
        return _to_record(row)

    async def find_all(self) -> List[Record]:
        """
        Read every row of the table, ordered by id.
        """
        conn = await self._connection()
        query = sql.SQL("SELECT {returning} FROM {table} ORDER BY {id}").format(
            returning=_RETURNING,
            table=sql.Identifier(self.table),
            id=sql.Identifier("id"),
        )
        try:
            async with conn.cursor() as cur:
                await cur.execute(query)
                rows = await cur.fetchall()
        except psycopg.Error as exc:
            raise StoreError(f"reading {self.table!r} failed: {exc}") from exc
        return [_to_record(row) for row in rows]

    async def disconnect(self) -> None:
        """
        Close the connection. Only the first call has any effect.

        A failure while closing is logged and not raised, since there is
        nothing left for the caller to recover.
        """
        if self._state is StoreState.CLOSED:
            return
        conn, self._conn = self._conn, None
        self._state = StoreState.CLOSED
        self.close_count += 1
        if conn is None:
            return
        try:
            await conn.close()
        except (psycopg.Error, OSError) as exc:
            log.warning("Failed to close store connection", extra={"error": str(exc)})
        log.debug("Store disconnected", extra={"table": self.table})

    async def __aenter__(self) -> "RecordStore":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()


__all__ = ["RecordStore"]
