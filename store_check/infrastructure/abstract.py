"""
Store client interface for store-check.

The verification runner talks to the store only through `StoreClient`, so a
real `RecordStore` and lightweight test doubles are interchangeable.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Mapping, Protocol, runtime_checkable

from store_check.domain.models import Record


class StoreState(str, Enum):
    """Connection lifecycle: Idle -> Connected -> Closed."""

    IDLE = "idle"
    CONNECTED = "connected"
    CLOSED = "closed"


@runtime_checkable
class StoreClient(Protocol):
    """
    Minimal surface a persistent record store must expose.

    Attributes
    ----------
    table : str
        Name of the entity (table) the client reads and writes.
    """

    table: str

    async def connect(self) -> None:
        """Open the underlying connection."""
        ...

    async def insert(self, fields: Mapping[str, Any]) -> Record:
        """
        Create one record and return it with its store-assigned values.

        Parameters
        ----------
        fields : Mapping[str, Any]
            Column values supplied by the caller.
        """
        ...

    async def find_all(self) -> List[Record]:
        """Return every record currently in the table."""
        ...

    async def disconnect(self) -> None:
        """Release the connection. Safe to call more than once."""
        ...


__all__ = ["StoreClient", "StoreState"]
