"""
Verification runner: the create-then-read smoke test against the record store.

Usage (example from CLI):
    from store_check.runner import VerificationRunner

    result = VerificationRunner().execute()
    print(result.succeeded, result.contains_created)

Each run owns exactly one store connection. It is released once on every exit
path, and failures are reported to the log instead of being raised.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import List, Optional

from store_check.config import get_settings
from store_check.domain.models import Record
from store_check.infrastructure.abstract import StoreClient
from store_check.infrastructure.record_store import RecordStore
from store_check.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class VerificationResult:
    """
    Outcome of a single verification run.
    """

    created: Optional[Record] = field(default=None)
    records: List[Record] = field(default_factory=list)
    error: Optional[str] = field(default=None)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def contains_created(self) -> bool:
        """Whether the read-all step returned the record created in this run."""
        if self.created is None:
            return False
        return any(record.id == self.created.id for record in self.records)


class VerificationRunner:
    """
    Run connect -> insert -> report -> read-all -> report -> release once.

    Parameters
    ----------
    store : StoreClient, optional
        The store handle this run owns. Defaults to a `RecordStore` built from settings.
    entry_name : str, optional
        Name of the record to create. Defaults to settings.store_entry_name ("Test Entry").
    """

    def __init__(self, store: Optional[StoreClient] = None, entry_name: Optional[str] = None) -> None:
        settings = get_settings()
        self.store: StoreClient = store if store is not None else RecordStore()
        self.entry_name = entry_name or settings.store_entry_name

    async def run(self) -> VerificationResult:
        """
        Execute the verification flow. Never raises on store failures.
        """
        result = VerificationResult()
        try:
            await self.store.connect()

            result.created = await self.store.insert({"name": self.entry_name})
            log.info(
                "Created test entry: %s",
                result.created.model_dump(mode="json"),
                extra={"record_id": result.created.id, "table": self.store.table},
            )

            result.records = await self.store.find_all()
            log.info(
                "All test entries: %s",
                [record.model_dump(mode="json") for record in result.records],
                extra={"rows": len(result.records), "table": self.store.table},
            )

            if not result.contains_created:
                log.warning(
                    "Created entry missing from read-all result",
                    extra={"record_id": result.created.id, "rows": len(result.records)},
                )
        except Exception as exc:  # noqa: BLE001
            result.error = str(exc)
            log.error("Error: %s", exc, extra={"error_type": type(exc).__name__})
        finally:
            await self.store.disconnect()

        return result

    def execute(self) -> VerificationResult:
        """
        Run the verification from synchronous code.

        Raises
        ------
        RuntimeError
            If called while an event loop is already running; await `run()` instead.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.run())
        raise RuntimeError("execute() cannot run inside a running event loop; await run() instead")


__all__ = ["VerificationResult", "VerificationRunner"]
