"""
store-check - smoke test for a Postgres-backed record store.

Connects to the store, creates one "Test Entry" record, reads every record
back, logs both results and always releases the connection. Store failures
are logged rather than raised, so the run itself never crashes the process.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from store_check.config import Settings, get_settings
from store_check.domain.models import Record
from store_check.errors import StoreError
from store_check.infrastructure.abstract import StoreClient, StoreState
from store_check.infrastructure.record_store import RecordStore
from store_check.runner import VerificationResult, VerificationRunner
from store_check.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Record",
    "StoreError",
    # Store
    "RecordStore",
    "StoreClient",
    "StoreState",
    # Verification
    "VerificationResult",
    "VerificationRunner",
    # Logging
    "configure_logging",
    "get_logger",
]
