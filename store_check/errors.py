"""
Error types for store-check.

The verification flow does not distinguish connectivity, constraint and
decoding failures, so the store surfaces all of them as `StoreError`.
"""

from __future__ import annotations


class StoreError(RuntimeError):
    """Any failure raised by the record store."""


__all__ = ["StoreError"]
