"""
Domain package for store-check.

Exports the record model shared by the store client and the runner.
Keep this package focused on data definitions and validation concerns.
"""

from store_check.domain.models import Record

__all__ = [
    "Record",
]
