"""
Utilities package for store-check.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from store_check.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
