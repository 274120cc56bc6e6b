"""
Domain models for store-check.

Defines the record schema aligned with `db/init.sql`. Rows returned by the
store are validated into this model before they reach the runner.
"""
from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class Record(BaseModel):
    """
    Representation of a single row in the `"Test"` table.
    """

    id: int = Field(..., description="Primary key (SERIAL), assigned by the store.")
    name: str = Field(..., description="Caller-provided label.")
    created_at: datetime = Field(..., description="Row creation timestamp, assigned by the store.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }


__all__ = ["Record"]
