"""Execution result models returned by statement executors."""

from typing import Any

from pydantic import BaseModel, Field


class QueryResult(BaseModel):
    """Rows returned by a statement that produces a result set."""

    columns: list[str] = Field(default_factory=list)
    rows: list[dict[str, Any]] = Field(default_factory=list)
    row_count: int = Field(default=0, description="Number of rows returned")


class WriteResult(BaseModel):
    """Outcome of an INSERT, UPDATE or DELETE."""

    affected_rows: int = Field(default=0)
    insert_id: int | None = Field(default=None, description="Last auto-increment id, INSERT only")
