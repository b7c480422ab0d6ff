"""
Table-level read/write API over any ``StatementExecutor``.

Each method prepares a ``Statement`` with the pure builders, hands it to the
optional statement hook and awaits the executor. Build errors are raised
before the executor is touched.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from tablequery.builders import (
    prepare_count,
    prepare_delete_many,
    prepare_delete_one,
    prepare_find,
    prepare_find_one,
    prepare_insert_many,
    prepare_insert_one,
    prepare_update_many,
    prepare_update_one,
)
from tablequery.builders.statements import Options
from tablequery.models import QueryResult, Statement, WriteResult
from tablequery.shared.protocols import StatementExecutor, StatementHook

logger = logging.getLogger(__name__)


def log_statement(statement: Statement) -> None:
    """Statement hook that logs the SQL with its bound values at DEBUG."""
    logger.debug("Statement: %s", statement.display())


class TableGateway:
    """
    Async find/count/insert/update/delete over single tables.

    Usage:
        async with MysqlClient(settings) as client:
            gateway = TableGateway(client, hook=log_statement)
            rows = await gateway.find_many("users", {"country": "FR"}, {"sort": {"id": "ASC"}})
    """

    def __init__(self, executor: StatementExecutor, hook: StatementHook | None = None):
        """
        Initialize the gateway.

        Args:
            executor: Runs the prepared SQL (e.g. ``MysqlClient``).
            hook: Optional callable receiving every statement before execution.
        """
        self.executor = executor
        self.hook = hook

    async def run(self, statement: Statement) -> QueryResult | WriteResult:
        """Execute a prepared statement."""
        if self.hook is not None:
            self.hook(statement)
        return await self.executor.execute(statement.sql, statement.params)

    async def query(self, sql: str, params: list[Any] | None = None) -> QueryResult | WriteResult:
        """Execute raw SQL with ``?`` placeholders."""
        return await self.run(Statement(sql=sql, params=list(params or [])))

    async def _read(self, statement: Statement) -> list[dict[str, Any]]:
        result = await self.run(statement)
        if not isinstance(result, QueryResult):
            raise TypeError(f"Expected rows from SELECT, got {type(result).__name__}")
        return result.rows

    async def _write(self, statement: Statement) -> WriteResult:
        result = await self.run(statement)
        if not isinstance(result, WriteResult):
            raise TypeError(f"Expected a write result, got {type(result).__name__}")
        return result

    # -- Reads -------------------------------------------------------------

    async def find_many(
        self,
        table: str,
        criteria: Mapping[str, Any] | None = None,
        options: Options = None,
    ) -> list[dict[str, Any]]:
        """
        Return all rows matching *criteria*.

        Args:
            table: Table name.
            criteria: Ordered equality criteria; empty matches every row.
            options: projections, sort, limit and offset.

        Returns:
            Matching rows as dicts.
        """
        logger.debug("find_many on %s", table)
        return await self._read(prepare_find(table, criteria, options))

    async def find_one(
        self,
        table: str,
        criteria: Mapping[str, Any] | None = None,
        options: Options = None,
    ) -> dict[str, Any] | None:
        """Return the first matching row, or ``None``."""
        logger.debug("find_one on %s", table)
        rows = await self._read(prepare_find_one(table, criteria, options))
        return rows[0] if rows else None

    async def count(self, table: str, criteria: Mapping[str, Any] | None = None) -> int:
        """Return the number of rows matching *criteria*."""
        logger.debug("count on %s", table)
        rows = await self._read(prepare_count(table, criteria))
        if not rows:
            return 0
        return int(rows[0]["count"])

    # -- Writes ------------------------------------------------------------

    async def insert_many(self, table: str, rows: Sequence[Mapping[str, Any]]) -> WriteResult:
        """Insert a batch of identically shaped rows in one statement."""
        statement = prepare_insert_many(table, rows)
        logger.debug("insert_many on %s: %d rows", table, len(rows))
        return await self._write(statement)

    async def insert_one(self, table: str, row: Mapping[str, Any]) -> WriteResult:
        """Insert a single row; ``insert_id`` carries the auto-increment id if any."""
        logger.debug("insert_one on %s", table)
        return await self._write(prepare_insert_one(table, row))

    async def update_many(
        self,
        table: str,
        match: Mapping[str, Any] | None,
        set_map: Mapping[str, Any],
        options: Options = None,
    ) -> WriteResult:
        """Update every row matching *match* (every row when it is empty)."""
        logger.debug("update_many on %s", table)
        return await self._write(prepare_update_many(table, match, set_map, options))

    async def update_one(
        self,
        table: str,
        match: Mapping[str, Any],
        set_map: Mapping[str, Any],
        options: Options = None,
    ) -> WriteResult:
        """Update the first row matching a non-empty *match*."""
        logger.debug("update_one on %s", table)
        return await self._write(prepare_update_one(table, match, set_map, options))

    async def delete_many(self, table: str, match: Mapping[str, Any], options: Options = None) -> WriteResult:
        """Delete every row matching a non-empty *match*."""
        logger.debug("delete_many on %s", table)
        return await self._write(prepare_delete_many(table, match, options))

    async def delete_one(self, table: str, match: Mapping[str, Any], options: Options = None) -> WriteResult:
        """Delete the first row matching a non-empty *match*; ``sort`` picks which."""
        logger.debug("delete_one on %s", table)
        return await self._write(prepare_delete_one(table, match, options))
