"""
MySQL statement executor.

This module provides an async client that runs ``?``-parameterised
statements against MySQL through the MySQL ODBC driver.
"""

import logging
from typing import Any

from tablequery.config import Settings, get_settings
from tablequery.models import QueryResult, Statement, WriteResult
from tablequery.shared.errors import ConnectionNotEstablishedError
from tablequery.shared.protocols import ConnectionListener, NoOpListener

logger = logging.getLogger(__name__)

# Settings keys the client keeps; anything else in Settings is ignored here
_CONFIG_KEYS = ("mysql_host", "mysql_port", "mysql_user", "mysql_password", "mysql_database", "odbc_driver")


def _to_json_safe(value: Any) -> Any:
    if value is None or isinstance(value, (int, float, str, bool)):
        return value
    return str(value)


class MysqlClient:
    """
    Async context manager for MySQL statement execution.

    Satisfies the ``StatementExecutor`` protocol.

    Usage:
        async with MysqlClient() as client:
            result = await client.execute("SELECT * FROM users WHERE id=?", [4])
    """

    def __init__(
        self,
        settings: Settings | None = None,
        listener: ConnectionListener | None = None,
        log_statements: bool | None = None,
    ):
        """
        Initialize the client.

        Args:
            settings: Connection settings. Defaults to ``get_settings()``.
            listener: Notified on connect and disconnect.
            log_statements: Log bound values with each statement. Defaults to the setting.
        """
        settings = settings or get_settings()
        self.config: dict[str, Any] = {key: getattr(settings, key) for key in _CONFIG_KEYS}
        self.listener: ConnectionListener = listener or NoOpListener()
        self.log_statements = settings.log_statements if log_statements is None else log_statements
        self._connection: Any = None

    @property
    def connected(self) -> bool:
        """Whether a connection is currently held."""
        return self._connection is not None

    def connection_string(self) -> str:
        """Build the ODBC connection string from the kept config."""
        return (
            f"DRIVER={{{self.config['odbc_driver']}}};"
            f"SERVER={self.config['mysql_host']};"
            f"PORT={self.config['mysql_port']};"
            f"DATABASE={self.config['mysql_database']};"
            f"UID={self.config['mysql_user']};"
            f"PWD={self.config['mysql_password']};"
        )

    async def connect(self) -> None:
        """Open the connection and notify the listener.

        Raises:
            The driver's error when the connection cannot be opened.
        """
        # pyodbc loads the system ODBC library on import
        import aioodbc

        self._connection = await aioodbc.connect(dsn=self.connection_string(), autocommit=True)
        logger.info(
            "Connected to MySQL at %s:%s/%s",
            self.config["mysql_host"],
            self.config["mysql_port"],
            self.config["mysql_database"],
        )
        self.listener.connected(self)

    async def disconnect(self) -> None:
        """Close the connection if open; the listener is notified even if closing fails."""
        try:
            if self._connection is not None and not self._connection.closed:
                await self._connection.close()
            self._connection = None
        finally:
            logger.info("Disconnected from MySQL")
            self.listener.disconnected(self)

    async def __aenter__(self):
        """Establish the database connection."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Close the database connection."""
        await self.disconnect()

    async def execute(self, query: str, params: list[Any] | None = None) -> QueryResult | WriteResult:
        """
        Execute a statement and return its rows or write outcome.

        Args:
            query: SQL statement with ``?`` placeholders.
            params: Bind values in placeholder order.

        Returns:
            ``QueryResult`` when the statement produced a result set, else
            ``WriteResult`` (with ``insert_id`` for INSERT statements).

        Raises:
            ConnectionNotEstablishedError: ``connect()`` was not called.
            The driver's error when MySQL rejects the statement.
        """
        if self._connection is None:
            raise ConnectionNotEstablishedError()

        params = list(params or [])
        if self.log_statements:
            logger.debug("Executing SQL: %s", Statement(sql=query, params=params).display())
        else:
            logger.debug("Executing SQL: %s", query[:200])

        try:
            async with self._connection.cursor() as cursor:
                await cursor.execute(query, *params)

                if cursor.description:
                    columns = [column[0] for column in cursor.description]
                    raw_rows = await cursor.fetchall()
                    rows = [
                        {col: _to_json_safe(row[i]) for i, col in enumerate(columns)} for row in raw_rows
                    ]
                    logger.info("Query executed successfully. Returned %d rows.", len(rows))
                    return QueryResult(columns=columns, rows=rows, row_count=len(rows))

                affected_rows = max(cursor.rowcount, 0)
                insert_id = None
                if query.lstrip().upper().startswith("INSERT"):
                    await cursor.execute("SELECT LAST_INSERT_ID()")
                    row = await cursor.fetchone()
                    insert_id = int(row[0]) if row and row[0] is not None else None

                logger.info("Statement executed successfully. %d rows affected.", affected_rows)
                return WriteResult(affected_rows=affected_rows, insert_id=insert_id)

        except Exception as e:
            logger.error("SQL execution error: %s", e)
            raise
