"""Protocol interfaces for I/O boundaries.

These protocols enable dependency injection for testability.
The production executor wraps an ODBC connection; test fakes
return canned data with zero network access.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from tablequery.models import QueryResult, Statement, WriteResult

StatementHook = Callable[[Statement], None]
"""Called with every statement just before it is executed."""


@runtime_checkable
class StatementExecutor(Protocol):
    """Executes parameterised SQL against the database.

    Returns a ``QueryResult`` for statements producing rows and a
    ``WriteResult`` otherwise. Driver errors are raised, not returned.
    """

    async def execute(
        self,
        query: str,
        params: list[Any] | None = None,
    ) -> QueryResult | WriteResult:
        """Execute a SQL statement.

        Args:
            query: SQL statement with ``?`` placeholders.
            params: Bind values in placeholder order (or ``None``).

        Returns:
            The rows read or the write outcome.
        """
        ...


@runtime_checkable
class ConnectionListener(Protocol):
    """Receives connection lifecycle notifications from a client."""

    def connected(self, client: Any) -> None:
        """Signal that *client* opened its connection."""
        ...

    def disconnected(self, client: Any) -> None:
        """Signal that *client* released its connection."""
        ...


# ---------------------------------------------------------------------------
# Concrete implementations
# ---------------------------------------------------------------------------


class NoOpListener:
    """Listener that silently discards all notifications.

    Used as the default when no listener is provided.
    """

    def connected(self, client: Any) -> None:
        """No-op."""

    def disconnected(self, client: Any) -> None:
        """No-op."""
