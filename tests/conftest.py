"""Shared test fixtures for tablequery."""

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure src/ is on the path for imports without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tablequery.config import Settings
from tablequery.models import QueryResult, Statement, WriteResult
from tablequery.shared.protocols import NoOpListener

# ---------------------------------------------------------------------------
# Protocol fakes
# ---------------------------------------------------------------------------


class FakeStatementExecutor:
    """In-memory fake satisfying the ``StatementExecutor`` protocol.

    SELECT statements return the canned rows; anything else returns the
    canned write result. Every call is recorded for assertions.
    """

    def __init__(
        self,
        rows: list[dict[str, Any]] | None = None,
        write: WriteResult | None = None,
        error: Exception | None = None,
    ) -> None:
        self.rows: list[dict[str, Any]] = rows or []
        self.write: WriteResult = write or WriteResult(affected_rows=1)
        self.error: Exception | None = error
        self.calls: list[tuple[str, list[Any] | None]] = []

    async def execute(
        self,
        query: str,
        params: list[Any] | None = None,
    ) -> QueryResult | WriteResult:
        """Return canned rows or a canned write result."""
        self.calls.append((query, params))

        if self.error:
            raise self.error

        if query.lstrip().upper().startswith("SELECT"):
            columns = list(self.rows[0].keys()) if self.rows else []
            return QueryResult(columns=columns, rows=self.rows, row_count=len(self.rows))
        return self.write


class SpyListener:
    """Spy satisfying the ``ConnectionListener`` protocol."""

    def __init__(self) -> None:
        self.events: list[str] = []

    def connected(self, client: Any) -> None:
        """Record a connect event."""
        self.events.append("connected")

    def disconnected(self, client: Any) -> None:
        """Record a disconnect event."""
        self.events.append("disconnected")


class SpyHook:
    """Statement hook recording every statement it sees."""

    def __init__(self) -> None:
        self.statements: list[Statement] = []

    def __call__(self, statement: Statement) -> None:
        self.statements.append(statement)

    @property
    def last(self) -> Statement | None:
        return self.statements[-1] if self.statements else None


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Return a ``Settings`` instance populated with safe test defaults."""
    return Settings(
        mysql_host="db.test",
        mysql_port=3307,
        mysql_user="tester",
        mysql_password="secret",
        mysql_database="TestDB",
        log_statements=False,
    )


@pytest.fixture
def fake_executor() -> FakeStatementExecutor:
    """Return an empty ``FakeStatementExecutor`` instance."""
    return FakeStatementExecutor()


@pytest.fixture
def spy_listener() -> SpyListener:
    """Return a fresh ``SpyListener`` instance."""
    return SpyListener()


@pytest.fixture
def spy_hook() -> SpyHook:
    """Return a fresh ``SpyHook`` instance."""
    return SpyHook()


@pytest.fixture
def noop_listener() -> NoOpListener:
    """Return a ``NoOpListener`` from the protocols module."""
    return NoOpListener()
