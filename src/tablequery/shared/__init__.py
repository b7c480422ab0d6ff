"""Errors and I/O protocols shared across the package."""

from .errors import (
    ConnectionNotEstablishedError,
    EmptyBatchError,
    EmptyMatchError,
    EmptyRowError,
    EmptySetError,
    QueryBuildError,
    ShapeMismatchError,
)
from .protocols import ConnectionListener, NoOpListener, StatementExecutor, StatementHook

__all__ = [
    "ConnectionListener",
    "ConnectionNotEstablishedError",
    "EmptyBatchError",
    "EmptyMatchError",
    "EmptyRowError",
    "EmptySetError",
    "NoOpListener",
    "QueryBuildError",
    "ShapeMismatchError",
    "StatementExecutor",
    "StatementHook",
]
