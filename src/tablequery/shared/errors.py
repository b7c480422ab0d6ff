"""Validation errors raised while building statements.

Every error here is raised synchronously, before any SQL is produced or any
executor is awaited. Callers surface them unchanged.
"""


class QueryBuildError(ValueError):
    """Base class for statement build failures."""


class EmptyBatchError(QueryBuildError):
    """Bulk insert called without a usable list of rows."""

    def __init__(self, message: str = "Invalid parameter for rows, must be a list of mappings") -> None:
        super().__init__(message)


class ShapeMismatchError(QueryBuildError):
    """Bulk insert rows do not share a common key set."""

    def __init__(self, message: str = "Inconsistent keys among row mappings") -> None:
        super().__init__(message)


class EmptyRowError(QueryBuildError):
    """Single-row insert called with an empty row."""

    def __init__(self, message: str = "Invalid or empty row mapping") -> None:
        super().__init__(message)


class EmptySetError(QueryBuildError):
    """Update called with nothing to assign."""

    def __init__(self, message: str = "Invalid or empty set mapping for update") -> None:
        super().__init__(message)


class EmptyMatchError(QueryBuildError):
    """Single-row update/delete (or bulk delete) called without match criteria."""

    def __init__(self, message: str = "Empty matching mapping") -> None:
        super().__init__(message)


class ConnectionNotEstablishedError(RuntimeError):
    """A statement was executed before ``connect()``."""

    def __init__(self, message: str = "Database connection not established. Call connect() first.") -> None:
        super().__init__(message)
