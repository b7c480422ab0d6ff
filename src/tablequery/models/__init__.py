"""
Value models shared by the builders, the gateway and the executors.
"""

from .options import DeleteOptions, FindOptions, UpdateOptions, coerce_options
from .results import QueryResult, WriteResult
from .statement import Statement

__all__ = [
    # Statement options
    "FindOptions",
    "UpdateOptions",
    "DeleteOptions",
    "coerce_options",
    # Built statements
    "Statement",
    # Execution results
    "QueryResult",
    "WriteResult",
]
