"""Row shape helpers for INSERT statements.

Columns are emitted in alphabetical order. Every row of a batch is sorted
independently, so the batch must share one key set for the flattened values
to line up with the column list.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from tablequery.shared.errors import EmptyBatchError, EmptyRowError, ShapeMismatchError


def common_fields(rows: Sequence[Mapping[str, Any]]) -> list[str]:
    """Return the sorted keys present in every row.

    Example::

        common_fields([
            {"id": 4, "name": "john doe", "gender": "male"},
            {"id": 8, "surname": "Moka", "name": "joe Mocha"},
        ])
        # -> ["id", "name"]

    Args:
        rows: Non-empty sequence of row mappings.

    Returns:
        The alphabetically sorted intersection of the rows' keys.
    """
    shared = set(rows[0])
    for row in rows[1:]:
        shared &= set(row)
    return sorted(shared)


def sort_row_by_keys(row: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *row* with its keys in alphabetical order."""
    return {key: row[key] for key in sorted(row)}


def insert_values(rows: Sequence[Mapping[str, Any]]) -> list[Any]:
    """Flatten row values, each row in its own sorted-key order."""
    values: list[Any] = []
    for row in rows:
        values.extend(sort_row_by_keys(row).values())
    return values


def validate_rows(rows: Any) -> list[str]:
    """Check that *rows* is a non-empty batch of identically shaped mappings.

    Args:
        rows: Candidate batch for a bulk insert.

    Returns:
        The sorted field list shared by every row.

    Raises:
        EmptyBatchError: *rows* is missing, empty, not a list/tuple, or holds a non-mapping.
        EmptyRowError: The rows share no column at all.
        ShapeMismatchError: The rows do not share one key set.
    """
    if not rows or not isinstance(rows, (list, tuple)):
        raise EmptyBatchError()
    if not all(isinstance(row, Mapping) for row in rows):
        raise EmptyBatchError()

    fields = common_fields(rows)
    # Every row must hold exactly the shared keys
    if sorted(rows[0]) != fields or any(len(row) != len(fields) for row in rows):
        raise ShapeMismatchError()
    if not fields:
        raise EmptyRowError()
    return fields
