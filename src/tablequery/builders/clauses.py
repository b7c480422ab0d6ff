"""Pure-function SQL clause builders.

This module is intentionally free of I/O and driver imports so that it can be
unit-tested without mocking. Identifiers are emitted as given; callers escape
them if their dialect requires it.

Placeholder order is defined by mapping iteration order. ``dict`` keeps
insertion order, so ``build_predicate(criteria)`` and
``criteria_values(criteria)`` always line up.
"""

from collections.abc import Mapping, Sequence
from typing import Any

# Predicate emitted for "match all rows"
MATCH_ALL = "1"


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def build_field_list(projection: Sequence[str] | None) -> str:
    """Build the SELECT list.

    Args:
        projection: Columns to select, in order.

    Returns:
        ``"*"`` when *projection* is empty or ``None``, else the columns joined by ``,``.
    """
    if not projection:
        return "*"
    return ",".join(projection)


def build_predicate(criteria: Mapping[str, Any] | None) -> str:
    """Build the WHERE predicate (without the ``WHERE`` keyword).

    Args:
        criteria: Ordered column -> value equality criteria.

    Returns:
        ``"1"`` when *criteria* is empty, else ``col=? AND col=?`` in key order.
    """
    if not criteria:
        return MATCH_ALL
    return " AND ".join(f"{column}=?" for column in criteria)


def criteria_values(criteria: Mapping[str, Any] | None) -> list[Any]:
    """Return the bind values of *criteria* in predicate order."""
    if not criteria:
        return []
    return list(criteria.values())


def build_sort(sort_spec: Mapping[Any, Any] | None) -> str:
    """Build the ORDER BY fragment.

    Columns whose direction is falsy are skipped. Directions are upper-cased.

    Args:
        sort_spec: Ordered column -> direction mapping.

    Returns:
        ``""`` when nothing is left to sort on, else ``"ORDER BY col DIR,col DIR"``.
    """
    if not sort_spec:
        return ""

    parts = [f"{column} {str(direction).upper()}" for column, direction in sort_spec.items() if direction]
    if not parts:
        return ""
    return "ORDER BY " + ",".join(parts)


def build_limit_offset(limit: Any, offset: Any = None) -> str:
    """Build the LIMIT/OFFSET fragment, with a leading space.

    An offset is only emitted when a limit is.

    Args:
        limit: Row limit; only a positive ``int`` counts.
        offset: Row offset; only a positive ``int`` counts.

    Returns:
        ``""``, ``" LIMIT n"`` or ``" LIMIT n OFFSET m"``.
    """
    if not _is_positive_int(limit):
        return ""

    sql = f" LIMIT {limit}"
    if _is_positive_int(offset):
        sql = f"{sql} OFFSET {offset}"
    return sql


def build_set_clause(set_map: Mapping[str, Any]) -> str:
    """Build the UPDATE assignment list: ``col=?,col=?`` in key order."""
    return ",".join(f"{column}=?" for column in set_map)
