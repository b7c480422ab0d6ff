"""Statement assembly.

Two layers:

- ``build_*_statement`` functions compose clause fragments into SQL text and
  do no validation.
- ``prepare_*`` functions validate their inputs, build the SQL and pair it with
  the bind values in placeholder order, returning a ``Statement``.

Placeholders appear left to right as SET values, then WHERE values, so that is
the order the values are collected in.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from tablequery.builders.clauses import (
    build_field_list,
    build_limit_offset,
    build_predicate,
    build_set_clause,
    build_sort,
    criteria_values,
)
from tablequery.builders.rows import insert_values, validate_rows
from tablequery.models import DeleteOptions, FindOptions, Statement, UpdateOptions, coerce_options
from tablequery.shared.errors import EmptyMatchError, EmptyRowError, EmptySetError

Options = Mapping[str, Any] | FindOptions | UpdateOptions | DeleteOptions | None


def _tail(sort: Mapping[Any, Any] | None, limit: Any, offset: Any = None) -> str:
    """ORDER BY and LIMIT/OFFSET suffix shared by SELECT, UPDATE and DELETE."""
    sort_sql = build_sort(sort)
    tail = f" {sort_sql}" if sort_sql else ""
    return tail + build_limit_offset(limit, offset)


# ---------------------------------------------------------------------------
# SQL builders
# ---------------------------------------------------------------------------


def build_find_statement(table: str, criteria: Mapping[str, Any] | None, options: Options = None) -> str:
    """Build a SELECT statement.

    Args:
        table: Table name, escaped by the caller if needed.
        criteria: Ordered equality criteria for the WHERE clause.
        options: ``FindOptions`` or a mapping with projections/sort/limit/offset.

    Returns:
        ``SELECT <fields> FROM <table> WHERE <predicate>[ ORDER BY ...][ LIMIT n[ OFFSET m]]``
    """
    opts = coerce_options(options, FindOptions)
    return (
        f"SELECT {build_field_list(opts.projections)} "
        f"FROM {table} WHERE {build_predicate(criteria)}"
        f"{_tail(opts.sort, opts.limit, opts.offset)}"
    )


def build_count_statement(table: str, criteria: Mapping[str, Any] | None) -> str:
    """Build a ``SELECT COUNT(*)`` statement; the count comes back in column ``count``."""
    return f"SELECT COUNT(*) AS count FROM {table} WHERE {build_predicate(criteria)}"


def build_insert_statement(table: str, fields: Sequence[str], row_count: int = 1) -> str:
    """Build a (multi-row) INSERT statement.

    Args:
        table: Table name.
        fields: Already sorted and validated column list.
        row_count: Number of placeholder groups to emit.

    Returns:
        ``INSERT INTO <table> (f1,f2) VALUES (?,?),(?,?)``
    """
    row_placeholders = ",".join("?" * len(fields))
    rows_placeholders = "),(".join([row_placeholders] * row_count)
    return f"INSERT INTO {table} ({','.join(fields)}) VALUES ({rows_placeholders})"


def build_update_statement(
    table: str,
    match: Mapping[str, Any] | None,
    set_map: Mapping[str, Any],
    options: Options = None,
) -> str:
    """Build an UPDATE statement.

    MySQL accepts ORDER BY and LIMIT on single-table UPDATE but no OFFSET.
    """
    opts = coerce_options(options, UpdateOptions)
    return (
        f"UPDATE {table} SET {build_set_clause(set_map)} "
        f"WHERE {build_predicate(match)}"
        f"{_tail(opts.sort, opts.limit)}"
    )


def build_delete_statement(table: str, match: Mapping[str, Any] | None, options: Options = None) -> str:
    """Build a DELETE statement (UPDATE's shape without the SET clause)."""
    opts = coerce_options(options, DeleteOptions)
    return f"DELETE FROM {table} WHERE {build_predicate(match)}{_tail(opts.sort, opts.limit)}"


# ---------------------------------------------------------------------------
# Statement preparers
# ---------------------------------------------------------------------------


def prepare_find(table: str, criteria: Mapping[str, Any] | None = None, options: Options = None) -> Statement:
    """Prepare a SELECT returning every matching row."""
    return Statement(sql=build_find_statement(table, criteria, options), params=criteria_values(criteria))


def prepare_find_one(table: str, criteria: Mapping[str, Any] | None = None, options: Options = None) -> Statement:
    """Prepare a SELECT returning at most one row.

    Projections, sort and offset are kept; the limit is forced to 1.
    """
    opts = coerce_options(options, FindOptions).model_copy(update={"limit": 1})
    return prepare_find(table, criteria, opts)


def prepare_count(table: str, criteria: Mapping[str, Any] | None = None) -> Statement:
    """Prepare a row count over the matching rows."""
    return Statement(sql=build_count_statement(table, criteria), params=criteria_values(criteria))


def prepare_insert_many(table: str, rows: Sequence[Mapping[str, Any]]) -> Statement:
    """Prepare a multi-row INSERT.

    Args:
        table: Table name.
        rows: Rows sharing one key set; key order within a row does not matter.

    Returns:
        The INSERT statement and its values, row by row in sorted column order.

    Raises:
        EmptyBatchError: *rows* is missing or empty.
        ShapeMismatchError: The rows do not share one key set.
    """
    fields = validate_rows(rows)
    return Statement(sql=build_insert_statement(table, fields, len(rows)), params=insert_values(rows))


def prepare_insert_one(table: str, row: Mapping[str, Any]) -> Statement:
    """Prepare a single-row INSERT.

    Raises:
        EmptyRowError: *row* is missing, empty or not a mapping.
    """
    if not row or not isinstance(row, Mapping):
        raise EmptyRowError()
    return prepare_insert_many(table, [row])


def prepare_update_many(
    table: str,
    match: Mapping[str, Any] | None,
    set_map: Mapping[str, Any],
    options: Options = None,
) -> Statement:
    """Prepare an UPDATE over every matching row.

    An empty *match* updates every row (``WHERE 1``).

    Raises:
        EmptySetError: *set_map* is missing or empty.
    """
    if not set_map or not isinstance(set_map, Mapping):
        raise EmptySetError()
    return Statement(
        sql=build_update_statement(table, match, set_map, options),
        params=list(set_map.values()) + criteria_values(match),
    )


def prepare_update_one(
    table: str,
    match: Mapping[str, Any],
    set_map: Mapping[str, Any],
    options: Options = None,
) -> Statement:
    """Prepare an UPDATE of the first matching row.

    Raises:
        EmptySetError: *set_map* is missing or empty.
        EmptyMatchError: *match* is empty.
    """
    if not set_map or not isinstance(set_map, Mapping):
        raise EmptySetError()
    if not match:
        raise EmptyMatchError("Empty matching mapping for single update")
    opts = coerce_options(options, UpdateOptions).model_copy(update={"limit": 1})
    return prepare_update_many(table, match, set_map, opts)


def prepare_delete_many(table: str, match: Mapping[str, Any], options: Options = None) -> Statement:
    """Prepare a DELETE of every matching row.

    Raises:
        EmptyMatchError: *match* is missing or empty.
    """
    if not match or not isinstance(match, Mapping):
        raise EmptyMatchError("Invalid or empty match mapping for delete")
    return Statement(sql=build_delete_statement(table, match, options), params=criteria_values(match))


def prepare_delete_one(table: str, match: Mapping[str, Any], options: Options = None) -> Statement:
    """Prepare a DELETE of the first matching row (use ``sort`` to pick which one)."""
    if not match:
        raise EmptyMatchError("Empty matching mapping for single delete")
    opts = coerce_options(options, DeleteOptions).model_copy(update={"limit": 1})
    return prepare_delete_many(table, match, opts)
