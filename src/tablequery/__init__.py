"""
tablequery: parameterised single-table SQL from data-shaped queries.

The pure builders turn criteria, projections, sort orders, pagination and
update sets into ``Statement(sql, params)`` pairs; the gateway runs them
through any ``StatementExecutor``.
"""

from .builders import (
    build_field_list,
    build_find_statement,
    build_insert_statement,
    build_limit_offset,
    build_predicate,
    build_sort,
    build_update_statement,
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
from .connector import MysqlClient, TableGateway, log_statement
from .models import DeleteOptions, FindOptions, QueryResult, Statement, UpdateOptions, WriteResult
from .shared import (
    EmptyBatchError,
    EmptyMatchError,
    EmptyRowError,
    EmptySetError,
    QueryBuildError,
    ShapeMismatchError,
    StatementExecutor,
)

__all__ = [
    # Clause builders
    "build_field_list",
    "build_predicate",
    "build_sort",
    "build_limit_offset",
    # Statement assembly
    "build_find_statement",
    "build_insert_statement",
    "build_update_statement",
    "prepare_count",
    "prepare_delete_many",
    "prepare_delete_one",
    "prepare_find",
    "prepare_find_one",
    "prepare_insert_many",
    "prepare_insert_one",
    "prepare_update_many",
    "prepare_update_one",
    # Models
    "Statement",
    "FindOptions",
    "UpdateOptions",
    "DeleteOptions",
    "QueryResult",
    "WriteResult",
    # Errors
    "QueryBuildError",
    "EmptyBatchError",
    "ShapeMismatchError",
    "EmptyRowError",
    "EmptySetError",
    "EmptyMatchError",
    # Execution
    "StatementExecutor",
    "TableGateway",
    "MysqlClient",
    "log_statement",
]
