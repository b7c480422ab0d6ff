"""Clause builders and statement assembly."""

from .clauses import (
    build_field_list,
    build_limit_offset,
    build_predicate,
    build_set_clause,
    build_sort,
    criteria_values,
)
from .rows import common_fields, insert_values, sort_row_by_keys, validate_rows
from .statements import (
    build_count_statement,
    build_delete_statement,
    build_find_statement,
    build_insert_statement,
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

__all__ = [
    "build_count_statement",
    "build_delete_statement",
    "build_field_list",
    "build_find_statement",
    "build_insert_statement",
    "build_limit_offset",
    "build_predicate",
    "build_set_clause",
    "build_sort",
    "build_update_statement",
    "common_fields",
    "criteria_values",
    "insert_values",
    "prepare_count",
    "prepare_delete_many",
    "prepare_delete_one",
    "prepare_find",
    "prepare_find_one",
    "prepare_insert_many",
    "prepare_insert_one",
    "prepare_update_many",
    "prepare_update_one",
    "sort_row_by_keys",
    "validate_rows",
]
