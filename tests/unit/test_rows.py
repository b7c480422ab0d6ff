"""Unit tests for INSERT row helpers.

Tests common_fields, sort_row_by_keys, insert_values and validate_rows.
"""

import pytest
from tablequery.builders.rows import common_fields, insert_values, sort_row_by_keys, validate_rows
from tablequery.shared.errors import EmptyBatchError, EmptyRowError, ShapeMismatchError


class TestCommonFields:
    """Sorted key intersection across rows."""

    def test_single_row_returns_sorted_keys(self) -> None:
        assert common_fields([{"name": "x", "id": 1}]) == ["id", "name"]

    def test_intersection_drops_extra_keys(self) -> None:
        rows = [
            {"id": 4, "name": "john doe", "gender": "male", "address": "4 philip street"},
            {"id": 8, "surname": "Moka", "name": "joe Mocha", "phone": "+33687985241"},
        ]
        assert common_fields(rows) == ["id", "name"]

    def test_identical_shapes(self) -> None:
        rows = [{"b": 1, "a": 2}, {"a": 3, "b": 4}, {"b": 5, "a": 6}]
        assert common_fields(rows) == ["a", "b"]


class TestSortRowByKeys:
    def test_returns_sorted_copy(self) -> None:
        row = {"name": "Jake", "type": 1, "id": 3}
        ordered = sort_row_by_keys(row)
        assert list(ordered) == ["id", "name", "type"]
        assert ordered == row
        assert list(row) == ["name", "type", "id"]


class TestInsertValues:
    def test_each_row_sorted_independently(self) -> None:
        rows = [
            {"id": 1, "type": 1, "name": "John Doe"},
            {"id": 2, "name": "Joe Mocha", "type": 2},
            {"type": 1, "id": 3, "name": "Jake Cappuccino"},
        ]
        assert insert_values(rows) == [1, "John Doe", 1, 2, "Joe Mocha", 2, 3, "Jake Cappuccino", 1]


class TestValidateRows:
    """Bulk insert batch validation."""

    @pytest.mark.parametrize("rows", [None, [], (), "rows", {"id": 1}])
    def test_missing_or_invalid_batch(self, rows: object) -> None:
        with pytest.raises(EmptyBatchError, match="must be a list of mappings"):
            validate_rows(rows)

    def test_non_mapping_row(self) -> None:
        with pytest.raises(EmptyBatchError):
            validate_rows([{"id": 1}, 2])

    def test_missing_key_in_later_row(self) -> None:
        rows = [{"id": 1, "type": 1, "name": "x"}, {"id": 2, "name": "y"}]
        with pytest.raises(ShapeMismatchError, match="Inconsistent keys"):
            validate_rows(rows)

    def test_extra_key_in_later_row(self) -> None:
        rows = [{"id": 1, "name": "x"}, {"id": 2, "name": "y", "type": 3}]
        with pytest.raises(ShapeMismatchError):
            validate_rows(rows)

    def test_single_row_always_passes(self) -> None:
        assert validate_rows([{"type": 1, "id": 3, "name": "Jake"}]) == ["id", "name", "type"]

    def test_key_order_does_not_matter(self) -> None:
        rows = [{"id": 1, "name": "a"}, {"name": "b", "id": 2}]
        assert validate_rows(rows) == ["id", "name"]

    def test_rows_without_columns(self) -> None:
        with pytest.raises(EmptyRowError):
            validate_rows([{}, {}])
