"""
Unit Tests for List Helpers

Tests searching and mutating lists of records:
- Lookup by key and value
- Delete, merge and overwrite, in place and on a copy
- Shifting elements
- Small dict builders
"""

import pytest

from data_toolkit.core import (
    find_index,
    find_item,
    find_and_delete,
    find_and_merge,
    find_and_overwrite,
    shift_element,
    object_array_to_dict,
    join_fields,
    without,
    structural_equal,
)


class TestFind:
    """Test cases for find_index and find_item."""

    def test_find_index_first_match(self, sample_records):
        """Test that the first matching record wins."""
        assert find_index(sample_records, "active", True) == 0
        assert find_index(sample_records, "_id", "c3") == 2

    def test_find_index_not_found(self, sample_records):
        """Test the -1 sentinel."""
        assert find_index(sample_records, "_id", "zz") == -1
        assert find_index([], "_id", "a1") == -1

    def test_find_index_missing_key(self, sample_records):
        """Test records without the key never match."""
        assert find_index(sample_records, "email", None) == -1

    def test_find_index_strict_equality(self):
        """Test that True and 1 are kept apart."""
        records = [{"flag": 1}, {"flag": True}]
        assert find_index(records, "flag", True) == 1
        assert find_index(records, "flag", 1) == 0

    def test_find_item(self, sample_records):
        """Test returning the record itself."""
        assert find_item(sample_records, "name", "Bob") is sample_records[1]
        assert find_item(sample_records, "name", "Dave") is None


class TestFindAndMutate:
    """Test cases for find_and_delete, find_and_merge and find_and_overwrite."""

    def test_delete_in_place(self, sample_records):
        """Test deleting a record in place."""
        assert find_and_delete(sample_records, "_id", "b2") is True
        assert [r["_id"] for r in sample_records] == ["a1", "c3"]

    def test_delete_not_found(self, sample_records):
        """Test deleting a missing record reports failure."""
        assert find_and_delete(sample_records, "_id", "zz") is False
        assert len(sample_records) == 3

    def test_delete_copy(self, sample_records):
        """Test deleting from a copy leaves the input alone."""
        result = find_and_delete(sample_records, "_id", "a1", return_copy=True)

        assert [r["_id"] for r in result] == ["b2", "c3"]
        assert len(sample_records) == 3

        result[0]["tags"].append("ops")
        assert sample_records[1]["tags"] == ["dev"]

    def test_copy_not_found_returns_input(self, sample_records):
        """Test the unchanged input comes back when nothing matches."""
        assert find_and_delete(sample_records, "_id", "zz", return_copy=True) is sample_records
        assert find_and_merge(sample_records, "_id", "zz", {}, return_copy=True) is sample_records
        assert find_and_overwrite(sample_records, "_id", "zz", {}, return_copy=True) is sample_records

    def test_merge_in_place(self, sample_records):
        """Test merging new data into a record."""
        assert find_and_merge(sample_records, "_id", "b2", {"active": True, "age": 40}) is True
        assert sample_records[1] == {
            "_id": "b2",
            "name": "Bob",
            "tags": ["dev"],
            "active": True,
            "age": 40,
        }

    def test_merge_copy(self, sample_records):
        """Test merging into a copy."""
        result = find_and_merge(sample_records, "_id", "c3", {"name": "Caroline"}, return_copy=True)

        assert result[2]["name"] == "Caroline"
        assert result[2]["_id"] == "c3"
        assert sample_records[2]["name"] == "Carol"

    def test_merge_not_found(self, sample_records):
        """Test merging into a missing record."""
        assert find_and_merge(sample_records, "_id", "zz", {"name": "X"}) is False

    def test_overwrite_in_place(self, sample_records):
        """Test replacing a record."""
        assert find_and_overwrite(sample_records, "_id", "a1", {"_id": "a1"}) is True
        assert sample_records[0] == {"_id": "a1"}

    def test_overwrite_copy(self, sample_records):
        """Test replacing a record in a copy."""
        result = find_and_overwrite(sample_records, "name", "Bob", {"name": "Rob"}, return_copy=True)

        assert result[1] == {"name": "Rob"}
        assert sample_records[1]["name"] == "Bob"

    def test_copy_does_not_share_data(self, sample_records):
        """Test the copy holds its own copy of the data passed in."""
        data = {"name": "Rob", "tags": ["ops"]}

        merged = find_and_merge(sample_records, "_id", "a1", data, return_copy=True)
        replaced = find_and_overwrite(sample_records, "_id", "a1", data, return_copy=True)
        merged[0]["tags"].append("dev")
        replaced[0]["tags"].append("qa")

        assert data == {"name": "Rob", "tags": ["ops"]}

    def test_overwrite_not_found(self, sample_records):
        """Test replacing a missing record."""
        assert find_and_overwrite(sample_records, "_id", "zz", {}) is False


class TestShiftElement:
    """Test cases for shift_element."""

    def test_shift_forward(self):
        items = ["a", "b", "c", "d"]
        shift_element(items, 0, 2)
        assert items == ["b", "c", "a", "d"]

    def test_shift_backward(self):
        items = ["a", "b", "c", "d"]
        shift_element(items, 3, 1)
        assert items == ["a", "d", "b", "c"]

    @pytest.mark.parametrize("from_index", [-1, 4, 10])
    def test_shift_source_out_of_range(self, from_index):
        """Test nothing happens when the source index is invalid."""
        items = ["a", "b", "c", "d"]
        shift_element(items, from_index, 0)
        assert items == ["a", "b", "c", "d"]

    def test_shift_target_out_of_range(self):
        """Test a target past the end appends."""
        items = ["a", "b", "c"]
        shift_element(items, 0, 99)
        assert items == ["b", "c", "a"]


class TestDictBuilders:
    """Test cases for object_array_to_dict, join_fields and without."""

    def test_object_array_to_dict(self):
        records = [{"id": 1, "label": "one"}, {"id": 2, "label": "two"}]
        assert object_array_to_dict(records, "id", "label") == {"1": "one", "2": "two"}

    def test_join_fields(self):
        person = {"first": "Chris", "middle": None, "last": "Nasr"}
        assert join_fields(person, ["first", "last"]) == "Chris Nasr"
        assert join_fields(person, ["title", "first", "last"], ", ") == "Chris, Nasr"
        assert join_fields(person, []) == ""

    def test_without_single_key(self, nested_mapping):
        result = without(nested_mapping, "dimensions")

        assert "dimensions" not in result
        assert "dimensions" in nested_mapping

    def test_without_many_keys(self, nested_mapping):
        result = without(nested_mapping, ["price", "colours", "unknown"])

        assert set(result) == {"name", "enabled", "notes", "dimensions"}
        result["dimensions"]["width"] = 99
        assert nested_mapping["dimensions"]["width"] == 10
        assert structural_equal(without(nested_mapping, []), nested_mapping)
