"""Unit tests for Table operations."""

from __future__ import annotations

import pytest

from csvdb.domain import (
    ArityMismatchError,
    Column,
    Row,
    SchemaMismatchError,
    Table,
    UnknownColumnError,
)


def values(rows: list[Row]) -> list[list[str]]:
    return [row.values for row in rows]


@pytest.mark.unit
class TestRow:
    """Tests for Row full-row equality."""

    def test_equal_rows_match(self) -> None:
        """Same length and values match."""
        assert Row(["1", "a"]).matches(Row(["1", "a"]))
        assert Row(["1", "a"]).matches(["1", "a"])

    def test_different_value_does_not_match(self) -> None:
        assert not Row(["1", "a"]).matches(["1", "b"])

    def test_different_length_does_not_match(self) -> None:
        """A prefix is not a match."""
        assert not Row(["1", "a"]).matches(["1"])
        assert not Row(["1"]).matches(["1", "a"])


@pytest.mark.unit
class TestTableSchema:
    """Tests for column resolution."""

    def test_with_columns_defaults_to_string(self) -> None:
        table = Table.with_columns("t", ["a", "b"])

        assert table.column_names == ["a", "b"]
        assert all(c.type == "string" for c in table.columns)
        assert table.rows == []

    def test_empty_table_is_truthy(self) -> None:
        """A found but empty table passes `if table` checks."""
        assert Table.with_columns("t", ["a"])

    def test_column_index(self, people: Table) -> None:
        assert people.column_index("id") == 0
        assert people.column_index("city") == 2

    def test_column_index_unknown(self, people: Table) -> None:
        with pytest.raises(UnknownColumnError) as exc_info:
            people.column_index("age")

        assert exc_info.value.column == "age"
        assert exc_info.value.table == "people"

    def test_duplicate_column_names_resolve_to_first(self) -> None:
        table = Table("t", columns=[Column("a"), Column("a")])

        assert table.column_index("a") == 0


@pytest.mark.unit
class TestInsert:
    """Tests for Table.insert."""

    def test_insert_appends(self, people: Table) -> None:
        """Inserted row is last in a full select."""
        people.insert(["4", "Dana", "Rome"])

        rows = people.select(["id", "name", "city"])
        assert len(rows) == 4
        assert rows[-1].values == ["4", "Dana", "Rome"]

    def test_insert_wrong_arity(self, people: Table) -> None:
        """Wrong width fails and leaves the row count unchanged."""
        with pytest.raises(SchemaMismatchError) as exc_info:
            people.insert(["4", "Dana"])

        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2
        assert len(people.rows) == 3

    def test_insert_copies_values(self, people: Table) -> None:
        """Caller's list is not aliased by the stored row."""
        new = ["4", "Dana", "Rome"]
        people.insert(new)
        new[1] = "changed"

        assert people.rows[-1].values[1] == "Dana"

    def test_insert_does_not_check_uniqueness(self, people: Table) -> None:
        people.insert(["1", "Alice", "Paris"])

        assert len(people.rows) == 4


@pytest.mark.unit
class TestSelect:
    """Tests for Table.select."""

    def test_select_all(self, people: Table) -> None:
        rows = people.select(["id", "name", "city"])

        assert values(rows) == values(people.rows)

    def test_select_with_none_conditions(self, people: Table) -> None:
        assert len(people.select(["id"], None)) == 3

    def test_projection_order(self, people: Table) -> None:
        """Columns come back in requested order."""
        rows = people.select(["city", "id"])

        assert values(rows) == [["Paris", "1"], ["Berlin", "2"], ["Paris", "3"]]

    def test_conditions_and(self, people: Table) -> None:
        """Every condition must hold."""
        rows = people.select(["name"], {"city": "Paris", "id": "3"})

        assert values(rows) == [["Chuck"]]

    def test_conditions_preserve_order(self, people: Table) -> None:
        rows = people.select(["name"], {"city": "Paris"})

        assert values(rows) == [["Alice"], ["Chuck"]]

    def test_matching_is_exact(self, people: Table) -> None:
        """No case folding or trimming."""
        assert people.select(["name"], {"name": "alice"}) == []
        assert people.select(["name"], {"name": "Alice "}) == []

    def test_select_returns_new_rows(self, people: Table) -> None:
        """Mutating the result does not touch the table."""
        rows = people.select(["id", "name", "city"])
        rows[0].values[1] = "changed"

        assert people.rows[0].values[1] == "Alice"
        assert rows[0] is not people.rows[0]

    def test_unknown_output_column(self, people: Table) -> None:
        with pytest.raises(UnknownColumnError):
            people.select(["age"])

    def test_unknown_condition_column(self, people: Table) -> None:
        with pytest.raises(UnknownColumnError):
            people.select(["id"], {"age": "30"})

    def test_every_result_satisfies_conditions(self, people: Table) -> None:
        conditions = {"city": "Paris"}
        rows = people.select(["id", "name", "city"], conditions)

        for row in rows:
            for column, value in conditions.items():
                assert row.values[people.column_index(column)] == value


@pytest.mark.unit
class TestUpdate:
    """Tests for Table.update."""

    def test_update_matching_rows(self, people: Table) -> None:
        count = people.update(["city"], ["Lyon"], {"city": "Paris"})

        assert count == 2
        assert values(people.rows) == [
            ["1", "Alice", "Lyon"],
            ["2", "Bob", "Berlin"],
            ["3", "Chuck", "Lyon"],
        ]

    def test_update_multiple_columns(self, people: Table) -> None:
        people.update(["name", "city"], ["Bobby", "Munich"], {"id": "2"})

        assert people.rows[1].values == ["2", "Bobby", "Munich"]

    def test_update_without_conditions_touches_all(self, people: Table) -> None:
        count = people.update(["city"], ["Oslo"])

        assert count == 3
        assert all(row.values[2] == "Oslo" for row in people.rows)

    def test_update_no_match(self, people: Table) -> None:
        assert people.update(["city"], ["Oslo"], {"name": "David"}) == 0

    def test_update_arity_mismatch(self, people: Table) -> None:
        """Mismatched lengths fail before any row changes."""
        with pytest.raises(ArityMismatchError):
            people.update(["name", "city"], ["Zed"], {"id": "1"})

        assert people.rows[0].values == ["1", "Alice", "Paris"]

    def test_update_unknown_column(self, people: Table) -> None:
        with pytest.raises(UnknownColumnError):
            people.update(["age"], ["30"])

    def test_update_unknown_condition_column(self, people: Table) -> None:
        with pytest.raises(UnknownColumnError):
            people.update(["city"], ["Oslo"], {"age": "30"})

        assert people.rows[0].values[2] == "Paris"


@pytest.mark.unit
class TestDelete:
    """Tests for Table.delete."""

    def test_delete_matching(self, people: Table) -> None:
        count = people.delete({"city": "Paris"})

        assert count == 2
        assert values(people.rows) == [["2", "Bob", "Berlin"]]

    def test_delete_preserves_order(self, people: Table) -> None:
        people.insert(["4", "Dana", "Rome"])
        people.delete({"id": "2"})

        assert [row.values[0] for row in people.rows] == ["1", "3", "4"]

    def test_delete_duplicate_rows(self, people: Table) -> None:
        """Value-identical rows are all removed."""
        people.insert(["1", "Alice", "Paris"])
        people.delete({"id": "1"})

        assert [row.values[0] for row in people.rows] == ["2", "3"]

    def test_delete_empty_conditions_removes_all(self, people: Table) -> None:
        assert people.delete({}) == 3
        assert people.rows == []

    def test_delete_no_match(self, people: Table) -> None:
        assert people.delete({"name": "David"}) == 0
        assert len(people.rows) == 3

    def test_delete_unknown_column(self, people: Table) -> None:
        with pytest.raises(UnknownColumnError):
            people.delete({"age": "30"})

        assert len(people.rows) == 3


@pytest.mark.unit
class TestUpsert:
    """Tests for Table.upsert."""

    def test_upsert_new_row(self, people: Table) -> None:
        """A novel row is appended."""
        assert people.upsert(["4", "Dana", "Rome"]) is True

        assert len(people.rows) == 4
        assert people.rows[3].values == ["4", "Dana", "Rome"]

    def test_upsert_identical_row(self, people: Table) -> None:
        """An identical row does not grow the table."""
        assert people.upsert(["2", "Bob", "Berlin"]) is False

        assert len(people.rows) == 3
        assert people.rows[1].values == ["2", "Bob", "Berlin"]

    def test_upsert_same_key_different_value_appends(self, people: Table) -> None:
        """Matching is full-row, so a changed value is a new row."""
        people.upsert(["2", "Updated Bob", "Berlin"])

        assert len(people.rows) == 4
        assert people.rows[1].values == ["2", "Bob", "Berlin"]
        assert people.rows[3].values == ["2", "Updated Bob", "Berlin"]

    def test_upsert_skips_width_check(self, people: Table) -> None:
        people.upsert(["5"])

        assert people.rows[-1].values == ["5"]
