"""Tests for Table: ordered rows plus hash index."""

from __future__ import annotations

import pytest

from rljson import IndexOutOfRangeError, RowNotFoundError, Table


def _row(h: str, **fields):
    return {**fields, "_hash": h}


@pytest.fixture
def table():
    return Table.from_rows("t", [_row("h0", k="a"), _row("h1", k="b")])


class TestTable:
    def test_rows_keep_insertion_order(self, table):
        assert [r["_hash"] for r in table.rows] == ["h0", "h1"]

    def test_index_points_to_same_objects(self, table):
        for row in table.rows:
            assert table.indexed[row["_hash"]] is row

    def test_from_rows_drops_duplicates(self):
        t = Table.from_rows("t", [_row("h0", k="a"), _row("h0", k="other")])
        assert len(t) == 1
        assert t.row("h0")["k"] == "a"

    def test_contains_and_get(self, table):
        assert "h0" in table
        assert "nope" not in table
        assert table.get("nope") is None

    def test_row_not_found(self, table):
        with pytest.raises(RowNotFoundError, match='hash "nope" in table "t"'):
            table.row("nope")

    def test_hash_at(self, table):
        assert table.hash_at(1) == "h1"

    @pytest.mark.parametrize("index", [2, -1])
    def test_hash_at_out_of_range(self, table, index):
        with pytest.raises(IndexOutOfRangeError, match=f'Index {index} out of range in table "t"'):
            table.hash_at(index)

    def test_indexed_is_read_only(self, table):
        with pytest.raises(TypeError):
            table.indexed["x"] = {}  # type: ignore[index]

    def test_where(self, table):
        assert table.where(lambda r: r["k"] == "b") == [_row("h1", k="b")]


class TestMerged:
    def test_appends_new_rows(self, table):
        merged, added = table.merged([_row("h2", k="c")])
        assert added == 1
        assert [r["_hash"] for r in merged.rows] == ["h0", "h1", "h2"]
        assert "h2" in merged

    def test_first_occurrence_wins(self, table):
        merged, added = table.merged([_row("h0", k="changed"), _row("h3", k="d")])
        assert added == 1
        assert merged.row("h0")["k"] == "a"

    def test_dedups_inside_batch(self, table):
        merged, added = table.merged([_row("h2", k="c"), _row("h2", k="c")])
        assert added == 1
        assert len(merged) == 3

    def test_original_table_untouched(self, table):
        before = table.rows
        table.merged([_row("h2", k="c")])
        assert table.rows == before
        assert len(table) == 2
        assert "h2" not in table

    def test_to_json_copies_rows(self, table):
        data = table.to_json()
        data["_data"][0]["k"] = "mutated"
        assert table.row("h0")["k"] == "a"
