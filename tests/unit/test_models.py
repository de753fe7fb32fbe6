"""Tests for models.py — schema descriptors and result sets."""

from __future__ import annotations

import pytest

from livediff.models import (
    Column,
    DataType,
    DiffOpType,
    DiffResult,
    EntryLike,
    Relation,
    RelationEntry,
    ResultLike,
    Row,
    Table,
    TableLike,
)


class TestTable:
    def test_columns_bound_to_table(self):
        t = Table("users", [("id", DataType.INTEGER), ("name", DataType.STRING)])
        assert [c.get_normalized_name() for c in t.columns()] == ["users.id", "users.name"]
        assert t.column("name").get_type() is DataType.STRING

    def test_unknown_column(self):
        with pytest.raises(KeyError):
            Table("users").column("missing")

    def test_alias(self):
        t = Table("users", [("id", DataType.INTEGER)]).as_("u")
        assert t.get_name() == "users"
        assert t.get_effective_name() == "u"
        assert t.column("id").get_table_name() == "u"

    def test_accepts_column_objects(self):
        col = Column("x", DataType.NUMBER, "other")
        assert Table("t", [col]).columns() == (col,)

    def test_is_table_like(self):
        assert isinstance(Table("t"), TableLike)


class TestColumn:
    def test_frozen(self):
        col = Column("id", DataType.INTEGER, "t")
        with pytest.raises(AttributeError):
            col.name = "other"

    def test_normalized_name_without_table(self):
        assert Column("id", DataType.INTEGER).get_normalized_name() == "id"


class TestRelationEntry:
    def test_plain_field(self):
        entry = RelationEntry(Row(1, {"id": 7}))
        assert entry.get_field(Column("id", DataType.INTEGER, "t")) == 7

    def test_missing_field_is_none(self):
        entry = RelationEntry(Row(1, {}))
        assert entry.get_field(Column("id", DataType.INTEGER, "t")) is None

    def test_prefixed_field(self):
        entry = RelationEntry(Row(1, {"t": {"id": 3}, "u": {"id": 4}}), is_prefix_applied=True)
        assert entry.get_field(Column("id", DataType.INTEGER, "u")) == 4
        assert entry.get_field(Column("id", DataType.INTEGER, "missing")) is None

    def test_alias_takes_precedence(self):
        entry = RelationEntry(Row(1, {"total": 10, "t": {"n": 1}}), is_prefix_applied=True)
        col = Column("n", DataType.INTEGER, "t", alias="total")
        assert entry.get_field(col) == 10

    def test_payload_is_row_value(self):
        row = Row(1, {"id": 1})
        assert RelationEntry(row).payload() is row.value

    def test_is_entry_like(self):
        assert isinstance(RelationEntry(Row(1, {})), EntryLike)


class TestRelation:
    def test_from_rows_single_table(self):
        rel = Relation.from_rows([Row(1, {"id": 1})], ["users"])
        assert rel.entries[0].is_prefix_applied is False
        assert rel.table_names == frozenset({"users"})

    def test_from_rows_joined(self):
        rel = Relation.from_rows([Row(1, {})], ["users", "orders"])
        assert rel.entries[0].is_prefix_applied is True

    def test_empty(self):
        rel = Relation.create_empty()
        assert rel.is_empty()
        assert len(rel) == 0
        assert rel.payloads() == []

    def test_entries_immutable(self):
        rel = Relation.from_rows([Row(1, {"id": 1})])
        assert isinstance(rel.entries, tuple)

    def test_is_result_like(self):
        assert isinstance(Relation.create_empty(), ResultLike)

    def test_rows_compare_by_identity(self):
        assert Row(1, {"id": 1}) != Row(1, {"id": 1})


class TestDiffResult:
    def test_mutations(self):
        assert DiffResult(entries_kept=1, entries_inserted=2, entries_deleted=3).mutations == 5

    def test_op_types(self):
        assert {t.value for t in DiffOpType} == {"delete", "insert"}
