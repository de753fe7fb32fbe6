"""Tests for diff/comparator.py — projection-restricted entry equality."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from livediff.diff.comparator import EntryComparator
from livediff.errors import LiveDiffEvaluatorError
from livediff.eval import EvalRegistry
from livediff.models import Column, DataType, EvalType, Relation, Row, Table


def _entry(**payload):
    return Relation.from_rows([Row(0, payload)]).entries[0]


class TestEquality:
    def test_equal_on_all_columns(self, registry, users):
        cmp = EntryComparator(users.columns(), registry)
        assert cmp.equal(_entry(id=1, name="a"), _entry(id=1, name="a"))

    def test_mismatch_on_any_column(self, registry, users):
        cmp = EntryComparator(users.columns(), registry)
        assert not cmp.equal(_entry(id=1, name="a"), _entry(id=1, name="b"))
        assert not cmp.equal(_entry(id=1, name="a"), _entry(id=2, name="a"))

    def test_non_projected_fields_ignored(self, registry, users):
        cmp = EntryComparator([users.column("id")], registry)
        assert cmp(_entry(id=1, name="a", extra=1), _entry(id=1, name="z"))

    def test_empty_projection_always_equal(self, registry):
        cmp = EntryComparator([], registry)
        assert cmp.equal(_entry(id=1), _entry(id=2))

    def test_null_fields(self, registry, users):
        cmp = EntryComparator(users.columns(), registry)
        assert cmp.equal(_entry(id=1), _entry(id=1, name=None))
        assert not cmp.equal(_entry(id=1, name=None), _entry(id=1, name=""))

    def test_date_time_column(self, registry):
        col = Column("at", DataType.DATE_TIME, "events")
        cmp = EntryComparator([col], registry)
        a = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert cmp.equal(_entry(at=a), _entry(at=datetime(2024, 1, 1, tzinfo=timezone.utc)))
        assert not cmp.equal(_entry(at=a), _entry(at=datetime(2024, 1, 2, tzinfo=timezone.utc)))

    def test_prefixed_entries(self, registry):
        users = Table("users", [("id", DataType.INTEGER)])
        orders = Table("orders", [("id", DataType.INTEGER)])
        cols = list(users.columns()) + list(orders.columns())
        cmp = EntryComparator(cols, registry)

        def joined(uid, oid):
            rel = Relation.from_rows(
                [Row(0, {"users": {"id": uid}, "orders": {"id": oid}})],
                ["users", "orders"],
            )
            return rel.entries[0]

        assert cmp.equal(joined(1, 10), joined(1, 10))
        assert not cmp.equal(joined(1, 10), joined(1, 11))


class TestEvaluatorResolution:
    def test_resolved_once_at_construction(self, users):
        calls = []

        class CountingRegistry:
            def get_evaluator(self, data_type, eval_type):
                calls.append((data_type, eval_type))
                return lambda a, b: a == b

        cmp = EntryComparator(users.columns(), CountingRegistry())
        for _ in range(3):
            cmp.equal(_entry(id=1, name="a"), _entry(id=1, name="a"))
        assert calls == [
            (DataType.INTEGER, EvalType.EQ),
            (DataType.STRING, EvalType.EQ),
        ]

    def test_short_circuits_on_first_mismatch(self, users):
        seen = []
        registry = EvalRegistry()

        def tracking_eq(a, b):
            seen.append((a, b))
            return a == b

        registry.register(DataType.INTEGER, EvalType.EQ, tracking_eq)
        registry.register(DataType.STRING, EvalType.EQ, tracking_eq)
        cmp = EntryComparator(users.columns(), registry)

        assert not cmp.equal(_entry(id=1, name="a"), _entry(id=2, name="a"))
        assert seen == [(1, 2)]

    def test_missing_evaluator(self, users):
        registry = EvalRegistry()
        registry.register(DataType.INTEGER, EvalType.EQ, lambda a, b: a == b)
        with pytest.raises(LiveDiffEvaluatorError) as exc_info:
            EntryComparator(users.columns(), registry)
        assert exc_info.value.context == {"data_type": "string", "eval_type": "eq"}

    def test_columns_exposed(self, registry, users):
        cmp = EntryComparator(users.columns(), registry)
        assert cmp.columns == users.columns()
