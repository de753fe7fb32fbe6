"""Shared test fixtures for the livediff test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from livediff.config import LiveDiffConfig
from livediff.eval import EvalRegistry, default_registry
from livediff.models import DataType, Relation, Row, SelectQuery, Table


class RecordingList(list):
    """A list that records every single-element mutation, like an observer
    watching splices would."""

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        self.mutations: list[tuple[str, int, Any]] = []

    def insert(self, index: int, value: Any) -> None:
        self.mutations.append(("insert", index, value))
        super().insert(index, value)

    def __delitem__(self, index: Any) -> None:
        self.mutations.append(("delete", index, self[index]))
        super().__delitem__(index)


@pytest.fixture
def config() -> LiveDiffConfig:
    """Default engine configuration."""
    return LiveDiffConfig()


@pytest.fixture
def registry() -> EvalRegistry:
    """A fresh registry holding the built-in evaluators."""
    return default_registry()


@pytest.fixture
def users() -> Table:
    """A two-column ``users`` table."""
    return Table("users", [("id", DataType.INTEGER), ("name", DataType.STRING)])


@pytest.fixture
def id_query(users: Table) -> SelectQuery:
    """A query projecting only ``users.id``."""
    return SelectQuery(columns=[users.column("id")], from_tables=[users])


@pytest.fixture
def make_relation() -> Callable[..., Relation]:
    """Build a relation of fresh rows from ``(id, name)`` tuples or ids."""

    def _make(*specs: Any) -> Relation:
        rows = []
        for n, spec in enumerate(specs):
            row_id, name = spec if isinstance(spec, tuple) else (spec, f"user-{spec}")
            rows.append(Row(n, {"id": row_id, "name": name}))
        return Relation.from_rows(rows, ["users"])

    return _make


@pytest.fixture
def recording_list() -> Callable[..., RecordingList]:
    """Factory for :class:`RecordingList` instances."""
    return RecordingList
