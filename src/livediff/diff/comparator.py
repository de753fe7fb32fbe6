"""Entry equality restricted to the projected columns."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from livediff.models import Column, EqualityRegistry, EvalType, Evaluator


class EntryComparator:
    """Decides whether two result entries are the same for diff purposes.

    Only the projected columns are taken into account; payload identity
    and non-projected fields never matter.  The ``EQ`` evaluator for each
    column is resolved once, at construction, so a registry missing an
    evaluator fails immediately with
    :class:`~livediff.errors.LiveDiffEvaluatorError`.

    Parameters
    ----------
    columns:
        The resolved projection.
    registry:
        Evaluator registry used to look up ``EQ`` per data type.
    """

    __slots__ = ("_bound", "_columns")

    def __init__(self, columns: Sequence[Column], registry: EqualityRegistry) -> None:
        self._columns: tuple[Column, ...] = tuple(columns)
        self._bound: tuple[tuple[Column, Evaluator], ...] = tuple(
            (column, registry.get_evaluator(column.get_type(), EvalType.EQ))
            for column in self._columns
        )

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._columns

    def equal(self, left: Any, right: Any) -> bool:
        """Return ``True`` if every projected field of *left* and *right*
        compares equal.  Stops at the first mismatch.
        """
        return all(
            evaluate(left.get_field(column), right.get_field(column))
            for column, evaluate in self._bound
        )

    __call__ = equal
