"""Evaluator registry keyed by column data type and operator kind.

The diff comparator never compares field values itself: it asks the
registry for the ``EQ`` evaluator of each projected column's data type.
The registry is built once by the owning query engine and injected into
every :class:`~livediff.diff.engine.DiffEngine`; it is read-only from the
engine's point of view and safe to share.

All built-in evaluators are null-safe: ``None`` equals only ``None``, and
any ordering comparison involving ``None`` is ``False``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from typing import Any

from livediff.errors import LiveDiffEvaluatorError
from livediff.models import DataType, EvalType, Evaluator

# ---------------------------------------------------------------------------
# Built-in evaluators
# ---------------------------------------------------------------------------

def _eq(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return left is None and right is None
    return bool(left == right)


def _bytes_eq(left: Any, right: Any) -> bool:
    if left is None or right is None:
        return left is None and right is None
    return bytes(left) == bytes(right)


def _negate(fn: Evaluator) -> Evaluator:
    def neq(left: Any, right: Any) -> bool:
        return not fn(left, right)

    return neq


def _ordered(op: Callable[[Any, Any], bool]) -> Evaluator:
    def evaluate(left: Any, right: Any) -> bool:
        if left is None or right is None:
            return False
        return bool(op(left, right))

    return evaluate


def _between(value: Any, bounds: tuple[Any, Any]) -> bool:
    low, high = bounds
    if value is None or low is None or high is None:
        return False
    return bool(low <= value <= high)


def _in(value: Any, candidates: Iterable[Any]) -> bool:
    return any(_eq(value, candidate) for candidate in candidates)


def _match(value: Any, pattern: str | re.Pattern[str] | None) -> bool:
    if value is None or pattern is None:
        return value is None and pattern is None
    return re.search(pattern, value) is not None


_ORDERED_TYPES = (
    DataType.BOOLEAN,
    DataType.DATE_TIME,
    DataType.INTEGER,
    DataType.NUMBER,
    DataType.STRING,
)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class EvalRegistry:
    """Lookup table from ``(data_type, eval_type)`` to an evaluator.

    An evaluator is a plain callable taking two values and returning a
    ``bool``.  For ``BETWEEN`` the second argument is a ``(low, high)``
    pair, for ``IN`` an iterable of candidates, for ``MATCH`` a regular
    expression.
    """

    def __init__(self) -> None:
        self._evaluators: dict[tuple[DataType, EvalType], Evaluator] = {}

    def register(
        self, data_type: DataType, eval_type: EvalType, fn: Evaluator,
    ) -> None:
        """Add or override the evaluator for *data_type* / *eval_type*."""
        self._evaluators[(DataType(data_type), EvalType(eval_type))] = fn

    def has_evaluator(self, data_type: DataType, eval_type: EvalType) -> bool:
        return (data_type, eval_type) in self._evaluators

    def get_evaluator(self, data_type: DataType, eval_type: EvalType) -> Evaluator:
        """Return the evaluator for *data_type* / *eval_type*.

        Raises
        ------
        LiveDiffEvaluatorError
            If nothing is registered for the pair.
        """
        try:
            return self._evaluators[(data_type, eval_type)]
        except KeyError:
            raise LiveDiffEvaluatorError(
                message=(
                    "No evaluator registered for data type "
                    f"{getattr(data_type, 'value', data_type)!r} and operator "
                    f"{getattr(eval_type, 'value', eval_type)!r}"
                ),
                context={
                    "data_type": getattr(data_type, "value", data_type),
                    "eval_type": getattr(eval_type, "value", eval_type),
                },
            ) from None

    def __len__(self) -> int:
        return len(self._evaluators)


def default_registry() -> EvalRegistry:
    """Build a new registry holding the built-in evaluators.

    Every :class:`DataType` gets ``EQ`` and ``NEQ``.  Scalar types
    (boolean, date-time, integer, number, string) additionally get the
    ordering operators, ``BETWEEN`` and ``IN``; strings get ``MATCH``.
    The returned registry is independent, so callers may override entries
    without affecting other registries.
    """
    registry = EvalRegistry()

    for data_type in DataType:
        eq = _bytes_eq if data_type is DataType.BYTES else _eq
        registry.register(data_type, EvalType.EQ, eq)
        registry.register(data_type, EvalType.NEQ, _negate(eq))

    for data_type in _ORDERED_TYPES:
        registry.register(data_type, EvalType.LT, _ordered(lambda a, b: a < b))
        registry.register(data_type, EvalType.LTE, _ordered(lambda a, b: a <= b))
        registry.register(data_type, EvalType.GT, _ordered(lambda a, b: a > b))
        registry.register(data_type, EvalType.GTE, _ordered(lambda a, b: a >= b))
        registry.register(data_type, EvalType.BETWEEN, _between)
        registry.register(data_type, EvalType.IN, _in)

    registry.register(DataType.STRING, EvalType.MATCH, _match)
    return registry
