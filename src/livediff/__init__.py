"""livediff — incremental diffing of live query results.

Public re-exports
-----------------

* **Engine:** :class:`DiffEngine`
* **Configuration:** :class:`LiveDiffConfig`
* **Evaluators:** :class:`EvalRegistry`, :func:`default_registry`
* **Errors:** Every :class:`LiveDiffError` subclass and :class:`ErrorCode`
* **Models:** Schema, result-set and diff plan types

Usage::

    from livediff import DiffEngine, SelectQuery, default_registry

    observed: list = []
    engine = DiffEngine(default_registry(), SelectQuery(from_tables=[users]), observed)
    engine.apply_diff(None, first_result)
    engine.apply_diff(first_result, second_result)
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from livediff.config import LiveDiffConfig

# ── Engine ──────────────────────────────────────────────────────────────
from livediff.diff import (
    DiffEngine,
    EntryComparator,
    detect_columns,
    lcs_match,
    longest_common_subsequence,
)

# ── Errors ──────────────────────────────────────────────────────────────
from livediff.errors import (
    ErrorCode,
    LiveDiffError,
    LiveDiffEvaluatorError,
    LiveDiffInvariantError,
    LiveDiffObservedMismatchError,
)

# ── Evaluators ──────────────────────────────────────────────────────────
from livediff.eval import EvalRegistry, default_registry

# ── Models ──────────────────────────────────────────────────────────────
from livediff.models import (
    Column,
    DataType,
    DiffOp,
    DiffOpType,
    DiffResult,
    EvalType,
    Relation,
    RelationEntry,
    Row,
    SelectQuery,
    Table,
)

__all__ = [
    "Column",
    "DataType",
    "DiffEngine",
    "DiffOp",
    "DiffOpType",
    "DiffResult",
    "EntryComparator",
    "ErrorCode",
    "EvalRegistry",
    "EvalType",
    "LiveDiffConfig",
    "LiveDiffError",
    "LiveDiffEvaluatorError",
    "LiveDiffInvariantError",
    "LiveDiffObservedMismatchError",
    "Relation",
    "RelationEntry",
    "Row",
    "SelectQuery",
    "Table",
    "default_registry",
    "detect_columns",
    "lcs_match",
    "longest_common_subsequence",
]
