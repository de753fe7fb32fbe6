"""Diff executor: apply a diff plan to the observed sequence.

Takes the operation plan produced by :class:`DiffPlanner` and performs
each operation as one single-element mutation of the caller-owned
sequence (``del seq[i]`` / ``seq.insert(i, payload)``), so that any
observer wrapping the sequence sees granular splice notifications.  The
sequence object itself is never replaced.
"""

from __future__ import annotations

import json
import sys
from collections import Counter
from collections.abc import MutableSequence
from typing import Any

from livediff.config import LiveDiffConfig
from livediff.models import DiffOp, DiffOpType
from livediff.observability import NoopMetricsHook


class _ExecState:
    """Counters accumulated while executing a plan."""

    __slots__ = ("deleted", "inserted")

    def __init__(self) -> None:
        self.inserted = 0
        self.deleted = 0


class DiffExecutor:
    """Synchronous diff executor bound to one observed sequence.

    Parameters
    ----------
    observed:
        The mutable sequence shared with subscribers.
    config:
        Engine configuration.
    """

    def __init__(self, observed: MutableSequence[Any], config: LiveDiffConfig) -> None:
        self._observed = observed
        self._config = config
        self._metrics = config.metrics if config.metrics is not None else NoopMetricsHook()

    def execute(self, ops: list[DiffOp]) -> tuple[int, int]:
        """Apply *ops* in order.

        Returns
        -------
        tuple[int, int]
            ``(inserted, deleted)`` counts.
        """
        if self._config.debug_dump_diff:
            _dump_ops(ops)

        state = _ExecState()
        observed = self._observed

        for op in ops:
            if op.op_type == DiffOpType.DELETE:
                del observed[op.position]
                state.deleted += 1
            elif op.op_type == DiffOpType.INSERT:
                observed.insert(op.position, op.payload)
                state.inserted += 1

        _emit_diff_metrics(self._metrics, ops)
        return state.inserted, state.deleted


def _dump_ops(ops: list[DiffOp]) -> None:
    """Write the plan to stderr as JSON."""
    plan = [
        {"op": op.op_type.value, "position": op.position, "index": op.index}
        for op in ops
    ]
    print(
        "[livediff] Diff plan:",
        json.dumps(plan, indent=2),
        file=sys.stderr,
    )


def _emit_diff_metrics(metrics: Any, ops: list[DiffOp]) -> None:
    """Emit ``diff_ops_total`` counters grouped by operation type."""
    op_counts: Counter[str] = Counter()
    for op in ops:
        op_counts[op.op_type.value] += 1
    for op_type_val, count in op_counts.items():
        metrics.increment(
            "livediff.diff_ops_total", count, tags={"op_type": op_type_val},
        )
