"""The diff engine: reconcile an observed sequence with a new query result.

A :class:`DiffEngine` is bound to one query projection and one observed
sequence.  Each :meth:`DiffEngine.apply_diff` call compares the previous
result with the freshly computed one and patches the observed sequence in
place with the minimal number of single-element deletions and insertions.
"""

from __future__ import annotations

import time
from collections.abc import MutableSequence, Sequence
from typing import Any

from livediff.config import LiveDiffConfig
from livediff.errors import LiveDiffInvariantError, LiveDiffObservedMismatchError
from livediff.models import Column, DiffResult, EqualityRegistry, SelectQuery
from livediff.observability import NoopMetricsHook, get_logger

from .columns import detect_columns
from .comparator import EntryComparator
from .executor import DiffExecutor
from .planner import DiffPlanner

log = get_logger("livediff.engine")


class DiffEngine:
    """Detects and applies the difference between old and new results.

    Parameters
    ----------
    registry:
        Evaluator registry providing ``EQ`` for every projected column's
        data type.  Resolved eagerly: a missing evaluator raises
        :class:`~livediff.errors.LiveDiffEvaluatorError` here.
    query:
        The query projection whose results are being observed.
    observed:
        The sequence holding the last results; this is the object
        subscribers watch.  It must currently hold the payloads of the
        result that will be passed as *old* to the next call.
    config:
        Engine configuration.  Defaults to :class:`LiveDiffConfig()`.
    """

    def __init__(
        self,
        registry: EqualityRegistry,
        query: SelectQuery,
        observed: MutableSequence[Any],
        config: LiveDiffConfig | None = None,
    ) -> None:
        self._config = config if config is not None else LiveDiffConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )
        self._query = query
        self._observed = observed
        self._columns: list[Column] = detect_columns(query)
        self._comparator = EntryComparator(self._columns, registry)
        self._planner = DiffPlanner(self._comparator, self._config)
        self._executor = DiffExecutor(observed, self._config)

    @property
    def columns(self) -> list[Column]:
        """The resolved projection, fixed for the engine's lifetime."""
        return list(self._columns)

    @property
    def observed(self) -> MutableSequence[Any]:
        return self._observed

    def comparator(self, left: Any, right: Any) -> bool:
        """Whether two entries are identical on the projected columns."""
        return self._comparator.equal(left, right)

    def apply_diff(self, old_results: Any | None, new_results: Any) -> DiffResult:
        """Detect the diff between *old_results* and *new_results* and apply
        it to the observed sequence, notifying its observers.

        Modifications are never detected as such: a changed entry is
        deleted and its replacement inserted.

        Parameters
        ----------
        old_results:
            The previous result, or ``None`` when there is none (treated
            as an empty result).
        new_results:
            The freshly computed result.

        Returns
        -------
        DiffResult
            Counts of kept, inserted and deleted entries plus the plan.

        Raises
        ------
        LiveDiffInvariantError
            If *new_results* is ``None`` or the LCS table limit is hit.
        LiveDiffObservedMismatchError
            If ``verify_observed`` is on and the observed sequence does
            not hold the payloads of *old_results*.
        """
        if new_results is None:
            raise LiveDiffInvariantError(
                message="apply_diff requires a new result",
                context={"argument": "new_results"},
            )

        start = time.monotonic()
        old_entries: Sequence[Any] = () if old_results is None else old_results.entries
        new_entries: Sequence[Any] = new_results.entries

        if self._config.verify_observed:
            self._verify_observed(old_entries)

        pairs = self._planner.match(old_entries, new_entries)
        ops = DiffPlanner.build_ops(old_entries, new_entries, pairs)
        inserted, deleted = self._executor.execute(ops)

        elapsed_ms = (time.monotonic() - start) * 1000
        result = DiffResult(
            entries_kept=len(pairs),
            entries_inserted=inserted,
            entries_deleted=deleted,
            ops=ops,
        )
        self._emit(result, elapsed_ms)
        return result

    def _verify_observed(self, old_entries: Sequence[Any]) -> None:
        observed = self._observed
        if len(observed) != len(old_entries):
            raise LiveDiffObservedMismatchError(
                message=(
                    f"Observed sequence holds {len(observed)} elements but the "
                    f"previous result has {len(old_entries)} entries"
                ),
                context={
                    "expected_length": len(old_entries),
                    "actual_length": len(observed),
                    "first_mismatch_index": None,
                },
            )
        for idx, entry in enumerate(old_entries):
            current = observed[idx]
            expected = entry.payload()
            if current is not expected and current != expected:
                raise LiveDiffObservedMismatchError(
                    message=(
                        f"Observed sequence element {idx} does not match the "
                        "previous result"
                    ),
                    context={
                        "expected_length": len(old_entries),
                        "actual_length": len(observed),
                        "first_mismatch_index": idx,
                    },
                )

    def _emit(self, result: DiffResult, elapsed_ms: float) -> None:
        self._metrics.increment("livediff.entries_kept_total", result.entries_kept)
        self._metrics.timing("livediff.apply_duration_ms", elapsed_ms)
        self._metrics.gauge("livediff.lcs_cells", self._planner.last_table_cells)
        log.debug(
            "diff applied",
            extra={"extra_fields": {
                "kept": result.entries_kept,
                "inserted": result.entries_inserted,
                "deleted": result.entries_deleted,
                "duration_ms": round(elapsed_ms, 3),
            }},
        )
