"""Diff planner: turn an LCS match into positional edit operations.

Given the entries of the previous result and of the new result, the
planner produces the ordered list of single-element :class:`DiffOp`
mutations that transforms a sequence holding the old payloads into one
holding the new payloads:

1. all ``DELETE`` ops, for old entries outside the match, in ascending
   old order;
2. all ``INSERT`` ops, for new entries outside the match, in ascending
   new order.

Positions refer to the sequence as it is at the moment each op runs, so
the plan must be applied strictly in order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from livediff.config import LiveDiffConfig
from livediff.models import DiffOp, DiffOpType

from .lcs_matcher import lcs_match


class DiffPlanner:
    """Plans delete-then-insert operations for one diff application.

    Parameters
    ----------
    equal_fn:
        Entry equality predicate (normally an
        :class:`~livediff.diff.comparator.EntryComparator`).
    config:
        Engine configuration (used for the LCS table limit).
    """

    def __init__(
        self,
        equal_fn: Callable[[Any, Any], bool],
        config: LiveDiffConfig,
    ) -> None:
        self._equal_fn = equal_fn
        self._config = config
        self.last_table_cells: int = 0

    def match(
        self, old: Sequence[Any], new: Sequence[Any],
    ) -> list[tuple[int, int]]:
        """Compute the matched ``(old_index, new_index)`` pairs once."""
        self.last_table_cells = 0
        if not old or not new:
            return []
        return lcs_match(
            old, new, self._equal_fn,
            max_cells=self._config.max_lcs_cells,
            on_table_size=self._record_cells,
        )

    def plan(self, old: Sequence[Any], new: Sequence[Any]) -> list[DiffOp]:
        """Compute the edit operations transforming *old* into *new*.

        Parameters
        ----------
        old:
            Entries of the previous result (may be empty).
        new:
            Entries of the new result.

        Returns
        -------
        list[DiffOp]
            Deletions followed by insertions.  Their total count is
            ``len(old) + len(new) - 2 * len(lcs)``.
        """
        pairs = self.match(old, new)
        return self.build_ops(old, new, pairs)

    @staticmethod
    def build_ops(
        old: Sequence[Any],
        new: Sequence[Any],
        pairs: Sequence[tuple[int, int]],
    ) -> list[DiffOp]:
        """Derive the deletion and insertion passes from one match set."""
        matched_old: set[int] = {pair[0] for pair in pairs}
        matched_new: set[int] = {pair[1] for pair in pairs}

        ops: list[DiffOp] = []

        # Deletion pass: a removed element shifts every later one down, so
        # the position only advances past retained elements.
        position = 0
        for old_idx, entry in enumerate(old):
            if old_idx in matched_old:
                position += 1
                continue
            ops.append(
                DiffOp(
                    op_type=DiffOpType.DELETE,
                    position=position,
                    index=old_idx,
                    payload=entry.payload(),
                )
            )

        # Insertion pass: after the deletions the sequence holds exactly
        # the matched entries, in order, so each missing entry goes in at
        # its final index.
        for new_idx, entry in enumerate(new):
            if new_idx in matched_new:
                continue
            ops.append(
                DiffOp(
                    op_type=DiffOpType.INSERT,
                    position=new_idx,
                    index=new_idx,
                    payload=entry.payload(),
                )
            )

        return ops

    def _record_cells(self, cells: int) -> None:
        self.last_table_cells = cells
