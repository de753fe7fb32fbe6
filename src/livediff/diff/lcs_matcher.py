"""Longest Common Subsequence matching under a caller-supplied equality.

Uses the standard dynamic-programming LCS algorithm to find the longest
ordered sequence of entries that are equal between the previous and the
freshly computed result.  The matched index pairs drive the diff planner:
matched positions are kept, everything else is deleted or inserted.

The common prefix and suffix are matched greedily before the table is
built, so the usual "a few rows changed" case costs a table proportional
to the changed window only.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from livediff.errors import LiveDiffInvariantError

T = TypeVar("T")


def _common_affixes(
    seq_a: Sequence[Any],
    seq_b: Sequence[Any],
    equal_fn: Callable[[Any, Any], bool],
) -> tuple[int, int]:
    """Return the lengths of the common prefix and suffix (non-overlapping)."""
    limit = min(len(seq_a), len(seq_b))

    prefix = 0
    while prefix < limit and equal_fn(seq_a[prefix], seq_b[prefix]):
        prefix += 1

    suffix = 0
    last_a = len(seq_a) - 1
    last_b = len(seq_b) - 1
    while (
        suffix < limit - prefix
        and equal_fn(seq_a[last_a - suffix], seq_b[last_b - suffix])
    ):
        suffix += 1

    return prefix, suffix


def lcs_match(
    seq_a: Sequence[Any],
    seq_b: Sequence[Any],
    equal_fn: Callable[[Any, Any], bool] = operator.eq,
    *,
    max_cells: int | None = None,
    on_table_size: Callable[[int], None] | None = None,
) -> list[tuple[int, int]]:
    """Compute LCS-based matched pairs between *seq_a* and *seq_b*.

    Parameters
    ----------
    seq_a:
        The previous sequence (e.g. the old result's entries).
    seq_b:
        The desired sequence (e.g. the new result's entries).
    equal_fn:
        Equality predicate ``equal_fn(a_item, b_item) -> bool``.
    max_cells:
        Refuse to build a DP table with more cells than this.
    on_table_size:
        Called once with the number of DP cells actually allocated.

    Returns
    -------
    list[tuple[int, int]]
        ``(index_a, index_b)`` pairs of matched items, ascending on both
        sides.  Unmatched indices of *seq_a* are deletions, unmatched
        indices of *seq_b* are insertions.

    Raises
    ------
    LiveDiffInvariantError
        If the table would exceed *max_cells*.
    """
    prefix, suffix = _common_affixes(seq_a, seq_b, equal_fn)

    # The window between the matched prefix and suffix.
    mid_a = seq_a[prefix:len(seq_a) - suffix]
    mid_b = seq_b[prefix:len(seq_b) - suffix]
    m = len(mid_a)
    n = len(mid_b)

    cells = m * n
    if max_cells is not None and cells > max_cells:
        raise LiveDiffInvariantError(
            message=f"LCS table of {cells} cells exceeds the limit of {max_cells}",
            context={"cells": cells, "limit": max_cells},
        )
    if on_table_size is not None:
        on_table_size(cells)

    pairs: list[tuple[int, int]] = [(k, k) for k in range(prefix)]

    if m and n:
        # dp[i][j] stores the length of the LCS of mid_a[:i] and mid_b[:j].
        dp: list[list[int]] = [[0] * (n + 1) for _ in range(m + 1)]

        for i in range(1, m + 1):
            row = dp[i]
            above = dp[i - 1]
            item_a = mid_a[i - 1]
            for j in range(1, n + 1):
                if equal_fn(item_a, mid_b[j - 1]):
                    row[j] = above[j - 1] + 1
                else:
                    row[j] = max(above[j], row[j - 1])

        # Backtrack: diagonal whenever the items match, otherwise up on
        # ties (consume seq_a first).
        middle: list[tuple[int, int]] = []
        i, j = m, n
        while i > 0 and j > 0:
            if equal_fn(mid_a[i - 1], mid_b[j - 1]):
                middle.append((prefix + i - 1, prefix + j - 1))
                i -= 1
                j -= 1
            elif dp[i - 1][j] >= dp[i][j - 1]:
                i -= 1
            else:
                j -= 1

        middle.reverse()
        pairs.extend(middle)

    tail_a = len(seq_a) - suffix
    tail_b = len(seq_b) - suffix
    pairs.extend((tail_a + k, tail_b + k) for k in range(suffix))
    return pairs


def longest_common_subsequence(
    seq_a: Sequence[Any],
    seq_b: Sequence[Any],
    equal_fn: Callable[[Any, Any], bool] = operator.eq,
    collect_fn: Callable[[int, int], T] | None = None,
) -> list[T]:
    """Return one longest common subsequence of *seq_a* and *seq_b*.

    Each matched index pair is mapped through ``collect_fn(index_a,
    index_b)``; by default the item from *seq_a* is collected.
    """
    pairs = lcs_match(seq_a, seq_b, equal_fn)
    if collect_fn is None:
        return [seq_a[ia] for ia, _ in pairs]
    return [collect_fn(ia, ib) for ia, ib in pairs]
