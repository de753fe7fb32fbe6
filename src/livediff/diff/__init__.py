"""Diff engine for live query results.

Exports
-------
DiffEngine
    Binds a projection and an observed sequence; applies result diffs.
DiffPlanner
    Computes the delete-then-insert plan from an LCS match.
DiffExecutor
    Applies a plan to the observed sequence.
EntryComparator
    Projection-restricted entry equality.
detect_columns
    Resolve the columns that participate in comparison.
lcs_match
    LCS matched index pairs under an equality predicate.
longest_common_subsequence
    Generic LCS with a result collector.
"""

from .columns import detect_columns
from .comparator import EntryComparator
from .engine import DiffEngine
from .executor import DiffExecutor
from .lcs_matcher import lcs_match, longest_common_subsequence
from .planner import DiffPlanner

__all__ = [
    "DiffEngine",
    "DiffExecutor",
    "DiffPlanner",
    "EntryComparator",
    "detect_columns",
    "lcs_match",
    "longest_common_subsequence",
]
