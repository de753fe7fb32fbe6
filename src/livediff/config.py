"""Engine configuration for livediff.

:class:`LiveDiffConfig` is a plain dataclass that captures every tuneable
knob of the diff engine.  A single instance can be shared by any number of
:class:`~livediff.diff.engine.DiffEngine` instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------

@dataclass
class LiveDiffConfig:
    """Complete configuration for a diff engine.

    Every parameter has a sensible default, so ``LiveDiffConfig()`` is a
    valid configuration.

    Parameters
    ----------
    verify_observed:
        Before mutating, check that the observed sequence holds exactly the
        payloads of the previous result (same length, and each element is
        or equals the corresponding payload).  A mismatch raises
        :class:`~livediff.errors.LiveDiffObservedMismatchError` before any
        element is touched.
    max_lcs_cells:
        Optional upper bound on the number of cells of the LCS table
        (computed after trimming the common prefix and suffix).  ``None``
        means unbounded.  Exceeding the bound raises
        :class:`~livediff.errors.LiveDiffInvariantError`.
    metrics:
        A :class:`~livediff.observability.MetricsHook` implementation.
        Defaults to a no-op hook.
    debug_dump_diff:
        Write the planned diff operations as JSON to *stderr* before they
        are applied.
    """

    # ── Safety ──────────────────────────────────────────────────────────
    verify_observed: bool = True

    max_lcs_cells: int | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_diff: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_lcs_cells is not None and self.max_lcs_cells <= 0:
            raise ValueError(f"max_lcs_cells must be > 0, got {self.max_lcs_cells}")
