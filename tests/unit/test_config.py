"""Tests for config.py and errors.py."""

from __future__ import annotations

import pickle

import pytest

from livediff.config import LiveDiffConfig
from livediff.errors import (
    ErrorCode,
    LiveDiffError,
    LiveDiffEvaluatorError,
    LiveDiffInvariantError,
    LiveDiffObservedMismatchError,
)


class TestConfig:
    def test_defaults(self):
        config = LiveDiffConfig()
        assert config.verify_observed is True
        assert config.max_lcs_cells is None
        assert config.metrics is None
        assert config.debug_dump_diff is False

    @pytest.mark.parametrize("limit", [0, -5])
    def test_invalid_cell_limit(self, limit):
        with pytest.raises(ValueError, match="max_lcs_cells"):
            LiveDiffConfig(max_lcs_cells=limit)

    def test_valid_cell_limit(self):
        assert LiveDiffConfig(max_lcs_cells=1).max_lcs_cells == 1


_ERROR_CLASSES = {
    ErrorCode.MISSING_EVALUATOR: LiveDiffEvaluatorError,
    ErrorCode.INVARIANT_VIOLATION: LiveDiffInvariantError,
    ErrorCode.OBSERVED_MISMATCH: LiveDiffObservedMismatchError,
}


class TestErrors:
    def test_every_error_code_has_a_subclass(self):
        assert set(_ERROR_CLASSES) == set(ErrorCode)

    @pytest.mark.parametrize(("code", "cls"), list(_ERROR_CLASSES.items()))
    def test_error_class_sets_correct_code(self, code, cls):
        err = cls("boom", context={"k": 1})
        assert err.code == code
        assert err.message == "boom"
        assert err.context == {"k": 1}
        assert isinstance(err, LiveDiffError)
        assert str(err) == "boom"

    def test_context_defaults_to_empty(self):
        assert LiveDiffInvariantError("x").context == {}

    def test_cause_is_chained(self):
        cause = KeyError("k")
        err = LiveDiffEvaluatorError("missing", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_repr(self):
        err = LiveDiffObservedMismatchError("bad", context={"first_mismatch_index": 2})
        text = repr(err)
        assert text.startswith("LiveDiffObservedMismatchError(")
        assert "OBSERVED_MISMATCH" in text
        assert "first_mismatch_index" in text

    def test_codes_serialise_as_strings(self):
        assert ErrorCode.OBSERVED_MISMATCH == "OBSERVED_MISMATCH"

    @pytest.mark.parametrize("cls", list(_ERROR_CLASSES.values()))
    def test_pickle_round_trip(self, cls):
        err = cls("boom", context={"a": 1})
        restored = pickle.loads(pickle.dumps(err))
        assert type(restored) is cls
        assert restored.code == err.code
        assert restored.message == "boom"
        assert restored.context == {"a": 1}
