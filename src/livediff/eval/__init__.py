"""Type-dispatched evaluator registry.

Exports
-------
EvalRegistry
    Lookup table from ``(DataType, EvalType)`` to a comparison function.
default_registry
    Build a registry pre-populated with the built-in evaluators.
"""

from .registry import EvalRegistry, default_registry

__all__ = [
    "EvalRegistry",
    "default_registry",
]
