"""Hypothesis strategies for pluralengine property-based testing.

Usage:
    from tests.strategies import descriptions, fixed_decimals
    from tests.strategies.plural import relations, range_lists

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - fixed_decimals, relations, descriptions
"""

from .plural import (
    conditions,
    descriptions,
    fixed_decimals,
    integer_values,
    range_lists,
    relations,
)

__all__ = [
    "conditions",
    "descriptions",
    "fixed_decimals",
    "integer_values",
    "range_lists",
    "relations",
]
