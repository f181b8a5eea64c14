"""Runtime package: operand model, condition evaluation and sampling config.

The PluralRules facade lives in :mod:`pluralengine.runtime.rules` and is
re-exported from the top-level package.

Python 3.13+.
"""

from .evaluator import evaluate, evaluate_relation, select_keyword
from .operands import FixedDecimal, FixedDecimalRange, FixedDecimalSamples
from .sampling_config import SamplingConfig

__all__ = [
    "FixedDecimal",
    "FixedDecimalRange",
    "FixedDecimalSamples",
    "SamplingConfig",
    "evaluate",
    "evaluate_relation",
    "select_keyword",
]
