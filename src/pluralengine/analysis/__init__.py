"""Introspection of parsed plural rules.

Provides value-set generation (which numbers select a keyword, and whether
there are finitely many) and keyword status classification.

Python 3.13+.
"""

from .status import KeywordStatusResult, keyword_status
from .values import ValueSetGenerator

__all__ = [
    "KeywordStatusResult",
    "ValueSetGenerator",
    "keyword_status",
]
