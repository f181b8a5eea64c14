"""Plural rules syntax package.

Provides the parser, syntax tree definitions and serialization.
Separate from runtime so that descriptions can be checked and normalized
without evaluating them.

Python 3.13+.
"""

from .ast import (
    OTHER_RULE,
    AlwaysTrue,
    AndCondition,
    Condition,
    Conjunct,
    OrCondition,
    Relation,
    Rule,
    ValueRange,
)
from .cursor import Cursor, ParseResult
from .parser import PluralRulesParser, parse_condition
from .serializer import serialize, serialize_condition, serialize_rule

__all__ = [
    "OTHER_RULE",
    "AlwaysTrue",
    "AndCondition",
    "Condition",
    "Conjunct",
    "Cursor",
    "OrCondition",
    "ParseResult",
    "PluralRulesParser",
    "Relation",
    "Rule",
    "ValueRange",
    "parse_condition",
    "serialize",
    "serialize_condition",
    "serialize_rule",
]
