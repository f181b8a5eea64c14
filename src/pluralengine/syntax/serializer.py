"""Serialize plural rules syntax trees back to description text.

Produces canonical CLDR syntax: ``=`` / ``!=`` for exact membership,
``within`` / ``not within`` for range membership and ``%`` for modulus.
Useful for:
- Normalizing hand-written descriptions
- Property-based testing (roundtrip: parse → serialize → parse)

Python 3.13+.
"""

from collections.abc import Iterable
from typing import assert_never

from pluralengine.enums import Operand, RelationMethod

from .ast import AlwaysTrue, AndCondition, Condition, OrCondition, Relation, Rule, ValueRange

__all__ = ["serialize", "serialize_condition", "serialize_rule"]


def _serialize_range(value_range: ValueRange) -> str:
    if value_range.is_single:
        return str(value_range.low)
    return f"{value_range.low}..{value_range.high}"


def _serialize_relation(relation: Relation) -> str:
    parts = [str(relation.operand)]
    if relation.modulus is not None:
        parts.append(f"% {relation.modulus}")
    match relation.method:
        case RelationMethod.IN:
            parts.append("!=" if relation.negated else "=")
        case RelationMethod.WITHIN:
            parts.append("not within" if relation.negated else "within")
    parts.append(",".join(_serialize_range(r) for r in relation.ranges))
    return " ".join(parts)


def serialize_condition(condition: Condition) -> str:
    """Serialize a condition tree.

    An always-true conjunct is written as a bare ``n``, which parses back to
    the same node. The empty OrCondition serializes to the empty string.
    """
    match condition:
        case Relation():
            return _serialize_relation(condition)
        case AlwaysTrue():
            return str(Operand.N)
        case AndCondition(relations=relations):
            return " and ".join(serialize_condition(r) for r in relations)
        case OrCondition(branches=branches):
            return " or ".join(serialize_condition(b) for b in branches)
        case _ as unreachable:
            assert_never(unreachable)


def serialize_rule(rule: Rule) -> str:
    """Serialize one rule with its sample clauses.

    Example:
        >>> serialize_rule(PluralRulesParser().parse("one: n is 1 @integer 1")[0])
        'one: n = 1 @integer 1'
    """
    parts = [f"{rule.keyword}:"]
    if not rule.condition.is_empty:
        parts.append(serialize_condition(rule.condition))
    if rule.integer_samples is not None:
        parts.append(str(rule.integer_samples))
    if rule.decimal_samples is not None:
        parts.append(str(rule.decimal_samples))
    return " ".join(parts)


def serialize(rules: Iterable[Rule]) -> str:
    """Serialize a rule-set to a description that parses back to equal rules."""
    return "; ".join(serialize_rule(rule) for rule in rules)
