"""Condition evaluation.

Evaluates parsed conditions against FixedDecimal operands and selects the
keyword of the first matching rule.

Relation semantics:
    - The modulus is applied as real-number modulo, so the fraction of n
      survives it: 12.5 % 10 is 2.5.
    - IN (``is``, ``in``, ``=``) needs the resulting value to be an exact
      integer equal to a listed value.
    - WITHIN also accepts a non-integer value inside a listed range.
    - Negation inverts the result.

Evaluation has no side effects, so the order of relations within an AND
or OR never changes the result.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence
from decimal import Decimal
from typing import assert_never

from pluralengine.constants import KEYWORD_OTHER
from pluralengine.enums import Operand, RelationMethod
from pluralengine.runtime.operands import FixedDecimal
from pluralengine.syntax.ast import (
    AlwaysTrue,
    AndCondition,
    Condition,
    OrCondition,
    Relation,
    Rule,
)

__all__ = ["evaluate", "evaluate_relation", "select_keyword"]


def _operand_value(relation: Relation, operands: FixedDecimal) -> Decimal | int:
    """Return the relation's operand, reduced by its modulus."""
    if relation.operand is Operand.N and operands.v:
        # Work on the scaled integer so large values stay exact
        units = operands.units
        if relation.modulus is not None:
            units %= relation.modulus * 10**operands.v
        return Decimal(f"{units}E-{operands.v}")
    value = operands.operand(relation.operand)
    if relation.modulus is not None:
        value %= relation.modulus
    return value


def evaluate_relation(relation: Relation, operands: FixedDecimal) -> bool:
    """Test one relation against an operand value."""
    value = _operand_value(relation, operands)

    if relation.method is RelationMethod.IN and value != int(value):
        matched = False
    else:
        matched = any(r.low <= value <= r.high for r in relation.ranges)
    return matched != relation.negated


def evaluate(condition: Condition, operands: FixedDecimal) -> bool:
    """Evaluate a condition tree against an operand value.

    Example:
        >>> rules = PluralRulesParser().parse("one: i = 1 and v = 0")
        >>> evaluate(rules[0].condition, FixedDecimal.from_number(1))
        True
        >>> evaluate(rules[0].condition, FixedDecimal.create(1, 1, 0))
        False
    """
    match condition:
        case Relation():
            return evaluate_relation(condition, operands)
        case AlwaysTrue():
            return True
        case AndCondition(relations=relations):
            return all(evaluate(r, operands) for r in relations)
        case OrCondition(branches=branches):
            # No branches: the catch-all condition
            return not branches or any(evaluate(b, operands) for b in branches)
        case _ as unreachable:
            assert_never(unreachable)


def select_keyword(rules: Sequence[Rule], operands: FixedDecimal) -> str:
    """Return the keyword of the first rule whose condition holds.

    Falls back to "other" so that selection is total even for a rule
    sequence without a catch-all rule.
    """
    for rule in rules:
        if evaluate(rule.condition, operands):
            return rule.keyword
    return KEYWORD_OTHER
