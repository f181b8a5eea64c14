"""Plural rules syntax tree node definitions.

A rule-set description parses into a tuple of Rule nodes. Each rule's
condition is an OrCondition of AndConditions of Relations, which mirrors the
grammar exactly:

    condition := and ('or' and)*
    and       := relation ('and' relation)*
    relation  := operand ['mod' value] ('is' | 'in' | 'within' | ...) range-list

Nodes are frozen, so equality between two trees is structural: two
descriptions that differ only in spelling (``n % 11 != 5`` and
``n mod 11 is not 5``) compare equal, while semantically equivalent but
differently written conditions do not.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeIs

from pluralengine.constants import KEYWORD_OTHER
from pluralengine.enums import Operand, RelationMethod

if TYPE_CHECKING:
    from pluralengine.runtime.operands import FixedDecimalSamples

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Values
    "ValueRange",
    # Conditions
    "Relation",
    "AlwaysTrue",
    "AndCondition",
    "OrCondition",
    # Rules
    "Rule",
    "OTHER_RULE",
    # Type aliases
    "Conjunct",
    "Condition",
]

# ============================================================================
# VALUES
# ============================================================================


@dataclass(frozen=True, slots=True)
class ValueRange:
    """Inclusive integer range of a relation: ``2..5``, or ``7`` when low == high."""

    low: int
    high: int

    def __post_init__(self) -> None:
        """Validate range invariants."""
        if self.low < 0:
            msg = f"ValueRange low must be >= 0, got {self.low}"
            raise ValueError(msg)
        if self.high < self.low:
            msg = f"ValueRange high ({self.high}) must be >= low ({self.low})"
            raise ValueError(msg)

    @property
    def is_single(self) -> bool:
        """True for a single value rather than a range."""
        return self.low == self.high

    def __len__(self) -> int:
        return self.high - self.low + 1


# ============================================================================
# CONDITIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Relation:
    """Atomic predicate: ``operand [mod M] [not] in|within range-list``.

    ``is``, ``in``, ``=`` and their negations all parse to the IN method;
    ``within`` keeps its own method because it also accepts non-integer
    values inside a range.

    Attributes:
        operand: The operand tested
        modulus: Divisor applied before testing (None for no modulus)
        method: IN for exact integer membership, WITHIN for range membership
        negated: True for is not, not in, not within, !=
        ranges: Range list in written order
    """

    operand: Operand
    modulus: int | None
    method: RelationMethod
    negated: bool
    ranges: tuple[ValueRange, ...]

    @staticmethod
    def guard(node: object) -> TypeIs["Relation"]:
        """Type guard for Relation (used in conjunct filtering)."""
        return isinstance(node, Relation)


@dataclass(frozen=True, slots=True)
class AlwaysTrue:
    """Condition that holds for every value.

    A bare operand with no comparator (``a: n``) parses to this node.
    """

    @staticmethod
    def guard(node: object) -> TypeIs["AlwaysTrue"]:
        """Type guard for AlwaysTrue."""
        return isinstance(node, AlwaysTrue)


type Conjunct = Relation | AlwaysTrue


@dataclass(frozen=True, slots=True)
class AndCondition:
    """Conjunction: holds when every relation holds."""

    relations: tuple[Conjunct, ...]


@dataclass(frozen=True, slots=True)
class OrCondition:
    """Disjunction: holds when any branch holds.

    An OrCondition with no branches holds for every value. It is the
    condition of the "other" rule.
    """

    branches: tuple[AndCondition, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True for the always-true condition of the "other" rule."""
        return not self.branches


type Condition = Relation | AlwaysTrue | AndCondition | OrCondition


# ============================================================================
# RULES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Rule:
    """One clause of a rule-set: ``keyword: condition @integer ... @decimal ...``.

    Attributes:
        keyword: Plural category selected when the condition holds
        condition: The rule's condition
        integer_samples: The @integer clause, if written
        decimal_samples: The @decimal clause, if written
        text: Condition text as written (excluded from equality)
    """

    keyword: str
    condition: OrCondition
    integer_samples: "FixedDecimalSamples | None" = None
    decimal_samples: "FixedDecimalSamples | None" = None
    text: str = field(default="", compare=False)

    @property
    def has_samples(self) -> bool:
        """True when the rule carries an @integer or @decimal clause."""
        return self.integer_samples is not None or self.decimal_samples is not None


# The implicit catch-all rule appended when a description has no "other".
OTHER_RULE = Rule(KEYWORD_OTHER, OrCondition())
