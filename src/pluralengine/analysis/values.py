"""Value-set generation for plural rules.

Computes, per keyword and sample domain, the exact set of values that
select the keyword, or reports that the set is unbounded.

Domains:
    INTEGER: values without fraction digits (v = w = f = t = e = 0, n = i)
    DECIMAL: values written with the configured fraction-digit counts
             (1.0, 1.00 and 1.000 by default)

Reduction rules:
    - A positive relation on n without modulus bounds the set to its listed
      values. On i it bounds the set to the listed integers, and for
      decimals to every fraction of them at each configured digit count.
    - Relations on operands that are constant in the domain either hold
      for every value or for none; the latter bounds the set to nothing.
    - AND intersects its bounding relations and filters by all relations.
      Without a bounding relation, modulus relations are checked for a
      common residue; if there is none, the conjunction is empty.
    - OR is bounded only when every branch is; the result is the union.
    - Finally, values claimed by an earlier rule are removed, so each
      value is reported for the keyword select() actually returns.

None stands for "unbounded" throughout and is distinct from the empty set.

Python 3.13+. Zero external dependencies.
"""

import math
from collections.abc import Sequence
from itertools import chain

from pluralengine.constants import (
    KEYWORD_OTHER,
    LARGE_SAMPLE,
    MAX_EXAMPLE_SAMPLES,
    SAMPLE_SCAN_LIMIT,
)
from pluralengine.enums import Operand, RelationMethod, SampleType
from pluralengine.runtime.evaluator import evaluate, evaluate_relation, select_keyword
from pluralengine.runtime.operands import FixedDecimal
from pluralengine.runtime.sampling_config import SamplingConfig
from pluralengine.syntax.ast import AndCondition, Conjunct, OrCondition, Relation, Rule

__all__ = ["ValueSetGenerator"]

# Operands whose value is zero for every member of a domain.
_CONSTANT_OPERANDS: dict[SampleType, frozenset[Operand]] = {
    SampleType.INTEGER: frozenset({Operand.V, Operand.W, Operand.F, Operand.T, Operand.E, Operand.C}),
    SampleType.DECIMAL: frozenset({Operand.E, Operand.C}),
}

# Operands a bounding relation may test.
_BOUNDING_OPERANDS: frozenset[Operand] = frozenset({Operand.N, Operand.I})


class ValueSetGenerator:
    """Computes keyword value sets for one rule-set.

    Stateless apart from the rules and configuration it was built with;
    callers memoize the results.

    Example:
        >>> rules = PluralRulesParser().parse("a: n in 2..5; b: n in 5..8")
        >>> generator = ValueSetGenerator(rules, SamplingConfig())
        >>> sorted(str(v) for v in generator.keyword_values("b", SampleType.INTEGER))
        ['6', '7', '8']
    """

    __slots__ = ("_config", "_rules")

    def __init__(self, rules: Sequence[Rule], config: SamplingConfig) -> None:
        self._rules = tuple(rules)
        self._config = config

    def _rule(self, keyword: str) -> Rule | None:
        return next((rule for rule in self._rules if rule.keyword == keyword), None)

    def keyword_values(self, keyword: str, sample_type: SampleType) -> frozenset[FixedDecimal] | None:
        """Return the values that select keyword, or None if unbounded.

        An undefined keyword selects nothing and yields the empty set.
        "other" is unbounded by definition.
        """
        rule = self._rule(keyword)
        if rule is None:
            return frozenset()
        if keyword == KEYWORD_OTHER:
            return None
        candidates = self.condition_values(rule.condition, sample_type)
        if candidates is None:
            return None
        return frozenset(v for v in candidates if select_keyword(self._rules, v) == keyword)

    def is_bounded(self, keyword: str, sample_type: SampleType) -> bool:
        """Check whether the keyword's condition reduces to a finite set."""
        rule = self._rule(keyword)
        if rule is None or keyword == KEYWORD_OTHER:
            return False
        return self.condition_values(rule.condition, sample_type) is not None

    def example_values(self, keyword: str, sample_type: SampleType) -> frozenset[FixedDecimal]:
        """Scan small values for ones that select keyword.

        Stands in for the exact set when that is unbounded. Scans the
        integers below SAMPLE_SCAN_LIMIT (tenths, for decimals) and then
        LARGE_SAMPLE, stopping at MAX_EXAMPLE_SAMPLES hits.
        """
        if sample_type is SampleType.INTEGER:
            digits, steps, step = 0, SAMPLE_SCAN_LIMIT, 1
        else:
            digits = min(self._config.decimal_digits)
            steps, step = SAMPLE_SCAN_LIMIT * 10, 10 ** (digits - 1)

        found: list[FixedDecimal] = []
        for units in chain(range(0, steps * step, step), (LARGE_SAMPLE * 10**digits,)):
            if len(found) >= MAX_EXAMPLE_SAMPLES:
                break
            value = FixedDecimal.from_units(units, digits)
            if select_keyword(self._rules, value) == keyword:
                found.append(value)
        return frozenset(found)

    def condition_values(
        self, condition: OrCondition, sample_type: SampleType
    ) -> frozenset[FixedDecimal] | None:
        """Return the values satisfying condition, before rule precedence."""
        if condition.is_empty:
            return None
        result: set[FixedDecimal] = set()
        for branch in condition.branches:
            values = self._and_values(branch, sample_type)
            if values is None:
                return None
            result.update(values)
        return frozenset(result)

    def _and_values(
        self, condition: AndCondition, sample_type: SampleType
    ) -> frozenset[FixedDecimal] | None:
        bounded: frozenset[FixedDecimal] | None = None
        for conjunct in condition.relations:
            values = self._relation_values(conjunct, sample_type)
            if values is not None:
                bounded = values if bounded is None else bounded & values
        if bounded is None:
            return frozenset() if self._residues_disjoint(condition, sample_type) else None
        return frozenset(v for v in bounded if evaluate(condition, v))

    def _relation_values(
        self, conjunct: Conjunct, sample_type: SampleType
    ) -> frozenset[FixedDecimal] | None:
        """Return the finite set a single relation confines values to, if any."""
        if not Relation.guard(conjunct):
            return None
        relation = conjunct

        if relation.operand in _CONSTANT_OPERANDS[sample_type]:
            return None if evaluate_relation(relation, self._zero(sample_type)) else frozenset()
        if sample_type is SampleType.DECIMAL and relation.operand is Operand.V:
            # v alone cannot bound a decimal, but may exclude every digit count
            if any(
                evaluate_relation(relation, FixedDecimal.from_units(1, digits))
                for digits in self._config.decimal_digits
            ):
                return None
            return frozenset()

        if (
            relation.negated
            or relation.modulus is not None
            or relation.operand not in _BOUNDING_OPERANDS
        ):
            return None
        if sample_type is SampleType.INTEGER:
            return self._enumerate(relation, (0,))
        if relation.operand is Operand.I:
            return self._enumerate(relation, self._config.decimal_digits, fractions=True)
        if relation.method is RelationMethod.WITHIN and not all(r.is_single for r in relation.ranges):
            return None
        return self._enumerate(relation, self._config.decimal_digits)

    def _enumerate(
        self, relation: Relation, digit_counts: tuple[int, ...], *, fractions: bool = False
    ) -> frozenset[FixedDecimal] | None:
        # Values per listed integer at each digit count: k.0 only, or k.0 through k.9...9
        spans = [10**digits if fractions else 1 for digits in digit_counts]
        count = sum(len(r) for r in relation.ranges) * sum(spans)
        if count > self._config.max_enumeration:
            return None
        return frozenset(
            FixedDecimal.from_units(k * 10**digits + fraction, digits)
            for r in relation.ranges
            for k in range(r.low, r.high + 1)
            for digits, span in zip(digit_counts, spans, strict=True)
            for fraction in range(span)
        )

    def _residues_disjoint(self, condition: AndCondition, sample_type: SampleType) -> bool:
        """Check whether the modulus relations of a conjunction exclude each other.

        Only relations whose truth depends on the integer part alone take
        part, so a missing common residue proves the conjunction empty.
        """
        relations = [
            r
            for r in condition.relations
            if Relation.guard(r)
            and r.modulus is not None
            and r.operand in (Operand.N, Operand.I)
            and (
                sample_type is SampleType.INTEGER
                or r.operand is Operand.I
                or (r.method is RelationMethod.IN and not r.negated)
            )
        ]
        if not relations:
            return False
        period = math.lcm(*(r.modulus for r in relations if r.modulus is not None))
        if period > self._config.residue_cutoff:
            return False
        digits = 0 if sample_type is SampleType.INTEGER else min(self._config.decimal_digits)
        return not any(
            all(evaluate_relation(r, FixedDecimal.from_units(x * 10**digits, digits)) for r in relations)
            for x in range(period)
        )

    def _zero(self, sample_type: SampleType) -> FixedDecimal:
        digits = 0 if sample_type is SampleType.INTEGER else min(self._config.decimal_digits)
        return FixedDecimal.from_units(0, digits)
