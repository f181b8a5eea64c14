"""Tests for condition evaluation and keyword selection.

The parse table lists, per description, the integers 0..N that select each
keyword; every unlisted integer up to the largest listed one selects
"other". The operand table checks fraction-aware operands with explicit
visible digits.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from pluralengine import FixedDecimal, parse
from pluralengine.enums import Operand, RelationMethod
from pluralengine.runtime import evaluate, evaluate_relation, select_keyword
from pluralengine.syntax import AndCondition, OrCondition, Relation, Rule, ValueRange

# description -> "keyword:values; keyword:values"
PARSE_TABLE = [
    ("a: n is 1", "a:1"),
    ("a: n mod 10 is 2", "a:2,12,22"),
    ("a: n is not 1", "a:0,2,3,4,5"),
    ("a: n mod 3 is not 1", "a:0,2,3,5,6,8,9"),
    ("a: n in 2..5", "a:2,3,4,5"),
    ("a: n within 2..5", "a:2,3,4,5"),
    ("a: n not in 2..5", "a:0,1,6,7,8"),
    ("a: n not within 2..5", "a:0,1,6,7,8"),
    ("a: n mod 10 in 2..5", "a:2,3,4,5,12,13,14,15,22,23,24,25"),
    ("a: n mod 10 within 2..5", "a:2,3,4,5,12,13,14,15,22,23,24,25"),
    ("a: n mod 10 is 2 and n is not 12", "a:2,22,32,42"),
    ("a: n mod 10 in 2..3 or n mod 10 is 5", "a:2,3,5,12,13,15,22,23,25"),
    ("a: n mod 10 within 2..3 or n mod 10 is 5", "a:2,3,5,12,13,15,22,23,25"),
    ("a: n is 1 or n is 4 or n is 23", "a:1,4,23"),
    ("a: n mod 2 is 1 and n is not 3 and n in 1..11", "a:1,5,7,9,11"),
    ("a: n mod 2 is 1 and n is not 3 and n within 1..11", "a:1,5,7,9,11"),
    ("a: n mod 2 is 1 or n mod 5 is 1 and n is not 6", "a:1,3,5,7,9,11,13,15,16"),
    ("a: n in 2..5; b: n in 5..8; c: n mod 2 is 1", "a:2,3,4,5;b:6,7,8;c:1,9,11"),
    ("a: n within 2..5; b: n within 5..8; c: n mod 2 is 1", "a:2,3,4,5;b:6,7,8;c:1,9,11"),
    ("a: n in 2,4..6; b: n within 7..9,11..12,20", "a:2,4,5,6;b:7,8,9,11,12,20"),
    ("a: n in 2..8,12 and n not in 4..6", "a:2,3,7,8,12"),
    ("a: n mod 10 in 2,3,5..7 and n is not 12", "a:2,3,5,6,7,13,15,16,17"),
    ("a: n in 2..6,3..7", "a:2,3,4,5,6,7"),
]

# description -> "keyword: values; keyword: values", values written with
# their visible fraction digits
OPERAND_TABLE = [
    ("a: n=1,2; b: n != 3..5; c:n!=5", "a:1,2; b:6,7; c:3,4"),
    ("a: n=1,2; b: n!=3..5; c:n!=5", "a:1,2; b:6,7; c:3,4"),
    ("a: t is 1", "a:1.1,1.1000,99.100; other:1.2,1.0"),
    ("a: f is 1", "a:1.1; other:1.1000,99.100"),
    ("a: i is 2; b:i is 3", "b: 3.5; a: 2.5"),
    ("a: f is 0; b:f is 50", "a: 1.00; b: 1.50"),
    ("a: v is 1; b:v is 2", "a: 1.0; b: 1.00"),
    ("one: n is 1 AND v is 0", "one: 1 ; other: 1.00,1.0"),
    ("one: v is 0 and i mod 10 is 1 or f mod 10 is 1", "one: 1, 1.1, 3.1; other: 1.0, 3.2, 5"),
    ("a: w is 2", "a: 1.25, 1.250; other: 1.2, 1.205"),
]


def _targets(expected: str) -> list[str]:
    """Expand "a:1,2;b:5" into the keyword for 0, 1, 2, ..."""
    table: dict[int, str] = {}
    for part in expected.split(";"):
        keyword, _, values = part.partition(":")
        for value in values.split(","):
            table[int(value)] = keyword.strip()
    return [table.get(i, "other") for i in range(max(table) + 1)]


class TestParseTable:
    """Test integer selection for the parse table."""

    @pytest.mark.parametrize(("description", "expected"), PARSE_TABLE)
    def test_select(self, description: str, expected: str) -> None:
        """Each integer selects its listed keyword, others select 'other'."""
        rules = parse(description)

        for value, keyword in enumerate(_targets(expected)):
            assert rules.select(value) == keyword, f"{description}: {value}"


class TestOperandTable:
    """Test selection with explicit visible fraction digits."""

    @pytest.mark.parametrize(("description", "expected"), OPERAND_TABLE)
    def test_select(self, description: str, expected: str) -> None:
        """Values select their keyword with their written fraction digits."""
        rules = parse(description)

        for part in expected.split(";"):
            keyword, _, values = part.partition(":")
            for text in values.split(","):
                text = text.strip()
                integer, _, fraction = text.partition(".")
                visible = len(fraction)
                fraction_digits = int(fraction) if fraction else 0
                result = rules.select(Decimal(text), visible, fraction_digits)
                assert result == keyword.strip(), f"{description}: {text}"

    def test_select_fixed_decimal_and_decimal_agree(self) -> None:
        """select() accepts FixedDecimal, Decimal and explicit digits alike."""
        rules = parse("one: i = 1 and v = 0")

        assert rules.select(FixedDecimal.create(1, 1)) == "other"
        assert rules.select(Decimal("1.0")) == "other"
        assert rules.select(1, 1, 0) == "other"
        assert rules.select(1.0) == "one"

    def test_select_negative(self) -> None:
        """Negative numbers select like their absolute value."""
        assert parse("one: n is 1").select(-1) == "one"

    def test_select_argument_errors(self) -> None:
        """fraction_digits without visible_digits is rejected."""
        rules = parse("one: n is 1")

        with pytest.raises(TypeError, match="requires visible_digits"):
            rules.select(1, fraction_digits=0)
        with pytest.raises(TypeError, match="FixedDecimal"):
            rules.select(FixedDecimal.from_number(1), 0)
        with pytest.raises(ValueError, match="finite"):
            rules.select(float("inf"))


class TestRelationSemantics:
    """Test modulus and membership semantics of single relations."""

    def _relation(self, operand: Operand, method: RelationMethod, *ranges: tuple[int, int],
                  modulus: int | None = None, negated: bool = False) -> Relation:
        return Relation(operand, modulus, method, negated, tuple(ValueRange(*r) for r in ranges))

    def test_modulus_keeps_fraction(self) -> None:
        """12.5 mod 10 is 2.5, which is not 'in' 2 but is 'within' 2..3."""
        value = FixedDecimal.create(Decimal("12.5"), 1)
        in_relation = self._relation(Operand.N, RelationMethod.IN, (2, 2), modulus=10)
        within_relation = self._relation(Operand.N, RelationMethod.WITHIN, (2, 3), modulus=10)

        assert not evaluate_relation(in_relation, value)
        assert evaluate_relation(within_relation, value)

    def test_in_requires_integer(self) -> None:
        """n in 1..2 does not hold for 1.5, n within 1..2 does."""
        value = FixedDecimal.create(Decimal("1.5"), 1)

        assert not evaluate_relation(self._relation(Operand.N, RelationMethod.IN, (1, 2)), value)
        assert evaluate_relation(self._relation(Operand.N, RelationMethod.WITHIN, (1, 2)), value)

    def test_in_matches_trailing_zero_fraction(self) -> None:
        """n is 1 holds for 1.0, whose n is integral."""
        relation = self._relation(Operand.N, RelationMethod.IN, (1, 1))

        assert evaluate_relation(relation, FixedDecimal.create(1, 2))

    def test_negation_inverts(self) -> None:
        """A negated relation holds exactly when the plain one does not."""
        value = FixedDecimal.from_number(4)
        plain = self._relation(Operand.I, RelationMethod.IN, (3, 5))
        negated = self._relation(Operand.I, RelationMethod.IN, (3, 5), negated=True)

        assert evaluate_relation(plain, value)
        assert not evaluate_relation(negated, value)

    def test_huge_values_stay_exact(self) -> None:
        """Modulus on very large numbers does not lose precision."""
        value = FixedDecimal.from_number(10**40 + 7)
        relation = self._relation(Operand.N, RelationMethod.IN, (7, 7), modulus=10)
        decimal_value = FixedDecimal.create(10**40 + 7, 2, 50)
        within = self._relation(Operand.N, RelationMethod.WITHIN, (7, 8), modulus=100)

        assert evaluate_relation(relation, value)
        assert evaluate_relation(within, decimal_value)

    def test_empty_or_condition_holds(self) -> None:
        """The condition of 'other' holds for every value."""
        assert evaluate(OrCondition(), FixedDecimal.from_number(42))

    def test_and_condition(self) -> None:
        """AND holds only when every relation holds."""
        condition = AndCondition((
            self._relation(Operand.I, RelationMethod.IN, (1, 1)),
            self._relation(Operand.V, RelationMethod.IN, (0, 0)),
        ))

        assert evaluate(condition, FixedDecimal.from_number(1))
        assert not evaluate(condition, FixedDecimal.create(1, 1))

    def test_select_keyword_falls_back_to_other(self) -> None:
        """Without a matching rule, 'other' is selected even if no rule says so."""
        rules = (Rule("one", OrCondition((AndCondition((
            self._relation(Operand.N, RelationMethod.IN, (1, 1)),
        )),))),)

        assert select_keyword(rules, FixedDecimal.from_number(1)) == "one"
        assert select_keyword(rules, FixedDecimal.from_number(2)) == "other"
