"""Tests for the condition grammar and rule-set parsing.

Covers the syntax restriction table (which spellings of negation and
comparison are accepted), tokenization, rule-set normalization and the
diagnostics attached to each failure.
"""

from __future__ import annotations

import pytest

from pluralengine import NullInputFailure, ParseFailure, PluralRulesError, parse
from pluralengine.diagnostics import DiagnosticCode
from pluralengine.enums import Operand, RelationMethod
from pluralengine.syntax import (
    AlwaysTrue,
    AndCondition,
    Cursor,
    OrCondition,
    PluralRulesParser,
    Relation,
    ValueRange,
)
from pluralengine.syntax.parser.rules import TokenKind, tokenize

# ============================================================================
# SYNTAX RESTRICTIONS
# ============================================================================

ACCEPTED = [
    "a:n in 3..10,13..19",
    # = and != always work
    "a:n=1",
    "a:n=1,3",
    "a:n!=1",
    "a:n!=1,3",
    # with spacing
    "a: n = 1",
    "a: n = 1, 3",
    "a: n != 1",
    "a: n != 1, 3",
    "a: n ! = 1",
    "a: n ! = 1, 3",
    "a: n = 1 , 3",
    "a: n != 1 , 3",
    "a: n ! = 1 , 3",
    "a: n = 1 .. 3",
    "a: n != 1 .. 3",
    "a: n ! = 1 .. 3",
    "a:n in 3 .. 10 , 13 .. 19",
    # singles
    "a: n is 1",
    "a: n is not 1",
    "a: n in 1",
    "a: n not in 1",
    # multiples
    "a: n is 1,3",
    "a: n in 1,3",
    "a: n not in 1,3",
    # within
    "a: n within 1..3",
    "a: n not within 1..3",
    # case folding
    "ONE: N IS 1 AND V IS 0",
    # trailing separator
    "a: n is 1;",
]

REJECTED = [
    "a: n not is 1",
    "a: n is not 1,3",
    "a: n is not 1..3",
    "a: n not is 1,3",
    "a: n not= 1",
    "a: n not= 1,3",
    "a: n ! is not 1",
    "a: n not not in 1",
    "a: n is not not 1",
    "a: n != not 1",
    "a: n in not 1",
    "djkl;",
    "a: n = 1 .",
    "a: n = 1 ..",
    "a: n = 1 2",
    "a: n = 1 ,",
    "a:n in 3 .. 10 , 13 .. 19 ,",
    "a: n 3",
]


class TestSyntaxRestrictions:
    """Test which relation spellings parse."""

    @pytest.mark.parametrize("description", ACCEPTED)
    def test_accepted(self, description: str) -> None:
        """Description parses."""
        parse(description)

    @pytest.mark.parametrize("description", REJECTED)
    def test_rejected(self, description: str) -> None:
        """Description fails with ParseFailure."""
        with pytest.raises(ParseFailure):
            parse(description)

    def test_null_description(self) -> None:
        """None fails with NullInputFailure, a TypeError."""
        with pytest.raises(NullInputFailure) as exc_info:
            parse(None)

        assert isinstance(exc_info.value, TypeError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.NULL_DESCRIPTION

    def test_non_string_description(self) -> None:
        """Other non-strings fail with a plain TypeError."""
        with pytest.raises(TypeError, match="must be str, got int"):
            parse(42)  # type: ignore[arg-type]

    def test_parse_failure_is_value_error(self) -> None:
        """ParseFailure is catchable as ValueError and PluralRulesError."""
        with pytest.raises(ValueError) as exc_info:
            parse("a: n is")

        assert isinstance(exc_info.value, PluralRulesError)


# ============================================================================
# CONDITION TREES
# ============================================================================


class TestConditionTrees:
    """Test the shape of parsed conditions."""

    def _condition(self, description: str) -> OrCondition:
        return PluralRulesParser().parse(description)[0].condition

    def test_is_parses_to_in(self) -> None:
        """is, in and = all produce the IN method."""
        expected = OrCondition(
            (AndCondition((Relation(Operand.N, None, RelationMethod.IN, False, (ValueRange(1, 1),)),)),)
        )

        assert self._condition("a: n is 1") == expected
        assert self._condition("a: n in 1") == expected
        assert self._condition("a: n = 1") == expected

    def test_negations_agree(self) -> None:
        """is not, not in and != produce the same relation."""
        assert self._condition("a: n is not 1") == self._condition("a: n != 1")
        assert self._condition("a: n not in 1") == self._condition("a: n ! = 1")

    def test_modulus_spellings_agree(self) -> None:
        """mod and % are interchangeable."""
        relation = self._condition("a: n mod 10 in 2..4").branches[0].relations[0]

        assert self._condition("a: n % 10 in 2..4") == self._condition("a: n mod 10 in 2..4")
        assert Relation.guard(relation)
        assert relation.modulus == 10
        assert relation.ranges == (ValueRange(2, 4),)

    def test_within(self) -> None:
        """within keeps its own method."""
        relation = self._condition("a: t not within 1..3").branches[0].relations[0]

        assert Relation.guard(relation)
        assert relation.method is RelationMethod.WITHIN
        assert relation.negated
        assert relation.operand is Operand.T

    def test_and_binds_tighter_than_or(self) -> None:
        """a or b and c is a or (b and c)."""
        condition = self._condition("a: n is 1 or n is 2 and v is 0")

        assert len(condition.branches) == 2
        assert len(condition.branches[0].relations) == 1
        assert len(condition.branches[1].relations) == 2

    def test_bare_operand_always_true(self) -> None:
        """A bare operand is an always-true conjunct."""
        condition = self._condition("a: n")

        assert condition.branches == (AndCondition((AlwaysTrue(),)),)
        assert parse("a:n").select(0) == "a"

    @pytest.mark.parametrize("name", ["n", "i", "v", "w", "f", "t", "e", "c"])
    def test_all_operands(self, name: str) -> None:
        """Every CLDR operand is accepted."""
        relation = self._condition(f"a: {name} is 0").branches[0].relations[0]

        assert Relation.guard(relation)
        assert relation.operand is Operand(name)


# ============================================================================
# RULE-SET NORMALIZATION
# ============================================================================


class TestRuleSetNormalization:
    """Test the rule list produced from a description."""

    def test_empty_description(self) -> None:
        """Blank descriptions yield only the catch-all rule."""
        for description in ("", "   ", "\n\t"):
            rules = PluralRulesParser().parse(description)

            assert [r.keyword for r in rules] == ["other"]
            assert rules[0].condition.is_empty

    def test_other_appended(self) -> None:
        """A missing other rule is appended."""
        rules = PluralRulesParser().parse("one: n is 1")

        assert [r.keyword for r in rules] == ["one", "other"]

    def test_other_moved_to_end(self) -> None:
        """An explicit other rule is moved to the end."""
        rules = PluralRulesParser().parse("other: ; a: n mod 3 is 0; b: n is 1")

        assert [r.keyword for r in rules] == ["a", "b", "other"]

    def test_rule_text_preserves_original_spelling(self) -> None:
        """Rule text keeps the caller's case and spacing, minus samples."""
        rules = PluralRulesParser().parse("one: I = 1 AND v = 0 @integer 1")

        assert rules[0].text == "I = 1 AND v = 0"

    def test_rule_text_excluded_from_equality(self) -> None:
        """Spelling differences do not affect rule equality."""
        first = PluralRulesParser().parse("a: n is 1")[0]
        second = PluralRulesParser().parse("a: n = 1")[0]

        assert first.text != second.text
        assert first == second


# ============================================================================
# DIAGNOSTICS
# ============================================================================


class TestParseDiagnostics:
    """Test the diagnostic attached to each failure."""

    @pytest.mark.parametrize(
        ("description", "code"),
        [
            ("a: n is", DiagnosticCode.UNEXPECTED_EOF),
            ("a: n is 1 2", DiagnosticCode.UNEXPECTED_TOKEN),
            ("a: n is 1 # 2", DiagnosticCode.INVALID_CHARACTER),
            ("a n is 1", DiagnosticCode.MISSING_COLON),
            ("a1: n is 1", DiagnosticCode.INVALID_KEYWORD),
            (": n is 1", DiagnosticCode.INVALID_KEYWORD),
            ("a: n is 1; a: n is 2", DiagnosticCode.DUPLICATE_KEYWORD),
            ("a: n is 1;; b: n is 2", DiagnosticCode.EMPTY_RULE),
            ("other: n is 1", DiagnosticCode.OTHER_WITH_CONDITION),
            ("a: @integer 1", DiagnosticCode.MISSING_CONDITION),
            ("a:", DiagnosticCode.MISSING_CONDITION),
            ("a: j is 0", DiagnosticCode.UNKNOWN_OPERAND),
            ("a: 5 is 0", DiagnosticCode.UNKNOWN_OPERAND),
            ("a: n not is 1", DiagnosticCode.INVALID_NEGATION),
            ("a: n is not not 1", DiagnosticCode.UNEXPECTED_TOKEN),
            ("a: n not not in 1", DiagnosticCode.UNEXPECTED_TOKEN),
            ("a: n in 5..3", DiagnosticCode.INVALID_RANGE),
            ("a: n mod 0 is 0", DiagnosticCode.INVALID_MODULUS),
            ("a: n mod 10 in 5..12", DiagnosticCode.RANGE_EXCEEDS_MODULUS),
            ("a: n is not 1,3", DiagnosticCode.MULTIPLE_VALUES_AFTER_IS_NOT),
            ("a: n is 1234567890123456789", DiagnosticCode.UNEXPECTED_TOKEN),
        ],
    )
    def test_diagnostic_code(self, description: str, code: DiagnosticCode) -> None:
        """Each failure carries its diagnostic code."""
        with pytest.raises(ParseFailure) as exc_info:
            parse(description)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is code

    def test_failure_records_description_and_position(self) -> None:
        """ParseFailure carries the description and the error offset."""
        with pytest.raises(ParseFailure) as exc_info:
            parse("one: n is 1; two: x is 2")

        error = exc_info.value
        assert error.description == "one: n is 1; two: x is 2"
        assert error.position == 18
        assert error.diagnostic is not None
        assert error.diagnostic.span is not None
        assert error.diagnostic.span.column == 19

    def test_error_line_on_multiline_description(self) -> None:
        """Spans report lines of multi-line descriptions."""
        with pytest.raises(ParseFailure) as exc_info:
            parse("one: n is 1;\ntwo: n is x")

        span = exc_info.value.diagnostic.span  # type: ignore[union-attr]
        assert span is not None
        assert (span.line, span.column) == (2, 11)

    def test_message_is_rust_formatted(self) -> None:
        """str(error) is the formatted diagnostic."""
        with pytest.raises(ParseFailure) as exc_info:
            parse("a: q is 1")

        message = str(exc_info.value)
        assert message.startswith("error[UNKNOWN_OPERAND]: Unknown operand 'q'")
        assert "--> line 1, column 4" in message

    def test_size_limit(self) -> None:
        """Descriptions above max_source_size are rejected before parsing."""
        parser = PluralRulesParser(max_source_size=10)

        with pytest.raises(ParseFailure) as exc_info:
            parser.parse("one: n is 1 or n is 2")

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DESCRIPTION_TOO_LARGE
        assert parser.max_source_size == 10

    def test_size_limit_disabled(self) -> None:
        """max_source_size=0 disables the limit."""
        description = "; ".join(f"{kw}: n is {i}" for i, kw in enumerate(["a", "b", "c"]))

        assert len(PluralRulesParser(max_source_size=0).parse(description)) == 4


# ============================================================================
# TOKENIZER
# ============================================================================


class TestTokenizer:
    """Test condition tokenization."""

    def test_symbols_are_single_tokens(self) -> None:
        """!= and .. split into single-character symbols."""
        tokens = tokenize(Cursor("n%11!=5..7", 0))

        assert [t.text for t in tokens] == ["n", "%", "11", "!", "=", "5", ".", ".", "7"]
        assert [t.kind for t in tokens[:3]] == [TokenKind.WORD, TokenKind.SYMBOL, TokenKind.NUMBER]

    def test_positions(self) -> None:
        """Tokens record their offsets in the source."""
        tokens = tokenize(Cursor("a: n  is 1", 2))

        assert [(t.start, t.end) for t in tokens] == [(3, 4), (6, 8), (9, 10)]

    def test_respects_bound(self) -> None:
        """Tokenization stops at the cursor bound."""
        tokens = tokenize(Cursor("n is 1 @integer 1", 0, end=7))

        assert [t.text for t in tokens] == ["n", "is", "1"]
