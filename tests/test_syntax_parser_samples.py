"""Tests for @integer / @decimal sample clause parsing."""

from __future__ import annotations

import pytest

from pluralengine import FixedDecimal, ParseFailure, SampleType, parse
from pluralengine.diagnostics import DiagnosticCode
from pluralengine.syntax import PluralRulesParser

SAMPLE_DESCRIPTION = (
    "one: n is 3 or f is 5 @integer  3,19, @decimal 3.50 ~ 3.53,   …; "
    "other:  @decimal 99.0~99.2, 999.0, …"
)


class TestSampleClauses:
    """Test parsed sample clauses."""

    def test_integer_and_decimal_clauses(self) -> None:
        """Both clauses attach to their rule."""
        rules = PluralRulesParser().parse(SAMPLE_DESCRIPTION)
        one = rules[0]

        assert one.integer_samples is not None
        assert one.decimal_samples is not None
        assert str(one.integer_samples) == "@integer 3, 19"
        assert one.integer_samples.bounded
        assert str(one.decimal_samples) == "@decimal 3.50~3.53, …"
        assert not one.decimal_samples.bounded

    def test_first_range_start_keeps_visible_digits(self) -> None:
        """3.50 keeps both fraction digits."""
        rules = PluralRulesParser().parse(SAMPLE_DESCRIPTION)
        samples = rules[0].decimal_samples

        assert samples is not None
        assert samples.ranges[0].start == FixedDecimal.create(3.5, 2, 50)
        assert samples.sample_type is SampleType.DECIMAL

    def test_other_samples_only(self) -> None:
        """other may carry samples without a condition."""
        rules = PluralRulesParser().parse(SAMPLE_DESCRIPTION)
        other = rules[-1]

        assert other.keyword == "other"
        assert other.condition.is_empty
        assert other.integer_samples is None
        assert str(other.decimal_samples) == "@decimal 99.0~99.2, 999.0, …"

    def test_ascii_ellipsis(self) -> None:
        """... is accepted as an ellipsis."""
        rules = PluralRulesParser().parse("one: n is 1 @integer 1, ...")

        assert rules[0].integer_samples is not None
        assert not rules[0].integer_samples.bounded

    def test_ellipsis_only(self) -> None:
        """A clause may hold nothing but the ellipsis."""
        rules = PluralRulesParser().parse("many: n mod 10 is 5 @integer …")

        samples = rules[0].integer_samples
        assert samples is not None
        assert samples.ranges == ()
        assert not samples.bounded

    def test_duplicates_removed(self) -> None:
        """Repeated samples are kept once, in first-seen order."""
        rules = PluralRulesParser().parse("one: n is 1 @integer 1, 2, 1")

        assert str(rules[0].integer_samples) == "@integer 1, 2"

    def test_compact_decimal_samples(self) -> None:
        """Compact literals are allowed in either clause."""
        rules = PluralRulesParser().parse(
            "many: e = 0 and i != 0 and i % 1000000 = 0 and v = 0 or e != 0..5 "
            "@integer 1000000, 1c6, 2c6 @decimal 1.0000001c6, 1.1c6, …"
        )
        many = rules[0]

        assert many.integer_samples is not None
        assert FixedDecimal.from_string("1c6") in many.integer_samples.values()
        assert str(many.decimal_samples) == "@decimal 1.0000001c6, 1.1c6, …"

    def test_samples_do_not_affect_select(self) -> None:
        """Samples are metadata; select() ignores them."""
        with_samples = parse("one: n is 1 @integer 7")

        assert with_samples.select(1) == "one"
        assert with_samples.select(7) == "other"


class TestSampleErrors:
    """Test malformed sample clauses."""

    @pytest.mark.parametrize(
        ("description", "code"),
        [
            ("one: n is 1 @float 1.0", DiagnosticCode.UNKNOWN_SAMPLE_TYPE),
            ("one: n is 1 @ 1", DiagnosticCode.UNKNOWN_SAMPLE_TYPE),
            ("one: n is 1 @decimal 1.0 @integer 1", DiagnosticCode.SAMPLE_ORDER),
            ("one: n is 1 @integer 1 @integer 2", DiagnosticCode.SAMPLE_ORDER),
            ("one: n is 1 @decimal 1.0 @decimal 2.0", DiagnosticCode.SAMPLE_ORDER),
            ("one: n is 1 @integer x", DiagnosticCode.MALFORMED_SAMPLE),
            ("one: n is 1 @integer 1 2", DiagnosticCode.MALFORMED_SAMPLE),
            ("one: n is 1 @integer", DiagnosticCode.MALFORMED_SAMPLE),
            ("one: n is 1 @integer 1.", DiagnosticCode.MALFORMED_SAMPLE),
            ("one: n is 1 @integer 1c99", DiagnosticCode.MALFORMED_SAMPLE),
            ("one: n is 1 @decimal 1.0000000000000000001", DiagnosticCode.MALFORMED_SAMPLE),
            ("one: n is 1 @integer 1.5", DiagnosticCode.SAMPLE_TYPE_MISMATCH),
            ("one: n is 1 @decimal 1", DiagnosticCode.SAMPLE_TYPE_MISMATCH),
            ("one: n is 1 @integer 1, …, 2", DiagnosticCode.SAMPLE_AFTER_ELLIPSIS),
            ("one: n is 1 @integer 5~3", DiagnosticCode.INVALID_SAMPLE_RANGE),
            ("one: n is 1 @decimal 1.0~2.00", DiagnosticCode.INVALID_SAMPLE_RANGE),
        ],
    )
    def test_diagnostic_code(self, description: str, code: DiagnosticCode) -> None:
        """Each malformed clause carries its diagnostic code."""
        with pytest.raises(ParseFailure) as exc_info:
            parse(description)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is code

    def test_malformed_samples_fail_even_if_condition_is_fine(self) -> None:
        """A bad sample rejects the whole description."""
        with pytest.raises(ParseFailure):
            parse("one: n is 1 @integer 1~; other: @integer 0")
