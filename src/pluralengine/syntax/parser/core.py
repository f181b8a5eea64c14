"""Plural rules description parser.

This module provides the PluralRulesParser class that turns a rule-set
description into a tuple of :class:`~pluralengine.syntax.ast.Rule` nodes.

Architecture:
    The description is case-folded, trimmed and split on ';' into rule
    clauses. Each clause is parsed in place with a bounded
    :class:`~pluralengine.syntax.cursor.Cursor`, so every diagnostic points
    into the description the caller wrote:

    - :mod:`~pluralengine.syntax.parser.rules` parses the condition
    - :mod:`~pluralengine.syntax.parser.samples` parses @integer / @decimal

Rule-set normalization:
    - An empty description yields the single catch-all "other" rule
    - An explicit "other" rule is moved to the end
    - A missing "other" rule is appended

Security:
    Includes a configurable input size limit so that arbitrarily large
    descriptions are rejected before any work is done.
"""

import logging

from pluralengine.constants import KEYWORD_OTHER, MAX_DESCRIPTION_SIZE
from pluralengine.diagnostics import ErrorTemplate, NullInputFailure, ParseFailure
from pluralengine.enums import SampleType
from pluralengine.runtime.operands import FixedDecimalSamples
from pluralengine.syntax.ast import OTHER_RULE, OrCondition, Rule
from pluralengine.syntax.cursor import Cursor
from pluralengine.syntax.parser.primitives import is_keyword
from pluralengine.syntax.parser.rules import fail, parse_condition
from pluralengine.syntax.parser.samples import parse_samples

__all__ = ["PluralRulesParser"]

logger = logging.getLogger(__name__)


class PluralRulesParser:
    """Plural rules parser using immutable cursor pattern.

    Parsing is fail-fast: the first syntax violation raises ParseFailure
    and no partial rule-set is produced.

    Attributes:
        max_source_size: Maximum description size in characters (default: 64 KiB)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with an optional size limit.

        Args:
            max_source_size: Maximum description size in characters.
                Set to 0 to disable the limit.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else MAX_DESCRIPTION_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed description size in characters."""
        return self._max_source_size

    def parse(self, description: str | None) -> tuple[Rule, ...]:
        """Parse a rule-set description.

        Args:
            description: Semicolon-separated rules such as
                ``"one: i = 1 and v = 0 @integer 1; other: @integer 0, 2~16"``

        Returns:
            Rules in evaluation order, ending with the "other" rule

        Raises:
            NullInputFailure: If description is None
            TypeError: If description is not a string
            ParseFailure: If description is too large or malformed
        """
        if description is None:
            raise NullInputFailure(ErrorTemplate.null_description())
        if not isinstance(description, str):
            raise TypeError(ErrorTemplate.description_not_text(type(description).__name__).message)

        if self._max_source_size > 0 and len(description) > self._max_source_size:
            diagnostic = ErrorTemplate.description_too_large(len(description), self._max_source_size)
            raise ParseFailure(diagnostic, description=description)

        try:
            rules = self._parse_rules(description)
        except ParseFailure as e:
            logger.debug("Rejected plural rules description %r: %s", description, e.diagnostic)
            raise

        logger.debug("Parsed plural rules: %s", ", ".join(rule.keyword for rule in rules))
        return rules

    def _parse_rules(self, description: str) -> tuple[Rule, ...]:
        source = description.lower()
        # Case folding rarely changes length; when it does, rule text is
        # reported in folded form so positions stay consistent.
        original = description if len(source) == len(description) else source

        start = len(source) - len(source.lstrip())
        end = len(source.rstrip())
        if start == end:
            return (OTHER_RULE,)
        if source[end - 1] == ";":
            end -= 1

        rules: dict[str, Rule] = {}
        clause_start = start
        while clause_start <= end:
            clause_end = source.find(";", clause_start, end)
            if clause_end < 0:
                clause_end = end
            rule = self._parse_rule(Cursor(source, clause_start, clause_end), original)
            if rule.keyword in rules:
                keyword_pos = source.find(rule.keyword, clause_start, clause_end)
                span = Cursor(source, keyword_pos).span_to(keyword_pos + len(rule.keyword))
                fail(ErrorTemplate.duplicate_keyword(rule.keyword, span), source)
            rules[rule.keyword] = rule
            clause_start = clause_end + 1

        other = rules.pop(KEYWORD_OTHER, OTHER_RULE)
        return (*rules.values(), other)

    def _parse_rule(self, cursor: Cursor, original: str) -> Rule:
        source = cursor.source
        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            fail(ErrorTemplate.empty_rule(cursor.span_to(cursor.pos)), source)

        colon = source.find(":", cursor.pos, cursor.end)
        if colon < 0:
            rule_text = cursor.slice_to(cursor.end).strip()
            fail(ErrorTemplate.missing_colon(rule_text, cursor.span_to(cursor.end)), source)

        keyword = cursor.slice_to(colon).strip()
        if not is_keyword(keyword):
            fail(ErrorTemplate.invalid_keyword(keyword, cursor.span_to(colon)), source)

        samples_at = source.find("@", colon + 1, cursor.end)
        condition_end = samples_at if samples_at >= 0 else cursor.end
        condition_cursor = Cursor(source, colon + 1, condition_end)
        condition_text = original[colon + 1 : condition_end].strip()

        if keyword == KEYWORD_OTHER:
            if condition_text:
                span = condition_cursor.skip_whitespace().span_to(condition_end)
                fail(ErrorTemplate.other_with_condition(span), source)
            condition = OrCondition()
        else:
            if not condition_text:
                fail(ErrorTemplate.missing_condition(keyword, cursor.span_to(cursor.end)), source)
            condition = parse_condition(condition_cursor)

        integer_samples, decimal_samples = self._parse_sample_clauses(cursor, samples_at)
        return Rule(
            keyword=keyword,
            condition=condition,
            integer_samples=integer_samples,
            decimal_samples=decimal_samples,
            text=condition_text,
        )

    def _parse_sample_clauses(
        self, cursor: Cursor, samples_at: int
    ) -> tuple[FixedDecimalSamples | None, FixedDecimalSamples | None]:
        """Parse the @integer and @decimal clauses that follow a condition."""
        source = cursor.source
        integer_samples: FixedDecimalSamples | None = None
        decimal_samples: FixedDecimalSamples | None = None
        while samples_at >= 0:
            next_at = source.find("@", samples_at + 1, cursor.end)
            clause_end = next_at if next_at >= 0 else cursor.end
            samples = parse_samples(Cursor(source, samples_at + 1, clause_end))
            out_of_order = (
                decimal_samples is not None
                if samples.sample_type is SampleType.DECIMAL
                else integer_samples is not None or decimal_samples is not None
            )
            if out_of_order:
                fail(ErrorTemplate.sample_order(Cursor(source, samples_at).span_to(clause_end)), source)
            if samples.sample_type is SampleType.INTEGER:
                integer_samples = samples
            else:
                decimal_samples = samples
            samples_at = next_at
        return integer_samples, decimal_samples
