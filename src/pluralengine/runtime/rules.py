"""PluralRules - main public API for plural keyword selection.

A PluralRules instance is an immutable, ordered rule-set parsed from a
CLDR plural-rules description:

    >>> rules = parse("one: i = 1 and v = 0 @integer 1; other: @integer 0, 2~16, …")
    >>> rules.select(1), rules.select(2), rules.select(1, 1, 0)
    ('one', 'other', 'other')

Beyond select(), the rule-set can be inspected: its keywords, the samples
and value sets of each keyword, whether those sets are finite, and how a
keyword behaves once a formatter's explicit cases are handled.

Thread Safety:
    Instances are safe for concurrent reads without locking. Derived data
    is memoized in per-instance dictionaries through dict.setdefault, so
    concurrent first computations agree and the first stored result wins.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Hashable, Iterable
from decimal import Decimal
from typing import ClassVar

from pluralengine.analysis.status import KeywordStatusResult, keyword_status
from pluralengine.analysis.values import ValueSetGenerator
from pluralengine.constants import KEYWORD_OTHER, NO_UNIQUE_VALUE
from pluralengine.enums import SampleType
from pluralengine.runtime.evaluator import select_keyword
from pluralengine.runtime.operands import FixedDecimal, FixedDecimalSamples
from pluralengine.runtime.sampling_config import SamplingConfig
from pluralengine.syntax.ast import OTHER_RULE, Rule
from pluralengine.syntax.parser import PluralRulesParser
from pluralengine.syntax.serializer import serialize

__all__ = ["PluralRules", "parse"]

# Shared parser for parse(); parsers hold no per-call state.
_PARSER = PluralRulesParser()

type _Values = frozenset[FixedDecimal] | None


def _memo[K: Hashable, V](cache: dict[K, V], key: K, compute: Callable[[], V]) -> V:
    """Return cache[key], computing and storing it on first use."""
    try:
        return cache[key]
    except KeyError:
        return cache.setdefault(key, compute())


class PluralRules:
    """Ordered, immutable set of plural rules.

    Rules are tried in order and the first whose condition holds supplies
    the keyword; "other" always comes last and always holds.

    Prefer :meth:`parse` over the constructor, which takes already-parsed
    :class:`~pluralengine.syntax.ast.Rule` nodes.

    Equality is structural: two rule-sets are equal when their rules are
    written the same way, which is stricter than selecting the same keyword
    for every number. ``n in 2..5`` and ``n in 2..4,5`` are not equal.

    Attributes:
        DEFAULT: Rule-set with the single "other" rule
    """

    __slots__ = (
        "_bounded",
        "_config",
        "_examples",
        "_generator",
        "_has_explicit_samples",
        "_keywords",
        "_rules",
        "_values",
    )

    DEFAULT: ClassVar["PluralRules"]

    def __init__(self, rules: Iterable[Rule] = (OTHER_RULE,), *, config: SamplingConfig | None = None) -> None:
        """Build a rule-set from parsed rules.

        Args:
            rules: Rules in evaluation order. A missing "other" rule is
                appended; an "other" rule elsewhere is moved to the end.
            config: Sampling configuration for the analysis methods

        Raises:
            ValueError: If two rules share a keyword
        """
        by_keyword: dict[str, Rule] = {}
        for rule in rules:
            if rule.keyword in by_keyword:
                msg = f"Duplicate plural keyword: {rule.keyword!r}"
                raise ValueError(msg)
            by_keyword[rule.keyword] = rule
        other = by_keyword.pop(KEYWORD_OTHER, OTHER_RULE)

        self._rules: tuple[Rule, ...] = (*by_keyword.values(), other)
        self._keywords: tuple[str, ...] = tuple(rule.keyword for rule in self._rules)
        self._config = config if config is not None else SamplingConfig()
        self._generator = ValueSetGenerator(self._rules, self._config)
        self._has_explicit_samples = any(rule.has_samples for rule in self._rules)
        self._values: dict[tuple[str, SampleType], _Values] = {}
        self._examples: dict[tuple[str, SampleType], _Values] = {}
        self._bounded: dict[tuple[str, SampleType], bool] = {}

    @classmethod
    def parse(cls, description: str | None, *, config: SamplingConfig | None = None) -> "PluralRules":
        """Parse a rule-set description.

        Args:
            description: Semicolon-separated rules. An empty or blank string
                yields the rule-set with only "other".
            config: Sampling configuration for the analysis methods

        Returns:
            Parsed rule-set

        Raises:
            NullInputFailure: If description is None
            ParseFailure: If description is malformed
        """
        return cls(_PARSER.parse(description), config=config)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Rules in evaluation order, "other" last."""
        return self._rules

    @property
    def keywords(self) -> tuple[str, ...]:
        """Defined keywords in evaluation order, "other" last."""
        return self._keywords

    @property
    def config(self) -> SamplingConfig:
        """Sampling configuration used by the analysis methods."""
        return self._config

    @property
    def has_explicit_samples(self) -> bool:
        """True when any rule carries an @integer or @decimal clause."""
        return self._has_explicit_samples

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(
        self,
        value: int | float | Decimal | FixedDecimal,
        visible_digits: int | None = None,
        fraction_digits: int | None = None,
    ) -> str:
        """Return the keyword for a number.

        Args:
            value: The number. Negative values select like their absolute value.
            visible_digits: Visible fraction digits (v). When omitted they
                come from value itself (see FixedDecimal.from_number).
            fraction_digits: Those digits as an integer (f), used together
                with visible_digits to keep trailing zeros

        Returns:
            Keyword of the first rule whose condition holds

        Raises:
            TypeError: If fraction_digits is given without visible_digits,
                or visible_digits is given for a FixedDecimal
            ValueError: If value is not finite or the digit counts are invalid

        Example:
            >>> rules = parse("one: i = 1 and v = 0")
            >>> rules.select(1), rules.select(Decimal("1.0")), rules.select(1, 2, 0)
            ('one', 'other', 'other')
        """
        if visible_digits is None:
            if fraction_digits is not None:
                msg = "fraction_digits requires visible_digits"
                raise TypeError(msg)
            operands = FixedDecimal.from_number(value)
        else:
            if isinstance(value, FixedDecimal):
                msg = "visible_digits cannot be combined with a FixedDecimal"
                raise TypeError(msg)
            operands = FixedDecimal.create(value, visible_digits, fraction_digits)
        return select_keyword(self._rules, operands)

    # ------------------------------------------------------------------
    # Rule access
    # ------------------------------------------------------------------

    def get_rule(self, keyword: str) -> Rule | None:
        """Return the rule for keyword, or None if it is not defined."""
        return next((rule for rule in self._rules if rule.keyword == keyword), None)

    def rule_text(self, keyword: str) -> str | None:
        """Return the condition of keyword as written, without samples.

        None if keyword is not defined; "" for "other".
        """
        rule = self.get_rule(keyword)
        return None if rule is None else rule.text

    def decimal_samples(
        self, keyword: str, sample_type: SampleType = SampleType.INTEGER
    ) -> FixedDecimalSamples | None:
        """Return the sample clause written for keyword, if any.

        Example:
            >>> rules = parse("one: n is 3 or f is 5 @integer 3,19 @decimal 3.50~3.53, …")
            >>> str(rules.decimal_samples("one", SampleType.DECIMAL))
            '@decimal 3.50~3.53, …'
        """
        rule = self.get_rule(keyword)
        if rule is None:
            return None
        if sample_type is SampleType.INTEGER:
            return rule.integer_samples
        return rule.decimal_samples

    # ------------------------------------------------------------------
    # Samples and value sets
    # ------------------------------------------------------------------

    def samples(
        self, keyword: str, sample_type: SampleType = SampleType.INTEGER
    ) -> frozenset[FixedDecimal] | None:
        """Return sample values for keyword.

        When the description carries sample clauses, these are the values
        of keyword's clause (empty if keyword has no clause of that type).
        Otherwise they are computed: the exact value set when it is finite,
        else up to MAX_EXAMPLE_SAMPLES small values found by scanning.

        Returns:
            Sample values, or None when keyword is not defined or no
            example could be found for an unbounded keyword
        """
        if keyword not in self._keywords:
            return None
        if self._has_explicit_samples:
            clause = self.decimal_samples(keyword, sample_type)
            if clause is None:
                return frozenset()
            return clause.values(self._config.max_enumeration)

        values = self._keyword_values(keyword, sample_type)
        if values is not None:
            return values
        return _memo(
            self._examples,
            (keyword, sample_type),
            lambda: self._generator.example_values(keyword, sample_type) or None,
        )

    def sample_numbers(
        self, keyword: str, sample_type: SampleType = SampleType.INTEGER
    ) -> frozenset[Decimal] | None:
        """Return :meth:`samples` as plain numbers.

        Values that differ only in trailing fraction zeros collapse into
        one number.
        """
        values = self.samples(keyword, sample_type)
        if values is None:
            return None
        return frozenset(value.n for value in values)

    def all_keyword_values(
        self, keyword: str, sample_type: SampleType = SampleType.INTEGER
    ) -> frozenset[Decimal] | None:
        """Return every number that selects keyword, if there are finitely many.

        Returns:
            The numbers; an empty set if keyword is not defined; None if
            the set is unbounded or no number selects keyword

        Example:
            >>> sorted(parse("a: n in 2..5").all_keyword_values("a"))
            [Decimal('2'), Decimal('3'), Decimal('4'), Decimal('5')]
            >>> parse("a: n not in 2..5").all_keyword_values("a") is None
            True
        """
        if keyword not in self._keywords:
            return frozenset()
        values = self._keyword_values(keyword, sample_type)
        if not values:
            return None
        return frozenset(value.n for value in values)

    def unique_keyword_value(self, keyword: str) -> Decimal:
        """Return the only integer that selects keyword.

        Returns:
            The value, or NO_UNIQUE_VALUE when there are none or several
        """
        values = self.all_keyword_values(keyword)
        if values is not None and len(values) == 1:
            return next(iter(values))
        return NO_UNIQUE_VALUE

    def compute_limited(self, keyword: str, sample_type: SampleType = SampleType.INTEGER) -> bool:
        """Check from the conditions alone whether keyword has finitely many values."""
        return _memo(
            self._bounded,
            (keyword, sample_type),
            lambda: self._generator.is_bounded(keyword, sample_type),
        )

    def is_limited(self, keyword: str, sample_type: SampleType = SampleType.INTEGER) -> bool:
        """Check whether keyword has finitely many values.

        Sample clauses decide when the description has any: a clause that
        ends with an ellipsis is unlimited, a missing clause is limited.
        Otherwise this is :meth:`compute_limited`.
        """
        if keyword not in self._keywords:
            return False
        if self._has_explicit_samples:
            clause = self.decimal_samples(keyword, sample_type)
            return clause is None or clause.bounded
        return self.compute_limited(keyword, sample_type)

    def keyword_status(
        self,
        keyword: str,
        explicits: Iterable[int | float | Decimal] | None = None,
        sample_type: SampleType = SampleType.INTEGER,
        offset: int | Decimal = 0,
    ) -> KeywordStatusResult:
        """Classify keyword given the values a formatter handles itself.

        See :func:`~pluralengine.analysis.status.keyword_status`.

        Example:
            >>> rules = parse("one: i = 1 and v = 0 @integer 1; other: @integer 0, 2~16, …")
            >>> tuple(rules.keyword_status("one"))
            (<KeywordStatus.UNIQUE: 'unique'>, Decimal('1'))
            >>> rules.keyword_status("one", {1}).status
            <KeywordStatus.SUPPRESSED: 'suppressed'>
        """
        return keyword_status(self, keyword, explicits, sample_type, offset)

    def _keyword_values(self, keyword: str, sample_type: SampleType) -> _Values:
        return _memo(
            self._values,
            (keyword, sample_type),
            lambda: self._generator.keyword_values(keyword, sample_type),
        )

    # ------------------------------------------------------------------
    # Protocols
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PluralRules):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __str__(self) -> str:
        """Return the canonical description, which parses back to an equal rule-set."""
        return serialize(self._rules)

    def __repr__(self) -> str:
        return f"PluralRules({str(self)!r})"


PluralRules.DEFAULT = PluralRules()


def parse(description: str | None, *, config: SamplingConfig | None = None) -> PluralRules:
    """Parse a plural rules description.

    Shorthand for :meth:`PluralRules.parse`.

    Example:
        >>> parse("a: n mod 10 is 2").select(12)
        'a'
    """
    return PluralRules.parse(description, config=config)
