"""Keyword status classification.

Tells a message formatter how a keyword behaves once the formatter's own
explicit cases (``=0``, ``=1`` and so on) have been taken into account:

    INVALID:    keyword is not defined by the rule-set
    SUPPRESSED: every value of the keyword is handled explicitly
    UNIQUE:     exactly one value selects the keyword
    BOUNDED:    a finite set of values selects the keyword
    UNBOUNDED:  infinitely many values select the keyword

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from pluralengine.enums import KeywordStatus, SampleType
from pluralengine.runtime.operands import FixedDecimal

if TYPE_CHECKING:
    from pluralengine.runtime.rules import PluralRules

__all__ = ["KeywordStatusResult", "keyword_status"]


@dataclass(frozen=True, slots=True)
class KeywordStatusResult:
    """Status of a keyword plus its single remaining value, if any.

    Unpacks as a pair:

        >>> status, unique = KeywordStatusResult(KeywordStatus.UNBOUNDED, None)

    Attributes:
        status: Classification of the keyword
        unique_value: The only value left after removing explicit cases,
            or None when zero or several remain
    """

    status: KeywordStatus
    unique_value: Decimal | None = None

    def __iter__(self) -> Iterator[KeywordStatus | Decimal | None]:
        yield self.status
        yield self.unique_value


def keyword_status(
    rules: PluralRules,
    keyword: str,
    explicits: Iterable[int | float | Decimal] | None = None,
    sample_type: SampleType = SampleType.INTEGER,
    offset: int | Decimal = 0,
) -> KeywordStatusResult:
    """Classify a keyword of a rule-set.

    Args:
        rules: Rule-set that defines the keyword
        keyword: Keyword to classify
        explicits: Values the caller handles before consulting the rules
        sample_type: Domain to analyse
        offset: Subtracted from each explicit value before comparison,
            as plural formats with an offset do

    Returns:
        KeywordStatusResult with the status and, when exactly one value
        remains, that value
    """
    if keyword not in rules.keywords:
        return KeywordStatusResult(KeywordStatus.INVALID)
    if not rules.is_limited(keyword, sample_type):
        return KeywordStatusResult(KeywordStatus.UNBOUNDED)

    values = rules.sample_numbers(keyword, sample_type) or frozenset()
    handled = {FixedDecimal.from_number(value).n - offset for value in explicits or ()}
    remaining = values - handled

    if not remaining:
        return KeywordStatusResult(KeywordStatus.SUPPRESSED)
    unique = next(iter(remaining)) if len(remaining) == 1 else None
    if len(values) == 1:
        return KeywordStatusResult(KeywordStatus.UNIQUE, unique)
    return KeywordStatusResult(KeywordStatus.BOUNDED, unique)
