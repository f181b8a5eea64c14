"""Sampling configuration for value-set generation.

Provides a single frozen dataclass that bounds the work done by the
analysis routines (all_keyword_values, samples, keyword_status). Pass an
instance to ``parse(description, config=...)`` or ``PluralRules(...)``.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from pluralengine.constants import (
    DECIMAL_SAMPLE_DIGITS,
    MAX_ENUMERATION,
    MAX_FRACTION_DIGITS,
    RESIDUE_MODULUS_CUTOFF,
)

__all__ = ["SamplingConfig"]


@dataclass(frozen=True, slots=True)
class SamplingConfig:
    """Immutable configuration for value-set generation.

    All fields have sensible defaults; ``SamplingConfig()`` with no
    arguments produces a usable configuration.

    Attributes:
        decimal_digits: Visible fraction-digit counts that make up the
            decimal domain (default: 1, 2 and 3).
        residue_cutoff: Largest least-common-multiple of moduli searched
            when deciding whether modulus relations can hold together
            (default: 1000). Beyond it, such conjunctions count as unbounded.
        max_enumeration: Maximum size of a single enumerated value set
            (default: 10000). Larger sets count as unbounded.

    Example:
        >>> config = SamplingConfig(decimal_digits=(1,))
        >>> rules = parse("one: n is 1", config=config)
        >>> sorted(str(v) for v in rules.samples("one", SampleType.DECIMAL))
        ['1.0']
    """

    decimal_digits: tuple[int, ...] = DECIMAL_SAMPLE_DIGITS
    residue_cutoff: int = RESIDUE_MODULUS_CUTOFF
    max_enumeration: int = MAX_ENUMERATION

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If decimal_digits is empty or holds a count outside
                1..MAX_FRACTION_DIGITS, or a limit is not positive.
        """
        if not self.decimal_digits:
            msg = "decimal_digits must not be empty"
            raise ValueError(msg)
        if any(not 1 <= d <= MAX_FRACTION_DIGITS for d in self.decimal_digits):
            msg = f"decimal_digits must be between 1 and {MAX_FRACTION_DIGITS}"
            raise ValueError(msg)
        if self.residue_cutoff <= 0:
            msg = "residue_cutoff must be positive"
            raise ValueError(msg)
        if self.max_enumeration <= 0:
            msg = "max_enumeration must be positive"
            raise ValueError(msg)
