"""Shared constants for pluralengine.

This module provides centralized constants used across the syntax, runtime
and analysis packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Keywords: CLDR plural category names
- Sentinels: Reported-data values that are not failures
- Input limits: Size constraints applied before parsing
- Operand limits: Bounds on the operand model
- Sampling: Defaults for value-set generation
- Cache limits: Memory bounds for caching subsystems

Python 3.13+. Zero external dependencies.
"""

from decimal import Decimal

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Keywords
    "KEYWORD_OTHER",
    "STANDARD_KEYWORDS",
    # Sentinels
    "NO_UNIQUE_VALUE",
    # Input limits
    "MAX_DESCRIPTION_SIZE",
    "MAX_NUMBER_DIGITS",
    # Operand limits
    "MAX_FRACTION_DIGITS",
    "MAX_COMPACT_EXPONENT",
    # Sampling
    "DECIMAL_SAMPLE_DIGITS",
    "RESIDUE_MODULUS_CUTOFF",
    "MAX_ENUMERATION",
    "SAMPLE_SCAN_LIMIT",
    "MAX_EXAMPLE_SAMPLES",
    "LARGE_SAMPLE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# KEYWORDS
# ============================================================================

# The catch-all category. Every rule-set ends with it, explicitly or not,
# and it never carries a condition.
KEYWORD_OTHER: str = "other"

# CLDR category names in canonical order. Descriptions may use any
# lowercase ASCII keyword; this order is only used to sort locale data.
STANDARD_KEYWORDS: tuple[str, ...] = ("zero", "one", "two", "few", "many", KEYWORD_OTHER)

# ============================================================================
# SENTINELS
# ============================================================================

# Returned by unique_keyword_value() when a keyword does not resolve to
# exactly one value. The odd literal cannot collide with a real operand
# because operand values are never negative.
NO_UNIQUE_VALUE: Decimal = Decimal("-0.00123456777")

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum description size in characters (64 KiB).
# The largest CLDR description is well under 1 KiB.
MAX_DESCRIPTION_SIZE: int = 64 * 1024

# Maximum digits in a condition value or modulus. CLDR moduli stay below 10**7.
MAX_NUMBER_DIGITS: int = 18

# ============================================================================
# OPERAND LIMITS
# ============================================================================

# Maximum visible fraction digits (v) of a FixedDecimal.
# Fraction digits f are kept below 10**18 so they fit a signed 64-bit value.
MAX_FRACTION_DIGITS: int = 18

# Maximum compact decimal exponent (the 6 in 1.1c6) of a sample literal.
MAX_COMPACT_EXPONENT: int = 24

# ============================================================================
# SAMPLING
# ============================================================================

# Visible fraction-digit counts that make up the decimal sampling domain.
# 1.0, 1.00 and 1.000 are all generated for a bounding integer 1.
DECIMAL_SAMPLE_DIGITS: tuple[int, ...] = (1, 2, 3)

# Largest least-common-multiple of moduli still searched exhaustively when
# deciding whether a set of modulus relations can hold at the same time.
RESIDUE_MODULUS_CUTOFF: int = 1000

# Maximum number of values enumerated for a single bounded set. Larger sets
# are reported as unbounded.
MAX_ENUMERATION: int = 10_000

# Rules without explicit samples get example values by scanning the first
# SAMPLE_SCAN_LIMIT integers (or tenths, for decimals). An unbounded keyword
# keeps at most MAX_EXAMPLE_SAMPLES of them.
SAMPLE_SCAN_LIMIT: int = 200
MAX_EXAMPLE_SAMPLES: int = 20

# Extra value scanned after the range above. Some locales (Welsh, Breton)
# only reach a keyword with millions.
LARGE_SAMPLE: int = 1_000_000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum number of Babel locale objects and locale rule-sets to cache.
MAX_LOCALE_CACHE_SIZE: int = 128
