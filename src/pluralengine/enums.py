"""Enumerations for pluralengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Operand(StrEnum):
    """CLDR plural operand.

    StrEnum provides automatic string conversion: str(Operand.N) == "n"
    """

    N = "n"
    """Absolute value of the source number"""

    I = "i"  # noqa: E741 - CLDR operand name
    """Integer digits of n"""

    V = "v"
    """Number of visible fraction digits, with trailing zeros"""

    W = "w"
    """Number of visible fraction digits, without trailing zeros"""

    F = "f"
    """Visible fraction digits, with trailing zeros"""

    T = "t"
    """Visible fraction digits, without trailing zeros"""

    E = "e"
    """Compact decimal exponent"""

    C = "c"
    """Synonym for e used by newer CLDR data"""


class RelationMethod(StrEnum):
    """Membership test applied by a relation.

    StrEnum provides automatic string conversion: str(RelationMethod.IN) == "in"
    """

    IN = "in"
    """Exact integer membership: is, in, =, !="""

    WITHIN = "within"
    """Inclusive range membership accepting non-integer values"""


class SampleType(StrEnum):
    """Domain of sample values.

    StrEnum provides automatic string conversion: str(SampleType.INTEGER) == "integer"
    """

    INTEGER = "integer"
    """Values with no visible fraction digits: @integer"""

    DECIMAL = "decimal"
    """Values with visible fraction digits: @decimal"""


class KeywordStatus(StrEnum):
    """Reachability of a keyword, as seen by a formatter.

    StrEnum provides automatic string conversion: str(KeywordStatus.UNIQUE) == "unique"
    """

    INVALID = "invalid"
    """Keyword is not defined by the rule-set"""

    SUPPRESSED = "suppressed"
    """Every value of the keyword is already handled explicitly"""

    UNIQUE = "unique"
    """Keyword selects exactly one value"""

    BOUNDED = "bounded"
    """Keyword selects a finite set of more than one value"""

    UNBOUNDED = "unbounded"
    """Keyword selects infinitely many values"""


class PluralType(StrEnum):
    """Kind of plural rules provided for a locale.

    StrEnum provides automatic string conversion: str(PluralType.CARDINAL) == "cardinal"
    """

    CARDINAL = "cardinal"
    """Counts: 1 file, 2 files"""

    ORDINAL = "ordinal"
    """Ranks: 1st, 2nd, 3rd"""


__all__ = [
    "KeywordStatus",
    "Operand",
    "PluralType",
    "RelationMethod",
    "SampleType",
]
