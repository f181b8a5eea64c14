"""pluralengine - CLDR plural rules engine.

Parses rule-sets written in the CLDR plural-rules language, selects the
plural keyword ("one", "few", "other", ...) for a number, and answers
questions about a rule-set: which numbers select a keyword, whether there
are finitely many, and how a keyword behaves once a formatter's explicit
cases are handled.

Public API:
    parse - Parse a description into PluralRules
    PluralRules - Immutable rule-set: select(), samples, value sets, status
    FixedDecimal - Number with visible fraction digits (the CLDR operands)
    FixedDecimalRange - Inclusive range of FixedDecimal values
    FixedDecimalSamples - @integer / @decimal sample clause
    SamplingConfig - Limits for value-set generation
    KeywordStatus - INVALID / SUPPRESSED / UNIQUE / BOUNDED / UNBOUNDED
    KeywordStatusResult - Status plus unique value
    SampleType - INTEGER or DECIMAL sample domain
    PluralType - CARDINAL or ORDINAL rules
    NO_UNIQUE_VALUE - Returned when a keyword has no unique value

Exceptions:
    PluralRulesError - Base exception class
    ParseFailure - Malformed description
    NullInputFailure - Missing description

Submodules:
    pluralengine.syntax - Parser, syntax tree and serializer
    pluralengine.analysis - Value sets and keyword status
    pluralengine.diagnostics - Diagnostic codes, templates and formatting
    pluralengine.locale_data - CLDR descriptions per locale (Babel)
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .analysis import KeywordStatusResult
from .constants import NO_UNIQUE_VALUE
from .diagnostics import NullInputFailure, ParseFailure, PluralRulesError
from .enums import KeywordStatus, PluralType, SampleType
from .runtime import FixedDecimal, FixedDecimalRange, FixedDecimalSamples, SamplingConfig
from .runtime.rules import PluralRules, parse

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("pluralengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# CLDR plural rules syntax conformance
__cldr_spec_url__ = "https://unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules"

__all__ = [
    "NO_UNIQUE_VALUE",
    "FixedDecimal",
    "FixedDecimalRange",
    "FixedDecimalSamples",
    "KeywordStatus",
    "KeywordStatusResult",
    "NullInputFailure",
    "ParseFailure",
    "PluralRules",
    "PluralRulesError",
    "PluralType",
    "SampleType",
    "SamplingConfig",
    "__cldr_spec_url__",
    "__version__",
    "parse",
]
