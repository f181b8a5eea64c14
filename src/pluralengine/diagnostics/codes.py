"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (missing or oversized descriptions)
        2000-2999: Rule syntax errors (keywords, conditions, relations)
        3000-3999: Sample syntax errors (@integer / @decimal clauses)
    """

    # Input errors (1000-1999)
    NULL_DESCRIPTION = 1001
    DESCRIPTION_TOO_LARGE = 1002
    DESCRIPTION_NOT_TEXT = 1003

    # Rule syntax errors (2000-2999)
    UNEXPECTED_EOF = 2001
    UNEXPECTED_TOKEN = 2002
    INVALID_CHARACTER = 2003
    MISSING_COLON = 2004
    INVALID_KEYWORD = 2005
    DUPLICATE_KEYWORD = 2006
    EMPTY_RULE = 2007
    OTHER_WITH_CONDITION = 2008
    MISSING_CONDITION = 2009
    UNKNOWN_OPERAND = 2010
    INVALID_NEGATION = 2011
    INVALID_RANGE = 2012
    INVALID_MODULUS = 2013
    RANGE_EXCEEDS_MODULUS = 2014
    MULTIPLE_VALUES_AFTER_IS_NOT = 2015

    # Sample syntax errors (3000-3999)
    UNKNOWN_SAMPLE_TYPE = 3001
    SAMPLE_ORDER = 3002
    MALFORMED_SAMPLE = 3003
    SAMPLE_TYPE_MISMATCH = 3004
    SAMPLE_AFTER_ELLIPSIS = 3005
    INVALID_SAMPLE_RANGE = 3006


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of an error inside a rule-set description.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or the
                1-indexed line/column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Location in the description (None for input errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_OPERAND]: Unknown operand 'x'
              --> line 1, column 4
              = help: Use one of the operands n, i, v, w, f, t, e

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
