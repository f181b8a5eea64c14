"""Diagnostic system for plural rules errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import NullInputFailure, ParseFailure, PluralRulesError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "NullInputFailure",
    "OutputFormat",
    "ParseFailure",
    "PluralRulesError",
    "SourceSpan",
]
