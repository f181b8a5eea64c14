"""Plural rules exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic for rich error information.
Each concrete failure also derives from the built-in exception a caller
would naturally catch (TypeError for a missing description, ValueError for
malformed syntax).

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PluralRulesError(Exception):
    """Base exception for all plural rules errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralRulesError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NullInputFailure(PluralRulesError, TypeError):
    """No description was supplied to the parser.

    An empty string is valid input; only an absent description fails.
    """


class ParseFailure(PluralRulesError, ValueError):
    """Rule-set description violates the plural rules syntax.

    Parsing is fail-fast: no partial rule-set is ever produced.

    Attributes:
        description: The description that failed to parse
        position: Character offset of the error (-1 if not applicable)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        description: str = "",
        position: int = -1,
    ) -> None:
        """Initialize ParseFailure.

        Args:
            message: Error message string OR Diagnostic object
            description: The description that failed to parse
            position: Character offset of the error
        """
        super().__init__(message)
        self.description = description
        self.position = position
