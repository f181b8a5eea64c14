"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every parser failure maps to exactly one template, which keeps messages
    testable and documents all error cases in one place.
    """

    _DOCS_URL = "https://unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules"
    _SAMPLES_URL = "https://unicode.org/reports/tr35/tr35-numbers.html#Samples"

    # ------------------------------------------------------------------
    # Input errors
    # ------------------------------------------------------------------

    @staticmethod
    def null_description() -> Diagnostic:
        """No description supplied.

        Returns:
            Diagnostic for NULL_DESCRIPTION
        """
        return Diagnostic(
            code=DiagnosticCode.NULL_DESCRIPTION,
            message="Plural rules description is missing",
            hint="Pass an empty string for the default rule-set",
        )

    @staticmethod
    def description_not_text(type_name: str) -> Diagnostic:
        """Description of the wrong type.

        Args:
            type_name: Name of the type received

        Returns:
            Diagnostic for DESCRIPTION_NOT_TEXT
        """
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTION_NOT_TEXT,
            message=f"Plural rules description must be str, got {type_name}",
        )

    @staticmethod
    def description_too_large(size: int, limit: int) -> Diagnostic:
        """Description exceeds the configured size limit.

        Args:
            size: Description length in characters
            limit: Configured maximum

        Returns:
            Diagnostic for DESCRIPTION_TOO_LARGE
        """
        return Diagnostic(
            code=DiagnosticCode.DESCRIPTION_TOO_LARGE,
            message=f"Description exceeds maximum size of {limit:,} characters ({size:,})",
            hint="Raise max_source_size on PluralRulesParser if this is intended",
        )

    # ------------------------------------------------------------------
    # Rule syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def unexpected_eof(span: SourceSpan, expected: str) -> Diagnostic:
        """Rule ended where more input was required.

        Args:
            span: Location of the end of the rule
            expected: What the parser was looking for

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected end of rule, expected {expected}",
            span=span,
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def unexpected_token(found: str, expected: str, span: SourceSpan) -> Diagnostic:
        """Token out of place in a condition.

        Args:
            found: Token text that was found
            expected: What the parser was looking for
            span: Location of the token

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=f"Unexpected '{found}', expected {expected}",
            span=span,
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def invalid_character(char: str, span: SourceSpan) -> Diagnostic:
        """Character outside the condition alphabet.

        Args:
            char: The offending character
            span: Location of the character

        Returns:
            Diagnostic for INVALID_CHARACTER
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_CHARACTER,
            message=f"Invalid character {char!r} in condition",
            span=span,
            hint="Conditions use letters, digits, whitespace and ! % , . =",
        )

    @staticmethod
    def missing_colon(rule: str, span: SourceSpan) -> Diagnostic:
        """Rule without a keyword separator.

        Args:
            rule: Text of the rule
            span: Location of the rule

        Returns:
            Diagnostic for MISSING_COLON
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_COLON,
            message=f"Missing ':' after keyword in rule '{rule}'",
            span=span,
            hint="Rules are written as 'keyword: condition'",
        )

    @staticmethod
    def invalid_keyword(keyword: str, span: SourceSpan) -> Diagnostic:
        """Keyword with characters other than lowercase ASCII letters.

        Args:
            keyword: The rejected keyword
            span: Location of the keyword

        Returns:
            Diagnostic for INVALID_KEYWORD
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_KEYWORD,
            message=f"Invalid keyword '{keyword}'",
            span=span,
            hint="Keywords consist of the letters a-z only",
        )

    @staticmethod
    def duplicate_keyword(keyword: str, span: SourceSpan) -> Diagnostic:
        """Keyword defined by more than one rule.

        Args:
            keyword: The repeated keyword
            span: Location of the second definition

        Returns:
            Diagnostic for DUPLICATE_KEYWORD
        """
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_KEYWORD,
            message=f"Duplicate keyword '{keyword}'",
            span=span,
            hint="Combine the conditions with 'or'",
        )

    @staticmethod
    def empty_rule(span: SourceSpan) -> Diagnostic:
        """Empty clause between semicolons.

        Args:
            span: Location of the empty clause

        Returns:
            Diagnostic for EMPTY_RULE
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_RULE,
            message="Empty rule",
            span=span,
            hint="Only a single trailing ';' is allowed",
        )

    @staticmethod
    def other_with_condition(span: SourceSpan) -> Diagnostic:
        """The catch-all keyword was given a condition.

        Args:
            span: Location of the condition

        Returns:
            Diagnostic for OTHER_WITH_CONDITION
        """
        return Diagnostic(
            code=DiagnosticCode.OTHER_WITH_CONDITION,
            message="The keyword 'other' cannot have a condition",
            span=span,
            hint="'other' matches everything the preceding rules do not",
        )

    @staticmethod
    def missing_condition(keyword: str, span: SourceSpan) -> Diagnostic:
        """Non-catch-all keyword without a condition.

        Args:
            keyword: The keyword missing a condition
            span: Location of the rule

        Returns:
            Diagnostic for MISSING_CONDITION
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_CONDITION,
            message=f"Keyword '{keyword}' must have a condition",
            span=span,
        )

    @staticmethod
    def unknown_operand(name: str, span: SourceSpan) -> Diagnostic:
        """Relation starting with something other than an operand.

        Args:
            name: The unrecognized operand
            span: Location of the operand

        Returns:
            Diagnostic for UNKNOWN_OPERAND
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_OPERAND,
            message=f"Unknown operand '{name}'",
            span=span,
            hint="Use one of the operands n, i, v, w, f, t, e",
            help_url=ErrorTemplate._DOCS_URL,
        )

    @staticmethod
    def invalid_negation(text: str, span: SourceSpan) -> Diagnostic:
        """Negation in a position the grammar does not allow.

        Args:
            text: The offending token sequence
            span: Location of the negation

        Returns:
            Diagnostic for INVALID_NEGATION
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_NEGATION,
            message=f"Invalid negation '{text}'",
            span=span,
            hint="Write 'is not', 'not in', 'not within' or '!='",
        )

    @staticmethod
    def multiple_values_after_is_not(span: SourceSpan) -> Diagnostic:
        """'is not' followed by a value list.

        Args:
            span: Location of the value list

        Returns:
            Diagnostic for MULTIPLE_VALUES_AFTER_IS_NOT
        """
        return Diagnostic(
            code=DiagnosticCode.MULTIPLE_VALUES_AFTER_IS_NOT,
            message="'is not' must be followed by a single value",
            span=span,
            hint="Use 'not in' for value lists",
        )

    @staticmethod
    def invalid_range(low: int, high: int, span: SourceSpan) -> Diagnostic:
        """Range whose lower end exceeds its upper end.

        Args:
            low: Lower end as written
            high: Upper end as written
            span: Location of the range

        Returns:
            Diagnostic for INVALID_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_RANGE,
            message=f"Invalid range {low}..{high}: lower end exceeds upper end",
            span=span,
        )

    @staticmethod
    def invalid_modulus(span: SourceSpan) -> Diagnostic:
        """Modulus of zero.

        Args:
            span: Location of the modulus

        Returns:
            Diagnostic for INVALID_MODULUS
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_MODULUS,
            message="Modulus must be a positive integer",
            span=span,
        )

    @staticmethod
    def range_exceeds_modulus(value: int, modulus: int, span: SourceSpan) -> Diagnostic:
        """Range value that no remainder can reach.

        Args:
            value: The out-of-range value
            modulus: The relation's modulus
            span: Location of the value list

        Returns:
            Diagnostic for RANGE_EXCEEDS_MODULUS
        """
        return Diagnostic(
            code=DiagnosticCode.RANGE_EXCEEDS_MODULUS,
            message=f"Value {value} cannot be reached with modulus {modulus}",
            span=span,
            hint=f"Values must be below {modulus}",
        )

    # ------------------------------------------------------------------
    # Sample syntax errors
    # ------------------------------------------------------------------

    @staticmethod
    def unknown_sample_type(name: str, span: SourceSpan) -> Diagnostic:
        """Sample clause that is neither @integer nor @decimal.

        Args:
            name: The sample type as written
            span: Location of the sample type

        Returns:
            Diagnostic for UNKNOWN_SAMPLE_TYPE
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_SAMPLE_TYPE,
            message=f"Unknown sample type '@{name}'",
            span=span,
            hint="Samples start with '@integer' or '@decimal'",
            help_url=ErrorTemplate._SAMPLES_URL,
        )

    @staticmethod
    def sample_order(span: SourceSpan) -> Diagnostic:
        """Sample clauses out of order or repeated.

        Args:
            span: Location of the offending clause

        Returns:
            Diagnostic for SAMPLE_ORDER
        """
        return Diagnostic(
            code=DiagnosticCode.SAMPLE_ORDER,
            message="Expected at most one '@integer' followed by at most one '@decimal'",
            span=span,
            help_url=ErrorTemplate._SAMPLES_URL,
        )

    @staticmethod
    def malformed_sample(text: str, span: SourceSpan) -> Diagnostic:
        """Sample value that is not a decimal literal.

        Args:
            text: The sample as written
            span: Location of the sample

        Returns:
            Diagnostic for MALFORMED_SAMPLE
        """
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_SAMPLE,
            message=f"Malformed sample '{text}'",
            span=span,
            hint="Samples are decimal literals or ranges like 3.50~3.53",
            help_url=ErrorTemplate._SAMPLES_URL,
        )

    @staticmethod
    def sample_type_mismatch(text: str, sample_type: str, span: SourceSpan) -> Diagnostic:
        """Integer sample with fraction digits, or decimal sample without.

        Args:
            text: The sample as written
            sample_type: The enclosing clause's sample type
            span: Location of the sample

        Returns:
            Diagnostic for SAMPLE_TYPE_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.SAMPLE_TYPE_MISMATCH,
            message=f"Sample '{text}' does not belong in '@{sample_type}'",
            span=span,
            hint="@integer samples have no fraction digits, @decimal samples need them",
        )

    @staticmethod
    def sample_after_ellipsis(span: SourceSpan) -> Diagnostic:
        """Sample following the unbounded marker.

        Args:
            span: Location of the sample

        Returns:
            Diagnostic for SAMPLE_AFTER_ELLIPSIS
        """
        return Diagnostic(
            code=DiagnosticCode.SAMPLE_AFTER_ELLIPSIS,
            message="Nothing may follow the ellipsis in a sample list",
            span=span,
        )

    @staticmethod
    def invalid_sample_range(reason: str, span: SourceSpan) -> Diagnostic:
        """Sample range with mismatched or reversed ends.

        Args:
            reason: Why the range was rejected
            span: Location of the range

        Returns:
            Diagnostic for INVALID_SAMPLE_RANGE
        """
        return Diagnostic(
            code=DiagnosticCode.INVALID_SAMPLE_RANGE,
            message=f"Invalid sample range: {reason}",
            span=span,
        )
