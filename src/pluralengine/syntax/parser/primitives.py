"""Primitive parsing utilities for the plural rules parser.

This module provides low-level parsers for keywords, integers and sample
literals. Each returns a ParseResult on success or None when the input at
the cursor does not start with the expected construct; callers turn None
into a diagnostic.
"""

from pluralengine.syntax.cursor import Cursor, ParseResult

# ASCII digits only - str.isdigit() accepts Unicode digits like ² which
# int() then rejects.
_ASCII_DIGITS: str = "0123456789"

# Keywords and condition words are lowercase ASCII (descriptions are
# case-folded before parsing).
_ASCII_LETTERS: str = "abcdefghijklmnopqrstuvwxyz"

# Characters that always form a token of their own inside a condition.
SYMBOLS: str = "!%,.="

# Compact exponent markers in sample literals (1.2c3).
_EXPONENT_MARKERS: str = "ce"


def is_keyword(text: str) -> bool:
    """Check that text is a valid plural keyword: [a-z]+"""
    return bool(text) and all(ch in _ASCII_LETTERS for ch in text)


def _scan(cursor: Cursor, alphabet: str) -> Cursor:
    while not cursor.is_eof and cursor.current in alphabet:
        cursor = cursor.advance()
    return cursor


def parse_word(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a lowercase word: [a-z]+

    Examples:
        mod → "mod"
        within → "within"
    """
    end = _scan(cursor, _ASCII_LETTERS)
    if end.pos == cursor.pos:
        return None
    return ParseResult(cursor.slice_to(end.pos), end)


def parse_digits(cursor: Cursor) -> ParseResult[str] | None:
    """Parse an unsigned integer literal: [0-9]+"""
    end = _scan(cursor, _ASCII_DIGITS)
    if end.pos == cursor.pos:
        return None
    return ParseResult(cursor.slice_to(end.pos), end)


def parse_sample_literal(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a sample literal: [0-9]+ ('.' [0-9]+)? ([ce] [0-9]+)?

    Examples:
        19 → "19"
        3.50 → "3.50"
        1.2c3 → "1.2c3"

    Returns:
        ParseResult with the literal text, or None if no literal starts
        at the cursor or a '.' / exponent marker is not followed by digits
    """
    start = cursor
    cursor = _scan(cursor, _ASCII_DIGITS)
    if cursor.pos == start.pos:
        return None

    if not cursor.is_eof and cursor.current == "." and cursor.peek(1) != ".":
        fraction = parse_digits(cursor.advance())
        if fraction is None:
            return None
        cursor = fraction.cursor

    if not cursor.is_eof and cursor.current in _EXPONENT_MARKERS:
        exponent = parse_digits(cursor.advance())
        if exponent is None:
            return None
        cursor = exponent.cursor

    return ParseResult(start.slice_to(cursor.pos), cursor)
