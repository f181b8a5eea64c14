"""Condition grammar for plural rules.

Tokenizes a condition and parses it by recursive descent:

    condition  := and ('or' and)*
    and        := relation ('and' relation)*
    relation   := operand [('mod' | '%') integer] comparator range-list
                | operand
    comparator := 'is' ['not'] | ['not'] 'in' | ['not'] 'within'
                | '=' | '!' '='
    range-list := value (',' value)*
    value      := integer ['.' '.' integer]

Whitespace only separates tokens. The characters ``! % , . =`` are tokens
of their own, so ``n%11!=5`` and ``n % 11 ! = 5`` parse alike.

A bare operand (``a: n``) is accepted and always holds.

All failures raise ParseFailure carrying a Diagnostic whose span points
into the description being parsed.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import NoReturn

from pluralengine.constants import MAX_NUMBER_DIGITS
from pluralengine.diagnostics import Diagnostic, ErrorTemplate, ParseFailure, SourceSpan
from pluralengine.enums import Operand, RelationMethod
from pluralengine.syntax.ast import (
    AlwaysTrue,
    AndCondition,
    Conjunct,
    OrCondition,
    Relation,
    ValueRange,
)
from pluralengine.syntax.cursor import Cursor
from pluralengine.syntax.parser.primitives import SYMBOLS, parse_digits, parse_word

__all__ = ["Token", "TokenKind", "parse_condition", "tokenize"]

_OPERANDS: frozenset[str] = frozenset(Operand)


class TokenKind(StrEnum):
    """Lexical class of a condition token."""

    WORD = "word"
    NUMBER = "number"
    SYMBOL = "symbol"


@dataclass(frozen=True, slots=True)
class Token:
    """Condition token with its position in the description."""

    kind: TokenKind
    text: str
    start: int
    end: int


def fail(diagnostic: Diagnostic, source: str) -> NoReturn:
    """Raise ParseFailure for a diagnostic located in source."""
    position = diagnostic.span.start if diagnostic.span else -1
    raise ParseFailure(diagnostic, description=source, position=position)


def tokenize(cursor: Cursor) -> tuple[Token, ...]:
    """Split the region under cursor into condition tokens.

    Raises:
        ParseFailure: On a character that cannot start a token
    """
    tokens: list[Token] = []
    cursor = cursor.skip_whitespace()
    while not cursor.is_eof:
        ch = cursor.current
        if ch in SYMBOLS:
            tokens.append(Token(TokenKind.SYMBOL, ch, cursor.pos, cursor.pos + 1))
            cursor = cursor.advance()
        elif (word := parse_word(cursor)) is not None:
            tokens.append(Token(TokenKind.WORD, word.value, cursor.pos, word.cursor.pos))
            cursor = word.cursor
        elif (number := parse_digits(cursor)) is not None:
            tokens.append(Token(TokenKind.NUMBER, number.value, cursor.pos, number.cursor.pos))
            cursor = number.cursor
        else:
            fail(ErrorTemplate.invalid_character(ch, cursor.span_to(cursor.pos + 1)), cursor.source)
        cursor = cursor.skip_whitespace()
    return tuple(tokens)


class _TokenStream:
    """Forward-only view over a token tuple."""

    __slots__ = ("_end", "_index", "_source", "_tokens")

    def __init__(self, tokens: tuple[Token, ...], source: str, end: int) -> None:
        self._tokens = tokens
        self._source = source
        self._end = end
        self._index = 0

    def peek(self) -> Token | None:
        if self._index >= len(self._tokens):
            return None
        return self._tokens[self._index]

    def peek_text(self) -> str | None:
        token = self.peek()
        return token.text if token else None

    def next(self, expected: str) -> Token:
        """Consume the next token, failing at the end of the condition."""
        token = self.peek()
        if token is None:
            span = Cursor(self._source, self._end).span_to(self._end)
            fail(ErrorTemplate.unexpected_eof(span, expected), self._source)
        self._index += 1
        return token

    def next_number(self, expected: str) -> tuple[int, Token]:
        token = self.next(expected)
        if token.kind is not TokenKind.NUMBER:
            self.unexpected(token, expected)
        if len(token.text) > MAX_NUMBER_DIGITS:
            self.unexpected(token, f"{expected} of at most {MAX_NUMBER_DIGITS} digits")
        return int(token.text), token

    def at_relation_end(self) -> bool:
        return self.peek_text() in (None, "and", "or")

    def unexpected(self, token: Token, expected: str) -> NoReturn:
        fail(ErrorTemplate.unexpected_token(token.text, expected, self.span(token)), self._source)

    def span(self, first: Token, last: Token | None = None) -> SourceSpan:
        return Cursor(self._source, first.start).span_to((last or first).end)

    @property
    def source(self) -> str:
        return self._source


def parse_condition(cursor: Cursor) -> OrCondition:
    """Parse the condition text under cursor.

    Args:
        cursor: Cursor bounded to the condition (between ':' and '@')

    Returns:
        OrCondition; empty when the region holds no tokens

    Raises:
        ParseFailure: If the condition is malformed
    """
    stream = _TokenStream(tokenize(cursor), cursor.source, cursor.end)
    if stream.peek() is None:
        return OrCondition()

    branches = [_parse_and(stream)]
    while (token := stream.peek()) is not None:
        if token.text != "or":
            stream.unexpected(token, "'and', 'or' or end of rule")
        stream.next("or")
        branches.append(_parse_and(stream))
    return OrCondition(tuple(branches))


def _parse_and(stream: _TokenStream) -> AndCondition:
    relations = [_parse_relation(stream)]
    while stream.peek_text() == "and":
        stream.next("and")
        relations.append(_parse_relation(stream))
    return AndCondition(tuple(relations))


def _parse_relation(stream: _TokenStream) -> Conjunct:  # noqa: PLR0912 - grammar branches
    operand_token = stream.next("operand")
    if operand_token.kind is not TokenKind.WORD or operand_token.text not in _OPERANDS:
        fail(
            ErrorTemplate.unknown_operand(operand_token.text, stream.span(operand_token)),
            stream.source,
        )
    operand = Operand(operand_token.text)
    if stream.at_relation_end():
        return AlwaysTrue()

    modulus: int | None = None
    token = stream.next("comparator")
    if token.text in ("mod", "%"):
        modulus, modulus_token = stream.next_number("modulus")
        if modulus == 0:
            fail(ErrorTemplate.invalid_modulus(stream.span(modulus_token)), stream.source)
        token = stream.next("comparator")

    negated = False
    negation_token: Token | None = None
    if token.text == "not":
        negated, negation_token = True, token
        token = stream.next("'in' or 'within'")
        if token.text in ("=", "is"):
            fail(
                ErrorTemplate.invalid_negation(f"not {token.text}", stream.span(negation_token, token)),
                stream.source,
            )
    elif token.text == "!":
        negated, negation_token = True, token
        token = stream.next("'='")
        if token.text != "=":
            stream.unexpected(token, "'='")

    is_form = token.text == "is"
    if token.text in ("is", "in", "="):
        method = RelationMethod.IN
    elif token.text == "within":
        method = RelationMethod.WITHIN
    else:
        stream.unexpected(token, "'is', 'in', 'within', '=' or '!='")

    if stream.peek_text() == "not":
        second_negation = stream.next("not")
        if negated or not is_form:
            fail(
                ErrorTemplate.invalid_negation(
                    "not", stream.span(negation_token or second_negation, second_negation)
                ),
                stream.source,
            )
        negated, negation_token = True, second_negation

    first_value = stream.peek()
    ranges = _parse_range_list(stream, modulus)
    if is_form and negated and (len(ranges) > 1 or not ranges[0].is_single):
        assert first_value is not None  # a range list has at least one value
        fail(ErrorTemplate.multiple_values_after_is_not(stream.span(first_value)), stream.source)

    if not stream.at_relation_end():
        token = stream.next("end of relation")
        stream.unexpected(token, "'and', 'or' or end of rule")

    return Relation(
        operand=operand,
        modulus=modulus,
        method=method,
        negated=negated,
        ranges=ranges,
    )


def _parse_range_list(stream: _TokenStream, modulus: int | None) -> tuple[ValueRange, ...]:
    ranges: list[ValueRange] = []
    while True:
        low, low_token = stream.next_number("value")
        high, high_token = low, low_token
        if stream.peek_text() == ".":
            stream.next("'..'")
            dot = stream.next("'..'")
            if dot.text != ".":
                stream.unexpected(dot, "'..'")
            high, high_token = stream.next_number("range end")
            if low > high:
                fail(
                    ErrorTemplate.invalid_range(low, high, stream.span(low_token, high_token)),
                    stream.source,
                )
        if modulus is not None and high >= modulus:
            fail(
                ErrorTemplate.range_exceeds_modulus(
                    high, modulus, stream.span(low_token, high_token)
                ),
                stream.source,
            )
        ranges.append(ValueRange(low, high))
        if stream.peek_text() != ",":
            return tuple(ranges)
        stream.next(",")
