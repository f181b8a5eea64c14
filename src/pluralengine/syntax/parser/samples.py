"""Sample clause grammar: ``@integer 0, 5~19, …`` and ``@decimal 0.0~1.5, …``.

    samples := ('integer' | 'decimal') item (',' item)* [',']
    item    := literal ['~' literal] | '…' | '...'

The ellipsis marks the list as unbounded and must be the last item.
@integer samples may not have fraction digits and @decimal samples must
have them, except for compact literals such as ``1.1c6``.
"""

from pluralengine.diagnostics import ErrorTemplate
from pluralengine.enums import SampleType
from pluralengine.runtime.operands import FixedDecimal, FixedDecimalRange, FixedDecimalSamples
from pluralengine.syntax.cursor import Cursor, ParseResult
from pluralengine.syntax.parser.primitives import parse_sample_literal, parse_word
from pluralengine.syntax.parser.rules import fail

__all__ = ["parse_samples"]

_ELLIPSES: tuple[str, ...] = ("…", "...")

# Characters that end a malformed sample in error messages.
_ITEM_TERMINATORS: str = ",~"


def parse_samples(cursor: Cursor) -> FixedDecimalSamples:
    """Parse one sample clause.

    Args:
        cursor: Cursor just past the '@', bounded to the clause

    Returns:
        FixedDecimalSamples in written order, duplicates removed

    Raises:
        ParseFailure: If the clause is malformed
    """
    word = parse_word(cursor)
    if word is None or word.value not in (SampleType.INTEGER, SampleType.DECIMAL):
        name = _item_text(cursor)
        fail(ErrorTemplate.unknown_sample_type(name, cursor.span_to(cursor.pos + len(name))), cursor.source)
    sample_type = SampleType(word.value)

    ranges: dict[FixedDecimalRange, None] = {}
    bounded = True
    cursor = word.cursor.skip_whitespace()
    while not cursor.is_eof:
        if not bounded:
            fail(ErrorTemplate.sample_after_ellipsis(cursor.span_to(cursor.end)), cursor.source)
        ellipsis = next((e for e in _ELLIPSES if cursor.slice_ahead(len(e)) == e), None)
        if ellipsis is not None:
            bounded = False
            cursor = cursor.advance(len(ellipsis))
        else:
            item = _parse_sample_range(cursor, sample_type)
            ranges.setdefault(item.value)
            cursor = item.cursor

        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            break
        if cursor.current != ",":
            text = _item_text(cursor)
            fail(ErrorTemplate.malformed_sample(text, cursor.span_to(cursor.pos + len(text))), cursor.source)
        cursor = cursor.advance().skip_whitespace()

    if not ranges and bounded:
        fail(ErrorTemplate.malformed_sample("", cursor.span_to(cursor.pos)), cursor.source)
    return FixedDecimalSamples(sample_type, tuple(ranges), bounded)


def _parse_sample_range(cursor: Cursor, sample_type: SampleType) -> ParseResult[FixedDecimalRange]:
    start_cursor = cursor
    first = _parse_sample_value(cursor, sample_type)
    end = first
    cursor = first.cursor.skip_whitespace()
    if not cursor.is_eof and cursor.current == "~":
        end = _parse_sample_value(cursor.advance().skip_whitespace(), sample_type)
    try:
        sample_range = FixedDecimalRange(first.value, end.value)
    except ValueError as e:
        span = start_cursor.span_to(end.cursor.pos)
        fail(ErrorTemplate.invalid_sample_range(str(e), span), cursor.source)
    return ParseResult(sample_range, end.cursor)


def _parse_sample_value(cursor: Cursor, sample_type: SampleType) -> ParseResult[FixedDecimal]:
    literal = parse_sample_literal(cursor)
    if literal is None:
        text = _item_text(cursor)
        fail(ErrorTemplate.malformed_sample(text, cursor.span_to(cursor.pos + len(text))), cursor.source)

    span = cursor.span_to(literal.cursor.pos)
    try:
        value = FixedDecimal.from_string(literal.value)
    except ValueError:
        fail(ErrorTemplate.malformed_sample(literal.value, span), cursor.source)

    if value.e == 0 and (sample_type is SampleType.INTEGER) != (value.v == 0):
        fail(ErrorTemplate.sample_type_mismatch(literal.value, sample_type, span), cursor.source)
    return ParseResult(value, literal.cursor)


def _item_text(cursor: Cursor) -> str:
    """Return the text up to the next separator, for error messages."""
    end = cursor
    while not end.is_eof and end.current not in _ITEM_TERMINATORS and not end.current.isspace():
        end = end.advance()
    return cursor.slice_to(end.pos)
