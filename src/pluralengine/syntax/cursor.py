"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern used by the rule and sample parsers.

Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)

A cursor may carry an ``end`` bound below ``len(source)``. Rule clauses and
sample clauses are parsed in place inside the full description, so error
positions always refer to the description the caller wrote.
"""

from dataclasses import dataclass

from pluralengine.diagnostics import SourceSpan

__all__ = ["Cursor", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("n is 1", 0)
        >>> cursor.current
        'n'
        >>> cursor.advance().skip_whitespace().current
        'i'
        >>> Cursor("n is 1", 0, end=1).advance().is_eof
        True
    """

    source: str
    pos: int
    end: int = -1

    def __post_init__(self) -> None:
        if self.end < 0:
            object.__setattr__(self, "end", len(self.source))

    @property
    def is_eof(self) -> bool:
        """Check if at end of input (or of the bounded region)."""
        return self.pos >= self.end

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= self.end:
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions."""
        new_pos = min(self.pos + count, self.end)
        return Cursor(self.source, new_pos, self.end)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor."""
        return self.source[self.pos : min(self.pos + n, self.end)]

    def skip_whitespace(self) -> "Cursor":
        """Skip Unicode whitespace characters.

        Tabs and newlines separate tokens just like spaces do.
        """
        c = self
        while not c.is_eof and c.current.isspace():
            c = c.advance()
        return c

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("one: n is 1;\\ntwo: n is 2", 18).compute_line_col()
            (2, 6)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span_to(self, end_pos: int) -> SourceSpan:
        """Build a SourceSpan from the current position to end_pos."""
        line, col = self.compute_line_col()
        return SourceSpan(start=self.pos, end=max(end_pos, self.pos), line=line, column=col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> cursor = Cursor("12..15", 0)
        >>> result = ParseResult(12, cursor.advance(2))
        >>> result.value, result.cursor.current
        (12, '.')
    """

    value: T
    cursor: Cursor
