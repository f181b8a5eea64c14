"""CLDR plural operand model.

Defines the value types that plural conditions are evaluated against:
    - FixedDecimal: A number decomposed into the CLDR operands n, i, v, w, f, t, e
    - FixedDecimalRange: Inclusive range of FixedDecimal values
    - FixedDecimalSamples: Sample clause of a rule (@integer / @decimal)

A FixedDecimal remembers its visible fraction digits, so 1.0 and 1.00 are
distinct operand values although they are numerically equal. This is what
lets "v = 0" tell "1 day" apart from "1.0 days".

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, localcontext

from pluralengine.constants import MAX_COMPACT_EXPONENT, MAX_ENUMERATION, MAX_FRACTION_DIGITS
from pluralengine.enums import Operand, SampleType

__all__ = [
    "FixedDecimal",
    "FixedDecimalRange",
    "FixedDecimalSamples",
]

# Sample literal: digits, optional fraction, optional compact exponent (1.2c3).
_SAMPLE_LITERAL = re.compile(r"([0-9]+)(?:\.([0-9]+))?(?:[ce]([0-9]+))?")


def _as_decimal(value: int | float | Decimal) -> Decimal:
    """Convert a plain number to Decimal, rejecting NaN and infinities."""
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        return Decimal(value)
    elif isinstance(value, float):
        # str() gives the shortest repr that round-trips, so 1.1 stays 1.1
        result = Decimal(str(value))
    else:
        msg = f"Expected int, float or Decimal, got {type(value).__name__}"
        raise TypeError(msg)
    if not result.is_finite():
        msg = f"Plural operands require a finite number, got {value!r}"
        raise ValueError(msg)
    return result


def _check_visible_digits(visible_digits: int) -> None:
    if not 0 <= visible_digits <= MAX_FRACTION_DIGITS:
        msg = (
            f"Visible fraction digits must be between 0 and "
            f"{MAX_FRACTION_DIGITS}, got {visible_digits}"
        )
        raise ValueError(msg)


def _scaled_units(magnitude: Decimal, visible_digits: int) -> int:
    """Return magnitude * 10**visible_digits, rounded half-even to an integer."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(magnitude.as_tuple().digits) + visible_digits + 2)
        scaled = magnitude.scaleb(visible_digits)
        return int(scaled.to_integral_value(rounding=ROUND_HALF_EVEN))


@dataclass(frozen=True, slots=True, order=True)
class FixedDecimal:
    """A non-negative number with a fixed count of visible fraction digits.

    Prefer the factories over the raw constructor: ``create`` takes an
    explicit digit count, ``from_number`` derives the minimal one, and
    ``from_string`` reads a sample literal.

    Ordering compares the numeric value first and the visible digit count
    second, so ``1.0 < 1.00 < 1.5``.

    Attributes:
        n: Absolute value, written with exactly v fraction digits
        v: Number of visible fraction digits, with trailing zeros
        f: Visible fraction digits as an integer, with trailing zeros
        e: Compact decimal exponent (0 for ordinary numbers)

    Example:
        >>> fd = FixedDecimal.create(Decimal("1.5"), 2, 50)
        >>> str(fd), fd.i, fd.v, fd.w, fd.f, fd.t
        ('1.50', 1, 2, 1, 50, 5)
    """

    n: Decimal
    v: int
    f: int
    e: int = 0

    def __post_init__(self) -> None:
        """Validate operand consistency.

        Raises:
            ValueError: If n is negative or not finite, v is out of range,
                n is not written with v fraction digits, or f disagrees with n.
        """
        if not self.n.is_finite() or self.n < 0:
            msg = f"FixedDecimal.n must be a finite non-negative Decimal, got {self.n}"
            raise ValueError(msg)
        _check_visible_digits(self.v)
        exponent = self.n.as_tuple().exponent
        if exponent != -self.v:
            msg = f"FixedDecimal.n must have exactly {self.v} fraction digits, got {self.n}"
            raise ValueError(msg)
        if _scaled_units(self.n, self.v) % 10**self.v != self.f:
            msg = f"FixedDecimal.f ({self.f}) does not match n ({self.n})"
            raise ValueError(msg)
        if self.e < 0:
            msg = f"FixedDecimal.e must be >= 0, got {self.e}"
            raise ValueError(msg)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_units(cls, units: int, visible_digits: int, exponent: int = 0) -> "FixedDecimal":
        """Build from the value scaled by 10**visible_digits.

        ``from_units(350, 2)`` is 3.50.
        """
        _check_visible_digits(visible_digits)
        units = abs(units)
        n = Decimal(f"{units}E-{visible_digits}")
        return cls(n, visible_digits, units % 10**visible_digits, exponent)

    @classmethod
    def create(
        cls,
        value: int | float | Decimal,
        visible_digits: int,
        fraction_digits: int | None = None,
        exponent: int = 0,
    ) -> "FixedDecimal":
        """Build from a number plus explicit visible fraction digits.

        Args:
            value: The number; its sign is ignored
            visible_digits: Count of visible fraction digits (v)
            fraction_digits: Those digits as an integer (f). When omitted,
                they are taken from value rounded to visible_digits places.
            exponent: Compact decimal exponent (e)

        Returns:
            FixedDecimal with integer part from value and fraction from
            fraction_digits

        Raises:
            ValueError: If the digit counts are inconsistent
        """
        _check_visible_digits(visible_digits)
        magnitude = _as_decimal(value).copy_abs()
        if fraction_digits is None:
            return cls.from_units(_scaled_units(magnitude, visible_digits), visible_digits, exponent)

        if not 0 <= fraction_digits < 10**visible_digits:
            msg = (
                f"Fraction digits {fraction_digits} do not fit in "
                f"{visible_digits} visible digits"
            )
            raise ValueError(msg)
        units = int(magnitude) * 10**visible_digits + fraction_digits
        return cls.from_units(units, visible_digits, exponent)

    @classmethod
    def from_number(cls, value: "int | float | Decimal | FixedDecimal") -> "FixedDecimal":
        """Build from a plain number.

        Integers have no fraction digits. Floats get the minimal count that
        reproduces them (1.50 as a float is 1.5). A Decimal keeps the digits
        it was written with, so ``Decimal("1.50")`` has v=2. Counts above
        MAX_FRACTION_DIGITS are rounded away.
        """
        if isinstance(value, FixedDecimal):
            return value
        magnitude = _as_decimal(value).copy_abs()
        if isinstance(value, float):
            magnitude = magnitude.normalize()
        exponent = magnitude.as_tuple().exponent
        assert isinstance(exponent, int)  # finite
        visible_digits = min(max(0, -exponent), MAX_FRACTION_DIGITS)
        units = _scaled_units(magnitude, visible_digits)
        if isinstance(value, float) and visible_digits == MAX_FRACTION_DIGITS:
            # Rounding may have produced trailing zeros
            while visible_digits and units % 10 == 0:
                units //= 10
                visible_digits -= 1
        return cls.from_units(units, visible_digits)

    @classmethod
    def from_string(cls, text: str) -> "FixedDecimal":
        """Parse a sample literal such as ``3.50`` or ``1.2c3``.

        Raises:
            ValueError: If text is not a plain decimal literal or its
                compact exponent exceeds MAX_COMPACT_EXPONENT
        """
        match = _SAMPLE_LITERAL.fullmatch(text)
        if match is None:
            msg = f"Invalid decimal literal: {text!r}"
            raise ValueError(msg)
        integer_digits, fraction_text, exponent_text = match.groups()
        fraction_text = fraction_text or ""
        exponent = int(exponent_text or 0)
        if exponent > MAX_COMPACT_EXPONENT:
            msg = f"Compact exponent must be at most {MAX_COMPACT_EXPONENT}, got {exponent}"
            raise ValueError(msg)
        # The exponent moves fraction digits into the integer part
        visible_digits = max(0, len(fraction_text) - exponent)
        units = int(integer_digits + fraction_text) * 10 ** max(0, exponent - len(fraction_text))
        return cls.from_units(units, visible_digits, exponent)

    # ------------------------------------------------------------------
    # Operands
    # ------------------------------------------------------------------

    @property
    def units(self) -> int:
        """Value scaled by 10**v, as an exact integer."""
        return self.i * 10**self.v + self.f

    @property
    def i(self) -> int:
        """Integer digits of n."""
        return int(self.n)

    @property
    def w(self) -> int:
        """Visible fraction digit count without trailing zeros."""
        if self.f == 0:
            return 0
        return len(str(self.f).zfill(self.v).rstrip("0"))

    @property
    def t(self) -> int:
        """Visible fraction digits without trailing zeros."""
        t = self.f
        while t and t % 10 == 0:
            t //= 10
        return t

    @property
    def is_integer(self) -> bool:
        """True when the value has no visible fraction digits."""
        return self.v == 0

    def operand(self, operand: Operand) -> Decimal | int:
        """Return the value of a CLDR operand.

        n is the only operand that can carry a fraction, and only when v > 0;
        every other value is returned as an int.
        """
        match operand:
            case Operand.N:
                return self.n if self.v else self.i
            case Operand.I:
                return self.i
            case Operand.V:
                return self.v
            case Operand.W:
                return self.w
            case Operand.F:
                return self.f
            case Operand.T:
                return self.t
            case Operand.E | Operand.C:
                return self.e

    def __str__(self) -> str:
        if not self.e:
            return str(self.n)
        mantissa = Decimal(f"{self.units}E-{self.v + self.e}")
        if self.v == 0:
            return f"{format(mantissa.normalize(), 'f')}c{self.e}"
        return f"{mantissa}c{self.e}"


@dataclass(frozen=True, slots=True)
class FixedDecimalRange:
    """Inclusive range of FixedDecimal values with a common digit count.

    A range steps in units of the last visible digit: 3.50~3.53 holds
    3.50, 3.51, 3.52 and 3.53. A singleton has start == end.
    """

    start: FixedDecimal
    end: FixedDecimal

    def __post_init__(self) -> None:
        """Validate range bounds.

        Raises:
            ValueError: If the ends differ in visible digits or start > end
        """
        if self.start.v != self.end.v:
            msg = f"Range ends must have the same number of visible digits: {self.start}~{self.end}"
            raise ValueError(msg)
        if self.start.n > self.end.n:
            msg = f"Range start must not exceed range end: {self.start}~{self.end}"
            raise ValueError(msg)

    def __len__(self) -> int:
        return self.end.units - self.start.units + 1

    def __iter__(self) -> Iterator[FixedDecimal]:
        v = self.start.v
        for units in range(self.start.units, self.end.units + 1):
            yield FixedDecimal.from_units(units, v, self.start.e)

    def __str__(self) -> str:
        if self.start == self.end:
            return str(self.start)
        return f"{self.start}~{self.end}"


@dataclass(frozen=True, slots=True)
class FixedDecimalSamples:
    """Sample clause of a rule.

    Samples illustrate which numbers select a keyword. They are metadata
    written by the rule author and play no part in select().

    Attributes:
        sample_type: INTEGER for @integer, DECIMAL for @decimal
        ranges: Sample ranges in written order, without duplicates
        bounded: False when the list ends with an ellipsis
    """

    sample_type: SampleType
    ranges: tuple[FixedDecimalRange, ...]
    bounded: bool = True

    def values(self, limit: int = MAX_ENUMERATION) -> frozenset[FixedDecimal]:
        """Expand the ranges into individual values, at most limit of them."""
        result: set[FixedDecimal] = set()
        for sample_range in self.ranges:
            for value in sample_range:
                if len(result) >= limit:
                    return frozenset(result)
                result.add(value)
        return frozenset(result)

    def __str__(self) -> str:
        items = [str(r) for r in self.ranges]
        if not self.bounded:
            items.append("…")
        return f"@{self.sample_type} {', '.join(items)}"
