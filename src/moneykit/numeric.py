"""
numeric.py — Bounded decimal amounts

================================================================================
REPRESENTATION
================================================================================

An amount is a plain `decimal.Decimal`, constrained to a fixed-width shape:

    |coefficient| <= 2**96 - 1        (about 7.9e28)
    0 <= scale    <= 28

`fit()` is the single gate every result goes through. It sheds as many
fractional digits as needed in ONE half-even rounding of the exact value, and
raises Overflow only when the integer part alone no longer fits.

Arithmetic never relies on the ambient decimal context: add, subtract and
multiply run in a context wide enough to be exact, division is done on the
integer coefficients. Scales are preserved the way Decimal does it:

    add / subtract     -> max(scale_a, scale_b)     1.10 + 2 = 3.10
    multiply           -> scale_a + scale_b          1.10 * 3 = 3.30
    divide             -> exact quotient when it terminates within
                          DIVISION_PRECISION fractional digits, else rounded

Equality is by value: Decimal("1.10") == Decimal("1.1").

================================================================================
"""

from __future__ import annotations

import decimal
from decimal import Context, Decimal, InvalidOperation
from typing import Union

from .errors import DivisionByZero, InvalidFormat, InvalidInput, Overflow
from .rounding import (
    DEFAULT_MODE,
    RoundingMode,
    compose,
    decompose,
    round_amount,
    round_coefficient,
    round_quotient,
)


# ==============================================================================
# BOUNDS
# ==============================================================================

MAX_SCALE: int = 28
MAX_COEFFICIENT: int = 2 ** 96 - 1

# Fractional digits kept by divide(), fewer only when the integer part needs
# the room: 1 / 3 == 0.3333333333333333333333333333
DIVISION_PRECISION: int = MAX_SCALE

_TRAPS = [InvalidOperation, decimal.DivisionByZero, decimal.Overflow]

# Two in-bound operands never need more than ~60 digits.
_EXACT = Context(prec=120, rounding=decimal.ROUND_HALF_EVEN, traps=_TRAPS)

DecimalLike = Union[Decimal, int, str]


def as_decimal(value: DecimalLike) -> Decimal:
    """
    Convert an exact scalar to Decimal.

    float is refused: the conversion has to be explicit (Decimal(str(x))) so
    the caller decides what the float meant.
    """
    if isinstance(value, (bool, float)):
        raise TypeError(
            f"Expected Decimal, int or str, not {type(value).__name__}. "
            f"Convert floats explicitly, e.g. Decimal(str(x))."
        )

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as e:
            raise InvalidFormat(value, "not a decimal literal") from e
    else:
        raise TypeError(f"Expected Decimal, int or str, not {type(value).__name__}")

    if not result.is_finite():
        raise InvalidInput(f"Amount must be finite, got: {result}")
    return result


def fit(value: Decimal) -> Decimal:
    """
    Force a Decimal into the representable shape.

    Every candidate is rounded from the original digits, so the result is
    rounded once. When a carry pushes a candidate past MAX_COEFFICIENT the
    next one keeps a digit fewer.

    Raises:
        Overflow: if the integer part exceeds MAX_COEFFICIENT
    """
    sign, coefficient, scale = decompose(value)

    drop = max(0, scale - MAX_SCALE, len(str(coefficient)) - len(str(MAX_COEFFICIENT)))
    while drop <= scale:
        kept = round_coefficient(coefficient, drop, RoundingMode.HALF_EVEN)
        if kept <= MAX_COEFFICIENT:
            return compose(sign, kept, scale - drop)
        drop += 1

    raise Overflow(f"Amount {value} exceeds the representable magnitude")


def scale_of(value: Decimal) -> int:
    """Number of digits after the point."""
    return decompose(value)[2]


# ==============================================================================
# ARITHMETIC
# ==============================================================================

def add(a: Decimal, b: Decimal) -> Decimal:
    return fit(_EXACT.add(a, b))


def subtract(a: Decimal, b: Decimal) -> Decimal:
    return fit(_EXACT.subtract(a, b))


def multiply(a: Decimal, factor: DecimalLike) -> Decimal:
    """
    Multiply by an integer (scale unchanged) or a decimal (scales add up).
    """
    return fit(_EXACT.multiply(a, as_decimal(factor)))


def divide(a: Decimal, divisor: DecimalLike) -> Decimal:
    """
    Divide, keeping up to DIVISION_PRECISION fractional digits.

    The quotient is computed on the integer coefficients and rounded half-even
    once. A terminating quotient keeps the scale Decimal would give it
    (10.00 / 4 == 2.50); a repeating one is cut at the widest scale whose
    coefficient still fits, so every integer digit is kept.

    Raises:
        DivisionByZero: if divisor is zero
        Overflow: if the integer part of the quotient does not fit
    """
    d = as_decimal(divisor)
    if d.is_zero():
        raise DivisionByZero(f"Cannot divide {a} by zero")

    sign_a, coefficient_a, scale_a = decompose(a)
    sign_d, coefficient_d, scale_d = decompose(d)
    denominator = coefficient_d * 10 ** scale_a

    for scale in range(DIVISION_PRECISION, -1, -1):
        numerator = coefficient_a * 10 ** (scale_d + scale)
        coefficient = round_quotient(numerator, denominator, RoundingMode.HALF_EVEN)
        if coefficient <= MAX_COEFFICIENT:
            break
    else:
        raise Overflow(f"Quotient {a} / {d} exceeds the representable magnitude")

    if numerator % denominator == 0:
        ideal = max(scale_a - scale_d, 0)
        while scale > ideal and coefficient % 10 == 0:
            coefficient //= 10
            scale -= 1

    return compose(sign_a ^ sign_d, coefficient, scale)


def compare(a: Decimal, b: Decimal) -> int:
    """-1, 0 or 1."""
    return (a > b) - (a < b)


def negate(a: Decimal) -> Decimal:
    # copy_negate is exact; unary minus would round to the ambient context
    return a.copy_negate() if not a.is_zero() else a.copy_abs()


def absolute(a: Decimal) -> Decimal:
    return a.copy_abs()


def is_zero(a: Decimal) -> bool:
    return a.is_zero()


def round_to(a: Decimal, scale: int, mode: RoundingMode = DEFAULT_MODE) -> Decimal:
    return fit(round_amount(a, scale, mode))


# ==============================================================================
# MINOR UNITS
# ==============================================================================

def to_minor(a: Decimal, exponent: int, mode: RoundingMode = RoundingMode.DOWN) -> int:
    """Integer count of minor units, truncated toward zero by default."""
    sign, coefficient, _ = decompose(round_amount(a, exponent, mode))
    return -coefficient if sign else coefficient


def from_minor(units: int, exponent: int) -> Decimal:
    """Exact amount for `units` minor units at `exponent` digits."""
    if isinstance(units, bool) or not isinstance(units, int):
        raise TypeError(f"minor units must be int, not {type(units).__name__}")
    return fit(compose(1 if units < 0 else 0, abs(units), exponent))
