"""
rounding.py — Rounding engine

================================================================================
HOW ROUNDING WORKS HERE
================================================================================

A Decimal amount is handled as three integers:

    (sign, coefficient, scale)   with   value = (-1)**sign * coefficient / 10**scale

Rounding to a smaller scale drops the rightmost digits of the coefficient.
The dropped digits (the remainder) are compared with exactly half of one unit
at the target scale, and the strategy decides whether the kept part moves one
unit away from zero.

The rule is applied to the MAGNITUDE and the sign is put back afterwards, so
every mode is sign-symmetric:

    round(-2000.005, 2, HALF_EVEN) == -2000.00   (not -2000.01)
    round(-2000.005, 2, HALF_UP)   == -2000.01

No float is ever involved: the remainder comparison is integer arithmetic.

================================================================================
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum


class RoundingMode(Enum):
    """
    Rounding strategies.

    - HALF_EVEN: banker's rounding, ties go to the even neighbour (default)
    - HALF_UP: ties go away from zero (commercial rounding)
    - HALF_DOWN: ties go toward zero
    - DOWN: always toward zero (truncation)
    - UP: always away from zero
    """
    HALF_EVEN = "half_even"
    HALF_UP = "half_up"
    HALF_DOWN = "half_down"
    DOWN = "down"
    UP = "up"


DEFAULT_MODE = RoundingMode.HALF_EVEN


# ==============================================================================
# DECIMAL <-> INTEGER TRIPLE
# ==============================================================================

def decompose(value: Decimal) -> tuple[int, int, int]:
    """
    Split a finite Decimal into (sign, coefficient, scale).

    Positive exponents (e.g. Decimal("1E+3")) are folded into the coefficient,
    so the returned scale is never negative.
    """
    sign, digits, exponent = value.as_tuple()
    if not isinstance(exponent, int):
        raise ValueError(f"Non-finite decimal has no coefficient: {value}")

    coefficient = int("".join(map(str, digits))) if digits else 0
    if exponent > 0:
        coefficient *= 10 ** exponent
        exponent = 0

    return sign, coefficient, -exponent


def compose(sign: int, coefficient: int, scale: int) -> Decimal:
    """Build a Decimal exactly, without going through any context."""
    if coefficient == 0:
        sign = 0
    digits = tuple(int(d) for d in str(coefficient))
    return Decimal((sign, digits, -scale))


# ==============================================================================
# STRATEGIES
# ==============================================================================

def round_coefficient(coefficient: int, drop: int, mode: RoundingMode) -> int:
    """
    Drop the last `drop` digits of a non-negative coefficient.

    Returns the kept coefficient, moved one unit away from zero when the
    strategy says so.
    """
    if coefficient < 0:
        raise ValueError("round_coefficient works on magnitudes only")
    if drop <= 0:
        return coefficient
    return round_quotient(coefficient, 10 ** drop, mode)


def round_quotient(numerator: int, divisor: int, mode: RoundingMode) -> int:
    """
    numerator / divisor rounded to an integer, both non-negative.

    The exact remainder decides, so the result is rounded once however many
    digits are discarded.
    """
    if numerator < 0 or divisor <= 0:
        raise ValueError("round_quotient works on magnitudes only")

    kept, remainder = divmod(numerator, divisor)
    twice = remainder * 2

    def _half_up() -> bool:
        return twice >= divisor

    def _half_down() -> bool:
        return twice > divisor

    def _half_even() -> bool:
        if twice != divisor:
            return twice > divisor
        return kept % 2 == 1

    def _down() -> bool:
        return False

    def _up() -> bool:
        return remainder != 0

    strategies = {
        RoundingMode.HALF_UP: _half_up,
        RoundingMode.HALF_DOWN: _half_down,
        RoundingMode.HALF_EVEN: _half_even,
        RoundingMode.DOWN: _down,
        RoundingMode.UP: _up,
    }

    strategy = strategies.get(mode)
    if strategy is None:
        raise ValueError(f"Unknown rounding mode: {mode}")

    return kept + 1 if strategy() else kept


def round_amount(
    value: Decimal,
    scale: int,
    mode: RoundingMode = DEFAULT_MODE,
) -> Decimal:
    """
    Round `value` to `scale` digits after the point.

    If `scale` is not smaller than the current scale nothing is lost: the
    value is returned rescaled (trailing zeros added).
    """
    if scale < 0:
        raise ValueError(f"scale must be >= 0, got: {scale}")

    sign, coefficient, current = decompose(value)

    if scale >= current:
        return compose(sign, coefficient * 10 ** (scale - current), scale)

    return compose(sign, round_coefficient(coefficient, current - scale, mode), scale)
