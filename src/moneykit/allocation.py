"""
allocation.py — Fair distribution

================================================================================
ALGORITHM
================================================================================

Work in integer UNITS of the smallest digit in play: 10**-exponent for the
currency, or finer when the amount itself carries more digits (split(1.005
USD, 2) works on tenths of a cent). The total T is then an integer.

split(n):
    base = floor(T / n), remainder = T - base * n   (0 <= remainder < n)
    the first `remainder` shares get base + 1, the rest get base.

allocate(weights):
    share_i = floor(T * w_i / W) with fractional remainder r_i
    the leftover (T - sum(share_i), always < len(weights)) is handed out one
    unit at a time by descending r_i, ties to the earlier weight
    (largest remainder method, Hare-Niemeyer).

Flooring rather than truncating keeps every remainder non-negative, so
negative totals go through the same code: split(-100.00, 3) gives
[-33.33, -33.33, -33.34].

INVARIANT: sum(parts) == total, exactly, for every valid input.

================================================================================
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from . import numeric
from .errors import CurrencyMismatch, InvalidInput
from .rounding import decompose, round_amount

if TYPE_CHECKING:
    from .money import Money


def _to_units(money: Money) -> tuple[int, int]:
    """(total in units, unit scale)."""
    scale = max(money.currency.exponent, money.scale)
    sign, coefficient, _ = decompose(round_amount(money.amount, scale))
    return (-coefficient if sign else coefficient), scale


def _from_units(money: Money, units: list[int], scale: int) -> list[Money]:
    return [type(money)(numeric.from_minor(u, scale), money.currency) for u in units]


def split(money: Money, n: int) -> list[Money]:
    """
    Split into n shares differing by at most one unit, summing to money.

    Raises:
        InvalidInput: n is not an int or n < 1
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidInput(f"number of shares must be an int, got: {n!r}")
    if n < 1:
        raise InvalidInput(f"number of shares must be >= 1, got: {n}")

    total, scale = _to_units(money)
    base, remainder = divmod(total, n)

    return _from_units(money, [base + (1 if i < remainder else 0) for i in range(n)], scale)


def allocate(money: Money, weights: Sequence[int]) -> list[Money]:
    """
    Allocate proportionally to non-negative integer weights.

        allocate(100.00 USD, [70, 20, 10])  ->  [70.00, 20.00, 10.00]
        allocate(100.00 USD, [1, 1, 1])     ->  [33.34, 33.33, 33.33]

    Raises:
        InvalidInput: empty, non-integer, negative or all-zero weights
    """
    weights = list(weights)
    if not weights:
        raise InvalidInput("weights cannot be empty")
    if any(isinstance(w, bool) or not isinstance(w, int) for w in weights):
        raise InvalidInput(f"weights must be ints, got: {weights}")
    if any(w < 0 for w in weights):
        raise InvalidInput("weights cannot be negative")

    weight_sum = sum(weights)
    if weight_sum == 0:
        raise InvalidInput("weights cannot all be zero")

    total, scale = _to_units(money)

    shares = []
    remainders = []
    for w in weights:
        share, rest = divmod(total * w, weight_sum)
        shares.append(share)
        remainders.append(rest)

    leftover = total - sum(shares)
    by_remainder = sorted(range(len(weights)), key=lambda i: (-remainders[i], i))
    for i in by_remainder[:leftover]:
        shares[i] += 1

    return _from_units(money, shares, scale)


# ==============================================================================
# ALLOCATION BUILDER
# ==============================================================================

class Allocation:
    """
    Fixed parts first, whatever is left goes to the last part.

        parts = (
            Allocation(Money.from_major(100, iso.USD))
            .fixed(Money.from_major(30, iso.USD))
            .fixed(Money.from_major(50, iso.USD))
            .finalize()
        )
        # [30, 70]

    INVARIANT: sum(finalize()) == total (always)
    """

    def __init__(self, total: Money):
        self._total = total
        self._allocated = type(total).zero(total.currency)
        self._parts: list[Money] = []

    def fixed(self, amount: Money) -> Allocation:
        """Reserve a fixed part."""
        if amount.currency != self._total.currency:
            raise CurrencyMismatch(self._total.currency.code, amount.currency.code)
        self._parts.append(amount)
        self._allocated = self._allocated.add(amount)
        return self

    def remainder(self) -> Money:
        """Amount not yet allocated (negative when over-allocated)."""
        return self._total.sub(self._allocated)

    def finalize(self) -> list[Money]:
        """Parts summing to the total; the remainder is folded into the last one."""
        remainder = self.remainder()
        parts = list(self._parts)
        if not remainder.is_zero():
            if parts:
                parts[-1] = parts[-1].add(remainder)
            else:
                parts.append(remainder)
        return parts
