"""
fast_money.py — Integer Money

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   A signed 64-bit count of minor units (cents for USD, satoshi for BTC).
   Python ints are unbounded, so the 64-bit range is checked explicitly on
   every result: anything outside [I64_MIN, I64_MAX] raises Overflow.

2. IMMEDIATE TRUNCATION
   Every result is a whole number of minor units. Division truncates toward
   zero on the spot, so precision is lost at each step:

       FastMoney.from_major(10, "USD").div(3)          # 3.33
       FastMoney.from_major(10, "USD").div(3).mul(3)   # 9.99, not 10.00

   This is the price of integer arithmetic, not a bug. Use Money when the
   result has to be exact.

3. EXPLICIT CONVERSIONS
   to_money() is always exact. from_money() refuses to drop a fractional minor
   unit (PrecisionLoss); from_money_lossy() truncates and says so in its name.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from . import numeric
from .currency import Currency, resolve
from .errors import CurrencyMismatch, DivisionByZero, Overflow, PrecisionLoss
from .format import Params, format_money
from .money import Money
from .rounding import DEFAULT_MODE, RoundingMode

I64_MIN: int = -(2 ** 63)
I64_MAX: int = 2 ** 63 - 1

CurrencyLike = Union[Currency, str]


def _checked(value: int, operation: str) -> int:
    if not I64_MIN <= value <= I64_MAX:
        raise Overflow(f"{operation} result {value} is outside the 64-bit minor-unit range")
    return value


def _require_int(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{label} must be int, not {type(value).__name__}")
    return value


@dataclass(frozen=True, slots=True)
class FastMoney:
    """
    Amount of a currency as a 64-bit count of minor units.

    INVARIANTS:
    1. I64_MIN <= _minor_units <= I64_MAX
    2. Binary operations require the same currency code
    3. Every result is truncated to whole minor units
    """
    _minor_units: int
    _currency: Currency

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_minor(cls, amount: int, currency: CurrencyLike) -> FastMoney:
        """From minor units (cents). Exact."""
        amount = _require_int(amount, "minor units")
        return cls(_checked(amount, "from_minor"), resolve(currency))

    @classmethod
    def from_major(cls, amount: int, currency: CurrencyLike) -> FastMoney:
        """
        From whole major units: amount * 10**exponent minor units.

        Raises:
            Overflow: the minor-unit count does not fit in 64 bits
        """
        amount = _require_int(amount, "major units")
        currency = resolve(currency)
        return cls(_checked(amount * currency.multiplier, "from_major"), currency)

    @classmethod
    def zero(cls, currency: CurrencyLike) -> FastMoney:
        return cls(0, resolve(currency))

    @classmethod
    def from_money(cls, money: Money) -> FastMoney:
        """
        Strict narrowing from Money.

        Raises:
            PrecisionLoss: money has a fraction of a minor unit
            Overflow: the minor-unit count does not fit in 64 bits
        """
        units = money.to_minor_units()
        if numeric.from_minor(units, money.currency.exponent) != money.amount:
            raise PrecisionLoss(
                f"{money!r} has more than {money.currency.exponent} fractional digits; "
                f"use from_money_lossy() to truncate"
            )
        return cls(_checked(units, "from_money"), money.currency)

    @classmethod
    def from_money_lossy(cls, money: Money) -> FastMoney:
        """
        Narrowing from Money, truncating any fractional minor unit toward zero.

        Raises:
            Overflow: the minor-unit count does not fit in 64 bits
        """
        return cls(_checked(money.to_minor_units(), "from_money_lossy"), money.currency)

    def to_money(self) -> Money:
        """Exact widening to Money."""
        return Money.from_minor(self._minor_units, self._currency)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _check_same_currency(self, other: FastMoney) -> None:
        if not isinstance(other, FastMoney):
            raise TypeError(
                f"Operation not allowed: FastMoney and {type(other).__name__}. "
                f"Convert with FastMoney.from_money() first."
            )
        if self._currency != other._currency:
            raise CurrencyMismatch(self._currency.code, other._currency.code)

    def add(self, other: FastMoney) -> FastMoney:
        self._check_same_currency(other)
        return FastMoney(_checked(self._minor_units + other._minor_units, "add"), self._currency)

    def sub(self, other: FastMoney) -> FastMoney:
        self._check_same_currency(other)
        return FastMoney(_checked(self._minor_units - other._minor_units, "sub"), self._currency)

    def mul(self, factor: int) -> FastMoney:
        """
        Multiply by an integer quantity.

        Raises:
            Overflow: result outside the 64-bit range
        """
        factor = _require_int(factor, "factor")
        return FastMoney(_checked(self._minor_units * factor, "mul"), self._currency)

    def div(self, divisor: int) -> FastMoney:
        """
        Divide by an integer, truncating toward zero: -10.00 / 3 == -3.33.

        Raises:
            DivisionByZero: divisor is zero
            Overflow: I64_MIN / -1
        """
        divisor = _require_int(divisor, "divisor")
        if divisor == 0:
            raise DivisionByZero(f"Cannot divide {self!r} by zero")

        # Python's // floors; minor units must truncate toward zero
        quotient = abs(self._minor_units) // abs(divisor)
        if (self._minor_units < 0) != (divisor < 0):
            quotient = -quotient
        return FastMoney(_checked(quotient, "div"), self._currency)

    def neg(self) -> FastMoney:
        return FastMoney(_checked(-self._minor_units, "neg"), self._currency)

    def abs(self) -> FastMoney:
        return FastMoney(_checked(abs(self._minor_units), "abs"), self._currency)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: FastMoney) -> int:
        """
        -1, 0 or 1.

        Raises:
            CurrencyMismatch: different currencies
        """
        self._check_same_currency(other)
        return (self._minor_units > other._minor_units) - (self._minor_units < other._minor_units)

    def gt(self, other: FastMoney) -> bool:
        return self.compare(other) > 0

    def gte(self, other: FastMoney) -> bool:
        return self.compare(other) >= 0

    def lt(self, other: FastMoney) -> bool:
        return self.compare(other) < 0

    def lte(self, other: FastMoney) -> bool:
        return self.compare(other) <= 0

    def eq(self, other: FastMoney) -> bool:
        return self.compare(other) == 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FastMoney):
            return self._currency == other._currency and self._minor_units == other._minor_units
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._minor_units, self._currency.code))

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    @property
    def minor_units(self) -> int:
        return self._minor_units

    @property
    def currency(self) -> Currency:
        return self._currency

    def is_positive(self) -> bool:
        return self._minor_units > 0

    def is_negative(self) -> bool:
        return self._minor_units < 0

    def is_zero(self) -> bool:
        return self._minor_units == 0

    def round(self, scale: int, mode: RoundingMode = DEFAULT_MODE) -> FastMoney:
        """
        Round to fewer digits than the exponent (e.g. whole dollars with 0).

        A scale at or above the exponent changes nothing.
        """
        rounded = self.to_money().round(min(scale, self._currency.exponent), mode)
        return FastMoney(_checked(rounded.to_minor_units(), "round"), self._currency)

    def format(self, params: Optional[Params] = None) -> str:
        return format_money(self, params)

    def __str__(self) -> str:
        return format_money(self)

    def __repr__(self) -> str:
        return f"FastMoney({self._minor_units}, {self._currency.code})"
