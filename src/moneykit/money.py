"""
money.py — Precise Money

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   A bounded Decimal (see numeric.py) plus a reference to a shared Currency.
   Never floating point.

2. EXPLICIT, FALLIBLE ARITHMETIC
   add / sub / mul / div and the comparisons are plain methods that raise a
   specific MoneyError. There are no arithmetic operators: a currency
   mismatch is always CurrencyMismatch, never a silently mixed result.

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.

4. NO IMPLICIT ROUNDING
   Results keep full precision: 10 / 3 is 3.3333333333333333333333333333.
   Rounding happens only when asked for (round()) or for display (str()).

5. VERIFIABLE INVARIANTS
   split(n) and allocate(weights) always sum back to the original amount.

================================================================================
USAGE
================================================================================

    from moneykit import Money, iso

    price = Money.from_major(10, iso.USD)
    third = price.div(3)                  # 3.3333333333333333333333333333 USD
    third.round(2)                        # 3.33 USD
    price.split(3)                        # [3.34, 3.33, 3.33]
    Money.from_string("1.000,99", iso.EUR)

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional, Sequence, Union

from . import allocation, numeric
from .currency import Currency, resolve
from .errors import CurrencyMismatch
from .format import Params, format_money
from .parse import parse_amount
from .rounding import DEFAULT_MODE, RoundingMode

if TYPE_CHECKING:
    from .exchange import Exchange

CurrencyLike = Union[Currency, str]


@dataclass(frozen=True, slots=True)
class Money:
    """
    Amount of a given currency, with exact decimal arithmetic.

    INVARIANTS:
    1. _amount is always a finite Decimal inside the numeric bounds
    2. _currency is always a Currency
    3. Binary operations require the same currency code
    4. sum(split(n)) == self, sum(allocate(w)) == self

    Equality (==) is by value and currency: 10 USD == 10.00 USD, and
    10 USD != 10 EUR. Use eq() when a mismatch should be an error.
    """
    _amount: Decimal
    _currency: Currency

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_major(cls, amount: int, currency: CurrencyLike) -> Money:
        """From whole major units (dollars, euros). 10 -> 10 USD."""
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(
                f"from_major takes an int, not {type(amount).__name__}. "
                f"Use from_decimal() or from_string() for fractional amounts."
            )
        return cls(numeric.fit(Decimal(amount)), resolve(currency))

    @classmethod
    def from_minor(cls, amount: int, currency: CurrencyLike) -> Money:
        """From minor units (cents). 1000 -> 10.00 USD."""
        currency = resolve(currency)
        return cls(numeric.from_minor(amount, currency.exponent), currency)

    @classmethod
    def from_decimal(cls, amount: numeric.DecimalLike, currency: CurrencyLike) -> Money:
        """From a Decimal (or int / decimal literal string), kept as given."""
        return cls(numeric.fit(numeric.as_decimal(amount)), resolve(currency))

    @classmethod
    def from_string(cls, text: str, currency: CurrencyLike) -> Money:
        """
        From a displayed amount, using the currency's locale as a hint.

        Accepts "1,000.99", "1.000,99", "-$5.00", "€ 12,50", ...

        Raises:
            InvalidFormat: unparsable or ambiguous input
        """
        currency = resolve(currency)
        return cls(parse_amount(text, currency), currency)

    @classmethod
    def zero(cls, currency: CurrencyLike) -> Money:
        """Zero of a currency. Useful as the start value of a running total."""
        return cls.from_minor(0, currency)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def _check_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: Money and {type(other).__name__}. "
                f"Build a Money explicitly first."
            )
        if self._currency != other._currency:
            raise CurrencyMismatch(self._currency.code, other._currency.code)

    def add(self, other: Money) -> Money:
        """
        Raises:
            CurrencyMismatch: different currencies
            Overflow: result out of bounds
        """
        self._check_same_currency(other)
        return Money(numeric.add(self._amount, other._amount), self._currency)

    def sub(self, other: Money) -> Money:
        """
        Raises:
            CurrencyMismatch: different currencies
            Overflow: result out of bounds
        """
        self._check_same_currency(other)
        return Money(numeric.subtract(self._amount, other._amount), self._currency)

    def mul(self, factor: numeric.DecimalLike) -> Money:
        """
        Multiply by an int (quantity) or a Decimal (rate, percentage).

        Raises:
            Overflow: result out of bounds
        """
        return Money(numeric.multiply(self._amount, factor), self._currency)

    def div(self, divisor: numeric.DecimalLike) -> Money:
        """
        Divide by an int or Decimal, keeping up to DIVISION_PRECISION fractional digits.

        Raises:
            DivisionByZero: divisor is zero
            Overflow: the integer part of the quotient is out of bounds
        """
        return Money(numeric.divide(self._amount, divisor), self._currency)

    def neg(self) -> Money:
        return Money(numeric.negate(self._amount), self._currency)

    def abs(self) -> Money:
        return Money(numeric.absolute(self._amount), self._currency)

    def round(self, scale: int, mode: RoundingMode = DEFAULT_MODE) -> Money:
        """Rounded copy, same currency. Never fails."""
        return Money(numeric.round_to(self._amount, scale, mode), self._currency)

    # -------------------------------------------------------------------------
    # Distribution
    # -------------------------------------------------------------------------

    def split(self, n: int) -> list[Money]:
        """
        n shares differing by at most one minor unit, summing to self.

        Raises:
            InvalidInput: n < 1
        """
        return allocation.split(self, n)

    def allocate(self, weights: Sequence[int]) -> list[Money]:
        """
        Shares proportional to integer weights, summing to self.

        Raises:
            InvalidInput: empty, negative or all-zero weights
        """
        return allocation.allocate(self, weights)

    # -------------------------------------------------------------------------
    # Exchange
    # -------------------------------------------------------------------------

    def exchange_to(self, target: CurrencyLike, exchange: Exchange) -> Money:
        """
        Convert with the rate registered for (self.currency, target).

        Raises:
            RateNotFound: no rate for the pair
        """
        return exchange.convert(self, target)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: Money) -> int:
        """
        -1, 0 or 1.

        Raises:
            CurrencyMismatch: different currencies
        """
        self._check_same_currency(other)
        return numeric.compare(self._amount, other._amount)

    def gt(self, other: Money) -> bool:
        return self.compare(other) > 0

    def gte(self, other: Money) -> bool:
        return self.compare(other) >= 0

    def lt(self, other: Money) -> bool:
        return self.compare(other) < 0

    def lte(self, other: Money) -> bool:
        return self.compare(other) <= 0

    def eq(self, other: Money) -> bool:
        return self.compare(other) == 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return self._currency == other._currency and self._amount == other._amount
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._amount, self._currency.code))

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def scale(self) -> int:
        return numeric.scale_of(self._amount)

    def to_minor_units(self) -> int:
        """Whole minor units, extra precision truncated toward zero."""
        return numeric.to_minor(self._amount, self._currency.exponent)

    def is_positive(self) -> bool:
        return self._amount > 0

    def is_negative(self) -> bool:
        return self._amount < 0

    def is_zero(self) -> bool:
        return numeric.is_zero(self._amount)

    def format(self, params: Optional[Params] = None) -> str:
        """Display string; see format.Params for custom layouts."""
        return format_money(self, params)

    def __str__(self) -> str:
        return format_money(self)

    def __repr__(self) -> str:
        return f"Money({self._amount}, {self._currency.code})"
