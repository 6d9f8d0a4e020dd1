"""
exchange.py — Exchange rates

An ExchangeRate is a directed conversion factor: USD -> EUR at 0.92 says
nothing about EUR -> USD. An Exchange stores rates by ordered (source, target)
code pair and only returns what was stored; it never inverts a rate or chains
through a third currency.

    rates = Exchange()
    rates.set_rate(ExchangeRate(iso.USD, iso.EUR, Decimal("0.92")))
    rates.convert(Money.from_major(100, iso.USD), iso.EUR)     # 92.00 EUR

Conversion is unrounded; call round() on the result for display precision.

An Exchange is plain mutable state with no locking: share it between threads
only with one writer at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterator, Optional, Tuple, Union

from . import numeric
from .currency import Currency, resolve
from .errors import CurrencyMismatch, InvalidCurrency, InvalidRate, RateNotFound
from .money import Money

logger = logging.getLogger(__name__)

CurrencyLike = Union[Currency, str]


@dataclass(frozen=True, slots=True)
class ExchangeRate:
    """
    Immutable conversion factor from `source` to `target`.

    Raises:
        InvalidRate: rate <= 0
    """
    source: Currency
    target: Currency
    rate: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", resolve(self.source))
        object.__setattr__(self, "target", resolve(self.target))
        object.__setattr__(self, "rate", numeric.fit(numeric.as_decimal(self.rate)))
        if self.rate <= 0:
            raise InvalidRate(f"Exchange rate must be positive, got {self.rate}")

    @property
    def pair(self) -> str:
        """Currency pair string like 'USD/EUR'."""
        return f"{self.source.code}/{self.target.code}"

    def convert(self, money: Money) -> Money:
        """
        money * rate, in the target currency, full precision.

        Raises:
            CurrencyMismatch: money is not in the source currency
            Overflow: result out of bounds
        """
        if not isinstance(money, Money):
            raise TypeError(f"Expected Money, got {type(money).__name__}")
        if money.currency != self.source:
            raise CurrencyMismatch(self.source.code, money.currency.code)
        return Money(numeric.multiply(money.amount, self.rate), self.target)


class Exchange:
    """Registry of ExchangeRates keyed by (source code, target code)."""

    def __init__(self) -> None:
        self._rates: Dict[Tuple[str, str], ExchangeRate] = {}

    @staticmethod
    def _key(source: CurrencyLike, target: CurrencyLike) -> Tuple[str, str]:
        return resolve(source).code, resolve(target).code

    def set_rate(self, rate: ExchangeRate) -> None:
        """Insert or overwrite the rate for its pair. The inverse is not touched."""
        if not isinstance(rate, ExchangeRate):
            raise TypeError(f"Expected ExchangeRate, got {type(rate).__name__}")
        key = (rate.source.code, rate.target.code)
        previous = self._rates.get(key)
        self._rates[key] = rate
        if previous is None:
            logger.debug(f"Registered rate {rate.pair} = {rate.rate}")
        else:
            logger.debug(f"Updated rate {rate.pair}: {previous.rate} -> {rate.rate}")

    def get_rate(self, source: CurrencyLike, target: CurrencyLike) -> Optional[ExchangeRate]:
        """Stored rate for the ordered pair, or None."""
        key = self._key(source, target)
        rate = self._rates.get(key)
        if rate is None:
            logger.debug(f"No rate for {key[0]}/{key[1]}")
        return rate

    def remove_rate(self, source: CurrencyLike, target: CurrencyLike) -> Optional[ExchangeRate]:
        """Drop the rate for the ordered pair; returns it, or None if absent."""
        rate = self._rates.pop(self._key(source, target), None)
        if rate is not None:
            logger.debug(f"Removed rate {rate.pair}")
        return rate

    def convert(self, money: Money, target: CurrencyLike) -> Money:
        """
        Convert money into `target` with the stored rate.

        Raises:
            RateNotFound: no rate for (money.currency, target)
        """
        rate = self.get_rate(money.currency, target)
        if rate is None:
            raise RateNotFound(money.currency.code, resolve(target).code)
        return rate.convert(money)

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        try:
            return self._key(*pair) in self._rates
        except InvalidCurrency:
            return False

    def __iter__(self) -> Iterator[ExchangeRate]:
        return iter(list(self._rates.values()))

    def __len__(self) -> int:
        return len(self._rates)

    def __repr__(self) -> str:
        return f"Exchange(rates={len(self)})"
