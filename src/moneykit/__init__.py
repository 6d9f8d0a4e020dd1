"""
moneykit — Currency-aware money values

Exact decimal money, an integer fast path, fair allocation, locale-aware
formatting and parsing, and directed exchange rates.

================================================================================
QUICK START
================================================================================

Basic usage:

    from moneykit import Money, iso

    # Exact arithmetic, explicit rounding
    price = Money.from_string("1,000.99", iso.USD)
    third = price.div(3).round(2)          # $333.66

    # Split fairly (sum ALWAYS equals original)
    shares = Money.from_major(100, iso.USD).split(3)
    # [$33.34, $33.33, $33.33]

    # Mixed currencies are an error, never a result
    Money.from_major(1, iso.USD).add(Money.from_major(1, iso.EUR))
    # CurrencyMismatch

Integer fast path:

    from moneykit import FastMoney

    cents = FastMoney.from_major(10, "USD").div(3).mul(3)   # $9.99, truncated

Exchange:

    from decimal import Decimal
    from moneykit import Exchange, ExchangeRate

    rates = Exchange()
    rates.set_rate(ExchangeRate(iso.USD, iso.EUR, Decimal("0.92")))
    Money.from_major(100, iso.USD).exchange_to(iso.EUR, rates)   # €92,00

================================================================================
"""

from . import crypto, iso

# Currency metadata
from .currency import (
    Currency,
    CurrencyRegistry,
    Locale,
    default_registry,
    define_currency,
    find,
)

# Errors
from .errors import (
    CurrencyMismatch,
    DivisionByZero,
    InvalidCurrency,
    InvalidFormat,
    InvalidInput,
    InvalidRate,
    MoneyError,
    Overflow,
    PrecisionLoss,
    RateNotFound,
)

# Money types
from .rounding import RoundingMode
from .money import Money
from .fast_money import FastMoney
from .allocation import Allocation, allocate, split

# Display and conversion
from .format import Params, Position, format_money
from .parse import parse_amount
from .exchange import Exchange, ExchangeRate

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Currencies
    "Currency",
    "CurrencyRegistry",
    "Locale",
    "crypto",
    "default_registry",
    "define_currency",
    "find",
    "iso",
    # Errors
    "CurrencyMismatch",
    "DivisionByZero",
    "InvalidCurrency",
    "InvalidFormat",
    "InvalidInput",
    "InvalidRate",
    "MoneyError",
    "Overflow",
    "PrecisionLoss",
    "RateNotFound",
    # Money
    "RoundingMode",
    "Money",
    "FastMoney",
    "Allocation",
    "allocate",
    "split",
    # Display and conversion
    "Params",
    "Position",
    "format_money",
    "parse_amount",
    "Exchange",
    "ExchangeRate",
]
