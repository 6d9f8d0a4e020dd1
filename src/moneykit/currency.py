"""
currency.py — Currency descriptors and lookup

A Currency is immutable metadata: code, exponent (minor-unit digits), symbol
and the locale rules used to display and parse amounts. Descriptors are shared
by reference between every Money of that currency.

Custom currencies are built with define_currency(), which validates every
field up front. Lookup goes through a read-only CurrencyRegistry; the bundled
ISO and crypto tables live in iso.py and crypto.py.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Sequence, Union

from .errors import InvalidCurrency

logger = logging.getLogger(__name__)

# Same bound as numeric.MAX_SCALE; an exponent past it could never be represented.
MAX_EXPONENT: int = 28

_RESERVED_SEPARATORS = frozenset("0123456789+-")


# ==============================================================================
# LOCALES
# ==============================================================================

class Locale(Enum):
    """
    Regional formatting rules.

    Each member carries (tag, grouping separator, decimal separator, grouping).
    The grouping tuple is read right-to-left and its last size repeats:
    (3,) gives 1,000,000 and (3, 2) gives 1,00,00,000.
    """
    EN_US = ("en-us", ",", ".", (3,))
    EN_IN = ("en-in", ",", ".", (3, 2))
    EN_EU = ("en-eu", ".", ",", (3,))
    EN_BY = ("en-by", " ", ",", (3,))

    def __init__(self, tag: str, grouping_separator: str, decimal_separator: str, grouping: tuple):
        self._tag = tag
        self._grouping_separator = grouping_separator
        self._decimal_separator = decimal_separator
        self._grouping = grouping

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def grouping_separator(self) -> str:
        return self._grouping_separator

    @property
    def decimal_separator(self) -> str:
        return self._decimal_separator

    @property
    def grouping(self) -> tuple[int, ...]:
        return self._grouping


# ==============================================================================
# CURRENCY DESCRIPTOR
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Currency:
    """
    Immutable currency descriptor.

    Two descriptors are the same currency when their codes match; the rest is
    metadata.

    Attributes:
        code: Short identifier ("USD", "BTC").
        exponent: Minor-unit digits (2 for cents, 0 for JPY).
        symbol: Display symbol ("$", "€").
        name: Full name.
        numeric_code: ISO 4217 numeric code, empty for non-ISO currencies.
        symbol_first: Symbol is a prefix (True) or a suffix (False).
        grouping_separator: Character between digit groups.
        decimal_separator: Character before the fractional digits.
        grouping: Group sizes, right-to-left, last one repeating.
        minor_denomination: Smallest physical denomination, in minor units.
        is_crypto: True for cryptocurrencies.

    Raises:
        InvalidCurrency: if any field is malformed.
    """
    code: str
    exponent: int
    symbol: str
    name: str = ""
    numeric_code: str = ""
    symbol_first: bool = True
    grouping_separator: str = ","
    decimal_separator: str = "."
    grouping: tuple[int, ...] = (3,)
    minor_denomination: int = 1
    is_crypto: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code or not self.code.isalnum():
            raise InvalidCurrency(f"code must be a non-empty alphanumeric string, got: {self.code!r}")

        if isinstance(self.exponent, bool) or not isinstance(self.exponent, int):
            raise InvalidCurrency(f"exponent must be an int, got: {self.exponent!r}")
        if not 0 <= self.exponent <= MAX_EXPONENT:
            raise InvalidCurrency(f"exponent must be between 0 and {MAX_EXPONENT}, got: {self.exponent}")

        if not isinstance(self.symbol, str):
            raise InvalidCurrency(f"symbol must be a string, got: {self.symbol!r}")

        if self.numeric_code and not self.numeric_code.isdigit():
            raise InvalidCurrency(f"numeric_code must contain digits only, got: {self.numeric_code!r}")

        for label, sep in (
            ("grouping_separator", self.grouping_separator),
            ("decimal_separator", self.decimal_separator),
        ):
            if not isinstance(sep, str) or len(sep) != 1:
                raise InvalidCurrency(f"{label} must be a single character, got: {sep!r}")
            if sep in _RESERVED_SEPARATORS:
                raise InvalidCurrency(f"{label} cannot be a digit or a sign, got: {sep!r}")

        if self.grouping_separator == self.decimal_separator:
            raise InvalidCurrency(
                f"grouping and decimal separators must differ, both are {self.decimal_separator!r}"
            )

        if (
            not isinstance(self.grouping, tuple)
            or not self.grouping
            or any(isinstance(g, bool) or not isinstance(g, int) or g <= 0 for g in self.grouping)
        ):
            raise InvalidCurrency(f"grouping must be a non-empty tuple of positive ints, got: {self.grouping!r}")

        if not isinstance(self.minor_denomination, int) or self.minor_denomination < 1:
            raise InvalidCurrency(f"minor_denomination must be >= 1, got: {self.minor_denomination!r}")

    @property
    def multiplier(self) -> int:
        """Minor units per major unit."""
        return 10 ** self.exponent

    def group_size(self, index: int) -> int:
        """Size of the index-th digit group counted from the right."""
        return self.grouping[min(index, len(self.grouping) - 1)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"Currency({self.code!r}, exponent={self.exponent}, symbol={self.symbol!r})"


def define_currency(
    code: str,
    exponent: int,
    symbol: str,
    *,
    name: str = "",
    numeric_code: str = "",
    symbol_first: bool = True,
    locale: Locale = Locale.EN_US,
    grouping_separator: Optional[str] = None,
    decimal_separator: Optional[str] = None,
    grouping: Union[int, Sequence[int], None] = None,
    minor_denomination: int = 1,
    is_crypto: bool = False,
) -> Currency:
    """
    Build a validated Currency.

    Separators and grouping come from `locale` unless given explicitly.
    `grouping` may be a single size (3) or a right-to-left pattern ((3, 2)).

    Raises:
        InvalidCurrency: if any field is malformed.
    """
    if grouping is None:
        pattern = locale.grouping
    elif isinstance(grouping, int):
        pattern = (grouping,)
    else:
        pattern = tuple(grouping)

    return Currency(
        code=code,
        exponent=exponent,
        symbol=symbol,
        name=name,
        numeric_code=numeric_code,
        symbol_first=symbol_first,
        grouping_separator=locale.grouping_separator if grouping_separator is None else grouping_separator,
        decimal_separator=locale.decimal_separator if decimal_separator is None else decimal_separator,
        grouping=pattern,
        minor_denomination=minor_denomination,
        is_crypto=is_crypto,
    )


# ==============================================================================
# REGISTRY
# ==============================================================================

class CurrencyRegistry:
    """
    Read-only lookup from code to Currency.

    Alphabetic codes are matched case-insensitively; ISO numeric codes
    ("840") are matched too. The registry is fixed at construction: to add a
    custom currency, build a new registry from the old one plus the new entry.

        registry = CurrencyRegistry([*iso.CURRENCIES, my_points])
    """

    def __init__(self, currencies: Iterable[Currency] = ()):
        self._by_code: Dict[str, Currency] = {}
        self._by_numeric: Dict[str, Currency] = {}

        for currency in currencies:
            if not isinstance(currency, Currency):
                raise TypeError(f"Expected Currency, got {type(currency).__name__}")
            key = currency.code.upper()
            if key in self._by_code:
                raise InvalidCurrency(f"Duplicate currency code in registry: {currency.code}")
            self._by_code[key] = currency
            if currency.numeric_code:
                self._by_numeric[currency.numeric_code] = currency

    def find(self, code: str) -> Optional[Currency]:
        """Currency for an alphabetic or numeric code, or None."""
        if not isinstance(code, str):
            return None
        key = code.strip()
        if key.isdigit():
            found = self._by_numeric.get(key)
        else:
            found = self._by_code.get(key.upper())
        if found is None:
            logger.debug(f"Currency lookup miss for code '{code}'")
        return found

    def get(self, code: str) -> Currency:
        """
        Like find(), but raises on unknown codes.

        Raises:
            InvalidCurrency: if code is not registered
        """
        currency = self.find(code)
        if currency is None:
            raise InvalidCurrency(f"Unknown currency code: {code!r}")
        return currency

    def codes(self) -> list[str]:
        return sorted(c.code for c in self._by_code.values())

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.find(code) is not None

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._by_code.values())

    def __len__(self) -> int:
        return len(self._by_code)

    def __repr__(self) -> str:
        return f"CurrencyRegistry(currencies={len(self)})"


_default_registry: Optional[CurrencyRegistry] = None


def default_registry() -> CurrencyRegistry:
    """The bundled ISO and crypto currencies."""
    global _default_registry
    if _default_registry is None:
        from . import crypto, iso
        _default_registry = CurrencyRegistry([*iso.CURRENCIES, *crypto.CURRENCIES])
    return _default_registry


def find(code: str) -> Optional[Currency]:
    """Look a code up in the bundled tables."""
    return default_registry().find(code)


def resolve(currency: Union[Currency, str]) -> Currency:
    """
    Accept a Currency or a code string.

    Raises:
        InvalidCurrency: if a code string is unknown
        TypeError: for anything else
    """
    if isinstance(currency, Currency):
        return currency
    if isinstance(currency, str):
        return default_registry().get(currency)
    raise TypeError(f"Expected Currency or currency code, got {type(currency).__name__}")
