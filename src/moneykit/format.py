"""
format.py — Locale-aware display

Formatting never fails: the amount is rounded to the display scale (half-even
by default), split into integer and fractional digits, the integer digits are
grouped right-to-left, and the pieces are laid out in the order given by
Params.positions.

    $1,000.00      USD  (prefix symbol, en-us)
    €1.000,00      EUR  (en-eu)
    ₹1,00,000.00   INR  (3, 2 grouping)
    -$100.00       the sign is always outermost by default
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from .currency import Currency
from .errors import InvalidInput
from .rounding import DEFAULT_MODE, RoundingMode, decompose, round_amount


class Position(Enum):
    """Pieces a formatted amount is assembled from."""
    SIGN = "sign"
    SYMBOL = "symbol"
    CODE = "code"
    AMOUNT = "amount"
    SPACE = "space"


@dataclass(frozen=True)
class Params:
    """
    Formatting parameters.

    rounding=None renders the amount at its own scale; SYMBOL and CODE render
    nothing when symbol/code are None.
    """
    grouping_separator: str = ","
    decimal_separator: str = "."
    grouping: tuple[int, ...] = (3,)
    positions: tuple[Position, ...] = (Position.SIGN, Position.SYMBOL, Position.AMOUNT)
    rounding: Optional[int] = None
    rounding_mode: RoundingMode = DEFAULT_MODE
    symbol: Optional[str] = None
    code: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "grouping", tuple(self.grouping))
        object.__setattr__(self, "positions", tuple(self.positions))
        if not self.grouping or any(g <= 0 for g in self.grouping):
            raise InvalidInput(f"grouping sizes must be positive, got: {self.grouping}")
        if self.rounding is not None and self.rounding < 0:
            raise InvalidInput(f"rounding scale must be >= 0, got: {self.rounding}")

    @classmethod
    def for_currency(cls, currency: Currency, **overrides: Any) -> Params:
        """Defaults derived from a currency descriptor."""
        if currency.symbol_first:
            positions = (Position.SIGN, Position.SYMBOL, Position.AMOUNT)
        else:
            positions = (Position.SIGN, Position.AMOUNT, Position.SYMBOL)

        values = dict(
            grouping_separator=currency.grouping_separator,
            decimal_separator=currency.decimal_separator,
            grouping=currency.grouping,
            positions=positions,
            rounding=currency.exponent,
            symbol=currency.symbol,
            code=currency.code,
        )
        values.update(overrides)
        return cls(**values)


def group_digits(digits: str, separator: str, grouping: tuple[int, ...]) -> str:
    """Insert `separator` between digit groups, sizes read right-to-left."""
    groups = []
    end = len(digits)
    index = 0
    while end > 0:
        size = grouping[min(index, len(grouping) - 1)]
        start = max(0, end - size)
        groups.append(digits[start:end])
        end = start
        index += 1
    return separator.join(reversed(groups)) if groups else "0"


def _render_magnitude(value: Decimal, params: Params) -> tuple[bool, str]:
    """(is_negative, grouped magnitude string)."""
    if params.rounding is not None:
        value = round_amount(value, params.rounding, params.rounding_mode)

    sign, coefficient, scale = decompose(value)
    digits = str(coefficient).rjust(scale + 1, "0")

    if scale:
        integer, fraction = digits[:-scale], digits[-scale:]
    else:
        integer, fraction = digits, ""

    rendered = group_digits(integer, params.grouping_separator, params.grouping)
    if fraction:
        rendered += params.decimal_separator + fraction

    return sign == 1 and coefficient != 0, rendered


def format_amount(value: Decimal, currency: Currency) -> str:
    """Display string for a bare amount in `currency`."""
    return _assemble(value, Params.for_currency(currency))


def format_money(money: Any, params: Optional[Params] = None) -> str:
    """
    Display string for a Money (or FastMoney, via to_money()).

    Without params, the currency's own separators, grouping, exponent and
    symbol placement are used.
    """
    if hasattr(money, "to_money"):
        money = money.to_money()
    if params is None:
        return format_amount(money.amount, money.currency)
    return _assemble(money.amount, params)


def _assemble(value: Decimal, params: Params) -> str:
    negative, amount = _render_magnitude(value, params)

    pieces = {
        Position.SIGN: "-" if negative else "",
        Position.SYMBOL: params.symbol or "",
        Position.CODE: params.code or "",
        Position.AMOUNT: amount,
        Position.SPACE: " ",
    }
    return "".join(pieces[p] for p in params.positions)
