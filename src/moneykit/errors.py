"""
errors.py — Error taxonomy

Every fallible operation raises one of these. Each kind also derives from the
closest built-in exception, so code that only knows about ValueError or
ZeroDivisionError keeps working.
"""

from __future__ import annotations


class MoneyError(Exception):
    """Base class for every error raised by moneykit."""


class CurrencyMismatch(MoneyError, TypeError):
    """Operands reference different currency codes."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Currency mismatch: expected {expected}, got {actual}. "
            f"Convert explicitly before combining."
        )


class DivisionByZero(MoneyError, ZeroDivisionError):
    """Divisor is zero."""


class Overflow(MoneyError, OverflowError):
    """Result exceeds the representable magnitude."""


class InvalidFormat(MoneyError, ValueError):
    """Textual input is unparsable or ambiguous."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")


class InvalidInput(MoneyError, ValueError):
    """Invalid allocation parameters (zero splits, empty or all-zero weights)."""


class InvalidRate(MoneyError, ValueError):
    """Exchange factor is not strictly positive."""


class PrecisionLoss(MoneyError, ValueError):
    """A strict narrowing conversion would discard a fractional minor unit."""


class InvalidCurrency(MoneyError, ValueError):
    """Malformed currency descriptor, or unknown currency code."""


class RateNotFound(MoneyError, LookupError):
    """No exchange rate registered for the requested currency pair."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"No exchange rate registered for {source} -> {target}")
