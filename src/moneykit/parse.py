"""
parse.py — Locale-aware parsing

================================================================================
SEPARATOR INFERENCE
================================================================================

The same parser reads "1,000.99" and "1.000,99" without being told the locale
in advance. The input is scanned into digit groups joined by separator
characters (at most two distinct ones), then:

1. Two distinct separators: the rightmost one is the decimal separator. It
   must occur once and be followed by 1..exponent digits (any number of digits
   when it is the currency's own decimal separator).

2. One separator, repeated: it can only be grouping.

3. One separator, once: the currency's own separators decide first
   ("1.000" is one unit for BHD, "1,000" is a thousand for USD). When the
   separator is foreign to the currency, position decides: 1..exponent
   trailing digits make it decimal, otherwise it is grouping.

Every grouping separator must sit on a grouping-size boundary of the currency
(3 for en-us, 3 then 2 for en-in). A leading sign and the currency's own
symbol or code (prefix or suffix) are accepted; anything else is an error.

================================================================================
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from . import numeric
from .currency import Currency
from .errors import InvalidFormat
from .rounding import compose, round_amount

_DIGITS = frozenset("0123456789")
_SIGNS = "+-"

# Separators recognised even when the currency uses different ones.
_COMMON_SEPARATORS = frozenset([",", ".", " ", "'", "\u00a0", "\u202f"])


def parse_amount(text: str, currency: Currency) -> Decimal:
    """
    Parse a displayed amount for `currency`.

    The result keeps every fractional digit given and has at least
    `currency.exponent` digits after the point ("2,000" -> 2000.00 for USD).

    Raises:
        InvalidFormat: unparsable or ambiguous input
        Overflow: value exceeds the representable magnitude
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    negative, body = _strip_decorations(text, currency)
    groups, separators = _tokenize(text, body, currency)

    distinct = set(separators)
    if len(distinct) > 2:
        raise InvalidFormat(text, f"more than two distinct separators: {sorted(distinct)}")

    decimal_separator = _infer_decimal_separator(text, groups, separators, currency)

    if decimal_separator is None:
        integer_groups, fraction = groups, ""
    else:
        integer_groups, fraction = groups[:-1], groups[-1]

    if integer_groups == [""] and fraction:
        integer_groups = ["0"]

    if not _grouping_ok(integer_groups, currency):
        raise InvalidFormat(text, "grouping separator not on a grouping-size boundary")

    if len(fraction) > numeric.MAX_SCALE:
        raise InvalidFormat(text, f"more than {numeric.MAX_SCALE} fractional digits")

    coefficient = int("".join(integer_groups) + fraction)
    value = compose(1 if negative else 0, coefficient, len(fraction))

    if len(fraction) < currency.exponent:
        value = round_amount(value, currency.exponent)

    return numeric.fit(value)


# ==============================================================================
# SCANNING
# ==============================================================================

def _take_sign(text: str) -> tuple[Optional[str], str]:
    if text and text[0] in _SIGNS:
        return text[0], text[1:].lstrip()
    return None, text


def _strip_decorations(text: str, currency: Currency) -> tuple[bool, str]:
    """Remove sign, symbol and code; return (negative, bare number)."""
    body = text.strip()
    if not body:
        raise InvalidFormat(text, "empty input")

    outer_sign, body = _take_sign(body)

    affixes = sorted({a for a in (currency.symbol, currency.code) if a}, key=len, reverse=True)
    for affix in affixes:
        if body.startswith(affix):
            body = body[len(affix):].strip()
            break
    for affix in affixes:
        if body.endswith(affix):
            body = body[:-len(affix)].strip()
            break

    inner_sign, body = _take_sign(body)
    if outer_sign and inner_sign:
        raise InvalidFormat(text, "more than one sign")

    if not body:
        raise InvalidFormat(text, "no digits")

    return (outer_sign or inner_sign) == "-", body


def _tokenize(text: str, body: str, currency: Currency) -> tuple[list[str], list[str]]:
    """Split into digit groups and the separators between them."""
    separator_chars = _COMMON_SEPARATORS | {currency.grouping_separator, currency.decimal_separator}

    groups: list[str] = []
    separators: list[str] = []
    current: list[str] = []

    for ch in body:
        if ch in _DIGITS:
            current.append(ch)
        elif ch in separator_chars:
            groups.append("".join(current))
            separators.append(ch)
            current = []
        else:
            raise InvalidFormat(text, f"unexpected character {ch!r}")
    groups.append("".join(current))

    if not any(groups):
        raise InvalidFormat(text, "no digits")

    return groups, separators


# ==============================================================================
# INFERENCE
# ==============================================================================

def _fraction_ok(fraction: str, separator: str, currency: Currency) -> bool:
    if not fraction:
        return False
    return separator == currency.decimal_separator or len(fraction) <= currency.exponent


def _infer_decimal_separator(
    text: str,
    groups: list[str],
    separators: list[str],
    currency: Currency,
) -> Optional[str]:
    """The decimal separator, or None when every separator is grouping."""
    if not separators:
        return None

    last = separators[-1]
    trailing = groups[-1]

    if len(set(separators)) == 2:
        if separators.count(last) > 1:
            raise InvalidFormat(text, "more than one candidate decimal separator")
        if not _fraction_ok(trailing, last, currency):
            raise InvalidFormat(
                text, f"decimal separator {last!r} must be followed by 1 to {currency.exponent} digits"
            )
        return last

    if len(separators) > 1:
        return None

    if last == currency.decimal_separator and trailing:
        return last
    if last == currency.grouping_separator and _grouping_ok(groups, currency):
        return None
    if 1 <= len(trailing) <= currency.exponent:
        return last
    return None


def _grouping_ok(groups: list[str], currency: Currency) -> bool:
    """Groups (left to right) sit on the currency's grouping boundaries."""
    if len(groups) == 1:
        return groups[0] != ""

    for index, group in enumerate(reversed(groups[1:])):
        if len(group) != currency.group_size(index):
            return False

    return 1 <= len(groups[0]) <= currency.group_size(len(groups) - 1)
