"""
iso.py — ISO 4217 currencies

A representative subset of the ISO table. Each constant is a shared,
immutable descriptor; REGISTRY looks them up by alphabetic or numeric code.
"""

from .currency import CurrencyRegistry, Locale, define_currency

AED = define_currency("AED", 2, "د.إ", name="United Arab Emirates Dirham", numeric_code="784",
                      symbol_first=False, minor_denomination=25)
AUD = define_currency("AUD", 2, "$", name="Australian Dollar", numeric_code="036", minor_denomination=5)
BHD = define_currency("BHD", 3, "ب.د", name="Bahraini Dinar", numeric_code="048", minor_denomination=5)
BRL = define_currency("BRL", 2, "R$", name="Brazilian Real", numeric_code="986", locale=Locale.EN_EU,
                      minor_denomination=5)
BYN = define_currency("BYN", 2, "Br", name="Belarusian Ruble", numeric_code="933", locale=Locale.EN_BY,
                      symbol_first=False)
CAD = define_currency("CAD", 2, "$", name="Canadian Dollar", numeric_code="124", minor_denomination=5)
CHF = define_currency("CHF", 2, "Fr", name="Swiss Franc", numeric_code="756", grouping_separator="'",
                      minor_denomination=5)
CNY = define_currency("CNY", 2, "¥", name="Chinese Renminbi Yuan", numeric_code="156")
CZK = define_currency("CZK", 2, "Kč", name="Czech Koruna", numeric_code="203", locale=Locale.EN_BY,
                      symbol_first=False, minor_denomination=100)
DKK = define_currency("DKK", 2, "kr.", name="Danish Krone", numeric_code="208", locale=Locale.EN_EU,
                      symbol_first=False, minor_denomination=50)
EUR = define_currency("EUR", 2, "€", name="Euro", numeric_code="978", locale=Locale.EN_EU)
GBP = define_currency("GBP", 2, "£", name="British Pound", numeric_code="826")
HKD = define_currency("HKD", 2, "$", name="Hong Kong Dollar", numeric_code="344", minor_denomination=10)
INR = define_currency("INR", 2, "₹", name="Indian Rupee", numeric_code="356", locale=Locale.EN_IN,
                      minor_denomination=50)
JPY = define_currency("JPY", 0, "¥", name="Japanese Yen", numeric_code="392")
KRW = define_currency("KRW", 0, "₩", name="South Korean Won", numeric_code="410")
KWD = define_currency("KWD", 3, "د.ك", name="Kuwaiti Dinar", numeric_code="414", symbol_first=False,
                      minor_denomination=5)
MXN = define_currency("MXN", 2, "$", name="Mexican Peso", numeric_code="484", minor_denomination=5)
NOK = define_currency("NOK", 2, "kr", name="Norwegian Krone", numeric_code="578", locale=Locale.EN_BY,
                      symbol_first=False, minor_denomination=100)
NZD = define_currency("NZD", 2, "$", name="New Zealand Dollar", numeric_code="554", minor_denomination=10)
PLN = define_currency("PLN", 2, "zł", name="Polish Złoty", numeric_code="985", locale=Locale.EN_BY,
                      symbol_first=False)
SEK = define_currency("SEK", 2, "kr", name="Swedish Krona", numeric_code="752", locale=Locale.EN_BY,
                      symbol_first=False, minor_denomination=100)
SGD = define_currency("SGD", 2, "$", name="Singapore Dollar", numeric_code="702")
TRY = define_currency("TRY", 2, "₺", name="Turkish Lira", numeric_code="949", locale=Locale.EN_EU)
USD = define_currency("USD", 2, "$", name="United States Dollar", numeric_code="840")
ZAR = define_currency("ZAR", 2, "R", name="South African Rand", numeric_code="710", locale=Locale.EN_BY,
                      minor_denomination=10)

CURRENCIES = (
    AED, AUD, BHD, BRL, BYN, CAD, CHF, CNY, CZK, DKK, EUR, GBP, HKD, INR,
    JPY, KRW, KWD, MXN, NOK, NZD, PLN, SEK, SGD, TRY, USD, ZAR,
)

REGISTRY = CurrencyRegistry(CURRENCIES)


def find(code: str):
    """ISO currency for an alphabetic or numeric code, or None."""
    return REGISTRY.find(code)
