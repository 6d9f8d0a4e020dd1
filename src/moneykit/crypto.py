"""
crypto.py — Cryptocurrencies

Same descriptor type as the ISO table, flagged is_crypto, no numeric code.
"""

from .currency import CurrencyRegistry, define_currency

BTC = define_currency("BTC", 8, "₿", name="Bitcoin", is_crypto=True)
ETH = define_currency("ETH", 18, "ETH", name="Ethereum", symbol_first=False, is_crypto=True)
DAI = define_currency("DAI", 18, "DAI", name="Dai Stablecoin", symbol_first=False, is_crypto=True)
USDC = define_currency("USDC", 6, "USDC", name="USD Coin", symbol_first=False, is_crypto=True)
USDT = define_currency("USDT", 6, "USDT", name="Tether", symbol_first=False, is_crypto=True)
UNI = define_currency("UNI", 18, "UNI", name="Uniswap", symbol_first=False, is_crypto=True)

CURRENCIES = (BTC, DAI, ETH, UNI, USDC, USDT)

REGISTRY = CurrencyRegistry(CURRENCIES)


def find(code: str):
    """Cryptocurrency for a code, or None."""
    return REGISTRY.find(code)
