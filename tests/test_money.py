"""
test_money.py — Test suite for precise Money

================================================================================
TEST STRUCTURE
================================================================================

1. UNIT TESTS
   Deterministic tests for specific cases and edge cases.

2. PROPERTY-BASED TESTS (Hypothesis)
   Properties that must hold for ANY input. Hypothesis generates many random
   cases looking for a counterexample.

3. INVARIANT TESTS
   The invariants declared in the code, checked directly.

================================================================================
"""

from decimal import Decimal

import pytest
from hypothesis import given, settings, HealthCheck
from hypothesis import strategies as st

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from moneykit import Money, RoundingMode, iso, crypto
from moneykit.errors import (
    CurrencyMismatch,
    DivisionByZero,
    InvalidCurrency,
    InvalidFormat,
    Overflow,
)
from moneykit.numeric import MAX_COEFFICIENT


# ==============================================================================
# TEST HELPERS
# ==============================================================================

@st.composite
def money_strategy(draw, currency=None, min_value=-10_000_00, max_value=10_000_00, extra_scale=0):
    """Random Money for property testing."""
    if currency is None:
        currency = draw(st.sampled_from([iso.EUR, iso.USD, iso.JPY, iso.BHD]))
    units = draw(st.integers(min_value=min_value, max_value=max_value))
    scale = currency.exponent + draw(st.integers(min_value=0, max_value=extra_scale))
    return Money.from_decimal(Decimal(units).scaleb(-scale), currency)


# ==============================================================================
# UNIT TESTS: Constructors
# ==============================================================================

class TestConstructors:
    """Constructors of Money."""

    def test_from_major(self):
        m = Money.from_major(100, iso.USD)
        assert m.amount == Decimal("100")
        assert m.currency is iso.USD

    def test_from_major_refuses_fractions(self):
        with pytest.raises(TypeError):
            Money.from_major(1.5, iso.USD)

    def test_from_minor(self):
        m = Money.from_minor(12345, iso.USD)
        assert m.amount == Decimal("123.45")
        assert m.scale == 2

    def test_from_minor_jpy(self):
        assert Money.from_minor(1000, iso.JPY).amount == Decimal("1000")

    def test_from_decimal_keeps_scale(self):
        m = Money.from_decimal(Decimal("1.2345"), iso.USD)
        assert m.scale == 4

    def test_from_decimal_string_literal(self):
        assert Money.from_decimal("19.99", iso.USD) == Money.from_minor(1999, iso.USD)

    def test_from_decimal_refuses_float(self):
        with pytest.raises(TypeError):
            Money.from_decimal(0.1, iso.USD)

    def test_from_string(self):
        assert Money.from_string("2,000.00", iso.USD) == Money.from_major(2000, iso.USD)

    def test_from_string_invalid(self):
        with pytest.raises(InvalidFormat):
            Money.from_string("12abc", iso.USD)

    def test_currency_code_string(self):
        assert Money.from_major(1, "EUR").currency is iso.EUR

    def test_unknown_currency_code(self):
        with pytest.raises(InvalidCurrency):
            Money.from_major(1, "NOPE")

    def test_zero(self):
        m = Money.zero(iso.EUR)
        assert m.is_zero()
        assert m.scale == 2

    def test_overflow_on_construction(self):
        with pytest.raises(Overflow):
            Money.from_major(MAX_COEFFICIENT + 1, iso.JPY)


# ==============================================================================
# UNIT TESTS: Arithmetic
# ==============================================================================

class TestArithmetic:
    """add / sub / mul / div."""

    def test_add_same_currency(self):
        a = Money.from_minor(1050, iso.USD)
        b = Money.from_minor(250, iso.USD)
        assert a.add(b) == Money.from_minor(1300, iso.USD)

    def test_add_different_currency_raises(self):
        with pytest.raises(CurrencyMismatch) as exc:
            Money.from_major(100, iso.USD).add(Money.from_major(100, iso.EUR))
        assert exc.value.expected == "USD"
        assert exc.value.actual == "EUR"

    def test_currency_mismatch_is_type_error(self):
        with pytest.raises(TypeError):
            Money.from_major(1, iso.USD).sub(Money.from_major(1, iso.GBP))

    def test_add_non_money_raises(self):
        with pytest.raises(TypeError):
            Money.from_major(1, iso.USD).add(1)

    def test_sub(self):
        a = Money.from_minor(1000, iso.EUR)
        assert a.sub(Money.from_minor(1500, iso.EUR)) == Money.from_minor(-500, iso.EUR)

    def test_add_keeps_larger_scale(self):
        a = Money.from_decimal("1.005", iso.USD)
        b = Money.from_minor(100, iso.USD)
        assert a.add(b).scale == 3

    def test_mul_by_int(self):
        assert Money.from_minor(333, iso.USD).mul(3) == Money.from_minor(999, iso.USD)

    def test_mul_by_decimal(self):
        m = Money.from_major(100, iso.USD).mul(Decimal("0.075"))
        assert m.amount == Decimal("7.5")

    def test_mul_by_float_raises(self):
        with pytest.raises(TypeError):
            Money.from_major(1, iso.USD).mul(1.1)

    def test_div_keeps_full_precision(self):
        m = Money.from_major(10, iso.USD).div(3)
        assert m.amount == Decimal("3.3333333333333333333333333333")
        assert m.scale == 28

    def test_div_by_one_keeps_every_digit(self):
        wide = Money.from_decimal(Decimal("12345678901234567890123456789"), iso.USD)
        assert wide.div(1).amount == Decimal("12345678901234567890123456789")
        assert wide.div(-1).amount == Decimal("-12345678901234567890123456789")

    def test_div_max_amount_by_one(self):
        top = Money.from_decimal(Decimal(MAX_COEFFICIENT), iso.USD)
        assert top.div(1) == top

    def test_div_wide_integer_part_sheds_fraction(self):
        m = Money.from_decimal(Decimal("22222222222222222222222222222"), iso.USD).div(3)
        assert m.amount == Decimal("7407407407407407407407407407.3")
        assert m.scale == 1

    def test_div_by_zero(self):
        with pytest.raises(DivisionByZero):
            Money.from_major(10, iso.USD).div(0)

    def test_div_overflow(self):
        top = Money.from_decimal(Decimal(MAX_COEFFICIENT), iso.USD)
        with pytest.raises(Overflow):
            top.div(Decimal("0.5"))

    def test_div_then_mul_rounds_back_exactly(self):
        m = Money.from_major(10, iso.USD).div(3).mul(3)
        assert m == Money.from_major(10, iso.USD)
        assert m.round(2) == Money.from_decimal("10.00", iso.USD)
        assert str(m) == "$10.00"

    def test_twenty_divided_by_three(self):
        assert str(Money.from_decimal("20.00", iso.USD).div(3)) == "$6.67"
        assert str(Money.from_decimal("20.000", iso.BHD).div(3)) == "ب.د6.667"

    def test_neg_and_abs(self):
        m = Money.from_minor(-500, iso.USD)
        assert m.neg() == Money.from_minor(500, iso.USD)
        assert m.abs() == Money.from_minor(500, iso.USD)

    def test_neg_zero_is_zero(self):
        assert Money.zero(iso.USD).neg().is_zero()

    def test_overflow(self):
        big = Money.from_major(MAX_COEFFICIENT, iso.JPY)
        with pytest.raises(Overflow):
            big.add(Money.from_major(1, iso.JPY))

    def test_immutability(self):
        m = Money.from_major(1, iso.USD)
        m.add(Money.from_major(1, iso.USD))
        assert m == Money.from_major(1, iso.USD)
        with pytest.raises(AttributeError):
            m._amount = Decimal(5)


# ==============================================================================
# UNIT TESTS: Rounding
# ==============================================================================

class TestRound:

    def test_round_half_even_default(self):
        m = Money.from_decimal("-2000.005", iso.USD)
        assert m.round(2).amount == Decimal("-2000.00")

    def test_round_half_up(self):
        m = Money.from_decimal("-2000.005", iso.USD)
        assert m.round(2, RoundingMode.HALF_UP).amount == Decimal("-2000.01")

    def test_round_keeps_currency(self):
        assert Money.from_decimal("1.999", iso.BHD).round(1).currency is iso.BHD

    def test_round_to_larger_scale(self):
        assert Money.from_major(5, iso.USD).round(4).scale == 4


# ==============================================================================
# UNIT TESTS: Comparison
# ==============================================================================

class TestComparison:

    def test_equal_across_scales(self):
        assert Money.from_decimal("10", iso.USD) == Money.from_decimal("10.00", iso.USD)
        assert hash(Money.from_decimal("10", iso.USD)) == hash(Money.from_decimal("10.00", iso.USD))

    def test_equal_different_currency(self):
        assert Money.from_major(10, iso.USD) != Money.from_major(10, iso.EUR)

    def test_not_equal_to_number(self):
        assert Money.from_major(10, iso.USD) != 10

    def test_ordering_methods(self):
        a = Money.from_major(1, iso.USD)
        b = Money.from_major(2, iso.USD)
        assert a.lt(b) and a.lte(b) and b.gt(a) and b.gte(a)
        assert a.lte(a) and a.gte(a) and a.eq(a)
        assert a.compare(b) == -1
        assert b.compare(a) == 1

    def test_compare_different_currency_raises(self):
        with pytest.raises(CurrencyMismatch):
            Money.from_major(1, iso.USD).gt(Money.from_major(1, iso.EUR))

    def test_eq_method_raises_on_mismatch(self):
        with pytest.raises(CurrencyMismatch):
            Money.from_major(1, iso.USD).eq(Money.from_major(1, iso.EUR))

    def test_no_ordering_operators(self):
        with pytest.raises(TypeError):
            Money.from_major(1, iso.USD) < Money.from_major(2, iso.USD)

    def test_predicates(self):
        assert Money.from_minor(1, iso.USD).is_positive()
        assert Money.from_minor(-1, iso.USD).is_negative()
        assert Money.zero(iso.USD).is_zero()
        assert not Money.zero(iso.USD).is_positive()
        assert not Money.zero(iso.USD).is_negative()


# ==============================================================================
# UNIT TESTS: Output
# ==============================================================================

class TestOutput:

    def test_str_usd(self):
        assert str(Money.from_major(100000, iso.USD)) == "$100,000.00"

    def test_str_negative(self):
        assert str(Money.from_major(-100000, iso.USD)) == "-$100,000.00"

    def test_str_inr(self):
        assert str(Money.from_major(100000, iso.INR)) == "₹1,00,000.00"
        assert str(Money.from_major(-10000000, iso.INR)) == "-₹1,00,00,000.00"

    def test_str_suffix_symbol(self):
        assert str(Money.zero(iso.AED)) == "0.00د.إ"

    def test_str_eur(self):
        assert str(Money.from_major(1000, iso.EUR)) == "€1.000,00"

    def test_str_rounds_for_display(self):
        assert str(Money.from_decimal("19.9999", iso.USD)) == "$20.00"
        assert str(Money.from_decimal("39.1155", iso.BHD)) == "ب.د39.116"

    def test_str_btc(self):
        assert str(Money.from_minor(1, crypto.BTC)) == "₿0.00000001"

    def test_repr(self):
        assert repr(Money.from_minor(1050, iso.USD)) == "Money(10.50, USD)"

    def test_to_minor_units_truncates(self):
        assert Money.from_decimal("1.239", iso.USD).to_minor_units() == 123
        assert Money.from_decimal("-1.239", iso.USD).to_minor_units() == -123


# ==============================================================================
# PROPERTY-BASED TESTS (Hypothesis)
# ==============================================================================

class TestArithmeticProperties:
    """Algebraic properties of exact arithmetic."""

    @given(
        a=money_strategy(currency=iso.USD, extra_scale=4),
        b=money_strategy(currency=iso.USD, extra_scale=4),
    )
    @settings(max_examples=500)
    def test_add_sub_round_trip(self, a: Money, b: Money):
        """
        PROPERTY: a.add(b).sub(b) == a, with no rounding
        """
        assert a.add(b).sub(b) == a

    @given(a=money_strategy(currency=iso.EUR), b=money_strategy(currency=iso.EUR))
    @settings(max_examples=500)
    def test_addition_commutative(self, a: Money, b: Money):
        assert a.add(b) == b.add(a)

    @given(
        a=money_strategy(currency=iso.EUR),
        b=money_strategy(currency=iso.EUR),
        c=money_strategy(currency=iso.EUR),
    )
    @settings(max_examples=500)
    def test_addition_associative(self, a: Money, b: Money, c: Money):
        assert a.add(b).add(c) == a.add(b.add(c))

    @given(a=money_strategy())
    @settings(max_examples=200)
    def test_add_negative_equals_zero(self, a: Money):
        assert a.add(a.neg()).is_zero()

    @given(a=money_strategy(extra_scale=6), scale=st.integers(min_value=0, max_value=6))
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_round_idempotent(self, a: Money, scale: int):
        once = a.round(scale)
        assert once.round(scale) == once

    @given(a=money_strategy(), n=st.integers(min_value=1, max_value=1000))
    @settings(max_examples=300)
    def test_mul_then_div_is_exact(self, a: Money, n: int):
        assert a.mul(n).div(n) == a

    @given(a=money_strategy(), b=money_strategy())
    @settings(max_examples=300)
    def test_compare_antisymmetric(self, a: Money, b: Money):
        if a.currency == b.currency:
            assert a.compare(b) == -b.compare(a)
        else:
            with pytest.raises(CurrencyMismatch):
                a.compare(b)
