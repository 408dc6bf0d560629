"""Property test: Money arithmetic invariants.

Amounts are generated as whole cents so every value has a scale the
currency accepts.
"""

from decimal import Decimal

import pytest
from hypothesis import given, settings, strategies as st

from crm_sales.domain import Currency, InvalidArgumentError, Money, ProductId, SalesOrderItem


def _cents(max_cents: int = 10**9, min_cents: int = 0):
    return st.integers(min_value=min_cents, max_value=max_cents).map(
        lambda c: Decimal(c).scaleb(-2)
    )


currency_codes = st.sampled_from(["USD", "EUR", "GBP", "PEN", "CAD"])


@given(a=_cents(), b=_cents(), code=currency_codes)
@settings(max_examples=200)
def test_add_sums_amounts_and_keeps_currency(a, b, code):
    total = Money(a, code).add(Money(b, code))

    assert total.amount == a + b
    assert total.currency == Currency.of(code)


@given(a=_cents(), b=_cents())
def test_add_is_commutative(a, b):
    assert Money(a, "USD").add(Money(b, "USD")) == Money(b, "USD").add(Money(a, "USD"))


@given(a=_cents(), b=_cents(), codes=st.lists(currency_codes, min_size=2, max_size=2, unique=True))
def test_add_rejects_mixed_currencies(a, b, codes):
    first, second = codes
    with pytest.raises(InvalidArgumentError, match="different currency"):
        Money(a, first).add(Money(b, second))


@given(amount=_cents(), n=st.integers(min_value=0, max_value=10_000))
def test_multiply_matches_repeated_scaling(amount, n):
    assert Money(amount, "USD").multiply(n).amount == amount * n


@given(
    quantity=st.integers(min_value=1, max_value=10_000),
    price=_cents(min_cents=1),
)
@settings(max_examples=200)
def test_item_amount_is_price_times_quantity(quantity, price):
    unit_price = Money(price, "USD")
    item = SalesOrderItem(ProductId.generate(), quantity, unit_price)

    assert item.calculate_item_amount() == unit_price.multiply(quantity)


@given(cents=st.integers(min_value=0, max_value=10**6), extra_digits=st.integers(1, 4))
def test_scale_beyond_fraction_digits_rejected(cents, extra_digits):
    # Append non-zero digits past the second decimal place
    amount = Decimal(cents).scaleb(-2) + Decimal(1).scaleb(-(2 + extra_digits))
    with pytest.raises(InvalidArgumentError, match="scale"):
        Money(amount, "USD")
