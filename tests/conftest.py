"""Shared fixtures for the crm-sales test suite."""

from decimal import Decimal

import pytest

from crm_sales.domain import Address, Customer, Money, ProductId


@pytest.fixture
def address() -> Address:
    return Address("Street", "123", "City", "12345", "USA")


@pytest.fixture
def another_address() -> Address:
    return Address("Street", "456", "Anytown", "12345", "USA")


@pytest.fixture
def customer(address) -> Customer:
    return Customer("John Doe", "john.doe@gmail.com", address)


@pytest.fixture
def usd_price() -> Money:
    return Money(Decimal("29.99"), "USD")


@pytest.fixture
def product_id() -> ProductId:
    return ProductId.generate()
