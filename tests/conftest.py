"""Shared test fixtures."""
import pytest

from payment_params.identity import StaticIdentityProvider
from payment_params.models import HOLDER_TYPE_INDIVIDUAL, BankAccount, Card


@pytest.fixture
def sample_card():
    return Card(
        number="4242424242424242",
        cvc="123",
        exp_month=12,
        exp_year=2024,
        name="Jane Doe",
        currency="usd",
        address_line1="123 Main Street",
        address_line2="Apt 4B",
        address_city="San Francisco",
        address_state="CA",
        address_zip="94102",
        address_country="US",
    )


@pytest.fixture
def sample_bank_account():
    return BankAccount(
        country_code="US",
        currency="usd",
        account_number="000123456789",
        routing_number="110000000",
        account_holder_name="Jane Doe",
        account_holder_type=HOLDER_TYPE_INDIVIDUAL,
    )


@pytest.fixture
def identity():
    return StaticIdentityProvider("abc123", "com.example.app")


@pytest.fixture
def no_identity():
    return StaticIdentityProvider(None, "com.example.app")
