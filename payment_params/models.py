"""Pydantic models for payment instruments sent to the payments API."""
from typing import Optional

from pydantic import BaseModel, Field

# Top-level keys the API expects for each token type
TYPE_CARD = "card"
TYPE_BANK_ACCOUNT = "bank_account"

# Usage-tracking tokens travel under this key; the server strips it before validation
FIELD_PRODUCT_USAGE = "product_usage"

HOLDER_TYPE_INDIVIDUAL = "individual"
HOLDER_TYPE_COMPANY = "company"


class Card(BaseModel):
    """Card details as entered by the user. Values are not validated here."""
    number: Optional[str] = None
    cvc: Optional[str] = None
    exp_month: Optional[int] = None
    exp_year: Optional[int] = None
    name: Optional[str] = None
    currency: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    address_city: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    address_country: Optional[str] = None
    logging_tokens: list[str] = Field(default_factory=list)

    def add_logging_token(self, token: str) -> "Card":
        """Record a usage token (e.g. the widget that collected the card)."""
        self.logging_tokens.append(token)
        return self


class BankAccount(BaseModel):
    """Bank account details for creating a bank account token."""
    country_code: str
    currency: str
    account_number: str
    routing_number: Optional[str] = None
    account_holder_name: Optional[str] = None
    account_holder_type: Optional[str] = None  # individual, company
