"""Output sanitization — redact card and account data from parameter maps before logging."""
import copy
import re
from typing import Any

from .models import TYPE_BANK_ACCOUNT, TYPE_CARD


def redact_card_number(number: str) -> str:
    """Mask a card number to show only last 4 digits."""
    digits = re.sub(r"\D", "", number)
    if len(digits) < 4:
        return "****"
    return f"****-****-****-{digits[-4:]}"


def redact_account_number(number: str) -> str:
    """Mask a bank account or routing number to show only last 4 characters."""
    if len(number) <= 4:
        return "****"
    return "*" * (len(number) - 4) + number[-4:]


def redact_params(params: dict[str, Any]) -> dict[str, Any]:
    """
    Deep copy of params safe for logs.

    - card.number -> last four only
    - card.cvc -> "***"
    - bank_account.account_number / routing_number -> last four only

    Fingerprint hashes and everything else pass through unchanged.
    """
    redacted = copy.deepcopy(params)

    card = redacted.get(TYPE_CARD)
    if isinstance(card, dict):
        if card.get("number"):
            card["number"] = redact_card_number(card["number"])
        if card.get("cvc"):
            card["cvc"] = "***"

    account = redacted.get(TYPE_BANK_ACCOUNT)
    if isinstance(account, dict):
        for key in ("account_number", "routing_number"):
            if account.get(key):
                account[key] = redact_account_number(account[key])

    return redacted
