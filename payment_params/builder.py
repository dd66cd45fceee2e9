"""Map card and bank account records onto payments API token parameters."""
import logging
from typing import Any, Optional

from .fingerprint import enrich
from .identity.base import DeviceIdentityProvider
from .identity.install import get_default_provider
from .models import (
    FIELD_PRODUCT_USAGE,
    TYPE_BANK_ACCOUNT,
    TYPE_CARD,
    BankAccount,
    Card,
)
from .output_sanitizer import redact_params
from .pruner import prune
from .text_utils import null_if_blank

logger = logging.getLogger(__name__)


def build_card_params(
    card: Card,
    identity_provider: Optional[DeviceIdentityProvider] = None,
) -> dict[str, Any]:
    """
    Build the token-creation parameters for a card.

    Blank text fields are left out of the ``card`` sub-map; expiration month
    and year are passed through as integers. The usage tokens are always
    sent, even when there are none. Device fingerprints are added from
    identity_provider, or from the default install provider if not given.
    """
    card_params = prune({
        "number": null_if_blank(card.number),
        "cvc": null_if_blank(card.cvc),
        "exp_month": card.exp_month,
        "exp_year": card.exp_year,
        "name": null_if_blank(card.name),
        "currency": null_if_blank(card.currency),
        "address_line1": null_if_blank(card.address_line1),
        "address_line2": null_if_blank(card.address_line2),
        "address_city": null_if_blank(card.address_city),
        "address_zip": null_if_blank(card.address_zip),
        "address_state": null_if_blank(card.address_state),
        "address_country": null_if_blank(card.address_country),
    })

    token_params = {
        FIELD_PRODUCT_USAGE: list(card.logging_tokens),
        TYPE_CARD: card_params,
    }

    if identity_provider is None:
        identity_provider = get_default_provider()
    token_params = enrich(token_params, identity_provider)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built card params: %s", redact_params(token_params))
    return token_params


def build_bank_account_params(bank_account: BankAccount) -> dict[str, Any]:
    """Build the token-creation parameters for a bank account. Not fingerprinted."""
    account_params = prune({
        "country": bank_account.country_code,
        "currency": bank_account.currency,
        "account_number": bank_account.account_number,
        "routing_number": null_if_blank(bank_account.routing_number),
        "account_holder_name": null_if_blank(bank_account.account_holder_name),
        "account_holder_type": null_if_blank(bank_account.account_holder_type),
    })

    token_params = {TYPE_BANK_ACCOUNT: account_params}

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Built bank account params: %s", redact_params(token_params))
    return token_params
