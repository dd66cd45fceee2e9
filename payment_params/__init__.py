"""Build payment-API request parameters from card and bank account records."""
from .builder import build_card_params, build_bank_account_params
from .fingerprint import enrich
from .identity import DeviceIdentityProvider, StaticIdentityProvider, InstallIdentityProvider
from .models import Card, BankAccount
from .pruner import prune

__all__ = [
    "build_card_params",
    "build_bank_account_params",
    "enrich",
    "prune",
    "Card",
    "BankAccount",
    "DeviceIdentityProvider",
    "StaticIdentityProvider",
    "InstallIdentityProvider",
]
