"""Device identity sources for request fingerprinting."""
from .base import DeviceIdentityProvider, StaticIdentityProvider
from .install import InstallIdentityProvider, get_default_provider

__all__ = [
    "DeviceIdentityProvider",
    "StaticIdentityProvider",
    "InstallIdentityProvider",
    "get_default_provider",
]
