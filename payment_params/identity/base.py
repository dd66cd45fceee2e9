"""Abstract base class for device identity providers."""
from abc import ABC, abstractmethod
from typing import Optional


class DeviceIdentityProvider(ABC):
    """Supplies the raw device id and the application package identifier."""

    @abstractmethod
    def get_raw_device_id(self) -> Optional[str]:
        """Raw, unhashed device identifier, or None if unavailable."""
        ...

    @abstractmethod
    def get_package_identifier(self) -> str:
        """Identifier of the running application (bundle / package name)."""
        ...


class StaticIdentityProvider(DeviceIdentityProvider):
    """Provider with fixed values, for tests and callers that already know the identity."""

    def __init__(self, raw_device_id: Optional[str], package_identifier: str = ""):
        self._raw_device_id = raw_device_id
        self._package_identifier = package_identifier

    def get_raw_device_id(self) -> Optional[str]:
        return self._raw_device_id

    def get_package_identifier(self) -> str:
        return self._package_identifier
