"""
Install identity provider: a persistent per-install id stored on disk.

The id is a random uuid4 created on first use and reused afterwards, so
repeated requests from the same install hash to the same fingerprint.
"""
import logging
import os
import threading
import uuid
from pathlib import Path

from .base import DeviceIdentityProvider

logger = logging.getLogger(__name__)

# Default identity storage location
DEFAULT_INSTALL_ID_PATH = Path.home() / ".config" / "payment-params" / "install_id"


def _configured_path() -> Path:
    value = os.environ.get("PAYMENT_PARAMS_INSTALL_ID_PATH", "")
    return Path(value).expanduser() if value else DEFAULT_INSTALL_ID_PATH


class InstallIdentityProvider(DeviceIdentityProvider):
    """Reads (or creates) the install id file. Unreadable files mean "no id"."""

    def __init__(
        self,
        id_path: Path | None = None,
        package_identifier: str | None = None,
    ):
        self._path = id_path or _configured_path()
        self._package_identifier = package_identifier
        self._cached: str | None = None
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get_raw_device_id(self) -> str | None:
        if self._cached:
            return self._cached
        with self._lock:
            if self._cached:
                return self._cached
            try:
                self._cached = self._read() or self._create()
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Install id unavailable at %s: %s", self._path, e)
                return None
        return self._cached

    def get_package_identifier(self) -> str:
        if self._package_identifier is not None:
            return self._package_identifier
        return os.environ.get("PAYMENT_PARAMS_PACKAGE_NAME", "")

    def _read(self) -> str | None:
        if not self._path.exists():
            return None
        return self._path.read_text(encoding="utf-8").strip() or None

    def _create(self) -> str:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        install_id = uuid.uuid4().hex
        try:
            with open(self._path, "x", encoding="utf-8") as f:
                f.write(install_id)
        except FileExistsError:
            # Another process got there first; its id wins unless the file is blank
            existing = self._read()
            if existing:
                return existing
            self._path.write_text(install_id, encoding="utf-8")
        logger.info("Created install id at %s", self._path)
        return install_id

    def clear_cache(self) -> None:
        """Forget the cached id (for testing)."""
        self._cached = None


# Lazy-initialized singleton
_default_provider: InstallIdentityProvider | None = None
_default_lock = threading.Lock()


def get_default_provider() -> InstallIdentityProvider:
    """Process-wide provider used when the caller does not pass one."""
    global _default_provider
    with _default_lock:
        if _default_provider is None:
            _default_provider = InstallIdentityProvider()
        return _default_provider
