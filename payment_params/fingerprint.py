"""Attach hashed device/install fingerprints to outgoing parameters."""
from typing import Any

from .identity.base import DeviceIdentityProvider
from .text_utils import is_blank, sha_hash_input

GUID = "guid"
MUID = "muid"


def enrich(params: dict[str, Any], identity_provider: DeviceIdentityProvider) -> dict[str, Any]:
    """
    Return a copy of params with ``guid`` and ``muid`` added.

    - guid: SHA-256 of the raw device id
    - muid: SHA-256 of package identifier + raw device id (no separator)

    Best-effort: a blank or missing device id returns the copy unchanged, and
    each field is omitted on its own if its hash comes back blank. Raw ids
    are never written to the output.
    """
    enriched = dict(params)

    raw_id = identity_provider.get_raw_device_id()
    if is_blank(raw_id):
        return enriched

    hash_guid = sha_hash_input(raw_id)
    hash_muid = sha_hash_input(identity_provider.get_package_identifier() + raw_id)

    if not is_blank(hash_guid):
        enriched[GUID] = hash_guid
    if not is_blank(hash_muid):
        enriched[MUID] = hash_muid

    return enriched
