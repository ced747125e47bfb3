"""Panel API key types.

The panel issues two kinds of keys. Application keys (``ptla_``) are created by
an administrator and only work against ``/api/application``; client keys
(``ptlc_``) belong to a user account and only work against ``/api/client``.
Using one where the other is expected fails deep inside a request with a 401 or
403, so the prefix is checked when the client is built.
"""

from enum import Enum

from pterodactyl_client.errors.exceptions import InvalidCredentialPrefixError


class KeyType(Enum):
    """Credential class of an API key."""

    APPLICATION = "application"
    CLIENT = "client"

    @property
    def prefix(self) -> str:
        return _PREFIXES[self]


_PREFIXES = {
    KeyType.APPLICATION: "ptla_",
    KeyType.CLIENT: "ptlc_",
}


def validate_api_key(api_key: str, key_type: KeyType) -> None:
    """Check that ``api_key`` carries the prefix mandated by ``key_type``.

    Raises:
        InvalidCredentialPrefixError: If the prefix does not match.
    """
    if not api_key.startswith(key_type.prefix):
        raise InvalidCredentialPrefixError(
            f"invalid {key_type.value} key: must start with '{key_type.prefix}'",
            expected_prefix=key_type.prefix,
        )
