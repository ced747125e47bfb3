"""Authentication components for the panel client.

This module provides:
- API key types and the prefix check that keeps them apart
- Resolution of the panel URL and API key from the environment, .env files and key files

Example:
    ```python
    from pterodactyl_client.auth import CredentialResolver, KeyType, validate_api_key

    resolver = CredentialResolver()
    api_key = resolver.resolve_api_key()
    validate_api_key(api_key, KeyType.APPLICATION)
    ```
"""

from pterodactyl_client.auth.credentials import CredentialResolver
from pterodactyl_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from pterodactyl_client.auth.keys import KeyType, validate_api_key

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "KeyType",
    "validate_api_key",
]
