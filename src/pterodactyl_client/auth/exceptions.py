"""Exceptions raised while resolving panel credentials from the environment.

Example:
    ```python
    from pterodactyl_client import Client, KeyType
    from pterodactyl_client.auth.exceptions import CredentialNotFoundError

    try:
        client = Client.from_env(KeyType.APPLICATION)
    except CredentialNotFoundError as e:
        print(f"Set {e.env_var_name} first")
    ```
"""

from pterodactyl_client.errors.exceptions import ConfigError


class CredentialError(ConfigError):
    """Base exception for credential resolution errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required setting is not present in any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a key file is missing, unreadable, or empty."""

    pass
