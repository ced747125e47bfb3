"""Environment-driven lookup of the panel URL and API key.

Each setting is taken from the first source that has it:
1. Explicitly provided value
2. Environment variable (``PTERO_BASE_URL``, ``PTERO_API_KEY``)
3. .env file, merged into the environment once by python-dotenv
4. Default value

The API key may instead live in a file named by ``PTERO_API_KEY_FILE``, which
suits container secrets mounted as files. Key values never reach the logs;
only where they were found does.

Example:
    ```python
    from pterodactyl_client.auth import CredentialResolver

    resolver = CredentialResolver(dotenv_path="/srv/panel-bot/.env")
    base_url = resolver.resolve_base_url()
    api_key = resolver.resolve_api_key()
    ```
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from pterodactyl_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

BASE_URL_ENV_VAR = "PTERO_BASE_URL"
API_KEY_ENV_VAR = "PTERO_API_KEY"
API_KEY_FILE_ENV_VAR = "PTERO_API_KEY_FILE"

MASK = "***"


def _expand_path(raw: str) -> Path:
    return Path(os.path.expanduser(os.path.expandvars(raw)))


def _read_key_file(path: Path) -> str:
    """Return the stripped contents of ``path``.

    Raises:
        CredentialFileError: The file is missing, unreadable or blank.
    """
    try:
        content = path.read_text().strip()
    except FileNotFoundError:
        raise CredentialFileError(f"Credential file not found: {path}") from None
    except PermissionError:
        raise CredentialFileError(f"Permission denied reading credential file: {path}") from None
    except OSError as e:
        raise CredentialFileError(f"Error reading credential file {path}: {e}") from e

    if not content:
        raise CredentialFileError(f"Credential file is empty: {path}")
    return content


class CredentialResolver:
    """Resolve panel settings from explicit values, the environment, .env files and defaults.

    The .env file is loaded at most once per resolver, even when several
    threads resolve at the same time. python-dotenv never overrides variables
    that are already set, so the real environment wins over the file.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize the resolver.

        Args:
            dotenv_path: Path to a .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to read a .env file at all.
        """
        self._dotenv_path = dotenv_path
        self._dotenv_lock = Lock()
        self._dotenv_loaded = False

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            try:
                found = load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug(f"Panel settings .env {'loaded' if found else 'not found'}")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        secret: bool = True,
    ) -> str | None:
        """Return the setting from the first source that provides it.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to check (.env values are
                already merged into the environment).
            default: Fallback when nothing else is set.
            required: Raise instead of returning None when unresolved.
            secret: Mask the value in debug logs. Disable for URLs.

        Raises:
            CredentialNotFoundError: If ``required`` and nothing was found.
        """
        if value is not None:
            result, source = value, "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result, source = os.environ[env_var_name], f"environment variable '{env_var_name}'"
        elif default is not None:
            result, source = default, "default value"
        elif required:
            message = "Required setting not found"
            if env_var_name:
                message += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(message, env_var_name=env_var_name)
        else:
            return None

        logger.debug(f"Resolved setting from {source}: {MASK if secret else result}")
        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file given directly or through ``env_var_name``.

        The path supports ``~`` and ``$VAR`` expansion; surrounding whitespace
        in the file is stripped. When not ``required``, any problem with the
        file yields None and a log line instead of an exception.

        Raises:
            CredentialFileError: If ``required`` and no readable, non-empty file was found.
        """
        raw_path = str(file_path) if file_path is not None else None
        if raw_path is None and env_var_name:
            raw_path = self.resolve(env_var_name=env_var_name, secret=False)

        if not raw_path:
            if not required:
                return None
            message = "No file path provided for credential resolution"
            if env_var_name:
                message += f" (env var '{env_var_name}' not set)"
            raise CredentialFileError(message)

        path = _expand_path(raw_path)
        try:
            content = _read_key_file(path)
        except CredentialFileError as e:
            if required:
                raise
            logger.warning(f"Ignoring credential file: {e}")
            return None

        logger.debug(f"Resolved credential from file {path}: {MASK}")
        return content

    def resolve_base_url(self, value: str | None = None) -> str:
        """Resolve the panel URL from ``value`` or ``PTERO_BASE_URL``."""
        return self.resolve(value=value, env_var_name=BASE_URL_ENV_VAR, required=True, secret=False)

    def resolve_api_key(self, value: str | None = None) -> str:
        """Resolve the API key from ``value``, ``PTERO_API_KEY`` or the file named by ``PTERO_API_KEY_FILE``.

        Raises:
            CredentialNotFoundError: If no source provides a key.
            CredentialFileError: If ``PTERO_API_KEY_FILE`` is set but unreadable.
        """
        api_key = self.resolve(value=value, env_var_name=API_KEY_ENV_VAR)
        if api_key is not None:
            return api_key

        if API_KEY_FILE_ENV_VAR in os.environ:
            return self.resolve_from_file(env_var_name=API_KEY_FILE_ENV_VAR, required=True)

        raise CredentialNotFoundError(
            f"Required API key not found (checked env vars: {API_KEY_ENV_VAR}, {API_KEY_FILE_ENV_VAR})",
            env_var_name=API_KEY_ENV_VAR,
        )
