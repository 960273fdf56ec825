"""Environment variable helpers for cluster configuration files.

Configuration files reference secrets as ``${VAR_NAME}``. This is also the form
the ledger's sanitizer writes back, so a stored configuration can be reloaded
by exporting the same variables.
"""

import os
import re
from pathlib import Path

from dotenv import load_dotenv

from slothkube.lib.errors import ConfigError

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def get_env_var(name: str, default: str | None = None) -> str | None:
    """Return an environment variable value or a default.

    Args:
        name: Variable name
        default: Value returned when the variable is unset

    Returns:
        The variable value, or ``default``
    """
    return os.environ.get(name, default)


def substitute_env_vars(text: str) -> str:
    """Replace ``${VAR_NAME}`` references in text with environment values.

    Args:
        text: Raw configuration text

    Returns:
        Text with every reference substituted

    Raises:
        ConfigError: If a referenced variable is not set
    """

    def _replace(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = get_env_var(var_name)
        if value is None:
            raise ConfigError(
                var_name,
                f"Environment variable '{var_name}' is referenced but not set",
            )
        return value

    return ENV_VAR_PATTERN.sub(_replace, text)


def load_env_file(path: Path | str, override: bool = False) -> bool:
    """Load variables from a dotenv file into the process environment.

    Args:
        path: Path to the ``.env`` file
        override: Whether file values replace already-set variables

    Returns:
        True if at least one variable was loaded
    """
    env_path = Path(path)
    if not env_path.is_file():
        return False
    return load_dotenv(env_path, override=override)
