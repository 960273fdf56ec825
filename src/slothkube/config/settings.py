"""Ledger settings resolved from the environment.

Version stamps come from the build/release process through environment
variables rather than literals in the code.
"""

import logging
import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from slothkube.config.defaults import DEFAULT_LEDGER_CONFIG, MAX_HISTORY_ENTRIES
from slothkube.versioning import CURRENT_SCHEMA, BuildInfo

logger = logging.getLogger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "system_version": "SLOTHKUBE_SYSTEM_VERSION",
    "engine_version": "SLOTHKUBE_ENGINE_VERSION",
    "history_limit": "SLOTHKUBE_HISTORY_LIMIT",
}


class LedgerSettings(BaseModel):
    """Runtime settings for the deployment ledger."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    system_version: str = Field(..., description="Orchestrator version stamp")
    engine_version: str = Field(
        default=str(DEFAULT_LEDGER_CONFIG["engine_version"]),
        description="Provisioning engine version stamp",
    )
    history_limit: int = Field(
        default=int(DEFAULT_LEDGER_CONFIG["history_limit"]),
        ge=1,
        le=MAX_HISTORY_ENTRIES,
        description="Maximum previous deployments kept in a record",
    )

    def build_info(self) -> BuildInfo:
        """Return the version stamps for new records."""
        return BuildInfo(
            system_version=self.system_version,
            engine_version=self.engine_version,
            schema_version=CURRENT_SCHEMA.value,
        )


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse an environment variable value to the field's type.

    Raises:
        ValueError: If value cannot be parsed
    """
    if field_name == "history_limit":
        return int(value)
    return value


def load_ledger_settings(env_vars: dict[str, str] | None = None) -> LedgerSettings:
    """Resolve ledger settings from environment variables.

    Unparseable values are ignored with a warning and the default is used.
    A history limit above ``MAX_HISTORY_ENTRIES`` is clamped to it.

    Args:
        env_vars: Environment mapping, defaults to ``os.environ``

    Returns:
        Ledger settings
    """
    from slothkube import __version__

    env = os.environ if env_vars is None else env_vars
    values: dict[str, Any] = {"system_version": __version__}

    for field_name, env_var_name in ENV_VAR_MAP.items():
        raw = env.get(env_var_name)
        if not raw:
            continue
        try:
            values[field_name] = _parse_env_value(field_name, raw)
        except ValueError:
            logger.warning(f"Ignoring invalid {env_var_name}={raw!r}")

    limit = values.get("history_limit", 1)
    if limit < 1:
        logger.warning(f"Ignoring non-positive {ENV_VAR_MAP['history_limit']}")
        values.pop("history_limit")
    elif limit > MAX_HISTORY_ENTRIES:
        logger.warning(
            f"{ENV_VAR_MAP['history_limit']}={limit} exceeds the maximum, "
            f"using {MAX_HISTORY_ENTRIES}"
        )
        values["history_limit"] = MAX_HISTORY_ENTRIES

    return LedgerSettings(**values)
