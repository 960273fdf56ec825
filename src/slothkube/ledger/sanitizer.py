"""Redaction of provider credentials before configuration storage."""

from __future__ import annotations

import logging

from slothkube.config.defaults import CREDENTIAL_PLACEHOLDERS
from slothkube.lib.errors import SanitizationError
from slothkube.models.cluster import ClusterConfig

logger = logging.getLogger(__name__)


def placeholder_for(env_var: str) -> str:
    """Return the ``${ENV_VAR}`` placeholder stored in place of a secret."""
    return f"${{{env_var}}}"


def sanitize_config_for_storage(config: ClusterConfig) -> ClusterConfig:
    """Return a deep copy of ``config`` with provider credentials redacted.

    Every credential field of each configured provider is replaced by a
    placeholder naming the environment variable that supplies it, for example
    ``${DIGITALOCEAN_TOKEN}``. Providers that are not configured stay absent.
    The input is never modified and the result shares no mutable state with it.

    Args:
        config: Cluster configuration holding live credentials

    Returns:
        Independent, redacted configuration

    Raises:
        SanitizationError: If the configuration cannot be copied. The
            unredacted input is never returned in its place.
    """
    try:
        sanitized = config.model_copy(deep=True)
    except Exception as exc:
        raise SanitizationError(
            f"Failed to copy cluster configuration for storage: {exc}"
        ) from exc

    redacted = 0
    for provider_name, fields in CREDENTIAL_PLACEHOLDERS.items():
        provider = getattr(sanitized.providers, provider_name)
        if provider is None:
            continue
        for field_name, env_var in fields.items():
            setattr(provider, field_name, placeholder_for(env_var))
            redacted += 1

    logger.debug(f"Redacted {redacted} credential field(s) for storage")
    return sanitized
