"""Cluster configuration loader.

Loads a cluster definition from YAML or JSON, substitutes ``${VAR}``
references from the environment and validates it into a ``ClusterConfig``.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from slothkube.config.env_loader import load_env_file, substitute_env_vars
from slothkube.lib.errors import ConfigError, FileNotFoundError
from slothkube.models.cluster import ClusterConfig

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".json")


def _format_validation_errors(exc: PydanticValidationError) -> str:
    """Render pydantic errors as one line per offending field."""
    lines: list[str] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "unknown"
        msg = error.get("msg", "Unknown error")
        if error.get("type") == "value_error":
            received = error.get("input")
            lines.append(f"Field '{field_path}': {msg} (received: {received!r})")
        else:
            lines.append(f"Field '{field_path}': {msg}")
    return "\n".join(lines) if lines else "Validation failed with unknown error"


class ClusterConfigLoader:
    """Loads and validates cluster configuration files.

    This class handles:
    - Reading YAML or JSON cluster definitions
    - Optional ``.env`` loading before substitution
    - ``${VAR_NAME}`` environment variable substitution
    - Converting validation errors into human-readable messages
    """

    def __init__(self, substitute_env: bool = True) -> None:
        """Create a loader.

        Args:
            substitute_env: Resolve ``${VAR}`` references before parsing
        """
        self.substitute_env = substitute_env

    def load(
        self, path: Path | str, env_file: Path | str | None = None
    ) -> ClusterConfig:
        """Load a cluster configuration file.

        Args:
            path: Path to a ``.yaml``, ``.yml`` or ``.json`` file
            env_file: Optional dotenv file loaded before substitution

        Returns:
            Validated cluster configuration

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If the file cannot be read, parsed or validated
        """
        config_path = Path(path)
        if not config_path.is_file():
            raise FileNotFoundError(
                str(config_path),
                "Check the path to the cluster configuration file.",
            )
        if config_path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise ConfigError(
                "path",
                f"Unsupported file type '{config_path.suffix}'. "
                f"Expected one of: {', '.join(SUPPORTED_SUFFIXES)}",
            )

        if env_file is not None and load_env_file(env_file):
            logger.debug(f"Loaded environment from {env_file}")

        try:
            raw_text = config_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError("path", f"Failed to read {config_path}: {exc}") from exc

        return self.parse_text(raw_text)

    def parse_text(self, text: str) -> ClusterConfig:
        """Parse configuration text (YAML, of which JSON is a subset).

        Args:
            text: Raw configuration text

        Returns:
            Validated cluster configuration

        Raises:
            ConfigError: If parsing or validation fails
        """
        if self.substitute_env:
            text = substitute_env_vars(text)

        try:
            content = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError("content", f"Invalid YAML: {exc}") from exc

        return self.parse_dict(content or {})

    def parse_dict(self, content: Any) -> ClusterConfig:
        """Validate an already-parsed mapping.

        Args:
            content: Parsed configuration mapping

        Returns:
            Validated cluster configuration

        Raises:
            ConfigError: If the content is not a mapping or fails validation
        """
        if not isinstance(content, dict):
            raise ConfigError(
                "content",
                "Cluster configuration must be a mapping, "
                f"got {type(content).__name__}",
            )
        try:
            config = ClusterConfig.model_validate(content)
        except PydanticValidationError as exc:
            raise ConfigError("cluster", _format_validation_errors(exc)) from exc

        logger.debug(
            f"Loaded cluster '{config.metadata.name}' with "
            f"{len(config.node_pools)} node pool(s)"
        )
        return config
