"""Configuration loading for slothkube.

Main components:
- ClusterConfigLoader: Load and validate cluster definition files
- Environment variable substitution (${VAR_NAME} pattern)
- LedgerSettings: version stamps and history limits from the environment
"""

from slothkube.config.env_loader import get_env_var, load_env_file, substitute_env_vars
from slothkube.config.loader import ClusterConfigLoader
from slothkube.config.settings import LedgerSettings, load_ledger_settings

__all__ = [
    "ClusterConfigLoader",
    "LedgerSettings",
    "get_env_var",
    "load_env_file",
    "load_ledger_settings",
    "substitute_env_vars",
]
