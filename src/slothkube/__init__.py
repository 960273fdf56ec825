"""slothkube - deployment ledger for multi-cloud Kubernetes clusters.

After every apply of a cluster definition, slothkube records what changed
in a versioned, tamper-detectable ledger entry and keeps a redacted copy of
the configuration next to it.

Main features:
- SHA-256 manifest checksums with a legacy positional hash for old records
- Credential redaction into ${ENV_VAR} placeholders
- Deployment records with scale classification, change log and hash chains
- Bounded history of previous deployments, newest first
"""

from slothkube.config.loader import ClusterConfigLoader
from slothkube.ledger.builder import (
    DeploymentMetadataBuilder,
    generate_deployment_metadata,
)
from slothkube.ledger.sanitizer import sanitize_config_for_storage
from slothkube.lib.errors import ConfigError, LedgerError, SlothKubeError

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ClusterConfigLoader",
    "ConfigError",
    "DeploymentMetadataBuilder",
    "LedgerError",
    "SlothKubeError",
    "generate_deployment_metadata",
    "sanitize_config_for_storage",
]
