"""Pydantic models for cluster configuration and the deployment ledger."""

from slothkube.models.cluster import (
    AWSProvider,
    AzureProvider,
    ClusterConfig,
    DigitalOceanProvider,
    GCPProvider,
    HetznerProvider,
    KubernetesConfig,
    LinodeProvider,
    Metadata,
    NetworkConfig,
    NodeConfig,
    NodePool,
    ProvidersConfig,
)
from slothkube.models.deployment_state import (
    SYSTEM_ACTOR,
    ChangeLogEntry,
    ChangeType,
    ConfigVersion,
    DeploymentHistoryEntry,
    DeploymentRecord,
    ScaleOperation,
)

__all__ = [
    "AWSProvider",
    "AzureProvider",
    "ChangeLogEntry",
    "ChangeType",
    "ClusterConfig",
    "ConfigVersion",
    "DeploymentHistoryEntry",
    "DeploymentRecord",
    "DigitalOceanProvider",
    "GCPProvider",
    "HetznerProvider",
    "KubernetesConfig",
    "LinodeProvider",
    "Metadata",
    "NetworkConfig",
    "NodeConfig",
    "NodePool",
    "ProvidersConfig",
    "SYSTEM_ACTOR",
    "ScaleOperation",
]
