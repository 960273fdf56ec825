"""Pydantic models for the cluster configuration.

This module defines the configuration schema consumed by the deployment
ledger: cluster metadata, cloud provider credentials, node pools, network and
Kubernetes distribution settings. Keys are serialized in lowerCamelCase.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# Regex patterns for validation
CLUSTER_NAME_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]*[a-z0-9])?$")


class CamelModel(BaseModel):
    """Base model serializing field names as lowerCamelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )


class Metadata(CamelModel):
    """Cluster identification metadata.

    Attributes:
        name: Cluster name, used as the ledger's resource identifier
        environment: Deployment environment (e.g., prod, staging)
        version: User-defined configuration version
        description: Free-form description
        owner: Owning person or system
        team: Owning team
        labels: Arbitrary key/value labels
        annotations: Arbitrary key/value annotations
    """

    name: str = Field(default="", description="Cluster name")
    environment: str = Field(default="", description="Deployment environment")
    version: str = Field(default="", description="Configuration version")
    description: str = Field(default="", description="Cluster description")
    owner: str = Field(default="", description="Cluster owner")
    team: str = Field(default="", description="Owning team")
    labels: dict[str, str] = Field(default_factory=dict, description="Labels")
    annotations: dict[str, str] = Field(
        default_factory=dict, description="Annotations"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate the cluster name is DNS-label compatible when set."""
        if v and not CLUSTER_NAME_PATTERN.match(v):
            raise ValueError(
                f"Invalid cluster name: {v}. "
                "Must contain only lowercase letters, numbers and '-', "
                "and start and end with an alphanumeric character"
            )
        return v


class VPCConfig(CamelModel):
    """Provider VPC settings."""

    create: bool = False
    id: str = ""
    name: str = ""
    cidr: str = ""
    region: str = ""
    private: bool = False
    enable_dns: bool = False
    enable_dns_hostname: bool = False
    internet_gateway: bool = False
    nat_gateway: bool = False


class DigitalOceanProvider(CamelModel):
    """DigitalOcean provider configuration."""

    enabled: bool = Field(default=False, description="Whether provider is used")
    token: str = Field(default="", description="DigitalOcean API token")
    region: str = Field(default="", description="Default region")
    ssh_keys: list[str] = Field(default_factory=list, description="SSH key IDs")
    tags: list[str] = Field(default_factory=list, description="Droplet tags")
    monitoring: bool = Field(default=False, description="Enable monitoring agent")
    ipv6: bool = Field(default=False, description="Enable IPv6")
    vpc: VPCConfig | None = Field(default=None, description="VPC settings")


class LinodeProvider(CamelModel):
    """Linode provider configuration."""

    enabled: bool = Field(default=False, description="Whether provider is used")
    token: str = Field(default="", description="Linode API token")
    region: str = Field(default="", description="Default region")
    root_password: str = Field(default="", description="Instance root password")
    private_ip: bool = Field(default=False, description="Allocate private IPs")
    authorized_keys: list[str] = Field(
        default_factory=list, description="Authorized SSH public keys"
    )
    tags: list[str] = Field(default_factory=list, description="Instance tags")
    vpc: VPCConfig | None = Field(default=None, description="VPC settings")


class AWSProvider(CamelModel):
    """AWS provider configuration."""

    enabled: bool = Field(default=False, description="Whether provider is used")
    access_key_id: str = Field(default="", description="AWS access key ID")
    secret_access_key: str = Field(default="", description="AWS secret access key")
    region: str = Field(default="", description="Default region")
    security_groups: list[str] = Field(
        default_factory=list, description="Security group IDs"
    )
    key_pair: str = Field(default="", description="EC2 key pair name")
    iam_role: str = Field(default="", description="Instance IAM role")
    vpc: VPCConfig | None = Field(default=None, description="VPC settings")


class AzureProvider(CamelModel):
    """Azure provider configuration."""

    enabled: bool = Field(default=False, description="Whether provider is used")
    subscription_id: str = Field(default="", description="Azure subscription ID")
    tenant_id: str = Field(default="", description="Azure AD tenant ID")
    client_id: str = Field(default="", description="Service principal client ID")
    client_secret: str = Field(default="", description="Service principal secret")
    resource_group: str = Field(default="", description="Resource group name")
    location: str = Field(default="", description="Azure region")


class GCPProvider(CamelModel):
    """GCP provider configuration."""

    enabled: bool = Field(default=False, description="Whether provider is used")
    project_id: str = Field(default="", description="GCP project ID")
    credentials: str = Field(default="", description="Service account JSON blob")
    region: str = Field(default="", description="Default region")
    zone: str = Field(default="", description="Default zone")


class HetznerProvider(CamelModel):
    """Hetzner Cloud provider configuration."""

    enabled: bool = Field(default=False, description="Whether provider is used")
    token: str = Field(default="", description="Hetzner Cloud API token")
    location: str = Field(default="", description="Default location")
    datacenter: str = Field(default="", description="Default datacenter")
    ssh_keys: list[str] = Field(default_factory=list, description="SSH key names")


class ProvidersConfig(CamelModel):
    """Cloud providers configured for the cluster.

    Each provider is optional; an absent provider is simply not used.
    """

    digitalocean: DigitalOceanProvider | None = None
    linode: LinodeProvider | None = None
    aws: AWSProvider | None = None
    azure: AzureProvider | None = None
    gcp: GCPProvider | None = None
    hetzner: HetznerProvider | None = None


class NodePool(CamelModel):
    """A group of identically configured nodes.

    Attributes:
        name: Pool name
        provider: Cloud provider hosting the pool
        count: Desired node count
        min_count: Minimum node count when auto scaling
        max_count: Maximum node count when auto scaling
        roles: Kubernetes roles (master, worker, etcd)
        size: Instance size / type
        image: OS image
        region: Region override
        zones: Availability zones
        labels: Node labels
        auto_scaling: Whether auto scaling is enabled
        spot_instance: Use spot instances
        preemptible: Use preemptible instances
        user_data: Cloud-init user data
    """

    name: str = ""
    provider: str = ""
    count: int = Field(default=0, ge=0)
    min_count: int = Field(default=0, ge=0)
    max_count: int = Field(default=0, ge=0)
    roles: list[str] = Field(default_factory=list)
    size: str = ""
    image: str = ""
    region: str = ""
    zones: list[str] = Field(default_factory=list)
    labels: dict[str, str] = Field(default_factory=dict)
    auto_scaling: bool = False
    spot_instance: bool = False
    preemptible: bool = False
    user_data: str = ""

    @model_validator(mode="after")
    def validate_scaling_range(self) -> "NodePool":
        """Validate that min_count <= max_count when both are set."""
        if self.max_count and self.min_count > self.max_count:
            raise ValueError(
                f"min_count ({self.min_count}) must be <= "
                f"max_count ({self.max_count})"
            )
        return self


class NodeConfig(CamelModel):
    """An individually declared node."""

    name: str = ""
    provider: str = ""
    pool: str = ""
    roles: list[str] = Field(default_factory=list)
    size: str = ""
    image: str = ""
    region: str = ""
    labels: dict[str, str] = Field(default_factory=dict)


class DNSConfig(CamelModel):
    """DNS settings for cluster endpoints."""

    domain: str = ""
    provider: str = ""


class NetworkConfig(CamelModel):
    """Cluster network settings."""

    mode: str = ""
    cidr: str = ""
    pod_cidr: str = ""
    service_cidr: str = ""
    dns_servers: list[str] = Field(default_factory=list)
    dns: DNSConfig | None = None


class KubernetesConfig(CamelModel):
    """Kubernetes distribution settings."""

    version: str = ""
    distribution: str = ""
    network_plugin: str = ""
    pod_cidr: str = ""
    service_cidr: str = ""
    cluster_dns: str = ""
    cluster_domain: str = ""


class ClusterConfig(CamelModel):
    """Top-level cluster configuration.

    Attributes:
        metadata: Cluster identification
        providers: Cloud provider credentials and defaults
        network: Network settings
        kubernetes: Distribution settings
        nodes: Individually declared nodes
        node_pools: Node pools keyed by pool name
    """

    metadata: Metadata = Field(default_factory=Metadata)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    kubernetes: KubernetesConfig = Field(default_factory=KubernetesConfig)
    nodes: list[NodeConfig] = Field(default_factory=list)
    node_pools: dict[str, NodePool] = Field(default_factory=dict)
