"""Deployment ledger models persisted after every cluster apply."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Identity recorded as the actor of every change log entry
SYSTEM_ACTOR = "sloth-kubernetes"


class ScaleOperation(str, Enum):
    """Classification of a deployment relative to the previous one."""

    INITIAL = "initial"
    SCALE_UP = "scale-up"
    SCALE_DOWN = "scale-down"
    UPDATE = "update"


class ChangeType(str, Enum):
    """Kinds of change recorded in a deployment's change log."""

    CLUSTER_CREATED = "cluster_created"
    POOL_ADDED = "pool_added"
    SCALE_UP = "scale_up"
    SCALE_DOWN = "scale_down"
    CONFIG_UPDATED = "config_updated"


class LedgerModel(BaseModel):
    """Base for ledger models.

    Records are immutable once built. Unknown keys are ignored and missing keys
    take zero values so older or partial records still decode.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class ChangeLogEntry(LedgerModel):
    """A single change made by a deployment."""

    change_type: str = Field(default="", description="Kind of change")
    resource_id: str = Field(default="", description="Changed resource")
    description: str = Field(default="", description="Human-readable summary")
    old_value: str = Field(default="", description="Value before the change")
    new_value: str = Field(default="", description="Value after the change")
    actor: str = Field(default=SYSTEM_ACTOR, description="Who made the change")
    timestamp: str = Field(default="", description="RFC-3339 UTC timestamp")


class DeploymentHistoryEntry(LedgerModel):
    """Compact summary of a past deployment."""

    deployment_id: str = ""
    timestamp: str = ""
    node_count: int = 0
    config_checksum: str = ""
    schema_version: str = ""
    success: bool = True
    error_message: str = ""


class ConfigVersion(LedgerModel):
    """Link in the configuration hash chain.

    Attributes:
        config_hash: Checksum of the current manifest
        parent_hash: ``config_hash`` of the previous deployment, or empty
        schema_version: Ledger schema the hash was recorded under
    """

    config_hash: str = ""
    parent_hash: str = ""
    schema_version: str = ""


class DeploymentRecord(LedgerModel):
    """Ledger entry describing one applied deployment.

    A record supersedes the previous one; it is never modified in place.
    """

    created_at: str = Field(default="", description="First deployment timestamp")
    updated_at: str = Field(default="", description="Last update timestamp")
    last_deployed_at: str = Field(
        default="", description="Timestamp of this deployment"
    )

    deployment_id: str = Field(default="", description="deploy-{count}-{date}")
    deployment_count: int = Field(default=0, description="Deployments so far")

    last_scale_operation: str = Field(default="", description="Scale operation")
    previous_node_count: int = Field(default=0, description="Nodes before")
    current_node_count: int = Field(default=0, description="Nodes after")

    node_pools_added: list[str] = Field(default_factory=list)
    node_pools_removed: list[str] = Field(default_factory=list)
    node_pools_scaled: list[str] = Field(default_factory=list)

    system_version: str = Field(default="", description="Orchestrator version")
    engine_version: str = Field(default="", description="Provisioning engine version")
    schema_version: str = Field(default="", description="Ledger schema version")

    config_checksum: str = Field(default="", description="SHA-256 of the manifest")
    config_version: ConfigVersion | None = Field(default=None)
    state_snapshot_id: str = Field(default="", description="Content-addressed id")
    parent_state_id: str = Field(default="", description="Previous snapshot id")

    change_log: list[ChangeLogEntry] = Field(default_factory=list)
    previous_deployments: list[DeploymentHistoryEntry] = Field(default_factory=list)

    @field_validator(
        "node_pools_added",
        "node_pools_removed",
        "node_pools_scaled",
        "change_log",
        "previous_deployments",
        mode="before",
    )
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        """Decode JSON null sequences as empty lists."""
        return [] if v is None else v

    @property
    def is_empty(self) -> bool:
        """Whether this record carries no deployment (zero-valued)."""
        return not self.created_at
