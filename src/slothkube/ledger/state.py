"""Local stack output store.

Mirrors the outputs the provisioning engine keeps for each stack after an
apply: the sanitized configuration (``configJson``), the manifest it was
rendered from, and the serialized deployment record (``deploymentMeta``).
The stored ``deploymentMeta`` is read back verbatim as the previous record of
the next deployment.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from slothkube.config.defaults import STATE_DIR_NAME, STATE_FILE_NAME
from slothkube.ledger.builder import DeploymentMetadataBuilder
from slothkube.ledger.codec import serialize_config, serialize_record
from slothkube.ledger.sanitizer import sanitize_config_for_storage
from slothkube.lib.errors import LedgerError
from slothkube.lib.logging_config import get_logger
from slothkube.models.cluster import ClusterConfig
from slothkube.models.deployment_state import DeploymentRecord

logger = get_logger(__name__)

STATE_VERSION = "1.0"


class StackOutputs(BaseModel):
    """Outputs persisted for one stack."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    config_json: str = Field(default="", description="Sanitized configuration JSON")
    manifest: str = Field(default="", description="Manifest text as deployed")
    deployment_meta: str = Field(default="", description="Deployment record JSON")
    updated_at: str = Field(default="", description="Last write timestamp")


class StackState(BaseModel):
    """Top-level stack state stored on disk."""

    model_config = ConfigDict(extra="forbid")

    version: str = Field(default=STATE_VERSION, description="State file version")
    stacks: dict[str, StackOutputs] = Field(
        default_factory=dict, description="Outputs keyed by stack name"
    )


def get_state_path(project_root: Path) -> Path:
    """Return the stack state file path for a project directory."""
    return project_root / STATE_DIR_NAME / STATE_FILE_NAME


def load_state(state_path: Path) -> StackState:
    """Load stack state from disk.

    A missing or empty file yields an empty state.

    Raises:
        LedgerError: If the file cannot be read or has an invalid format
    """
    if not state_path.exists():
        return StackState()

    try:
        content = state_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LedgerError(
            operation="state",
            message=f"Failed to read stack state at {state_path}: {exc}",
        ) from exc

    if not content.strip():
        return StackState()

    try:
        return StackState.model_validate_json(content)
    except ValidationError as exc:
        raise LedgerError(
            operation="state",
            message=f"Invalid stack state format in {state_path}: {exc}",
        ) from exc


def save_state(state_path: Path, state: StackState) -> None:
    """Persist stack state to disk.

    Raises:
        LedgerError: If the file cannot be written
    """
    try:
        state_path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(
            state.model_dump(mode="json", by_alias=True), indent=2, sort_keys=True
        )
        state_path.write_text(payload, encoding="utf-8")
    except OSError as exc:
        raise LedgerError(
            operation="state",
            message=f"Failed to write stack state to {state_path}: {exc}",
        ) from exc


def get_stack_outputs(state_path: Path, stack_name: str) -> StackOutputs | None:
    """Return stored outputs for a stack, or None if it was never deployed."""
    state = load_state(state_path)
    return state.stacks.get(stack_name)


def record_deployment(
    state_path: Path,
    stack_name: str,
    config: ClusterConfig,
    manifest_text: str,
    current_node_count: int,
    builder: DeploymentMetadataBuilder | None = None,
) -> DeploymentRecord:
    """Record a completed apply in the stack's outputs.

    Reads the stack's previous ``deploymentMeta``, builds the next record,
    redacts the configuration, and persists all outputs together.

    Args:
        state_path: Stack state file
        stack_name: Stack the deployment belongs to
        config: Cluster configuration as applied (with live credentials)
        manifest_text: Manifest text as applied
        current_node_count: Node count after the apply
        builder: Record builder, defaults to one using the wall clock

    Returns:
        The new deployment record

    Raises:
        LedgerError: If state cannot be read, serialized or written
    """
    builder = builder or DeploymentMetadataBuilder()
    state = load_state(state_path)
    existing = state.stacks.get(stack_name)
    previous_text = existing.deployment_meta if existing else ""

    record = builder.build(config, previous_text, current_node_count, manifest_text)
    outputs = StackOutputs(
        config_json=serialize_config(sanitize_config_for_storage(config)),
        manifest=manifest_text,
        deployment_meta=serialize_record(record),
        updated_at=record.updated_at,
    )

    state.stacks[stack_name] = outputs
    save_state(state_path, state)
    logger.info(
        f"Recorded {record.deployment_id} for stack '{stack_name}' "
        f"({record.last_scale_operation}, {record.current_node_count} nodes)"
    )
    return record
