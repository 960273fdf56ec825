"""Lineage verification for a sequence of deployment records.

Walks records oldest-first and checks that each one is correctly linked to
its predecessor:

1. ``stateSnapshotId`` matches ``state-{deploymentId}-{checksum[:8]}``
2. ``deploymentCount`` increases by exactly one
3. ``createdAt`` is carried over unchanged
4. ``parentStateId`` equals the predecessor's ``stateSnapshotId``
5. ``configVersion.parentHash`` equals the predecessor's ``configHash``
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import BaseModel, Field

from slothkube.ledger.builder import make_state_snapshot_id
from slothkube.models.deployment_state import DeploymentRecord

logger = logging.getLogger(__name__)


class LineageVerificationResult(BaseModel):
    """Outcome of a lineage check."""

    is_valid: bool
    total_records: int = 0
    broken_at: int | None = Field(
        default=None, description="Index of the first offending record"
    )
    error_message: str | None = None


def _config_hash(record: DeploymentRecord) -> str:
    return record.config_version.config_hash if record.config_version else ""


def _parent_hash(record: DeploymentRecord) -> str:
    return record.config_version.parent_hash if record.config_version else ""


def _check_link(previous: DeploymentRecord, current: DeploymentRecord) -> str | None:
    if current.deployment_count != previous.deployment_count + 1:
        return (
            f"deploymentCount jumps from {previous.deployment_count} "
            f"to {current.deployment_count}"
        )
    if current.created_at != previous.created_at:
        return (
            f"createdAt changed from {previous.created_at!r} "
            f"to {current.created_at!r}"
        )
    if current.parent_state_id != previous.state_snapshot_id:
        return (
            f"parentStateId {current.parent_state_id!r} does not match "
            f"previous stateSnapshotId {previous.state_snapshot_id!r}"
        )
    if _parent_hash(current) != _config_hash(previous):
        return (
            f"parentHash {_parent_hash(current)[:16]!r} does not match "
            f"previous configHash {_config_hash(previous)[:16]!r}"
        )
    return None


def verify_lineage(records: Sequence[DeploymentRecord]) -> LineageVerificationResult:
    """Verify that records form an unbroken deployment lineage.

    Args:
        records: Deployment records, oldest first

    Returns:
        LineageVerificationResult with the index of the first broken record
    """
    total = len(records)
    if not total:
        return LineageVerificationResult(is_valid=True, total_records=0)

    previous: DeploymentRecord | None = None
    for index, record in enumerate(records):
        expected_snapshot = make_state_snapshot_id(
            record.deployment_id, record.config_checksum
        )
        error: str | None = None
        if record.state_snapshot_id != expected_snapshot:
            error = (
                f"stateSnapshotId {record.state_snapshot_id!r} does not match "
                f"expected {expected_snapshot!r}"
            )
        elif previous is not None:
            error = _check_link(previous, record)

        if error:
            msg = f"record {index} ({record.deployment_id}): {error}"
            logger.warning(f"Deployment lineage broken: {msg}")
            return LineageVerificationResult(
                is_valid=False,
                total_records=total,
                broken_at=index,
                error_message=msg,
            )
        previous = record

    return LineageVerificationResult(is_valid=True, total_records=total)
