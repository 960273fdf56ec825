"""Bounded history of past deployments, newest first."""

from __future__ import annotations

from collections.abc import Sequence

from slothkube.config.defaults import MAX_HISTORY_ENTRIES
from slothkube.models.deployment_state import DeploymentHistoryEntry, DeploymentRecord


def history_entry_from_record(record: DeploymentRecord) -> DeploymentHistoryEntry:
    """Summarise a deployment record as a history entry.

    Failed deployments are not recorded yet, so ``success`` is always true.
    """
    return DeploymentHistoryEntry(
        deployment_id=record.deployment_id,
        timestamp=record.last_deployed_at,
        node_count=record.current_node_count,
        config_checksum=record.config_checksum,
        schema_version=record.schema_version,
        success=True,
        error_message="",
    )


def prepend_history(
    history: Sequence[DeploymentHistoryEntry],
    entry: DeploymentHistoryEntry,
    limit: int = MAX_HISTORY_ENTRIES,
) -> list[DeploymentHistoryEntry]:
    """Return a new history with ``entry`` first, truncated to ``limit``.

    Oldest entries (at the tail) are dropped first; the relative order of the
    remaining entries is preserved.

    Raises:
        ValueError: If ``limit`` is not between 1 and ``MAX_HISTORY_ENTRIES``
    """
    if limit < 1:
        raise ValueError(f"History limit must be positive, got {limit}")
    if limit > MAX_HISTORY_ENTRIES:
        raise ValueError(
            f"History limit must not exceed {MAX_HISTORY_ENTRIES}, got {limit}"
        )
    return [entry, *history][:limit]
