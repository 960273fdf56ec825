"""Deployment metadata builder.

Given the previous ledger record (as stored text) and the facts of the
deployment that just completed, produce the next ``DeploymentRecord``.

The builder distinguishes two paths, chosen solely by whether the decoded
previous record has a ``createdAt`` timestamp:

- first deployment: no previous state, or previous state that could not be
  decoded. Every node pool counts as added.
- subsequent deployment: counters, node counts and hash chains continue from
  the previous record, and the change log describes what differs from it.

Node-pool level diffing is not performed on subsequent deployments because
records do not persist pool definitions; ``nodePoolsAdded``, ``Removed`` and
``Scaled`` stay empty there.
"""

from __future__ import annotations

import logging

from slothkube.config.settings import LedgerSettings, load_ledger_settings
from slothkube.ledger.checksum import ChecksumAlgorithm, get_checksum_algorithm
from slothkube.ledger.clock import Clock, SystemClock, format_timestamp
from slothkube.ledger.codec import parse_previous_record
from slothkube.ledger.history import history_entry_from_record, prepend_history
from slothkube.models.cluster import ClusterConfig
from slothkube.models.deployment_state import (
    SYSTEM_ACTOR,
    ChangeLogEntry,
    ChangeType,
    ConfigVersion,
    DeploymentRecord,
    ScaleOperation,
)

logger = logging.getLogger(__name__)

SNAPSHOT_FINGERPRINT_LENGTH = 8


def make_deployment_id(count: int, timestamp: str) -> str:
    """Return ``deploy-{count}-{YYYY-MM-DD}`` for an RFC-3339 timestamp."""
    return f"deploy-{count}-{timestamp[:10]}"


def make_state_snapshot_id(deployment_id: str, config_checksum: str) -> str:
    """Return the content-addressed snapshot id for a deployment."""
    return f"state-{deployment_id}-{config_checksum[:SNAPSHOT_FINGERPRINT_LENGTH]}"


def classify_scale_operation(
    previous_count: int, current_count: int
) -> ScaleOperation:
    """Classify a subsequent deployment by its node count delta."""
    if current_count > previous_count:
        return ScaleOperation.SCALE_UP
    if current_count < previous_count:
        return ScaleOperation.SCALE_DOWN
    return ScaleOperation.UPDATE


class DeploymentMetadataBuilder:
    """Builds the next ledger record after a cluster apply.

    The builder holds no per-call state, so a single instance may be shared
    across threads.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        settings: LedgerSettings | None = None,
        checksum_algorithm: ChecksumAlgorithm | None = None,
    ) -> None:
        """Create a builder.

        Args:
            clock: Time source, defaults to UTC wall clock
            settings: Version stamps and history limit, defaults to the
                environment-derived settings
            checksum_algorithm: Manifest checksum, defaults to SHA-256
        """
        self.clock = clock or SystemClock()
        self.settings = settings or load_ledger_settings()
        self.build_info = self.settings.build_info()
        self.checksum_algorithm = checksum_algorithm or get_checksum_algorithm()

    def build(
        self,
        config: ClusterConfig,
        previous_record_text: str | None,
        current_node_count: int,
        manifest_text: str,
    ) -> DeploymentRecord:
        """Produce the record for the deployment that just completed.

        Args:
            config: Cluster configuration (name and node pools are used)
            previous_record_text: Serialized previous record; empty or
                malformed text is treated as a first deployment
            current_node_count: Nodes in the cluster after this deployment
            manifest_text: Exact manifest text, used only for hashing

        Returns:
            The new deployment record
        """
        previous = parse_previous_record(previous_record_text)
        now = format_timestamp(self.clock.now())
        config_checksum = self.checksum_algorithm.checksum(manifest_text)

        if previous.is_empty:
            record = self._build_initial(
                config, current_node_count, config_checksum, now
            )
        else:
            record = self._build_subsequent(
                config, previous, current_node_count, config_checksum, now
            )

        logger.debug(
            f"Built {record.deployment_id} ({record.last_scale_operation}) "
            f"for cluster '{config.metadata.name}'"
        )
        return record

    def _config_version(self, config_checksum: str, parent_hash: str) -> ConfigVersion:
        return ConfigVersion(
            config_hash=config_checksum,
            parent_hash=parent_hash,
            schema_version=self.build_info.schema_version,
        )

    def _build_initial(
        self,
        config: ClusterConfig,
        current_node_count: int,
        config_checksum: str,
        now: str,
    ) -> DeploymentRecord:
        deployment_id = make_deployment_id(1, now)
        cluster_name = config.metadata.name

        change_log = [
            ChangeLogEntry(
                change_type=ChangeType.CLUSTER_CREATED.value,
                resource_id=cluster_name,
                description=f"Cluster created with {current_node_count} nodes",
                new_value=str(current_node_count),
                actor=SYSTEM_ACTOR,
                timestamp=now,
            )
        ]
        for pool_name, pool in config.node_pools.items():
            change_log.append(
                ChangeLogEntry(
                    change_type=ChangeType.POOL_ADDED.value,
                    resource_id=pool_name,
                    description=(
                        f"Initial node pool '{pool_name}' with {pool.count} nodes"
                    ),
                    new_value=str(pool.count),
                    actor=SYSTEM_ACTOR,
                    timestamp=now,
                )
            )

        return DeploymentRecord(
            created_at=now,
            updated_at=now,
            last_deployed_at=now,
            deployment_id=deployment_id,
            deployment_count=1,
            last_scale_operation=ScaleOperation.INITIAL.value,
            previous_node_count=0,
            current_node_count=current_node_count,
            node_pools_added=list(config.node_pools),
            system_version=self.build_info.system_version,
            engine_version=self.build_info.engine_version,
            schema_version=self.build_info.schema_version,
            config_checksum=config_checksum,
            config_version=self._config_version(config_checksum, ""),
            state_snapshot_id=make_state_snapshot_id(deployment_id, config_checksum),
            parent_state_id="",
            change_log=change_log,
            previous_deployments=[],
        )

    def _build_subsequent(
        self,
        config: ClusterConfig,
        previous: DeploymentRecord,
        current_node_count: int,
        config_checksum: str,
        now: str,
    ) -> DeploymentRecord:
        deployment_count = previous.deployment_count + 1
        deployment_id = make_deployment_id(deployment_count, now)
        previous_node_count = previous.current_node_count
        operation = classify_scale_operation(previous_node_count, current_node_count)
        cluster_name = config.metadata.name

        change_log: list[ChangeLogEntry] = []
        if operation in (ScaleOperation.SCALE_UP, ScaleOperation.SCALE_DOWN):
            change_type = (
                ChangeType.SCALE_UP
                if operation == ScaleOperation.SCALE_UP
                else ChangeType.SCALE_DOWN
            )
            change_log.append(
                ChangeLogEntry(
                    change_type=change_type.value,
                    resource_id=cluster_name,
                    description=(
                        f"Scaled cluster from {previous_node_count} "
                        f"to {current_node_count} nodes"
                    ),
                    old_value=str(previous_node_count),
                    new_value=str(current_node_count),
                    actor=SYSTEM_ACTOR,
                    timestamp=now,
                )
            )
        if config_checksum != previous.config_checksum:
            change_log.append(
                ChangeLogEntry(
                    change_type=ChangeType.CONFIG_UPDATED.value,
                    resource_id=cluster_name,
                    description="Cluster configuration changed",
                    old_value=previous.config_checksum,
                    new_value=config_checksum,
                    actor=SYSTEM_ACTOR,
                    timestamp=now,
                )
            )

        parent_hash = (
            previous.config_version.config_hash if previous.config_version else ""
        )
        history = prepend_history(
            previous.previous_deployments,
            history_entry_from_record(previous),
            limit=self.settings.history_limit,
        )

        return DeploymentRecord(
            created_at=previous.created_at,
            updated_at=now,
            last_deployed_at=now,
            deployment_id=deployment_id,
            deployment_count=deployment_count,
            last_scale_operation=operation.value,
            previous_node_count=previous_node_count,
            current_node_count=current_node_count,
            node_pools_added=[],
            node_pools_removed=[],
            node_pools_scaled=[],
            system_version=self.build_info.system_version,
            engine_version=self.build_info.engine_version,
            schema_version=self.build_info.schema_version,
            config_checksum=config_checksum,
            config_version=self._config_version(config_checksum, parent_hash),
            state_snapshot_id=make_state_snapshot_id(deployment_id, config_checksum),
            parent_state_id=previous.state_snapshot_id,
            change_log=change_log,
            previous_deployments=history,
        )


def generate_deployment_metadata(
    config: ClusterConfig,
    previous_record_text: str | None,
    current_node_count: int,
    manifest_text: str,
    clock: Clock | None = None,
    settings: LedgerSettings | None = None,
) -> DeploymentRecord:
    """Build the next deployment record with a one-off builder.

    See ``DeploymentMetadataBuilder.build`` for argument details.
    """
    builder = DeploymentMetadataBuilder(clock=clock, settings=settings)
    return builder.build(
        config, previous_record_text, current_node_count, manifest_text
    )
