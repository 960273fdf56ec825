"""Unit tests for deployment lineage verification."""

from __future__ import annotations

import logging

import pytest

from slothkube.ledger.builder import DeploymentMetadataBuilder
from slothkube.ledger.codec import serialize_record
from slothkube.ledger.lineage import verify_lineage
from slothkube.models.cluster import ClusterConfig
from slothkube.models.deployment_state import ConfigVersion, DeploymentRecord


@pytest.fixture
def chain(
    builder: DeploymentMetadataBuilder, cluster_config: ClusterConfig
) -> list[DeploymentRecord]:
    """Four linked deployments, oldest first."""
    records: list[DeploymentRecord] = []
    previous = ""
    for node_count, manifest in [(3, "v1"), (5, "v1"), (5, "v2"), (2, "v3")]:
        record = builder.build(cluster_config, previous, node_count, manifest)
        records.append(record)
        previous = serialize_record(record)
    return records


class TestVerifyLineage:
    """Tests for verify_lineage."""

    def test_empty_is_valid(self) -> None:
        """No records is trivially valid."""
        result = verify_lineage([])

        assert result.is_valid
        assert result.total_records == 0
        assert result.broken_at is None

    def test_built_chain_is_valid(self, chain: list[DeploymentRecord]) -> None:
        """Records produced by the builder verify."""
        result = verify_lineage(chain)

        assert result.is_valid
        assert result.total_records == 4
        assert result.error_message is None

    def test_single_record_is_valid(self, chain: list[DeploymentRecord]) -> None:
        """A lone record only needs a matching snapshot id."""
        assert verify_lineage(chain[:1]).is_valid

    def test_tampered_checksum_detected(
        self, chain: list[DeploymentRecord], caplog: pytest.LogCaptureFixture
    ) -> None:
        """A changed checksum no longer matches the snapshot id."""
        chain[2] = chain[2].model_copy(update={"config_checksum": "f" * 64})

        with caplog.at_level(logging.WARNING, logger="slothkube.ledger.lineage"):
            result = verify_lineage(chain)

        assert not result.is_valid
        assert result.broken_at == 2
        assert result.error_message is not None
        assert "stateSnapshotId" in result.error_message
        assert f"Deployment lineage broken: {result.error_message}" in caplog.text

    def test_broken_parent_state_detected(
        self, chain: list[DeploymentRecord]
    ) -> None:
        """A wrong parentStateId breaks the chain at that record."""
        chain[1] = chain[1].model_copy(update={"parent_state_id": "state-other"})

        result = verify_lineage(chain)

        assert not result.is_valid
        assert result.broken_at == 1
        assert result.error_message is not None
        assert "parentStateId" in result.error_message

    def test_broken_parent_hash_detected(self, chain: list[DeploymentRecord]) -> None:
        """A wrong configVersion.parentHash breaks the chain."""
        forged = ConfigVersion(
            config_hash=chain[3].config_checksum,
            parent_hash="0" * 64,
            schema_version="2.0",
        )
        chain[3] = chain[3].model_copy(update={"config_version": forged})

        result = verify_lineage(chain)

        assert not result.is_valid
        assert result.broken_at == 3
        assert result.error_message is not None
        assert "parentHash" in result.error_message

    def test_missing_record_detected(self, chain: list[DeploymentRecord]) -> None:
        """A gap in deployment counts is reported."""
        result = verify_lineage([chain[0], chain[2]])

        assert not result.is_valid
        assert result.broken_at == 1
        assert result.error_message is not None
        assert "deploymentCount" in result.error_message

    def test_changed_created_at_detected(self, chain: list[DeploymentRecord]) -> None:
        """createdAt must be carried over unchanged."""
        chain[1] = chain[1].model_copy(update={"created_at": "1999-01-01T00:00:00Z"})

        result = verify_lineage(chain)

        assert not result.is_valid
        assert result.broken_at == 1
        assert result.error_message is not None
        assert "createdAt" in result.error_message
