"""Pytest configuration and shared fixtures for slothkube tests."""

import os
import shutil
import tempfile
from collections.abc import Generator
from datetime import datetime, timezone
from pathlib import Path

import pytest

from slothkube.config.settings import LedgerSettings
from slothkube.ledger.builder import DeploymentMetadataBuilder
from slothkube.ledger.clock import FixedClock
from slothkube.models.cluster import (
    AWSProvider,
    ClusterConfig,
    DigitalOceanProvider,
    LinodeProvider,
    Metadata,
    NodePool,
    ProvidersConfig,
)

FIXED_INSTANT = datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def temp_dir() -> Generator[Path]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory

    Cleanup:
        Automatically removes directory after test
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def isolated_env() -> Generator[dict[str, str]]:
    """Provide isolated environment variables for testing.

    Saves current environment and restores after test.

    Yields:
        Dictionary of original environment variables

    Cleanup:
        Restores original environment after test
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def fixed_clock() -> FixedClock:
    """Clock pinned to 2024-01-15T10:30:00Z."""
    return FixedClock(FIXED_INSTANT)


@pytest.fixture
def ledger_settings() -> LedgerSettings:
    """Ledger settings with explicit version stamps."""
    return LedgerSettings(system_version="1.0.0", engine_version="3.x")


@pytest.fixture
def builder(
    fixed_clock: FixedClock, ledger_settings: LedgerSettings
) -> DeploymentMetadataBuilder:
    """Deployment metadata builder with a pinned clock."""
    return DeploymentMetadataBuilder(clock=fixed_clock, settings=ledger_settings)


@pytest.fixture
def cluster_config() -> ClusterConfig:
    """Cluster with two node pools and live credentials for three providers."""
    return ClusterConfig(
        metadata=Metadata(name="test-cluster", environment="test"),
        providers=ProvidersConfig(
            digitalocean=DigitalOceanProvider(
                enabled=True, token="do-secret-token", region="nyc3"
            ),
            linode=LinodeProvider(
                enabled=True, token="linode-secret", root_password="hunter2"
            ),
            aws=AWSProvider(
                enabled=True,
                access_key_id="AKIAEXAMPLE",
                secret_access_key="aws-secret",
                region="us-east-1",
            ),
        ),
        node_pools={
            "masters": NodePool(name="masters", count=3, roles=["master"]),
            "workers": NodePool(name="workers", count=5, roles=["worker"]),
        },
    )
