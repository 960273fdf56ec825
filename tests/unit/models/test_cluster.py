"""Tests for cluster configuration models."""

import pytest
from pydantic import ValidationError

from slothkube.models.cluster import (
    ClusterConfig,
    DigitalOceanProvider,
    Metadata,
    NodePool,
    ProvidersConfig,
)


class TestMetadata:
    """Tests for cluster metadata."""

    def test_valid_name(self) -> None:
        """DNS-label style names are accepted."""
        assert Metadata(name="prod-eu-1").name == "prod-eu-1"

    def test_empty_name_allowed(self) -> None:
        """An unnamed cluster is allowed."""
        assert Metadata().name == ""

    @pytest.mark.parametrize("name", ["Prod", "-prod", "prod-", "prod_eu", "a b"])
    def test_invalid_name_rejected(self, name: str) -> None:
        """Names must be lowercase alphanumerics and inner hyphens."""
        with pytest.raises(ValidationError, match="Invalid cluster name"):
            Metadata(name=name)


class TestNodePool:
    """Tests for NodePool validation."""

    def test_negative_count_rejected(self) -> None:
        """Pool counts cannot be negative."""
        with pytest.raises(ValidationError):
            NodePool(name="workers", count=-1)

    def test_min_above_max_rejected(self) -> None:
        """min_count must not exceed max_count."""
        with pytest.raises(ValidationError, match="min_count"):
            NodePool(name="workers", count=3, min_count=5, max_count=4)

    def test_min_without_max_allowed(self) -> None:
        """A zero max_count means unbounded."""
        assert NodePool(name="workers", min_count=2).min_count == 2


class TestClusterConfig:
    """Tests for ClusterConfig parsing."""

    def test_defaults(self) -> None:
        """An empty configuration is valid."""
        config = ClusterConfig()

        assert config.metadata.name == ""
        assert config.providers.digitalocean is None
        assert config.node_pools == {}
        assert config.nodes == []

    def test_camel_case_input(self) -> None:
        """Configuration files use lowerCamelCase keys."""
        config = ClusterConfig.model_validate(
            {
                "metadata": {"name": "prod"},
                "providers": {
                    "aws": {"accessKeyId": "AKIA", "secretAccessKey": "s"},
                },
                "nodePools": {"workers": {"count": 3, "minCount": 1}},
                "kubernetes": {"networkPlugin": "calico"},
            }
        )

        assert config.providers.aws is not None
        assert config.providers.aws.access_key_id == "AKIA"
        assert config.node_pools["workers"].min_count == 1
        assert config.kubernetes.network_plugin == "calico"

    def test_snake_case_input(self) -> None:
        """snake_case field names are also accepted."""
        config = ClusterConfig.model_validate(
            {"node_pools": {"workers": {"count": 2, "auto_scaling": True}}}
        )

        assert config.node_pools["workers"].auto_scaling is True

    def test_unknown_field_rejected(self) -> None:
        """Typos in configuration keys are reported."""
        with pytest.raises(ValidationError):
            ClusterConfig.model_validate({"nodepools": {}})

    def test_dump_uses_camel_case(self) -> None:
        """Serialization emits lowerCamelCase keys."""
        config = ClusterConfig(
            providers=ProvidersConfig(
                digitalocean=DigitalOceanProvider(token="t", ssh_keys=["k1"])
            )
        )

        payload = config.model_dump(by_alias=True)

        assert payload["providers"]["digitalocean"]["sshKeys"] == ["k1"]
        assert "nodePools" in payload
