"""Tests for the slothkube exception hierarchy."""

import pytest

from slothkube.lib.errors import (
    ConfigError,
    ExportError,
    FileNotFoundError,
    LedgerError,
    LedgerSerializationError,
    SanitizationError,
    SlothKubeError,
)


class TestConfigError:
    """Tests for ConfigError exception."""

    def test_config_error_message_includes_field(self) -> None:
        """Test ConfigError names the offending field."""
        error = ConfigError("nodePools.workers", "min_count exceeds max_count")
        assert "nodePools.workers" in str(error)
        assert error.field == "nodePools.workers"
        assert error.message == "min_count exceeds max_count"

    def test_config_error_is_slothkube_error(self) -> None:
        """Test that ConfigError is a SlothKubeError subclass."""
        assert isinstance(ConfigError("f", "m"), SlothKubeError)


class TestFileNotFoundError:
    """Tests for FileNotFoundError exception."""

    def test_file_not_found_error_with_path(self) -> None:
        """Test FileNotFoundError includes file path."""
        path = "/path/to/cluster.yaml"
        error = FileNotFoundError(path, "Cluster configuration file not found")
        assert path in str(error)
        assert error.path == path

    def test_file_not_found_error_is_slothkube_error(self) -> None:
        """Test that FileNotFoundError is a SlothKubeError subclass."""
        error = FileNotFoundError("missing.yaml", "Not found")
        assert isinstance(error, SlothKubeError)


class TestLedgerErrors:
    """Tests for ledger exceptions."""

    def test_ledger_error_message(self) -> None:
        """Test LedgerError names the failed operation."""
        error = LedgerError("state", "disk full")
        assert str(error) == "Ledger state failed: disk full"
        assert error.operation == "state"

    @pytest.mark.parametrize(
        ("error_cls", "operation"),
        [
            (LedgerSerializationError, "serialize"),
            (SanitizationError, "sanitize"),
            (ExportError, "export"),
        ],
    )
    def test_specialised_errors(
        self, error_cls: type[LedgerError], operation: str
    ) -> None:
        """Test specialised ledger errors carry their operation."""
        error = error_cls("boom")  # type: ignore[call-arg]
        assert isinstance(error, LedgerError)
        assert isinstance(error, SlothKubeError)
        assert error.operation == operation
        assert "boom" in str(error)
