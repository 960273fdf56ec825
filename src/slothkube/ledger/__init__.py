"""Deployment ledger.

Builds a versioned, tamper-detectable record after every cluster apply and
stores a redacted copy of the configuration next to it.
"""

from slothkube.ledger.builder import (
    DeploymentMetadataBuilder,
    classify_scale_operation,
    generate_deployment_metadata,
    make_deployment_id,
    make_state_snapshot_id,
)
from slothkube.ledger.checksum import (
    ChecksumAlgorithm,
    get_checksum_algorithm,
    legacy_checksum,
    sha256_checksum,
)
from slothkube.ledger.clock import Clock, FixedClock, SystemClock, format_timestamp
from slothkube.ledger.codec import (
    parse_previous_record,
    serialize_config,
    serialize_record,
)
from slothkube.ledger.export import ExportFormat, export_config
from slothkube.ledger.history import (
    MAX_HISTORY_ENTRIES,
    history_entry_from_record,
    prepend_history,
)
from slothkube.ledger.lineage import LineageVerificationResult, verify_lineage
from slothkube.ledger.sanitizer import sanitize_config_for_storage
from slothkube.ledger.state import (
    StackOutputs,
    StackState,
    get_stack_outputs,
    get_state_path,
    load_state,
    record_deployment,
    save_state,
)

__all__ = [
    "MAX_HISTORY_ENTRIES",
    "ChecksumAlgorithm",
    "Clock",
    "DeploymentMetadataBuilder",
    "ExportFormat",
    "FixedClock",
    "LineageVerificationResult",
    "StackOutputs",
    "StackState",
    "SystemClock",
    "classify_scale_operation",
    "export_config",
    "format_timestamp",
    "generate_deployment_metadata",
    "get_checksum_algorithm",
    "get_stack_outputs",
    "get_state_path",
    "history_entry_from_record",
    "legacy_checksum",
    "load_state",
    "make_deployment_id",
    "make_state_snapshot_id",
    "parse_previous_record",
    "prepend_history",
    "record_deployment",
    "sanitize_config_for_storage",
    "save_state",
    "serialize_config",
    "serialize_record",
    "sha256_checksum",
    "verify_lineage",
]
