"""Text encoding of ledger records and sanitized configurations.

Decoding the previous record is lenient: it comes from an external state store
and may be empty, from an older schema, or corrupt, and every such case is
treated as "no previous deployment". Encoding is strict: an output that cannot
be serialized raises instead of being replaced by a placeholder.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from slothkube.lib.errors import LedgerSerializationError
from slothkube.models.cluster import ClusterConfig
from slothkube.models.deployment_state import DeploymentRecord

logger = logging.getLogger(__name__)


def parse_previous_record(text: str | None) -> DeploymentRecord:
    """Decode a serialized deployment record, never raising.

    Args:
        text: JSON text of the previous record; may be empty or malformed

    Returns:
        The decoded record, or a zero-valued record if decoding fails
    """
    if not text or not text.strip():
        return DeploymentRecord()

    try:
        return DeploymentRecord.model_validate_json(text)
    except (ValidationError, ValueError) as exc:
        logger.debug(f"Previous deployment record unreadable, starting fresh: {exc}")
        return DeploymentRecord()


def _dump(model: BaseModel, what: str) -> str:
    try:
        return model.model_dump_json(by_alias=True, indent=2)
    except (PydanticSerializationError, ValueError, TypeError) as exc:
        raise LedgerSerializationError(f"Failed to serialize {what}: {exc}") from exc


def serialize_record(record: DeploymentRecord) -> str:
    """Encode a deployment record as indented lowerCamelCase JSON.

    Raises:
        LedgerSerializationError: If the record cannot be encoded
    """
    return _dump(record, "deployment record")


def serialize_config(config: ClusterConfig) -> str:
    """Encode a cluster configuration as indented lowerCamelCase JSON.

    Raises:
        LedgerSerializationError: If the configuration cannot be encoded
    """
    return _dump(config, "cluster configuration")
