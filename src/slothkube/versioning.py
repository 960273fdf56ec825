"""Ledger schema versions and build version stamps."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SchemaVersion(str, Enum):
    """Schema versions of the persisted deployment ledger."""

    V1 = "1.0"
    # Adds manifest tracking: checksums, snapshot ids, config version chain
    V2 = "2.0"


CURRENT_SCHEMA = SchemaVersion.V2


class BuildInfo(BaseModel):
    """Version stamps written into every deployment record.

    Attributes:
        system_version: Version of the orchestrator that produced the record
        engine_version: Version of the underlying provisioning engine
        schema_version: Ledger schema version
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    system_version: str = Field(..., description="Orchestrator version")
    engine_version: str = Field(..., description="Provisioning engine version")
    schema_version: str = Field(
        default=CURRENT_SCHEMA.value, description="Ledger schema version"
    )
