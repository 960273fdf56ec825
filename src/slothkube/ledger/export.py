"""Render stored stack outputs for export."""

from __future__ import annotations

import json
from enum import Enum

import yaml

from slothkube.ledger.state import StackOutputs
from slothkube.lib.errors import ExportError


class ExportFormat(str, Enum):
    """Supported export formats."""

    MANIFEST = "manifest"
    JSON = "json"
    YAML = "yaml"
    META = "meta"


def _require(value: str, what: str) -> str:
    if not value:
        raise ExportError(f"No stored {what} found in stack outputs")
    return value


def export_config(outputs: StackOutputs, fmt: ExportFormat | str) -> str:
    """Render a stack's stored outputs in the requested format.

    Args:
        outputs: Stored outputs of a stack
        fmt: One of ``manifest``, ``json``, ``yaml`` or ``meta``

    Returns:
        The rendered text

    Raises:
        ExportError: If the format is unknown or the needed output is missing
    """
    try:
        export_format = ExportFormat(fmt)
    except ValueError as exc:
        supported = ", ".join(f.value for f in ExportFormat)
        raise ExportError(
            f"Unknown format: {fmt} (supported: {supported})"
        ) from exc

    if export_format == ExportFormat.MANIFEST:
        return _require(outputs.manifest, "manifest")

    if export_format == ExportFormat.JSON:
        return _require(outputs.config_json, "JSON config")

    if export_format == ExportFormat.YAML:
        raw = _require(outputs.config_json, "JSON config")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ExportError(f"Stored JSON config is invalid: {exc}") from exc
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)

    raw = _require(outputs.deployment_meta, "deployment metadata")
    # Unparseable metadata is shown as stored
    try:
        return json.dumps(json.loads(raw), indent=2)
    except json.JSONDecodeError:
        return raw
