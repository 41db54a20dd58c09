"""
Stack inventory loading.

An inventory document describes one stack of the legacy deployment::

    {
      "stackName": "Org-Perimeter-Phase2",
      "phase": 2,
      "resources": [
        {
          "resourceType": "AWS::EC2::Instance",
          "logicalResourceId": "FirewallInstance0",
          "physicalResourceId": "i-0abc",
          "resourceMetadata": {"Properties": {"Tags": [{"Key": "Name", "Value": "fw_az1a"}]}}
        }
      ]
    }

A file may hold a single document or a list of them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import structlog

from holdover.core.errors import DiscoveryError
from holdover.discovery.models import DeploymentUnitInfo, DiscoveredResource

logger = structlog.get_logger()


def load_inventory(path: str | Path) -> List[DeploymentUnitInfo]:
    """Load every deployment unit described in an inventory JSON file."""
    inventory_path = Path(path)
    if not inventory_path.exists():
        raise DiscoveryError(
            f"Inventory file not found: {inventory_path}",
            details={"path": str(inventory_path)},
        )

    try:
        with open(inventory_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DiscoveryError(
            f"Invalid JSON in {inventory_path}: {e}", details={"path": str(inventory_path)}
        ) from e

    documents = data if isinstance(data, list) else [data]
    units = [parse_unit(doc) for doc in documents]
    logger.debug("inventory_loaded", path=str(inventory_path), units=len(units))
    return units


def parse_unit(doc: Any) -> DeploymentUnitInfo:
    """Parse a single stack document into a DeploymentUnitInfo."""
    if not isinstance(doc, dict):
        raise DiscoveryError("Stack document must be an object")

    name = doc.get("stackName")
    phase = doc.get("phase")
    if not isinstance(name, str) or not name:
        raise DiscoveryError("Stack document is missing 'stackName'")
    if isinstance(phase, bool) or not isinstance(phase, int):
        raise DiscoveryError(
            f"Stack {name} has no integer 'phase'", details={"stack": name}
        )

    raw_resources = doc.get("resources") or []
    if not isinstance(raw_resources, list):
        raise DiscoveryError(
            f"Stack {name} 'resources' must be a list", details={"stack": name}
        )

    resources = [_parse_resource(raw, name) for raw in raw_resources]
    return DeploymentUnitInfo(name=name, phase=phase, resources=tuple(resources))


def _parse_resource(raw: Any, stack_name: str) -> DiscoveredResource:
    if not isinstance(raw, dict):
        raise DiscoveryError(
            f"Resource entry in {stack_name} must be an object", details={"stack": stack_name}
        )

    missing = [
        key
        for key in ("resourceType", "logicalResourceId", "physicalResourceId")
        if not isinstance(raw.get(key), str)
    ]
    if missing:
        raise DiscoveryError(
            f"Resource in {stack_name} is missing {', '.join(missing)}",
            details={"stack": stack_name, "logical_id": raw.get("logicalResourceId")},
        )

    metadata = _parse_metadata(raw.get("resourceMetadata"), raw["logicalResourceId"], stack_name)
    return DiscoveredResource(
        resource_type=raw["resourceType"],
        logical_id=raw["logicalResourceId"],
        physical_id=raw["physicalResourceId"],
        metadata=metadata,
    )


def _parse_metadata(raw: Any, logical_id: str, stack_name: str) -> Dict[str, Any]:
    """Require mapping metadata, mapping Properties and list Tags when present."""
    details = {"stack": stack_name, "logical_id": logical_id}
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise DiscoveryError(
            f"Resource {logical_id} in {stack_name}: 'resourceMetadata' must be an object",
            details=details,
        )

    properties = raw.get("Properties")
    if properties is None:
        return raw
    if not isinstance(properties, dict):
        raise DiscoveryError(
            f"Resource {logical_id} in {stack_name}: 'Properties' must be an object",
            details=details,
        )

    tags = properties.get("Tags")
    if tags is not None and not isinstance(tags, list):
        raise DiscoveryError(
            f"Resource {logical_id} in {stack_name}: 'Tags' must be a list",
            details=details,
        )
    return raw
