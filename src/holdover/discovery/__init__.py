"""Discovered deployment units and their inventory loader."""

from holdover.discovery.loader import load_inventory, parse_unit
from holdover.discovery.models import DeploymentUnitInfo, DiscoveredResource

__all__ = [
    "DeploymentUnitInfo",
    "DiscoveredResource",
    "load_inventory",
    "parse_unit",
]
