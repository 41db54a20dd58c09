"""Inventory filtering by resource type."""

from __future__ import annotations

from typing import Iterable, List

from holdover.discovery.models import DiscoveredResource


def filter_resources_by_type(
    resources: Iterable[DiscoveredResource], resource_type: str
) -> List[DiscoveredResource]:
    """Resources whose type equals ``resource_type``, in input order."""
    return [r for r in resources if r.resource_type == resource_type]
