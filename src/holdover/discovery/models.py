"""
Data models for discovered deployment units.

A deployment unit is one stack laid down by the legacy deployment engine,
tagged with the phase of the rollout in which it was created. These records
are produced by discovery and only ever read by the adoption engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Tuple


@dataclass(frozen=True)
class DiscoveredResource:
    """One provisioned resource as reported by the legacy stack."""

    resource_type: str
    logical_id: str
    physical_id: str
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @property
    def tags(self) -> List[Tuple[str, Any]]:
        """
        (key, value) pairs from ``Properties.Tags``, in declared order.

        Values are returned as found; template intrinsics such as
        ``{"Fn::Join": ...}`` are not resolved.
        """
        properties = self.metadata.get("Properties")
        if not isinstance(properties, Mapping):
            return []
        raw_tags = properties.get("Tags")
        if not isinstance(raw_tags, list):
            return []
        return [
            (tag["Key"], tag["Value"])
            for tag in raw_tags
            if isinstance(tag, Mapping) and "Key" in tag and "Value" in tag
        ]


@dataclass(frozen=True)
class DeploymentUnitInfo:
    """A previously deployed stack and its resource inventory."""

    name: str
    phase: int
    resources: Tuple[DiscoveredResource, ...] = ()

    def __post_init__(self) -> None:
        # callers may hand in a list; store it immutably
        object.__setattr__(self, "resources", tuple(self.resources))
