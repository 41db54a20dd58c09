"""Typed view over the declarative customizations configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

FIREWALL_INSTANCES = "firewall-instances"


@dataclass(frozen=True)
class ConfiguredResourceEntry:
    """A declared configuration record, identified by its user-assigned name."""

    name: str
    attributes: Dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass
class AdoptionConfig:
    """Resource-category key -> ordered list of declared entries."""

    categories: Dict[str, List[ConfiguredResourceEntry]] = field(default_factory=dict)

    def entries(self, category: str) -> List[ConfiguredResourceEntry]:
        """Entries for a category; an absent category is empty."""
        return list(self.categories.get(category) or [])


def entries_for(config: Optional[AdoptionConfig], category: str) -> List[ConfiguredResourceEntry]:
    if config is None:
        return []
    return config.entries(category)
