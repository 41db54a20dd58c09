"""
Registry of adopted resources.

Records are keyed by (resource type, instance name). Within one processing
pass a key may be registered once; a later pass (or a later run seeded from
a dumped registry) may register it again with the same physical identifier.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple

import structlog

from holdover.config.customizations import ConfiguredResourceEntry
from holdover.core.errors import (
    ConfigurationError,
    DuplicateRegistrationError,
    ParameterConflictError,
)

logger = structlog.get_logger()

RegistryKey = Tuple[str, str]


@dataclass(frozen=True)
class AdoptionRecord:
    """(resource type, name) -> physical identifier."""

    resource_type: str
    name: str
    physical_id: str
    # informational, not persisted
    canonical_name: Optional[str] = field(default=None, compare=False)
    config_entry: Optional[ConfiguredResourceEntry] = field(default=None, compare=False)
    resource_handle: Any = field(default=None, compare=False, repr=False)

    @property
    def key(self) -> RegistryKey:
        return (self.resource_type, self.name)

    def to_dict(self) -> Dict[str, str]:
        return {
            "resourceType": self.resource_type,
            "name": self.name,
            "physicalId": self.physical_id,
        }


class AdoptionRegistry:
    """Append-only registry of adoption records."""

    def __init__(self, records: Optional[Iterable[AdoptionRecord]] = None) -> None:
        self._records: Dict[RegistryKey, AdoptionRecord] = {}
        self._pass_keys: Set[RegistryKey] = set()
        for record in records or []:
            self._records[record.key] = record

    def begin_pass(self) -> None:
        """Start a new processing pass; earlier keys become re-registrable."""
        self._pass_keys.clear()

    def register(self, resource_type: str, name: str, physical_id: str) -> AdoptionRecord:
        key = (resource_type, name)
        if key in self._pass_keys:
            raise DuplicateRegistrationError(resource_type, name)

        existing = self._records.get(key)
        if existing is not None and existing.physical_id != physical_id:
            raise ParameterConflictError(
                f"{resource_type}/{name}", existing.physical_id, physical_id
            )

        self._pass_keys.add(key)
        if existing is not None:
            return existing

        record = AdoptionRecord(resource_type=resource_type, name=name, physical_id=physical_id)
        self._records[key] = record
        return record

    def get(self, resource_type: str, name: str) -> Optional[AdoptionRecord]:
        return self._records.get((resource_type, name))

    def records(self) -> List[AdoptionRecord]:
        return list(self._records.values())

    def names(self, resource_type: str) -> List[str]:
        return [name for (rtype, name) in self._records if rtype == resource_type]

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __iter__(self) -> Iterator[AdoptionRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def dump(self, path: str | Path) -> Path:
        """Persist records as JSON."""
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        payload = {"records": [r.to_dict() for r in self._records.values()]}
        out.write_text(json.dumps(payload, indent=2) + "\n")
        logger.debug("registry_dumped", path=str(out), records=len(self._records))
        return out

    @classmethod
    def load(cls, path: str | Path) -> "AdoptionRegistry":
        """Load a registry dumped by an earlier run; a missing file is empty."""
        src = Path(path)
        if not src.exists():
            return cls()

        try:
            data = json.loads(src.read_text())
            records = [
                AdoptionRecord(
                    resource_type=raw["resourceType"],
                    name=raw["name"],
                    physical_id=raw["physicalId"],
                )
                for raw in data.get("records", [])
            ]
        except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
            raise ConfigurationError(
                f"Unreadable adoption registry {src}: {e}", details={"path": str(src)}
            ) from e

        logger.debug("registry_loaded", path=str(src), records=len(records))
        return cls(records)
