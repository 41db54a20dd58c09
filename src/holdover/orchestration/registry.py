"""Resource handler protocol and registry for adoption."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from holdover.adoption.diagnostics import DiagnosticLog
from holdover.adoption.naming import NAME_TAG, ZONE_MARKER
from holdover.adoption.parameters import ParameterPaths, ParameterStore
from holdover.adoption.registrar import AdoptionRegistrar
from holdover.adoption.registry import AdoptionRecord, AdoptionRegistry
from holdover.config.customizations import AdoptionConfig
from holdover.discovery.models import DeploymentUnitInfo


@runtime_checkable
class ResourceStore(Protocol):
    """Provisioning layer lookup: logical id -> live resource handle."""

    def get_resource(self, logical_id: str) -> Any:
        ...


@dataclass
class AdoptionContext:
    """Shared context passed to all resource handlers."""

    parameter_store: ParameterStore
    registry: AdoptionRegistry = field(default_factory=AdoptionRegistry)
    paths: ParameterPaths = field(default_factory=ParameterPaths)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    resource_store: Optional[ResourceStore] = None
    name_tag: str = NAME_TAG
    zone_marker: str = ZONE_MARKER

    def __post_init__(self) -> None:
        self.registrar = AdoptionRegistrar(self.parameter_store, self.registry, self.paths)

    def lookup_resource(self, logical_id: str) -> Any:
        if self.resource_store is None:
            return None
        return self.resource_store.get_resource(logical_id)


@runtime_checkable
class ResourceHandler(Protocol):
    """Protocol for handlers that adopt one resource type."""

    @property
    def name(self) -> str:
        """Handler identifier (e.g. 'firewall-instances')."""
        ...

    @property
    def display_name(self) -> str:
        """Human-readable name for log messages."""
        ...

    @property
    def resource_type(self) -> str:
        """Inventory type tag this handler adopts."""
        ...

    @property
    def expected_phase(self) -> int:
        """Rollout phase in which the legacy engine creates this type."""
        ...

    def handle(
        self, unit: DeploymentUnitInfo, config: Optional[AdoptionConfig]
    ) -> List[AdoptionRecord]:
        """Adopt this type's resources from one unit as a fresh registry pass."""
        ...


class HandlerRegistry:
    """In-memory registry for resource handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[str, ResourceHandler] = {}

    def register(self, handler: ResourceHandler) -> None:
        """Register a handler by its name."""
        self._handlers[handler.name] = handler

    def get(self, name: str) -> Optional[ResourceHandler]:
        """Get a handler by name."""
        return self._handlers.get(name)

    def for_resource_type(self, resource_type: str) -> List[ResourceHandler]:
        return [h for h in self._handlers.values() if h.resource_type == resource_type]

    def list(self) -> List[str]:
        """List all registered handler names."""
        return list(self._handlers.keys())
