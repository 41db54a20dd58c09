"""Publishes adoptions to the parameter store and the registry."""

from __future__ import annotations

import structlog

from holdover.adoption.parameters import AdoptedResourceType, ParameterPaths, ParameterStore
from holdover.adoption.registry import AdoptionRecord, AdoptionRegistry

logger = structlog.get_logger()


class AdoptionRegistrar:
    """Writes the parameter, then records the adoption."""

    def __init__(
        self,
        store: ParameterStore,
        registry: AdoptionRegistry,
        paths: ParameterPaths | None = None,
    ) -> None:
        self.store = store
        self.registry = registry
        self.paths = paths or ParameterPaths()

    def adopt(
        self, resource_type: AdoptedResourceType, name: str, physical_id: str
    ) -> AdoptionRecord:
        """
        Publish one adopted resource.

        Raises:
            ParameterConflictError: path or key already holds another identifier
            DuplicateRegistrationError: key already registered in this pass
        """
        path = self.paths.path(resource_type, name)
        written = self.store.put(path, physical_id)
        record = self.registry.register(resource_type.value, name, physical_id)
        logger.info(
            "resource_adopted",
            resource_type=resource_type.value,
            name=name,
            physical_id=physical_id,
            parameter=path,
            written=written,
        )
        return record
