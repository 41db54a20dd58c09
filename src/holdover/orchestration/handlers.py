"""Concrete resource handlers for adoption."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

import structlog

from holdover.adoption.diagnostics import LogLevel
from holdover.adoption.filters import filter_resources_by_type
from holdover.adoption.matching import match_config_entry
from holdover.adoption.naming import canonical_name, instance_name_from_tags
from holdover.adoption.parameters import AdoptedResourceType
from holdover.adoption.phase import phase_gate
from holdover.adoption.registry import AdoptionRecord
from holdover.config.customizations import FIREWALL_INSTANCES, AdoptionConfig, entries_for
from holdover.discovery.models import DeploymentUnitInfo
from holdover.orchestration.registry import AdoptionContext, HandlerRegistry

logger = structlog.get_logger()

EC2_FIREWALL_INSTANCE_TYPE = "AWS::EC2::Instance"
PHASE_NUMBER_FIREWALL_INSTANCE = 2


class FirewallInstanceHandler:
    """
    Adopts EC2 firewall instances.

    The legacy engine deploys every firewall instance in phase 2, one per
    availability zone, each Name-tagged with a zone suffix.
    """

    def __init__(self, ctx: AdoptionContext) -> None:
        self._ctx = ctx

    @property
    def name(self) -> str:
        return FIREWALL_INSTANCES

    @property
    def display_name(self) -> str:
        return "firewall instances"

    @property
    def resource_type(self) -> str:
        return EC2_FIREWALL_INSTANCE_TYPE

    @property
    def expected_phase(self) -> int:
        return PHASE_NUMBER_FIREWALL_INSTANCE

    def handle(
        self, unit: DeploymentUnitInfo, config: Optional[AdoptionConfig]
    ) -> List[AdoptionRecord]:
        ctx = self._ctx
        if not phase_gate(unit.phase, self.expected_phase):
            ctx.diagnostics.log(
                LogLevel.INFO,
                f"No {EC2_FIREWALL_INSTANCE_TYPE}s to handle in stack {unit.name}",
            )
            return []

        ctx.registry.begin_pass()
        existing_instances = filter_resources_by_type(unit.resources, self.resource_type)
        config_instances = entries_for(config, FIREWALL_INSTANCES)

        adopted: List[AdoptionRecord] = []
        for resource in existing_instances:
            instance_name = instance_name_from_tags(resource, ctx.name_tag)
            base_name = canonical_name(instance_name, ctx.zone_marker)
            config_entry = match_config_entry(base_name, config_instances)
            handle = ctx.lookup_resource(resource.logical_id)

            record = ctx.registrar.adopt(
                AdoptedResourceType.FIREWALL_INSTANCE, instance_name, resource.physical_id
            )
            adopted.append(
                replace(
                    record,
                    canonical_name=base_name,
                    config_entry=config_entry,
                    resource_handle=handle,
                )
            )
            if config_entry is None:
                logger.debug("firewall_instance_unconfigured", name=instance_name, stack=unit.name)

        logger.info("firewall_instances_adopted", stack=unit.name, count=len(adopted))
        return adopted


def register_default_handlers(registry: HandlerRegistry, ctx: AdoptionContext) -> None:
    """Register all built-in resource handlers."""
    registry.register(FirewallInstanceHandler(ctx))
