"""Resource adoption: naming, filtering, gating, matching and publishing."""

from holdover.adoption.diagnostics import DiagnosticEntry, DiagnosticLog, LogLevel
from holdover.adoption.filters import filter_resources_by_type
from holdover.adoption.matching import match_config_entry
from holdover.adoption.naming import (
    NAME_TAG,
    ZONE_MARKER,
    canonical_name,
    get_tag,
    instance_name_from_tags,
)
from holdover.adoption.parameters import (
    AdoptedResourceType,
    InMemoryParameterStore,
    ParameterPaths,
    ParameterStore,
    SsmParameterStore,
    TemplateParameterStore,
    build_parameter_path,
    create_parameter_store,
)
from holdover.adoption.phase import phase_gate
from holdover.adoption.registrar import AdoptionRegistrar
from holdover.adoption.registry import AdoptionRecord, AdoptionRegistry

__all__ = [
    "AdoptedResourceType",
    "AdoptionRecord",
    "AdoptionRegistrar",
    "AdoptionRegistry",
    "DiagnosticEntry",
    "DiagnosticLog",
    "InMemoryParameterStore",
    "LogLevel",
    "NAME_TAG",
    "ParameterPaths",
    "ParameterStore",
    "SsmParameterStore",
    "TemplateParameterStore",
    "ZONE_MARKER",
    "build_parameter_path",
    "canonical_name",
    "create_parameter_store",
    "filter_resources_by_type",
    "get_tag",
    "instance_name_from_tags",
    "match_config_entry",
    "phase_gate",
]
