"""Orchestration package: per-type adoption handlers and the run engine."""

from holdover.orchestration.engine import AdoptionEngine
from holdover.orchestration.handlers import FirewallInstanceHandler, register_default_handlers
from holdover.orchestration.registry import (
    AdoptionContext,
    HandlerRegistry,
    ResourceHandler,
    ResourceStore,
)
from holdover.orchestration.results import (
    AdoptionRunResult,
    PassOutcome,
    PassStatus,
    ResultCollector,
)

__all__ = [
    "AdoptionContext",
    "AdoptionEngine",
    "AdoptionRunResult",
    "FirewallInstanceHandler",
    "HandlerRegistry",
    "PassOutcome",
    "PassStatus",
    "ResourceHandler",
    "ResourceStore",
    "ResultCollector",
    "register_default_handlers",
]
