"""Execution engine for adoption runs."""

import time
from typing import Iterable, List, Optional

import structlog

from holdover.adoption.phase import phase_gate
from holdover.config.customizations import AdoptionConfig
from holdover.core.errors import HoldoverError
from holdover.discovery.models import DeploymentUnitInfo
from holdover.logging import bind_context
from holdover.orchestration.registry import HandlerRegistry
from holdover.orchestration.results import AdoptionRunResult, ResultCollector

logger = structlog.get_logger()


class AdoptionEngine:
    """Runs every registered handler over every deployment unit."""

    def __init__(self, handlers: HandlerRegistry) -> None:
        self._handlers = handlers

    def run(
        self,
        units: Iterable[DeploymentUnitInfo],
        config: Optional[AdoptionConfig] = None,
        only: Optional[List[str]] = None,
        fail_fast: bool = False,
    ) -> AdoptionRunResult:
        """
        Execute one pass per (handler, unit), collecting outcomes.

        A failing pass keeps whatever it already published. With ``fail_fast``
        the error propagates; otherwise it is recorded and the run moves on.
        """
        start = time.monotonic()
        collector = ResultCollector()
        names = only if only is not None else self._handlers.list()

        for unit in units:
            log = bind_context(stack=unit.name, phase=unit.phase)
            for name in names:
                handler = self._handlers.get(name)
                if handler is None:
                    continue

                try:
                    records = handler.handle(unit, config)
                except HoldoverError as e:
                    log.error(
                        "adoption_pass_failed",
                        handler=name,
                        display_name=handler.display_name,
                        error_type=type(e).__name__,
                        message=e.message,
                    )
                    if fail_fast:
                        raise
                    collector.record_error(name, unit.name, e)
                    continue

                if phase_gate(unit.phase, handler.expected_phase):
                    collector.record(name, unit.name, records)
                else:
                    collector.record_skip(name, unit.name)

        result = collector.finalize(time.monotonic() - start)
        logger.info(
            "adoption_run_finished",
            adopted=len(result.records),
            skipped=result.skipped,
            errors=len(result.errors),
        )
        return result
