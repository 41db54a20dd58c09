"""
CLI command for adopting legacy-deployed resources.
"""

import json
from pathlib import Path
from typing import List, Optional

from holdover.adoption.parameters import (
    ParameterPaths,
    TemplateParameterStore,
    create_parameter_store,
)
from holdover.adoption.registry import AdoptionRegistry
from holdover.cli.ux import console, error, header, print_table, success, warning
from holdover.config.loader import load_config
from holdover.config.settings import get_settings
from holdover.core.errors import ExitCode, main_with_error_handling
from holdover.discovery.loader import load_inventory
from holdover.orchestration import (
    AdoptionContext,
    AdoptionEngine,
    AdoptionRunResult,
    HandlerRegistry,
    register_default_handlers,
)


def print_adopt_summary(result: AdoptionRunResult, verbose: bool = False) -> None:
    """Print adoption summary with rich formatting."""
    header("Adoption")

    if result.records:
        rows = [
            [
                r.resource_type,
                r.name,
                r.physical_id,
                r.canonical_name or "",
                "yes" if r.config_entry else "no",
            ]
            for r in result.records
        ]
        print_table(
            "Adopted resources",
            ["Type", "Name", "Physical ID", "Canonical", "Configured"],
            rows,
        )
    else:
        warning("No resources adopted")

    if verbose:
        for outcome in result.outcomes:
            console.print(
                f"  [muted]•[/muted] {outcome.handler} / {outcome.unit}: {outcome.status.value}"
            )

    console.print()
    if result.success:
        success(f"Adopted {len(result.records)} resources ({result.skipped} passes skipped)")
    else:
        error(f"Adopted {len(result.records)} resources with errors")
        for err in result.errors:
            console.print(f"  [dim]•[/dim] {err}")
    console.print()


def print_adopt_json(result: AdoptionRunResult) -> None:
    """Print adoption result in JSON format."""
    output = {
        "adopted": [
            dict(
                r.to_dict(),
                canonicalName=r.canonical_name,
                configured=r.config_entry is not None,
            )
            for r in result.records
        ],
        "adopted_by_handler": result.adopted_by_handler,
        "skipped": result.skipped,
        "errors": result.errors,
        "duration_seconds": result.duration_seconds,
        "success": result.success,
    }
    print(json.dumps(output, indent=2))


@main_with_error_handling()
def adopt_command(
    inventory: str,
    config_file: Optional[str] = None,
    backend: Optional[str] = None,
    template_out: Optional[str] = None,
    registry_file: Optional[str] = None,
    only: Optional[List[str]] = None,
    fail_fast: bool = False,
    verbose: bool = False,
    output_format: str = "text",
) -> int:
    """
    Adopt resources from a stack inventory.

    Args:
        inventory: Path to the stack inventory JSON
        config_file: Path to the customizations YAML
        backend: Parameter backend (memory, ssm, template); defaults to settings
        template_out: Where to write the parameter template (template backend)
        registry_file: Adoption registry JSON, read before and written after the run
        only: Only run these handlers
        fail_fast: Stop at the first failing pass
        verbose: Show per-pass outcomes
        output_format: Output format (text, json)

    Returns:
        Exit code
    """
    settings = get_settings()

    units = load_inventory(inventory)
    config = load_config(config_file) if config_file else None

    registry = AdoptionRegistry.load(registry_file) if registry_file else AdoptionRegistry()
    store = create_parameter_store(backend or settings.parameter_backend, settings.aws_region)
    ctx = AdoptionContext(
        parameter_store=store,
        registry=registry,
        paths=ParameterPaths(settings.parameter_prefix),
        name_tag=settings.name_tag,
        zone_marker=settings.zone_marker,
    )

    handlers = HandlerRegistry()
    register_default_handlers(handlers, ctx)
    result = AdoptionEngine(handlers).run(
        units, config, only=only, fail_fast=fail_fast
    )

    if registry_file:
        registry.dump(registry_file)
    if isinstance(store, TemplateParameterStore):
        store.write(template_out or Path("holdover-parameters.json"))

    if output_format == "json":
        print_adopt_json(result)
    else:
        print_adopt_summary(result, verbose=verbose)

    return ExitCode.SUCCESS if result.success else ExitCode.PARTIAL_FAILURE


def list_handlers_command() -> int:
    """List the built-in resource handlers."""
    handlers = HandlerRegistry()
    ctx = AdoptionContext(parameter_store=create_parameter_store("memory"))
    register_default_handlers(handlers, ctx)

    rows = []
    for name in handlers.list():
        handler = handlers.get(name)
        rows.append(
            [name, handler.display_name, handler.resource_type, str(handler.expected_phase)]
        )
    print_table(
        "Resource handlers", ["Handler", "Description", "Resource type", "Phase"], rows
    )
    return 0
