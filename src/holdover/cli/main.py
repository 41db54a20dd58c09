from __future__ import annotations

import argparse
import sys
from typing import Sequence

from holdover.config.settings import get_settings
from holdover.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="holdover",
        description="Adopt resources created by a legacy deployment engine",
    )
    subparsers = parser.add_subparsers(dest="command")

    adopt_parser = subparsers.add_parser(
        "adopt", help="Publish parameters and registry records for legacy resources"
    )
    adopt_parser.add_argument("inventory", help="Path to stack inventory JSON")
    adopt_parser.add_argument("--config", dest="config_file", help="Customizations YAML")
    adopt_parser.add_argument(
        "--backend",
        choices=["memory", "ssm", "template"],
        help="Parameter backend (default: HOLDOVER_PARAMETER_BACKEND or memory)",
    )
    adopt_parser.add_argument("--template-out", help="Output file for the template backend")
    adopt_parser.add_argument(
        "--registry", dest="registry_file", help="Adoption registry JSON (read and updated)"
    )
    adopt_parser.add_argument(
        "--only", nargs="+", help="Only run these handlers (e.g. firewall-instances)"
    )
    adopt_parser.add_argument(
        "--fail-fast", action="store_true", help="Stop at the first failing pass"
    )
    adopt_parser.add_argument("--output", choices=["text", "json"], default="text",
                              help="Output format")
    adopt_parser.add_argument("-v", "--verbose", action="store_true",
                              help="Show per-pass outcomes")

    subparsers.add_parser("handlers", help="List resource handlers")

    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)

    if args.command == "adopt":
        from holdover.cli.adopt import adopt_command

        sys.exit(adopt_command(
            inventory=args.inventory,
            config_file=args.config_file,
            backend=args.backend,
            template_out=args.template_out,
            registry_file=args.registry_file,
            only=args.only,
            fail_fast=args.fail_fast,
            verbose=args.verbose,
            output_format=args.output,
        ))

    if args.command == "handlers":
        from holdover.cli.adopt import list_handlers_command

        sys.exit(list_handlers_command())

    parser.print_help()
    sys.exit(1)


if __name__ == "__main__":
    main()
