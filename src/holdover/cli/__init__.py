"""
CLI commands for Holdover.
"""

from holdover.cli.adopt import adopt_command, list_handlers_command

__all__ = [
    "adopt_command",
    "list_handlers_command",
]
