"""
Unified error handling for Holdover.

Every failure the adoption engine can raise derives from HoldoverError and
carries an exit code, so the CLI and any embedding orchestrator can decide
whether to stop the run or move on to the next deployment unit.

Exit Codes:
- 0: Success
- 1: Completed with errors (some passes failed, run continued)
- 10: Configuration error
- 11: Discovery error (malformed inventory input)
- 12: Adoption error (missing tag, duplicate registration, parameter conflict)
- 127: Unknown/internal error
"""

from __future__ import annotations

import functools
import sys
import traceback
from enum import IntEnum
from typing import Any, Callable, TypeVar

import structlog

logger = structlog.get_logger()


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands."""

    SUCCESS = 0
    PARTIAL_FAILURE = 1
    CONFIG_ERROR = 10
    DISCOVERY_ERROR = 11
    ADOPTION_ERROR = 12
    UNKNOWN_ERROR = 127


class HoldoverError(Exception):
    """Base exception for Holdover errors with exit code support."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR
    show_traceback: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(HoldoverError):
    """Raised for configuration-related errors."""

    exit_code = ExitCode.CONFIG_ERROR


class DiscoveryError(HoldoverError):
    """Raised when a deployment-unit inventory cannot be read."""

    exit_code = ExitCode.DISCOVERY_ERROR


class AdoptionError(HoldoverError):
    """Base for failures that abort an adoption pass."""

    exit_code = ExitCode.ADOPTION_ERROR


class MissingTagError(AdoptionError):
    """A discovered resource does not carry the expected tag."""

    def __init__(self, logical_id: str, tag_name: str):
        super().__init__(
            f"Resource {logical_id} has no '{tag_name}' tag",
            details={"logical_id": logical_id, "tag": tag_name},
        )
        self.logical_id = logical_id
        self.tag_name = tag_name


class InvalidTagError(AdoptionError):
    """A tag is present but its value is not a plain string."""

    def __init__(self, logical_id: str, tag_name: str, value: object):
        super().__init__(
            f"Resource {logical_id} tag '{tag_name}' is not a string: {value!r}",
            details={"logical_id": logical_id, "tag": tag_name},
        )
        self.logical_id = logical_id
        self.tag_name = tag_name
        self.value = value


class DuplicateRegistrationError(AdoptionError):
    """The same (resource type, name) key was registered twice in one pass."""

    show_traceback = True

    def __init__(self, resource_type: str, name: str):
        super().__init__(
            f"{resource_type} '{name}' already registered in this pass",
            details={"resource_type": resource_type, "name": name},
        )
        self.resource_type = resource_type
        self.name = name


class ParameterConflictError(AdoptionError):
    """A key already maps to a different physical identifier."""

    def __init__(self, key: str, existing: str, attempted: str):
        super().__init__(
            f"{key} already holds '{existing}', refusing to overwrite with '{attempted}'",
            details={"key": key, "existing": existing, "attempted": attempted},
        )
        self.key = key
        self.existing = existing
        self.attempted = attempted


# Type variable for decorated functions
F = TypeVar("F", bound=Callable[..., int])


def main_with_error_handling(
    *,
    show_traceback: bool = False,
    log_errors: bool = True,
) -> Callable[[F], F]:
    """
    Decorator for CLI commands that maps exceptions onto exit codes.

    Args:
        show_traceback: If True, show full traceback for unexpected errors
        log_errors: If True, log errors to structlog

    Exit codes:
        - HoldoverError subclasses: Uses the error's exit_code
        - KeyboardInterrupt: Returns 130 (standard for SIGINT)
        - Other exceptions: Returns 127 (unknown error)
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            try:
                return func(*args, **kwargs)
            except HoldoverError as e:
                if log_errors:
                    logger.error(
                        "command_error",
                        error_type=type(e).__name__,
                        message=e.message,
                        exit_code=e.exit_code,
                        **e.details,
                    )
                if e.show_traceback or show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return e.exit_code
            except KeyboardInterrupt:
                if log_errors:
                    logger.info("command_interrupted")
                return 130
            except Exception as e:
                if log_errors:
                    logger.error(
                        "unexpected_error",
                        error_type=type(e).__name__,
                        message=str(e),
                        exit_code=ExitCode.UNKNOWN_ERROR,
                    )
                if show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return ExitCode.UNKNOWN_ERROR

        return wrapper  # type: ignore[return-value]

    return decorator


def format_error_message(error: HoldoverError) -> str:
    """Format an error message for display to users."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg
