"""Core modules for Holdover - centralized definitions and utilities."""

from holdover.core.errors import (
    AdoptionError,
    ConfigurationError,
    DiscoveryError,
    DuplicateRegistrationError,
    ExitCode,
    HoldoverError,
    InvalidTagError,
    MissingTagError,
    ParameterConflictError,
    format_error_message,
    main_with_error_handling,
)

__all__ = [
    "ExitCode",
    "HoldoverError",
    "ConfigurationError",
    "DiscoveryError",
    "AdoptionError",
    "MissingTagError",
    "InvalidTagError",
    "DuplicateRegistrationError",
    "ParameterConflictError",
    "main_with_error_handling",
    "format_error_message",
]
