"""
Holdover configuration.

Provides:
- Pydantic-based settings (environment variables, .env files)
- The customizations model that adopted resources are matched against
"""

from holdover.config.customizations import (
    FIREWALL_INSTANCES,
    AdoptionConfig,
    ConfiguredResourceEntry,
)
from holdover.config.loader import load_config, parse_config
from holdover.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "AdoptionConfig",
    "ConfiguredResourceEntry",
    "FIREWALL_INSTANCES",
    "load_config",
    "parse_config",
]
