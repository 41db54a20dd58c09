"""
Customizations file loading.

The customizations document is the declarative model that adopted resources
are reconciled against. Only the sections holdover understands are read;
everything else in the file is ignored.

    firewalls:
      instances:
        - name: fw-edge
          vpc: Perimeter
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Tuple

import structlog
import yaml

from holdover.config.customizations import (
    FIREWALL_INSTANCES,
    AdoptionConfig,
    ConfiguredResourceEntry,
)
from holdover.core.errors import ConfigurationError

logger = structlog.get_logger()

# category key -> path of nested keys inside the customizations document
CATEGORY_PATHS: Dict[str, Tuple[str, ...]] = {
    FIREWALL_INSTANCES: ("firewalls", "instances"),
}


def load_config(path: str | Path) -> AdoptionConfig:
    """Load an AdoptionConfig from a customizations YAML file."""
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            details={"path": str(config_path)},
        )

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in {config_path}: {e}", details={"path": str(config_path)}
        ) from e

    config = parse_config({} if data is None else data, source=str(config_path))
    logger.debug(
        "config_loaded",
        path=str(config_path),
        categories={k: len(v) for k, v in config.categories.items()},
    )
    return config


def parse_config(data: Any, source: str = "<memory>") -> AdoptionConfig:
    """Build an AdoptionConfig from an already-parsed document."""
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Customizations document must be a mapping", details={"source": source}
        )

    categories: Dict[str, List[ConfiguredResourceEntry]] = {}
    for category, keys in CATEGORY_PATHS.items():
        raw_entries = _dig(data, keys)
        if raw_entries is None:
            continue
        if not isinstance(raw_entries, list):
            raise ConfigurationError(
                f"'{'.'.join(keys)}' must be a list",
                details={"source": source, "category": category},
            )
        categories[category] = [
            _parse_entry(raw, category, source) for raw in raw_entries
        ]

    return AdoptionConfig(categories=categories)


def _dig(data: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    node: Any = data
    for key in keys:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
        if node is None:
            return None
    return node


def _parse_entry(raw: Any, category: str, source: str) -> ConfiguredResourceEntry:
    if not isinstance(raw, dict) or not isinstance(raw.get("name"), str):
        raise ConfigurationError(
            f"Every {category} entry needs a string 'name'",
            details={"source": source, "category": category},
        )
    attributes = {k: v for k, v in raw.items() if k != "name"}
    return ConfiguredResourceEntry(name=raw["name"], attributes=attributes)


