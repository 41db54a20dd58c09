"""Configuration matching for adopted resources."""

from __future__ import annotations

from typing import Optional, Sequence

from holdover.config.customizations import ConfiguredResourceEntry


def match_config_entry(
    name: str, entries: Optional[Sequence[ConfiguredResourceEntry]]
) -> Optional[ConfiguredResourceEntry]:
    """
    Find the declared entry for a canonical name.

    Comparison is exact (no case folding, no prefix matching). If several
    entries share the name the first one wins.

    Returns:
        The matching entry, or None when nothing matches or ``entries`` is None
    """
    if not entries:
        return None
    for entry in entries:
        if entry.name == name:
            return entry
    return None
