"""
Diagnostics sink for adoption passes.

Handlers report what they did (or why they did nothing) as leveled messages.
Entries are kept for the caller and echoed to structlog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

import structlog

logger = structlog.get_logger()


class LogLevel(str, Enum):
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


@dataclass(frozen=True)
class DiagnosticEntry:
    level: LogLevel
    message: str


@dataclass
class DiagnosticLog:
    """Collects diagnostic entries emitted during adoption."""

    entries: List[DiagnosticEntry] = field(default_factory=list)

    def log(self, level: LogLevel | str, message: str) -> None:
        level = LogLevel(level)
        self.entries.append(DiagnosticEntry(level=level, message=message))
        if level is LogLevel.ERROR:
            logger.error("adoption_diagnostic", message=message)
        elif level is LogLevel.WARN:
            logger.warning("adoption_diagnostic", message=message)
        else:
            logger.info("adoption_diagnostic", message=message)

    def at_level(self, level: LogLevel | str) -> List[DiagnosticEntry]:
        level = LogLevel(level)
        return [e for e in self.entries if e.level is level]
