"""Diagnostic reporting for recoverable problems."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class Severity(str, Enum):
    """Severity of a reported problem."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


_LEVELS = {
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


class DiagnosticSink(Protocol):
    """Receives problems that were handled without aborting an operation."""

    def report(self, severity: Severity, message: str) -> None:
        """Record a problem."""


@dataclass
class LoggingDiagnosticSink(DiagnosticSink):
    """Forwards diagnostics to a standard library logger."""

    logger: logging.Logger = field(
        default_factory=lambda: logging.getLogger("salad_catalog.diagnostics")
    )

    def report(self, severity: Severity, message: str) -> None:
        """Log the problem at the matching level."""
        self.logger.log(_LEVELS[severity], message)
