"""Diagnostic model: structured findings from registry and style checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about a parsed class string.

    Attributes:
        rule: Identifier for the check that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        component: The registry component involved, if applicable.
        origin: Where in the component the class string came from
            (e.g. ``props.variant.classes.primary``), if applicable.
        token: The raw class token involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    component: str | None = None
    origin: str | None = None
    token: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.component and self.origin:
            location = f" [{self.component}.{self.origin}]"
        elif self.component:
            location = f" [{self.component}]"
        return f"{self.severity.value}{location}: {self.message}"
