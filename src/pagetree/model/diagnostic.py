"""Diagnostic model: structured messages reported while parsing or validating."""

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
    """A single finding about the source markup or the produced document.

    Attributes:
        rule: Identifier for the check or parse stage that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        node_id: The output node involved, if applicable.
        kind: The source element kind involved, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    node_id: str | None = None
    kind: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = ""
        if self.node_id:
            location = f" [node={self.node_id}]"
        elif self.kind:
            location = f" [kind={self.kind}]"
        return f"{self.severity.value}{location}: {self.message}"
