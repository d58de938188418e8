"""
Validation Report Data Models

Defines Finding and ValidationReport dataclasses used across the
validation module for structured error/warning reporting.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional


@dataclass(frozen=True)
class Finding:
    """A single rule failure on a single item.

    Attributes:
        is_critical: True if the finding blocks publishing
        message: Human-readable description of the problem
        rule: Name of the rule that produced the finding
    """
    is_critical: bool
    message: str
    rule: str = ""

    @property
    def level(self) -> str:
        return "error" if self.is_critical else "warning"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "rule": self.rule,
            "is_critical": self.is_critical,
            "message": self.message,
        }


@dataclass
class ValidationReport:
    """Structured report from validating one content item.

    Attributes:
        file_path: Path the item was loaded from ("<memory>" if none)
        kind: Item kind (article, book, chapter)
        identifier: Slug, or chapter position, used to label the item
        findings: Findings in rule order
        strict: Whether warnings also make the item invalid
        timestamp: When validation was performed (UTC)
        duration_ms: How long validation took in milliseconds
    """
    file_path: str
    kind: str
    identifier: Optional[str] = None
    findings: List[Finding] = field(default_factory=list)
    strict: bool = False
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    @property
    def errors(self) -> List[Finding]:
        return [f for f in self.findings if f.is_critical]

    @property
    def warnings(self) -> List[Finding]:
        return [f for f in self.findings if not f.is_critical]

    @property
    def is_valid(self) -> bool:
        if self.errors:
            return False
        return not (self.strict and self.warnings)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "file_path": self.file_path,
            "kind": self.kind,
            "identifier": self.identifier,
            "is_valid": self.is_valid,
            "strict": self.strict,
            "findings": [f.to_dict() for f in self.findings],
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
            "summary": {
                "errors": len(self.errors),
                "warnings": len(self.warnings),
            },
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def format_human(self) -> str:
        """Format report for human-readable console output."""
        if self.is_valid and not self.warnings:
            icon = "✅"
            status = "Ready to publish"
        elif self.is_valid:
            icon = "✅"
            status = "Ready to publish (with warnings)"
        else:
            icon = "❌"
            status = "Cannot publish"

        label = f"{self.kind} {self.identifier}" if self.identifier else self.kind
        lines = [f"{icon} {self.file_path}: {status} ({label})"]

        for finding in self.findings:
            prefix = "  ❌" if finding.is_critical else "  ⚠"
            lines.append(f"{prefix} [{finding.rule}] {finding.message}")

        return "\n".join(lines)
