"""
Configuration schema for content-preflight.

Defines the settings that control where content is read from, how
findings are reported and how verbose logging is.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from preflight.utils.logging_config import LogLevel


class ReportFormat(Enum):
    """Supported console report formats."""
    HUMAN = "human"
    JSON = "json"


@dataclass
class PreflightConfig:
    """Complete preflight configuration."""

    content_dir: str = "."
    log_level: str = LogLevel.WARNING.value
    log_file: Optional[str] = None
    strict: bool = False
    report_format: str = ReportFormat.HUMAN.value

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        try:
            ReportFormat(self.report_format)
        except ValueError:
            valid_formats = [f.value for f in ReportFormat]
            errors.append(
                f"Invalid report_format '{self.report_format}'. Valid options: {valid_formats}"
            )

        if not isinstance(self.strict, bool):
            errors.append(f"Invalid strict '{self.strict}'. Expected true or false")

        if not self.content_dir or not isinstance(self.content_dir, str):
            errors.append("content_dir must be a non-empty path")

        return errors
