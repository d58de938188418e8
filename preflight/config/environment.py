"""
Environment variable integration for content-preflight.

Centralizes environment variable names and converts their string
values into configuration overrides.
"""

import os
from typing import Any, Dict, List


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    CONTENT_DIR = "CONTENT_PREFLIGHT_CONTENT_DIR"
    LOG_LEVEL = "CONTENT_PREFLIGHT_LOG_LEVEL"
    LOG_FILE = "CONTENT_PREFLIGHT_LOG_FILE"
    STRICT = "CONTENT_PREFLIGHT_STRICT"
    REPORT_FORMAT = "CONTENT_PREFLIGHT_REPORT_FORMAT"

    TRUE_VALUES = ("1", "true", "yes", "on")
    FALSE_VALUES = ("0", "false", "no", "off", "")

    @classmethod
    def get_all_variables(cls) -> List[str]:
        """Get list of all supported environment variables."""
        return [
            cls.CONTENT_DIR,
            cls.LOG_LEVEL,
            cls.LOG_FILE,
            cls.STRICT,
            cls.REPORT_FORMAT,
        ]

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.CONTENT_DIR: "Directory containing articles/ and books/",
            cls.LOG_LEVEL: "Logging level (debug, info, warning, error)",
            cls.LOG_FILE: "Optional log file path",
            cls.STRICT: "Treat warnings as blocking (true/false)",
            cls.REPORT_FORMAT: "Console report format (human, json)",
        }

    @classmethod
    def parse_bool(cls, value: str) -> Any:
        """Parse a boolean flag; unrecognized values are returned unchanged."""
        lowered = value.strip().lower()
        if lowered in cls.TRUE_VALUES:
            return True
        if lowered in cls.FALSE_VALUES:
            return False
        return value

    @classmethod
    def load_overrides(cls) -> Dict[str, Any]:
        """Collect configuration overrides from the environment."""
        overrides: Dict[str, Any] = {}

        mapping = {
            cls.CONTENT_DIR: "content_dir",
            cls.LOG_LEVEL: "log_level",
            cls.LOG_FILE: "log_file",
            cls.REPORT_FORMAT: "report_format",
        }
        for env_name, key in mapping.items():
            value = os.environ.get(env_name)
            if value:
                overrides[key] = value.lower() if key in ("log_level", "report_format") else value

        strict = os.environ.get(cls.STRICT)
        if strict is not None:
            overrides["strict"] = cls.parse_bool(strict)

        return overrides
