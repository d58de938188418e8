"""
Configuration Manager for content-preflight.

Loads, merges and validates configuration from multiple sources:
- System defaults
- Project configuration (./.content-preflight.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from preflight.config.environment import EnvironmentVariables
from preflight.config.schema import PreflightConfig
from preflight.errors import ConfigurationError


logger = logging.getLogger(__name__)

PROJECT_CONFIG_NAME = ".content-preflight.yaml"


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(self, project_dir: Optional[Path] = None):
        self.project_config_path = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME

    def load_configuration(
        self,
        config_file: Optional[str] = None,
        cli_overrides: Optional[Dict[str, Any]] = None
    ) -> PreflightConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides, None values ignored)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.content-preflight.yaml)
        5. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides

        Returns:
            PreflightConfig: Merged and validated configuration

        Raises:
            ConfigurationError: If a file is unreadable or values are invalid
        """
        config_dict = asdict(PreflightConfig())

        if self.project_config_path.exists():
            logger.debug(f"Loading project configuration from {self.project_config_path}")
            config_dict.update(self._load_yaml_file(self.project_config_path))

        if config_file:
            logger.debug(f"Loading configuration from {config_file}")
            config_dict.update(self._load_yaml_file(Path(config_file)))

        config_dict.update(EnvironmentVariables.load_overrides())

        if cli_overrides:
            config_dict.update(
                {k: v for k, v in cli_overrides.items() if v is not None}
            )

        config = self._dict_to_config(config_dict)

        errors = config.validate()
        if errors:
            raise ConfigurationError("Invalid configuration: " + "; ".join(errors))

        return config

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Parse a YAML configuration file into a dictionary."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            line_number = None
            if getattr(e, "problem_mark", None) is not None:
                line_number = e.problem_mark.line + 1  # YAML uses 0-based line numbers
            problem = getattr(e, "problem", None) or str(e)
            raise ConfigurationError(
                f"YAML parsing error: {problem}", str(file_path), line_number
            )
        except FileNotFoundError:
            raise ConfigurationError("Configuration file not found", str(file_path))
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read configuration file: {e}", str(file_path))

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigurationError(
                "Configuration root must be a mapping", str(file_path)
            )
        return content

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> PreflightConfig:
        """Convert a merged dictionary to PreflightConfig, rejecting unknown keys."""
        known = {f.name for f in fields(PreflightConfig)}
        unknown = sorted(set(config_dict) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        if isinstance(config_dict.get("log_level"), str):
            config_dict["log_level"] = config_dict["log_level"].lower()

        return PreflightConfig(**config_dict)
