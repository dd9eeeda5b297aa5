"""
Configuration Manager for proofreader runs.

This module handles loading, validation, and merging of configuration from
multiple sources:
- System defaults
- Project configuration (./.proofreader/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables (PROOFREADER_*)
- CLI arguments (highest precedence)

A defined format preset, when named, is applied last and replaces the
delimiter, field format and blank columns.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from proofreader.config.environment import EnvironmentVariables
from proofreader.config.presets import get_defined_format
from proofreader.config.schema import ProofreadConfig
from proofreader.config.yaml_parser import ConfigurationYAMLParser
from proofreader.errors import ConfigurationError


logger = logging.getLogger(__name__)


class ConfigurationManager:
    """Builds a validated ProofreadConfig from all configuration sources."""

    def __init__(self, project_config_path: Optional[Path] = None):
        self.project_config_path = project_config_path or Path.cwd() / ".proofreader" / "config.yaml"
        self.yaml_parser = ConfigurationYAMLParser()

    def load_configuration(self,
                           config_file: Optional[str] = None,
                           cli_overrides: Optional[Dict[str, Any]] = None,
                           environ: Optional[Dict[str, str]] = None) -> ProofreadConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides; None values are ignored)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.proofreader/config.yaml)
        5. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides
            environ: Environment mapping (defaults to os.environ)

        Returns:
            ProofreadConfig: Merged, validated configuration

        Raises:
            ConfigurationError: If a source is unreadable or a value is invalid
        """
        config_dict: Dict[str, Any] = {}

        if self.project_config_path.exists():
            logger.debug(f"Loading project configuration from {self.project_config_path}")
            config_dict.update(self.yaml_parser.parse_file(self.project_config_path))

        if config_file:
            logger.debug(f"Loading configuration from {config_file}")
            config_dict.update(self.yaml_parser.parse_file(Path(config_file)))

        config_dict.update(EnvironmentVariables.load_overrides(environ))

        if cli_overrides:
            config_dict.update({k: v for k, v in cli_overrides.items() if v is not None})

        if config_dict.get("defined_format"):
            config_dict = self.apply_defined_format(config_dict)

        return self.create_config(config_dict)

    def apply_defined_format(self, config_dict: Dict[str, Any]) -> Dict[str, Any]:
        """Replace delimiter, field format and blank columns with a preset's values."""
        preset = get_defined_format(str(config_dict["defined_format"]))
        merged = dict(config_dict)
        merged.update({
            "defined_format": preset.name,
            "delimiter": preset.delimiter,
            "field_format": preset.field_format,
            "blank_cols": preset.blank_cols,
        })
        logger.info(f"Acceptable formats: {preset.name}")
        logger.info(f"field-format: {preset.field_format}")
        logger.info(f"delimiter: '{preset.delimiter}' blank-cols: {preset.blank_cols}")
        return merged

    def create_config(self, config_dict: Dict[str, Any]) -> ProofreadConfig:
        """Validate a merged dictionary into a ProofreadConfig.

        Raises:
            ConfigurationError: Listing every invalid field.
        """
        try:
            return ProofreadConfig(**config_dict)
        except ValidationError as e:
            problems = []
            for err in e.errors():
                field_path = ".".join(str(loc) for loc in err["loc"]) if err["loc"] else "root"
                problems.append(f"{field_path}: {err['msg']}")
            raise ConfigurationError("Invalid configuration: " + "; ".join(problems)) from None
