"""
YAML parser for proofreader configuration files.

Provides YAML parsing with line/column error reporting. Keys may be written
with dashes, as on the command line (field-format), or with underscores.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from proofreader.errors import ConfigurationError


class YAMLParsingError(ConfigurationError):
    """Configuration file could not be parsed."""

    def __init__(self, message: str, file_path: Optional[Path] = None,
                 line_number: Optional[int] = None, column: Optional[int] = None):
        self.file_path = file_path
        self.line_number = line_number
        self.column = column

        error_parts = [message]
        if file_path:
            error_parts.append(f"File: {file_path}")
        if line_number is not None:
            if column is not None:
                error_parts.append(f"Line {line_number}, Column {column}")
            else:
                error_parts.append(f"Line {line_number}")

        super().__init__(" | ".join(error_parts))


class ConfigurationYAMLParser:
    """YAML parser for configuration files."""

    def parse_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Parse a YAML configuration file.

        Args:
            file_path: Path to YAML configuration file

        Returns:
            Dictionary of configuration values with normalized keys

        Raises:
            YAMLParsingError: If YAML is invalid or file cannot be read
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = f.read()
        except FileNotFoundError:
            raise YAMLParsingError("Configuration file not found", file_path)
        except PermissionError:
            raise YAMLParsingError("Permission denied reading configuration file", file_path)
        except UnicodeDecodeError as e:
            raise YAMLParsingError(f"File encoding error: {e}", file_path)

        return self.parse_string(content, file_path)

    def parse_string(self, yaml_content: str, file_path: Optional[Path] = None) -> Dict[str, Any]:
        """
        Parse YAML configuration from a string.

        Raises:
            YAMLParsingError: If YAML is invalid or not a mapping
        """
        try:
            content = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            line_number = None
            column = None

            if hasattr(e, "problem_mark") and e.problem_mark:
                line_number = e.problem_mark.line + 1  # YAML uses 0-based line numbers
                column = e.problem_mark.column + 1

            if hasattr(e, "problem") and e.problem:
                message = f"YAML parsing error: {e.problem}"
            else:
                message = f"YAML parsing error: {str(e)}"

            raise YAMLParsingError(message, file_path, line_number, column)

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise YAMLParsingError("Configuration must be a mapping of option names to values", file_path)

        return {str(key).replace("-", "_"): value for key, value in content.items()}
