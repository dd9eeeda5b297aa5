"""
Environment variable integration for proofreader configuration.

Centralizes the environment variable names recognized by the configuration
manager and converts set variables into configuration overrides.
"""

import os
from typing import Dict, List, Optional


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    FILENAME = "PROOFREADER_FILENAME"
    FIELD_FORMAT = "PROOFREADER_FIELD_FORMAT"
    DELIMITER = "PROOFREADER_DELIMITER"
    OUTPUT_LINES = "PROOFREADER_OUTPUT_LINES"
    BLANK_COLS = "PROOFREADER_BLANK_COLS"
    DEFINED_FORMAT = "PROOFREADER_DEFINED_FORMAT"
    SAMPLE_PERCENTAGE = "PROOFREADER_SAMPLE_PERCENTAGE"
    SEED = "PROOFREADER_SEED"
    SKIP_LINES = "PROOFREADER_SKIP_LINES"
    DISPLAY_HEADER = "PROOFREADER_DISPLAY_HEADER"
    LOG_LEVEL = "PROOFREADER_LOG_LEVEL"
    LOG_FILE = "PROOFREADER_LOG_FILE"

    # variable name -> configuration field
    FIELD_MAP = {
        FILENAME: "filename",
        FIELD_FORMAT: "field_format",
        DELIMITER: "delimiter",
        OUTPUT_LINES: "output_lines",
        BLANK_COLS: "blank_cols",
        DEFINED_FORMAT: "defined_format",
        SAMPLE_PERCENTAGE: "sample_percentage",
        SEED: "seed",
        SKIP_LINES: "skip_lines",
        DISPLAY_HEADER: "display_header",
        LOG_LEVEL: "log_level",
        LOG_FILE: "log_file",
    }

    @classmethod
    def get_all_variables(cls) -> List[str]:
        """Get list of all supported environment variables."""
        return list(cls.FIELD_MAP)

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.FILENAME: "Path to the gzip-compressed input file",
            cls.FIELD_FORMAT: "Comma separated format names, one per column",
            cls.DELIMITER: "Single-character field separator",
            cls.OUTPUT_LINES: "Progress notice interval in records read",
            cls.BLANK_COLS: "Comma separated columns allowed to be empty",
            cls.DEFINED_FORMAT: "Named preset supplying delimiter, field format and blank columns",
            cls.SAMPLE_PERCENTAGE: "Percentage (0-100) of records to validate",
            cls.SEED: "Seed for reproducible sampling",
            cls.SKIP_LINES: "Number of leading records read but never validated",
            cls.DISPLAY_HEADER: "Log the header-to-format mapping (true/false)",
            cls.LOG_LEVEL: "Logging level (debug, info, warning, error)",
            cls.LOG_FILE: "Optional log file path",
        }

    @classmethod
    def load_overrides(cls, environ: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        """Collect configuration overrides from set, non-empty variables."""
        environ = os.environ if environ is None else environ
        overrides = {}
        for var_name, field_name in cls.FIELD_MAP.items():
            value = environ.get(var_name)
            if value not in (None, ""):
                overrides[field_name] = value
        return overrides
