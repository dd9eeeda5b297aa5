"""
Configuration loading for proofreader runs.
"""

from proofreader.config.manager import ConfigurationManager
from proofreader.config.presets import DefinedFormat, DefinedFormats, get_defined_format
from proofreader.config.schema import DEFAULT_FIELD_FORMAT, LogLevel, ProofreadConfig

__all__ = [
    "ConfigurationManager",
    "DEFAULT_FIELD_FORMAT",
    "DefinedFormat",
    "DefinedFormats",
    "LogLevel",
    "ProofreadConfig",
    "get_defined_format",
]
