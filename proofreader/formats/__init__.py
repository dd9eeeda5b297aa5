"""
Type-format registry for field validation.
"""

from proofreader.formats.registry import (
    BUILTIN_FORMATS,
    FormatRegistry,
    FormatRule,
    default_registry,
)

__all__ = [
    "BUILTIN_FORMATS",
    "FormatRegistry",
    "FormatRule",
    "default_registry",
]
