"""
Proofreader Error Hierarchy

Defines the exceptions raised by the proofreader. Every fatal condition
carries the process exit status the CLI should terminate with, so that
callers can tell configuration, input and stream failures apart.

Error Hierarchy:
    ProofreaderError (base)
    ├── ConfigurationError (invalid options, unknown presets)
    │   └── UnknownFormatError (format name missing from the registry)
    ├── InputError (missing, unreadable or undecompressable input)
    ├── StreamError (read failure after the header)
    └── PipelineError (validation engine stopped unexpectedly)

Field-level problems are never raised; they are reported as diagnostics.
"""

from typing import Optional


class ProofreaderError(Exception):
    """Base exception for all fatal proofreader errors."""

    exit_code = 1


class ConfigurationError(ProofreaderError):
    """Raised when the run configuration is invalid.

    Common scenarios:
    - Out-of-range sample percentage or progress interval
    - Multi-character delimiter
    - Malformed blank column list
    - Unknown defined format preset
    - Invalid YAML in a configuration file
    """

    exit_code = 2


class UnknownFormatError(ConfigurationError):
    """Raised when a schema names a format the registry does not know.

    This always surfaces while the schema is being built, before any
    record is read.
    """

    def __init__(self, format_name: str, column_index: Optional[int] = None):
        self.format_name = format_name
        self.column_index = column_index
        message = f"Unrecognized format - {format_name}"
        if column_index is not None:
            message += f" (column {column_index})"
        super().__init__(message)


class InputError(ProofreaderError):
    """Raised when the input file cannot be opened or decompressed."""

    exit_code = 128


class StreamError(ProofreaderError):
    """Raised when reading fails mid-stream for any reason other than EOF."""

    exit_code = 3

    def __init__(self, message: str, sequence_number: Optional[int] = None):
        self.sequence_number = sequence_number
        if sequence_number is not None:
            message = f"{message} (after line {sequence_number})"
        super().__init__(message)


class PipelineError(ProofreaderError):
    """Raised when the validation engine fails and the run is aborted."""

    exit_code = 4


class HandoffClosed(ProofreaderError):
    """Raised by a handoff when a record is offered after it was aborted or closed."""
    pass
