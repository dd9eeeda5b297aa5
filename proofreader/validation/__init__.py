"""
Validation Module for Proofreader

Provides the column schema, the record handoff, the validation engine and
the diagnostic data models.
"""

from proofreader.validation.report import Diagnostic, RunSummary
from proofreader.validation.schema import ColumnSpec, Schema, build_schema, parse_blank_columns
from proofreader.validation.sink import DiagnosticSink
from proofreader.validation.handoff import Handoff
from proofreader.validation.engine import ValidationEngine

__all__ = [
    "ColumnSpec",
    "Diagnostic",
    "DiagnosticSink",
    "Handoff",
    "RunSummary",
    "Schema",
    "ValidationEngine",
    "build_schema",
    "parse_blank_columns",
]
