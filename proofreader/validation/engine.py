"""
Validation Engine

Drains records from the handoff and checks every field against the
schema's prepared rules. Findings are pushed to the sink as they are
produced; a failed check never stops the engine.
"""

import logging
from typing import List

from proofreader.ingest.source import Record
from proofreader.validation.handoff import Handoff
from proofreader.validation.report import Diagnostic
from proofreader.validation.schema import Schema
from proofreader.validation.sink import DiagnosticSink


logger = logging.getLogger(__name__)


class ValidationEngine:
    """Single-consumer field validator.

    Records are processed strictly in arrival order. When a record's field
    count differs from the schema, one column_count finding is reported and
    the fields that line up with a column are still checked; fields with no
    matching column are skipped.
    """

    def __init__(self, schema: Schema, sink: DiagnosticSink):
        """Initialize the validation engine.

        Args:
            schema: Column schema with prepared rules.
            sink: Destination for findings.
        """
        self.schema = schema
        self.sink = sink
        self.records_checked = 0

    def check_record(self, record: Record) -> List[Diagnostic]:
        """Check one record and return its findings without reporting them."""
        diagnostics: List[Diagnostic] = []
        fields = record.fields
        expected = len(self.schema)

        if len(fields) != expected:
            diagnostics.append(Diagnostic.column_count(
                record.sequence_number, actual=len(fields), expected=expected,
            ))

        for index, value in enumerate(fields):
            column = self.schema.column(index)
            if column is None:
                # no rule available beyond the schema
                break

            if column.blank_allowed and value == "":
                self.sink.trace(
                    f"L:{record.sequence_number} C:{index} H:{column.header_label} has no value"
                )
                continue

            if not column.rule.matches(value):
                diagnostics.append(Diagnostic.field_format(
                    sequence_number=record.sequence_number,
                    column_index=index,
                    header_label=column.header_label,
                    field_value=value,
                    format_name=column.format_name,
                ))

        return diagnostics

    def process(self, record: Record) -> int:
        """Check one record and report its findings. Returns the finding count."""
        diagnostics = self.check_record(record)
        for diagnostic in diagnostics:
            self.sink.emit(diagnostic)
        self.records_checked += 1
        return len(diagnostics)

    def run(self, handoff: Handoff) -> None:
        """Drain the handoff until it is closed, then return."""
        logger.debug("Validation engine running")
        for record in handoff:
            self.process(record)
        logger.debug(f"Validation engine drained after {self.records_checked} record(s)")
