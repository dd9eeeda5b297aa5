"""
Validation Report Data Models

Defines the Diagnostic emitted for each finding and the RunSummary
returned once a file has been proofread.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Literal, Optional


COLUMN_COUNT = "column_count"
FIELD_FORMAT = "field_format"


@dataclass(frozen=True)
class Diagnostic:
    """A single deviation from the schema.

    Attributes:
        kind: column_count (field count mismatch) or field_format
        sequence_number: Original row position in the file (header is row 1)
        column_index: Offending column (field_format only)
        header_label: Header label of the column (field_format only)
        field_value: Literal value that failed (field_format only)
        format_name: Expected format (field_format only)
        expected: Number of columns in the schema (column_count only)
        actual: Number of fields in the record (column_count only)
    """
    kind: Literal["column_count", "field_format"]
    sequence_number: int
    column_index: Optional[int] = None
    header_label: Optional[str] = None
    field_value: Optional[str] = None
    format_name: Optional[str] = None
    expected: Optional[int] = None
    actual: Optional[int] = None

    @classmethod
    def column_count(cls, sequence_number: int, actual: int, expected: int) -> "Diagnostic":
        return cls(
            kind=COLUMN_COUNT,
            sequence_number=sequence_number,
            expected=expected,
            actual=actual,
        )

    @classmethod
    def field_format(
        cls,
        sequence_number: int,
        column_index: int,
        header_label: str,
        field_value: str,
        format_name: str,
    ) -> "Diagnostic":
        return cls(
            kind=FIELD_FORMAT,
            sequence_number=sequence_number,
            column_index=column_index,
            header_label=header_label,
            field_value=field_value,
            format_name=format_name,
        )

    def format_human(self) -> str:
        """Format the finding as a single log line."""
        if self.kind == COLUMN_COUNT:
            return (
                f"L:{self.sequence_number} Items in line({self.actual}) "
                f"!= Items in format({self.expected})"
            )
        return (
            f"L:{self.sequence_number} C:{self.column_index} H:{self.header_label} "
            f"\"{self.field_value}\" not formatted as \"{self.format_name}\" type"
        )


@dataclass
class RunSummary:
    """Totals for one proofreading run.

    Attributes:
        file_path: Input file that was proofread
        records_read: Records read after the header
        records_forwarded: Records sampled into validation
        records_checked: Records the engine finished checking
        column_count_findings: Field count mismatches reported
        field_format_findings: Field format failures reported
        timestamp: When the run finished (UTC)
        duration_ms: Wall-clock duration in milliseconds
    """
    file_path: str
    records_read: int = 0
    records_forwarded: int = 0
    records_checked: int = 0
    column_count_findings: int = 0
    field_format_findings: int = 0
    timestamp: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    duration_ms: int = 0

    @property
    def total_findings(self) -> int:
        return self.column_count_findings + self.field_format_findings

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "file_path": self.file_path,
            "records_read": self.records_read,
            "records_forwarded": self.records_forwarded,
            "records_checked": self.records_checked,
            "findings": {
                "column_count": self.column_count_findings,
                "field_format": self.field_format_findings,
                "total": self.total_findings,
            },
            "timestamp": self.timestamp,
            "duration_ms": self.duration_ms,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def format_human(self) -> str:
        """Format the summary for console output."""
        icon = "✅" if self.total_findings == 0 else "⚠"
        lines = [
            f"{icon} {self.file_path}: {self.total_findings} finding(s)",
            f"  records read: {self.records_read}",
            f"  records validated: {self.records_checked} of {self.records_forwarded} sampled",
            f"  column count findings: {self.column_count_findings}",
            f"  field format findings: {self.field_format_findings}",
            f"  duration: {self.duration_ms}ms",
        ]
        return "\n".join(lines)
