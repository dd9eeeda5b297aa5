"""
Column Schema

Builds the ordered per-column schema for an input file from a list of
format names, the header row and a blank-column list. Every format is
resolved against the registry here, so an unknown name is a configuration
error raised before any record is read.
"""

import logging
import re
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

from proofreader.errors import ConfigurationError, UnknownFormatError
from proofreader.formats.registry import FormatRegistry, FormatRule, default_registry


logger = logging.getLogger(__name__)

_INDEX_TOKEN = re.compile(r"\d+")


@dataclass(frozen=True)
class ColumnSpec:
    """Validation settings for a single column.

    Attributes:
        index: Zero-based column position
        format_name: Declared format name
        header_label: Label from the header row (informational only)
        blank_allowed: Whether an empty value passes without a format check
        rule: Prepared rule resolved from the registry
    """
    index: int
    format_name: str
    header_label: str
    blank_allowed: bool
    rule: FormatRule


@dataclass(frozen=True)
class Schema:
    """Immutable, ordered column specifications for one input file."""
    columns: Tuple[ColumnSpec, ...]

    def __len__(self) -> int:
        return len(self.columns)

    def column(self, index: int) -> Optional[ColumnSpec]:
        """Return the column at index, or None if the schema has no such column."""
        if 0 <= index < len(self.columns):
            return self.columns[index]
        return None

    def describe(self) -> List[str]:
        """Render the header-to-format mapping, one line per column."""
        return [
            f"{c.index:02d}: {c.header_label} ({c.format_name})"
            + (" [blank ok]" if c.blank_allowed else "")
            for c in self.columns
        ]


def parse_blank_columns(spec: Optional[str], separator: str = ",") -> FrozenSet[int]:
    """Parse a compact column list such as "3,7,9".

    Tokens are matched as whole numbers, so "1" never marks column 10
    or 11 as blank-allowed.

    Args:
        spec: Column list, or None/empty for no blank-allowed columns.
        separator: Token separator.

    Returns:
        Set of zero-based column indices.

    Raises:
        ConfigurationError: If a token is not a non-negative integer.
    """
    if not spec or not spec.strip():
        return frozenset()

    indices = set()
    for token in spec.split(separator):
        token = token.strip()
        if not _INDEX_TOKEN.fullmatch(token):
            raise ConfigurationError(
                f"Invalid blank column '{token}' in '{spec}'. "
                f"Expected a comma separated list (eg. 0,1,2)"
            )
        indices.add(int(token))
    return frozenset(indices)


def build_schema(
    format_names: Sequence[str],
    header_labels: Sequence[str],
    blank_column_spec: Optional[str] = "",
    registry: Optional[FormatRegistry] = None,
) -> Schema:
    """Zip format names and header labels into a Schema.

    Header labels beyond the format list are ignored; missing labels are
    left empty. Blank-column indices outside the format list have no effect.

    Raises:
        UnknownFormatError: For the first format name the registry lacks.
        ConfigurationError: If the blank column list is malformed.
    """
    registry = registry or default_registry
    blank_columns = parse_blank_columns(blank_column_spec)

    columns = []
    for index, format_name in enumerate(format_names):
        try:
            rule = registry.resolve(format_name)
        except UnknownFormatError:
            raise UnknownFormatError(format_name, index) from None
        label = header_labels[index] if index < len(header_labels) else ""
        columns.append(ColumnSpec(
            index=index,
            format_name=format_name,
            header_label=label,
            blank_allowed=index in blank_columns,
            rule=rule,
        ))

    if len(header_labels) != len(format_names):
        logger.warning(
            f"Header has {len(header_labels)} column(s) but field format "
            f"declares {len(format_names)}"
        )

    ignored = sorted(i for i in blank_columns if i >= len(format_names))
    if ignored:
        logger.debug(f"Ignoring blank columns beyond the schema: {ignored}")

    return Schema(columns=tuple(columns))


def split_field_format(field_format: str) -> List[str]:
    """Split a comma separated field-format string into format names."""
    return [name.strip() for name in field_format.split(",")]
