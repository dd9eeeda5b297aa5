"""
Defined Formats

Named presets that supply a delimiter, field-format list and blank-column
list together, so well-known file layouts can be proofread with a single
--defined-format option.
"""

from dataclasses import dataclass
from typing import Dict, List

from proofreader.errors import ConfigurationError


@dataclass(frozen=True)
class DefinedFormat:
    """A named file layout.

    Attributes:
        name: Preset name passed to --defined-format
        description: Human-readable description
        delimiter: Field separator
        field_format: Comma separated format names, one per column
        blank_cols: Comma separated columns allowed to be empty
    """
    name: str
    description: str
    delimiter: str
    field_format: str
    blank_cols: str = ""

    @property
    def column_count(self) -> int:
        return len(self.field_format.split(","))


class DefinedFormats:
    """Built-in file layouts.

    Example:
        >>> preset = DefinedFormats.BACKUP
        >>> preset.delimiter
        '|'
    """

    BACKUP = DefinedFormat(
        name="backup",
        description="Pipe-delimited wide event backup (33 columns)",
        delimiter="|",
        field_format=(
            "uuid,ad_id_type,app_id,app_id,uuid,user_id,text,text,os,version,"
            "am_type,ip_addr,ts_sec,int,ts_sec,uuid,int,int,float,float,cc,"
            "text,text,text,int,loc_context,loc_method,text,text,int,int,int,int"
        ),
        blank_cols="11,14,15,16,17,20,22,23",
    )

    @classmethod
    def all(cls) -> Dict[str, DefinedFormat]:
        return {cls.BACKUP.name: cls.BACKUP}

    @classmethod
    def names(cls) -> List[str]:
        return list(cls.all())


def get_defined_format(name: str) -> DefinedFormat:
    """Look up a defined format by name.

    Raises:
        ConfigurationError: If no preset has that name.
    """
    presets = DefinedFormats.all()
    key = name.strip().lower()
    if key not in presets:
        raise ConfigurationError(
            f"Unknown defined format '{name}'. "
            f"Acceptable formats: {', '.join(presets)}"
        )
    return presets[key]
