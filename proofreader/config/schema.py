"""
Configuration schema for a proofreading run.

Defines the typed, immutable configuration passed into schema construction
and the runner. Values arriving as strings from YAML files, environment
variables or the command line are coerced and range-checked here.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_FIELD_FORMAT = (
    "uuid,ad_id_type,app_id,app_id,uuid,user_id,text,text,os,version,am_type,"
    "ip_addr,ts_sec,num,ts_msec,uuid,num,num,lat,lon,cc,num,loc_context,"
    "loc_method,text,text"
)


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ProofreadConfig(BaseModel):
    """Complete configuration for one proofreading run.

    Attributes:
        filename: Path to the gzip-compressed input
        field_format: Comma separated format names, one per column
        delimiter: Single-character field separator
        output_lines: Progress notice interval, in records read
        blank_cols: Comma separated columns allowed to be empty
        defined_format: Named preset replacing delimiter, field_format and blank_cols
        sample_percentage: Chance (0-100) that a record is validated
        display_header: Log the header-to-format mapping before validating
        seed: Seed for reproducible sampling (None for nondeterministic)
        skip_lines: Leading records read but never validated
        log_level: Logging level
        log_file: Optional log file path
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    filename: str = Field(default="input.csv.gz", description="Input file to proofread")
    field_format: str = Field(default=DEFAULT_FIELD_FORMAT, min_length=1)
    delimiter: str = Field(default="|")
    output_lines: int = Field(default=100, ge=1)
    blank_cols: str = Field(default="")
    defined_format: Optional[str] = Field(default=None)
    sample_percentage: int = Field(default=100, ge=0, le=100)
    display_header: bool = Field(default=False)
    seed: Optional[int] = Field(default=None)
    skip_lines: int = Field(default=0, ge=0)
    log_level: str = Field(default=LogLevel.INFO.value)
    log_file: Optional[str] = Field(default=None)

    @field_validator("delimiter", mode="before")
    @classmethod
    def validate_delimiter(cls, v):
        """Accept exactly one character; "\\t" is read as a tab."""
        if isinstance(v, str) and v == "\\t":
            v = "\t"
        if not isinstance(v, str) or len(v) != 1:
            raise ValueError(f"delimiter must be a single character, got: {v!r}")
        return v

    @field_validator("field_format")
    @classmethod
    def validate_field_format(cls, v: str) -> str:
        if any(not name.strip() for name in v.split(",")):
            raise ValueError(f"field_format contains an empty format name: {v!r}")
        return v

    @field_validator("blank_cols", mode="before")
    @classmethod
    def normalize_blank_cols(cls, v):
        if v is None:
            return ""
        if isinstance(v, (list, tuple)):
            return ",".join(str(i) for i in v)
        return str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        try:
            return LogLevel(v.lower()).value
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            raise ValueError(f"Invalid log_level '{v}'. Valid options: {valid_levels}")
