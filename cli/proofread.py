"""
Proofread Subcommand Module

Validates a gzip-compressed delimited file against a per-column format
schema. Findings are written to the log as they are found; the run still
exits 0 however many findings there are. Configuration, input and stream
failures exit with distinct non-zero statuses.
"""

import logging
import sys
from typing import Optional

import click

from proofreader.config.manager import ConfigurationManager
from proofreader.errors import ProofreaderError
from proofreader.runner import ProofreadRunner
from proofreader.utils.logging_config import configure_logging, logging_config

from .shared_options import config_option, log_file_option, log_level_option


logger = logging.getLogger(__name__)


@click.command(help="Validate a compressed delimited file against a column format schema")
@click.option(
    "--filename", "-f",
    type=str,
    default=None,
    help="Gzip-compressed file to proofread (default: input.csv.gz)",
)
@click.option(
    "--field-format",
    type=str,
    default=None,
    help="Comma separated format names, one per column",
)
@click.option(
    "--delimiter", "-d",
    type=str,
    default=None,
    help="Single-character field delimiter (default: '|')",
)
@click.option(
    "--output-lines",
    type=int,
    default=None,
    help="Log progress every 'x' lines read (default: 100)",
)
@click.option(
    "--blank-cols",
    type=str,
    default=None,
    help="Columns allowed to be blank (eg. 0,3,7)",
)
@click.option(
    "--defined-format",
    type=str,
    default=None,
    help="Use a predefined format, delimiter and blank columns (see 'proofreader presets')",
)
@click.option(
    "--sample-percentage",
    type=int,
    default=None,
    help="Randomly validate 'x' percentage of records (default: 100)",
)
@click.option(
    "--display-header",
    is_flag=True,
    help="Display the header to format mapping before validating",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for reproducible sampling",
)
@click.option(
    "--skip-lines",
    type=int,
    default=None,
    help="Read but do not validate the first 'x' records",
)
@config_option()
@log_level_option()
@log_file_option()
def proofread(
    filename: Optional[str],
    field_format: Optional[str],
    delimiter: Optional[str],
    output_lines: Optional[int],
    blank_cols: Optional[str],
    defined_format: Optional[str],
    sample_percentage: Optional[int],
    display_header: bool,
    seed: Optional[int],
    skip_lines: Optional[int],
    config: Optional[str],
    log_level: Optional[str],
    log_file: Optional[str],
):
    """Validate a compressed delimited file against a column format schema.

    Examples:
        # Proofread with the built-in backup layout
        proofreader proofread -f events.csv.gz --defined-format backup

        # Explicit schema, comma delimited, column 1 may be blank
        proofreader proofread -f data.csv.gz -d , --field-format uuid,int --blank-cols 1

        # Validate a reproducible 10% sample
        proofreader proofread -f events.csv.gz --sample-percentage 10 --seed 42
    """
    overrides = {
        "filename": filename,
        "field_format": field_format,
        "delimiter": delimiter,
        "output_lines": output_lines,
        "blank_cols": blank_cols,
        "defined_format": defined_format,
        "sample_percentage": sample_percentage,
        "display_header": display_header or None,
        "seed": seed,
        "skip_lines": skip_lines,
        "log_level": log_level.lower() if log_level else None,
        "log_file": log_file,
    }

    try:
        settings = ConfigurationManager().load_configuration(config, overrides)
        configure_logging(settings.log_level, settings.log_file, force=True)
        logging_config.log_configuration_details(settings.model_dump())

        summary = ProofreadRunner(settings).run()
    except ProofreaderError as e:
        logger.debug(f"Run failed: {e!r}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)

    click.echo(summary.format_human())
