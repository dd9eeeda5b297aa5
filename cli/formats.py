"""
Formats and Presets Subcommands

Lists the field formats known to the registry and the built-in defined
formats, so a field-format list can be written without reading the source.
"""

import click

from proofreader.config.presets import DefinedFormats
from proofreader.formats.registry import default_registry


@click.command(help="List the field formats that can be used in --field-format")
def formats():
    """List registered field formats."""
    width = max(len(name) for name in default_registry.names())
    for rule in default_registry:
        click.echo(f"{rule.name:<{width}}  {rule.description}")


@click.command(help="List the defined formats usable with --defined-format")
def presets():
    """List built-in defined formats."""
    for preset in DefinedFormats.all().values():
        click.echo(f"{preset.name}: {preset.description}")
        click.echo(f"  delimiter: '{preset.delimiter}'  columns: {preset.column_count}")
        click.echo(f"  field-format: {preset.field_format}")
        click.echo(f"  blank-cols: {preset.blank_cols or '(none)'}")
