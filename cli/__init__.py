"""
CLI Package for Proofreader

This package provides the command-line interface using Click groups and
subcommands. Each subcommand is implemented in its own module.

The main entry point is the main() function which creates a Click group and
registers all available subcommands. The cli() function serves as the
console script entry point for setup.py.
"""

import os
import click
from dotenv import load_dotenv
from proofreader import __version__
from proofreader.utils.logging_config import configure_logging

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')
from .proofread import proofread
from .formats import formats, presets

# Configure logging when CLI package is imported
configure_logging()

@click.group()
@click.version_option(version=__version__, prog_name='proofreader')
def main():
    """Proofreader CLI - Validate compressed delimited files against a column schema.

    Reads a gzip-compressed delimited file record by record and checks every
    field against its declared type format, logging each deviation without
    stopping the run.
    """
    pass

# Register subcommands
main.add_command(proofread)
main.add_command(formats)
main.add_command(presets)

# Entry point for setup.py console script
def cli():
    """Console script entry point.

    This function is called when the proofreader command is executed
    from the command line after installation via pip.
    """
    main()
