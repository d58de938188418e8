"""
CLI Package for content-preflight

Provides the click group and its subcommands. The cli() function serves
as the console script entry point for setup.py.
"""

import os

import click
from dotenv import load_dotenv

# Load environment variables from .env files
# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from preflight import __version__
from .check import check
from .help_texts import MAIN_HELP


@click.group(help=MAIN_HELP)
@click.version_option(version=__version__, prog_name='content-preflight')
def main():
    pass


main.add_command(check)


# Entry point for setup.py console script
def cli():
    """Console script entry point."""
    main()
