"""Command-line interface for blobupload.

This module provides the main CLI entry point and assembles all commands.

Commands:
- upload: Upload files to blob storage
- config: Manage stored defaults
"""

from __future__ import annotations

import logging

import click

from blobupload.client.cli.settings import config_group
from blobupload.client.cli.upload import upload

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@click.group()
@click.version_option(package_name="blobupload")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """blobupload - Upload files to blob storage in blocks."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


cli.add_command(upload)
cli.add_command(config_group)


def main() -> None:
    """Entry point for the CLI."""
    cli()


__all__ = [
    "cli",
    "main",
]
