"""Config commands for the blobupload CLI.

Commands:
- config set: Store a default value
- config show: Print the stored defaults
"""

from __future__ import annotations

import click

from blobupload.client.cli.config import CONFIG_KEYS, get_config_file, load_config, save_config


@click.group("config")
def config_group() -> None:
    """Manage stored defaults."""


@config_group.command("set")
@click.argument("key", type=click.Choice(CONFIG_KEYS))
@click.argument("value")
def set_value(key: str, value: str) -> None:
    """Store a default VALUE for KEY."""
    if key == "timeout_ms" and not value.isdigit():
        raise click.BadParameter("timeout_ms must be a positive integer", param_hint="VALUE")
    config = load_config()
    config[key] = value
    save_config(config)
    click.echo(f"Saved {key} to {get_config_file()}")


@config_group.command("show")
def show() -> None:
    """Print the stored defaults (the access token is masked)."""
    config = load_config()
    if not config:
        click.echo("No configuration stored.")
        return
    for key in sorted(config):
        value = config[key]
        if key == "sas_token":
            value = value[:8] + "..." if len(value) > 8 else "***"
        click.echo(f"{key}: {value}")
