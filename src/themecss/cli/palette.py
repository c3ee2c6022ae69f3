"""CLI command: themecss palette -- list theme roles."""

from __future__ import annotations

import click

from themecss.cli._options import config_option, read_config


@click.command()
@config_option
def palette(config_path: str | None) -> None:
    """List every theme role with its default value and custom property."""
    config = read_config(config_path)
    width = max((len(role) for role in config.palette), default=0)
    for role, value in config.palette.items():
        click.echo(f"{role.ljust(width)}  {value}  {config.custom_property_name(role)}")
