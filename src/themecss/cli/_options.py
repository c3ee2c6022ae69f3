"""Shared CLI helpers."""

from __future__ import annotations

import sys

import click

from themecss.errors import ThemeError
from themecss.model.config import ThemeConfig, load_config

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON theme config with 'palette', 'prefix' and 'emit_root_definitions'",
)


def read_config(config_path: str | None) -> ThemeConfig:
    """Load the config at *config_path*, or the default one."""
    if config_path is None:
        return ThemeConfig()
    try:
        return load_config(config_path)
    except ThemeError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)
