"""CLI command: themecss prop -- render a theme-aware declaration."""

from __future__ import annotations

import sys

import click

from themecss.cli._options import config_option, read_config
from themecss.emit.feature import FeatureQuery
from themecss.errors import ThemeError
from themecss.stylesheet import StyleBuilder
from themecss.theme import ThemeResolver


@click.command()
@click.argument("property")
@click.argument("value")
@click.option("--selector", default=":host", show_default=True, help="Rule selector list")
@click.option("--important", is_flag=True, help="Add !important")
@click.option("--legacy", is_flag=True, help="Only accept CSS colors/keywords or theme roles")
@click.option("--query", default="", help="Feature query, e.g. 'color' or '-color'")
@config_option
def prop(
    property: str,
    value: str,
    selector: str,
    important: bool,
    legacy: bool,
    query: str,
    config_path: str | None,
) -> None:
    """Render PROPERTY: VALUE as CSS, resolving VALUE against the theme palette."""
    resolver = ThemeResolver(read_config(config_path))
    builder = StyleBuilder(query=FeatureQuery.parse(query))

    try:
        with builder.host_aware(selector):
            if legacy:
                resolver.prop(builder, property, value, important=important)
            else:
                resolver.apply(builder, property, value, important=important)
    except ThemeError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(builder.render(), nl=False)
