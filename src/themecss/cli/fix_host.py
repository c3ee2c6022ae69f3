"""CLI command: themecss fix-host -- normalize :host selectors."""

from __future__ import annotations

import click

from themecss.selector import append_selector, host_aware, split_selector_list


@click.command("fix-host")
@click.argument("selectors", nargs=-1, required=True)
@click.option(
    "--append",
    "suffixes",
    multiple=True,
    help="Also emit every selector with this suffix appended (e.g. ':hover')",
)
def fix_host(selectors: tuple[str, ...], suffixes: tuple[str, ...]) -> None:
    """Rewrite compound :host selectors into valid CSS.

    Each SELECTORS argument may itself be a comma-separated list. The
    normalized selectors are printed one per line.
    """
    base: list[str] = []
    for text in selectors:
        base.extend(split_selector_list(text))

    lists = [base] + [append_selector(base, suffix) for suffix in suffixes]
    for selector in host_aware(*lists):
        click.echo(selector)
