"""Command-line interface for Netflix Analyzer."""

import sys
from pathlib import Path

import click

from netflixanalyzer import __version__
from netflixanalyzer.config import load_config
from netflixanalyzer.core.analyzer import (
    format_delta,
    most_common_country,
    release_addition_delta,
    release_delta_summary,
    sort_by_date_added,
)
from netflixanalyzer.core.exceptions import (
    CatalogLoadError,
    InvalidIdentifierFormat,
    SourceUnavailable,
)
from netflixanalyzer.core.lookup import find_by_id
from netflixanalyzer.core.store import CatalogStore
from netflixanalyzer.utils.formatting import render_details, render_table
from netflixanalyzer.utils.logger import get_logger, setup_logging


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (defaults to built-in defaults)",
)
@click.option(
    "--source",
    "-s",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the titles CSV (overrides catalog.source)",
)
@click.pass_context
def cli(ctx, config, source):
    """Netflix Analyzer - queries over the Netflix titles catalog."""
    try:
        cfg = load_config(config)
        if source is not None:
            cfg.catalog.source = str(source)
        ctx.ensure_object(dict)
        ctx.obj["config"] = cfg

        setup_logging(cfg.logging)

    except Exception as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)


def _load_catalog(ctx) -> tuple:
    """Load the configured catalog, exiting with status 1 if it cannot be read."""
    config = ctx.obj["config"]
    logger = get_logger(__name__)
    store = CatalogStore(config.catalog)

    try:
        catalog = store.load()
    except (SourceUnavailable, CatalogLoadError) as e:
        logger.error("Catalog load failed", error=str(e))
        click.secho(f"✗ {e}", fg="red", err=True)
        sys.exit(1)

    if store.diagnostics:
        skipped = sum(1 for d in store.diagnostics if d.kind == "row_skipped")
        click.secho(
            f"⊘ {len(store.diagnostics)} malformed row(s) in catalog, {skipped} skipped",
            fg="yellow",
            err=True,
        )

    return catalog


def _echo_table(ctx, titles) -> None:
    display = ctx.obj["config"].display
    for line in render_table(titles, max_rows=display.max_rows, column_width=display.column_width):
        click.echo(line)


def _lookup(catalog, identifier):
    """Find a title, exiting with status 1 on a malformed identifier."""
    try:
        return find_by_id(catalog, identifier)
    except InvalidIdentifierFormat as e:
        click.secho(f"✗ {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@click.argument("identifier", required=False)
@click.pass_context
def show(ctx, identifier):
    """Show the catalog table, then the release delta for IDENTIFIER if given."""
    catalog = _load_catalog(ctx)
    _echo_table(ctx, catalog)

    click.echo("")
    if identifier is None:
        click.echo("No title ID provided.")
        return

    item = _lookup(catalog, identifier)
    if item is None:
        click.secho("Title not found!", fg="yellow")
        return

    click.echo(f"Difference in days: {format_delta(release_addition_delta(item))}.")


@cli.command()
@click.pass_context
def country(ctx):
    """Show the country with the most titles."""
    catalog = _load_catalog(ctx)
    click.echo(f"Country with most titles: {most_common_country(catalog)}")


@cli.command()
@click.argument("identifier")
@click.pass_context
def delta(ctx, identifier):
    """Show days between release and catalog addition for one title."""
    catalog = _load_catalog(ctx)

    item = _lookup(catalog, identifier)
    if item is None:
        click.secho("Title not found!", fg="yellow")
        return

    click.echo(f"{item.title}")
    click.echo(f"Difference in days: {format_delta(release_addition_delta(item))}.")


@cli.command()
@click.pass_context
def deltas(ctx):
    """List the release-to-addition delta of every title."""
    catalog = _load_catalog(ctx)
    for line in release_delta_summary(catalog):
        click.echo(line)


@cli.command(name="sort")
@click.option(
    "--ascending/--descending",
    "-a/-d",
    default=True,
    help="Oldest first (default) or newest first; undated titles are always last",
)
@click.pass_context
def sort_titles(ctx, ascending):
    """Show the catalog ordered by date added."""
    catalog = _load_catalog(ctx)
    _echo_table(ctx, sort_by_date_added(catalog, ascending=ascending))


@cli.command()
@click.argument("identifier")
@click.pass_context
def find(ctx, identifier):
    """Show every field of the title with IDENTIFIER."""
    catalog = _load_catalog(ctx)

    item = _lookup(catalog, identifier)
    if item is None:
        click.secho("Title not found!", fg="yellow")
        return

    for line in render_details(item):
        click.echo(line)


@cli.command()
def version():
    """Show version information."""
    click.echo(f"Netflix Analyzer v{__version__}")


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
