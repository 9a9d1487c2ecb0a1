"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from dealer_pricing.application.browse_catalog import BrowseCatalogHandler
from dealer_pricing.domain.exceptions import DomainException
from dealer_pricing.infrastructure.bootstrap import catalog_repository, dealer_repository
from dealer_pricing.infrastructure.cli.errors import as_click_error


@click.command("list")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
@click.option("--search", default=None, help="Filter by code or description.")
def catalog_list(dealer_id: str, search: str | None) -> None:
    """List the products a dealer is entitled to see."""
    handler = BrowseCatalogHandler(catalog_repository(), dealer_repository())

    try:
        entries = handler.handle(dealer_id, search=search)
    except DomainException as exc:
        raise as_click_error(exc)

    if not entries:
        click.echo("No products found.")
        return

    click.echo(f"{'Code':<16} {'Type':<12} Description")
    click.echo("-" * 60)
    for e in entries:
        click.echo(f"{e.product_code:<16} {e.part_type:<12} {e.description}")
