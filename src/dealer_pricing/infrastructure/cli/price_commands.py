"""CLI commands for pricing queries."""

from __future__ import annotations

import click

from dealer_pricing.application.quote_price import QuotePriceHandler
from dealer_pricing.domain.exceptions import DomainException
from dealer_pricing.infrastructure.bootstrap import pricing_service
from dealer_pricing.infrastructure.cli.errors import as_click_error


@click.command("quote")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
@click.option("--product", "product_code", required=True, help="Product code.")
@click.option("--qty", default=1, show_default=True, type=int, help="Quantity.")
def price_quote(dealer_id: str, product_code: str, qty: int) -> None:
    """Price one product for a dealer."""
    handler = QuotePriceHandler(pricing_service())

    try:
        dto = handler.handle(dealer_id, product_code, qty)
    except DomainException as exc:
        raise as_click_error(exc)

    click.echo(f"{dto.product_code}  {dto.description}  ({dto.part_type})")
    click.echo(f"  Band:       {dto.band_code}")
    click.echo(f"  Unit price: {dto.unit_price}" + ("  (minimum price)" if dto.min_price_applied else ""))
    click.echo(f"  Quantity:   {dto.quantity}")
    click.echo(f"  Total:      {dto.total_price}")
