"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from dealer_pricing.application.add_to_cart import AddToCartHandler
from dealer_pricing.application.remove_from_cart import RemoveFromCartHandler
from dealer_pricing.application.show_cart import ShowCartHandler
from dealer_pricing.application.update_cart_item import UpdateCartItemHandler
from dealer_pricing.domain.exceptions import DomainException
from dealer_pricing.infrastructure.bootstrap import (
    cart_repository,
    cart_rules,
    catalog_repository,
    pricing_service,
)
from dealer_pricing.infrastructure.cli.errors import as_click_error


@click.command("add")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
@click.option("--product", "product_code", required=True, help="Product code.")
@click.option("--qty", default=1, show_default=True, type=int, help="Quantity to add.")
def cart_add(user_id: str, dealer_id: str, product_code: str, qty: int) -> None:
    """Add a product to a user's cart."""
    handler = AddToCartHandler(cart_repository(), catalog_repository(), pricing_service())

    try:
        cart = handler.handle(user_id, dealer_id, product_code, qty)
    except DomainException as exc:
        raise as_click_error(exc)

    click.echo(f"Added {qty} x {product_code}  ({len(cart.items)} line(s) in cart)")


@click.command("update")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
@click.option("--product", "product_code", required=True, help="Product code.")
@click.option("--qty", required=True, type=int, help="New quantity.")
def cart_update(user_id: str, product_code: str, qty: int) -> None:
    """Change the quantity of a cart line."""
    handler = UpdateCartItemHandler(cart_repository())

    try:
        handler.handle(user_id, product_code, qty)
    except DomainException as exc:
        raise as_click_error(exc)

    click.echo(f"{product_code} quantity set to {qty}")


@click.command("remove")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
@click.option("--product", "product_code", required=True, help="Product code.")
def cart_remove(user_id: str, product_code: str) -> None:
    """Remove a line from the cart."""
    handler = RemoveFromCartHandler(cart_repository())

    try:
        handler.handle(user_id, product_code)
    except DomainException as exc:
        raise as_click_error(exc)

    click.echo(f"{product_code} removed from cart")


@click.command("show")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
def cart_show(user_id: str) -> None:
    """Show the cart with live prices."""
    handler = ShowCartHandler(cart_repository(), cart_rules())

    try:
        dto = handler.handle(user_id)
    except DomainException as exc:
        raise as_click_error(exc)

    if not dto.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<16} {'Band':>4} {'Qty':>5} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*51}")
    for line in dto.lines:
        flag = "*" if line.min_price_applied else " "
        click.echo(
            f"  {line.product_code:<16} {line.band_code:>4} {line.quantity:>5} "
            f"{line.unit_price:>10}{flag}{line.total_price:>12}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Subtotal':<27} {dto.subtotal:>24}")
    if any(line.min_price_applied for line in dto.lines):
        click.echo("  * minimum price applied")
