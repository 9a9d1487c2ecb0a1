"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from dealer_pricing.application.change_order_status import ChangeOrderStatusHandler
from dealer_pricing.application.dto import OrderDTO
from dealer_pricing.application.list_orders import ListOrdersHandler
from dealer_pricing.application.place_order import PlaceOrderHandler
from dealer_pricing.application.show_order import ShowOrderHandler
from dealer_pricing.domain.exceptions import DomainException
from dealer_pricing.domain.model.order import OrderStatus
from dealer_pricing.infrastructure.bootstrap import (
    cart_repository,
    checkout_rules,
    dealer_repository,
    order_repository,
)
from dealer_pricing.infrastructure.cli.errors import as_click_error


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.order_no} (#{dto.id})  (status={dto.status})")
    click.echo(f"Dealer:   {dto.dealer_account_id}  user {dto.dealer_user_id}")
    click.echo(f"Created:  {dto.created_at}")
    if dto.po_ref:
        click.echo(f"PO ref:   {dto.po_ref}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Product':<16} {'Band':>4} {'Qty':>5} {'Price':>10} {'Total':>12}")
    click.echo(f"  {'-'*51}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_code:<16} {line.band_code:>4} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>12}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<27} {dto.total:>24}")


@click.command("place")
@click.option("--user", "user_id", required=True, help="Dealer user ID.")
@click.option("--po-ref", default=None, help="Customer purchase order reference.")
@click.option("--notes", default=None, help="Free-text notes.")
def order_place(user_id: str, po_ref: str | None, notes: str | None) -> None:
    """Check out the user's cart."""
    handler = PlaceOrderHandler(
        cart_repo=cart_repository(),
        order_repo=order_repository(),
        dealer_repo=dealer_repository(),
        checkout_rules=checkout_rules(),
    )

    try:
        dto = handler.handle(user_id, po_ref=po_ref, notes=notes)
    except DomainException as exc:
        raise as_click_error(exc)

    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise as_click_error(exc)

    _display_order(dto)


@click.command("list")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
def order_list(dealer_id: str) -> None:
    """List a dealer's orders, newest first."""
    orders = ListOrdersHandler(order_repo=order_repository()).handle(dealer_id)

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<12} {'Status':<12} {'Created':<22} {'Total':>12}")
    click.echo("-" * 60)
    for o in orders:
        click.echo(f"{o.order_no:<12} {o.status:<12} {o.created_at:<22} {o.total:>12}")


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--to", "new_status", required=True,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    help="Target status.",
)
def order_status(order_id: int, new_status: str) -> None:
    """Move an order to a new status."""
    handler = ChangeOrderStatusHandler(order_repo=order_repository())

    try:
        handler.handle(order_id, new_status)
    except DomainException as exc:
        raise as_click_error(exc)

    click.echo(f"Order #{order_id} is now {new_status.upper()}.")
