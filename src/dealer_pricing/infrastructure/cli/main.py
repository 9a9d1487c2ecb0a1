import click

from dealer_pricing.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
)
from dealer_pricing.infrastructure.cli.catalog_commands import catalog_list
from dealer_pricing.infrastructure.cli.dealer_commands import (
    dealer_assign_band,
    dealer_check,
)
from dealer_pricing.infrastructure.cli.order_commands import (
    order_list,
    order_place,
    order_show,
    order_status,
)
from dealer_pricing.infrastructure.cli.price_commands import price_quote
from dealer_pricing.infrastructure.logger import configure_logging


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """Dealer pricing: entitlement-aware parts pricing, carts and checkout"""
    configure_logging(verbose)


@cli.group()
def price() -> None:
    """Price products for a dealer."""


@cli.group()
def catalog() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage carts."""


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def dealer() -> None:
    """Dealer band configuration."""


# Register subcommands
price.add_command(price_quote)
catalog.add_command(catalog_list)
cart.add_command(cart_add)
cart.add_command(cart_update)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_status)
dealer.add_command(dealer_assign_band)
dealer.add_command(dealer_check)
