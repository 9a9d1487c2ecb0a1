"""CLI commands for dealer configuration."""

from __future__ import annotations

import click

from dealer_pricing.application.assign_band import AssignBandHandler
from dealer_pricing.application.check_dealer_setup import CheckDealerSetupHandler
from dealer_pricing.domain.exceptions import DomainException
from dealer_pricing.domain.model.product import PartType
from dealer_pricing.infrastructure.bootstrap import dealer_repository
from dealer_pricing.infrastructure.cli.errors import as_click_error


@click.command("assign-band")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
@click.option(
    "--part-type", required=True,
    type=click.Choice([pt.value for pt in PartType], case_sensitive=False),
    help="Part type the band applies to.",
)
@click.option("--band", "band_code", required=True, help="Band code, e.g. 1..7.")
def dealer_assign_band(dealer_id: str, part_type: str, band_code: str) -> None:
    """Set a dealer's band for one part type."""
    handler = AssignBandHandler(dealer_repository())

    try:
        assignment = handler.handle(dealer_id, part_type, band_code)
    except DomainException as exc:
        raise as_click_error(exc)

    click.echo(
        f"Dealer {dealer_id} billed at band {assignment.band_code} "
        f"for {assignment.part_type.value}"
    )


@click.command("check")
@click.option("--dealer", "dealer_id", required=True, help="Dealer account ID.")
def dealer_check(dealer_id: str) -> None:
    """Report visible part types with no band assignment."""
    handler = CheckDealerSetupHandler(dealer_repository())

    try:
        missing = handler.handle(dealer_id)
    except DomainException as exc:
        raise as_click_error(exc)

    if not missing:
        click.echo(f"Dealer {dealer_id}: band setup complete.")
        return

    names = ", ".join(pt.value for pt in missing)
    raise click.ClickException(f"Dealer {dealer_id} has no band for: {names}")
