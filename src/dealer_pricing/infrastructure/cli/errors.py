"""Translate domain errors into CLI failures."""

from __future__ import annotations

import click

from dealer_pricing.domain.exceptions import DomainException


def as_click_error(exc: DomainException) -> click.ClickException:
    """Keep the machine-readable reason in front of the message."""
    return click.ClickException(f"[{exc.reason}] {exc}")
