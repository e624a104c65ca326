"""CLI commands for the Beer aggregate."""

from __future__ import annotations

import click

from beerstock.application.dto import BeerDTO, BeerSpec
from beerstock.domain.exceptions import DomainException
from beerstock.domain.model.beer import BeerType
from beerstock.infrastructure.bootstrap import stock_manager

_TYPE_CHOICES = [t.value for t in BeerType]


def _display_beer(dto: BeerDTO) -> None:
    click.echo(f"Beer #{dto.id} '{dto.name}'  ({dto.brand}, {dto.type})")
    click.echo(f"Stock: {dto.quantity} / {dto.max_capacity}")


@click.command("create")
@click.option("--name", required=True, help="Beer name (must be unique).")
@click.option("--brand", required=True, help="Brand name.")
@click.option(
    "--type", "beer_type", required=True,
    type=click.Choice(_TYPE_CHOICES, case_sensitive=False), help="Beer type.",
)
@click.option("--max", "max_capacity", required=True, type=int, help="Maximum capacity.")
@click.option("--quantity", required=True, type=int, help="Initial quantity in stock.")
def beer_create(name: str, brand: str, beer_type: str, max_capacity: int, quantity: int) -> None:
    """Register a new beer."""
    manager = stock_manager()
    spec = BeerSpec(
        name=name,
        brand=brand,
        max_capacity=max_capacity,
        quantity=quantity,
        type=beer_type,
    )

    try:
        dto = manager.create(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Beer #{dto.id} '{dto.name}' created with {dto.quantity} of {dto.max_capacity}")


@click.command("show")
@click.option("--name", required=True, help="Beer name.")
def beer_show(name: str) -> None:
    """Show a beer by name."""
    try:
        dto = stock_manager().find_by_name(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_beer(dto)


@click.command("list")
def beer_list() -> None:
    """List every beer in stock."""
    beers = stock_manager().list_all()

    if not beers:
        click.echo("No beers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Brand':<16} {'Type':<9} {'Qty':>5} {'Max':>5}")
    click.echo("-" * 66)
    for b in beers:
        click.echo(
            f"{b.id:<6} {b.name:<20} {b.brand:<16} {b.type:<9} {b.quantity:>5} {b.max_capacity:>5}"
        )


@click.command("delete")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID to delete.")
def beer_delete(beer_id: int) -> None:
    """Delete a beer."""
    try:
        stock_manager().delete_by_id(beer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Beer #{beer_id} deleted.")


@click.command("increment")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID.")
@click.option("--quantity", required=True, type=int, help="Units to add.")
def beer_increment(beer_id: int, quantity: int) -> None:
    """Add stock to a beer, up to its max capacity."""
    try:
        dto = stock_manager().increment(beer_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_beer(dto)


@click.command("decrement")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID.")
@click.option("--quantity", required=True, type=int, help="Units to remove.")
def beer_decrement(beer_id: int, quantity: int) -> None:
    """Remove stock from a beer, down to zero."""
    try:
        dto = stock_manager().decrement(beer_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_beer(dto)
