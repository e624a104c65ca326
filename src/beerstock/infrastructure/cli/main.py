import logging

import click
import uvicorn

from beerstock.infrastructure.cli.beer_commands import (
    beer_create,
    beer_decrement,
    beer_delete,
    beer_increment,
    beer_list,
    beer_show,
)
from beerstock.infrastructure.config import get_settings


@click.group()
def cli() -> None:
    """beerstock - Beer Stock Manager"""
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@cli.group()
def beer() -> None:
    """Manage beers."""


@cli.command("serve")
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", default=8000, show_default=True, type=int, help="Bind port.")
@click.option("--reload", is_flag=True, default=False, help="Reload on code changes.")
def serve(host: str, port: int, reload: bool) -> None:
    """Run the HTTP API."""
    uvicorn.run("beerstock.infrastructure.http.app:app", host=host, port=port, reload=reload)


# Register subcommands
beer.add_command(beer_create)
beer.add_command(beer_decrement)
beer.add_command(beer_delete)
beer.add_command(beer_increment)
beer.add_command(beer_list)
beer.add_command(beer_show)
