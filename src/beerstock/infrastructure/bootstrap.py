"""Composition root - wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging

from sqlalchemy import create_engine

from beerstock.application.stock_manager import StockManager
from beerstock.domain.repository.beer_repository import BeerRepository
from beerstock.infrastructure.config import Settings, get_settings
from beerstock.infrastructure.persistence.json_beer_repository import (
    JsonBeerRepository,
)
from beerstock.infrastructure.persistence.sqlalchemy_beer_repository import (
    SqlAlchemyBeerRepository,
)

logger = logging.getLogger(__name__)


def beer_repository(settings: Settings | None = None) -> BeerRepository:
    settings = settings or get_settings()
    if settings.database_url:
        logger.debug("Using SQL beer store at %s", settings.database_url)
        engine = create_engine(settings.database_url, echo=settings.database_echo)
        return SqlAlchemyBeerRepository(engine)
    return JsonBeerRepository(settings.data_dir / "beers.json")


def stock_manager(settings: Settings | None = None) -> StockManager:
    return StockManager(beer_repo=beer_repository(settings))
