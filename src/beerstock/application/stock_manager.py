"""Application service: the Stock Manager.

Owns no storage of its own. Every operation loads at most one beer from
the repository, applies a business rule, and saves only on success, so a
rejected change never reaches the store.
"""

from __future__ import annotations

import logging

from beerstock.application.dto import BeerDTO, BeerSpec
from beerstock.domain.exceptions import (
    AlreadyExistsError,
    CapacityExceededError,
    EntityNotFoundError,
)
from beerstock.domain.model.beer import Beer, BeerType
from beerstock.domain.model.value_objects import Quantity
from beerstock.domain.repository.beer_repository import BeerRepository

logger = logging.getLogger(__name__)


class StockManager:

    def __init__(self, beer_repo: BeerRepository) -> None:
        self._beer_repo = beer_repo

    def create(self, spec: BeerSpec) -> BeerDTO:
        """Register a new beer. Names are unique across the stock."""
        beer = Beer(
            id=None,
            name=spec.name,
            brand=spec.brand,
            max_capacity=spec.max_capacity,
            quantity=spec.quantity,
            type=BeerType.parse(spec.type),
        )
        if self._beer_repo.get_by_name(beer.name) is not None:
            logger.warning("Rejected duplicate beer %r", beer.name)
            raise AlreadyExistsError(
                f"Beer with name '{beer.name}' already registered in the system"
            )

        saved = self._beer_repo.save(beer)
        logger.info("Created beer #%s %r", saved.id, saved.name)
        return BeerDTO.from_domain(saved)

    def find_by_name(self, name: str) -> BeerDTO:
        beer = self._beer_repo.get_by_name(name)
        if beer is None:
            raise EntityNotFoundError(f"Beer with name '{name}' not found")
        return BeerDTO.from_domain(beer)

    def list_all(self) -> list[BeerDTO]:
        return [BeerDTO.from_domain(beer) for beer in self._beer_repo.list_all()]

    def delete_by_id(self, beer_id: int) -> None:
        self._load(beer_id)
        self._beer_repo.delete(beer_id)
        logger.info("Deleted beer #%s", beer_id)

    def increment(self, beer_id: int, amount: int) -> BeerDTO:
        """Add ``amount`` units, refusing to go above the beer's max capacity."""
        beer = self._load(beer_id)
        try:
            beer.increment(Quantity(amount))
        except CapacityExceededError as exc:
            logger.warning("Rejected increment of beer #%s: %s", beer_id, exc)
            raise
        return self._store_mutation(beer)

    def decrement(self, beer_id: int, amount: int) -> BeerDTO:
        """Remove ``amount`` units, refusing to go below zero."""
        beer = self._load(beer_id)
        try:
            beer.decrement(Quantity(amount))
        except CapacityExceededError as exc:
            logger.warning("Rejected decrement of beer #%s: %s", beer_id, exc)
            raise
        return self._store_mutation(beer)

    # --- Internal helpers -----------------------------------------------------

    def _load(self, beer_id: int) -> Beer:
        beer = self._beer_repo.get_by_id(beer_id)
        if beer is None:
            raise EntityNotFoundError(f"Beer with ID {beer_id} not found")
        return beer

    def _store_mutation(self, beer: Beer) -> BeerDTO:
        saved = self._beer_repo.save(beer)
        logger.info("Beer #%s %r now has %d of %d", saved.id, saved.name,
                    saved.quantity, saved.max_capacity)
        return BeerDTO.from_domain(saved)
