"""Data Transfer Objects - plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP and application layers without
exposing the Beer aggregate to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from beerstock.domain.model.beer import Beer, BeerType


@dataclass(frozen=True)
class BeerSpec:
    """Input: a beer to register."""

    name: str
    brand: str
    max_capacity: int
    quantity: int
    type: BeerType | str


@dataclass(frozen=True)
class BeerDTO:
    """Output: a beer as shown to the user."""

    id: int
    name: str
    brand: str
    max_capacity: int
    quantity: int
    type: str

    @staticmethod
    def from_domain(beer: Beer) -> BeerDTO:
        return BeerDTO(
            id=beer.id,
            name=beer.name,
            brand=beer.brand,
            max_capacity=beer.max_capacity,
            quantity=beer.quantity,
            type=beer.type.value,
        )
