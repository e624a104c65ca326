"""Abstract repository for the Beer aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from beerstock.domain.model.beer import Beer


class BeerRepository(ABC):

    @abstractmethod
    def get_by_id(self, beer_id: int) -> Beer | None:
        """Return a beer by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Beer | None:
        """Return a beer by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Beer]:
        """Return every stored beer."""

    @abstractmethod
    def save(self, beer: Beer) -> Beer:
        """Persist a new or updated beer, assigning an ID if it has none."""

    @abstractmethod
    def delete(self, beer_id: int) -> None:
        """Remove a beer. Does nothing if the ID is unknown."""
