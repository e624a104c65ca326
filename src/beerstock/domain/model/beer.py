"""Beer aggregate - one stock record per beer.

A beer knows how many units are in stock and the ceiling it may never
exceed. Quantity changes only through ``increment`` and ``decrement``,
which keep it inside ``[0, max_capacity]``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from beerstock.domain.exceptions import CapacityExceededError, ValidationError
from beerstock.domain.model.value_objects import Quantity

NAME_MAX_LENGTH = 200


class BeerType(Enum):
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"

    @classmethod
    def parse(cls, raw: str | BeerType) -> BeerType:
        if isinstance(raw, BeerType):
            return raw
        try:
            return cls(str(raw).strip().upper())
        except ValueError as exc:
            allowed = ", ".join(t.value for t in cls)
            raise ValidationError(
                f"Unknown beer type {raw!r} (expected one of {allowed})"
            ) from exc


@dataclass
class Beer:
    """Aggregate root for a beer's stock.

    Invariants:
    - ``name`` and ``brand`` are stored stripped, non-empty, at most 200 characters
    - ``max_capacity`` and ``quantity`` are integers
    - ``0 <= quantity <= max_capacity``
    """

    id: int | None
    name: str
    brand: str
    max_capacity: int
    quantity: int
    type: BeerType

    def __post_init__(self) -> None:
        for label in ("name", "brand"):
            value = getattr(self, label)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"Beer {label} is required")
            value = value.strip()
            if len(value) > NAME_MAX_LENGTH:
                raise ValidationError(
                    f"Beer {label} must be at most {NAME_MAX_LENGTH} characters"
                )
            setattr(self, label, value)
        for label in ("max_capacity", "quantity"):
            value = getattr(self, label)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(
                    f"Beer {label} must be an integer, got {type(value).__name__}"
                )
        if self.max_capacity < 0:
            raise ValidationError("Max capacity cannot be negative")
        if not 0 <= self.quantity <= self.max_capacity:
            raise ValidationError(
                f"Quantity of {self.name} must be between 0 and "
                f"{self.max_capacity}, got {self.quantity}"
            )

    def increment(self, amount: Quantity) -> None:
        """Add stock. Raises CapacityExceededError above ``max_capacity``."""
        new_quantity = self.quantity + amount.value
        if new_quantity > self.max_capacity:
            raise CapacityExceededError(
                f"Cannot increment {self.name} by {amount}: quantity would be "
                f"{new_quantity}, above max capacity {self.max_capacity}"
            )
        self.quantity = new_quantity

    def decrement(self, amount: Quantity) -> None:
        """Remove stock. Quantity may reach exactly zero, never below."""
        new_quantity = self.quantity - amount.value
        if new_quantity < 0:
            raise CapacityExceededError(
                f"Cannot decrement {self.name} by {amount}: "
                f"only {self.quantity} in stock"
            )
        self.quantity = new_quantity
