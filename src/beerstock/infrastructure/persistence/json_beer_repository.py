"""JSON-file-backed implementation of BeerRepository.

The file holds ``{"next_id": N, "beers": [...]}``. ``next_id`` only ever
grows, so the ID of a deleted beer is never handed out again.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from beerstock.domain.model.beer import Beer, BeerType
from beerstock.domain.repository.beer_repository import BeerRepository

logger = logging.getLogger(__name__)


class JsonBeerRepository(BeerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- BeerRepository interface ---------------------------------------------

    def get_by_id(self, beer_id: int) -> Beer | None:
        for raw in self._load_raw()["beers"]:
            if raw["id"] == beer_id:
                return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Beer | None:
        for raw in self._load_raw()["beers"]:
            if raw["name"] == name:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Beer]:
        return [self._to_domain(raw) for raw in self._load_raw()["beers"]]

    def save(self, beer: Beer) -> Beer:
        data = self._load_raw()
        records = data["beers"]

        if beer.id is None:
            beer.id = data["next_id"]
        data["next_id"] = max(data["next_id"], beer.id + 1)

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(records):
            if raw["id"] == beer.id:
                records[i] = self._to_raw(beer)
                break
        else:
            records.append(self._to_raw(beer))

        self._persist_raw(data)
        logger.debug("Saved beer #%s to %s", beer.id, self._file_path)
        return beer

    def delete(self, beer_id: int) -> None:
        data = self._load_raw()
        remaining = [r for r in data["beers"] if r["id"] != beer_id]
        if len(remaining) != len(data["beers"]):
            data["beers"] = remaining
            self._persist_raw(data)
            logger.debug("Removed beer #%s from %s", beer_id, self._file_path)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(beer: Beer) -> dict:
        return {
            "id": beer.id,
            "name": beer.name,
            "brand": beer.brand,
            "max": beer.max_capacity,
            "quantity": beer.quantity,
            "type": beer.type.value,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Beer:
        return Beer(
            id=raw["id"],
            name=raw["name"],
            brand=raw["brand"],
            max_capacity=raw["max"],
            quantity=raw["quantity"],
            type=BeerType(raw["type"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, data: dict) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"next_id": 1, "beers": []})
