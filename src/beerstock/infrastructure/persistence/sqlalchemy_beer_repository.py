"""SQLAlchemy-backed implementation of BeerRepository.

Works against any SQLAlchemy URL; the table is created on first use.
"""

from __future__ import annotations

import logging

from sqlalchemy import Column, Integer, String, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session

from beerstock.domain.model.beer import NAME_MAX_LENGTH, Beer, BeerType
from beerstock.domain.repository.beer_repository import BeerRepository

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


class BeerRow(Base):
    __tablename__ = "beers"
    # AUTOINCREMENT keeps SQLite from reusing the ID of a deleted row.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(NAME_MAX_LENGTH), nullable=False, unique=True, index=True)
    brand = Column(String(NAME_MAX_LENGTH), nullable=False)
    max = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    type = Column(String(16), nullable=False)


class SqlAlchemyBeerRepository(BeerRepository):

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        Base.metadata.create_all(engine)

    # --- BeerRepository interface ---------------------------------------------

    def get_by_id(self, beer_id: int) -> Beer | None:
        with Session(self._engine) as session:
            row = session.get(BeerRow, beer_id)
            return self._to_domain(row) if row is not None else None

    def get_by_name(self, name: str) -> Beer | None:
        with Session(self._engine) as session:
            row = session.scalars(
                select(BeerRow).where(BeerRow.name == name)
            ).first()
            return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Beer]:
        with Session(self._engine) as session:
            rows = session.scalars(select(BeerRow).order_by(BeerRow.id)).all()
            return [self._to_domain(row) for row in rows]

    def save(self, beer: Beer) -> Beer:
        with Session(self._engine) as session:
            row = session.get(BeerRow, beer.id) if beer.id is not None else None
            if row is None:
                row = BeerRow(id=beer.id)
                session.add(row)
            row.name = beer.name
            row.brand = beer.brand
            row.max = beer.max_capacity
            row.quantity = beer.quantity
            row.type = beer.type.value
            session.commit()
            beer.id = row.id
        logger.debug("Saved beer #%s", beer.id)
        return beer

    def delete(self, beer_id: int) -> None:
        with Session(self._engine) as session:
            row = session.get(BeerRow, beer_id)
            if row is not None:
                session.delete(row)
                session.commit()
                logger.debug("Removed beer #%s", beer_id)

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_domain(row: BeerRow) -> Beer:
        return Beer(
            id=row.id,
            name=row.name,
            brand=row.brand,
            max_capacity=row.max,
            quantity=row.quantity,
            type=BeerType(row.type),
        )
