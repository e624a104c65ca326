from functools import lru_cache
from typing import List

from fastapi import APIRouter, Depends, Response, status

from beerstock.application.dto import BeerSpec
from beerstock.application.stock_manager import StockManager
from beerstock.domain.repository.beer_repository import BeerRepository
from beerstock.infrastructure.bootstrap import beer_repository
from beerstock.infrastructure.http.schemas import BeerCreate, BeerRead, QuantityUpdate

router = APIRouter()


@lru_cache
def get_beer_repository() -> BeerRepository:
    return beer_repository()


def get_stock_manager(repo: BeerRepository = Depends(get_beer_repository)) -> StockManager:
    return StockManager(beer_repo=repo)


@router.post("", response_model=BeerRead, status_code=status.HTTP_201_CREATED)
def create_beer(payload: BeerCreate, manager: StockManager = Depends(get_stock_manager)):
    dto = manager.create(
        BeerSpec(
            name=payload.name,
            brand=payload.brand,
            max_capacity=payload.max,
            quantity=payload.quantity,
            type=payload.type,
        )
    )
    return BeerRead.from_dto(dto)


@router.get("", response_model=List[BeerRead])
def list_beers(manager: StockManager = Depends(get_stock_manager)):
    return [BeerRead.from_dto(dto) for dto in manager.list_all()]


@router.get("/{name}", response_model=BeerRead)
def get_beer(name: str, manager: StockManager = Depends(get_stock_manager)):
    return BeerRead.from_dto(manager.find_by_name(name))


@router.delete("/{beer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_beer(beer_id: int, manager: StockManager = Depends(get_stock_manager)):
    manager.delete_by_id(beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{beer_id}/increment", response_model=BeerRead)
def increment_beer(
    beer_id: int,
    payload: QuantityUpdate,
    manager: StockManager = Depends(get_stock_manager),
):
    return BeerRead.from_dto(manager.increment(beer_id, payload.quantity))


@router.patch("/{beer_id}/decrement", response_model=BeerRead)
def decrement_beer(
    beer_id: int,
    payload: QuantityUpdate,
    manager: StockManager = Depends(get_stock_manager),
):
    return BeerRead.from_dto(manager.decrement(beer_id, payload.quantity))
