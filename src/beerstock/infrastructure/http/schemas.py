from pydantic import BaseModel, Field, field_validator

from beerstock.application.dto import BeerDTO
from beerstock.domain.model.beer import NAME_MAX_LENGTH, BeerType


class BeerCreate(BaseModel):
    name: str = Field(max_length=NAME_MAX_LENGTH)
    brand: str = Field(max_length=NAME_MAX_LENGTH)
    max: int = Field(ge=0)
    quantity: int = Field(ge=0, le=100)
    type: BeerType

    @field_validator("name", "brand")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v


class BeerRead(BaseModel):
    id: int
    name: str
    brand: str
    max: int
    quantity: int
    type: BeerType

    @classmethod
    def from_dto(cls, dto: BeerDTO) -> "BeerRead":
        return cls(
            id=dto.id,
            name=dto.name,
            brand=dto.brand,
            max=dto.max_capacity,
            quantity=dto.quantity,
            type=dto.type,
        )


class QuantityUpdate(BaseModel):
    quantity: int = Field(gt=0, le=100)
