"""Unit tests for the Beer aggregate."""

import pytest

from beerstock.domain.exceptions import CapacityExceededError, ValidationError
from beerstock.domain.model.beer import Beer, BeerType
from beerstock.domain.model.value_objects import Quantity


def _beer(quantity: int = 10, max_capacity: int = 50) -> Beer:
    return Beer(
        id=1, name="Brahma", brand="Ambev",
        max_capacity=max_capacity, quantity=quantity, type=BeerType.LAGER,
    )


class TestBeerCreation:

    def test_valid_beer(self):
        beer = _beer()
        assert beer.quantity == 10
        assert beer.max_capacity == 50
        assert beer.type is BeerType.LAGER

    def test_quantity_above_max_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 50"):
            _beer(quantity=51)

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="between 0 and 50"):
            _beer(quantity=-1)

    def test_quantity_equal_to_max_allowed(self):
        assert _beer(quantity=50).quantity == 50

    def test_negative_max_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            _beer(quantity=0, max_capacity=-1)

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Beer(id=None, name="  ", brand="Ambev", max_capacity=5, quantity=0, type=BeerType.ALE)

    def test_missing_brand_rejected(self):
        with pytest.raises(ValidationError, match="brand is required"):
            Beer(id=None, name="Brahma", brand=None, max_capacity=5, quantity=0, type=BeerType.ALE)

    def test_overlong_name_rejected(self):
        with pytest.raises(ValidationError, match="at most 200"):
            Beer(id=None, name="x" * 201, brand="Ambev", max_capacity=5, quantity=0, type=BeerType.ALE)

    def test_name_and_brand_stored_stripped(self):
        beer = Beer(id=None, name="  Brahma ", brand=" Ambev", max_capacity=5, quantity=0, type=BeerType.ALE)
        assert beer.name == "Brahma"
        assert beer.brand == "Ambev"

    def test_non_integer_quantity_rejected(self):
        with pytest.raises(ValidationError, match="quantity must be an integer"):
            Beer(id=None, name="Brahma", brand="Ambev", max_capacity=50, quantity="10", type=BeerType.ALE)

    def test_non_integer_max_rejected(self):
        with pytest.raises(ValidationError, match="max_capacity must be an integer"):
            Beer(id=None, name="Brahma", brand="Ambev", max_capacity=50.0, quantity=10, type=BeerType.ALE)

    def test_bool_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Beer(id=None, name="Brahma", brand="Ambev", max_capacity=5, quantity=True, type=BeerType.ALE)


class TestBeerType:

    def test_parse_is_case_insensitive(self):
        assert BeerType.parse("ipa") is BeerType.IPA

    def test_parse_passes_enum_through(self):
        assert BeerType.parse(BeerType.STOUT) is BeerType.STOUT

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Unknown beer type"):
            BeerType.parse("PILSNER_XL")


class TestBeerIncrement:

    def test_increment_adds_stock(self):
        beer = _beer()
        beer.increment(Quantity(10))
        assert beer.quantity == 20

    def test_increment_up_to_max(self):
        beer = _beer()
        beer.increment(Quantity(40))
        assert beer.quantity == 50

    def test_increment_above_max_rejected(self):
        beer = _beer()
        with pytest.raises(CapacityExceededError, match="above max capacity 50"):
            beer.increment(Quantity(45))
        assert beer.quantity == 10


class TestBeerDecrement:

    def test_decrement_removes_stock(self):
        beer = _beer()
        beer.decrement(Quantity(5))
        assert beer.quantity == 5

    def test_decrement_to_zero(self):
        beer = _beer()
        beer.decrement(Quantity(10))
        assert beer.quantity == 0

    def test_decrement_below_zero_rejected(self):
        beer = _beer()
        with pytest.raises(CapacityExceededError, match="only 10 in stock"):
            beer.decrement(Quantity(80))
        assert beer.quantity == 10

    def test_quantity_stays_in_bounds_over_many_changes(self):
        beer = _beer(quantity=0, max_capacity=7)
        for step in [3, 5, 4, 1, 7, 2, 6]:
            for change in (beer.increment, beer.decrement):
                try:
                    change(Quantity(step))
                except CapacityExceededError:
                    pass
                assert 0 <= beer.quantity <= beer.max_capacity
