"""DishService business rules: unique names, the cost cap and missing records."""

from decimal import Decimal

import pytest

from app.exceptions.dish_exceptions import (
    DishCostIncreaseError,
    DishNotFoundError,
    DishesNotFoundError,
    DuplicateDishNameError,
    ErrorKind,
)
from app.models.dish import Dish
from app.schemas.dish import DishCreateSchema, DishUpdateSchema
from app.services.dish_service import DishService


def _update(name="Soup", cost=10.0, made_by="Chef A") -> DishUpdateSchema:
    return DishUpdateSchema(name=name, cost=cost, made_by=made_by)


async def test_list_empty_raises_not_found(repository):
    with pytest.raises(DishesNotFoundError) as exc_info:
        await DishService.get_dishes_and_average_price(repository)
    assert exc_info.value.kind is ErrorKind.NOT_FOUND


async def test_list_returns_dishes_and_average(repository, soup):
    await Dish.create(name="Cake", cost=20.0, made_by="Chef B")

    dishes, average = await DishService.get_dishes_and_average_price(repository)

    assert [d.name for d in dishes] == ["Soup", "Cake"]
    assert average == pytest.approx(15.0)


async def test_create_persists_dish(repository):
    dish = await DishService.create_dish(
        repository, DishCreateSchema(name="Soup", cost=10, made_by="Chef A")
    )

    stored = await Dish.get(id=dish.id)
    assert (stored.name, stored.cost, stored.made_by) == ("Soup", 10.0, "Chef A")


async def test_create_duplicate_name_rejected(repository, soup):
    with pytest.raises(DuplicateDishNameError) as exc_info:
        await DishService.create_dish(
            repository, DishCreateSchema(name="Soup", cost=12, made_by="Chef B")
        )

    assert exc_info.value.kind is ErrorKind.BAD_REQUEST
    assert await Dish.all().count() == 1


async def test_create_duplicate_lost_race_maps_to_duplicate(repository, soup, monkeypatch):
    # the pre-check misses a dish written concurrently; the unique constraint catches it
    async def never_exists(name, exclude_id=None):
        return False

    monkeypatch.setattr(repository, "dish_name_exists", never_exists)

    with pytest.raises(DuplicateDishNameError):
        await DishService.create_dish(
            repository, DishCreateSchema(name="Soup", cost=12, made_by="Chef B")
        )
    assert await Dish.all().count() == 1


async def test_get_missing_raises_not_found(repository):
    with pytest.raises(DishNotFoundError) as exc_info:
        await DishService.get_dish_by_id(repository, 7)
    assert exc_info.value.dish_id == 7


@pytest.mark.parametrize("cost", [Decimal("0"), Decimal("10"), Decimal("11.9"), Decimal("12")])
async def test_update_within_limit_succeeds(repository, soup, cost):
    dish = await DishService.update_dish(
        repository, soup.id, _update(name="Broth", cost=cost, made_by="Chef B")
    )

    stored = await Dish.get(id=soup.id)
    assert (stored.name, stored.cost, stored.made_by) == ("Broth", cost, "Chef B")
    assert dish.cost == cost


@pytest.mark.parametrize("cost", [Decimal("12.01"), Decimal("12.1"), Decimal("100")])
async def test_update_over_limit_rejected_and_unchanged(repository, soup, cost):
    with pytest.raises(DishCostIncreaseError) as exc_info:
        await DishService.update_dish(repository, soup.id, _update(name="Broth", cost=cost))

    assert exc_info.value.current_cost == 10.0
    assert exc_info.value.requested_cost == cost
    assert "20%" in str(exc_info.value)
    stored = await Dish.get(id=soup.id)
    assert (stored.name, stored.cost) == ("Soup", 10.0)


async def test_update_missing_raises_not_found(repository):
    with pytest.raises(DishNotFoundError):
        await DishService.update_dish(repository, 99, _update())


async def test_update_onto_other_dish_name_rejected(repository, soup):
    cake = await Dish.create(name="Cake", cost=5.0, made_by="Chef B")

    with pytest.raises(DuplicateDishNameError):
        await DishService.update_dish(repository, cake.id, _update(name="Soup", cost=5.0))

    assert (await Dish.get(id=cake.id)).name == "Cake"


async def test_update_keeping_own_name(repository, soup):
    dish = await DishService.update_dish(repository, soup.id, _update(cost=11.0))
    assert dish.name == "Soup"


async def test_delete_then_get_not_found(repository, soup):
    await DishService.delete_dish(repository, soup.id)

    with pytest.raises(DishNotFoundError):
        await DishService.get_dish_by_id(repository, soup.id)


async def test_delete_missing_raises_not_found(repository):
    with pytest.raises(DishNotFoundError):
        await DishService.delete_dish(repository, 3)


@pytest.mark.parametrize("current, requested", [
    ("3.00", "3.60"),
    ("0.10", "0.12"),
    ("9.99", "11.98"),
])
async def test_update_by_exactly_twenty_percent_succeeds(repository, current, requested):
    dish = await Dish.create(name="Tea", cost=Decimal(current), made_by="Chef A")

    await DishService.update_dish(
        repository, dish.id, _update(name="Tea", cost=Decimal(requested))
    )

    assert (await Dish.get(id=dish.id)).cost == Decimal(requested)


@pytest.mark.parametrize("dish_id", [0, -1, 2 ** 31, 99999999999999999999])
async def test_out_of_range_id_is_not_found(repository, soup, dish_id):
    with pytest.raises(DishNotFoundError):
        await DishService.get_dish_by_id(repository, dish_id)
    with pytest.raises(DishNotFoundError):
        await DishService.update_dish(repository, dish_id, _update())
    with pytest.raises(DishNotFoundError):
        await DishService.delete_dish(repository, dish_id)
