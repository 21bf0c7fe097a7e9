# app/api/v1/endpoints/dishes.py
from fastapi import APIRouter, Depends

from app.schemas.dish import (
    DishCreateSchema,
    DishUpdateSchema,
    DishResponseSchema,
    DishesAndAveragePriceSchema,
    DishCreatedSchema,
    MessageSchema
)
from app.services.dish_service import DishService
from app.repositories.dish_repository import DishRepository
from app.api.v1.dependencies.database import get_dish_repository

router = APIRouter(prefix="/dish", tags=["dish"])


@router.get("", response_model=DishesAndAveragePriceSchema)
async def get_dishes_and_average_price(
        repository: DishRepository = Depends(get_dish_repository)
) -> DishesAndAveragePriceSchema:
    """
    Retrieve all dishes and their average price.

    Returns:
        Dishes and average price

    Raises:
        DishesNotFoundError: 404 if there are no dishes
    """
    dishes, average_price = await DishService.get_dishes_and_average_price(repository)
    return DishesAndAveragePriceSchema(
        dishes=[DishResponseSchema.from_orm_dish(dish) for dish in dishes],
        average_price=average_price
    )


@router.get("/{dish_id}", response_model=DishResponseSchema)
async def get_dish(
        dish_id: int,
        repository: DishRepository = Depends(get_dish_repository)
) -> DishResponseSchema:
    """
    Retrieve a single dish by ID.

    Raises:
        DishNotFoundError: 404 if dish not found
    """
    dish = await DishService.get_dish_by_id(repository, dish_id)
    return DishResponseSchema.from_orm_dish(dish)


@router.post("", response_model=DishCreatedSchema)
async def create_dish(
        dish_data: DishCreateSchema,
        repository: DishRepository = Depends(get_dish_repository)
) -> DishCreatedSchema:
    """
    Create a new dish.

    Args:
        dish_data: Dish creation data
        repository: Request scoped dish repository

    Returns:
        Confirmation message with the created dish

    Raises:
        DuplicateDishNameError: 400 if the name is taken
    """
    dish = await DishService.create_dish(repository, dish_data)
    return DishCreatedSchema(
        message="Dish created successfully",
        dish=DishResponseSchema.from_orm_dish(dish)
    )


@router.put("/{dish_id}", response_model=DishResponseSchema)
async def update_dish(
        dish_id: int,
        dish_data: DishUpdateSchema,
        repository: DishRepository = Depends(get_dish_repository)
) -> DishResponseSchema:
    """
    Update an existing dish.

    Args:
        dish_id: ID of the dish to update
        dish_data: Updated dish data
        repository: Request scoped dish repository

    Returns:
        Updated dish data

    Raises:
        DishNotFoundError: 404 if dish not found
        DishCostIncreaseError: 400 if the cost rises too much
    """
    dish = await DishService.update_dish(repository, dish_id, dish_data)
    return DishResponseSchema.from_orm_dish(dish)


@router.delete("/{dish_id}", response_model=MessageSchema)
async def delete_dish(
        dish_id: int,
        repository: DishRepository = Depends(get_dish_repository)
) -> MessageSchema:
    """
    Delete a dish.

    Raises:
        DishNotFoundError: 404 if dish not found
    """
    await DishService.delete_dish(repository, dish_id)
    return MessageSchema(message="Dish deleted successfully")
