# app/services/dish_service.py
import logging
from typing import List, Optional, Tuple

from tortoise.exceptions import IntegrityError

from app.models.dish import Dish
from app.repositories.dish_repository import DishRepository
from app.schemas.dish import DishCreateSchema, DishUpdateSchema
from app.exceptions.dish_exceptions import (
    DishNotFoundError,
    DishesNotFoundError,
    DuplicateDishNameError,
    DishCostIncreaseError
)
from app.core.config import settings

logger = logging.getLogger(__name__)


class DishService:
    """Service for managing dishes business logic."""

    @staticmethod
    async def get_dishes_and_average_price(
            repository: DishRepository
    ) -> Tuple[List[Dish], Optional[float]]:
        """
        Retrieve all dishes together with their average cost.

        Args:
            repository: Dish repository

        Returns:
            Tuple of (dishes, average cost)

        Raises:
            DishesNotFoundError: If there are no dishes at all
        """
        dishes = await repository.get_all_dishes()
        if not dishes:
            logger.warning("No dishes found in database")
            raise DishesNotFoundError()

        average_price = await repository.get_average_dish_price()
        logger.info("Retrieved dishes and average price")
        return dishes, average_price

    @staticmethod
    async def get_dish_by_id(repository: DishRepository, dish_id: int) -> Dish:
        """
        Retrieve a single dish by ID.

        Args:
            repository: Dish repository
            dish_id: ID of the dish

        Returns:
            Dish instance

        Raises:
            DishNotFoundError: If dish doesn't exist
        """
        dish = await repository.get_dish_by_id(dish_id)
        if not dish:
            logger.warning(f"Dish with id {dish_id} not found")
            raise DishNotFoundError(dish_id)

        logger.info(f"Retrieved dish with id {dish_id}")
        return dish

    @staticmethod
    async def _save(repository: DishRepository, name: str) -> None:
        try:
            await repository.save_changes()
        except IntegrityError:
            # unique name constraint lost a race with a concurrent write
            logger.warning(f"Dish with name: {name} already exists")
            raise DuplicateDishNameError(name)

    @staticmethod
    async def create_dish(repository: DishRepository, dish_data: DishCreateSchema) -> Dish:
        """
        Create a new dish.

        Args:
            repository: Dish repository
            dish_data: Dish creation data

        Returns:
            Created dish instance with its assigned id

        Raises:
            DuplicateDishNameError: If a dish with the same name exists
        """
        if await repository.dish_name_exists(dish_data.name):
            logger.warning(f"Dish with name: {dish_data.name} already exists")
            raise DuplicateDishNameError(dish_data.name)

        dish = repository.create_dish(Dish(
            name=dish_data.name,
            cost=dish_data.cost,
            made_by=dish_data.made_by
        ))
        await DishService._save(repository, dish_data.name)

        logger.info(f"Dish created: {dish.id} - {dish.name}")
        return dish

    @staticmethod
    async def update_dish(
            repository: DishRepository,
            dish_id: int,
            dish_data: DishUpdateSchema
    ) -> Dish:
        """
        Replace name, cost and chef of an existing dish.

        Args:
            repository: Dish repository
            dish_id: ID of the dish to update
            dish_data: Updated dish data

        Returns:
            Updated dish instance

        Raises:
            DishNotFoundError: If dish doesn't exist
            DishCostIncreaseError: If the new cost exceeds the allowed increase
            DuplicateDishNameError: If the new name belongs to another dish
        """
        dish = await repository.get_dish_by_id(dish_id)
        if not dish:
            logger.warning(f"Dish with id {dish_id} not found")
            raise DishNotFoundError(dish_id)

        max_ratio = settings.DISH_MAX_COST_INCREASE_RATIO
        if dish_data.cost > dish.cost * max_ratio:
            logger.warning(
                f"Business Rule Violation: The cost of '{dish_data.name}' "
                f"cannot be raised from {dish.cost} to {dish_data.cost}"
            )
            raise DishCostIncreaseError(dish_data.name, dish.cost, dish_data.cost, max_ratio)

        if await repository.dish_name_exists(dish_data.name, exclude_id=dish_id):
            logger.warning(f"Dish with name: {dish_data.name} already exists")
            raise DuplicateDishNameError(dish_data.name)

        dish.cost = dish_data.cost
        dish.made_by = dish_data.made_by
        dish.name = dish_data.name

        repository.update_dish(dish)
        await DishService._save(repository, dish_data.name)

        logger.info(f"Dish with id {dish_id} updated")
        return dish

    @staticmethod
    async def delete_dish(repository: DishRepository, dish_id: int) -> None:
        """
        Delete a dish.

        Args:
            repository: Dish repository
            dish_id: ID of the dish to delete

        Raises:
            DishNotFoundError: If dish doesn't exist
        """
        try:
            await repository.delete_dish_by_id(dish_id)
        except DishNotFoundError:
            logger.warning(f"Dish with id {dish_id} not found")
            raise
        await repository.save_changes()

        logger.info(f"Dish with id {dish_id} deleted")
