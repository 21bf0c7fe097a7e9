# app/repositories/dish_repository.py
import logging
from typing import List, Optional, Tuple

from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.functions import Avg
from tortoise.transactions import in_transaction

from app.models.dish import Dish
from app.exceptions.dish_exceptions import DishNotFoundError

logger = logging.getLogger(__name__)

_ADD = "add"
_UPDATE = "update"
_DELETE = "delete"

# ids are assigned from 1 by a 32-bit integer primary key
_MIN_DISH_ID = 1
_MAX_DISH_ID = 2 ** 31 - 1


class DishRepository:
    """
    Data access for dishes over an explicit database connection.

    Reads hit the database immediately. Writes are staged and only
    reach the database when save_changes() is called.
    """

    def __init__(self, db: BaseDBAsyncClient):
        self._db = db
        self._pending: List[Tuple[str, Dish]] = []

    @property
    def has_pending_changes(self) -> bool:
        return bool(self._pending)

    async def get_all_dishes(self) -> List[Dish]:
        """
        Retrieve all dishes.

        Returns:
            List of dishes ordered by id
        """
        return await Dish.all().using_db(self._db).order_by("id")

    async def get_dish_by_id(self, dish_id: int) -> Optional[Dish]:
        """
        Retrieve a single dish by ID.

        Args:
            dish_id: ID of the dish

        Returns:
            Dish instance or None if it doesn't exist
        """
        if not _MIN_DISH_ID <= dish_id <= _MAX_DISH_ID:
            return None
        return await Dish.get_or_none(id=dish_id, using_db=self._db)

    async def dish_name_exists(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether a dish with exactly this name is stored."""
        query = Dish.filter(name=name).using_db(self._db)
        if exclude_id is not None:
            query = query.exclude(id=exclude_id)
        return await query.exists()

    async def get_average_dish_price(self) -> Optional[float]:
        """
        Compute the mean cost of all dishes.

        Returns:
            Average cost, or None when there are no dishes
        """
        row = await (
            Dish.all()
            .using_db(self._db)
            .annotate(average=Avg("cost"))
            .first()
            .values("average")
        )
        if not row or row["average"] is None:
            return None
        return float(row["average"])

    def create_dish(self, dish: Dish) -> Dish:
        """Stage a new dish for insertion."""
        self._pending.append((_ADD, dish))
        return dish

    def update_dish(self, dish: Dish) -> Dish:
        """Stage an already loaded dish for update."""
        self._pending.append((_UPDATE, dish))
        return dish

    async def delete_dish_by_id(self, dish_id: int) -> None:
        """
        Stage a dish for deletion.

        Args:
            dish_id: ID of the dish to delete

        Raises:
            DishNotFoundError: If dish doesn't exist
        """
        dish = await self.get_dish_by_id(dish_id)
        if not dish:
            raise DishNotFoundError(dish_id)
        self._pending.append((_DELETE, dish))

    def discard_changes(self) -> None:
        if self._pending:
            logger.debug(f"Discarding {len(self._pending)} unsaved dish change(s)")
        self._pending.clear()

    async def save_changes(self) -> int:
        """
        Write all staged changes in a single transaction.

        Returns:
            Number of changes written

        Raises:
            IntegrityError: If a change violates a database constraint.
                The transaction is rolled back and staged changes dropped.
        """
        pending, self._pending = self._pending, []
        if not pending:
            return 0

        async with in_transaction(self._db.connection_name) as conn:
            for action, dish in pending:
                if action == _DELETE:
                    await dish.delete(using_db=conn)
                elif action == _ADD:
                    await dish.save(using_db=conn, force_create=True)
                else:
                    await dish.save(using_db=conn)

        logger.debug(f"Saved {len(pending)} dish change(s)")
        return len(pending)
