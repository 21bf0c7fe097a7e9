# app/api/v1/dependencies/database.py
from typing import AsyncIterator

from fastapi import Depends
from tortoise import connections
from tortoise.backends.base.client import BaseDBAsyncClient

from app.repositories.dish_repository import DishRepository


async def get_db() -> AsyncIterator[BaseDBAsyncClient]:
    """
    Provide the default Tortoise client to a request.

    The client is shared and pooled; the driver connection is taken per
    query. Request scoped state lives in the repository built on it.

    Yields:
        Default Tortoise client
    """
    yield connections.get("default")


async def get_dish_repository(
        db: BaseDBAsyncClient = Depends(get_db)
) -> AsyncIterator[DishRepository]:
    """
    Provide a dish repository bound to the request connection.

    Changes left unsaved when the request finishes are dropped.

    Args:
        db: Request database connection

    Yields:
        DishRepository instance
    """
    repository = DishRepository(db)
    try:
        yield repository
    finally:
        repository.discard_changes()
