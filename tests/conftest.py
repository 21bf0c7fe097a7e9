"""Shared fixtures: in-memory SQLite database and an HTTP client for the app."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")
os.environ.setdefault("GENERATE_SCHEMAS", "true")

import pytest
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise, connections

from app.main import app
from app.models.dish import Dish
from app.repositories.dish_repository import DishRepository


@pytest.fixture
async def db():
    """Fresh in-memory database per test."""
    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={"models": ["app.models.dish"]},
    )
    await Tortoise.generate_schemas()
    yield connections.get("default")
    await connections.close_all()


@pytest.fixture
def repository(db):
    return DishRepository(db)


@pytest.fixture
async def soup(db):
    """A stored dish costing 10."""
    return await Dish.create(name="Soup", cost=10.0, made_by="Chef A")


@pytest.fixture
async def client(db):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
