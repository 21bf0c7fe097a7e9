# app/schemas/dish.py
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True
    )


class DishCreateSchema(CamelModel):
    """Schema for creating a new dish."""

    name: str = Field(..., min_length=1, max_length=100)
    cost: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    made_by: str = Field(..., min_length=1, max_length=100)

    @field_validator('name', 'made_by', mode='before')
    @classmethod
    def strip_text(cls, value):
        """Strip surrounding whitespace from text fields."""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator('cost')
    @classmethod
    def validate_cost(cls, value: Decimal) -> Decimal:
        """Reject NaN and infinite costs."""
        if not value.is_finite():
            raise ValueError('Cost must be a finite number')
        return value


class DishUpdateSchema(DishCreateSchema):
    """Schema for updating a dish. Every field is replaced."""


class DishResponseSchema(CamelModel):
    """Schema for dish responses."""

    id: int
    name: str
    cost: float
    made_by: str

    @classmethod
    def from_orm_dish(cls, dish: 'Dish') -> 'DishResponseSchema':
        """
        Create response schema from ORM model.

        Args:
            dish: Dish ORM model

        Returns:
            DishResponseSchema instance
        """
        return cls(
            id=dish.id,
            name=dish.name,
            cost=float(dish.cost),
            made_by=dish.made_by
        )


class DishesAndAveragePriceSchema(CamelModel):
    """All dishes together with their average cost."""

    dishes: List[DishResponseSchema]
    average_price: Optional[float]


class MessageSchema(BaseModel):
    """Plain confirmation message."""

    message: str


class DishCreatedSchema(MessageSchema):
    """Confirmation message with the created dish."""

    dish: DishResponseSchema
