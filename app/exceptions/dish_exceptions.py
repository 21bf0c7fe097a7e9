# app/exceptions/dish_exceptions.py
from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of user-facing failures, mapped to HTTP statuses at the edge."""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"


class DishException(Exception):
    """Base exception for dish-related errors."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DishNotFoundError(DishException):
    """Raised when dish is not found in database."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, dish_id: int):
        self.dish_id = dish_id
        super().__init__(f"Dish with id:{dish_id} not found")


class DishesNotFoundError(DishException):
    """Raised when the database holds no dishes at all."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "No Dishes found in database"):
        super().__init__(message)


class DuplicateDishNameError(DishException):
    """Raised when another dish already uses the name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("Dish with this name already exists")


class DishCostIncreaseError(DishException):
    """Raised when an update raises the cost above the allowed ratio."""

    def __init__(
            self,
            name: str,
            current_cost: float,
            requested_cost: float,
            max_ratio: float
    ):
        self.name = name
        self.current_cost = current_cost
        self.requested_cost = requested_cost
        self.max_ratio = max_ratio
        percent = round((max_ratio - 1) * 100)
        super().__init__(
            f"New cost cannot be more than {percent}% higher than the original cost"
        )
