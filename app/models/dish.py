# app/models/dish.py
from tortoise import Model, fields


class Dish(Model):
    """
    Dish database model representing a priced menu item and the chef who made it.
    """

    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=100, unique=True)
    cost = fields.DecimalField(max_digits=10, decimal_places=2)
    made_by = fields.CharField(max_length=100)

    class Meta:
        table = "dishes"

    def __str__(self) -> str:
        return f"{self.name} - {self.cost}"
