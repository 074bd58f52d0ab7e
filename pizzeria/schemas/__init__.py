"""
Schemas package
"""
from pizzeria.schemas.ingredient import (
    Size,
    Ingredient,
    Crust,
    Sauce,
    Cheese,
    Topping
)
from pizzeria.schemas.customer import Address, CardType, Card, Customer
from pizzeria.schemas.pizza import Pizza
from pizzeria.schemas.order import OrderLine, Order

__all__ = [
    "Size",
    "Ingredient",
    "Crust",
    "Sauce",
    "Cheese",
    "Topping",
    "Address",
    "CardType",
    "Card",
    "Customer",
    "Pizza",
    "OrderLine",
    "Order"
]
