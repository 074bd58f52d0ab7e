"""
Models package
"""
from pizzeria.models.ingredient import (
    IngredientModel,
    CrustModel,
    SauceModel,
    CheeseModel,
    ToppingModel,
    crust_view,
    sauce_view,
    cheese_view,
    topping_view
)
from pizzeria.models.pizza import PizzaModel, pizza_cheese, pizza_topping
from pizzeria.models.customer import AddressModel, CardModel, CustomerModel
from pizzeria.models.order import OrderModel, OrderLineModel
from pizzeria.models.meta import SchemaInfo

__all__ = [
    "IngredientModel",
    "CrustModel",
    "SauceModel",
    "CheeseModel",
    "ToppingModel",
    "crust_view",
    "sauce_view",
    "cheese_view",
    "topping_view",
    "PizzaModel",
    "pizza_cheese",
    "pizza_topping",
    "AddressModel",
    "CardModel",
    "CustomerModel",
    "OrderModel",
    "OrderLineModel",
    "SchemaInfo"
]
