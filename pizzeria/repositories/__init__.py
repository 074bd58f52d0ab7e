"""
Repositories package
"""
from pizzeria.repositories.ingredient_repository import (
    IngredientRepository,
    CrustRepository,
    SauceRepository,
    CheeseRepository,
    ToppingRepository
)
from pizzeria.repositories.address_repository import AddressRepository
from pizzeria.repositories.card_repository import CardRepository
from pizzeria.repositories.customer_repository import CustomerRepository
from pizzeria.repositories.pizza_repository import PizzaRepository
from pizzeria.repositories.order_repository import OrderRepository

__all__ = [
    "IngredientRepository",
    "CrustRepository",
    "SauceRepository",
    "CheeseRepository",
    "ToppingRepository",
    "AddressRepository",
    "CardRepository",
    "CustomerRepository",
    "PizzaRepository",
    "OrderRepository"
]
