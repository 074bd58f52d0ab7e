"""
Order Service - Business Logic Layer
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from pizzeria.database import atomic
from pizzeria.repositories.ingredient_repository import IngredientRepository, SubtypeRepository
from pizzeria.repositories.order_repository import OrderRepository
from pizzeria.schemas.customer import Address
from pizzeria.schemas.ingredient import Ingredient
from pizzeria.schemas.order import Order
from pizzeria.schemas.pizza import Pizza

logger = logging.getLogger(__name__)


class OrderService:
    """Service layer that stores whole order graphs"""

    def __init__(self, db: Session, orders: OrderRepository = None, ingredients: IngredientRepository = None):
        self.db = db
        self.orders = orders or OrderRepository(db)
        self.ingredients = ingredients or IngredientRepository(db)

        self.customers = self.orders.customers
        self.addresses = self.customers.addresses
        self.cards = self.customers.cards
        self.pizzas = self.orders.pizzas

    def get_orders_by_customer(self, customer_id: int) -> List[Order]:
        """Get all orders for a customer"""
        return self.orders.get_by_customer(customer_id)

    def save(self, order: Order) -> Order:
        """
        Persist every part of an order graph that has no ID yet

        Steps:
        1. Addresses of the order, its card, the customer and the customer's card
        2. The order's card and the customer's active card
        3. The customer
        4. For each line's pizza: crust, sauce, cheeses, toppings, then the pizza
        5. The order row
        6. The order lines

        Entities that already carry an ID are skipped, so graphs that mix
        loaded and new entities can be saved, and saving twice is a no-op.
        Everything runs in one transaction; on failure it is rolled back and
        the IDs, timestamp and unit costs assigned along the way are reset.

        Args:
            order: Fully populated order graph

        Returns:
            The same order with IDs assigned throughout

        Raises:
            ConstraintViolation: A row was refused; nothing is stored
            NotFound: A subtype insert found no ingredient row
        """
        if order.id:
            logger.debug(f"Order {order.id} already persisted. Skipping.")
            return order

        snapshot = self._snapshot(order)

        try:
            with atomic(self.db):
                self._save_graph(order)
        except Exception as e:
            self._restore(snapshot)
            logger.error(f"✗ Order cascade rolled back: {e}")
            raise

        logger.info(f"✓ Order {order.id} saved for customer {order.customer.id}")
        return order

    def _save_graph(self, order: Order) -> None:
        customer = order.customer
        active_card = customer.active_card

        # Step 1: addresses
        for address in self._addresses(order):
            self.addresses.insert(address)

        # Step 2: cards
        self.cards.insert(order.card)
        if active_card is not None:
            self.cards.insert(active_card)

        # Step 3: customer
        self.customers.insert(customer)

        # Step 4: pizzas and their ingredients
        for line in order.lines:
            self._save_pizza(line.pizza)

        # Steps 5 and 6: order row and lines
        self.orders.insert(order)

    def _save_pizza(self, pizza: Pizza) -> None:
        if pizza.id:
            return

        self._save_ingredient(pizza.crust, self.pizzas.crusts)
        self._save_ingredient(pizza.sauce, self.pizzas.sauces)
        for cheese in pizza.cheeses:
            self._save_ingredient(cheese, self.pizzas.cheeses)
        for topping in pizza.toppings:
            self._save_ingredient(topping, self.pizzas.toppings)

        self.pizzas.insert(pizza)

    def _save_ingredient(self, ingredient: Ingredient, subtype: SubtypeRepository) -> None:
        if ingredient.id:
            return
        self.ingredients.insert(ingredient)
        subtype.insert(ingredient)

    @staticmethod
    def _addresses(order: Order) -> List[Address]:
        addresses = [order.address, order.card.address, order.customer.address]
        if order.customer.active_card is not None:
            addresses.append(order.customer.active_card.address)
        return addresses

    def _snapshot(self, order: Order) -> dict:
        """Record which entities are new and the values save() may overwrite"""
        entities = [order, order.customer, order.card]
        entities.extend(self._addresses(order))
        if order.customer.active_card is not None:
            entities.append(order.customer.active_card)
        for line in order.lines:
            pizza = line.pizza
            entities.extend([pizza, pizza.crust, pizza.sauce])
            entities.extend(pizza.cheeses)
            entities.extend(pizza.toppings)

        unsaved = {}
        for entity in entities:
            if not entity.id:
                unsaved[id(entity)] = entity

        return {
            'order': order,
            'unsaved': list(unsaved.values()),
            'timestamp': order.timestamp,
            'unit_costs': [(line, line.unit_cost) for line in order.lines]
        }

    @staticmethod
    def _restore(snapshot: dict) -> None:
        for entity in snapshot['unsaved']:
            entity.id = 0
        snapshot['order'].timestamp = snapshot['timestamp']
        for line, unit_cost in snapshot['unit_costs']:
            line.unit_cost = unit_cost
