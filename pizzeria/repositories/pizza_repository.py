"""
Pizza Repository - Data Access Layer
"""
import logging
from typing import List

from sqlalchemy import insert, update

from pizzeria.exceptions import InvalidOperation, NotFound
from pizzeria.models.pizza import PizzaModel, pizza_cheese, pizza_topping
from pizzeria.repositories.base import Repository
from pizzeria.repositories.ingredient_repository import (
    CrustRepository,
    SauceRepository,
    CheeseRepository,
    ToppingRepository
)
from pizzeria.schemas.pizza import Pizza

logger = logging.getLogger(__name__)


class PizzaRepository(Repository):
    """Repository for pizzas and their cheese/topping selections"""

    def __init__(
        self,
        db,
        crusts: CrustRepository = None,
        sauces: SauceRepository = None,
        cheeses: CheeseRepository = None,
        toppings: ToppingRepository = None
    ):
        super().__init__(db)
        self.crusts = crusts or CrustRepository(db)
        self.sauces = sauces or SauceRepository(db)
        self.cheeses = cheeses or CheeseRepository(db)
        self.toppings = toppings or ToppingRepository(db)

    def get_all(self) -> List[Pizza]:
        """Get all pizzas with their ingredients"""
        rows = self.db.query(PizzaModel).order_by(PizzaModel.id).all()
        return [self._read(row) for row in rows]

    def get_by_id(self, pizza_id: int) -> Pizza:
        """Get pizza by ID with its ingredients"""
        row = self.db.get(PizzaModel, pizza_id)
        if row is None:
            raise NotFound("Pizza", pizza_id)
        return self._read(row)

    def insert(self, pizza: Pizza) -> Pizza:
        """
        Insert a pizza and one join row per cheese and topping

        Crust, sauce, cheeses and toppings must already be persisted.

        Returns:
            The same pizza with its ID set

        Raises:
            ConstraintViolation: An ingredient is not persisted or is repeated
        """
        if pizza.id:
            logger.debug(f"Pizza {pizza.id} already persisted. Skipping.")
            return pizza

        row = PizzaModel(
            name=pizza.name,
            crust_id=pizza.crust.id,
            sauce_id=pizza.sauce.id
        )
        with self._writing("pizza"):
            self.db.add(row)
            self.db.flush()

        self._insert_ingredients(row.id, pizza)
        self._commit()

        pizza.id = row.id
        logger.debug(f"✓ Pizza inserted (ID: {pizza.id})")
        return pizza

    def update(self, pizza: Pizza) -> Pizza:
        """
        Redefine a pizza's name, crust and sauce and re-record its ingredients

        All three defining columns are always written, so the database trigger
        clears the existing cheese/topping rows before the current selection
        is inserted again.

        Raises:
            InvalidOperation: The pizza was never inserted
            NotFound: No pizza with this ID
            ConstraintViolation: An ingredient is not persisted or is repeated
        """
        if not pizza.id:
            raise InvalidOperation("Cannot update a pizza that has not been inserted")

        with self._writing("pizza"):
            result = self.db.execute(
                update(PizzaModel)
                .where(PizzaModel.id == pizza.id)
                .values(
                    name=pizza.name,
                    crust_id=pizza.crust.id,
                    sauce_id=pizza.sauce.id
                )
            )
        if result.rowcount == 0:
            raise NotFound("Pizza", pizza.id)

        self._insert_ingredients(pizza.id, pizza)
        self._commit()

        logger.debug(f"✓ Pizza {pizza.id} redefined")
        return pizza

    def _insert_ingredients(self, pizza_id: int, pizza: Pizza) -> None:
        if pizza.cheeses:
            with self._writing("pizza_cheese"):
                self.db.execute(
                    insert(pizza_cheese),
                    [{"pizza_id": pizza_id, "cheese_id": cheese.id} for cheese in pizza.cheeses]
                )

        if pizza.toppings:
            with self._writing("pizza_topping"):
                self.db.execute(
                    insert(pizza_topping),
                    [{"pizza_id": pizza_id, "topping_id": topping.id} for topping in pizza.toppings]
                )

    def _read(self, row: PizzaModel) -> Pizza:
        return Pizza(
            id=row.id,
            name=row.name,
            crust=self.crusts.get_by_id(row.crust_id),
            sauce=self.sauces.get_by_id(row.sauce_id),
            cheeses=self.cheeses.get_by_pizza(row.id),
            toppings=self.toppings.get_by_pizza(row.id)
        )
