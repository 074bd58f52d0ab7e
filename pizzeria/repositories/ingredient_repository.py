"""
Ingredient Repositories - Data Access Layer

IngredientRepository owns the shared ingredient table. The typed repositories
only record membership of an existing ingredient in a subtype table and read
the subtype's joined view.
"""
import logging
from typing import List, Optional

from sqlalchemy import Table, literal_column, select

from pizzeria.exceptions import NotFound
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
from pizzeria.models.pizza import pizza_cheese, pizza_topping
from pizzeria.repositories.base import Repository
from pizzeria.schemas.ingredient import Ingredient, Crust, Sauce, Cheese, Topping

logger = logging.getLogger(__name__)


class IngredientRepository(Repository):
    """Repository for the generic ingredient table"""

    def get_by_id(self, ingredient_id: int) -> Ingredient:
        """Get ingredient by ID"""
        row = self.db.get(IngredientModel, ingredient_id)
        if row is None:
            raise NotFound("Ingredient", ingredient_id)
        return Ingredient.model_validate(row)

    def get_by_name(self, name: str) -> Ingredient:
        """Get ingredient by its unique name"""
        row = self.db.query(IngredientModel).filter(IngredientModel.name == name).first()
        if row is None:
            raise NotFound("Ingredient", name)
        return Ingredient.model_validate(row)

    def insert(self, ingredient: Ingredient) -> Ingredient:
        """
        Insert the ingredient's name and cost tiers and assign its ID

        Args:
            ingredient: Ingredient of any subtype; skipped if it already has an ID

        Returns:
            The same ingredient with its ID set

        Raises:
            ConstraintViolation: Duplicate name or costs not ordered small <= medium <= large
        """
        if ingredient.id:
            logger.debug(f"Ingredient {ingredient.id} already persisted. Skipping.")
            return ingredient

        row = IngredientModel(
            name=ingredient.name,
            small_cost=ingredient.small_cost,
            medium_cost=ingredient.medium_cost,
            large_cost=ingredient.large_cost
        )
        with self._writing("ingredient"):
            self.db.add(row)
            self._commit()

        ingredient.id = row.id
        logger.debug(f"✓ Ingredient '{ingredient.name}' inserted (ID: {ingredient.id})")
        return ingredient

    def update(self, ingredient: Ingredient) -> Ingredient:
        """
        Rewrite every field of an existing ingredient

        Raises:
            NotFound: No ingredient with this ID
            ConstraintViolation: Duplicate name or costs out of order
        """
        row = self.db.get(IngredientModel, ingredient.id)
        if row is None:
            raise NotFound("Ingredient", ingredient.id)

        with self._writing("ingredient"):
            row.name = ingredient.name
            row.small_cost = ingredient.small_cost
            row.medium_cost = ingredient.medium_cost
            row.large_cost = ingredient.large_cost
            self._commit()

        return ingredient


class SubtypeRepository(Repository):
    """Repository for one ingredient subtype table and its joined view"""

    model = None
    view: Table = None
    schema = Ingredient
    join_table: Optional[Table] = None

    @property
    def kind(self) -> str:
        return self.model.__tablename__

    def insert(self, ingredient: Ingredient) -> Ingredient:
        """
        Record an already inserted ingredient as a member of this subtype

        The shared ID is looked up by ingredient name, so the ingredient row
        must exist first.

        Raises:
            NotFound: No ingredient with this name
        """
        ingredient_id = self.db.query(IngredientModel.id).filter(
            IngredientModel.name == ingredient.name
        ).scalar()
        if ingredient_id is None:
            raise NotFound("Ingredient", ingredient.name)

        if self.db.get(self.model, ingredient_id) is None:
            with self._writing(self.kind):
                self.db.add(self.model(id=ingredient_id))
                self._commit()
            logger.debug(f"✓ {self.kind.capitalize()} '{ingredient.name}' registered (ID: {ingredient_id})")

        ingredient.id = ingredient_id
        return ingredient

    def get_all(self) -> List[Ingredient]:
        """Get every ingredient of this subtype"""
        id_column = self.view.c[f"{self.kind}_id"]
        rows = self.db.execute(select(self.view).order_by(id_column)).all()
        return [self._read(row) for row in rows]

    def _get_by_id(self, ingredient_id: int) -> Ingredient:
        id_column = self.view.c[f"{self.kind}_id"]
        row = self.db.execute(select(self.view).where(id_column == ingredient_id)).first()
        if row is None:
            raise NotFound(self.kind.capitalize(), ingredient_id)
        return self._read(row)

    def _get_by_pizza(self, pizza_id: int) -> List[Ingredient]:
        id_column = self.view.c[f"{self.kind}_id"]
        stmt = (
            select(self.view)
            .select_from(
                self.join_table.join(self.view, self.join_table.c[f"{self.kind}_id"] == id_column)
            )
            .where(self.join_table.c.pizza_id == pizza_id)
            .order_by(literal_column(f"{self.join_table.name}.rowid"))
        )
        rows = self.db.execute(stmt).all()
        return [self._read(row) for row in rows]

    def _read(self, row) -> Ingredient:
        values = row._mapping
        return self.schema(
            id=values[f"{self.kind}_id"],
            name=values[f"{self.kind}_name"],
            small_cost=values[f"{self.kind}_small_cost"],
            medium_cost=values[f"{self.kind}_medium_cost"],
            large_cost=values[f"{self.kind}_large_cost"]
        )


class CrustRepository(SubtypeRepository):
    """Repository for crusts"""

    model = CrustModel
    view = crust_view
    schema = Crust

    def get_by_id(self, crust_id: int) -> Crust:
        """Get crust by ID"""
        return self._get_by_id(crust_id)


class SauceRepository(SubtypeRepository):
    """Repository for sauces"""

    model = SauceModel
    view = sauce_view
    schema = Sauce

    def get_by_id(self, sauce_id: int) -> Sauce:
        """Get sauce by ID"""
        return self._get_by_id(sauce_id)


class CheeseRepository(SubtypeRepository):
    """Repository for cheeses"""

    model = CheeseModel
    view = cheese_view
    schema = Cheese
    join_table = pizza_cheese

    def get_by_pizza(self, pizza_id: int) -> List[Cheese]:
        """Get the cheeses on a pizza in the order they were added"""
        return self._get_by_pizza(pizza_id)


class ToppingRepository(SubtypeRepository):
    """Repository for toppings"""

    model = ToppingModel
    view = topping_view
    schema = Topping
    join_table = pizza_topping

    def get_by_pizza(self, pizza_id: int) -> List[Topping]:
        """Get the toppings on a pizza in the order they were added"""
        return self._get_by_pizza(pizza_id)
