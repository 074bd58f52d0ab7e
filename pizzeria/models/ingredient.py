"""
SQLAlchemy ingredient models

One generic ingredient table holds the name and cost tiers. Crust, sauce,
cheese and topping are identity-only subtype tables whose id is also the
ingredient id, each paired with a read-only view joining the two.
"""
from sqlalchemy import DDL, CheckConstraint, Column, Float, ForeignKey, Integer, String, Table, event

from pizzeria.database import Base, view_metadata


class IngredientModel(Base):
    """Ingredient database model"""
    
    __tablename__ = "ingredient"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False, unique=True)
    small_cost = Column(Float, nullable=False)
    medium_cost = Column(Float, nullable=False)
    large_cost = Column(Float, nullable=False)
    
    # Constraints
    __table_args__ = (
        CheckConstraint(
            'small_cost <= medium_cost AND medium_cost <= large_cost',
            name='cost_order'
        ),
    )
    
    def __repr__(self):
        return f"<Ingredient(id={self.id}, name='{self.name}')>"


class CrustModel(Base):
    """Crust subtype table"""
    
    __tablename__ = "crust"
    
    id = Column(Integer, ForeignKey("ingredient.id"), primary_key=True, autoincrement=False)


class SauceModel(Base):
    """Sauce subtype table"""
    
    __tablename__ = "sauce"
    
    id = Column(Integer, ForeignKey("ingredient.id"), primary_key=True, autoincrement=False)


class CheeseModel(Base):
    """Cheese subtype table"""
    
    __tablename__ = "cheese"
    
    id = Column(Integer, ForeignKey("ingredient.id"), primary_key=True, autoincrement=False)


class ToppingModel(Base):
    """Topping subtype table"""
    
    __tablename__ = "topping"
    
    id = Column(Integer, ForeignKey("ingredient.id"), primary_key=True, autoincrement=False)


def ingredient_view(kind: str) -> Table:
    """
    Declare the joined view for one ingredient subtype
    
    The view is created after the tables by a DDL hook and exposes the
    ingredient attributes under the subtype's prefix (crust_name, ...).
    
    Args:
        kind: Subtype table name
    
    Returns:
        Table object used to query the view
    """
    view = Table(
        f"{kind}_view",
        view_metadata,
        Column(f"{kind}_id", Integer, primary_key=True),
        Column(f"{kind}_name", String),
        Column(f"{kind}_small_cost", Float),
        Column(f"{kind}_medium_cost", Float),
        Column(f"{kind}_large_cost", Float),
    )
    
    create_view = DDL(
        f"CREATE VIEW IF NOT EXISTS {kind}_view "
        f"({kind}_id, {kind}_name, {kind}_small_cost, {kind}_medium_cost, {kind}_large_cost) AS "
        f"SELECT {kind}.id, ingredient.name, ingredient.small_cost, "
        f"ingredient.medium_cost, ingredient.large_cost "
        f"FROM {kind} LEFT JOIN ingredient ON {kind}.id = ingredient.id"
    )
    event.listen(Base.metadata, "after_create", create_view)
    
    return view


crust_view = ingredient_view("crust")
sauce_view = ingredient_view("sauce")
cheese_view = ingredient_view("cheese")
topping_view = ingredient_view("topping")
