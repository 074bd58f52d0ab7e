"""
SQLAlchemy pizza model and ingredient join tables
"""
from sqlalchemy import DDL, Column, ForeignKey, Integer, String, Table, event

from pizzeria.database import Base


class PizzaModel(Base):
    """Pizza database model"""
    
    __tablename__ = "pizza"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=True)
    crust_id = Column(Integer, ForeignKey("crust.id"), nullable=False)
    sauce_id = Column(Integer, ForeignKey("sauce.id"), nullable=False)
    
    def __repr__(self):
        return f"<Pizza(id={self.id}, name={self.name!r}, crust_id={self.crust_id}, sauce_id={self.sauce_id})>"


pizza_cheese = Table(
    "pizza_cheese",
    Base.metadata,
    Column("pizza_id", Integer, ForeignKey("pizza.id"), primary_key=True),
    Column("cheese_id", Integer, ForeignKey("cheese.id"), primary_key=True),
)

pizza_topping = Table(
    "pizza_topping",
    Base.metadata,
    Column("pizza_id", Integer, ForeignKey("pizza.id"), primary_key=True),
    Column("topping_id", Integer, ForeignKey("topping.id"), primary_key=True),
)


# Changing what defines a pizza invalidates its recorded cheese/topping selection
event.listen(
    Base.metadata,
    "after_create",
    DDL(
        "CREATE TRIGGER IF NOT EXISTS pizza_update_clears_ingredients "
        "AFTER UPDATE OF name, crust_id, sauce_id ON pizza "
        "BEGIN "
        "DELETE FROM pizza_cheese WHERE pizza_cheese.pizza_id = OLD.id; "
        "DELETE FROM pizza_topping WHERE pizza_topping.pizza_id = OLD.id; "
        "END"
    )
)
