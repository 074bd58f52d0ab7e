"""
Pydantic schemas for orders
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from pizzeria.schemas.customer import Address, Card, Customer
from pizzeria.schemas.ingredient import Size
from pizzeria.schemas.pizza import Pizza


class OrderLine(BaseModel):
    """One pizza, size and quantity within an order"""
    pizza: Pizza
    size: Size = Field(Size.LARGE, description="Size the pizza is ordered in")
    quantity: int = Field(1, description="Number of pizzas")
    unit_cost: Optional[float] = Field(
        None,
        description="Price per pizza; None means the pizza's cost at this size"
    )
    
    @property
    def effective_unit_cost(self) -> float:
        if self.unit_cost is None:
            return self.pizza.cost(self.size)
        return self.unit_cost


class Order(BaseModel):
    """Customer order"""
    id: int = Field(0, ge=0, description="Order ID, 0 until inserted")
    customer: Customer
    address: Address = Field(..., description="Delivery address")
    card: Card = Field(..., description="Card charged for the order")
    timestamp: Optional[datetime] = Field(None, description="Set on insert when missing")
    lines: List[OrderLine] = Field(default_factory=list)
    
    @property
    def total_cost(self) -> float:
        """Total price of every line"""
        return sum(line.effective_unit_cost * line.quantity for line in self.lines)
