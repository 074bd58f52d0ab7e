"""
Pydantic schema for pizzas
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from pizzeria.schemas.ingredient import Cheese, Crust, Sauce, Size, Topping


class Pizza(BaseModel):
    """A crust and sauce with a selection of cheeses and toppings"""
    id: int = Field(0, ge=0, description="Pizza ID, 0 until inserted")
    name: Optional[str] = Field(None, description="Pizza name")
    crust: Crust
    sauce: Sauce
    cheeses: List[Cheese] = Field(default_factory=list)
    toppings: List[Topping] = Field(default_factory=list)
    
    def cost(self, size: Size) -> float:
        """Sum of every ingredient's cost at the given size"""
        total = self.crust.cost(size) + self.sauce.cost(size)
        total += sum(cheese.cost(size) for cheese in self.cheeses)
        total += sum(topping.cost(size) for topping in self.toppings)
        return total
