"""
Pydantic schemas for ingredients
"""
from enum import Enum

from pydantic import BaseModel, Field, ConfigDict


class Size(str, Enum):
    """Pizza size tier; the value is the persisted tag"""
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class Ingredient(BaseModel):
    """Shared name and cost tiers of every priced pizza component"""
    id: int = Field(0, ge=0, description="Ingredient ID, 0 until inserted")
    name: str = Field("", description="Unique ingredient name")
    small_cost: float = Field(0.0, description="Cost on a small pizza")
    medium_cost: float = Field(0.0, description="Cost on a medium pizza")
    large_cost: float = Field(0.0, description="Cost on a large pizza")
    
    model_config = ConfigDict(from_attributes=True)
    
    def cost(self, size: Size) -> float:
        """Cost of this ingredient on a pizza of the given size"""
        size = Size(size)
        if size is Size.SMALL:
            return self.small_cost
        if size is Size.MEDIUM:
            return self.medium_cost
        return self.large_cost


class Crust(Ingredient):
    """Crust ingredient"""
    pass


class Sauce(Ingredient):
    """Sauce ingredient"""
    pass


class Cheese(Ingredient):
    """Cheese ingredient"""
    pass


class Topping(Ingredient):
    """Topping ingredient"""
    pass
