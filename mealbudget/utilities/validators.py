"""
Input validation schemas using Pydantic for request bodies and starter data.
"""
from typing import List

from pydantic import BaseModel, Field, field_validator


class RecipeRecord(BaseModel):
    """Schema for one entry of the starter recipe catalog."""
    id: int
    name: str = Field(..., min_length=1, max_length=200)
    type: str = Field(..., pattern=r'^(breakfast|lunch|dinner)$')
    ingredients: List[str] = Field(default_factory=list)
    cost: float = Field(..., ge=0)
    favorite: bool = False
    image: str = ""

    @field_validator('name')
    @classmethod
    def strip_name(cls, v):
        """Remove leading/trailing whitespace."""
        if not v.strip():
            raise ValueError('Recipe name cannot be empty')
        return v.strip()

    @field_validator('ingredients')
    @classmethod
    def validate_ingredients(cls, v):
        """Drop blank ingredient names, keep order."""
        return [ing for ing in v if ing and ing.strip()]


class ExpenseHistoryRecord(BaseModel):
    """Schema for one week of the static expense history."""
    week: int = Field(..., ge=1)
    amount: float = Field(..., ge=0)


class SlotAssignInput(BaseModel):
    """Schema for assigning a catalog recipe to a plan slot."""
    recipe_id: int


class PantryItemInput(BaseModel):
    """Schema for a pantry add request. Blank names are rejected by the pantry itself."""
    item: str = Field(..., max_length=100)


class ShoppingItemToggleInput(BaseModel):
    name: str = Field(..., min_length=1)


class BudgetInput(BaseModel):
    """Schema for a budget update. Range checks happen in the state manager."""
    amount: float
