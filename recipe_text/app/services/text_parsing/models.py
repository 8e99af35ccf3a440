"""Pydantic models for pasted recipe text parsing."""

from typing import List, Optional

from pydantic import BaseModel, Field

from recipe_text.app.services.text_parsing.constants import (
    DEFAULT_PORTIONS,
    DEFAULT_QUANTITY,
    DEFAULT_UNIT,
)


class Ingredient(BaseModel):
    """A single ingredient entry with a numeric quantity and a unit."""

    id: str
    name: str
    quantity: float = Field(DEFAULT_QUANTITY, allow_inf_nan=False)
    unit: str = DEFAULT_UNIT


class RecipeStep(BaseModel):
    """An ordered instruction step; image and formatted text are filled in downstream."""

    id: str
    instruction: str
    order: int = Field(ge=1)
    image: Optional[str] = None
    formatted_text: Optional[str] = None


class RecipeMetadata(BaseModel):
    """Summary line values. All fields are None when no summary line was found."""

    calories: Optional[int] = None
    time: Optional[str] = None
    difficulty: Optional[str] = None


class IngredientSection(BaseModel):
    ingredients: List[Ingredient] = Field(default_factory=list)
    portions: int = Field(DEFAULT_PORTIONS, ge=1)


class ParsedRecipe(BaseModel):
    """A recipe parsed from pasted text."""

    title: str = ""
    calories: Optional[int] = None
    time: Optional[str] = None
    difficulty: Optional[str] = None
    description: str = ""
    portions: int = Field(DEFAULT_PORTIONS, ge=1)
    ingredients: List[Ingredient] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    steps: List[RecipeStep] = Field(default_factory=list)
