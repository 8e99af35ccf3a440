from typing import List

from recipe_text.app.services.text_parsing.models import Ingredient


def scale_ingredients(
    ingredients: List[Ingredient], original_portions: int, desired_portions: int
) -> List[Ingredient]:
    """Return copies of the ingredients with quantities scaled to desired_portions.

    Units are left alone; this never converts between units.
    """
    if desired_portions <= 0:
        raise ValueError(f"desired_portions must be positive, got {desired_portions}")
    if not original_portions:
        return [ingredient.model_copy() for ingredient in ingredients]

    factor = desired_portions / original_portions
    return [
        ingredient.model_copy(update={"quantity": ingredient.quantity * factor})
        for ingredient in ingredients
    ]
