"""Pasted recipe text parsing package.

This package turns recipe text copied from diet-tracking apps (German
formatted: 'Zutaten für 2 Portionen:', 'Anleitung für 2 Portionen:') into
structured models. Each extractor works on the full raw text and falls back
to a default value instead of raising.
"""

from recipe_text.app.services.text_parsing.header_parser import (
    extract_description,
    extract_title,
    parse_metadata,
)
from recipe_text.app.services.text_parsing.ingredient_parser import (
    parse_ingredient_entry,
    parse_ingredients,
    parse_quantity_and_unit,
    split_entries,
)
from recipe_text.app.services.text_parsing.instruction_parser import (
    create_steps_from_instructions,
    parse_instructions,
)
from recipe_text.app.services.text_parsing.models import (
    Ingredient,
    IngredientSection,
    ParsedRecipe,
    RecipeMetadata,
    RecipeStep,
)
from recipe_text.app.services.text_parsing.parsing_utils import (
    clean_text,
    is_emoji,
    parse_decimal,
    parse_int,
    parse_positive_int,
    split_lines,
    strip_emoji,
)

__all__ = [
    # Models
    "Ingredient",
    "IngredientSection",
    "ParsedRecipe",
    "RecipeMetadata",
    "RecipeStep",
    # Header extraction
    "extract_description",
    "extract_title",
    "parse_metadata",
    # Ingredient parsing
    "parse_ingredient_entry",
    "parse_ingredients",
    "parse_quantity_and_unit",
    "split_entries",
    # Instruction parsing
    "create_steps_from_instructions",
    "parse_instructions",
    # Parsing utilities
    "clean_text",
    "is_emoji",
    "parse_decimal",
    "parse_int",
    "parse_positive_int",
    "split_lines",
    "strip_emoji",
]
