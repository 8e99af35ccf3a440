"""Parse recipe text pasted from diet-tracking apps into a ParsedRecipe.

Every extractor reads the same raw text and resolves a missing section to a
default value, so parse_recipe_text always returns a well-formed recipe.
"""

import logging
from typing import Optional

from recipe_text.app.core.config import get_settings
from recipe_text.app.services.text_parsing.header_parser import (
    extract_description,
    extract_title,
    parse_metadata,
)
from recipe_text.app.services.text_parsing.ingredient_parser import parse_ingredients
from recipe_text.app.services.text_parsing.instruction_parser import (
    create_steps_from_instructions,
    parse_instructions,
)
from recipe_text.app.services.text_parsing.models import ParsedRecipe

logger = logging.getLogger(__name__)


def _limit_input(text: Optional[str]) -> str:
    text = text or ""
    max_chars = get_settings().max_input_chars
    if len(text) > max_chars:
        logger.warning("Recipe text has %d chars, truncating to %d", len(text), max_chars)
        return text[:max_chars]
    return text


def parse_recipe_text(text: Optional[str]) -> ParsedRecipe:
    """Parse pasted recipe text; never raises.

    Text beyond ``max_input_chars`` (RECIPE_TEXT_MAX_INPUT_CHARS) is dropped
    before parsing with only a logged warning, so sections past the cut, often
    the instructions, come back empty. Callers that accept very long input
    should check the length themselves or raise the limit.
    """
    text = _limit_input(text)

    title = extract_title(text)
    metadata = parse_metadata(text)
    description = extract_description(text)
    section = parse_ingredients(text)
    instructions = parse_instructions(text)
    steps = create_steps_from_instructions(instructions)

    logger.info(
        "Parsed recipe text: title=%s, ingredients=%d, steps=%d, portions=%d",
        title[:50],
        len(section.ingredients),
        len(steps),
        section.portions,
    )
    return ParsedRecipe(
        title=title,
        calories=metadata.calories,
        time=metadata.time,
        difficulty=metadata.difficulty,
        description=description,
        portions=section.portions,
        ingredients=section.ingredients,
        instructions=instructions,
        steps=steps,
    )
