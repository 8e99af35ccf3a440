"""Ingredient section extraction and quantity/unit normalization."""

import logging
import re
from typing import List, Optional, Tuple

from recipe_text.app.core.config import get_settings
from recipe_text.app.services.text_parsing.constants import (
    BULLET_SEPARATORS,
    DEFAULT_PORTIONS,
    DEFAULT_QUANTITY,
    FRACTION_MAP,
    INSTRUCTIONS_HEADER,
)
from recipe_text.app.services.text_parsing.models import Ingredient, IngredientSection
from recipe_text.app.services.text_parsing.parsing_utils import (
    parse_decimal,
    parse_positive_int,
)

logger = logging.getLogger(__name__)

_SECTION_HEADER_RE = re.compile(r"Zutaten für[ \t]+([0-9]+)[ \t]*Portion[^:\n]*:", re.IGNORECASE)
_SECTION_END_RE = re.compile(re.escape(INSTRUCTIONS_HEADER), re.IGNORECASE)
_ENTRY_SPLIT_RE = re.compile(rf"[{BULLET_SEPARATORS}]+")


def _find_ingredient_section(text: str) -> Optional[Tuple[str, str]]:
    """Return (portions token, section body) or None when there is no ingredients header."""
    header = _SECTION_HEADER_RE.search(text)
    if not header:
        return None
    end = _SECTION_END_RE.search(text, header.end())
    body = text[header.end() : end.start() if end else len(text)]
    return header.group(1), body


def split_entries(section: str) -> List[str]:
    """Split a section on bullet separators, dropping blank entries."""
    return [entry.strip() for entry in _ENTRY_SPLIT_RE.split(section) if entry.strip()]


def _scan_number(text: str, pos: int) -> Tuple[str, int]:
    """Read '<digits>[.,<digits>]' starting at pos; return (token, end)."""
    end = pos
    while end < len(text) and text[end].isascii() and text[end].isdigit():
        end += 1
    if (
        end + 1 < len(text)
        and text[end] in ".,"
        and text[end + 1].isascii()
        and text[end + 1].isdigit()
    ):
        end += 1
        while end < len(text) and text[end].isascii() and text[end].isdigit():
            end += 1
    return text[pos:end], end


def parse_quantity_and_unit(text: str) -> Tuple[Optional[float], str]:
    """Parse the inside of a parenthesis like '200 g', '1,5 l', '1 ⅔ EL' or '½ TL'.

    Recognized forms, in priority order: a whole number followed by a vulgar
    fraction (mixed number), a decimal number with '.' or ',', a bare vulgar
    fraction. Anything before the first digit or fraction glyph is ignored and
    everything after the number is the unit. Returns (None, '') when no number
    is present.
    """
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char in FRACTION_MAP or (char.isascii() and char.isdigit()):
            break
        pos += 1
    else:
        return None, ""

    if text[pos] in FRACTION_MAP:
        return FRACTION_MAP[text[pos]], text[pos + 1 :].strip()

    token, end = _scan_number(text, pos)
    quantity = parse_decimal(token)

    # Mixed number: "1⅔" or "1 ⅔", any whitespace between
    lookahead = end
    while lookahead < len(text) and text[lookahead].isspace():
        lookahead += 1
    if token.isdigit() and lookahead < len(text) and text[lookahead] in FRACTION_MAP:
        # None when the whole part overflows a float
        if quantity is not None:
            quantity += FRACTION_MAP[text[lookahead]]
        end = lookahead + 1

    return quantity, text[end:].strip()


def _split_name_and_amount(entry: str) -> Optional[Tuple[str, str]]:
    """Split 'Name (amount)' on the first parenthesized group."""
    open_idx = entry.find("(")
    if open_idx <= 0:
        return None
    close_idx = entry.find(")", open_idx + 1)
    if close_idx <= open_idx + 1:
        return None
    return entry[:open_idx].strip(), entry[open_idx + 1 : close_idx].strip()


def parse_ingredient_entry(entry: str, index: int, default_unit: Optional[str] = None) -> Optional[Ingredient]:
    """Parse one bullet entry into an Ingredient; index is the 0-based entry position.

    Entries without a parenthesized amount fall back to quantity 1 in the
    default unit, unless they are too short to be an ingredient name.
    """
    if default_unit is None:
        default_unit = get_settings().default_unit
    ingredient_id = f"ingredient-{index + 1}"
    trimmed = entry.strip()

    parts = _split_name_and_amount(trimmed)
    if parts:
        name, amount = parts
        quantity, unit = parse_quantity_and_unit(amount)
        if quantity is None:
            logger.debug("Ingredient %d: no number in '%s', using defaults", index, amount)
            quantity = DEFAULT_QUANTITY
            unit = ""
        return Ingredient(
            id=ingredient_id,
            name=name,
            quantity=quantity,
            unit=unit or default_unit,
        )

    if len(trimmed) > 2:
        logger.debug("Ingredient %d: no amount for '%s'", index, trimmed[:50])
        return Ingredient(id=ingredient_id, name=trimmed, quantity=DEFAULT_QUANTITY, unit=default_unit)

    logger.debug("Ingredient %d: skipping short entry '%s'", index, trimmed)
    return None


def parse_ingredients(text: Optional[str]) -> IngredientSection:
    """Locate the 'Zutaten für N Portionen:' section and parse its entries."""
    section = _find_ingredient_section(text or "")
    if section is None:
        logger.debug("No ingredient section found")
        return IngredientSection()

    portions_token, body = section
    portions = parse_positive_int(portions_token, default=DEFAULT_PORTIONS)
    default_unit = get_settings().default_unit

    ingredients: List[Ingredient] = []
    for idx, entry in enumerate(split_entries(body)):
        ingredient = parse_ingredient_entry(entry, idx, default_unit=default_unit)
        if ingredient is not None:
            ingredients.append(ingredient)

    logger.info("Extracted %d ingredients for %d portions", len(ingredients), portions)
    return IngredientSection(ingredients=ingredients, portions=portions)
