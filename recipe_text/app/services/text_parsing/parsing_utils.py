"""General parsing utilities for pasted recipe text."""

import logging
import math
import re
from typing import Optional

from recipe_text.app.services.text_parsing.constants import EMOJI_RANGES

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def clean_text(text: Optional[str]) -> str:
    """Normalize whitespace in text."""
    return _WHITESPACE_RE.sub(" ", text or "").strip()


def is_emoji(char: str) -> bool:
    """Check if a character falls in one of the stripped emoji ranges."""
    code_point = ord(char)
    return any(low <= code_point <= high for low, high in EMOJI_RANGES)


def strip_emoji(text: str) -> str:
    """Remove emoji code points from text, leaving everything else untouched."""
    return "".join(char for char in text if not is_emoji(char))


def split_lines(text: Optional[str]) -> list[str]:
    return (text or "").split("\n")


def parse_decimal(value: str) -> Optional[float]:
    """Parse '2', '2.5' or '2,5' into a float; None for anything non-finite or malformed."""
    normalized = value.strip().replace(",", ".")
    if not normalized:
        return None
    try:
        number = float(normalized)
    except (ValueError, OverflowError):
        logger.debug("Could not parse number from '%s'", value[:50])
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a base-10 integer; None when malformed or over the int string-length limit."""
    if not value:
        return None
    try:
        return int(value, 10)
    except ValueError:
        logger.debug("Could not parse integer from %d chars", len(value))
        return None


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Parse a base-10 positive integer, falling back to default."""
    number = parse_int(value)
    if number is None or number < 1:
        return default
    return number
