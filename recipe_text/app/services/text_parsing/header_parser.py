"""Title, summary line and description extraction."""

import logging
import re
from typing import Optional

from recipe_text.app.core.config import get_settings
from recipe_text.app.services.text_parsing.constants import (
    DESCRIPTION_EXCLUDED_MARKERS,
    METADATA_SEPARATOR,
)
from recipe_text.app.services.text_parsing.models import RecipeMetadata
from recipe_text.app.services.text_parsing.parsing_utils import (
    clean_text,
    parse_int,
    split_lines,
    strip_emoji,
)

logger = logging.getLogger(__name__)

# "450 kcal ・ 25 Min ・ Einfach"
_METADATA_RE = re.compile(
    rf"(?<![0-9])([0-9]+)[ \t]*kcal[ \t]*{METADATA_SEPARATOR}"
    rf"([^{METADATA_SEPARATOR}\n]+){METADATA_SEPARATOR}"
    rf"([^{METADATA_SEPARATOR}\n]+)",
    flags=re.IGNORECASE,
)


def extract_title(text: Optional[str]) -> str:
    """Return the first line without emoji and with whitespace collapsed."""
    first_line = split_lines(text)[0]
    return clean_text(strip_emoji(first_line))


def parse_metadata(text: Optional[str]) -> RecipeMetadata:
    """Pull calories, time and difficulty from the '<kcal> ・ <time> ・ <difficulty>' line."""
    match = _METADATA_RE.search(text or "")
    if not match:
        logger.debug("No summary line found")
        return RecipeMetadata()

    calories = parse_int(match.group(1))
    time = match.group(2).strip()
    difficulty = match.group(3).strip()
    # All three values or none
    if calories is None or not time or not difficulty:
        logger.debug("Incomplete summary line, ignoring it")
        return RecipeMetadata()

    return RecipeMetadata(calories=calories, time=time, difficulty=difficulty)


def extract_description(text: Optional[str], min_length: Optional[int] = None) -> str:
    """Return the first long, non-header line after the title and summary lines.

    Lines 0 and 1 are assumed to be the title and the summary line and are
    never considered.
    """
    if min_length is None:
        min_length = get_settings().description_min_length

    for line in split_lines(text)[2:]:
        candidate = line.strip()
        if len(candidate) <= min_length:
            continue
        if any(marker in candidate for marker in DESCRIPTION_EXCLUDED_MARKERS):
            continue
        return candidate
    return ""
