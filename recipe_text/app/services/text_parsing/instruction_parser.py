"""Instruction section extraction and step numbering."""

import logging
import re
from typing import List, Optional

from recipe_text.app.services.text_parsing.constants import CLOSING_PHRASE, HASHTAG_MARKER
from recipe_text.app.services.text_parsing.models import RecipeStep

logger = logging.getLogger(__name__)

_SECTION_HEADER_RE = re.compile(r"Anleitung für[^:\n]*:", re.IGNORECASE)
_SECTION_END_RE = re.compile(
    rf"{re.escape(CLOSING_PHRASE)}|{re.escape(HASHTAG_MARKER)}", re.IGNORECASE
)
_STEP_MARKER_RE = re.compile(r"(?<![0-9])[0-9]+\.\s*")


def _find_instruction_section(text: str) -> Optional[str]:
    header = _SECTION_HEADER_RE.search(text)
    if not header:
        return None
    end = _SECTION_END_RE.search(text, header.end())
    return text[header.end() : end.start() if end else len(text)]


def parse_instructions(text: Optional[str]) -> List[str]:
    """Split the 'Anleitung für ...:' section into numbered instructions.

    The section ends at 'Lass es dir schmecken', '#YAZIO' or the end of the
    text. Numbering is assumed to be increasing and is not checked.
    """
    section = _find_instruction_section(text or "")
    if section is None:
        logger.debug("No instruction section found")
        return []

    instructions = [fragment.strip() for fragment in _STEP_MARKER_RE.split(section)]
    instructions = [fragment for fragment in instructions if fragment]
    logger.info("Extracted %d instructions", len(instructions))
    return instructions


def create_steps_from_instructions(instructions: List[str]) -> List[RecipeStep]:
    return [
        RecipeStep(id=f"step-{idx + 1}", instruction=instruction, order=idx + 1)
        for idx, instruction in enumerate(instructions)
    ]
