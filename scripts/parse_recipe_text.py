#!/usr/bin/env python
"""
Parse pasted recipe text and print the result as JSON.

Usage:
    python scripts/parse_recipe_text.py recipe.txt
    pbpaste | python scripts/parse_recipe_text.py --portions 4
"""
import argparse
import logging
import sys
from pathlib import Path

from recipe_text.app.core.config import get_settings
from recipe_text.app.services.portion_scaler import scale_ingredients
from recipe_text.app.services.recipe_text_parser import parse_recipe_text

logger = logging.getLogger("parse_recipe_text")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Parse pasted recipe text into JSON.")
    parser.add_argument("path", nargs="?", help="Text file to read; stdin when omitted")
    parser.add_argument("--portions", type=int, help="Scale ingredient quantities to this many portions")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_settings().log_level.upper())

    if args.path:
        try:
            text = Path(args.path).read_text(encoding="utf-8")
        except OSError:
            logger.exception("Could not read %s", args.path)
            return 1
    else:
        text = sys.stdin.read()

    recipe = parse_recipe_text(text)
    if args.portions is not None:
        try:
            scaled = scale_ingredients(recipe.ingredients, recipe.portions, args.portions)
        except ValueError as exc:
            logger.error("%s", exc)
            return 2
        recipe = recipe.model_copy(update={"ingredients": scaled, "portions": args.portions})

    print(recipe.model_dump_json(exclude_none=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
