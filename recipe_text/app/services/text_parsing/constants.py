"""Constants for pasted recipe text parsing."""

# Fixed decimal approximations; keep the three-digit values (⅔ -> 0.667)
FRACTION_MAP = {
    "⅛": 0.125,
    "⅙": 0.167,
    "⅕": 0.2,
    "¼": 0.25,
    "⅓": 0.333,
    "⅜": 0.375,
    "⅖": 0.4,
    "½": 0.5,
    "⅗": 0.6,
    "⅔": 0.667,
    "⅝": 0.625,
    "¾": 0.75,
    "⅘": 0.8,
    "⅚": 0.833,
    "⅞": 0.875,
}

FRACTION_CHARS = "".join(FRACTION_MAP.keys())

# Inclusive code point ranges stripped from titles
EMOJI_RANGES = (
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F300, 0x1F5FF),  # symbols & pictographs
    (0x1F680, 0x1F6FF),  # transport & map
    (0x1F1E0, 0x1F1FF),  # regional indicators
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats
)

METADATA_SEPARATOR = "・"
BULLET_SEPARATORS = "・•\n"

INGREDIENTS_HEADER = "Zutaten für"
INSTRUCTIONS_HEADER = "Anleitung für"
CLOSING_PHRASE = "Lass es dir schmecken"
HASHTAG_MARKER = "#YAZIO"

DESCRIPTION_EXCLUDED_MARKERS = (INGREDIENTS_HEADER, INSTRUCTIONS_HEADER, HASHTAG_MARKER)

DEFAULT_UNIT = "Stk"
DEFAULT_QUANTITY = 1.0
DEFAULT_PORTIONS = 1
