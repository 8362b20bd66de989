"""Text normalization for lexibit.

Raw word lists are folded to lowercase ASCII before compiling. Accented
Latin letters decompose to their base letter; anything that still falls
outside a-z makes the word invalid.
"""

import re
import unicodedata
from typing import Optional

# Letters that do not decompose under NFD
CHAR_MAP: dict[str, str] = {
    "ß": "ss",
    "æ": "ae", "Æ": "ae",
    "œ": "oe", "Œ": "oe",
    "ø": "o", "Ø": "o",
    "ł": "l", "Ł": "l",
    "ı": "i",
}

ALPHA_PATTERN = re.compile(r"^[a-z]+$")


def normalize_char(char: str) -> str:
    """Normalize a single character to its ASCII equivalent.

    Args:
        char: Single character.

    Returns:
        ASCII equivalent (may be multiple chars for ligatures like ß→ss).
    """
    if char in CHAR_MAP:
        return CHAR_MAP[char]

    normalized = unicodedata.normalize("NFD", char)
    ascii_chars = [
        c.lower()
        for c in normalized
        if unicodedata.category(c) != "Mn" and c.isascii()
    ]
    return "".join(ascii_chars) if ascii_chars else char.lower()


def normalize_word(word: str) -> str:
    """Normalize a word to lowercase ASCII."""
    return "".join(normalize_char(char) for char in word.strip())


def is_valid_word(word: str) -> bool:
    """Check if a normalized word contains only a-z characters."""
    return bool(ALPHA_PATTERN.match(word))


def normalize_and_validate(word: str) -> Optional[str]:
    """Normalize word and return it if valid, else None."""
    normalized = normalize_word(word)
    if is_valid_word(normalized):
        return normalized
    return None
