"""Substitution mask codec.

A substitution mask records, for one wildcard pattern of a word, which
letters can fill the blanked slot and still produce a dictionary word.
Letters are packed in reverse alphabetical order starting at the least
significant bit:

    bit 0  -> 'z'
    bit 1  -> 'y'
    ...
    bit 25 -> 'a'

Only the low 26 bits are meaningful; the upper 6 bits of a 32-bit field
are always zero.

Example:
    pattern "co&d" with "cold" and "cord" in the dictionary
    -> letters {"l", "r"} -> bits {14, 8} -> mask 16640
"""

from typing import Iterable, Iterator
import string

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)
WILDCARD = "&"

MASK_BITS = ALPHABET_SIZE
MASK_LIMIT = 1 << MASK_BITS  # exclusive upper bound for a valid mask


def encode(letter_index: int) -> int:
    """Map a letter index (0 = 'a') to its bit position (25 for 'a')."""
    if not 0 <= letter_index < ALPHABET_SIZE:
        raise ValueError(f"Letter index out of range: {letter_index}")
    return ALPHABET_SIZE - 1 - letter_index


def letter_bit(letter: str) -> int:
    """Get the single-bit mask for a letter."""
    index = ALPHABET.find(letter)
    if len(letter) != 1 or index < 0:
        raise ValueError(f"Unsupported letter: {letter!r} (use a-z)")
    return 1 << encode(index)


def encode_letters(letters: Iterable[str]) -> int:
    """Pack a collection of letters into a substitution mask."""
    mask = 0
    for letter in letters:
        mask |= letter_bit(letter)
    return mask


def decode(mask: int) -> Iterator[int]:
    """Yield the letter indices set in a mask.

    Bits are scanned from the least significant upward, so letters come
    out in reverse alphabetical order ('z' first).

    Args:
        mask: Substitution mask (0 <= mask < 2**26).

    Yields:
        Letter indices (0 = 'a').
    """
    if not 0 <= mask < MASK_LIMIT:
        raise ValueError(f"Mask out of range: {mask}")
    bit = 0
    while mask:
        if mask & 1:
            yield ALPHABET_SIZE - 1 - bit
        mask >>= 1
        bit += 1


def decode_letters(mask: int) -> list[str]:
    """Decode a mask into its letters, 'z' first."""
    return [ALPHABET[i] for i in decode(mask)]


def wildcard_pattern(word: str, position: int) -> str:
    """Blank one position of a word: ("cold", 1) -> "c&ld"."""
    return word[:position] + WILDCARD + word[position + 1:]


def fill_pattern(pattern: str, letter: str) -> str:
    """Substitute a letter into the blanked slot of a pattern."""
    position = pattern.index(WILDCARD)
    return pattern[:position] + letter + pattern[position + 1:]


def wildcard_position(pattern: str) -> int:
    """Get the blanked position of a pattern, -1 if it is malformed."""
    if pattern.count(WILDCARD) != 1:
        return -1
    return pattern.index(WILDCARD)
