"""Compiled lexicon schema.

A lexicon maps every word to its wildcard patterns and each pattern to a
substitution mask:

    {
        "cold": {"&old": 8388608, "c&ld": 2048, "co&d": 16640, "col&": 4194304},
        ...
    }

It is the implicit adjacency representation of the word graph: decoding
a pattern's mask gives the one-letter neighbors through that position.
A lexicon is built once and never mutated afterward.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping
import json

from .codec import MASK_LIMIT, wildcard_pattern, wildcard_position
from .errors import InvalidSourceError
from .normalizer import is_valid_word


def lexicon_filename(word_length: int) -> str:
    """Conventional file name for a compiled lexicon: "4-letter.json"."""
    return f"{word_length}-letter.json"


def _validate_mask(word: str, pattern: str, mask: Any, source: str) -> int:
    # bool is an int subclass but never a valid mask
    if isinstance(mask, bool) or not isinstance(mask, int):
        raise InvalidSourceError(
            f"Mask for {word!r} / {pattern!r} is not an integer: {mask!r}",
            source=source,
        )
    if not 0 <= mask < MASK_LIMIT:
        raise InvalidSourceError(
            f"Mask for {word!r} / {pattern!r} out of range: {mask}",
            source=source,
        )
    return mask


def _validate_entry(
    word: Any, patterns: Any, word_length: int, source: str
) -> dict[str, int]:
    if not isinstance(word, str) or not is_valid_word(word):
        raise InvalidSourceError(f"Invalid word key: {word!r}", source=source)
    if len(word) != word_length:
        raise InvalidSourceError(
            f"Word {word!r} has length {len(word)}, expected {word_length}",
            source=source,
        )
    if not isinstance(patterns, dict):
        raise InvalidSourceError(
            f"Patterns for {word!r} must be an object", source=source
        )
    if len(patterns) != word_length:
        raise InvalidSourceError(
            f"Word {word!r} has {len(patterns)} patterns, expected {word_length}",
            source=source,
        )

    entry: dict[str, int] = {}
    for pattern, mask in patterns.items():
        position = wildcard_position(pattern) if isinstance(pattern, str) else -1
        if (
            position < 0
            or len(pattern) != word_length
            or pattern != wildcard_pattern(word, position)
        ):
            raise InvalidSourceError(
                f"Pattern {pattern!r} does not belong to word {word!r}",
                source=source,
            )
        entry[pattern] = _validate_mask(word, pattern, mask, source)
    return entry


_NO_PATTERNS: Mapping[str, int] = MappingProxyType({})


@dataclass(frozen=True)
class Lexicon:
    """Read-only word -> wildcard pattern -> substitution mask mapping."""

    word_length: int
    entries: Mapping[str, Mapping[str, int]] = field(default_factory=dict)

    def __post_init__(self):
        # Copies, so later changes to the source dicts are not seen
        frozen = {
            word: MappingProxyType(dict(patterns))
            for word, patterns in self.entries.items()
        }
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, word: object) -> bool:
        return word in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def patterns(self, word: str) -> Mapping[str, int]:
        """Get the pattern masks of a word (empty for unknown words)."""
        return self.entries.get(word, _NO_PATTERNS)

    def is_empty(self) -> bool:
        return not self.entries

    def to_dict(self) -> dict[str, dict[str, int]]:
        """Convert to dictionary for JSON serialization."""
        return {word: dict(patterns) for word, patterns in self.entries.items()}

    def save(self, filepath: Path) -> None:
        """Save lexicon to a JSON file."""
        filepath.parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: Any, source: str = "<memory>") -> "Lexicon":
        """Create a lexicon from parsed data, validating the schema.

        The word length is taken from the first key; every other key must
        share it.

        Raises:
            InvalidSourceError: If any part of the data violates the schema.
        """
        if not isinstance(data, dict):
            raise InvalidSourceError(
                "Lexicon must be a JSON object of word -> patterns", source=source
            )
        if not data:
            return cls(word_length=0, entries={})

        first = next(iter(data))
        word_length = len(first) if isinstance(first, str) else 0
        entries = {
            word: _validate_entry(word, patterns, word_length, source)
            for word, patterns in data.items()
        }
        return cls(word_length=word_length, entries=entries)

    @classmethod
    def loads(cls, text: str, source: str = "<memory>") -> "Lexicon":
        """Parse a lexicon from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidSourceError(
                f"Lexicon is not valid JSON: {e}", source=source
            ) from e
        return cls.from_dict(data, source=source)

    @classmethod
    def load(cls, filepath: Path) -> "Lexicon":
        """Load a lexicon from a JSON file."""
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise InvalidSourceError(
                f"Could not read lexicon: {e}", source=str(filepath)
            ) from e
        return cls.loads(text, source=str(filepath))
