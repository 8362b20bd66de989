"""Lexicon compiler.

Turns a flat word list into a compiled lexicon for one word length. For
every word and every letter position, the compiler records which of the
26 letters can be substituted there while still spelling a dictionary
word.

Output structure:
    lexicons/
    ├── 3-letter.json
    ├── 4-letter.json
    └── 5-letter.json
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable
import logging

from ..codec import ALPHABET, encode, wildcard_pattern, wildcard_position
from ..errors import InvalidParameterError
from ..ingest.base import IngestResult
from ..normalizer import normalize_and_validate
from ..schema import Lexicon, lexicon_filename
from ..trie import WordTrie

logger = logging.getLogger(__name__)


@dataclass
class BuildStats:
    """Statistics from a build operation."""

    word_length: int
    total_words: int = 0
    total_patterns: int = 0
    total_edges: int = 0        # Set mask bits, self substitutions excluded
    isolated_words: int = 0     # Words with no one-letter neighbor
    files_written: list[str] = field(default_factory=list)


def validate_word_length(word_length: object) -> int:
    """Check that a word length is a positive integer.

    Raises:
        InvalidParameterError: If it is not.
    """
    if isinstance(word_length, bool) or not isinstance(word_length, int):
        raise InvalidParameterError(
            f"Word length must be an integer, got {word_length!r}",
            parameter="word_length",
        )
    if word_length < 1:
        raise InvalidParameterError(
            f"Word length must be positive, got {word_length}",
            parameter="word_length",
        )
    return word_length


def substitution_mask(trie: WordTrie, pattern: str, position: int) -> int:
    """Compute the substitution mask for one wildcard pattern.

    The word's own letter is tested too, so every mask of a member word
    has its self bit set.
    """
    mask = 0
    prefix, suffix = pattern[:position], pattern[position + 1:]
    for index, letter in enumerate(ALPHABET):
        if trie.find(prefix + letter + suffix):
            mask |= 1 << encode(index)
    return mask


class LexiconCompiler:
    """Compiles words of a single length into a Lexicon."""

    def __init__(self, word_length: int):
        """Initialize compiler.

        Args:
            word_length: Length of the words to keep.

        Raises:
            InvalidParameterError: If word_length is not a positive integer.
        """
        self.word_length = validate_word_length(word_length)
        self._trie = WordTrie()
        self._words: dict[str, None] = {}

    def add_word(self, word: str) -> bool:
        """Add a single word. Returns True if it was kept."""
        normalized = normalize_and_validate(word)
        if normalized is None or len(normalized) != self.word_length:
            return False
        if self._trie.add(normalized):
            self._words[normalized] = None
        return True

    def add_words(self, words: Iterable[str]) -> int:
        """Add words, returning how many were kept."""
        return sum(1 for word in words if self.add_word(word))

    def add_result(self, result: IngestResult) -> int:
        """Add words from an IngestResult."""
        return self.add_words(result.words)

    def get_word_count(self) -> int:
        return len(self._words)

    def compile(self) -> Lexicon:
        """Compute the substitution masks for every retained word.

        Returns:
            Lexicon (empty if no words were retained).
        """
        entries: dict[str, dict[str, int]] = {}
        for word in self._words:
            patterns: dict[str, int] = {}
            for position in range(self.word_length):
                pattern = wildcard_pattern(word, position)
                patterns[pattern] = substitution_mask(self._trie, pattern, position)
            entries[word] = patterns

        if not entries:
            logger.warning("No %d-letter words to compile", self.word_length)
        return Lexicon(word_length=self.word_length, entries=entries)

    def build(self, output_dir: Path | str) -> BuildStats:
        """Compile and write ``<length>-letter.json`` to output_dir.

        Args:
            output_dir: Directory for the compiled lexicon.

        Returns:
            BuildStats with counts and the file written.
        """
        lexicon = self.compile()
        stats = compute_stats(lexicon)

        filepath = Path(output_dir) / lexicon_filename(self.word_length)
        lexicon.save(filepath)
        stats.files_written.append(str(filepath))

        logger.info(
            "Compiled %d words (%d edges) to %s",
            stats.total_words, stats.total_edges, filepath,
        )
        return stats


def compute_stats(lexicon: Lexicon) -> BuildStats:
    """Summarize a compiled lexicon."""
    stats = BuildStats(word_length=lexicon.word_length)
    for word in lexicon:
        degree = 0
        for pattern, mask in lexicon.patterns(word).items():
            stats.total_patterns += 1
            own_letter = word[wildcard_position(pattern)]
            own_bit = 1 << encode(ALPHABET.index(own_letter))
            degree += bin(mask & ~own_bit).count("1")
        stats.total_words += 1
        stats.total_edges += degree
        if degree == 0:
            stats.isolated_words += 1
    # Each edge is seen from both ends
    stats.total_edges //= 2
    return stats


def compile_words(words: Iterable[str], word_length: int) -> Lexicon:
    """Convenience function: compile a word list into a Lexicon."""
    compiler = LexiconCompiler(word_length)
    compiler.add_words(words)
    return compiler.compile()
