"""Word ladder solver.

Lexibit loads a compiled lexicon and answers shortest-path queries
between two words of the lexicon's length with a breadth-first search.
Neighbors are never stored explicitly: they are expanded lazily from the
substitution masks of a word's wildcard patterns.

Usage:
    solver = Lexibit()
    solver.load("4-letter.json", "common.csv")
    solver.path("cold", "warm")
    # ['cold', 'cord', 'card', 'ward', 'warm']

Each query owns its search state (queue, visited set and node arena), so a
loaded solver can serve concurrent queries from several threads.
"""

from collections import deque
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional
import logging
import random

from .codec import ALPHABET, decode, wildcard_position
from .errors import (
    InvalidParameterError,
    NoElementsError,
    NotReadyError,
)
from .normalizer import is_valid_word, normalize_and_validate
from .schema import Lexicon
from .sources import parse_word_list, read_source

logger = logging.getLogger(__name__)

NO_PARENT = -1


@dataclass
class WordPair:
    """A pair of common words and the ladder between them."""

    one: str
    two: str
    path: list[str]


@dataclass
class SearchContext:
    """State of a single BFS run.

    Search nodes live in an arena: node i is ``words[i]`` and its parent is
    ``parents[i]`` (NO_PARENT for the root).
    """

    end: str
    words: list[str] = field(default_factory=list)
    parents: list[int] = field(default_factory=list)
    visited: set[str] = field(default_factory=set)
    queue: deque = field(default_factory=deque)
    found: int = NO_PARENT

    def discover(self, word: str, parent: int) -> int:
        """Mark a word visited, add its node and enqueue it."""
        handle = len(self.words)
        self.words.append(word)
        self.parents.append(parent)
        self.visited.add(word)
        self.queue.append(handle)
        if word == self.end:
            self.found = handle
        return handle

    def reconstruct(self, handle: int) -> list[str]:
        """Follow parent links from a node back to the root."""
        path = []
        while handle != NO_PARENT:
            path.append(self.words[handle])
            handle = self.parents[handle]
        path.reverse()
        return path


def neighbors(lexicon: Lexicon, word: str) -> Iterator[str]:
    """Yield the words one substitution away from word.

    The word itself may be yielded (its own letter is set in every mask).
    Words that are not lexicon keys have no neighbors.
    """
    for pattern, mask in lexicon.patterns(word).items():
        position = wildcard_position(pattern)
        prefix, suffix = pattern[:position], pattern[position + 1:]
        for index in decode(mask):
            yield prefix + ALPHABET[index] + suffix


def bfs(lexicon: Lexicon, start: str, end: str) -> Optional[list[str]]:
    """Breadth-first search for a shortest ladder from start to end.

    A node is checked against the target when it is discovered, not when
    it is dequeued, so the search stops one level early.

    Returns:
        The ladder from start to end inclusive, or None.
    """
    context = SearchContext(end=end)
    context.discover(start, NO_PARENT)

    while context.queue and context.found == NO_PARENT:
        current = context.queue.popleft()
        for neighbor in neighbors(lexicon, context.words[current]):
            if neighbor in context.visited:
                continue
            context.discover(neighbor, current)
            if context.found != NO_PARENT:
                break

    logger.debug(
        "Searched %s -> %s: %d words visited", start, end, len(context.visited)
    )
    if context.found == NO_PARENT:
        return None
    return context.reconstruct(context.found)


class Lexibit:
    """Word ladder solver over a compiled lexicon."""

    def __init__(self):
        self.ready = False
        self.length = 0
        self._lexicon = Lexicon(word_length=0)
        self._common: list[str] = []

    def bind(self, lexicon: Lexicon, common_words: Iterable[str] = ()) -> "Lexibit":
        """Bind the solver to an in-memory lexicon.

        Common words are kept if they have the lexicon's length and are
        lexicon keys.

        Raises:
            NoElementsError: If the lexicon is empty.
        """
        self.ready = False
        if lexicon.is_empty():
            raise NoElementsError()

        length = lexicon.word_length
        if isinstance(common_words, str):
            common_words = parse_word_list(common_words)
        candidates: dict[str, None] = {}
        for raw in common_words:
            word = normalize_and_validate(raw)
            if word is not None and len(word) == length:
                candidates.setdefault(word)
        common = [word for word in candidates if word in lexicon]
        dropped = len(candidates) - len(common)
        if dropped:
            logger.info("Dropped %d common words missing from the lexicon", dropped)

        self._lexicon = lexicon
        self._common = common
        self.length = length
        self.ready = True
        logger.info(
            "Loaded %d %d-letter words, %d common",
            len(lexicon), length, len(common),
        )
        return self

    def load(
        self,
        dictionary_source: Path | str,
        common_source: Optional[Path | str] = None,
    ) -> "Lexibit":
        """Load a compiled lexicon and a common word list.

        Args:
            dictionary_source: Path or URL of a compiled lexicon.
            common_source: Path or URL of a comma separated word list.

        Raises:
            InvalidSourceError: If either source can't be retrieved or parsed.
            NoElementsError: If the lexicon is empty.
        """
        self.ready = False
        lexicon = Lexicon.loads(
            read_source(dictionary_source), source=str(dictionary_source)
        )
        common: list[str] = []
        if common_source is not None:
            common = parse_word_list(read_source(common_source))
        return self.bind(lexicon, common)

    @classmethod
    def from_sources(
        cls,
        dictionary_source: Path | str,
        common_source: Optional[Path | str] = None,
    ) -> "Lexibit":
        return cls().load(dictionary_source, common_source)

    def is_ready(self) -> bool:
        return self.ready

    def size(self) -> int:
        """Number of words in the lexicon."""
        self._check_ready()
        return len(self._lexicon)

    @property
    def common_words(self) -> list[str]:
        return list(self._common)

    def neighbors(self, word: str) -> list[str]:
        """Words one letter away from word, excluding the word itself."""
        self._check_ready()
        return [n for n in neighbors(self._lexicon, word.lower()) if n != word.lower()]

    def path(self, start: Optional[str], end: Optional[str]) -> Optional[list[str]]:
        """Find a shortest word ladder between two words.

        Args:
            start: First word.
            end: Last word.

        Returns:
            Words from start to end inclusive, or None if no ladder exists
            (or either word is missing).

        Raises:
            NotReadyError: If no lexicon is loaded.
            InvalidParameterError: If a word isn't a-z or its length doesn't match.
        """
        self._check_ready()
        if not start or not end:
            return None
        words = []
        for name, word in (("start", start), ("end", end)):
            word = word.lower() if isinstance(word, str) else word
            if not isinstance(word, str) or len(word) != self.length:
                raise InvalidParameterError(
                    f"Words must be of length {self.length}, got {word!r}",
                    parameter=name,
                )
            if not is_valid_word(word):
                raise InvalidParameterError(
                    f"Words must only contain letters a-z, got {word!r}",
                    parameter=name,
                )
            words.append(word)

        return bfs(self._lexicon, *words)

    def random_common_word_pair(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: Optional[int] = None,
    ) -> Optional[WordPair]:
        """Find a random pair of common words with a ladder between them.

        Pairs are sampled until one is connected. Without max_attempts this
        never returns if no sampled pair is ever connected.

        Args:
            rng: Random source (module level random if None).
            max_attempts: Give up after this many pairs and return None.

        Raises:
            NotReadyError: If no lexicon is loaded.
            NoElementsError: If there are no common words.
        """
        self._check_ready()
        if not self._common:
            raise NoElementsError("No common words of the lexicon's length were loaded.")

        rng = rng or random
        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            one = rng.choice(self._common)
            two = rng.choice(self._common)
            ladder = self.path(one, two)
            if ladder:
                logger.debug("Found pair after %d attempts", attempts)
                return WordPair(one=one, two=two, path=ladder)

        logger.info("No connected pair found in %d attempts", attempts)
        return None

    def _check_ready(self) -> None:
        if not self.ready:
            raise NotReadyError()
