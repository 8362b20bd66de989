"""lexibit - Word ladder compiler and solver.

Finds the shortest chain of words between two words of equal length,
changing one letter at a time, where every step is a dictionary word.

Core concepts:
    - The compiler packs, for every word and letter position, the set of
      letters that spell another word into a 26-bit substitution mask
    - The solver expands neighbors from those masks on demand and runs a
      breadth-first search for a shortest ladder

Example:
    "co&d" with "cold" and "cord" in the dictionary
    -> mask with the bits for "l" and "r" set

Usage:
    from lexibit.builder import LexiconCompiler
    from lexibit.ingest import plain_text
    from lexibit.solver import Lexibit

    # Compile 4-letter words
    compiler = LexiconCompiler(word_length=4)
    compiler.add_result(plain_text.ingest("words.txt", word_length=4))
    compiler.build("./lexicons")            # writes lexicons/4-letter.json

    # Solve
    solver = Lexibit().load("./lexicons/4-letter.json", "common.csv")
    solver.path("cold", "warm")
    solver.random_common_word_pair()
"""

from .errors import (
    InvalidParameterError,
    InvalidSourceError,
    LexibitError,
    NoElementsError,
    NotReadyError,
)
from .schema import Lexicon
from .solver import Lexibit, WordPair

__version__ = "1.0.0"

__all__ = [
    "InvalidParameterError",
    "InvalidSourceError",
    "Lexibit",
    "LexibitError",
    "Lexicon",
    "NoElementsError",
    "NotReadyError",
    "WordPair",
]
