"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lexibit.builder import compile_words
from lexibit.solver import Lexibit

LADDER_WORDS = [
    "cold", "cord", "card", "ward", "warm",
    "core", "bore", "bone", "cone",
    "came", "cave",
]


@pytest.fixture
def ladder_words():
    """Small 4-letter dictionary.

    cold-cord-card-ward-warm is a chain, cord-core joins the
    core/bore/bone/cone cycle, and came-cave is a separate component.
    """
    return list(LADDER_WORDS)


@pytest.fixture
def lexicon(ladder_words):
    """Compiled lexicon of the ladder words."""
    return compile_words(ladder_words, 4)


@pytest.fixture
def solver(lexicon, ladder_words):
    """Solver bound to the ladder lexicon, all words common."""
    return Lexibit().bind(lexicon, ladder_words)


@pytest.fixture
def sample_wordlist_content():
    """Sample plain text word list."""
    return """# Word list
cold
cord
card  # inline comment
ward
warm
apple
"""


@pytest.fixture
def sample_comma_content():
    """Sample comma separated word list."""
    return "cold,cord,card,ward,warm\ncore,bore,bone,cone,came,cave,apple,COLD"
