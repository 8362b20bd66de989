"""Lexicon builder module.

Compiles raw word lists into per-length lexicon files.
"""

from .compiler import BuildStats, LexiconCompiler, compile_words

__all__ = [
    "BuildStats",
    "LexiconCompiler",
    "compile_words",
]
