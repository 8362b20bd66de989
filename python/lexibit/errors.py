"""Error taxonomy for lexibit.

Every failure the solver or compiler reports is one of a closed set of
named conditions. A word pair with no connecting ladder is not an error;
``Lexibit.path`` returns ``None`` for it.
"""

from typing import Optional


class LexibitError(Exception):
    """Base class for all lexibit errors."""

    name = "lexibit-error"
    default_message = "Lexibit error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"


class NotReadyError(LexibitError):
    """A query was issued before the lexicon finished loading."""

    name = "not-ready"
    default_message = (
        "Lexibit has not completed loading. Have the dictionaries been pulled in?"
    )


class NoElementsError(LexibitError):
    """The lexicon (or common word list) holds no words."""

    name = "no-elements"
    default_message = (
        "No elements exist in the Lexibit, check that the correct file was loaded."
    )


class InvalidSourceError(LexibitError):
    """A dictionary or common word source could not be retrieved or parsed."""

    name = "invalid-source"
    default_message = "Invalid source. Be sure you have the correct path or url."

    def __init__(self, message: Optional[str] = None, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class InvalidParameterError(LexibitError, ValueError):
    """Query or build parameters do not meet requirements."""

    name = "invalid-parameter"
    default_message = "Parameters are not valid."

    def __init__(
        self, message: Optional[str] = None, parameter: Optional[str] = None
    ):
        super().__init__(message)
        self.parameter = parameter
