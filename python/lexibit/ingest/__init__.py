"""Raw word list ingestion.

Provides pluggable ingestors for the word lists fed to the compiler:
- Plain text word lists (one word per line)
- Comma separated word lists
- Hunspell .dic files

Usage:
    from lexibit.ingest import plain_text, hunspell

    result = plain_text.ingest("path/to/words.txt", word_length=4)
    result = hunspell.download_and_ingest("en", cache_dir="./sources", word_length=4)
"""

from pathlib import Path

from .base import Ingestor, IngestResult
from . import comma_separated
from . import hunspell
from . import plain_text

# Register available ingestors
INGESTORS: dict[str, type[Ingestor]] = {
    "comma_separated": comma_separated.CommaSeparatedIngestor,
    "hunspell": hunspell.HunspellIngestor,
    "plain_text": plain_text.PlainTextIngestor,
}


def get_ingestor(name: str) -> type[Ingestor]:
    """Get ingestor class by name."""
    if name not in INGESTORS:
        raise ValueError(f"Unknown ingestor: {name}. Available: {list(INGESTORS.keys())}")
    return INGESTORS[name]


def detect_format(filepath: Path | str) -> str:
    """Pick an ingestor name from a file extension.

    Unknown extensions fall back to comma separated.
    """
    suffix = Path(filepath).suffix.lower()
    for name, ingestor_cls in INGESTORS.items():
        if suffix in ingestor_cls.file_extensions:
            return name
    return "comma_separated"


def ingest_file(
    filepath: Path | str,
    word_length: int | None = None,
    fmt: str = "auto",
) -> IngestResult:
    """Ingest a local word list with the named (or detected) format."""
    name = detect_format(filepath) if fmt == "auto" else fmt
    if name == "hunspell":
        return hunspell.ingest(filepath, word_length=word_length)
    return get_ingestor(name)(word_length=word_length).ingest(filepath)


__all__ = [
    "Ingestor",
    "IngestResult",
    "comma_separated",
    "hunspell",
    "plain_text",
    "get_ingestor",
    "detect_format",
    "ingest_file",
    "INGESTORS",
]
