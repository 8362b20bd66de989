"""Comma separated word list ingestor.

Format: words separated by commas, optionally spread over several lines.

    able,acid,aged,also,area,army,away,baby,back,ball
    band,bank,base,bath,bear,beat,been,beer,bell,belt

This is the encoding used for both raw dictionaries and common word lists.
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import Ingestor, IngestResult


class CommaSeparatedIngestor(Ingestor):
    """Ingestor for comma separated word lists."""

    file_extensions = [".csv", ".dict"]

    def __init__(self, word_length: Optional[int] = None, delimiter: str = ","):
        super().__init__(word_length)
        self.delimiter = delimiter

    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
            for line_num, line in enumerate(f, start=1):
                for entry in line.split(self.delimiter):
                    entry = entry.strip()
                    if entry:
                        yield entry, line_num


def ingest(
    filepath: Path | str,
    word_length: Optional[int] = None,
    delimiter: str = ",",
) -> IngestResult:
    """Convenience function to ingest a comma separated word list."""
    ingestor = CommaSeparatedIngestor(word_length=word_length, delimiter=delimiter)
    return ingestor.ingest(filepath)
