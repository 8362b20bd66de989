"""Hunspell dictionary ingestor.

Parses Hunspell .dic files used by LibreOffice, Firefox, etc.

Format:
    12345           # Optional word count (first line)
    word/FLAGS      # Word with optional affix flags
    another         # Word without flags

Downloads from wooorm/dictionaries (MIT licensed, regularly updated).
"""

from pathlib import Path
from typing import Iterator, Optional

from .base import DownloadableIngestor, IngestResult

# wooorm/dictionaries - MIT licensed
HUNSPELL_URLS = {
    "en": "https://raw.githubusercontent.com/wooorm/dictionaries/main/dictionaries/en/index.dic",
    "en-gb": "https://raw.githubusercontent.com/wooorm/dictionaries/main/dictionaries/en-GB/index.dic",
}


class HunspellIngestor(DownloadableIngestor):
    """Ingestor for Hunspell .dic files."""

    file_extensions = [".dic"]
    download_urls = HUNSPELL_URLS

    def get_dict_name(self, filepath: Path) -> str:
        return f"hunspell_{self.language}"

    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse Hunspell .dic file.

        Args:
            filepath: Path to .dic file.

        Yields:
            Tuples of (word, line_number).
        """
        with open(filepath, "r", encoding="utf-8", errors="ignore") as f:
            for line_num, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue

                # Skip first line if it's just a number (word count)
                if line_num == 1 and line.isdigit():
                    continue

                # Strip affix flags: "word/ABC" -> "word"
                word = line.split("/")[0]

                if word:
                    yield word, line_num


def ingest(
    filepath: Path | str,
    word_length: Optional[int] = None,
    language: str = "en",
) -> IngestResult:
    """Convenience function to ingest a local Hunspell dictionary."""
    ingestor = HunspellIngestor(
        language=language,
        cache_dir=Path(filepath).parent,
        word_length=word_length,
    )
    return ingestor.ingest(filepath)


def download_and_ingest(
    language: str,
    cache_dir: Path | str,
    word_length: Optional[int] = None,
    force: bool = False,
) -> IngestResult:
    """Download a Hunspell dictionary (cached) and ingest it.

    Raises:
        ValueError: If no download URL is known for the language.
    """
    ingestor = HunspellIngestor(
        language=language,
        cache_dir=cache_dir,
        word_length=word_length,
    )
    return ingestor.download_and_ingest(force=force)
