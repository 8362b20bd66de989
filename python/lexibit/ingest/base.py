"""Base ingestor interface for raw word lists.

All ingestors inherit from Ingestor and implement the parse() method.
This provides a consistent API for loading words from any source format
before they are compiled into a lexicon.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Iterator
import logging
import urllib.request

from ..normalizer import normalize_and_validate

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    """Result of ingesting a raw word list."""

    words: list[str]
    source_path: str
    dict_name: str
    total_raw: int = 0          # Total entries in source
    total_valid: int = 0        # Valid words after normalization and filtering
    total_duplicates: int = 0   # Duplicates within this source

    def __repr__(self) -> str:
        return (
            f"IngestResult({self.dict_name}: "
            f"{self.total_valid}/{self.total_raw} valid, "
            f"{self.total_duplicates} dupes)"
        )


class Ingestor(ABC):
    """Base class for word list ingestors.

    Subclasses must implement:
        - parse(filepath) -> Iterator of (original_word, line_number) tuples
        - file_extensions: list of supported extensions

    The ingest() method handles normalization, length filtering and
    de-duplication.
    """

    file_extensions: list[str] = []

    def __init__(self, word_length: Optional[int] = None):
        """Initialize ingestor.

        Args:
            word_length: Keep only words of exactly this length (all if None).
        """
        self.word_length = word_length

    @abstractmethod
    def parse(self, filepath: Path) -> Iterator[tuple[str, Optional[int]]]:
        """Parse source file and yield (word, line_number) tuples.

        Args:
            filepath: Path to source file.

        Yields:
            Tuples of (original_word, line_number).
        """
        pass

    def get_dict_name(self, filepath: Path) -> str:
        """Generate dictionary name from filepath."""
        return filepath.stem

    def ingest(self, filepath: Path | str) -> IngestResult:
        """Ingest a word list from file.

        Args:
            filepath: Path to source file.

        Returns:
            IngestResult with words and statistics.
        """
        filepath = Path(filepath)
        words: dict[str, None] = {}
        total_raw = 0
        duplicates = 0

        for original_word, _line_num in self.parse(filepath):
            total_raw += 1

            normalized = normalize_and_validate(original_word)
            if normalized is None:
                continue
            if self.word_length is not None and len(normalized) != self.word_length:
                continue

            if normalized in words:
                duplicates += 1
            else:
                words[normalized] = None

        result = IngestResult(
            words=list(words),
            source_path=str(filepath.resolve()),
            dict_name=self.get_dict_name(filepath),
            total_raw=total_raw,
            total_valid=len(words),
            total_duplicates=duplicates,
        )
        logger.info("Ingested %r", result)
        return result


class DownloadableIngestor(Ingestor):
    """Ingestor that can download source files."""

    download_urls: dict[str, str] = {}  # language -> URL

    def __init__(
        self,
        language: str,
        cache_dir: Path | str,
        word_length: Optional[int] = None,
    ):
        super().__init__(word_length)
        self.language = language
        self.cache_dir = Path(cache_dir)

    def get_cached_path(self) -> Path:
        """Get path where downloaded file should be cached."""
        if self.language not in self.download_urls:
            raise ValueError(f"No download URL for language: {self.language}")
        url = self.download_urls[self.language]
        filename = url.split("/")[-1]
        return self.cache_dir / filename

    def download(self, force: bool = False) -> Path:
        """Download source file if not cached.

        Args:
            force: Force re-download even if cached.

        Returns:
            Path to cached file.
        """
        cached_path = self.get_cached_path()
        url = self.download_urls[self.language]

        if cached_path.exists() and not force:
            logger.info("[%s] Using cached: %s", self.language, cached_path)
            return cached_path

        self.cache_dir.mkdir(parents=True, exist_ok=True)

        logger.info("[%s] Downloading from: %s", self.language, url)
        urllib.request.urlretrieve(url, cached_path)
        logger.info("[%s] Saved to: %s", self.language, cached_path)

        return cached_path

    def download_and_ingest(self, force: bool = False) -> IngestResult:
        """Download and ingest in one step."""
        filepath = self.download(force=force)
        return self.ingest(filepath)
