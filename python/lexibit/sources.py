"""Retrieval of lexicon and common word payloads.

A source is either a local file path or an ``http(s)://`` URL. Any
failure to retrieve or decode it is reported as InvalidSourceError.
"""

from pathlib import Path
from typing import Optional
import logging
import urllib.error
import urllib.request

from .errors import InvalidSourceError
from .normalizer import normalize_and_validate

logger = logging.getLogger(__name__)

URL_SCHEMES = ("http://", "https://")
DEFAULT_TIMEOUT = 30


def is_url(source: Path | str) -> bool:
    """Check if a source refers to a remote URL."""
    return isinstance(source, str) and source.lower().startswith(URL_SCHEMES)


def read_source(source: Path | str, timeout: Optional[float] = DEFAULT_TIMEOUT) -> str:
    """Read a source payload as text.

    Args:
        source: Local path or http(s) URL.
        timeout: Network timeout in seconds for URLs.

    Returns:
        Decoded UTF-8 text.

    Raises:
        InvalidSourceError: If the source cannot be retrieved or decoded.
    """
    name = str(source)
    try:
        if is_url(source):
            logger.info("Fetching %s", name)
            with urllib.request.urlopen(name, timeout=timeout) as response:
                payload = response.read()
        else:
            payload = Path(source).read_bytes()
        return payload.decode("utf-8")
    except (OSError, urllib.error.URLError) as e:
        raise InvalidSourceError(f"Could not retrieve {name}: {e}", source=name) from e
    except UnicodeDecodeError as e:
        raise InvalidSourceError(f"{name} is not UTF-8 text: {e}", source=name) from e


def parse_word_list(text: str, word_length: Optional[int] = None) -> list[str]:
    """Parse a comma-delimited word list.

    Entries are normalized; invalid entries and duplicates are dropped and
    the original order is kept.

    Args:
        text: Comma-separated words (newlines are treated as separators).
        word_length: Keep only words of this length, if given.

    Returns:
        List of unique normalized words.
    """
    words: dict[str, None] = {}
    for raw in text.replace("\n", ",").split(","):
        word = normalize_and_validate(raw)
        if word is None:
            continue
        if word_length is not None and len(word) != word_length:
            continue
        words.setdefault(word)
    return list(words)
