# api/services/scripture/sources.py
"""
Backing data sources for the bundled-data providers.

Two shapes of data are supported:
- BookSource: one resource per book holding chapter -> verse -> text
- DocumentSource: one markup document per translation

Blocking file and network I/O runs in a worker thread so the event loop
stays responsive.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from utils.http_retry import get_with_retry

from .errors import DataUnavailableError

logger = logging.getLogger(__name__)

BookData = Dict[int, Dict[int, str]]


def book_slug(book: str) -> str:
    """File stem for a book name: "1 John" -> "1_john"."""
    return book.strip().lower().replace(" ", "_")


def normalize_book_data(raw, book: str) -> BookData:
    """
    Convert a JSON-style mapping into {chapter: {verse: text}} with int keys.

    Chapters and verses are sorted ascending. Null or blank verse text
    is dropped, so a verse either has text or is absent.

    Raises:
        DataUnavailableError: If the data is not a nested mapping with
            numeric keys
    """
    if not isinstance(raw, Mapping):
        raise DataUnavailableError(f"Book data for {book} is not a mapping")

    try:
        chapters = {}
        for chapter_key, verses in raw.items():
            if not isinstance(verses, Mapping):
                raise DataUnavailableError(
                    f"Chapter {chapter_key} of {book} is not a mapping"
                )
            chapters[int(chapter_key)] = {
                int(verse_key): str(text)
                for verse_key, text in sorted(verses.items(), key=lambda kv: int(kv[0]))
                if text is not None and str(text).strip()
            }
    except ValueError as e:
        raise DataUnavailableError(f"Non-numeric key in book data for {book}: {e}")

    return dict(sorted(chapters.items()))


# =============================================================================
# Per-book sources
# =============================================================================

class BookSource(ABC):
    """Loads the text of one book at a time."""

    @abstractmethod
    async def load_book(self, book: str) -> BookData:
        """
        Load all chapters of a book.

        Raises:
            DataUnavailableError: If the book cannot be loaded
        """
        pass


class JsonBookSource(BookSource):
    """
    Per-book JSON files in a directory.

    Layout:
        {directory}/
        ├── genesis.json
        ├── 1_john.json
        └── song_of_solomon.json

    Each file holds {"<chapter>": {"<verse>": "<text>"}}.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def path_for(self, book: str) -> Path:
        return self.directory / f"{book_slug(book)}.json"

    def _read(self, path: Path):
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    async def load_book(self, book: str) -> BookData:
        path = self.path_for(book)
        try:
            raw = await asyncio.to_thread(self._read, path)
        except FileNotFoundError:
            logger.error(f"Book data file missing: {path}")
            raise DataUnavailableError(f"Book data not available for {book}")
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read book data {path}: {e}")
            raise DataUnavailableError(f"Failed to load book data for {book}: {e}")

        return normalize_book_data(raw, book)


# =============================================================================
# Per-translation document sources
# =============================================================================

class DocumentSource(ABC):
    """Fetches one markup document per translation."""

    @abstractmethod
    def translations(self) -> List[str]:
        """Translation codes this source can serve, in configuration order."""
        pass

    @abstractmethod
    async def fetch(self, translation: str) -> bytes:
        """
        Fetch the raw document for a translation.

        Raises:
            DataUnavailableError: If the document cannot be retrieved
        """
        pass


class LocationDocumentSource(DocumentSource):
    """
    Documents addressed by location: a file path or an http(s) URL.

    Relative paths are resolved against base_dir.

    Usage:
        source = LocationDocumentSource(
            {"KJV": "osis/kjv.xml", "WEB": "https://example.org/web.xml"},
            base_dir="/srv/scripture",
        )
    """

    def __init__(
        self,
        locations: Mapping[str, str],
        base_dir: Optional[Union[str, Path]] = None,
        timeout: int = 30,
    ):
        self.locations = dict(locations)
        self.base_dir = Path(base_dir) if base_dir else None
        self.timeout = timeout

    def translations(self) -> List[str]:
        return list(self.locations)

    def _resolve(self, location: str) -> Path:
        path = Path(location)
        if not path.is_absolute() and self.base_dir is not None:
            path = self.base_dir / path
        return path

    def _download(self, url: str) -> bytes:
        return get_with_retry(url, timeout=self.timeout).content

    async def fetch(self, translation: str) -> bytes:
        location = self.locations.get(translation)
        if location is None:
            logger.error(f"No document location configured for {translation}")
            raise DataUnavailableError(f"No document configured for {translation}")

        try:
            if location.startswith(("http://", "https://")):
                logger.info(f"Downloading {translation} from {location}")
                return await asyncio.to_thread(self._download, location)
            return await asyncio.to_thread(self._resolve(location).read_bytes)
        except (OSError, RuntimeError) as e:
            logger.error(f"Failed to fetch {translation} from {location}: {e}")
            raise DataUnavailableError(f"Translation {translation} is unavailable: {e}")
