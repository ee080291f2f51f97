# api/services/scripture/providers/api_bible.py
"""
API.Bible provider (not implemented).

Placeholder for a remote text service under a versioned base path,
authenticated with an "api-key" header. Every operation raises
NotImplementedError; it is wired through configuration so the rest of
the application runs unchanged against a remote backend.
"""

import logging
from typing import List, Optional

from ..models import Chapter, Reference, Verse
from .base import TextProvider

logger = logging.getLogger(__name__)

API_BIBLE_BASE_URL = "https://api.scripture.api.bible/v1"


class ApiBibleProvider(TextProvider):
    """Remote API.Bible backend. Lookups are not implemented yet."""

    name = "api_bible"
    description = "API.Bible remote service (not implemented)"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = API_BIBLE_BASE_URL,
        bible_id: Optional[str] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.bible_id = bible_id
        if not api_key:
            logger.warning("API.Bible provider configured without an API key")

    def describe(self) -> dict:
        info = super().describe()
        info.update({"base_url": self.base_url, "bible_id": self.bible_id})
        return info

    # TODO: /bibles/{bible_id}/verses/{verse_id}
    async def get_verse(self, reference: Reference) -> Verse:
        raise NotImplementedError("API.Bible verse lookup is not implemented")

    # TODO: /bibles/{bible_id}/chapters/{chapter_id}
    async def get_chapter(self, reference: Reference) -> Chapter:
        raise NotImplementedError("API.Bible chapter lookup is not implemented")

    async def get_verse_range(self, start: Reference, end: Reference) -> List[Verse]:
        raise NotImplementedError("API.Bible verse range lookup is not implemented")
