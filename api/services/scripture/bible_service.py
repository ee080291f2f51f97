# api/services/scripture/bible_service.py
"""
Single entry point for scripture lookups.

BibleService wraps the active provider and forwards the three lookup
operations unchanged. It adds translation discovery, which returns an
empty list when the provider cannot enumerate translations.
"""

import logging
from typing import List

from .models import Chapter, Reference, Verse
from .providers.base import TextProvider, TranslationListing

logger = logging.getLogger(__name__)


class BibleService:
    """
    Facade over one TextProvider.

    Usage:
        service = BibleService(create_provider())

        verse = await service.get_verse(Reference("John", 3, 16, "KJV"))
        chapter = await service.get_chapter(Reference("Psalms", 1, translation="KJV"))
        verses = await service.get_verse_range(
            Reference("John", 3, 16, "KJV"),
            Reference("John", 3, 18, "KJV"),
        )
        codes = service.get_available_translations()
    """

    def __init__(self, provider: TextProvider):
        self.provider = provider

    @property
    def provider_name(self) -> str:
        return self.provider.name

    async def get_verse(self, reference: Reference) -> Verse:
        return await self.provider.get_verse(reference)

    async def get_chapter(self, reference: Reference) -> Chapter:
        return await self.provider.get_chapter(reference)

    async def get_verse_range(self, start: Reference, end: Reference) -> List[Verse]:
        return await self.provider.get_verse_range(start, end)

    def get_available_translations(self) -> List[str]:
        """Translation codes served by the provider, or [] if it cannot list them."""
        if not isinstance(self.provider, TranslationListing):
            return []
        return list(self.provider.list_translations())
