# api/services/scripture/providers/book_module.py
"""
Provider backed by per-book data modules.

Each book is loaded on first use and cached. Only the bundled
translation is served; a reference's translation is ignored and every
result is stamped with the bundled one.
"""

import logging
from typing import List

from ..errors import NotFoundError
from ..loader import KeyedLoader
from ..models import Chapter, Reference, Verse
from ..sources import BookData, BookSource
from .base import TextProvider, collect_range, validate_range, validate_reference

logger = logging.getLogger(__name__)


class BookModuleProvider(TextProvider):
    """
    Resolve references by direct chapter/verse lookup in per-book data.

    Usage:
        provider = BookModuleProvider(JsonBookSource("data/kjv"), translation="KJV")
        verse = await provider.get_verse(Reference("John", 3, 16))
    """

    name = "book_module"
    description = "Bundled per-book text"

    def __init__(self, source: BookSource, translation: str = "KJV"):
        self.source = source
        self.translation = translation
        self._books = KeyedLoader(self.source.load_book, name=f"{translation} books")

    async def _load_book(self, book: str) -> BookData:
        return await self._books.get(book)

    def _stamp(self, reference: Reference) -> Reference:
        return reference.with_translation(self.translation)

    async def get_verse(self, reference: Reference) -> Verse:
        validate_reference(reference, require_verse=True)

        book_data = await self._load_book(reference.book)
        text = book_data.get(reference.chapter, {}).get(reference.verse)
        if not text:
            raise NotFoundError(f"Verse not found: {reference.label}")

        logger.debug(f"{self.translation} {reference.label}")
        return Verse(reference=self._stamp(reference), text=text)

    async def get_chapter(self, reference: Reference) -> Chapter:
        validate_reference(reference)

        book_data = await self._load_book(reference.book)
        chapter_data = book_data.get(reference.chapter)
        if not chapter_data:
            raise NotFoundError(f"Chapter not found: {reference.book} {reference.chapter}")

        chapter_ref = self._stamp(reference.chapter_reference())
        verses = [
            Verse(reference=Reference(reference.book, reference.chapter, number, self.translation), text=text)
            for number, text in chapter_data.items()
        ]
        logger.debug(f"{self.translation} {reference.book} {reference.chapter} ({len(verses)} verses)")
        return Chapter(reference=chapter_ref, verses=verses)

    async def get_verse_range(self, start: Reference, end: Reference) -> List[Verse]:
        validate_range(start, end, same_translation=False)

        book_data = await self._load_book(start.book)
        verses = [
            Verse(reference=Reference(start.book, chapter, number, self.translation), text=text)
            for chapter, number, text in collect_range(start, end, book_data.get)
        ]
        logger.debug(f"{self.translation} {start.label} - {end.label} ({len(verses)} verses)")
        return verses
