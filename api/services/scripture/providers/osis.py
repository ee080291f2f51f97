# api/services/scripture/providers/osis.py
"""
Provider backed by one OSIS document per translation.

Documents are fetched and parsed lazily, once per translation.
Concurrent first requests for a translation share a single load;
different translations load independently.
"""

import asyncio
import logging
from typing import List

from ..errors import InvalidReferenceError, NotFoundError
from ..loader import KeyedLoader
from ..models import Chapter, Reference, Verse
from ..osis import OsisBook, OsisChapter, OsisDocument, chapter_id, osis_book_id, parse_osis, verse_id
from ..sources import DocumentSource
from .base import (
    TextProvider,
    TranslationListing,
    collect_range,
    validate_range,
    validate_reference,
)

logger = logging.getLogger(__name__)


class OsisProvider(TextProvider, TranslationListing):
    """
    Resolve references by walking book -> chapter -> verse nodes.

    Every reference must name a translation the source serves.

    Usage:
        source = LocationDocumentSource({"KJV": "osis/kjv.xml"}, base_dir=DATA_DIR)
        provider = OsisProvider(source)
        chapter = await provider.get_chapter(Reference("Psalms", 1, translation="KJV"))
    """

    name = "osis"
    description = "OSIS documents, one per translation"

    def __init__(self, source: DocumentSource):
        self.source = source
        self._documents = KeyedLoader(self._load_document, name="osis documents")

    def list_translations(self) -> List[str]:
        return list(self.source.translations())

    async def _load_document(self, translation: str) -> OsisDocument:
        content = await self.source.fetch(translation)
        document = await asyncio.to_thread(parse_osis, content, translation)
        logger.info(f"Loaded {translation} document ({len(document.books)} books)")
        return document

    def _check_translation(self, reference: Reference) -> str:
        translation = reference.translation
        if not translation:
            raise InvalidReferenceError(f"Translation required: {reference.label}")
        if translation not in self.source.translations():
            raise InvalidReferenceError(f"Unsupported translation: {translation}")
        return translation

    def _find_book(self, document: OsisDocument, book: str) -> OsisBook:
        node = document.get_book(osis_book_id(book))
        if node is None:
            raise NotFoundError(f"{book} not found in {document.translation}")
        return node

    def _find_chapter(self, document: OsisDocument, reference: Reference) -> OsisChapter:
        book_node = self._find_book(document, reference.book)
        node = book_node.get_chapter(chapter_id(book_node.osis_id, reference.chapter))
        if node is None:
            raise NotFoundError(
                f"Chapter not found: {reference.book} {reference.chapter} "
                f"({document.translation})"
            )
        return node

    async def get_verse(self, reference: Reference) -> Verse:
        validate_reference(reference, require_verse=True)
        translation = self._check_translation(reference)

        document = await self._documents.get(translation)
        chapter = self._find_chapter(document, reference)
        node = chapter.get_verse(
            verse_id(osis_book_id(reference.book), reference.chapter, reference.verse)
        )
        if node is None or not node.text:
            raise NotFoundError(f"Verse not found: {reference.label} ({translation})")

        logger.debug(f"{translation} {reference.label}")
        return Verse(reference=reference, text=node.text)

    async def get_chapter(self, reference: Reference) -> Chapter:
        validate_reference(reference)
        translation = self._check_translation(reference)

        document = await self._documents.get(translation)
        chapter = self._find_chapter(document, reference)
        verses = [
            Verse(
                reference=Reference(reference.book, reference.chapter, node.number, translation),
                text=node.text,
            )
            for node in chapter.ordered_verses()
            if node.text
        ]
        logger.debug(f"{translation} {reference.book} {reference.chapter} ({len(verses)} verses)")
        return Chapter(reference=reference.chapter_reference(), verses=verses)

    async def get_verse_range(self, start: Reference, end: Reference) -> List[Verse]:
        validate_range(start, end)
        translation = self._check_translation(start)

        document = await self._documents.get(translation)
        book_node = document.get_book(osis_book_id(start.book))
        if book_node is None:
            return []

        def chapter_texts(number: int):
            node = book_node.get_chapter(chapter_id(book_node.osis_id, number))
            return node.texts() if node else None

        verses = [
            Verse(reference=Reference(start.book, chapter, number, translation), text=text)
            for chapter, number, text in collect_range(start, end, chapter_texts)
        ]
        logger.debug(f"{translation} {start.label} - {end.label} ({len(verses)} verses)")
        return verses
