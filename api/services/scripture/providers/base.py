# api/services/scripture/providers/base.py
"""
Text provider contract.

A provider resolves references against one kind of text source. Every
variant implements the three async operations; listing translations is
an optional capability (TranslationListing).

Validation helpers run synchronously, before a provider awaits any I/O,
so malformed references never trigger a load.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Mapping, Optional, Tuple

from ..catalog import BookDescriptor, get_book
from ..errors import InvalidRangeError, InvalidReferenceError
from ..models import Chapter, Reference, Verse


class TextProvider(ABC):
    """
    Base class for scripture text providers.

    Subclasses resolve references into Verse and Chapter objects and
    raise the errors from services.scripture.errors.
    """

    name: str = ""
    description: str = ""

    @abstractmethod
    async def get_verse(self, reference: Reference) -> Verse:
        """
        Resolve a single verse.

        Raises:
            InvalidReferenceError: Bad book/chapter/verse or translation
            NotFoundError: No text at that location
            DataUnavailableError: Backing data could not be loaded
        """
        pass

    @abstractmethod
    async def get_chapter(self, reference: Reference) -> Chapter:
        """
        Resolve every verse of a chapter, in ascending order.

        The reference's verse, if any, is ignored.
        """
        pass

    @abstractmethod
    async def get_verse_range(self, start: Reference, end: Reference) -> List[Verse]:
        """
        Resolve the verses from start to end inclusive, within one book.

        Missing verses are skipped, so the result may be shorter than the
        nominal span.

        Raises:
            InvalidRangeError: Endpoints in different books or translations
        """
        pass

    def describe(self) -> dict:
        """Return provider information for API responses."""
        return {
            "name": self.name,
            "description": self.description,
        }


class TranslationListing(ABC):
    """Optional capability: enumerate the translations a provider serves."""

    @abstractmethod
    def list_translations(self) -> List[str]:
        """Translation codes, in configuration order."""
        pass


# =============================================================================
# Validation
# =============================================================================

def validate_reference(reference: Reference, require_verse: bool = False) -> BookDescriptor:
    """
    Check a reference against the book catalog.

    Args:
        reference: Reference to check
        require_verse: Also require a verse number

    Returns:
        The BookDescriptor for the reference's book

    Raises:
        InvalidReferenceError: Unknown book, chapter out of range, or
            bad verse number
    """
    book = get_book(reference.book)
    if book is None:
        raise InvalidReferenceError(f"Unknown book: {reference.book}")

    chapter = reference.chapter
    if isinstance(chapter, bool) or not isinstance(chapter, int) or not book.has_chapter(chapter):
        raise InvalidReferenceError(
            f"Invalid chapter for {book.name}: {chapter} "
            f"(expected 1-{book.chapter_count})"
        )

    verse = reference.verse
    if verse is None:
        if require_verse:
            raise InvalidReferenceError(f"Verse number required: {reference.label}")
    elif isinstance(verse, bool) or not isinstance(verse, int) or verse < 1:
        raise InvalidReferenceError(f"Invalid verse number: {verse}")

    return book


def validate_range(start: Reference, end: Reference, same_translation: bool = True) -> None:
    """
    Check both endpoints, then the range as a whole.

    Args:
        same_translation: Require start and end to name the same
            translation (for providers that serve several)

    Raises:
        InvalidReferenceError: Either endpoint is invalid
        InvalidRangeError: Endpoints in different books or translations
    """
    validate_reference(start)
    validate_reference(end)

    if start.book != end.book:
        raise InvalidRangeError(
            f"Verse range must be within one book: {start.book} / {end.book}"
        )
    if same_translation and start.translation != end.translation:
        raise InvalidRangeError(
            f"Verse range must use one translation: {start.translation} / {end.translation}"
        )


# =============================================================================
# Range resolution
# =============================================================================

def collect_range(
    start: Reference,
    end: Reference,
    chapter_texts: Callable[[int], Optional[Mapping[int, str]]],
) -> Iterator[Tuple[int, int, str]]:
    """
    Walk a validated range chapter by chapter.

    The first chapter begins at start.verse (default 1). The last chapter
    ends at end.verse (default: highest verse present). Chapters in between
    contribute every verse. Locations without text are skipped.

    Args:
        chapter_texts: Returns verse number -> text for a chapter, or
            None if the chapter is absent

    Yields:
        (chapter, verse, text) in ascending order
    """
    for chapter in range(start.chapter, end.chapter + 1):
        texts = chapter_texts(chapter)
        if not texts:
            continue

        first = (start.verse or 1) if chapter == start.chapter else 1
        if chapter == end.chapter and end.verse is not None:
            last = end.verse
        else:
            last = max(texts)

        for number in range(first, last + 1):
            text = texts.get(number)
            if text:
                yield chapter, number, text
