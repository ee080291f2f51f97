# api/services/scripture/catalog.py
"""
Canonical book catalog.

The 66 books of the Protestant canon in order, with KJV chapter counts
and testament grouping. The catalog is built once at import and never
mutated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class Testament(str, Enum):
    OLD = "old"
    NEW = "new"


@dataclass(frozen=True)
class BookDescriptor:
    """A canonical book: name, number of chapters and testament."""
    name: str
    chapter_count: int
    testament: Testament

    def has_chapter(self, chapter: int) -> bool:
        return 1 <= chapter <= self.chapter_count

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "chapters": self.chapter_count,
            "testament": self.testament.value,
        }


_OLD = Testament.OLD
_NEW = Testament.NEW

BIBLE_BOOKS: Tuple[BookDescriptor, ...] = (
    # Law
    BookDescriptor("Genesis", 50, _OLD),
    BookDescriptor("Exodus", 40, _OLD),
    BookDescriptor("Leviticus", 27, _OLD),
    BookDescriptor("Numbers", 36, _OLD),
    BookDescriptor("Deuteronomy", 34, _OLD),
    # History
    BookDescriptor("Joshua", 24, _OLD),
    BookDescriptor("Judges", 21, _OLD),
    BookDescriptor("Ruth", 4, _OLD),
    BookDescriptor("1 Samuel", 31, _OLD),
    BookDescriptor("2 Samuel", 24, _OLD),
    BookDescriptor("1 Kings", 22, _OLD),
    BookDescriptor("2 Kings", 25, _OLD),
    BookDescriptor("1 Chronicles", 29, _OLD),
    BookDescriptor("2 Chronicles", 36, _OLD),
    BookDescriptor("Ezra", 10, _OLD),
    BookDescriptor("Nehemiah", 13, _OLD),
    BookDescriptor("Esther", 10, _OLD),
    # Wisdom
    BookDescriptor("Job", 42, _OLD),
    BookDescriptor("Psalms", 150, _OLD),
    BookDescriptor("Proverbs", 31, _OLD),
    BookDescriptor("Ecclesiastes", 12, _OLD),
    BookDescriptor("Song of Solomon", 8, _OLD),
    # Major prophets
    BookDescriptor("Isaiah", 66, _OLD),
    BookDescriptor("Jeremiah", 52, _OLD),
    BookDescriptor("Lamentations", 5, _OLD),
    BookDescriptor("Ezekiel", 48, _OLD),
    BookDescriptor("Daniel", 12, _OLD),
    # Minor prophets
    BookDescriptor("Hosea", 14, _OLD),
    BookDescriptor("Joel", 3, _OLD),
    BookDescriptor("Amos", 9, _OLD),
    BookDescriptor("Obadiah", 1, _OLD),
    BookDescriptor("Jonah", 4, _OLD),
    BookDescriptor("Micah", 7, _OLD),
    BookDescriptor("Nahum", 3, _OLD),
    BookDescriptor("Habakkuk", 3, _OLD),
    BookDescriptor("Zephaniah", 3, _OLD),
    BookDescriptor("Haggai", 2, _OLD),
    BookDescriptor("Zechariah", 14, _OLD),
    BookDescriptor("Malachi", 4, _OLD),
    # Gospels and Acts
    BookDescriptor("Matthew", 28, _NEW),
    BookDescriptor("Mark", 16, _NEW),
    BookDescriptor("Luke", 24, _NEW),
    BookDescriptor("John", 21, _NEW),
    BookDescriptor("Acts", 28, _NEW),
    # Pauline epistles
    BookDescriptor("Romans", 16, _NEW),
    BookDescriptor("1 Corinthians", 16, _NEW),
    BookDescriptor("2 Corinthians", 13, _NEW),
    BookDescriptor("Galatians", 6, _NEW),
    BookDescriptor("Ephesians", 6, _NEW),
    BookDescriptor("Philippians", 4, _NEW),
    BookDescriptor("Colossians", 4, _NEW),
    BookDescriptor("1 Thessalonians", 5, _NEW),
    BookDescriptor("2 Thessalonians", 3, _NEW),
    BookDescriptor("1 Timothy", 6, _NEW),
    BookDescriptor("2 Timothy", 4, _NEW),
    BookDescriptor("Titus", 3, _NEW),
    BookDescriptor("Philemon", 1, _NEW),
    # General epistles and Revelation
    BookDescriptor("Hebrews", 13, _NEW),
    BookDescriptor("James", 5, _NEW),
    BookDescriptor("1 Peter", 5, _NEW),
    BookDescriptor("2 Peter", 3, _NEW),
    BookDescriptor("1 John", 5, _NEW),
    BookDescriptor("2 John", 1, _NEW),
    BookDescriptor("3 John", 1, _NEW),
    BookDescriptor("Jude", 1, _NEW),
    BookDescriptor("Revelation", 22, _NEW),
)

_BOOKS_BY_NAME: Dict[str, BookDescriptor] = {book.name: book for book in BIBLE_BOOKS}
_BOOK_INDEX: Dict[str, int] = {book.name: i for i, book in enumerate(BIBLE_BOOKS)}


def get_book(name: str) -> Optional[BookDescriptor]:
    """Look up a book by its canonical name (exact match)."""
    return _BOOKS_BY_NAME.get(name)


def book_index(name: str) -> int:
    """Canonical position of a book (0 for Genesis). Raises KeyError if unknown."""
    return _BOOK_INDEX[name]


def books_for_testament(testament) -> Tuple[BookDescriptor, ...]:
    """Books of one testament, in canonical order."""
    testament = Testament(testament)
    return tuple(book for book in BIBLE_BOOKS if book.testament is testament)


def is_valid_reference(reference) -> bool:
    """
    Static validity check for a reference.

    The book must exist and the chapter must be within range. A verse,
    if present, must be at least 1; its upper bound is only known once
    chapter data is loaded.
    """
    book = get_book(reference.book)
    if book is None:
        return False
    if not isinstance(reference.chapter, int) or not book.has_chapter(reference.chapter):
        return False
    if reference.verse is not None:
        if not isinstance(reference.verse, int) or reference.verse < 1:
            return False
    return True
