# api/services/scripture/osis.py
"""
Typed model for OSIS-style translation documents.

A document is a tree of book -> chapter -> verse nodes. Every node
carries a composite identifier:

    <div type="book" osisID="Gen">
      <chapter osisID="Gen.1">
        <verse osisID="Gen.1.1">In the beginning ...</verse>

The parser builds the model once; lookups by identifier are dict hits.
"""

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .errors import DataUnavailableError

logger = logging.getLogger(__name__)


# Canonical book name to OSIS abbreviation
BOOK_TO_OSIS = {
    "Genesis": "Gen",
    "Exodus": "Exod",
    "Leviticus": "Lev",
    "Numbers": "Num",
    "Deuteronomy": "Deut",
    "Joshua": "Josh",
    "Judges": "Judg",
    "Ruth": "Ruth",
    "1 Samuel": "1Sam",
    "2 Samuel": "2Sam",
    "1 Kings": "1Kgs",
    "2 Kings": "2Kgs",
    "1 Chronicles": "1Chr",
    "2 Chronicles": "2Chr",
    "Ezra": "Ezra",
    "Nehemiah": "Neh",
    "Esther": "Esth",
    "Job": "Job",
    "Psalms": "Ps",
    "Proverbs": "Prov",
    "Ecclesiastes": "Eccl",
    "Song of Solomon": "Song",
    "Isaiah": "Isa",
    "Jeremiah": "Jer",
    "Lamentations": "Lam",
    "Ezekiel": "Ezek",
    "Daniel": "Dan",
    "Hosea": "Hos",
    "Joel": "Joel",
    "Amos": "Amos",
    "Obadiah": "Obad",
    "Jonah": "Jonah",
    "Micah": "Mic",
    "Nahum": "Nah",
    "Habakkuk": "Hab",
    "Zephaniah": "Zeph",
    "Haggai": "Hag",
    "Zechariah": "Zech",
    "Malachi": "Mal",
    "Matthew": "Matt",
    "Mark": "Mark",
    "Luke": "Luke",
    "John": "John",
    "Acts": "Acts",
    "Romans": "Rom",
    "1 Corinthians": "1Cor",
    "2 Corinthians": "2Cor",
    "Galatians": "Gal",
    "Ephesians": "Eph",
    "Philippians": "Phil",
    "Colossians": "Col",
    "1 Thessalonians": "1Thess",
    "2 Thessalonians": "2Thess",
    "1 Timothy": "1Tim",
    "2 Timothy": "2Tim",
    "Titus": "Titus",
    "Philemon": "Phlm",
    "Hebrews": "Heb",
    "James": "Jas",
    "1 Peter": "1Pet",
    "2 Peter": "2Pet",
    "1 John": "1John",
    "2 John": "2John",
    "3 John": "3John",
    "Jude": "Jude",
    "Revelation": "Rev",
}


def osis_book_id(book: str) -> str:
    """
    OSIS abbreviation for a canonical book name.

    Unmapped names are returned unchanged; such a lookup will not match
    any book node in a well-formed document.
    """
    abbreviation = BOOK_TO_OSIS.get(book)
    if abbreviation is None:
        logger.warning(f"No OSIS abbreviation for book {book!r}, using name as-is")
        return book
    return abbreviation


def chapter_id(book_id: str, chapter: int) -> str:
    return f"{book_id}.{chapter}"


def verse_id(book_id: str, chapter: int, verse: int) -> str:
    return f"{book_id}.{chapter}.{verse}"


# =============================================================================
# Document model
# =============================================================================

@dataclass
class OsisVerse:
    osis_id: str
    number: int
    text: str


@dataclass
class OsisChapter:
    """A chapter node. Verses are keyed by composite id, in ascending order."""
    osis_id: str
    number: int
    verses: Dict[str, OsisVerse] = field(default_factory=dict)

    def get_verse(self, osis_id: str) -> Optional[OsisVerse]:
        return self.verses.get(osis_id)

    def ordered_verses(self) -> List[OsisVerse]:
        return list(self.verses.values())

    def texts(self) -> Dict[int, str]:
        """Verse number -> text."""
        return {v.number: v.text for v in self.verses.values()}


@dataclass
class OsisBook:
    osis_id: str
    chapters: Dict[str, OsisChapter] = field(default_factory=dict)

    def get_chapter(self, osis_id: str) -> Optional[OsisChapter]:
        return self.chapters.get(osis_id)


@dataclass
class OsisDocument:
    translation: str
    books: Dict[str, OsisBook] = field(default_factory=dict)

    def get_book(self, osis_id: str) -> Optional[OsisBook]:
        return self.books.get(osis_id)

    @property
    def verse_count(self) -> int:
        return sum(
            len(chapter.verses)
            for book in self.books.values()
            for chapter in book.chapters.values()
        )


# =============================================================================
# Parsing
# =============================================================================

def _local_name(tag) -> str:
    """Strip any XML namespace: '{http://www.bibletechnologies.net/...}verse' -> 'verse'."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _is_book(elem) -> bool:
    name = _local_name(elem.tag)
    if name == "book":
        return True
    return name == "div" and elem.get("type") == "book"


def _last_number(osis_id: str) -> Optional[int]:
    """Trailing number of a composite id: 'Gen.1.3' -> 3."""
    try:
        return int(osis_id.rsplit(".", 1)[-1])
    except ValueError:
        return None


def _verse_text(elem) -> str:
    return re.sub(r'\s+', ' ', "".join(elem.itertext())).strip()


def _parse_chapter(elem, osis_id: str, number: int) -> OsisChapter:
    verses = []
    for node in elem.iter():
        if _local_name(node.tag) != "verse" or not node.get("osisID"):
            continue
        vid = node.get("osisID")
        verse_number = _last_number(vid)
        if verse_number is None:
            logger.warning(f"Skipping verse with malformed id {vid!r}")
            continue
        verses.append(OsisVerse(osis_id=vid, number=verse_number, text=_verse_text(node)))

    verses.sort(key=lambda v: v.number)
    return OsisChapter(
        osis_id=osis_id,
        number=number,
        verses={v.osis_id: v for v in verses},
    )


def _parse_book(elem, book_id: str) -> OsisBook:
    book = OsisBook(osis_id=book_id)
    chapters = []
    for node in elem.iter():
        if _local_name(node.tag) != "chapter" or not node.get("osisID"):
            continue
        cid = node.get("osisID")
        number = _last_number(cid)
        if number is None:
            logger.warning(f"Skipping chapter with malformed id {cid!r}")
            continue
        chapters.append(_parse_chapter(node, cid, number))

    chapters.sort(key=lambda c: c.number)
    book.chapters = {c.osis_id: c for c in chapters}
    return book


def parse_osis(content: bytes, translation: str) -> OsisDocument:
    """
    Parse an OSIS-style document into the typed model.

    Args:
        content: Raw XML bytes
        translation: Translation code the document belongs to

    Returns:
        OsisDocument with books keyed by OSIS abbreviation

    Raises:
        DataUnavailableError: If the XML cannot be parsed
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise DataUnavailableError(f"Could not parse {translation} document: {e}")

    document = OsisDocument(translation=translation)
    for elem in root.iter():
        if not _is_book(elem):
            continue
        book_id = elem.get("osisID")
        if not book_id:
            logger.warning(f"{translation}: skipping book node without osisID")
            continue
        document.books[book_id] = _parse_book(elem, book_id)

    logger.info(
        f"Parsed {translation}: {len(document.books)} books, "
        f"{document.verse_count} verses"
    )
    return document
