# api/services/scripture/reference_parser.py
"""
Scripture reference parser.

Turns human-readable strings into Reference objects:
- Full names: "Genesis 1:1"
- Abbreviations: "Gen 1:1", "Gen. 1:1"
- Numbered books: "1 John 3:16", "1John 3:16", "I John 3:16"
- Chapter only: "Psalm 23"
- Passages: "John 3:16-18", "John 3:16-4:2"
"""

import re
from typing import Dict, Optional, Tuple

from .catalog import BIBLE_BOOKS
from .models import Reference


# Abbreviations per canonical book name (lowercase, no periods).
# The canonical name itself is always accepted.
BOOK_ABBREVIATIONS = {
    "Genesis": ("gen", "gn", "ge"),
    "Exodus": ("exod", "ex", "exo"),
    "Leviticus": ("lev", "lv", "le"),
    "Numbers": ("num", "nm", "nu"),
    "Deuteronomy": ("deut", "dt", "deu"),
    "Joshua": ("josh", "jos"),
    "Judges": ("judg", "jdg", "jg"),
    "Ruth": ("ru", "rth"),
    "1 Samuel": ("1 sam", "1sa"),
    "2 Samuel": ("2 sam", "2sa"),
    "1 Kings": ("1 kgs", "1ki"),
    "2 Kings": ("2 kgs", "2ki"),
    "1 Chronicles": ("1 chr", "1 chron", "1ch"),
    "2 Chronicles": ("2 chr", "2 chron", "2ch"),
    "Ezra": ("ezr",),
    "Nehemiah": ("neh", "ne"),
    "Esther": ("esth", "est", "es"),
    "Job": ("jb",),
    "Psalms": ("psalm", "ps", "psa", "pss"),
    "Proverbs": ("prov", "pr", "prv"),
    "Ecclesiastes": ("eccl", "ecc", "ec", "qoh"),
    "Song of Solomon": ("song", "song of songs", "sos", "canticles", "cant"),
    "Isaiah": ("isa", "is"),
    "Jeremiah": ("jer", "je"),
    "Lamentations": ("lam", "la"),
    "Ezekiel": ("ezek", "eze", "ez"),
    "Daniel": ("dan", "dn", "da"),
    "Hosea": ("hos", "ho"),
    "Joel": ("jl", "joe"),
    "Amos": ("am",),
    "Obadiah": ("obad", "ob"),
    "Jonah": ("jon", "jnh"),
    "Micah": ("mic", "mi"),
    "Nahum": ("nah", "na"),
    "Habakkuk": ("hab", "hb"),
    "Zephaniah": ("zeph", "zep"),
    "Haggai": ("hag", "hg"),
    "Zechariah": ("zech", "zec", "zc"),
    "Malachi": ("mal", "ml"),
    "Matthew": ("matt", "mt", "mat"),
    "Mark": ("mk", "mr"),
    "Luke": ("lk", "lu"),
    "John": ("jn", "joh"),
    "Acts": ("ac", "act"),
    "Romans": ("rom", "ro", "rm"),
    "1 Corinthians": ("1 cor", "1co"),
    "2 Corinthians": ("2 cor", "2co"),
    "Galatians": ("gal", "ga"),
    "Ephesians": ("eph", "ep"),
    "Philippians": ("phil", "php", "pp"),
    "Colossians": ("col",),
    "1 Thessalonians": ("1 thess", "1th"),
    "2 Thessalonians": ("2 thess", "2th"),
    "1 Timothy": ("1 tim", "1ti"),
    "2 Timothy": ("2 tim", "2ti"),
    "Titus": ("tit", "ti"),
    "Philemon": ("philem", "phlm", "phm", "pm"),
    "Hebrews": ("heb", "he"),
    "James": ("jas", "jm", "ja"),
    "1 Peter": ("1 pet", "1pe", "1pt"),
    "2 Peter": ("2 pet", "2pe", "2pt"),
    "1 John": ("1 jn", "1jo"),
    "2 John": ("2 jn", "2jo"),
    "3 John": ("3 jn", "3jo"),
    "Jude": ("jd", "jud"),
    "Revelation": ("rev", "re", "rv", "apoc", "apocalypse"),
}


def _build_book_names() -> Dict[str, str]:
    """Lowercase alias -> canonical name, including space-less variants."""
    names = {}
    for book in BIBLE_BOOKS:
        aliases = (book.name.lower(),) + BOOK_ABBREVIATIONS.get(book.name, ())
        for alias in aliases:
            names[alias] = book.name
            names[alias.replace(" ", "")] = book.name
    return names


BOOK_NAMES = _build_book_names()

_ROMAN_PREFIXES = {"iii": "3", "ii": "2", "i": "1"}

_REFERENCE_PATTERN = re.compile(
    r'^(?P<book>(?:[123]|i{1,3})?\s*[a-z][a-z\s]*?)\.?\s+'
    r'(?P<chapter>\d+)'
    r'(?::(?P<verse>\d+))?'
    r'(?:\s*[-–—]\s*(?:(?P<end_chapter>\d+):)?(?P<end_verse>\d+))?$',
    re.IGNORECASE,
)


class ReferenceParseError(ValueError):
    """Raised when a reference string cannot be parsed."""
    pass


def normalize_book_name(name: str) -> str:
    """
    Normalize a book name to its canonical form.

    Args:
        name: Book name or abbreviation in any case ("gen", "1 Cor.", "I John")

    Returns:
        Canonical book name, or the title-cased input if unknown
    """
    key = name.lower().replace(".", "").strip()
    key = re.sub(r'\s+', ' ', key)

    # Roman numeral prefixes: "ii kings" -> "2 kings"
    match = re.match(r'^(iii|ii|i)\s+(.+)$', key)
    if match:
        key = f"{_ROMAN_PREFIXES[match.group(1)]} {match.group(2)}"

    if key in BOOK_NAMES:
        return BOOK_NAMES[key]

    key_no_space = key.replace(" ", "")
    if key_no_space in BOOK_NAMES:
        return BOOK_NAMES[key_no_space]

    return name.strip().title()


def _match(text: str):
    if not text:
        return None
    text = re.sub(r'\s+', ' ', text.strip())
    return _REFERENCE_PATTERN.match(text)


def parse_reference(text: str, translation: Optional[str] = None) -> Optional[Reference]:
    """
    Parse a single reference ("John 3:16", "Psalm 23").

    A trailing range is rejected; use parse_passage for those.

    Returns:
        Reference or None if the string is not a reference
    """
    match = _match(text)
    if not match or match.group("end_verse"):
        return None

    verse = match.group("verse")
    return Reference(
        book=normalize_book_name(match.group("book")),
        chapter=int(match.group("chapter")),
        verse=int(verse) if verse else None,
        translation=translation,
    )


def parse_passage(
    text: str,
    translation: Optional[str] = None,
) -> Optional[Tuple[Reference, Reference]]:
    """
    Parse a passage into (start, end) references.

    "John 3:16" gives (John 3:16, John 3:16); "John 3:16-18" ends at
    3:18; "John 3:16-4:2" ends at 4:2; "Psalm 23" covers the chapter.

    Returns:
        Tuple of (start, end) or None if the string is not a reference
    """
    match = _match(text)
    if not match:
        return None

    book = normalize_book_name(match.group("book"))
    chapter = int(match.group("chapter"))
    verse = int(match.group("verse")) if match.group("verse") else None
    start = Reference(book, chapter, verse, translation)

    end_verse = match.group("end_verse")
    if not end_verse:
        return start, start

    end_chapter = match.group("end_chapter")
    if verse is None and not end_chapter:
        # "Psalm 23-24" is a chapter range
        return start, Reference(book, int(end_verse), None, translation)

    # "John 3-4:2" runs from the start of chapter 3
    return start, Reference(
        book,
        int(end_chapter) if end_chapter else chapter,
        int(end_verse),
        translation,
    )


def require_reference(text: str, translation: Optional[str] = None) -> Reference:
    """Like parse_reference, but raises ReferenceParseError on failure."""
    reference = parse_reference(text, translation)
    if reference is None:
        raise ReferenceParseError(f"Could not parse reference: {text}")
    return reference
