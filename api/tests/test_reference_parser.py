"""
Tests for reference_parser.py - book name normalization and passage parsing.
"""

import os
import sys

# Add api directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.scripture.catalog import BIBLE_BOOKS
from services.scripture.models import Reference
from services.scripture.reference_parser import (
    ReferenceParseError,
    normalize_book_name,
    parse_passage,
    parse_reference,
    require_reference,
)


def test_normalize_book_name():
    print("\n=== Testing normalize_book_name ===")

    cases = {
        "Gen": "Genesis",
        "gen.": "Genesis",
        "Ps": "Psalms",
        "Psalm": "Psalms",
        "1 Cor.": "1 Corinthians",
        "1cor": "1 Corinthians",
        "I John": "1 John",
        "III John": "3 John",
        "ii kings": "2 Kings",
        "Song of Songs": "Song of Solomon",
        "Rev": "Revelation",
        "Isaiah": "Isaiah",
    }
    for raw, expected in cases.items():
        assert normalize_book_name(raw) == expected, f"{raw!r} -> {normalize_book_name(raw)!r}"
    print("✓ Abbreviations, numbered books and Roman numerals")

    for book in BIBLE_BOOKS:
        assert normalize_book_name(book.name) == book.name
        assert normalize_book_name(book.name.upper()) == book.name
    print("✓ Every canonical name normalizes to itself")

    assert normalize_book_name("hezekiah") == "Hezekiah"
    print("✓ Unknown names are title-cased and passed through")


def test_parse_reference():
    print("\n=== Testing parse_reference ===")

    assert parse_reference("John 3:16") == Reference("John", 3, 16)
    assert parse_reference("Gen 1:1", "KJV") == Reference("Genesis", 1, 1, "KJV")
    assert parse_reference("1 John 4:8") == Reference("1 John", 4, 8)
    assert parse_reference("1John 4:8") == Reference("1 John", 4, 8)
    assert parse_reference("  Song of Solomon   2:1 ") == Reference("Song of Solomon", 2, 1)
    print("✓ Verse references")

    assert parse_reference("Psalm 23") == Reference("Psalms", 23)
    assert parse_reference("psalm 23").verse is None
    print("✓ Chapter-only references")

    assert parse_reference("") is None
    assert parse_reference("hello world") is None
    assert parse_reference("John 3:16-18") is None
    print("✓ Non-references and ranges return None")

    try:
        require_reference("not a reference")
        assert False, "Should have raised ReferenceParseError"
    except ReferenceParseError as e:
        assert "not a reference" in str(e)
    print("✓ require_reference raises on failure")


def test_parse_passage():
    print("\n=== Testing parse_passage ===")

    start, end = parse_passage("John 3:16-18", "KJV")
    assert start == Reference("John", 3, 16, "KJV")
    assert end == Reference("John", 3, 18, "KJV")
    print("✓ Same-chapter verse range")

    start, end = parse_passage("Gen 1:31-2:3")
    assert start == Reference("Genesis", 1, 31)
    assert end == Reference("Genesis", 2, 3)
    print("✓ Cross-chapter range")

    start, end = parse_passage("John 3:16")
    assert start == end == Reference("John", 3, 16)
    print("✓ Single verse gives (r, r)")

    start, end = parse_passage("Psalm 23-24")
    assert start == Reference("Psalms", 23)
    assert end == Reference("Psalms", 24)
    print("✓ Chapter range")

    start, end = parse_passage("John 3-4:2", "KJV")
    assert start == Reference("John", 3, None, "KJV")
    assert end == Reference("John", 4, 2, "KJV")
    print("✓ Whole chapter to a later verse")

    assert parse_passage("nothing here") is None
    print("✓ Non-passage returns None")


def main():
    test_normalize_book_name()
    test_parse_reference()
    test_parse_passage()
    print("\nAll reference parser tests passed!")


if __name__ == "__main__":
    main()
