# api/services/scripture/models.py
"""
Data classes for scripture locations and text.

A Reference identifies a location at book, chapter or verse granularity.
Verse and Chapter carry the resolved text. All instances are created per
request and owned by the caller.
"""

from dataclasses import dataclass, field, replace
from typing import List, Optional

from .errors import InvalidReferenceError


def _as_int(value, field_name: str) -> int:
    """Coerce an int-like value (e.g. "3") to int."""
    if isinstance(value, bool):
        raise InvalidReferenceError(f"{field_name} must be a number, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidReferenceError(f"{field_name} must be a whole number, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise InvalidReferenceError(f"{field_name} must be a number, got {value!r}")


@dataclass(frozen=True)
class Reference:
    """
    A scripture location.

    Attributes:
        book: Canonical book name (e.g., "Genesis", "1 John")
        chapter: Chapter number (1-based)
        verse: Verse number, or None for a whole chapter
        translation: Translation code (e.g., "KJV"), or None
    """
    book: str
    chapter: int
    verse: Optional[int] = None
    translation: Optional[str] = None

    @property
    def label(self) -> str:
        """Return a human-readable label (e.g., 'John 3:16' or 'Psalms 1')."""
        if self.verse is None:
            return f"{self.book} {self.chapter}"
        return f"{self.book} {self.chapter}:{self.verse}"

    def with_translation(self, translation: Optional[str]) -> "Reference":
        return replace(self, translation=translation)

    def chapter_reference(self) -> "Reference":
        """Return the same location at chapter granularity."""
        return replace(self, verse=None)

    def to_dict(self) -> dict:
        return {
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
            "translation": self.translation,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Reference":
        """
        Build a Reference from a JSON-style dict.

        Chapter and verse may be given as numbers or numeric strings.

        Raises:
            InvalidReferenceError: If book or chapter is missing or a
                number field is not numeric
        """
        if not data or not data.get("book"):
            raise InvalidReferenceError("book is required")
        if data.get("chapter") in (None, ""):
            raise InvalidReferenceError("chapter is required")

        verse = data.get("verse")
        return cls(
            book=str(data["book"]),
            chapter=_as_int(data["chapter"], "chapter"),
            verse=_as_int(verse, "verse") if verse not in (None, "") else None,
            translation=data.get("translation") or None,
        )


@dataclass(frozen=True)
class Verse:
    """A single verse. The reference always has its verse set."""
    reference: Reference
    text: str

    def to_dict(self) -> dict:
        return {
            "reference": self.reference.to_dict(),
            "text": self.text,
        }


@dataclass(frozen=True)
class Chapter:
    """A chapter's verses in ascending verse order. The reference has no verse."""
    reference: Reference
    verses: List[Verse] = field(default_factory=list)

    @property
    def verse_numbers(self) -> List[int]:
        return [v.reference.verse for v in self.verses]

    def to_dict(self) -> dict:
        return {
            "reference": self.reference.to_dict(),
            "verses": [v.to_dict() for v in self.verses],
        }
