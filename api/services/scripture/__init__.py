# api/services/scripture/__init__.py
"""
Scripture reader services.

This package provides:
- BibleService: Facade over the active text provider
- Reference, Verse, Chapter: Location and text data classes
- BIBLE_BOOKS: Canonical 66-book catalog
- BookModuleProvider, OsisProvider, ApiBibleProvider: Provider variants
- ReaderState: Current reference and selected translations
- parse_reference / parse_passage: Human-readable reference parsing
"""

from .errors import (
    ScriptureError,
    InvalidReferenceError,
    InvalidRangeError,
    NotFoundError,
    DataUnavailableError,
)
from .models import Reference, Verse, Chapter
from .catalog import (
    BIBLE_BOOKS,
    BookDescriptor,
    Testament,
    get_book,
    books_for_testament,
    is_valid_reference,
)
from .reference_parser import (
    ReferenceParseError,
    normalize_book_name,
    parse_reference,
    parse_passage,
    require_reference,
)
from .providers import (
    TextProvider,
    TranslationListing,
    BookModuleProvider,
    OsisProvider,
    ApiBibleProvider,
    create_provider,
)
from .bible_service import BibleService
from .reader_state import ReaderState

__all__ = [
    # Service
    "BibleService",
    "ReaderState",
    # Models
    "Reference",
    "Verse",
    "Chapter",
    # Catalog
    "BIBLE_BOOKS",
    "BookDescriptor",
    "Testament",
    "get_book",
    "books_for_testament",
    "is_valid_reference",
    # Errors
    "ScriptureError",
    "InvalidReferenceError",
    "InvalidRangeError",
    "NotFoundError",
    "DataUnavailableError",
    # Parsing
    "ReferenceParseError",
    "normalize_book_name",
    "parse_reference",
    "parse_passage",
    "require_reference",
    # Providers
    "TextProvider",
    "TranslationListing",
    "BookModuleProvider",
    "OsisProvider",
    "ApiBibleProvider",
    "create_provider",
]
