# api/services/scripture/providers/__init__.py
"""
Scripture text providers.

- BookModuleProvider: bundled per-book data, one translation
- OsisProvider: one OSIS document per translation
- ApiBibleProvider: remote API.Bible backend (not implemented)
"""

from .base import (
    TextProvider,
    TranslationListing,
    collect_range,
    validate_range,
    validate_reference,
)
from .book_module import BookModuleProvider
from .osis import OsisProvider
from .api_bible import ApiBibleProvider
from .factory import create_provider, PROVIDER_KINDS

__all__ = [
    "TextProvider",
    "TranslationListing",
    "collect_range",
    "validate_range",
    "validate_reference",
    "BookModuleProvider",
    "OsisProvider",
    "ApiBibleProvider",
    "create_provider",
    "PROVIDER_KINDS",
]
