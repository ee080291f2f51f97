# api/services/scripture/providers/factory.py
"""
Build the configured text provider.

The hosting application calls create_provider() once during startup and
hands the instance to BibleService.
"""

import logging
import os
from typing import Optional

from core import config

from ..config_loader import get_translation_locations
from ..sources import JsonBookSource, LocationDocumentSource
from .api_bible import ApiBibleProvider
from .base import TextProvider
from .book_module import BookModuleProvider
from .osis import OsisProvider

logger = logging.getLogger(__name__)

PROVIDER_KINDS = ("osis", "book_module", "api_bible")


def create_provider(kind: Optional[str] = None) -> TextProvider:
    """
    Create a provider from core.config settings.

    Args:
        kind: "osis", "book_module" or "api_bible". Defaults to
              SCRIPTURE_PROVIDER.

    Raises:
        ValueError: If kind is not a known provider
    """
    kind = (kind or config.SCRIPTURE_PROVIDER).lower()

    if kind == "osis":
        source = LocationDocumentSource(
            get_translation_locations(),
            base_dir=config.SCRIPTURE_DATA_DIR,
            timeout=config.SCRIPTURE_HTTP_TIMEOUT,
        )
        provider = OsisProvider(source)
    elif kind == "book_module":
        translation = config.BOOK_MODULE_TRANSLATION
        directory = os.path.join(config.SCRIPTURE_DATA_DIR, translation.lower())
        provider = BookModuleProvider(JsonBookSource(directory), translation=translation)
    elif kind == "api_bible":
        provider = ApiBibleProvider(
            api_key=config.API_BIBLE_KEY,
            base_url=config.API_BIBLE_BASE_URL,
            bible_id=config.API_BIBLE_ID,
        )
    else:
        raise ValueError(
            f"Unknown scripture provider: {kind} (expected one of {', '.join(PROVIDER_KINDS)})"
        )

    logger.info(f"Using scripture provider: {provider.name}")
    return provider
