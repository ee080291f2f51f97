# api/services/scripture/config_loader.py
"""
Translation configuration loader.

Reads config/translations.yml (or SCRIPTURE_TRANSLATIONS_FILE) and
exposes the configured translations in file order.
"""

import logging
import os
from functools import lru_cache
from typing import Any, Dict, List, Optional

import yaml

from core.config import SCRIPTURE_TRANSLATIONS_FILE

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def load_translation_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load translation config from YAML, or defaults if the file is missing."""
    path = path or SCRIPTURE_TRANSLATIONS_FILE
    if not os.path.exists(path):
        logger.warning(f"Translation config {path} not found, using defaults")
        return get_default_config()

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or get_default_config()


def get_default_config() -> Dict[str, Any]:
    """Return the bundled KJV sample if no config file exists."""
    return {
        'version': '1.0',
        'translations': [
            {
                'code': 'KJV',
                'name': 'King James Version',
                'language': 'en',
                'source': 'osis/kjv.xml',
            },
        ],
    }


def reload_translation_config(path: Optional[str] = None):
    """Clear cache and reload config."""
    load_translation_config.cache_clear()
    return load_translation_config(path)


def get_translations(path: Optional[str] = None) -> List[Dict[str, Any]]:
    """Configured translations with a code and a source, in file order."""
    config = load_translation_config(path)
    translations = []
    for entry in config.get('translations', []):
        if not entry.get('code') or not entry.get('source'):
            logger.warning(f"Ignoring incomplete translation entry: {entry}")
            continue
        translations.append(entry)
    return translations


def get_translation_locations(path: Optional[str] = None) -> Dict[str, str]:
    """Translation code -> document location, in file order."""
    return {t['code']: t['source'] for t in get_translations(path)}
