# api/services/scripture/reader_state.py
"""
Reader UI state.

Holds the reference being viewed and the translations rendered side by
side. Every mutation replaces a whole value; there is no per-field
update of the reference.
"""

import logging
import threading
from typing import Iterable, List, Optional, Tuple

from .models import Reference

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE = Reference(book="Genesis", chapter=1, verse=1)
DEFAULT_TRANSLATIONS = ("KJV",)


def _dedupe(translations: Iterable[str]) -> List[str]:
    seen = []
    for code in translations:
        if code and code not in seen:
            seen.append(code)
    return seen


class ReaderState:
    """
    In-memory reader state shared by the HTTP handlers.

    Flask serves requests on several threads, so mutations take a lock.
    """

    def __init__(
        self,
        reference: Optional[Reference] = None,
        translations: Optional[Iterable[str]] = None,
    ):
        self._lock = threading.Lock()
        self._reference = reference or DEFAULT_REFERENCE
        self._translations = _dedupe(
            DEFAULT_TRANSLATIONS if translations is None else translations
        )

    @property
    def current_reference(self) -> Reference:
        with self._lock:
            return self._reference

    @property
    def translations(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._translations)

    def current(self) -> Tuple[Reference, Tuple[str, ...]]:
        """The reference and translations, read together."""
        with self._lock:
            return self._reference, tuple(self._translations)

    def set_reference(self, reference: Reference) -> Reference:
        with self._lock:
            self._reference = reference
        logger.debug(f"Reader reference -> {reference.label}")
        return reference

    def set_translations(self, translations: Iterable[str]) -> Tuple[str, ...]:
        """Replace the translation list (duplicates dropped, order kept)."""
        with self._lock:
            self._translations = _dedupe(translations)
            return tuple(self._translations)

    def add_translation(self, translation: str) -> Tuple[str, ...]:
        with self._lock:
            if translation not in self._translations:
                self._translations.append(translation)
            return tuple(self._translations)

    def remove_translation(self, translation: str) -> Tuple[str, ...]:
        with self._lock:
            if translation in self._translations:
                self._translations.remove(translation)
            return tuple(self._translations)

    def snapshot(self) -> dict:
        with self._lock:
            return {
                "reference": self._reference.to_dict(),
                "translations": list(self._translations),
            }
