# api/services/scripture/presentation.py
"""
View models for the reader UI: navigation breadcrumb, book sidebar and
side-by-side reader panes.
"""

import asyncio
import logging
from typing import Any, Dict, List

from .bible_service import BibleService
from .catalog import Testament, books_for_testament
from .errors import ScriptureError
from .models import Reference
from .reader_state import ReaderState

logger = logging.getLogger(__name__)

TESTAMENT_TITLES = {
    Testament.OLD: "Old Testament",
    Testament.NEW: "New Testament",
}


def build_navigation(reference: Reference) -> List[str]:
    """Breadcrumb for a reference: ["John", "Chapter 3", "Verse 16"]."""
    crumbs = [reference.book, f"Chapter {reference.chapter}"]
    if reference.verse:
        crumbs.append(f"Verse {reference.verse}")
    return crumbs


def build_sidebar(reference: Reference) -> List[Dict[str, Any]]:
    """Books grouped by testament, with the current book and chapter marked."""
    sections = []
    for testament, title in TESTAMENT_TITLES.items():
        books = []
        for book in books_for_testament(testament):
            active = book.name == reference.book
            books.append({
                "name": book.name,
                "chapters": list(range(1, book.chapter_count + 1)),
                "active": active,
                "active_chapter": reference.chapter if active else None,
            })
        sections.append({"testament": testament.value, "title": title, "books": books})
    return sections


async def _build_pane(service: BibleService, reference: Reference, translation: str) -> Dict[str, Any]:
    pane = {
        "translation": translation,
        "heading": reference.label,
        "chapter": None,
        "error": None,
    }
    try:
        chapter = await service.get_chapter(reference.with_translation(translation))
        pane["chapter"] = chapter.to_dict()
    except (ScriptureError, NotImplementedError) as e:
        logger.info(f"Reader pane {translation} {reference.label}: {e}")
        pane["error"] = str(e) or "Failed to load chapter"
    return pane


async def build_reader(service: BibleService, state: ReaderState) -> Dict[str, Any]:
    """
    Everything the reader page renders for the current state.

    Each selected translation gets its own pane; panes load concurrently
    and a failing pane carries an error message instead of a chapter.
    """
    reference, translations = state.current()
    panes = await asyncio.gather(*[
        _build_pane(service, reference, translation)
        for translation in translations
    ])
    return {
        "reference": reference.to_dict(),
        "navigation": build_navigation(reference),
        "sidebar": build_sidebar(reference),
        "translations": list(translations),
        "panes": list(panes),
    }
