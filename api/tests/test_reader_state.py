"""
Tests for ReaderState and the reader view models.
"""

import os
import sys

# Add api directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scripture_fixtures import FakeDocumentSource, run
from services.scripture import BibleService, ReaderState, Reference
from services.scripture.presentation import build_navigation, build_reader, build_sidebar
from services.scripture.providers import OsisProvider


def test_reader_state_defaults():
    print("\n=== Testing ReaderState defaults ===")

    state = ReaderState()
    assert state.current_reference == Reference("Genesis", 1, 1)
    assert state.translations == ("KJV",)
    print("✓ Genesis 1:1 in KJV")

    state = ReaderState(translations=[])
    assert state.translations == ()
    print("✓ Empty translation list allowed")


def test_reader_state_mutations():
    print("\n=== Testing ReaderState mutations ===")

    state = ReaderState()
    state.set_reference(Reference("John", 3))
    assert state.current_reference == Reference("John", 3)
    print("✓ Reference replaced whole")

    assert state.set_translations(["KJV", "ASV", "KJV", "WEB"]) == ("KJV", "ASV", "WEB")
    print("✓ set_translations dedupes and keeps order")

    assert state.add_translation("YLT") == ("KJV", "ASV", "WEB", "YLT")
    assert state.add_translation("ASV") == ("KJV", "ASV", "WEB", "YLT")
    print("✓ add_translation appends once")

    assert state.remove_translation("ASV") == ("KJV", "WEB", "YLT")
    assert state.remove_translation("NIV") == ("KJV", "WEB", "YLT")
    print("✓ remove_translation by value")

    assert state.snapshot() == {
        "reference": {"book": "John", "chapter": 3, "verse": None, "translation": None},
        "translations": ["KJV", "WEB", "YLT"],
    }
    print("✓ snapshot")


def test_navigation_and_sidebar():
    print("\n=== Testing navigation and sidebar ===")

    assert build_navigation(Reference("John", 3, 16)) == ["John", "Chapter 3", "Verse 16"]
    assert build_navigation(Reference("Psalms", 1)) == ["Psalms", "Chapter 1"]
    print("✓ Breadcrumbs")

    sidebar = build_sidebar(Reference("John", 3))
    assert [s["title"] for s in sidebar] == ["Old Testament", "New Testament"]
    assert len(sidebar[0]["books"]) == 39
    assert len(sidebar[1]["books"]) == 27

    active = [b for s in sidebar for b in s["books"] if b["active"]]
    assert len(active) == 1
    assert active[0]["name"] == "John"
    assert active[0]["active_chapter"] == 3
    assert active[0]["chapters"] == list(range(1, 22))
    print("✓ Books grouped by testament with active book marked")


def test_build_reader_panes():
    print("\n=== Testing build_reader ===")

    source = FakeDocumentSource()
    service = BibleService(OsisProvider(source))
    state = ReaderState(Reference("Genesis", 1, 1), translations=["KJV", "ASV", "WEB", "NIV"])

    view = run(build_reader(service, state))
    assert view["navigation"] == ["Genesis", "Chapter 1", "Verse 1"]
    panes = {p["translation"]: p for p in view["panes"]}
    assert list(panes) == ["KJV", "ASV", "WEB", "NIV"]

    assert len(panes["KJV"]["chapter"]["verses"]) == 3
    assert len(panes["ASV"]["chapter"]["verses"]) == 1
    assert panes["KJV"]["error"] is None
    print("✓ One pane per translation with its own chapter text")

    assert panes["WEB"]["chapter"] is None
    assert "Genesis not found in WEB" in panes["WEB"]["error"]
    assert "Unsupported translation" in panes["NIV"]["error"]
    print("✓ Failing panes carry an error message")

    assert sorted(source.calls) == ["ASV", "KJV", "WEB"]
    print("✓ Each translation fetched once")


class InterleavedState(ReaderState):
    """Applies another request's update whenever a single field is read."""

    @property
    def current_reference(self):
        reference = super().current_reference
        self.set_translations(["WEB"])
        return reference

    @property
    def translations(self):
        translations = super().translations
        self.set_reference(Reference("John", 3))
        return translations


def test_build_reader_reads_state_once():
    print("\n=== Testing consistent reader view ===")

    state = ReaderState(Reference("Psalms", 1), translations=["KJV", "ASV"])
    assert state.current() == (Reference("Psalms", 1), ("KJV", "ASV"))
    print("✓ current() returns reference and translations together")

    state = InterleavedState(Reference("Genesis", 1), translations=["KJV", "ASV"])
    view = run(build_reader(BibleService(OsisProvider(FakeDocumentSource())), state))
    assert view["navigation"] == ["Genesis", "Chapter 1"]
    assert view["translations"] == ["KJV", "ASV"]
    assert [p["translation"] for p in view["panes"]] == ["KJV", "ASV"]
    assert all(p["heading"] == "Genesis 1" for p in view["panes"])
    print("✓ Reference and translations come from one read")

def main():
    test_reader_state_defaults()
    test_reader_state_mutations()
    test_navigation_and_sidebar()
    test_build_reader_panes()
    test_build_reader_reads_state_once()
    print("\nAll reader state tests passed!")


if __name__ == "__main__":
    main()
