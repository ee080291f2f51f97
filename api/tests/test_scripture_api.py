"""
Tests for the scripture and status HTTP endpoints.

Uses the Flask test client against an app built with fake document
sources, so no files or network are touched.
"""

import os
import sys

# Add api directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scripture_fixtures import FakeDocumentSource
from server import create_app
from services.scripture import BibleService, ReaderState, Reference
from services.scripture.providers import ApiBibleProvider, OsisProvider


def make_client(provider=None, translations=("KJV",)):
    service = BibleService(provider or OsisProvider(FakeDocumentSource()))
    state = ReaderState(Reference("Genesis", 1, 1), translations=translations)
    app = create_app(service=service, state=state)
    app.config["TESTING"] = True
    return app.test_client()


def test_status_and_catalog():
    print("\n=== Testing status and catalog endpoints ===")

    client = make_client()

    resp = client.get("/api/status")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["status"] == "ok"
    assert data["provider"]["name"] == "osis"
    assert data["translations"] == ["KJV", "ASV", "WEB"]
    print("✓ /api/status reports provider")

    resp = client.get("/api/scripture/books")
    books = resp.get_json()["books"]
    assert len(books) == 66
    assert books[0] == {"name": "Genesis", "chapters": 50, "testament": "old"}
    print("✓ /books lists 66 books")

    resp = client.get("/api/scripture/books?testament=new")
    assert len(resp.get_json()["books"]) == 27
    resp = client.get("/api/scripture/books?testament=apocrypha")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "invalid_testament"
    print("✓ Testament filter")

    resp = client.get("/api/scripture/translations")
    assert resp.get_json() == {"provider": "osis", "translations": ["KJV", "ASV", "WEB"]}
    print("✓ /translations")


def test_verse_lookup():
    print("\n=== Testing /verse ===")

    client = make_client()

    resp = client.get("/api/scripture/verse?ref=John 3:16&translation=KJV")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["reference"] == {"book": "John", "chapter": 3, "verse": 16, "translation": "KJV"}
    assert data["text"].startswith("For God so loved")
    print("✓ Lookup by reference string")

    resp = client.get("/api/scripture/verse?book=Genesis&chapter=1&verse=1&translation=ASV")
    assert resp.status_code == 200
    assert resp.get_json()["reference"]["translation"] == "ASV"
    print("✓ Lookup by fields")

    cases = [
        ("/api/scripture/verse?ref=John 3:16", 400, "invalid_reference"),
        ("/api/scripture/verse?ref=John 3:16&translation=NIV", 400, "invalid_reference"),
        ("/api/scripture/verse?ref=not a reference&translation=KJV", 400, "invalid_ref"),
        ("/api/scripture/verse?book=Genesis&chapter=x&verse=1&translation=KJV", 400, "invalid_reference"),
        ("/api/scripture/verse?ref=John 3:18&translation=KJV", 404, "not_found"),
    ]
    for url, status, code in cases:
        resp = client.get(url)
        assert resp.status_code == status, f"{url}: {resp.status_code}"
        assert resp.get_json()["error"] == code, f"{url}: {resp.get_json()}"
    print("✓ Errors mapped to 400/404")


def test_chapter_and_range():
    print("\n=== Testing /chapter and /range ===")

    client = make_client()

    resp = client.get("/api/scripture/chapter?ref=Psalms 1&translation=KJV")
    assert resp.status_code == 200
    verses = resp.get_json()["verses"]
    assert [v["reference"]["verse"] for v in verses] == [1, 2, 3, 4, 5, 6]
    print("✓ Chapter")

    resp = client.get("/api/scripture/range?ref=John 3:16-19&translation=KJV")
    assert resp.status_code == 200
    data = resp.get_json()
    assert [v["reference"]["verse"] for v in data["verses"]] == [16, 17, 19]
    assert data["end"]["verse"] == 19
    print("✓ Range with a gap")

    resp = client.get("/api/scripture/range?start=Genesis 1:3&end=Genesis 2:1&translation=KJV")
    keys = [(v["reference"]["chapter"], v["reference"]["verse"]) for v in resp.get_json()["verses"]]
    assert keys == [(1, 3), (2, 1)]
    print("✓ Range from start/end")

    resp = client.get("/api/scripture/range?ref=John 3-4:2&translation=KJV")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["end"] == {"book": "John", "chapter": 4, "verse": 2, "translation": "KJV"}
    assert [v["reference"]["verse"] for v in data["verses"]] == [16, 17, 19]
    print("✓ Chapter-to-verse range")

    resp = client.get("/api/scripture/range?start=John 3:16&end=Acts 1:1&translation=KJV")
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "invalid_range"
    resp = client.get("/api/scripture/range?start=John 3:16")
    assert resp.status_code == 400
    print("✓ Bad ranges rejected")


def test_failures_from_providers():
    print("\n=== Testing provider failures ===")

    client = make_client(OsisProvider(FakeDocumentSource(fail={"KJV"})))
    resp = client.get("/api/scripture/verse?ref=John 3:16&translation=KJV")
    assert resp.status_code == 503
    assert resp.get_json()["error"] == "data_unavailable"
    print("✓ Unloadable document gives 503")

    client = make_client(ApiBibleProvider(api_key="test-key"))
    resp = client.get("/api/scripture/verse?ref=John 3:16&translation=KJV")
    assert resp.status_code == 501
    assert resp.get_json()["error"] == "not_implemented"
    assert client.get("/api/scripture/translations").get_json()["translations"] == []
    print("✓ Remote stub gives 501")


def test_reader_state_endpoints():
    print("\n=== Testing reader state endpoints ===")

    client = make_client()

    resp = client.get("/api/scripture/state")
    assert resp.get_json()["translations"] == ["KJV"]

    resp = client.put("/api/scripture/state/reference", json={"ref": "John 3:16", "translation": "ASV"})
    assert resp.status_code == 200
    assert resp.get_json()["reference"] == {
        "book": "John", "chapter": 3, "verse": 16, "translation": None
    }
    print("✓ Reference replaced, translation dropped")

    resp = client.put("/api/scripture/state/reference", json={"book": "Jude", "chapter": 2})
    assert resp.status_code == 400
    resp = client.put("/api/scripture/state/reference", json={})
    assert resp.status_code == 400
    resp = client.put("/api/scripture/state/reference", json={"book": "John", "chapter": 3.7})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "invalid_reference"
    assert client.get("/api/scripture/state").get_json()["reference"]["book"] == "John"
    print("✓ Invalid references leave the state unchanged")

    resp = client.put("/api/scripture/state/translations", json={"translations": ["KJV", "WEB", "KJV"]})
    assert resp.get_json()["translations"] == ["KJV", "WEB"]
    resp = client.post("/api/scripture/state/translations", json={"translation": "ASV"})
    assert resp.get_json()["translations"] == ["KJV", "WEB", "ASV"]
    resp = client.delete("/api/scripture/state/translations/WEB")
    assert resp.get_json()["translations"] == ["KJV", "ASV"]
    print("✓ Translations set, added and removed")

    resp = client.put("/api/scripture/state/translations", json={"translations": "KJV"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "translations_required"
    resp = client.post("/api/scripture/state/translations", json={})
    assert resp.get_json()["error"] == "translation_required"
    print("✓ Missing fields rejected")

    for method, url, body in (
        ("put", "/api/scripture/state/reference", ["John 3:16"]),
        ("put", "/api/scripture/state/translations", "KJV"),
        ("post", "/api/scripture/state/translations", 42),
    ):
        resp = getattr(client, method)(url, json=body)
        assert resp.status_code == 400, f"{method} {url}: {resp.status_code}"
        assert resp.get_json()["error"] == "invalid_body"
    assert client.get("/api/scripture/state").get_json()["translations"] == ["KJV", "ASV"]
    print("✓ Non-object bodies rejected")


def test_reader_view():
    print("\n=== Testing /reader ===")

    client = make_client(translations=("KJV", "WEB"))
    client.put("/api/scripture/state/reference", json={"ref": "John 3"})

    resp = client.get("/api/scripture/reader")
    assert resp.status_code == 200
    view = resp.get_json()
    assert view["navigation"] == ["John", "Chapter 3"]
    assert view["translations"] == ["KJV", "WEB"]
    assert [p["translation"] for p in view["panes"]] == ["KJV", "WEB"]
    assert len(view["panes"][0]["chapter"]["verses"]) == 3
    assert view["panes"][1]["chapter"]["verses"][0]["text"].startswith("For God so loved")
    print("✓ One pane per selected translation")

    new_testament = view["sidebar"][1]
    john = next(b for b in new_testament["books"] if b["name"] == "John")
    assert john["active"] and john["active_chapter"] == 3
    print("✓ Sidebar marks the current book")


def main():
    test_status_and_catalog()
    test_verse_lookup()
    test_chapter_and_range()
    test_failures_from_providers()
    test_reader_state_endpoints()
    test_reader_view()
    print("\nAll scripture API tests passed!")


if __name__ == "__main__":
    main()
