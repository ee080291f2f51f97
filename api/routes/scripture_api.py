# routes/scripture_api.py
"""
API endpoints for the scripture reader.

Provides access to:
- Book catalog and available translations
- Verse, chapter and verse-range lookup
- Reader state (current reference, side-by-side translations)
- The assembled reader view (navigation, sidebar, panes)
"""

from flask import Blueprint, current_app, jsonify, request

from services.scripture import (
    BIBLE_BOOKS,
    BibleService,
    DataUnavailableError,
    InvalidRangeError,
    InvalidReferenceError,
    NotFoundError,
    ReaderState,
    Reference,
    ReferenceParseError,
    ScriptureError,
    books_for_testament,
    is_valid_reference,
    parse_passage,
    require_reference,
)
from services.scripture.presentation import build_reader
from utils.errors import (
    missing_field,
    not_found,
    not_implemented,
    server_error,
    service_unavailable,
    validation_error,
)

scripture_bp = Blueprint("scripture_api", __name__, url_prefix="/api/scripture")

LOOKUP_ERRORS = (ScriptureError, ReferenceParseError, NotImplementedError)


def get_service() -> BibleService:
    """BibleService constructed at startup (see server.create_app)."""
    return current_app.extensions["bible_service"]


def get_state() -> ReaderState:
    return current_app.extensions["reader_state"]


def lookup_error(e: Exception):
    """Map a lookup exception to an error response."""
    if isinstance(e, InvalidRangeError):
        return validation_error("invalid_range", str(e))
    if isinstance(e, InvalidReferenceError):
        return validation_error("invalid_reference", str(e))
    if isinstance(e, ReferenceParseError):
        return validation_error("invalid_ref", str(e))
    if isinstance(e, NotFoundError):
        return not_found("passage", str(e))
    if isinstance(e, DataUnavailableError):
        return service_unavailable(detail=str(e))
    if isinstance(e, NotImplementedError):
        return not_implemented(str(e))
    current_app.logger.error(f"Unexpected lookup error: {e}")
    return server_error(detail=str(e))


def reference_from(data, translation: str = None) -> Reference:
    """
    Build a Reference from request args or a JSON body.

    Accepts either ref="John 3:16" or book/chapter/verse fields.
    """
    translation = translation or data.get("translation") or None
    ref = data.get("ref")
    if ref:
        return require_reference(ref, translation)
    return Reference.from_dict({
        "book": data.get("book"),
        "chapter": data.get("chapter"),
        "verse": data.get("verse"),
        "translation": translation,
    })


def json_body():
    """The request's JSON body, {} if absent, or None if it is not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def invalid_body():
    return validation_error("invalid_body", "Request body must be a JSON object")


def range_from(args):
    """(start, end) from ref="John 3:16-18" or start=/end= parameters."""
    translation = args.get("translation") or None
    ref = args.get("ref")
    if ref:
        passage = parse_passage(ref, translation)
        if passage is None:
            raise ReferenceParseError(f"Could not parse passage: {ref}")
        return passage

    start, end = args.get("start"), args.get("end")
    if not start or not end:
        raise ReferenceParseError("ref or start and end parameters required")
    return require_reference(start, translation), require_reference(end, translation)


# =============================================================================
# Catalog
# =============================================================================

@scripture_bp.get("/books")
def list_books():
    """
    List canonical books.

    Query params:
        testament: "old" or "new" (optional)
    """
    testament = request.args.get("testament")
    if testament:
        try:
            books = books_for_testament(testament)
        except ValueError:
            return validation_error("invalid_testament", f"Unknown testament: {testament}")
    else:
        books = BIBLE_BOOKS

    return jsonify({"books": [b.to_dict() for b in books]})


@scripture_bp.get("/translations")
def list_translations():
    service = get_service()
    return jsonify({
        "provider": service.provider_name,
        "translations": service.get_available_translations(),
    })


# =============================================================================
# Lookup
# =============================================================================

@scripture_bp.get("/verse")
async def get_verse():
    """
    Get a single verse.

    Query params:
        ref: Reference string e.g. "John 3:16", or book/chapter/verse
        translation: Translation code e.g. "KJV"
    """
    try:
        reference = reference_from(request.args)
        verse = await get_service().get_verse(reference)
    except LOOKUP_ERRORS as e:
        return lookup_error(e)
    return jsonify(verse.to_dict())


@scripture_bp.get("/chapter")
async def get_chapter():
    """
    Get a whole chapter.

    Query params:
        ref: Reference string e.g. "Psalm 1", or book/chapter
        translation: Translation code
    """
    try:
        reference = reference_from(request.args)
        chapter = await get_service().get_chapter(reference)
    except LOOKUP_ERRORS as e:
        return lookup_error(e)
    return jsonify(chapter.to_dict())


@scripture_bp.get("/range")
async def get_range():
    """
    Get the verses of a passage.

    Query params:
        ref: Passage e.g. "John 3:16-18" or "John 3:16-4:2"
        start, end: Alternative to ref, each a single reference
        translation: Translation code
    """
    try:
        start, end = range_from(request.args)
        verses = await get_service().get_verse_range(start, end)
    except LOOKUP_ERRORS as e:
        return lookup_error(e)
    return jsonify({
        "start": start.to_dict(),
        "end": end.to_dict(),
        "verses": [v.to_dict() for v in verses],
    })


# =============================================================================
# Reader
# =============================================================================

@scripture_bp.get("/reader")
async def get_reader():
    """Navigation, sidebar and one pane per selected translation."""
    view = await build_reader(get_service(), get_state())
    return jsonify(view)


@scripture_bp.get("/state")
def get_reader_state():
    return jsonify(get_state().snapshot())


@scripture_bp.put("/state/reference")
def set_reader_reference():
    """
    Replace the current reference.

    Body:
        ref: Reference string, or book/chapter/verse fields
    """
    data = json_body()
    if data is None:
        return invalid_body()
    try:
        reference = reference_from(data)
    except LOOKUP_ERRORS as e:
        return lookup_error(e)

    if not is_valid_reference(reference):
        return validation_error("invalid_reference", f"Invalid reference: {reference.label}")

    # The reader tracks location only; translations are selected separately
    get_state().set_reference(reference.with_translation(None))
    return jsonify(get_state().snapshot())


@scripture_bp.put("/state/translations")
def set_reader_translations():
    """
    Replace the selected translations.

    Body:
        translations: List of translation codes
    """
    data = json_body()
    if data is None:
        return invalid_body()
    translations = data.get("translations")
    if not isinstance(translations, list):
        return missing_field("translations")

    get_state().set_translations(str(t) for t in translations)
    return jsonify(get_state().snapshot())


@scripture_bp.post("/state/translations")
def add_reader_translation():
    """
    Add a translation to the side-by-side view.

    Body:
        translation: Translation code
    """
    data = json_body()
    if data is None:
        return invalid_body()
    translation = data.get("translation")
    if not translation:
        return missing_field("translation")

    get_state().add_translation(str(translation))
    return jsonify(get_state().snapshot())


@scripture_bp.delete("/state/translations/<code>")
def remove_reader_translation(code: str):
    get_state().remove_translation(code)
    return jsonify(get_state().snapshot())
