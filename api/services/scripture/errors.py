# api/services/scripture/errors.py
"""
Exception types raised by scripture providers.

Providers and the BibleService let these propagate; only the HTTP layer
turns them into error responses.
"""


class ScriptureError(Exception):
    """Base exception for scripture lookup errors."""
    pass


class InvalidReferenceError(ScriptureError, ValueError):
    """Book unknown, chapter out of range, or translation missing/unsupported."""
    pass


class InvalidRangeError(ScriptureError, ValueError):
    """Range endpoints in different books or different translations."""
    pass


class NotFoundError(ScriptureError, LookupError):
    """Reference is well-formed but the source has no text there."""
    pass


class DataUnavailableError(ScriptureError):
    """Backing data could not be fetched or parsed."""
    pass
