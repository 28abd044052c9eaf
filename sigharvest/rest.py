"""Request validation for the signature lookup API."""

from __future__ import annotations

import enum
from typing import Optional

from sigharvest.model import SignatureKind


class BadRequest(ValueError):
    """Raised when a request parameter is rejected."""


class QueryKind(str, enum.Enum):
    """The kind filter accepted in request paths."""

    ALL = "all"
    FUNCTION = "function"
    EVENT = "event"
    ERROR = "error"

    def to_signature_kind(self) -> Optional[SignatureKind]:
        """Return the matching kind, or None for ``all``."""
        if self is QueryKind.ALL:
            return None
        return SignatureKind(self.value)


def validate_page(page: int) -> int:
    """Return ``page`` if it is a valid 1-based page index."""
    if page < 1:
        raise BadRequest("Page index must be >= 1")
    return page


def normalize_text_query(text: str) -> str:
    """Trim a text query and require at least 3 characters."""
    trimmed = text.strip()
    if len(trimmed.encode("utf-8")) < 3:
        raise BadRequest("Query must have at least 3 characters")
    return trimmed


def normalize_hash_query(text: str) -> str:
    """Trim a hash query, drop a ``0x`` prefix and require 8 or 64 characters."""
    trimmed = text.strip()
    if trimmed.startswith("0x"):
        trimmed = trimmed[2:]
    if len(trimmed.encode("utf-8")) not in (8, 64):
        raise BadRequest("Query must have 8 or 64 characters")
    return trimmed