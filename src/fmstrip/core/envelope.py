"""Decoding and encoding of the [context, book] JSON envelope mdBook exchanges with preprocessors"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


BOOK_ITEM_KEYS = ("sections", "items")


class EnvelopeError(ValueError):
    """Raised when preprocessor input does not have the [context, book] shape."""


class PreprocessorContext(BaseModel):
    """First envelope element; unknown fields are kept."""
    model_config = ConfigDict(extra="allow")

    root:           str = ""
    config:         dict[str, Any] = {}
    renderer:       str = ""
    mdbook_version: str = ""


def decode_envelope(raw: str) -> tuple[PreprocessorContext, dict[str, Any]]:
    """Parse raw stdin text into (context, book). Raises EnvelopeError on any shape problem."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise EnvelopeError(f"Invalid JSON input: {e}") from e

    if not isinstance(data, list) or len(data) != 2:
        raise EnvelopeError("Expected [context, book] array from mdbook")

    ctx_data, book = data
    if not isinstance(ctx_data, dict):
        raise EnvelopeError(f"Context must be an object, got {type(ctx_data).__name__}")
    try:
        context = PreprocessorContext.model_validate(ctx_data)
    except ValidationError as e:
        raise EnvelopeError(f"Invalid preprocessor context: {e}") from e

    if not isinstance(book, dict):
        raise EnvelopeError(f"Book must be an object, got {type(book).__name__}")
    if not any(isinstance(book.get(k), list) for k in BOOK_ITEM_KEYS):
        raise EnvelopeError("Book is missing its 'sections' (or 'items') array")
    return context, book


def encode_book(book: dict[str, Any]) -> str:
    """Serialize book as compact JSON (no trailing newline)."""
    return json.dumps(book, ensure_ascii=False)
