"""Normalization layer for LLM response documents.

This layer handles:
- Null-to-empty coercion of optional message fields
- Structural deep copies of JSON documents
- Text-to-JSON coercion of record fields
"""

from .document import JSONValue, clone_document, coerce_document, is_blank
from .response import coerce_message_fields, normalize_response, try_normalize_response

__all__ = [
    "JSONValue",
    "clone_document",
    "coerce_document",
    "coerce_message_fields",
    "is_blank",
    "normalize_response",
    "try_normalize_response",
]
