"""
Response normalization module.

This module replaces ``null`` values in the optional message fields of a
chat-completion response with empty collections of the expected type:

    tool_calls     null           -> []
    function_call  null           -> {}
    annotations    null or absent -> []

Absent ``tool_calls`` and ``function_call`` keys are left absent.
"""

from typing import Any, Dict

from ...errors import InvalidStructureError, MissingMessageError
from ..result import NormalizationOutcome
from .document import clone_document


def coerce_message_fields(message: Dict[str, Any]) -> Dict[str, Any]:
    """
    Coerce the optional fields of a single message mapping in place.

    Args:
        message: A ``choices[i].message`` mapping

    Returns:
        The same mapping, for chaining
    """
    if "tool_calls" in message and message["tool_calls"] is None:
        message["tool_calls"] = []

    if "function_call" in message and message["function_call"] is None:
        message["function_call"] = {}

    # absent and null are equivalent here
    if message.get("annotations") is None:
        message["annotations"] = []

    return message


def try_normalize_response(document: Any, strict: bool = False) -> NormalizationOutcome:
    """
    Normalize a response document without raising for policy violations.

    The input is never mutated; the outcome holds a deep copy. In lenient
    mode a document without a ``choices`` list, or a choice without a
    ``message`` mapping, is left as it is. In strict mode the first such
    violation is returned as the outcome's error.

    Args:
        document: Parsed response document
        strict: Report structural problems instead of skipping them

    Returns:
        NormalizationOutcome with either the normalized copy or the error
    """
    normalized = clone_document(document)

    choices = normalized.get("choices") if isinstance(normalized, dict) else None
    if not isinstance(choices, list):
        if strict:
            return NormalizationOutcome.failure(InvalidStructureError())
        return NormalizationOutcome.success(normalized)

    for index, choice in enumerate(choices):
        message = choice.get("message") if isinstance(choice, dict) else None
        if isinstance(message, dict):
            coerce_message_fields(message)
        elif strict:
            return NormalizationOutcome.failure(MissingMessageError(choice_index=index))

    return NormalizationOutcome.success(normalized)


def normalize_response(document: Any, strict: bool = False) -> Any:
    """
    Normalize a response document, raising on strict-mode violations.

    Raises:
        InvalidStructureError: strict mode and no ``choices`` list
        MissingMessageError: strict mode and a choice without a message
        TypeError: the document contains non-JSON values
    """
    return try_normalize_response(document, strict=strict).unwrap()
