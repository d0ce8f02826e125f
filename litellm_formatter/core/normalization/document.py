"""
JSON document helpers.

Response documents are modelled as plain Python JSON values:
``None | bool | int | float | str | list | dict``. The helpers here copy and
coerce such values without a serialize/parse round trip.
"""

import json
import math
from typing import Any, Dict, List, Union

JSONScalar = Union[None, bool, int, float, str]
JSONValue = Union[JSONScalar, List[Any], Dict[str, Any]]

_SCALAR_TYPES = (str, int, float, bool, type(None))


def clone_document(value: Any) -> JSONValue:
    """
    Return a deep, independent copy of a JSON value.

    Mappings and sequences are rebuilt recursively, scalars are immutable and
    returned as-is. Pydantic models (for example LiteLLM or OpenAI SDK
    response objects) are dumped to plain JSON data first.

    Args:
        value: The document to copy

    Returns:
        A structurally equal copy sharing no containers with ``value``

    Raises:
        TypeError: If the value contains something that is not JSON data
    """
    if isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, dict):
        copied = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"Document keys must be strings, got {type(key).__name__}"
                )
            copied[key] = clone_document(item)
        return copied
    if isinstance(value, (list, tuple)):
        return [clone_document(item) for item in value]
    if hasattr(value, "model_dump"):
        return clone_document(value.model_dump(mode="json"))
    raise TypeError(f"Value of type {type(value).__name__} is not JSON data")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def coerce_document(value: Any) -> Any:
    """
    Parse text input as JSON; return structured input untouched.

    ``NaN`` and ``Infinity`` literals are rejected like any other invalid
    JSON text.

    Raises:
        ValueError: If the text is not valid JSON
    """
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        return json.loads(value, parse_constant=_reject_constant)
    return value


def is_blank(value: Any) -> bool:
    """
    Check whether a field value counts as absent.

    Follows workflow-engine truthiness: ``None``, ``False``, empty text,
    zero and NaN are blank. Empty mappings and lists are real values.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        return value == 0 or math.isnan(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return value == 0
    return False
