"""
LiteLLM Formatter - consistent shapes for LLM chat-completion responses.

This package replaces null values in the optional message fields of
LiteLLM / OpenAI style responses with empty collections:
- tool_calls: null -> []
- function_call: null -> {}
- annotations: null or missing -> []

Features:
- Pure, non-mutating normalizer with strict and lenient modes
- Batch runner for workflow items with configurable fields
- Command line and FastAPI front ends
"""

__version__ = "0.1.0"

from .batch import BatchRunner, format_items
from .core import NormalizationOutcome, normalize_response, try_normalize_response
from .errors import (
    FormatterError,
    InvalidStructureError,
    MissingFieldError,
    MissingMessageError,
    ParseError,
    UnexpectedError,
)
from .models import BatchItem, FormatterOptions

__all__ = [
    # Normalizer
    "normalize_response",
    "try_normalize_response",
    "NormalizationOutcome",

    # Batch
    "BatchRunner",
    "format_items",

    # Models
    "BatchItem",
    "FormatterOptions",

    # Errors
    "FormatterError",
    "MissingFieldError",
    "ParseError",
    "InvalidStructureError",
    "MissingMessageError",
    "UnexpectedError",
]
