"""
Error definitions for the LiteLLM formatter.

Every error carries enough context to locate the offending record
(``item_index``) and, where applicable, the offending choice inside the
response document (``choice_index``).
"""

from typing import Any, Dict, Optional


class FormatterError(Exception):
    """Base exception for formatting errors."""

    def __init__(self, message: str, item_index: Optional[int] = None):
        self.message = message
        self.item_index = item_index
        super().__init__(message)

    def at_item(self, item_index: int) -> "FormatterError":
        """Attach the index of the record being processed and return self."""
        self.item_index = item_index
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Structured representation for logs and HTTP responses."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "item_index": self.item_index,
        }


class MissingFieldError(FormatterError):
    """The configured input field is absent or empty on a record."""

    def __init__(self, field_name: str, item_index: int):
        self.field_name = field_name
        message = f'Input field "{field_name}" not found in item {item_index}'
        super().__init__(message, item_index=item_index)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field_name"] = self.field_name
        return data


class ParseError(FormatterError):
    """The input field holds text that is not valid JSON."""

    def __init__(
        self,
        field_name: str,
        item_index: int,
        original_error: Optional[Exception] = None
    ):
        self.field_name = field_name
        self.original_error = original_error
        message = f'Failed to parse JSON from input field "{field_name}" in item {item_index}'
        super().__init__(message, item_index=item_index)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["field_name"] = self.field_name
        return data


class InvalidStructureError(FormatterError):
    """The response document has no usable ``choices`` array."""

    def __init__(self, item_index: Optional[int] = None):
        super().__init__(
            "Input data does not have a valid choices array",
            item_index=item_index
        )


class MissingMessageError(FormatterError):
    """A choice element lacks a ``message`` mapping."""

    def __init__(self, choice_index: int, item_index: Optional[int] = None):
        self.choice_index = choice_index
        message = f"Choice at index {choice_index} does not have a message property"
        super().__init__(message, item_index=item_index)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["choice_index"] = self.choice_index
        return data


class UnexpectedError(FormatterError):
    """Any other failure while processing a record."""

    def __init__(self, item_index: int, original_error: Exception):
        self.original_error = original_error
        message = f"Error processing item {item_index}: {original_error}"
        super().__init__(message, item_index=item_index)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["original_error_type"] = type(self.original_error).__name__
        return data
