from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..errors import FormatterError


@dataclass
class NormalizationOutcome:
    """Result of a normalization call.

    Exactly one of ``document`` or ``error`` is meaningful: a successful
    outcome carries the normalized copy, a failed one carries the error
    that strict mode produced.

    Attributes:
        document: The normalized document (``None`` is a valid document)
        error: The policy violation, if any
    """
    document: Any = None
    error: Optional[FormatterError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, document: Any) -> "NormalizationOutcome":
        return cls(document=document)

    @classmethod
    def failure(cls, error: FormatterError) -> "NormalizationOutcome":
        return cls(error=error)

    def unwrap(self) -> Any:
        """Return the document or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.document
