"""Core logic for the LiteLLM formatter.

This package contains the host-agnostic logic:
- normalization: response document normalization and JSON helpers
- result: explicit outcome type returned by the normalizer
"""

from .normalization import normalize_response, try_normalize_response
from .result import NormalizationOutcome

__all__ = ["NormalizationOutcome", "normalize_response", "try_normalize_response"]
