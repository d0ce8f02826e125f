"""Configuration defaults for the LiteLLM formatter."""

from .constants import (
    DEFAULT_INPUT_FIELD,
    DEFAULT_OUTPUT_FIELD,
    DEFAULT_PROCESS_ALL_ITEMS,
    DEFAULT_STRICT_MODE,
    INPUT_FIELD_ENV_VAR,
    OUTPUT_FIELD_ENV_VAR,
    PROCESS_ALL_ITEMS_ENV_VAR,
    STRICT_MODE_ENV_VAR,
)
from .settings import parse_bool

__all__ = [
    "DEFAULT_INPUT_FIELD",
    "DEFAULT_OUTPUT_FIELD",
    "DEFAULT_PROCESS_ALL_ITEMS",
    "DEFAULT_STRICT_MODE",
    "INPUT_FIELD_ENV_VAR",
    "OUTPUT_FIELD_ENV_VAR",
    "PROCESS_ALL_ITEMS_ENV_VAR",
    "STRICT_MODE_ENV_VAR",
    "parse_bool",
]
