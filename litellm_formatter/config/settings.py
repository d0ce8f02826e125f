"""Environment-driven settings helpers."""

import os
from typing import Any, Dict, Mapping, Optional

from .constants import (
    FALSE_VALUES,
    INPUT_FIELD_ENV_VAR,
    OUTPUT_FIELD_ENV_VAR,
    PROCESS_ALL_ITEMS_ENV_VAR,
    STRICT_MODE_ENV_VAR,
    TRUE_VALUES,
)


def parse_bool(raw: str, name: str) -> bool:
    """
    Parse a boolean environment value.

    Args:
        raw: The raw string value
        name: Variable name, used in the error message

    Raises:
        ValueError: If the value is not a recognised boolean
    """
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


def read_env_overrides(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Collect option overrides from environment variables.

    Only variables that are set (and non-empty) are returned, keyed by
    option field name.
    """
    if environ is None:
        environ = os.environ

    overrides: Dict[str, Any] = {}

    input_field = environ.get(INPUT_FIELD_ENV_VAR)
    if input_field:
        overrides["input_field"] = input_field

    output_field = environ.get(OUTPUT_FIELD_ENV_VAR)
    if output_field:
        overrides["output_field"] = output_field

    process_all = environ.get(PROCESS_ALL_ITEMS_ENV_VAR)
    if process_all:
        overrides["process_all_items"] = parse_bool(process_all, PROCESS_ALL_ITEMS_ENV_VAR)

    strict = environ.get(STRICT_MODE_ENV_VAR)
    if strict:
        overrides["strict_mode"] = parse_bool(strict, STRICT_MODE_ENV_VAR)

    return overrides
