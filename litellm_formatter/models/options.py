from pydantic import BaseModel, Field
from typing import Any, Dict, Mapping, Optional

from ..config.constants import (
    DEFAULT_INPUT_FIELD,
    DEFAULT_OUTPUT_FIELD,
    DEFAULT_PROCESS_ALL_ITEMS,
    DEFAULT_STRICT_MODE,
)
from ..config.settings import read_env_overrides


class FormatterOptions(BaseModel):
    """
    Options controlling a formatting run.

    Field aliases follow the workflow node parameter names
    (``inputField``, ``outputField``, ``processAllItems``, ``strictMode``);
    the snake_case names are accepted as well.
    """
    input_field: str = Field(
        default=DEFAULT_INPUT_FIELD,
        alias="inputField",
        min_length=1,
        description="Field containing the LiteLLM response data"
    )
    output_field: str = Field(
        default=DEFAULT_OUTPUT_FIELD,
        alias="outputField",
        min_length=1,
        description="Field where the formatted data is stored"
    )
    process_all_items: bool = Field(
        default=DEFAULT_PROCESS_ALL_ITEMS,
        alias="processAllItems",
        description="Process every item, or only the first one"
    )
    strict_mode: bool = Field(
        default=DEFAULT_STRICT_MODE,
        alias="strictMode",
        description="Raise on unexpected input instead of passing it through"
    )

    class Config:
        populate_by_name = True
        extra = "forbid"
        frozen = True

    @classmethod
    def from_parameters(cls, parameters: Mapping[str, Any]) -> "FormatterOptions":
        """
        Build options from workflow node parameters.

        Accepts the node shape, where the booleans live in a nested
        ``options`` collection::

            {"inputField": "data", "outputField": "data",
             "options": {"processAllItems": true, "strictMode": false}}

        as well as the flat shape.
        """
        flat: Dict[str, Any] = {k: v for k, v in parameters.items() if k != "options"}
        nested = parameters.get("options") or {}
        flat.update(nested)
        return cls.model_validate(flat)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        **overrides: Any
    ) -> "FormatterOptions":
        """
        Build options from ``LITELLM_FORMATTER_*`` environment variables.

        Explicit keyword overrides take precedence over the environment.
        """
        values = read_env_overrides(environ)
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def to_parameters(self) -> Dict[str, Any]:
        """Return the options keyed by their node parameter names."""
        return self.model_dump(by_alias=True)
