"""Shared pytest fixtures for LiteLLM formatter tests."""

import json
import logging

import pytest

from litellm_formatter.config.constants import (
    INPUT_FIELD_ENV_VAR,
    OUTPUT_FIELD_ENV_VAR,
    PROCESS_ALL_ITEMS_ENV_VAR,
    STRICT_MODE_ENV_VAR,
)
from litellm_formatter.models.options import FormatterOptions
from tests.helpers.sample_responses import (
    litellm_null_response,
    multi_choice_response,
    tool_call_response,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep formatter environment overrides from leaking into tests."""
    for name in (
        INPUT_FIELD_ENV_VAR,
        OUTPUT_FIELD_ENV_VAR,
        PROCESS_ALL_ITEMS_ENV_VAR,
        STRICT_MODE_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def null_response():
    """LiteLLM response with null optional fields."""
    return litellm_null_response()


@pytest.fixture
def tool_response():
    """LiteLLM response carrying a real tool call."""
    return tool_call_response()


@pytest.fixture
def multi_response():
    """LiteLLM response with several choices."""
    return multi_choice_response()


@pytest.fixture
def default_options():
    """Default formatter options."""
    return FormatterOptions()


@pytest.fixture
def strict_options():
    """Strict formatter options."""
    return FormatterOptions(strictMode=True)


@pytest.fixture
def sample_items(null_response, tool_response):
    """Workflow items: structured payload, JSON text payload, empty payload."""
    return [
        {"json": {"data": null_response, "id": 1}, "pairedItem": {"item": 0}},
        {"json": {"data": json.dumps(tool_response), "id": 2}},
        {"json": {"id": 3}},
    ]


@pytest.fixture
def formatter_caplog(caplog):
    """caplog capturing formatter debug output."""
    caplog.set_level(logging.DEBUG, logger="litellm_formatter")
    return caplog
