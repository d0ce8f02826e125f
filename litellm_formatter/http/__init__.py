"""HTTP API layer for the LiteLLM formatter.

This module provides FastAPI integration; import the router from
``litellm_formatter.http.api``.
"""
