"""Observability helpers for the LiteLLM formatter."""

from .logging import FormatterLogger

__all__ = ["FormatterLogger"]
