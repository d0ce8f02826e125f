"""Batch processing of host records."""

from .runner import BatchRunner, format_items

__all__ = ["BatchRunner", "format_items"]
