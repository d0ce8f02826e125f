"""
Structured logging utility for the formatter.

This module provides a consistent logging interface for the batch runner,
CLI and HTTP layers, ensuring structured log lines with standard fields
like component, batch_id and item_index.
"""

import logging
import time
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Optional


class FormatterLogger:
    """Structured logger for formatter components."""

    def __init__(self, component: str):
        """
        Initialize logger for a specific component.

        Args:
            component: Name of the component (e.g., "batch", "cli")
        """
        self.component = component
        self.logger = logging.getLogger(f"litellm_formatter.{component}")

    def _format_message(self, message: str, **kwargs) -> str:
        """Format message with structured fields."""
        fields = [f"component={self.component}"]

        for key, value in kwargs.items():
            if value is not None:
                fields.append(f"{key}={value}")

        return f"[{' '.join(fields)}] {message}"

    def debug(self, message: str, batch_id: Optional[str] = None, **kwargs):
        """Log debug message with structured fields."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._format_message(message, batch_id=batch_id, **kwargs))

    def info(self, message: str, batch_id: Optional[str] = None, **kwargs):
        """Log info message with structured fields."""
        self.logger.info(self._format_message(message, batch_id=batch_id, **kwargs))

    def error(self, message: str, batch_id: Optional[str] = None,
              error: Optional[Exception] = None, **kwargs):
        """Log error message with structured fields."""
        if error:
            kwargs['error_type'] = type(error).__name__
            kwargs['error_msg'] = str(error)

        self.logger.error(self._format_message(message, batch_id=batch_id, **kwargs))

    @contextmanager
    def track_batch(self, item_count: int, strict: bool, batch_id: Optional[str] = None):
        """
        Context manager to track batch timing and log start/finish.

        Args:
            item_count: Number of input items
            strict: Whether strict mode is enabled
            batch_id: Optional batch ID (generated if not provided)

        Yields:
            Dict with batch metadata including batch_id
        """
        if batch_id is None:
            batch_id = str(uuid.uuid4())[:8]

        start_time = time.time()

        self.debug(
            "Starting batch",
            batch_id=batch_id,
            items=item_count,
            strict=strict
        )

        metadata: Dict[str, Any] = {
            'batch_id': batch_id,
            'items': item_count,
            'processed': 0,
            'passed_through': 0,
            'start_time': start_time
        }

        try:
            yield metadata

            duration = time.time() - start_time
            self.info(
                "Completed batch",
                batch_id=batch_id,
                items=item_count,
                processed=metadata['processed'],
                passed_through=metadata['passed_through'],
                duration_ms=int(duration * 1000)
            )

        except Exception as e:
            duration = time.time() - start_time
            self.error(
                "Failed batch",
                batch_id=batch_id,
                items=item_count,
                item_index=getattr(e, 'item_index', None),
                duration_ms=int(duration * 1000),
                error=e
            )
            raise
