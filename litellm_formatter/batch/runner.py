"""
Batch runner for formatting LiteLLM responses across many records.

The runner is the host-facing layer around the normalizer. For each record
it extracts the configured input field, parses it when it is JSON text,
normalizes the document and writes the result into the output field. Under
lenient mode records that cannot be processed are passed through unchanged;
under strict mode the first failure aborts the whole batch.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from ..core.normalization import coerce_document, is_blank, try_normalize_response
from ..errors import FormatterError, MissingFieldError, ParseError, UnexpectedError
from ..models.items import BatchItem
from ..models.options import FormatterOptions
from ..observability.logging import FormatterLogger

ItemLike = Union[BatchItem, Mapping[str, Any]]


class BatchRunner:
    """Applies response normalization to a sequence of records."""

    def __init__(
        self,
        options: Optional[FormatterOptions] = None,
        logger: Optional[FormatterLogger] = None
    ):
        """
        Initialize the runner.

        Args:
            options: Formatting options (defaults if not provided)
            logger: Optional structured logger
        """
        self.options = options or FormatterOptions()
        self.logger = logger or FormatterLogger("batch")

    def run(self, items: Iterable[ItemLike]) -> List[BatchItem]:
        """
        Format a batch of records.

        With ``process_all_items`` disabled only the first record is
        processed and the rest are appended unchanged, in order.

        Args:
            items: Records as BatchItem instances or host-shaped mappings

        Returns:
            The output records, in input order

        Raises:
            FormatterError: In strict mode on the first invalid record, and
                in any mode for unexpected failures
        """
        items = list(items)
        results: List[BatchItem] = []

        to_process = items if self.options.process_all_items else items[:1]

        with self.logger.track_batch(len(items), self.options.strict_mode) as batch:
            for item_index, item in enumerate(to_process):
                results.append(self._run_item(item, item_index, batch))

            for item_index in range(len(to_process), len(items)):
                try:
                    results.append(self._as_item(items[item_index]))
                except Exception as e:
                    raise UnexpectedError(item_index=item_index, original_error=e) from e
                batch['passed_through'] += 1

        return results

    def run_raw(self, items: Iterable[ItemLike]) -> List[Dict[str, Any]]:
        """Format a batch and return host-shaped dictionaries."""
        return [item.to_host() for item in self.run(items)]

    def _run_item(self, raw_item: ItemLike, item_index: int, batch: Dict[str, Any]) -> BatchItem:
        try:
            item = self._as_item(raw_item)
            result = self._format_item(item, item_index, batch['batch_id'])
        except FormatterError:
            raise
        except Exception as e:
            raise UnexpectedError(item_index=item_index, original_error=e) from e

        if result is item:
            batch['passed_through'] += 1
        else:
            batch['processed'] += 1
        return result

    def _format_item(self, item: BatchItem, item_index: int, batch_id: str) -> BatchItem:
        field_name = self.options.input_field
        strict = self.options.strict_mode

        value = item.payload.get(field_name)
        if is_blank(value):
            if strict:
                raise MissingFieldError(field_name, item_index)
            self.logger.debug(
                "Input field missing, passing item through",
                batch_id=batch_id,
                item_index=item_index,
                field=field_name
            )
            return item

        try:
            document = coerce_document(value)
        except ValueError as e:
            if strict:
                raise ParseError(field_name, item_index, original_error=e) from e
            self.logger.debug(
                "Input field is not valid JSON, passing item through",
                batch_id=batch_id,
                item_index=item_index,
                field=field_name
            )
            return item

        outcome = try_normalize_response(document, strict=strict)
        if not outcome.ok:
            raise outcome.error.at_item(item_index)

        return item.with_output(self.options.output_field, outcome.document)

    @staticmethod
    def _as_item(item: ItemLike) -> BatchItem:
        if isinstance(item, BatchItem):
            return item
        return BatchItem.model_validate(item)


def format_items(
    items: Iterable[ItemLike],
    options: Optional[FormatterOptions] = None,
    **overrides: Any
) -> List[BatchItem]:
    """
    Format a batch of records with a one-off runner.

    Keyword overrides accept option names or their node aliases, e.g.
    ``format_items(items, strictMode=True)``.
    """
    if overrides:
        base = options.to_parameters() if options else {}
        for key, value in overrides.items():
            field = FormatterOptions.model_fields.get(key)
            base[field.alias if field else key] = value
        options = FormatterOptions.model_validate(base)
    return BatchRunner(options).run(items)
