"""Unit tests for the batch runner."""

import json
from unittest.mock import patch

import pytest

from litellm_formatter.batch.runner import BatchRunner, format_items
from litellm_formatter.errors import (
    FormatterError,
    InvalidStructureError,
    MissingFieldError,
    MissingMessageError,
    ParseError,
    UnexpectedError,
)
from litellm_formatter.models.items import BatchItem
from litellm_formatter.models.options import FormatterOptions


def _doc(item):
    return item.payload["data"]


class TestBatchRunner:
    """Test per-record processing."""

    def test_structured_payload_is_normalized(self, null_response):
        [result] = BatchRunner().run([{"json": {"data": null_response}}])
        message = _doc(result)["choices"][0]["message"]
        assert message["tool_calls"] == []
        assert message["function_call"] == {}
        assert message["annotations"] == []

    def test_json_text_payload_is_parsed(self, tool_response):
        [result] = BatchRunner().run([{"json": {"data": json.dumps(tool_response)}}])
        assert isinstance(_doc(result), dict)
        assert _doc(result)["choices"][0]["message"]["function_call"] == {}

    def test_output_field_can_differ(self, null_response):
        options = FormatterOptions(inputField="raw", outputField="formatted")
        [result] = BatchRunner(options).run([{"json": {"raw": null_response}}])
        assert result.payload["raw"] == null_response
        assert result.payload["formatted"]["choices"][0]["message"]["tool_calls"] == []

    def test_other_fields_and_metadata_preserved(self, null_response):
        item = {
            "json": {"data": null_response, "id": 7},
            "binary": {"attachment": {"data": "aGVsbG8=", "mimeType": "text/plain"}},
            "pairedItem": {"item": 0},
        }
        [result] = BatchRunner().run([item])
        assert result.payload["id"] == 7
        assert result.binary == item["binary"]
        assert result.paired_item == {"item": 0}

    def test_input_items_not_mutated(self, sample_items):
        before = json.loads(json.dumps(sample_items))
        BatchRunner().run(sample_items)
        assert sample_items == before

    def test_batch_item_instances_accepted(self, null_response):
        item = BatchItem(payload={"data": null_response})
        [result] = BatchRunner().run([item])
        assert result is not item
        assert _doc(result)["choices"][0]["message"]["annotations"] == []

    def test_run_raw_returns_host_dicts(self, null_response):
        [result] = BatchRunner().run_raw([{"json": {"data": null_response}, "pairedItem": 0}])
        assert set(result) == {"json", "pairedItem"}
        assert result["json"]["data"]["choices"][0]["message"]["tool_calls"] == []

    def test_empty_batch(self):
        assert BatchRunner().run([]) == []
        assert BatchRunner(FormatterOptions(processAllItems=False)).run([]) == []


class TestLenientPassThrough:
    """Test that lenient mode passes unusable records through unchanged."""

    @pytest.mark.parametrize("payload", [
        {},
        {"data": None},
        {"data": ""},
        {"data": 0},
        {"data": False},
    ])
    def test_missing_or_blank_field_passes_through(self, payload):
        item = BatchItem(payload=payload)
        [result] = BatchRunner().run([item])
        assert result is item

    def test_invalid_json_text_passes_through(self):
        item = BatchItem(payload={"data": "{not json"})
        [result] = BatchRunner().run([item])
        assert result is item

    @pytest.mark.parametrize("text", ["NaN", '{"choices": [], "x": Infinity}'])
    def test_non_standard_json_constants_pass_through(self, text):
        item = BatchItem(payload={"data": text})
        [result] = BatchRunner().run([item])
        assert result is item
        assert result.payload["data"] == text

    def test_huge_integer_is_a_value_not_blank(self):
        [result] = BatchRunner().run([{"json": {"data": 10 ** 400}}])
        assert _doc(result) == 10 ** 400

    def test_document_without_choices_is_copied_to_output(self):
        [result] = BatchRunner().run([{"json": {"data": {"error": "rate limited"}}}])
        assert _doc(result) == {"error": "rate limited"}

    def test_empty_mapping_is_not_blank(self):
        [result] = BatchRunner().run([{"json": {"data": {}}}])
        assert _doc(result) == {}

    def test_mixed_batch(self, sample_items):
        results = BatchRunner().run(sample_items)
        assert len(results) == 3
        assert _doc(results[0])["choices"][0]["message"]["tool_calls"] == []
        assert _doc(results[1])["choices"][0]["message"]["tool_calls"][0]["id"] == "call_abc"
        assert results[2].payload == {"id": 3}


class TestStrictFailures:
    """Test that strict mode aborts with located errors."""

    def test_missing_field(self, strict_options, null_response):
        items = [{"json": {"data": null_response}}, {"json": {}}]
        with pytest.raises(MissingFieldError) as exc_info:
            BatchRunner(strict_options).run(items)
        assert exc_info.value.item_index == 1
        assert exc_info.value.field_name == "data"
        assert str(exc_info.value) == 'Input field "data" not found in item 1'

    def test_parse_error(self, strict_options):
        with pytest.raises(ParseError) as exc_info:
            BatchRunner(strict_options).run([{"json": {"data": "{oops"}}])
        assert exc_info.value.item_index == 0
        assert isinstance(exc_info.value.original_error, ValueError)
        assert "Failed to parse JSON" in exc_info.value.message

    @pytest.mark.parametrize("text", ["NaN", "-Infinity", '{"choices": [], "x": Infinity}'])
    def test_non_standard_json_constants_are_parse_errors(self, strict_options, text):
        with pytest.raises(ParseError) as exc_info:
            BatchRunner(strict_options).run([{"json": {"data": text}}])
        assert exc_info.value.item_index == 0
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_huge_integer_is_invalid_structure(self, strict_options):
        with pytest.raises(InvalidStructureError) as exc_info:
            BatchRunner(strict_options).run([{"json": {"data": 10 ** 400}}])
        assert exc_info.value.item_index == 0

    def test_invalid_structure_gets_item_index(self, strict_options, null_response):
        items = [{"json": {"data": null_response}}, {"json": {"data": {"object": "list"}}}]
        with pytest.raises(InvalidStructureError) as exc_info:
            BatchRunner(strict_options).run(items)
        assert exc_info.value.item_index == 1

    def test_missing_message_gets_item_and_choice_index(self, strict_options):
        document = {"choices": [{"message": {}}, {"finish_reason": "stop"}]}
        with pytest.raises(MissingMessageError) as exc_info:
            BatchRunner(strict_options).run([{"json": {"data": document}}])
        assert exc_info.value.item_index == 0
        assert exc_info.value.choice_index == 1
        assert exc_info.value.to_dict()["choice_index"] == 1

    def test_unexpected_errors_are_wrapped(self):
        with pytest.raises(UnexpectedError) as exc_info:
            BatchRunner().run([{"json": {"data": {"choices": [{"message": {"x": {1, 2}}}]}}}])
        assert exc_info.value.item_index == 0
        assert isinstance(exc_info.value.original_error, TypeError)
        assert exc_info.value.message.startswith("Error processing item 0:")

    def test_invalid_item_shape_is_unexpected(self):
        with pytest.raises(UnexpectedError) as exc_info:
            BatchRunner().run([{"json": "not a mapping"}])
        assert exc_info.value.item_index == 0

    def test_runtime_errors_from_normalizer_are_wrapped(self, strict_options):
        with patch(
            "litellm_formatter.batch.runner.try_normalize_response",
            side_effect=RuntimeError("boom")
        ):
            with pytest.raises(UnexpectedError, match="boom"):
                BatchRunner(strict_options).run([{"json": {"data": {"choices": []}}}])

    def test_failure_stops_processing(self, strict_options):
        items = [{"json": {}}, {"json": {"data": {"choices": []}}}]
        with patch("litellm_formatter.batch.runner.try_normalize_response") as mock_normalize:
            with pytest.raises(MissingFieldError):
                BatchRunner(strict_options).run(items)
        mock_normalize.assert_not_called()


class TestBatchPolicy:
    """Test process-all versus first-only."""

    def test_first_only_passes_rest_through_in_order(self, null_response):
        items = [
            BatchItem(payload={"data": null_response}),
            BatchItem(payload={"data": null_response, "n": 2}),
            BatchItem(payload={"n": 3}),
        ]
        results = BatchRunner(FormatterOptions(processAllItems=False)).run(items)
        assert len(results) == 3
        assert _doc(results[0])["choices"][0]["message"]["tool_calls"] == []
        assert results[1] is items[1]
        assert results[2] is items[2]

    def test_first_only_does_not_validate_rest_in_strict_mode(self, null_response):
        options = FormatterOptions(processAllItems=False, strictMode=True)
        items = [{"json": {"data": null_response}}, {"json": {}}, {"json": {"data": "{bad"}}]
        results = BatchRunner(options).run(items)
        assert [r.payload for r in results[1:]] == [{}, {"data": "{bad"}]

    def test_process_all_handles_every_item(self, null_response):
        items = [{"json": {"data": null_response}} for _ in range(4)]
        results = BatchRunner().run(items)
        assert all(_doc(r)["choices"][0]["message"]["tool_calls"] == [] for r in results)


class TestFormatItems:
    """Test the format_items convenience function."""

    def test_defaults(self, null_response):
        [result] = format_items([{"json": {"data": null_response}}])
        assert _doc(result)["choices"][0]["message"]["annotations"] == []

    @pytest.mark.parametrize("override", [{"strictMode": True}, {"strict_mode": True}])
    def test_overrides_by_alias_or_name(self, override):
        with pytest.raises(FormatterError):
            format_items([{"json": {}}], **override)

    def test_overrides_merge_with_options(self, null_response):
        options = FormatterOptions(inputField="raw")
        [result] = format_items([{"json": {"raw": null_response}}], options, outputField="out")
        assert result.payload["out"]["choices"][0]["message"]["tool_calls"] == []


class TestBatchLogging:
    """Test structured log output of the runner."""

    def test_completion_logged(self, formatter_caplog, sample_items):
        BatchRunner().run(sample_items)
        completed = [r for r in formatter_caplog.records if "Completed batch" in r.getMessage()]
        assert len(completed) == 1
        message = completed[0].getMessage()
        assert "component=batch" in message
        assert "items=3" in message
        assert "processed=2" in message
        assert "passed_through=1" in message

    def test_pass_through_logged_at_debug(self, formatter_caplog):
        BatchRunner().run([{"json": {"data": "{bad"}}])
        assert any("not valid JSON" in r.getMessage() for r in formatter_caplog.records)

    def test_failure_logged_with_item_index(self, formatter_caplog, strict_options):
        with pytest.raises(MissingFieldError):
            BatchRunner(strict_options).run([{"json": {"data": {"choices": []}}}, {"json": {}}])
        failed = [r for r in formatter_caplog.records if "Failed batch" in r.getMessage()]
        assert len(failed) == 1
        assert "item_index=1" in failed[0].getMessage()
        assert "error_type=MissingFieldError" in failed[0].getMessage()
