"""
Example: Formatting LiteLLM Output

This example shows the normalizer on its own and the batch runner over
workflow items, in lenient and strict mode.
"""

import json
import logging

from litellm_formatter import (
    BatchRunner,
    FormatterError,
    FormatterOptions,
    normalize_response,
)


LITELLM_RESPONSE = {
    "id": "chatcmpl-abc",
    "model": "gpt-4o-mini",
    "choices": [
        {
            "index": 0,
            "finish_reason": "stop",
            "message": {
                "role": "assistant",
                "content": "Paris is the capital of France.",
                "tool_calls": None,
                "function_call": None,
                "annotations": None,
            },
        }
    ],
}


def example_single_document():
    """Normalize one response document."""
    print("=== Single document ===\n")
    formatted = normalize_response(LITELLM_RESPONSE)
    print(json.dumps(formatted["choices"][0]["message"], indent=2))


def example_batch():
    """Format workflow items, passing unusable ones through."""
    print("\n=== Lenient batch ===\n")
    items = [
        {"json": {"data": json.dumps(LITELLM_RESPONSE), "request_id": "r1"}},
        {"json": {"request_id": "r2"}},
        {"json": {"data": "not json", "request_id": "r3"}},
    ]
    runner = BatchRunner(FormatterOptions(outputField="formatted"))
    for item in runner.run_raw(items):
        print(item["json"].get("request_id"), "->", "formatted" in item["json"])


def example_strict():
    """Strict mode aborts on the first bad record."""
    print("\n=== Strict batch ===\n")
    items = [
        {"json": {"data": LITELLM_RESPONSE}},
        {"json": {"data": {"choices": [{"finish_reason": "length"}]}}},
    ]
    try:
        BatchRunner(FormatterOptions(strictMode=True)).run(items)
    except FormatterError as e:
        print(f"{type(e).__name__}: {e.message}")
        print(f"  details: {e.to_dict()}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    example_single_document()
    example_batch()
    example_strict()
