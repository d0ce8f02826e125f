"""CLI entry point for the LiteLLM formatter."""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, TextIO

from dotenv import load_dotenv
from pydantic import ValidationError

from .batch.runner import BatchRunner
from .errors import FormatterError
from .models.options import FormatterOptions


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="litellm-formatter",
        description="Replace null tool_calls/function_call/annotations in LiteLLM responses"
    )
    parser.add_argument('input', nargs='?', default='-',
                        help='Input file with items (default: stdin)')
    parser.add_argument('-o', '--output', default='-',
                        help='Output file (default: stdout)')
    parser.add_argument('--input-field', default=None,
                        help='Field containing the LiteLLM response (default: data)')
    parser.add_argument('--output-field', default=None,
                        help='Field receiving the formatted response (default: data)')
    parser.add_argument('--first-only', action='store_true', default=None,
                        help='Only process the first item, pass the rest through')
    parser.add_argument('--strict', action='store_true', default=None,
                        help='Fail on unexpected input instead of passing it through')
    parser.add_argument('--raw', action='store_true',
                        help='Treat each input value as a bare response document')
    parser.add_argument('--jsonl', action='store_true',
                        help='Read and write one JSON value per line')
    parser.add_argument('--indent', type=int, default=None,
                        help='Indentation for JSON array output')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable debug logging')
    return parser


def read_values(stream: TextIO, jsonl: bool) -> List[Any]:
    """Read input values from a JSON document or JSON Lines stream."""
    if jsonl:
        return [json.loads(line) for line in stream if line.strip()]

    data = json.load(stream)
    if isinstance(data, list):
        return data
    return [data]


def write_values(stream: TextIO, values: List[Any], jsonl: bool, indent: Optional[int] = None):
    """Write output values as a JSON array or JSON Lines."""
    if jsonl:
        for value in values:
            stream.write(json.dumps(value) + "\n")
    else:
        json.dump(values, stream, indent=indent)
        stream.write("\n")


def format_values(values: List[Any], options: FormatterOptions, raw: bool = False) -> List[Any]:
    """
    Run the batch runner over CLI input values.

    In raw mode every value is a response document: it is wrapped into an
    item under the input field and only the formatted document is returned.
    """
    runner = BatchRunner(options)

    if not raw:
        return runner.run_raw(values)

    items = [{"json": {options.input_field: value}} for value in values]
    results = runner.run(items)
    return [
        item.payload.get(options.output_field, item.payload.get(options.input_field))
        for item in results
    ]


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s %(message)s"
    )

    try:
        options = FormatterOptions.from_env(
            input_field=args.input_field,
            output_field=args.output_field,
            process_all_items=False if args.first_only else None,
            strict_mode=args.strict
        )
    except (ValidationError, ValueError) as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 2

    try:
        if args.input == '-':
            values = read_values(sys.stdin, args.jsonl)
        else:
            with open(args.input, encoding='utf-8') as fh:
                values = read_values(fh, args.jsonl)
    except (OSError, ValueError) as e:
        print(f"Could not read input: {e}", file=sys.stderr)
        return 2

    try:
        results = format_values(values, options, raw=args.raw)
    except FormatterError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.output == '-':
        write_values(sys.stdout, results, args.jsonl, args.indent)
    else:
        with open(args.output, 'w', encoding='utf-8') as fh:
            write_values(fh, results, args.jsonl, args.indent)

    return 0


if __name__ == "__main__":
    sys.exit(main())
