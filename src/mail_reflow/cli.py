from __future__ import annotations

import argparse
import re
import sys

from mail_reflow.config import MIN_WRAP_WIDTH, get_settings
from mail_reflow.services.logging_config import configure_logging
from mail_reflow.services.range_splicer import InvalidRangeError, Position, TextRange, format_range
from mail_reflow.services.reformat import reformat
from mail_reflow.services.segmenter import format_document
from mail_reflow.services.text_lines import split_lines

RANGE_PATTERN = re.compile(r"(?P<sl>\d+):(?P<sc>\d+)-(?P<el>\d+):(?P<ec>\d+)")

EXIT_OK = 0
EXIT_NO_CHANGE = 1
EXIT_INVALID_RANGE = 2


def parse_range(value: str) -> TextRange:
    match = RANGE_PATTERN.fullmatch(value.strip())
    if not match:
        raise argparse.ArgumentTypeError(f"expected START_LINE:START_CHAR-END_LINE:END_CHAR, got '{value}'")
    return TextRange(
        start=Position(int(match.group("sl")), int(match.group("sc"))),
        end=Position(int(match.group("el")), int(match.group("ec"))),
    )


def parse_width(value: str) -> int:
    width = int(value)
    if width <= MIN_WRAP_WIDTH:
        raise argparse.ArgumentTypeError(f"width must be greater than {MIN_WRAP_WIDTH}")
    return width


def _run(text: str, args: argparse.Namespace, width: int) -> tuple[int, str]:
    if args.range is not None:
        try:
            replacement = format_range(text, args.range, width)
        except InvalidRangeError as exc:
            return EXIT_INVALID_RANGE, f"invalid range: {exc}\n"
        if replacement is None:
            return EXIT_NO_CHANGE, ""
        return EXIT_OK, replacement
    if args.body_only:
        return EXIT_OK, reformat(split_lines(text), width)
    return EXIT_OK, format_document(text, width)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Re-flow quoted plain-text email.")
    parser.add_argument("path", nargs="?", default="-", help="Message file to format, '-' for stdin.")
    parser.add_argument(
        "--range",
        type=parse_range,
        default=None,
        help="Format only START_LINE:START_CHAR-END_LINE:END_CHAR (zero-based) and print the replacement.",
    )
    parser.add_argument("--width", type=parse_width, default=None, help="Override the configured wrap width.")
    parser.add_argument(
        "--body-only",
        action="store_true",
        help="Treat the whole input as body text (no header or signature detection).",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level, stream=sys.stderr)
    width = args.width or settings.wrap_width

    if args.path == "-":
        text = sys.stdin.read()
    else:
        with open(args.path, encoding="utf-8") as handle:
            text = handle.read()

    code, output = _run(text, args, width)
    stream = sys.stderr if code == EXIT_INVALID_RANGE else sys.stdout
    stream.write(output)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
