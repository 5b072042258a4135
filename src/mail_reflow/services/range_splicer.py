import logging
from dataclasses import dataclass

from mail_reflow.services.reformat import reformat
from mail_reflow.services.text_lines import split_editor_lines
from mail_reflow.services.wrapper import DEFAULT_WRAP_WIDTH

logger = logging.getLogger(__name__)


class InvalidRangeError(ValueError):
    """A range does not fit the document it was applied to."""


@dataclass(frozen=True)
class Position:
    line: int
    character: int


@dataclass(frozen=True)
class TextRange:
    start: Position
    end: Position


@dataclass(frozen=True)
class RangeSlice:
    lines: list[str]
    leading_blanks: int
    trailing_blanks: int

    @property
    def has_content(self) -> bool:
        return any(line.strip() for line in self.lines)


def _count_blanks(lines: list[str]) -> int:
    count = 0
    for line in lines:
        if line:
            break
        count += 1
    return count


def _validate(text_range: TextRange) -> None:
    start, end = text_range.start, text_range.end
    for name, position in (("start", start), ("end", end)):
        if position.line < 0 or position.character < 0:
            raise InvalidRangeError(f"{name} position {position.line}:{position.character} is negative")
    if (end.line, end.character) < (start.line, start.character):
        raise InvalidRangeError(
            f"range end {end.line}:{end.character} precedes start {start.line}:{start.character}"
        )


def extract_range(text: str, text_range: TextRange) -> RangeSlice | None:
    """Cut the selected lines out of ``text``, truncating the first and last line.

    Returns None when the range covers no lines. The empty line after a final
    newline is addressable; an end line past it selects through the end of
    the document.
    """
    _validate(text_range)
    start, end = text_range.start, text_range.end
    document_lines = split_editor_lines(text)
    selected = document_lines[start.line : end.line + 1]
    if not selected:
        return None

    last = len(selected) - 1
    if end.line < len(document_lines):
        if end.character > len(selected[last]):
            raise InvalidRangeError(
                f"end character {end.character} is beyond line {end.line} "
                f"of length {len(selected[last])}"
            )
        selected[last] = selected[last][: end.character]
    if start.character > len(document_lines[start.line]):
        raise InvalidRangeError(
            f"start character {start.character} is beyond line {start.line} "
            f"of length {len(document_lines[start.line])}"
        )
    selected[0] = selected[0][start.character :]

    return RangeSlice(
        lines=selected,
        leading_blanks=_count_blanks(selected),
        trailing_blanks=_count_blanks(selected[::-1]),
    )


def format_range(text: str, text_range: TextRange, width: int = DEFAULT_WRAP_WIDTH) -> str | None:
    """Reformat the selection and restore the blank padding at its edges."""
    selection = extract_range(text, text_range)
    if selection is None or not selection.has_content:
        return None

    reformatted = reformat(selection.lines, width).strip()
    logger.debug(
        "Reformatted range",
        extra={
            "event": "range_reformatted",
            "leading_blanks": selection.leading_blanks,
            "trailing_blanks": selection.trailing_blanks,
        },
    )
    return "\n" * selection.leading_blanks + reformatted + "\n" * selection.trailing_blanks
