import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from mail_reflow.services.quote_parser import ParsedLine, parse_line
from mail_reflow.services.text_lines import join_lines
from mail_reflow.services.wrapper import DEFAULT_WRAP_WIDTH, wrap

logger = logging.getLogger(__name__)


class ParagraphState(enum.Enum):
    CLOSED = "closed"
    OPEN = "open"


class LineKind(enum.Enum):
    BLANK = "blank"
    SAME_DEPTH = "same_depth"
    NEW_DEPTH = "new_depth"


@dataclass
class _Reflow:
    width: int
    state: ParagraphState = ParagraphState.CLOSED
    depth: int = 0
    contents: list[str] = field(default_factory=list)
    output: list[str] = field(default_factory=list)

    def classify(self, line: ParsedLine) -> LineKind:
        if line.is_blank:
            return LineKind.BLANK
        if self.state is ParagraphState.OPEN and line.depth == self.depth:
            return LineKind.SAME_DEPTH
        return LineKind.NEW_DEPTH

    def flush(self) -> None:
        if self.state is ParagraphState.OPEN:
            self.output.extend(wrap(" ".join(self.contents), self.depth, self.width))
        self.state = ParagraphState.CLOSED
        self.contents = []

    def open(self, line: ParsedLine) -> None:
        self.state = ParagraphState.OPEN
        self.depth = line.depth
        self.contents = [line.content]

    def append(self, line: ParsedLine) -> None:
        self.contents.append(line.content)

    def blank(self, line: ParsedLine) -> None:
        self.output.extend(wrap("", line.depth, self.width))

    def close_and_blank(self, line: ParsedLine) -> None:
        self.flush()
        self.blank(line)

    def close_and_open(self, line: ParsedLine) -> None:
        self.flush()
        self.open(line)


_Transition = Callable[[_Reflow, ParsedLine], None]

TRANSITIONS: dict[tuple[ParagraphState, LineKind], _Transition] = {
    (ParagraphState.CLOSED, LineKind.BLANK): _Reflow.blank,
    (ParagraphState.CLOSED, LineKind.NEW_DEPTH): _Reflow.open,
    (ParagraphState.OPEN, LineKind.BLANK): _Reflow.close_and_blank,
    (ParagraphState.OPEN, LineKind.SAME_DEPTH): _Reflow.append,
    (ParagraphState.OPEN, LineKind.NEW_DEPTH): _Reflow.close_and_open,
}


def reformat_lines(lines: Iterable[str], width: int = DEFAULT_WRAP_WIDTH) -> list[str]:
    reflow = _Reflow(width=width)
    for raw in lines:
        parsed = parse_line(raw)
        TRANSITIONS[(reflow.state, reflow.classify(parsed))](reflow, parsed)
    reflow.flush()
    return reflow.output


def reformat(lines: Iterable[str], width: int = DEFAULT_WRAP_WIDTH) -> str:
    """Re-flow quoted paragraphs, one trailing newline per output line."""
    output = reformat_lines(lines, width)
    logger.debug("Reformatted body", extra={"event": "body_reformatted", "output_lines": len(output)})
    return join_lines(output)
