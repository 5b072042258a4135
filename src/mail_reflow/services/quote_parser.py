from dataclasses import dataclass

QUOTE_MARKER = ">"


@dataclass(frozen=True)
class ParsedLine:
    depth: int
    content: str

    @property
    def is_blank(self) -> bool:
        return not self.content


def parse_line(raw: str) -> ParsedLine:
    """Count leading ``>`` markers (spaces between them are ignored) and strip the rest."""
    depth = 0
    index = 0
    for index, char in enumerate(raw):
        if char == QUOTE_MARKER:
            depth += 1
        elif char != " ":
            break
    else:
        return ParsedLine(depth=depth, content="")
    return ParsedLine(depth=depth, content=raw[index:].strip())
