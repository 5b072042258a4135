import re
import textwrap

DEFAULT_WRAP_WIDTH = 78

# Wrapping is ASCII-whitespace based; str.split() would also break on Unicode spaces.
_ASCII_WHITESPACE_RE = re.compile(r"[ \t\n\r\x0b\x0c]+")


def quote_prefix(depth: int) -> str:
    return "> " * depth


def split_words(content: str) -> list[str]:
    return [word for word in _ASCII_WHITESPACE_RE.split(content) if word]


def wrap(content: str, depth: int, width: int = DEFAULT_WRAP_WIDTH) -> list[str]:
    """Greedily re-flow ``content`` into lines of at most ``width`` columns.

    Every line starts with the quote prefix for ``depth`` and the prefix counts
    against the budget. A word that does not fit on a fresh line is emitted
    alone and overruns the budget. Empty content yields a single bare prefix
    line so quoted blank lines survive; its trailing space is trimmed, so a
    blank line at depth 1 is ``>`` rather than ``> ``.
    """
    prefix = quote_prefix(depth)
    # TextWrapper keeps runs of spaces between words, so collapse them first.
    lines = textwrap.wrap(
        " ".join(split_words(content)),
        width,
        initial_indent=prefix,
        subsequent_indent=prefix,
        break_long_words=False,
        break_on_hyphens=False,
    )
    if not lines:
        return [prefix.rstrip()]
    return [line.rstrip() for line in lines]
