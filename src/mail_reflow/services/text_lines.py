def split_lines(text: str) -> list[str]:
    """Split text into lines without terminators.

    Only ``\\n`` separates lines; one trailing ``\\r`` is dropped from each line
    and a final newline does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def join_lines(lines: list[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


def split_editor_lines(text: str) -> list[str]:
    """Split text the way an editor addresses it.

    Unlike :func:`split_lines`, the empty line after a final newline is kept,
    so every ``(line, character)`` position in the document has a line.
    """
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
