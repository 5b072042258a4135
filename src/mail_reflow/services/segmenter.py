import enum
from dataclasses import dataclass, field

from mail_reflow.services.reformat import reformat
from mail_reflow.services.text_lines import join_lines, split_lines
from mail_reflow.services.wrapper import DEFAULT_WRAP_WIDTH

SIGNATURE_DELIMITERS = frozenset({"--", "-- "})


class Section(enum.Enum):
    HEADER = "header"
    BODY = "body"
    SIGNATURE = "signature"


@dataclass
class DocumentSections:
    header: list[str] = field(default_factory=list)
    body: list[str] = field(default_factory=list)
    signature: list[str] = field(default_factory=list)

    @property
    def header_text(self) -> str:
        return join_lines(self.header)

    @property
    def body_text(self) -> str:
        return join_lines(self.body)

    @property
    def signature_text(self) -> str:
        return join_lines(self.signature)

    def lines(self) -> list[str]:
        return [*self.header, *self.body, *self.signature]


def _next_section(section: Section, line: str) -> Section:
    if section is Section.HEADER and line == "":
        return Section.BODY
    if section is Section.BODY and line in SIGNATURE_DELIMITERS:
        return Section.SIGNATURE
    return section


def split_document(text: str) -> DocumentSections:
    """Split a message into header, body and signature line runs.

    The header runs through the first empty line (inclusive). The signature
    starts at a line that is exactly ``--`` or ``-- `` and includes it.
    """
    sections = DocumentSections()
    targets = {
        Section.HEADER: sections.header,
        Section.BODY: sections.body,
        Section.SIGNATURE: sections.signature,
    }
    section = Section.HEADER
    for line in split_lines(text):
        if section is Section.BODY:
            section = _next_section(section, line)
            targets[section].append(line)
            continue
        targets[section].append(line)
        section = _next_section(section, line)
    return sections


def format_document(text: str, width: int = DEFAULT_WRAP_WIDTH) -> str:
    sections = split_document(text)
    return sections.header_text + reformat(sections.body, width) + sections.signature_text
