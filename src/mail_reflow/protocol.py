"""Request and response bodies for the document-formatting endpoints.

Field names follow the editor protocol's camelCase on the wire.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mail_reflow.services.formatter import TextEdit
from mail_reflow.services.range_splicer import Position, TextRange


class _ProtocolModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PositionModel(_ProtocolModel):
    line: int = Field(ge=0)
    character: int = Field(ge=0)

    def to_position(self) -> Position:
        return Position(line=self.line, character=self.character)


class RangeModel(_ProtocolModel):
    start: PositionModel
    end: PositionModel

    def to_range(self) -> TextRange:
        return TextRange(start=self.start.to_position(), end=self.end.to_position())

    @classmethod
    def from_range(cls, text_range: TextRange) -> "RangeModel":
        return cls(
            start=PositionModel(line=text_range.start.line, character=text_range.start.character),
            end=PositionModel(line=text_range.end.line, character=text_range.end.character),
        )


class TextDocumentIdentifier(_ProtocolModel):
    uri: str


class TextDocumentItem(TextDocumentIdentifier):
    text: str
    language_id: str = "mail"
    version: int = 0


class VersionedTextDocumentIdentifier(TextDocumentIdentifier):
    version: int = 0


class ContentChange(_ProtocolModel):
    text: str


class DidOpenParams(_ProtocolModel):
    text_document: TextDocumentItem


class DidChangeParams(_ProtocolModel):
    text_document: VersionedTextDocumentIdentifier
    content_changes: list[ContentChange] = Field(min_length=1)


class DidCloseParams(_ProtocolModel):
    text_document: TextDocumentIdentifier


class DocumentFormattingParams(_ProtocolModel):
    text_document: TextDocumentIdentifier
    options: dict[str, Any] = Field(default_factory=dict)


class DocumentRangeFormattingParams(DocumentFormattingParams):
    range: RangeModel


class TextEditModel(_ProtocolModel):
    range: RangeModel
    new_text: str

    @classmethod
    def from_edit(cls, edit: TextEdit) -> "TextEditModel":
        return cls(range=RangeModel.from_range(edit.range), new_text=edit.new_text)


def serialize_edits(edits: list[TextEdit] | None) -> list[dict[str, Any]] | None:
    if edits is None:
        return None
    return [TextEditModel.from_edit(edit).model_dump(by_alias=True) for edit in edits]
