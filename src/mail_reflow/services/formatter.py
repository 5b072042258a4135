from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mail_reflow.services.range_splicer import InvalidRangeError, Position, TextRange, format_range
from mail_reflow.services.segmenter import format_document

if TYPE_CHECKING:
    from mail_reflow.config import Settings
    from mail_reflow.services.document_store import DocumentStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextEdit:
    range: TextRange
    new_text: str


def document_end(text: str) -> Position:
    """Position just past the last character of ``text``."""
    segments = text.split("\n")
    return Position(line=len(segments) - 1, character=len(segments[-1]))


class FormattingService:
    def __init__(self, settings: "Settings", store: "DocumentStore") -> None:
        self.settings = settings
        self.store = store

    def notify_open(self, document_id: str, text: str) -> None:
        self.store.open(document_id, text)
        logger.info(
            "Document opened",
            extra={"event": "document_opened", "document_id": document_id, "length": len(text)},
        )

    def notify_change(self, document_id: str, text: str) -> None:
        self.store.replace(document_id, text)
        logger.info(
            "Document changed",
            extra={"event": "document_changed", "document_id": document_id, "length": len(text)},
        )

    def notify_close(self, document_id: str) -> None:
        known = self.store.close(document_id)
        logger.info(
            "Document closed",
            extra={"event": "document_closed", "document_id": document_id, "known": known},
        )

    def _snapshot(self, document_id: str) -> str | None:
        text = self.store.get(document_id)
        if text is None:
            logger.warning(
                "Formatting requested for unknown document",
                extra={"event": "format_unknown_document", "document_id": document_id},
            )
        return text

    def format_whole(self, document_id: str) -> list[TextEdit] | None:
        text = self._snapshot(document_id)
        if text is None:
            return None

        new_text = format_document(text, self.settings.wrap_width)
        edit = TextEdit(range=TextRange(start=Position(0, 0), end=document_end(text)), new_text=new_text)
        logger.info(
            "Formatted document",
            extra={
                "event": "format_whole_completed",
                "document_id": document_id,
                "changed": new_text != text,
            },
        )
        return [edit]

    def format_range(self, document_id: str, text_range: TextRange) -> list[TextEdit] | None:
        text = self._snapshot(document_id)
        if text is None:
            return None

        try:
            new_text = format_range(text, text_range, self.settings.wrap_width)
        except InvalidRangeError as exc:
            logger.warning(
                "Rejected formatting range",
                extra={"event": "format_invalid_range", "document_id": document_id, "error": str(exc)},
            )
            raise

        if new_text is None:
            logger.info(
                "Range has nothing to format",
                extra={"event": "format_range_no_change", "document_id": document_id},
            )
            return None

        logger.info(
            "Formatted range",
            extra={
                "event": "format_range_completed",
                "document_id": document_id,
                "start_line": text_range.start.line,
                "end_line": text_range.end.line,
            },
        )
        return [TextEdit(range=text_range, new_text=new_text)]
