import logging

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from mail_reflow.config import get_settings
from mail_reflow.protocol import (
    DidChangeParams,
    DidCloseParams,
    DidOpenParams,
    DocumentFormattingParams,
    DocumentRangeFormattingParams,
    serialize_edits,
)
from mail_reflow.services.document_store import DocumentStore
from mail_reflow.services.formatter import FormattingService
from mail_reflow.services.logging_config import configure_logging
from mail_reflow.services.range_splicer import InvalidRangeError

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

store = DocumentStore()
formatting_service = FormattingService(settings, store)

app = FastAPI(title="Mail Reflow", version=settings.server_version)


@app.on_event("startup")
def startup() -> None:
    logger.info(
        "Application startup complete",
        extra={"event": "startup_complete", "wrap_width": settings.wrap_width},
    )


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "env": settings.app_env}


@app.post("/initialize")
def initialize() -> JSONResponse:
    return JSONResponse(
        {
            "capabilities": {
                "textDocumentSync": "full",
                "documentFormattingProvider": True,
                "documentRangeFormattingProvider": True,
            },
            "serverInfo": {"name": settings.server_name, "version": settings.server_version},
        }
    )


@app.post("/documents/did-open")
def did_open(params: DidOpenParams) -> JSONResponse:
    formatting_service.notify_open(params.text_document.uri, params.text_document.text)
    return JSONResponse({"status": "ok"})


@app.post("/documents/did-change")
def did_change(params: DidChangeParams) -> JSONResponse:
    # Full-document sync: the last change carries the whole text.
    formatting_service.notify_change(params.text_document.uri, params.content_changes[-1].text)
    return JSONResponse({"status": "ok"})


@app.post("/documents/did-close")
def did_close(params: DidCloseParams) -> JSONResponse:
    formatting_service.notify_close(params.text_document.uri)
    return JSONResponse({"status": "ok"})


@app.post("/documents/formatting")
def formatting(params: DocumentFormattingParams) -> JSONResponse:
    edits = formatting_service.format_whole(params.text_document.uri)
    return JSONResponse(serialize_edits(edits))


@app.post("/documents/range-formatting")
def range_formatting(params: DocumentRangeFormattingParams) -> JSONResponse:
    try:
        edits = formatting_service.format_range(params.text_document.uri, params.range.to_range())
    except InvalidRangeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return JSONResponse(serialize_edits(edits))
