"""Service-layer helpers shared by the HTTP API and the MCP server."""

from __future__ import annotations

import logging

from fastapi import HTTPException

from ..embed import EmbedRequest
from ..errors import (
    EmbedError,
    InvalidSpec,
    Malformed,
    MissingSource,
    SourceUnavailable,
    diagnostic_message,
)
from ..orchestration import DocumentRenderer, EmbedAssembler
from .model import (
    EmbedRequestBody,
    EmbedResponse,
    RenderError,
    RenderRequestBody,
    RenderResponse,
)

logger = logging.getLogger("codeembed")


def status_for_error(error: EmbedError) -> int:
    if isinstance(error, (MissingSource, Malformed)):
        return 400
    if isinstance(error, InvalidSpec):
        return 422
    if isinstance(error, SourceUnavailable):
        return 502 if error.remote else 404
    return 500


def to_http_exception(error: EmbedError) -> HTTPException:
    return HTTPException(status_code=status_for_error(error), detail=diagnostic_message(error))


async def embed_service(
    payload: EmbedRequestBody,
    assembler: EmbedAssembler,
) -> EmbedResponse:
    request = EmbedRequest(
        location=payload.location,
        lines=payload.lines,
        title=payload.title,
        language=payload.language,
    )
    try:
        result = await assembler.assemble(request)
    except EmbedError as exc:
        logger.info("Embed of %s failed: %s", payload.location, exc.message)
        raise to_http_exception(exc) from exc

    return EmbedResponse.from_result(result)


async def render_service(
    payload: RenderRequestBody,
    renderer: DocumentRenderer,
) -> RenderResponse:
    output = await renderer.render(payload.document)
    errors = [
        RenderError(block=index, kind=error.kind, message=diagnostic_message(error))
        for index, error in output.errors
    ]
    return RenderResponse(document=output.document, errors=errors)


__all__ = [
    "status_for_error",
    "to_http_exception",
    "embed_service",
    "render_service",
]
