"""FastAPI routes for embedding source excerpts."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from ..config import EmbedSettings
from ..orchestration import DocumentRenderer, EmbedAssembler
from .model import EmbedRequestBody, EmbedResponse, RenderRequestBody, RenderResponse
from .service import embed_service, render_service


def get_settings(request: Request) -> EmbedSettings:
    settings = getattr(request.app.state, "settings", None)
    if not isinstance(settings, EmbedSettings):
        raise RuntimeError("API settings have not been initialised")
    return settings


def get_assembler(
    request: Request,
    settings: EmbedSettings = Depends(get_settings),
) -> EmbedAssembler:
    assembler = getattr(request.app.state, "assembler", None)
    if assembler is None:
        assembler = EmbedAssembler.from_settings(settings)
        request.app.state.assembler = assembler
    return assembler


def get_renderer(
    settings: EmbedSettings = Depends(get_settings),
    assembler: EmbedAssembler = Depends(get_assembler),
) -> DocumentRenderer:
    return DocumentRenderer(
        assembler,
        languages=settings.languages,
        max_concurrency=settings.max_concurrency,
    )


router = APIRouter()


@router.post("/embed", response_model=EmbedResponse)
async def embed(
    payload: EmbedRequestBody,
    assembler: EmbedAssembler = Depends(get_assembler),
) -> EmbedResponse:
    return await embed_service(payload, assembler)


@router.post("/render", response_model=RenderResponse)
async def render(
    payload: RenderRequestBody,
    renderer: DocumentRenderer = Depends(get_renderer),
) -> RenderResponse:
    """Render every embed block of a Markdown document."""

    return await render_service(payload, renderer)


__all__ = ["router", "get_settings", "get_assembler", "get_renderer"]
