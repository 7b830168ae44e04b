"""Pydantic models for the public API surface."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..embed import EmbedResult


class EmbedRequestBody(BaseModel):
    location: str | None = Field(
        None, description="Local store path (vault://...) or remote URL of the source"
    )
    lines: str | None = Field(
        None, description="Optional line range specification, e.g. '3,7-9'"
    )
    title: str | None = Field(None, description="Optional display title")
    language: str = Field("text", description="Language tag for the code block")


class EmbedResponse(BaseModel):
    text: str
    title: str
    language: str

    @classmethod
    def from_result(cls, result: EmbedResult) -> "EmbedResponse":
        return cls(text=result.text, title=result.title, language=result.language)


class RenderRequestBody(BaseModel):
    document: str = Field(..., description="Markdown containing embed-<lang> blocks")


class RenderError(BaseModel):
    block: int
    kind: str
    message: str


class RenderResponse(BaseModel):
    document: str
    errors: List[RenderError]


__all__ = [
    "EmbedRequestBody",
    "EmbedResponse",
    "RenderRequestBody",
    "RenderError",
    "RenderResponse",
]
