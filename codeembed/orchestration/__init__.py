"""Orchestration components for assembling embeds and rendering documents."""

from .assembler import EmbedAssembler
from .document import DocumentRenderer, RenderOutput

__all__ = ["EmbedAssembler", "DocumentRenderer", "RenderOutput"]
