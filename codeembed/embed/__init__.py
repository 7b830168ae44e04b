"""Request and result models for embeds."""

from .model import EmbedRequest, EmbedResult

__all__ = ["EmbedRequest", "EmbedResult"]
