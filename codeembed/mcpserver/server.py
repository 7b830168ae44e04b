"""FastMCP server exposing source embedding as an MCP tool."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from ..config import EmbedSettings
from ..embed import EmbedRequest
from ..errors import EmbedError, diagnostic_message
from ..orchestration import EmbedAssembler

logger = logging.getLogger("codeembed")


class ServiceContext:
    """Lazy dependency container for MCP tool handlers."""

    def __init__(self) -> None:
        self._settings: EmbedSettings | None = None
        self._assembler: EmbedAssembler | None = None

    @property
    def settings(self) -> EmbedSettings:
        if self._settings is None:
            self._settings = EmbedSettings.from_env()
        return self._settings

    def assembler(self) -> EmbedAssembler:
        if self._assembler is None:
            self._assembler = EmbedAssembler.from_settings(self.settings)
        return self._assembler


async def embed_source_tool(
    services: ServiceContext,
    location: str,
    lines: str | None = None,
    title: str | None = None,
    language: str = "text",
) -> Dict[str, Any]:
    request = EmbedRequest(location=location, lines=lines, title=title, language=language)
    try:
        result = await services.assembler().assemble(request)
    except EmbedError as exc:
        raise ToolError(diagnostic_message(exc)) from exc
    return result.model_dump()


def create_server(services: ServiceContext | None = None) -> FastMCP:
    """Create a FastMCP server wired to the embed assembler."""

    services = services or ServiceContext()
    server = FastMCP("Code Embed MCP Server")

    @server.tool(
        name="embed_source",
        description=(
            "Return lines of a source file. `location` is either a local store path"
            " prefixed with the local scheme (vault:// by default) or an http(s) URL."
            " `lines` selects lines with a compact range such as '3,7-9'; omit it to"
            " return the whole file."
        ),
        tags={"embed", "source"},
    )
    async def embed_source(
        location: str,
        lines: str | None = None,
        title: str | None = None,
        language: str = "text",
    ) -> Dict[str, Any]:
        """Resolve a source and return the selected lines with their title."""
        return await embed_source_tool(
            services, location, lines=lines, title=title, language=language
        )

    return server


mcp = create_server()

__all__ = ["mcp", "create_server", "embed_source_tool", "ServiceContext"]
