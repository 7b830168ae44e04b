import pytest
from fastmcp.exceptions import ToolError

from codeembed.config import EmbedSettings
from codeembed.mcpserver.server import ServiceContext, embed_source_tool


@pytest.fixture
def services(tmp_path):
    (tmp_path / "a.txt").write_text("alpha\nbeta\n", encoding="utf-8")
    context = ServiceContext()
    context._settings = EmbedSettings(store_root=str(tmp_path))
    return context


@pytest.mark.asyncio
async def test_embed_source_returns_result_dict(services):
    result = await embed_source_tool(services, "vault://a.txt", lines="2")

    assert result == {"text": "beta", "title": "vault://a.txt", "language": "text"}


@pytest.mark.asyncio
async def test_embed_errors_become_tool_errors(services):
    with pytest.raises(ToolError, match="invalid line range"):
        await embed_source_tool(services, "vault://a.txt", lines="0")
