import asyncio

import httpx
import pytest

from codeembed.config import EmbedSettings
from codeembed.embed import EmbedRequest
from codeembed.errors import InvalidSpec, MissingSource, SourceUnavailable
from codeembed.orchestration import EmbedAssembler
from codeembed.source import LocalStore, RemoteFetcher, SourceResolver


SOURCE = "line1\nline2\nline3\nline4"


def _make_assembler(tmp_path, handler=None):
    (tmp_path / "src.txt").write_text(SOURCE, encoding="utf-8")

    def default_handler(request):
        return httpx.Response(200, text=SOURCE)

    transport = httpx.MockTransport(handler or default_handler)
    resolver = SourceResolver(LocalStore(tmp_path), RemoteFetcher(transport=transport))
    return EmbedAssembler(resolver)


@pytest.mark.asyncio
async def test_local_source_with_line_ranges(tmp_path):
    assembler = _make_assembler(tmp_path)

    result = await assembler.assemble(EmbedRequest(location="vault://src.txt", lines="2,4"))

    assert result.text == "line2\nline4"


@pytest.mark.asyncio
async def test_without_ranges_the_whole_source_is_kept(tmp_path):
    assembler = _make_assembler(tmp_path)

    result = await assembler.assemble(EmbedRequest(location="vault://src.txt"))

    assert result.text == SOURCE


@pytest.mark.asyncio
async def test_blank_range_keeps_whole_source(tmp_path):
    assembler = _make_assembler(tmp_path)

    result = await assembler.assemble(EmbedRequest(location="vault://src.txt", lines="  "))

    assert result.text == SOURCE


@pytest.mark.asyncio
async def test_remote_source(tmp_path):
    assembler = _make_assembler(tmp_path)

    result = await assembler.assemble(
        EmbedRequest(location="https://example.com/src.txt", lines="3-9", language="python")
    )

    assert result.text == "line3\nline4"
    assert result.language == "python"


@pytest.mark.asyncio
async def test_title_falls_back_to_location(tmp_path):
    assembler = _make_assembler(tmp_path)

    untitled = await assembler.assemble(EmbedRequest(location="vault://src.txt"))
    blank = await assembler.assemble(EmbedRequest(location="vault://src.txt", title=" "))
    titled = await assembler.assemble(EmbedRequest(location="vault://src.txt", title="Example"))

    assert untitled.title == "vault://src.txt"
    assert blank.title == "vault://src.txt"
    assert titled.title == "Example"


@pytest.mark.asyncio
@pytest.mark.parametrize("location", [None, "", "   "])
async def test_missing_location(tmp_path, location):
    assembler = _make_assembler(tmp_path)

    with pytest.raises(MissingSource):
        await assembler.assemble(EmbedRequest(location=location, lines="1"))


@pytest.mark.asyncio
async def test_unresolved_local_path(tmp_path):
    assembler = _make_assembler(tmp_path)

    with pytest.raises(SourceUnavailable):
        await assembler.assemble(EmbedRequest(location="vault://missing.txt"))


@pytest.mark.asyncio
@pytest.mark.parametrize("spec", ["2-", "0", "5-2"])
async def test_invalid_spec_after_successful_resolution(tmp_path, spec):
    assembler = _make_assembler(tmp_path)

    with pytest.raises(InvalidSpec) as excinfo:
        await assembler.assemble(EmbedRequest(location="vault://src.txt", lines=spec))

    assert excinfo.value.spec == spec


@pytest.mark.asyncio
async def test_source_failure_wins_over_invalid_spec(tmp_path):
    assembler = _make_assembler(tmp_path)

    with pytest.raises(SourceUnavailable):
        await assembler.assemble(EmbedRequest(location="vault://missing.txt", lines="2-"))


@pytest.mark.asyncio
async def test_remote_failure_wins_over_invalid_spec(tmp_path):
    assembler = _make_assembler(tmp_path, lambda request: httpx.Response(503))

    with pytest.raises(SourceUnavailable) as excinfo:
        await assembler.assemble(EmbedRequest(location="https://example.com/a", lines="2-"))

    assert excinfo.value.remote is True


@pytest.mark.asyncio
async def test_concurrent_requests_are_independent(tmp_path):
    assembler = _make_assembler(tmp_path)
    specs = ["1", "2", "3", "4", "1-4"]

    results = await asyncio.gather(
        *(assembler.assemble(EmbedRequest(location="vault://src.txt", lines=spec)) for spec in specs)
    )

    assert [result.text for result in results] == [
        "line1",
        "line2",
        "line3",
        "line4",
        SOURCE,
    ]


def test_assemble_sync(tmp_path):
    assembler = _make_assembler(tmp_path)

    result = assembler.assemble_sync(EmbedRequest(location="vault://src.txt", lines="4"))

    assert result.text == "line4"


def test_from_settings_uses_store_root_and_scheme(tmp_path):
    (tmp_path / "a.py").write_text("a\nb\n", encoding="utf-8")
    settings = EmbedSettings(store_root=str(tmp_path), local_scheme="local:")
    assembler = EmbedAssembler.from_settings(settings)

    result = assembler.assemble_sync(EmbedRequest(location="local:a.py", lines="2"))

    assert result.text == "b"
