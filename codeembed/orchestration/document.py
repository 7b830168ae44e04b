"""Render ``embed-<lang>`` blocks inside a Markdown document."""

from __future__ import annotations

import asyncio
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

import yaml

from ..config import DEFAULT_LANGUAGES
from ..embed import EmbedRequest, EmbedResult
from ..errors import EmbedError, Malformed, diagnostic_message
from ..exception_handler import ErrorHandler
from .assembler import EmbedAssembler

logger = logging.getLogger("codeembed")

_EMBED_BLOCK = re.compile(
    r"^(?P<fence>`{3,}|~{3,})[ \t]*embed-(?P<lang>[\w+#.-]+)[ \t]*\n"
    r"(?P<body>.*?)"
    r"^(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
_BACKTICK_RUN = re.compile(r"`+")
_TITLED_FENCE = re.compile(
    r'^(?P<fence>`{3,}|~{3,})(?P<info>[^\n`]*?)[ \t]*TITLE:[ \t]*"(?P<title>[^"]*)"[^\n]*$',
    re.MULTILINE | re.IGNORECASE,
)


@dataclass(slots=True)
class EmbedBlock:
    """An embed block found in a document."""

    index: int
    language: str
    body: str
    start: int
    end: int


@dataclass(slots=True)
class RenderOutput:
    """Rendered document text plus the failures encountered on the way."""

    document: str
    errors: List[Tuple[int, EmbedError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def find_embed_blocks(document: str, languages: Iterable[str] = DEFAULT_LANGUAGES) -> List[EmbedBlock]:
    """Return the embed blocks for supported languages, in document order."""
    supported = set(languages)
    blocks: List[EmbedBlock] = []
    for match in _EMBED_BLOCK.finditer(document):
        language = match.group("lang")
        if language not in supported:
            continue
        blocks.append(
            EmbedBlock(
                index=len(blocks) + 1,
                language=language,
                body=match.group("body"),
                start=match.start(),
                end=match.end(),
            )
        )
    return blocks


def parse_block_metadata(block: EmbedBlock) -> EmbedRequest:
    """Read the YAML metadata of an embed block into a request.

    Raises:
        Malformed: If the body is not valid YAML or has the wrong shape.
    """
    try:
        metadata = yaml.safe_load(block.body)
    except yaml.YAMLError as exc:
        raise Malformed() from exc
    return EmbedRequest.from_metadata(metadata, language=block.language)


def render_code_block(result: EmbedResult) -> str:
    """Wrap an embed result in a fenced code block carrying its title."""
    longest = max((len(run) for run in _BACKTICK_RUN.findall(result.text)), default=0)
    fence = "`" * max(3, longest + 1)
    title = result.title.replace('"', '\\"')
    return f'{fence}{result.language} title="{title}"\n{result.text}\n{fence}'


def render_error(error: EmbedError) -> str:
    return f"`{diagnostic_message(error)}`"


def apply_block_titles(document: str) -> str:
    """Turn a `` TITLE: "..." `` note on a plain fence line into a ``title`` attribute.

    Fences with an empty title are left as written.
    """

    def retitle(match: re.Match) -> str:
        title = match.group("title")
        if not title:
            return match.group(0)
        info = match.group("info").strip()
        prefix = f"{match.group('fence')}{info} " if info else match.group("fence")
        return f'{prefix}title="{title}"'

    return _TITLED_FENCE.sub(retitle, document)


class DocumentRenderer:
    """Replace every supported embed block of a document with its code."""

    def __init__(
        self,
        assembler: Optional[EmbedAssembler] = None,
        *,
        languages: Sequence[str] = DEFAULT_LANGUAGES,
        max_concurrency: int = 5,
        error_handler: Optional[ErrorHandler] = None,
        title_plain_blocks: bool = True,
    ) -> None:
        self.assembler = assembler or EmbedAssembler()
        self.languages = tuple(languages)
        self.max_concurrency = max(1, max_concurrency)
        self.error_handler = error_handler
        self.title_plain_blocks = title_plain_blocks

    async def render(self, document: str, *, name: str = "<document>") -> RenderOutput:
        blocks = find_embed_blocks(document, self.languages)
        if not blocks:
            return RenderOutput(document=self._plain_text(document))

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def render_block(block: EmbedBlock) -> Tuple[str, Optional[EmbedError]]:
            async with semaphore:
                try:
                    request = parse_block_metadata(block)
                    result = await self.assembler.assemble(request)
                except EmbedError as exc:
                    return render_error(exc), exc
                except Exception as exc:
                    logger.exception("Embed block %d of %s failed unexpectedly", block.index, name)
                    error = EmbedError(f"embed failed ({exc.__class__.__name__})")
                    return render_error(error), error
            return render_code_block(result), None

        rendered = await asyncio.gather(*(render_block(block) for block in blocks))

        pieces: List[str] = []
        errors: List[Tuple[int, EmbedError]] = []
        cursor = 0
        for block, (replacement, error) in zip(blocks, rendered):
            pieces.append(self._plain_text(document[cursor:block.start]))
            pieces.append(replacement)
            cursor = block.end
            if error is not None:
                errors.append((block.index, error))
                if self.error_handler is not None:
                    self.error_handler.collect_block_error(error, name, block.index)
        pieces.append(self._plain_text(document[cursor:]))

        logger.info(
            "Rendered %s: %d/%d embeds succeeded",
            name,
            len(blocks) - len(errors),
            len(blocks),
        )
        return RenderOutput(document="".join(pieces), errors=errors)

    def _plain_text(self, text: str) -> str:
        return apply_block_titles(text) if self.title_plain_blocks else text

    def render_sync(self, document: str, *, name: str = "<document>") -> RenderOutput:
        return asyncio.run(self.render(document, name=name))


__all__ = [
    "DocumentRenderer",
    "EmbedBlock",
    "RenderOutput",
    "apply_block_titles",
    "find_embed_blocks",
    "parse_block_metadata",
    "render_code_block",
    "render_error",
]
