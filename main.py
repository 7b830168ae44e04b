import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from codeembed.config import EmbedSettings, parse_languages
from codeembed.embed import EmbedRequest
from codeembed.errors import EmbedError, diagnostic_message
from codeembed.exception_handler import ErrorHandler
from codeembed.orchestration import DocumentRenderer, EmbedAssembler
from codeembed.orchestration.document import render_code_block


logger = logging.getLogger("codeembed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Embed line ranges of local or remote source files"
    )
    parser.add_argument(
        "--root",
        type=str,
        help="Local store root that vault:// paths resolve against (default: CODEEMBED_STORE_ROOT or .)",
    )
    parser.add_argument(
        "--scheme",
        type=str,
        help="Prefix marking local store paths (default: vault://)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="HTTP timeout in seconds for remote sources (default: httpx default)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level (default: INFO)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    embed = subparsers.add_parser("embed", help="Print one embed as a fenced code block")
    embed.add_argument("location", help="vault://path or URL of the source file")
    embed.add_argument("--lines", "-l", type=str, help="Line ranges to keep, e.g. '3,7-9'")
    embed.add_argument("--title", "-t", type=str, help="Display title (default: the location)")
    embed.add_argument(
        "--language",
        type=str,
        default="text",
        help="Language tag for the code block (default: text)",
    )

    render = subparsers.add_parser(
        "render", help="Replace embed-<lang> blocks in Markdown documents"
    )
    render.add_argument("documents", nargs="+", help="Markdown files to render")
    render.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file path (single document only; default: stdout)",
    )
    render.add_argument(
        "--in-place",
        action="store_true",
        help="Overwrite each document with its rendered version",
    )
    render.add_argument(
        "--languages",
        type=str,
        help="Comma separated languages with embed-<lang> blocks (default: CODEEMBED_LANGUAGES)",
    )
    render.add_argument(
        "--concurrency",
        type=int,
        help="Maximum number of embeds resolved at once (default: 5)",
    )

    return parser


def load_settings(args: argparse.Namespace) -> EmbedSettings:
    settings = EmbedSettings.from_env()
    overrides = {}
    if args.root:
        overrides["store_root"] = args.root
    if args.scheme:
        overrides["local_scheme"] = args.scheme
    if args.timeout is not None:
        overrides["http_timeout"] = args.timeout
    if args.log_level:
        overrides["log_level"] = args.log_level
    if getattr(args, "languages", None):
        overrides["languages"] = parse_languages(args.languages)
    if getattr(args, "concurrency", None):
        overrides["max_concurrency"] = max(1, args.concurrency)
    return dataclasses.replace(settings, **overrides)


def run_embed(args: argparse.Namespace, settings: EmbedSettings) -> int:
    assembler = EmbedAssembler.from_settings(settings)
    request = EmbedRequest(
        location=args.location,
        lines=args.lines,
        title=args.title,
        language=args.language,
    )

    try:
        result = assembler.assemble_sync(request)
    except EmbedError as exc:
        print(diagnostic_message(exc), file=sys.stderr)
        return 1

    print(render_code_block(result))
    return 0


def run_render(args: argparse.Namespace, settings: EmbedSettings, handler: ErrorHandler) -> int:
    if args.output and len(args.documents) > 1:
        print("Error: --output accepts a single document", file=sys.stderr)
        return 1

    renderer = DocumentRenderer(
        EmbedAssembler.from_settings(settings),
        languages=settings.languages,
        max_concurrency=settings.max_concurrency,
        error_handler=handler,
    )

    for document in tqdm(args.documents, desc="Rendering", disable=len(args.documents) < 2):
        path = Path(document)
        if not path.is_file():
            print(f"Error: Document does not exist: {document}", file=sys.stderr)
            return 1

        output = renderer.render_sync(path.read_text(encoding="utf-8"), name=document)

        if args.in_place:
            path.write_text(output.document, encoding="utf-8")
        elif args.output:
            with open(args.output, "w", encoding="utf-8") as file_handle:
                file_handle.write(output.document)
            tqdm.write(f"✅ Results saved to: {args.output}")
        else:
            tqdm.write(output.document)

    report = handler.format_error_report()
    if report:
        tqdm.write(report, file=sys.stderr)
        return 1
    return 0


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    settings = load_settings(args)
    handler = ErrorHandler(settings.log_level)

    try:
        if args.command == "embed":
            exit_code = run_embed(args, settings)
        else:
            exit_code = run_render(args, settings, handler)
    except KeyboardInterrupt:
        print("\n⚠️ Processing interrupted", file=sys.stderr)
        sys.exit(1)
    except Exception:
        logger.exception("Fatal error while embedding")
        print("\n❌ Fatal error occurred. See log for details.", file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
