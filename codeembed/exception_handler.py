import logging
from typing import Any, Dict, List

from .errors import EmbedError, diagnostic_message


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the project logger with a single stream handler."""
    logger = logging.getLogger("codeembed")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


class ErrorHandler:
    """Collects embed failures across a rendering run and reports them."""

    def __init__(self, log_level: str = "INFO"):
        self.logger = setup_logging(log_level)
        self.errors: List[Dict[str, Any]] = []

    def handle_error(self, error: EmbedError, context: Dict[str, Any]) -> Dict[str, Any]:
        """Log an embed failure with its context and keep it for the summary."""
        error_info = {
            "kind": error.kind,
            "message": diagnostic_message(error),
            "context": context,
        }

        self.logger.warning(
            "%s: %s | Context: %s", error_info["kind"], error.message, context
        )

        self.errors.append(error_info)

        return error_info

    def collect_block_error(self, error: EmbedError, document: str, block: int) -> Dict[str, Any]:
        """Collect a failure for the ``block``-th embed of ``document`` (1-based)."""
        context = {
            "document": document,
            "block": block,
        }
        return self.handle_error(error, context)

    def get_error_summary(self) -> Dict[str, Any]:
        """Generate summary of all collected errors."""
        if not self.errors:
            return {"total_errors": 0, "error_kinds": {}, "failed_blocks": []}

        error_kinds: Dict[str, int] = {}
        failed_blocks = []

        for error in self.errors:
            kind = error["kind"]
            error_kinds[kind] = error_kinds.get(kind, 0) + 1

            context = error.get("context", {})
            failed_blocks.append({
                "document": context.get("document", "unknown"),
                "block": context.get("block"),
                "error": error["message"],
            })

        return {
            "total_errors": len(self.errors),
            "error_kinds": error_kinds,
            "failed_blocks": failed_blocks,
        }

    def clear_errors(self):
        """Clear collected errors."""
        self.errors.clear()

    def format_error_report(self) -> str:
        """Format user-friendly error report."""
        summary = self.get_error_summary()

        if summary["total_errors"] == 0:
            return ""

        lines = [
            f"\n⚠️  Error Summary: {summary['total_errors']} embeds failed",
            ""
        ]

        if summary["error_kinds"]:
            lines.append("Error Kinds:")
            for kind, count in summary["error_kinds"].items():
                lines.append(f"  • {kind}: {count}")
            lines.append("")

        if summary["failed_blocks"]:
            lines.append("Failed Embeds:")
            for failure in summary["failed_blocks"][:5]:  # Show first 5
                lines.append(
                    f"  • {failure['document']} (block {failure['block']}): {failure['error']}"
                )

            if len(summary["failed_blocks"]) > 5:
                lines.append(f"  ... and {len(summary['failed_blocks']) - 5} more")

        return "\n".join(lines)
