import asyncio
import logging
from pathlib import Path


class LocalStore:
    """Directory-backed store that local (``vault://``) embeds read from."""

    logger = logging.getLogger("codeembed")

    DEFAULT_ENCODING = "utf-8"

    def __init__(self, root: str | Path = ".", encoding: str | None = None):
        """Initialize the store.

        Args:
            root: Directory that store paths are relative to (default: cwd)
            encoding: Text encoding used when reading entries (default: utf-8)
        """
        self.root = Path(root).expanduser().resolve()
        self.encoding = encoding or self.DEFAULT_ENCODING

    def locate(self, path: str) -> Path | None:
        """Map a store path to a file on disk.

        Returns:
            The resolved file path, or None when nothing readable lives there
            (missing entry, a directory, or a path escaping the store root).
        """
        relative = path.strip().replace("\\", "/").lstrip("/")
        if not relative:
            return None

        try:
            candidate = (self.root / relative).resolve()
            is_file = candidate.is_file()
        except (OSError, ValueError, RuntimeError):
            # NUL bytes, symlink loops, over-long names
            self.logger.debug("Unusable store path: %r", path)
            return None

        try:
            candidate.relative_to(self.root)
        except ValueError:
            self.logger.debug("Rejecting store path outside %s: %s", self.root, path)
            return None

        if not is_file:
            return None
        return candidate

    def exists(self, path: str) -> bool:
        """Return True if ``path`` names a readable leaf entry."""
        return self.locate(path) is not None

    def read(self, path: str) -> str:
        """Read the full text of a store entry.

        Raises:
            FileNotFoundError: If the entry is missing or is not a file
            OSError: If the file exists but cannot be read
            UnicodeDecodeError: If the content is not valid text
        """
        file_path = self.locate(path)
        if file_path is None:
            raise FileNotFoundError(f"Store entry not found: {path}")

        with open(file_path, "r", encoding=self.encoding, newline="") as f:
            content = f.read()

        self.logger.debug("Read %d characters from %s", len(content), file_path)
        return content

    async def read_async(self, path: str) -> str:
        """Run :meth:`read` in the default executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.read, path)
