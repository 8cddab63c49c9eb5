"""
Wrapper Source Access

Reading wrapper files and reporting their paths relative to the project.
"""

import asyncio
import os
from pathlib import Path
from typing import Optional, Protocol, Union

from logging_config import get_logger
from wrapscan.config import get_project_root
from wrapscan.exceptions import SourceReadError

logger = get_logger("sources")


class FileReader(Protocol):
    """Reads wrapper source text."""

    async def read(self, path: str) -> str: ...


class PathNormalizer(Protocol):
    """Turns an absolute file path into the path reported to consumers."""

    def normalize(self, path: str) -> str: ...


class LocalFileReader:
    """Reads UTF-8 source files; undecodable bytes become U+FFFD."""

    async def read(self, path: str) -> str:
        try:
            return await asyncio.to_thread(Path(path).read_text, encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"Failed to read file {path}: {e}")
            raise SourceReadError(f"Failed to read {path}: {e}", path=path) from e


class ProjectPathNormalizer:
    """
    Rewrites paths under the project root to start with `.`.

    `/work/app/wrappers/Counter.ts` with root `/work/app` becomes
    `./wrappers/Counter.ts`. Paths outside the root are returned unchanged.
    """

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self.root = str(Path(root)) if root is not None else str(get_project_root())

    def normalize(self, path: str) -> str:
        path = str(path)
        if path == self.root:
            return "."

        prefix = self.root if self.root.endswith(os.sep) else self.root + os.sep
        if not path.startswith(prefix):
            return path
        return "./" + path[len(prefix):].replace(os.sep, "/")
