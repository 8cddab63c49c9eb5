"""
Compiled Artifact Lookup

Wrappers that can be created from a config also need the contract code.
Build tooling leaves it in `<build dir>/<ClassName>.compiled.json`:

    {"hex": "b5ee9c72..."}

A missing or unreadable artifact is an expected outcome, so callers go
through lookup_optional and get None instead of an error.
"""

import asyncio
import json
from pathlib import Path
from typing import Optional, Protocol, Union

from logging_config import get_logger
from wrapscan.config import COMPILED_HEX_KEY, COMPILED_SUFFIX, get_build_dir
from wrapscan.exceptions import ArtifactLookupError, ArtifactNotFoundError

logger = get_logger("artifacts")


class ArtifactStore(Protocol):
    """Resolves a wrapper class name to its compiled code as hex."""

    async def lookup(self, class_name: str) -> str: ...


class CompiledArtifactStore:
    """Reads compiled artifacts written by the contract build step."""

    def __init__(self, build_dir: Optional[Union[str, Path]] = None):
        self.build_dir = Path(build_dir) if build_dir is not None else get_build_dir()

    def artifact_path(self, class_name: str) -> Path:
        return self.build_dir / f"{class_name}{COMPILED_SUFFIX}"

    async def lookup(self, class_name: str) -> str:
        return await asyncio.to_thread(self._read_hex, class_name)

    def _read_hex(self, class_name: str) -> str:
        path = self.artifact_path(class_name)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ArtifactNotFoundError(f"No compiled artifact at {path}", class_name) from e
        except OSError as e:
            raise ArtifactLookupError(f"Failed to read {path}: {e}", class_name) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ArtifactLookupError(f"Malformed compiled artifact {path}: {e}", class_name) from e

        code_hex = data.get(COMPILED_HEX_KEY) if isinstance(data, dict) else None
        if not isinstance(code_hex, str):
            raise ArtifactLookupError(f"Compiled artifact {path} has no {COMPILED_HEX_KEY!r}", class_name)
        return code_hex


async def lookup_optional(store: ArtifactStore, class_name: str) -> Optional[str]:
    """Look up compiled code, treating any store failure as absence."""
    try:
        return await store.lookup(class_name)
    except Exception as e:
        logger.debug(f"No compiled code for {class_name}: {e}")
        return None
