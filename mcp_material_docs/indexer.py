# mcp_material_docs/indexer.py
from __future__ import annotations

import pathlib
from typing import Dict, List, Optional

from .config import (
    COMPONENTS_DIR,
    DOCS_ROOT,
    IO_TIMEOUT,
    MD_SUFFIX,
    QUICK_START,
    RESOURCE_BASE,
    THEMING_DIR,
    THEMING_FILES,
)
from .errors import AccessDeniedError
from .logger import logger
from .models import DocumentEntry
from .utils import list_dir, read_text, resolve_doc_path


class DocsIndex:
    """
    Cached view of the Markdown files under a docs root.

    The file list is scanned once and memoized. Files added, removed or renamed
    afterwards stay invisible until ``refresh()`` is called.
    """

    def __init__(self, root: pathlib.Path = DOCS_ROOT, timeout: float = IO_TIMEOUT):
        self.root = pathlib.Path(root)
        self.timeout = timeout
        self._entries: Optional[List[DocumentEntry]] = None

    @property
    def is_populated(self) -> bool:
        return self._entries is not None

    async def scan(self) -> List[DocumentEntry]:
        """
        Return every ``.md`` file under the root, depth first in directory-read order.

        Raises:
            OSError: If any directory listing fails or times out. Nothing is
                cached in that case.
        """
        if self._entries is not None:
            return self._entries
        entries: List[DocumentEntry] = []
        await self._scan_dir(self.root, entries)
        self._entries = entries
        logger.debug("Indexed %d documents under %s", len(entries), self.root)
        return entries

    async def _scan_dir(self, directory: pathlib.Path, out: List[DocumentEntry]) -> None:
        try:
            children = await list_dir(directory, self.timeout)
        except OSError as e:
            logger.error("Error scanning directory %s: %s", directory, e)
            raise
        for child in children:
            full = pathlib.Path(child.path)
            # symlinked entries are skipped
            if child.is_dir(follow_symlinks=False):
                await self._scan_dir(full, out)
            elif child.is_file(follow_symlinks=False) and child.name.endswith(MD_SUFFIX):
                out.append(
                    DocumentEntry(
                        path=full,
                        relative_path=full.relative_to(self.root).as_posix(),
                    )
                )

    def refresh(self) -> None:
        """Forget the memoized scan; the next ``scan()`` walks the tree again."""
        self._entries = None

    async def rescan(self) -> List[DocumentEntry]:
        self.refresh()
        return await self.scan()

    async def list_components(self) -> List[str]:
        """
        Component names from the ``components`` directory, in listing order.

        Reads the directory directly rather than through the cached scan.
        """
        children = await list_dir(self.root / COMPONENTS_DIR, self.timeout)
        names = [
            c.name[: -len(MD_SUFFIX)]
            for c in children
            if c.is_file(follow_symlinks=False) and c.name.endswith(MD_SUFFIX)
        ]
        logger.debug("Components: %s", names)
        return names

    # ---- single documents ----
    async def read_document(self, relative_path: str) -> str:
        """
        Read one document by its path relative to the root.

        Raises:
            AccessDeniedError: On ``..`` segments.
            OSError: If the file cannot be read.
        """
        path = resolve_doc_path(self.root, relative_path)
        return await read_text(path, self.timeout)

    async def _read_or_none(self, relative_path: str, what: str) -> Optional[str]:
        try:
            return await self.read_document(relative_path)
        except (OSError, UnicodeDecodeError, AccessDeniedError) as e:
            logger.error("Error reading %s: %s", what, e)
            return None

    async def get_component_doc(self, name: str) -> Optional[str]:
        return await self._read_or_none(
            f"{COMPONENTS_DIR}/{name}{MD_SUFFIX}", f"component doc {name}"
        )

    async def get_theming_docs(self) -> str:
        """Concatenate the theming guides, each under a ``## <file>`` heading."""
        parts: List[str] = []
        for name in THEMING_FILES:
            try:
                text = await self.read_document(f"{THEMING_DIR}/{name}")
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Error reading theming doc %s: %s", name, e)
                continue
            parts.append(f"## {name}\n\n{text}\n\n")
        return "".join(parts)

    async def get_installation_docs(self) -> Optional[str]:
        return await self._read_or_none(QUICK_START, QUICK_START)

    async def doc_structure(self) -> Dict[str, pathlib.Path]:
        """Map resource URIs to absolute paths for every indexed document."""
        return {RESOURCE_BASE + e.relative_path: e.path for e in await self.scan()}
