# mcp_material_docs/service.py
from __future__ import annotations

import pathlib
import time
from typing import Dict, List, Optional

from .api_extractor import ApiExtractor
from .config import DOCS_ROOT, IO_TIMEOUT
from .health import check_health
from .indexer import DocsIndex
from .models import (
    ApiDescriptor,
    DocumentEntry,
    HealthReport,
    SearchResult,
    ValidationReport,
)
from .search import search
from .validator import validate_website


class MaterialDocs:
    """
    Every documentation operation, backed by one docs index and one API cache.

    Construct a fresh instance to get empty caches.
    """

    def __init__(self, root: pathlib.Path = DOCS_ROOT, timeout: float = IO_TIMEOUT):
        self.index = DocsIndex(root, timeout)
        self.apis = ApiExtractor(self.index)
        self.started_at = time.monotonic()

    @property
    def root(self) -> pathlib.Path:
        return self.index.root

    async def documents(self) -> List[DocumentEntry]:
        return await self.index.scan()

    async def list_components(self) -> List[str]:
        return await self.index.list_components()

    async def search(self, keyword: Optional[str]) -> List[SearchResult]:
        return await search(self.index, keyword)

    async def get_component_doc(self, name: str) -> Optional[str]:
        return await self.index.get_component_doc(name)

    async def get_theming_docs(self) -> str:
        return await self.index.get_theming_docs()

    async def get_installation_docs(self) -> Optional[str]:
        return await self.index.get_installation_docs()

    async def extract_api(self, component: Optional[str]) -> Optional[ApiDescriptor]:
        return await self.apis.extract(component)

    async def validate_website(self, html: str) -> ValidationReport:
        return await validate_website(html, self.index, self.apis)

    async def health_check(self) -> HealthReport:
        return await check_health(self.index, self.started_at)

    async def read_document(self, relative_path: str) -> str:
        return await self.index.read_document(relative_path)

    async def doc_structure(self) -> Dict[str, pathlib.Path]:
        return await self.index.doc_structure()

    def refresh_index(self) -> None:
        """Drop the cached file list. Parsed API descriptors are kept."""
        self.index.refresh()
