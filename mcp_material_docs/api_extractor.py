# mcp_material_docs/api_extractor.py
"""
Extract component attribute names from the "## API" section of a component doc.

Only tables with the five columns Property | Attribute | Type | Default |
Description are read; the Attribute column of every row is collected.
"""
from __future__ import annotations

import re
from typing import Dict, List, Optional

from .indexer import DocsIndex
from .logger import logger
from .models import ApiDescriptor

# section body: after "## API" + blank line, up to the next h2, an HTML comment, or EOF
_API_SECTION = re.compile(r"^## API\n\n(.*?)(?=\n## |\n<!--|\Z)", re.M | re.S)

_TABLE = re.compile(
    r"^\|[ \t]*Property[ \t]*\|[ \t]*Attribute[ \t]*\|[ \t]*Type[ \t]*"
    r"\|[ \t]*Default[ \t]*\|[ \t]*Description[ \t]*\|[ \t]*\n"
    r"\|(?:[ \t]*:?-{3,}:?[ \t]*\|){5}[ \t]*(?:\n|\Z)"
    r"((?:\|.*\|[ \t]*(?:\n|\Z))*)",
    re.M,
)


def parse_api_section(doc: str) -> Optional[ApiDescriptor]:
    """
    Parse a component document.

    Returns:
        ``None`` when there is no API section, otherwise the descriptor. A
        section whose tables have no rows yields an empty ``properties`` list.
    """
    section = _API_SECTION.search(doc)
    if section is None:
        return None
    properties: List[str] = []
    for table in _TABLE.finditer(section.group(1)):
        for row in table.group(1).splitlines():
            if not row.strip():
                continue
            cells = [c.strip() for c in row.split("|")]
            # cells[0] is the empty string before the leading pipe
            if len(cells) > 1:
                attr = cells[1].strip("`")
                if attr:
                    properties.append(attr)
    return ApiDescriptor(properties=properties)


class ApiExtractor:
    """Per-component API descriptors, parsed once and cached by component name."""

    def __init__(self, index: DocsIndex):
        self.index = index
        self._cache: Dict[str, ApiDescriptor] = {}

    @property
    def cached(self) -> List[str]:
        return list(self._cache)

    def get_cached(self, component: str) -> Optional[ApiDescriptor]:
        return self._cache.get(component)

    async def extract(self, component: Optional[str]) -> Optional[ApiDescriptor]:
        if not component:
            return None
        cached = self._cache.get(component)
        if cached is not None:
            return cached
        doc = await self.index.get_component_doc(component)
        if doc is None:
            return None
        api = parse_api_section(doc)
        if api is None:
            logger.debug("No API section documented for %s", component)
            return None
        self._cache[component] = api
        return api

    def clear(self) -> None:
        self._cache.clear()
