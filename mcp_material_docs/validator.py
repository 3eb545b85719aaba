# mcp_material_docs/validator.py
"""Check ``md-*`` elements in arbitrary HTML against the documented components."""
from __future__ import annotations

import re
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from .api_extractor import ApiExtractor
from .config import RESERVED_PREFIX
from .indexer import DocsIndex
from .models import ValidationReport
from .utils import bs4_has_lxml, escape_literal

# never matches anything; used when the catalog is empty
_MATCH_NOTHING = re.compile(r"(?!)")


def component_matcher(components: List[str]) -> re.Pattern[str]:
    """Case-insensitive alternation over the escaped component names."""
    if not components:
        return _MATCH_NOTHING
    return re.compile("|".join(escape_literal(c) for c in components), re.IGNORECASE)


def match_component(stripped_tag: str, components: List[str]) -> Optional[str]:
    """
    First catalog name (catalog order) contained in ``stripped_tag``.

    ``filled-button`` resolves to ``button``; with both ``field`` and
    ``text-field`` in the catalog, whichever is listed first wins.
    """
    tag = stripped_tag.lower()
    return next((c for c in components if c.lower() in tag), None)


async def validate_website(
    html: str, index: DocsIndex, extractor: ApiExtractor
) -> ValidationReport:
    """
    Validate ``md-*`` usage in ``html``.

    Unknown components are errors and make the report invalid. Attributes not
    found in a component's API table are warnings. Components without an API
    section are accepted with any attributes.

    Raises:
        OSError: If the component catalog cannot be read.
    """
    soup = BeautifulSoup(html, "lxml" if bs4_has_lxml() else "html.parser")
    components = await index.list_components()
    known = component_matcher(components)
    errors: List[str] = []
    warnings: List[str] = []

    for el in soup.find_all(True):
        if not isinstance(el, Tag) or not el.name:
            continue
        tag = el.name.lower()
        if not tag.startswith(RESERVED_PREFIX):
            continue
        stripped = tag[len(RESERVED_PREFIX):]
        if not known.search(stripped):
            errors.append(f"Unknown component: {tag}")
            continue
        component = match_component(stripped, components)
        if component is None:
            continue
        api = await extractor.extract(component)
        if api is None:
            continue
        for attr in el.attrs:
            if attr not in api.properties:
                warnings.append(f"Unknown attribute '{attr}' for {tag}")

    return ValidationReport(valid=not errors, errors=errors, warnings=warnings)
