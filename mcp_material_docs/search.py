# mcp_material_docs/search.py
"""Literal, case-insensitive line search over the indexed documents."""
from __future__ import annotations

from typing import List, Optional

from .indexer import DocsIndex
from .logger import logger
from .models import SearchMatch, SearchResult
from .utils import literal_matcher, read_text


async def search(index: DocsIndex, keyword: Optional[str]) -> List[SearchResult]:
    """
    Find every line containing ``keyword`` (plain text, any case).

    A blank keyword returns nothing without touching the filesystem. Files that
    fail to read are logged and skipped; a failing index scan propagates.
    """
    if not keyword or not keyword.strip():
        return []
    pattern = literal_matcher(keyword)

    results: List[SearchResult] = []
    for entry in await index.scan():
        try:
            content = await read_text(entry.path, index.timeout)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading file %s: %s", entry.path, e)
            continue
        matches = [
            SearchMatch(line=i, text=line.strip())
            for i, line in enumerate(content.split("\n"), start=1)
            if pattern.search(line)
        ]
        if matches:
            results.append(SearchResult(file=entry.relative_path, matches=matches))
    return results


def format_results(results: List[SearchResult]) -> str:
    """Plain-text rendering used as the tool's text content."""
    blocks = []
    for r in results:
        lines = "\n".join(f"  Line {m.line}: {m.text}" for m in r.matches)
        blocks.append(f"File: {r.file}\n{lines}")
    return "\n\n".join(blocks) or "No matches found"
