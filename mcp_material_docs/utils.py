# mcp_material_docs/utils.py
"""Shared helpers: bounded filesystem access, path resolution and literal matching."""
from __future__ import annotations

import asyncio
import os
import pathlib
import re
from typing import Any, Callable, List, TypeVar

from .config import IO_TIMEOUT
from .errors import AccessDeniedError

T = TypeVar("T")


# ---- BeautifulSoup parser detection ----
def bs4_has_lxml() -> bool:
    """Check if lxml parser is available for BeautifulSoup."""
    try:
        import lxml  # noqa: F401
        return True
    except Exception:
        return False


# ---- timeouts ----
async def with_timeout(
    func: Callable[..., T], *args: Any, timeout: float = IO_TIMEOUT
) -> T:
    """
    Run a blocking call in a worker thread and race it against a deadline.

    Args:
        func: Blocking callable (directory listing, file read, ...)
        *args: Positional arguments for ``func``
        timeout: Seconds before the call is abandoned

    Returns:
        Whatever ``func`` returns

    Raises:
        TimeoutError: If the call did not finish in time. ``TimeoutError`` is an
            ``OSError``, so callers handle it like any other I/O failure.
    """
    try:
        return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout)
    except asyncio.TimeoutError:
        raise TimeoutError("Operation timed out") from None


def _list_dir(path: pathlib.Path) -> List[os.DirEntry]:
    with os.scandir(path) as it:
        return list(it)


def _read_text(path: pathlib.Path) -> str:
    return path.read_text(encoding="utf-8")


async def list_dir(path: pathlib.Path, timeout: float = IO_TIMEOUT) -> List[os.DirEntry]:
    """List a directory in read order, bounded by ``timeout``."""
    return await with_timeout(_list_dir, path, timeout=timeout)


async def read_text(path: pathlib.Path, timeout: float = IO_TIMEOUT) -> str:
    """Read a UTF-8 file, bounded by ``timeout``."""
    return await with_timeout(_read_text, path, timeout=timeout)


# ---- path resolution ----
_SEGMENT_SPLIT = re.compile(r"[/\\]")


def resolve_doc_path(root: pathlib.Path, relative: str) -> pathlib.Path:
    """
    Map a caller-supplied relative path onto the docs root.

    Raises:
        AccessDeniedError: If any segment of ``relative`` is ``..``.
    """
    if any(seg == ".." for seg in _SEGMENT_SPLIT.split(relative)):
        raise AccessDeniedError(relative)
    return root / relative.lstrip("/\\")


# ---- literal matching ----
def escape_literal(text: str) -> str:
    """Escape ``text`` so a compiled pattern matches it verbatim."""
    return re.escape(text)


def literal_matcher(keyword: str) -> re.Pattern[str]:
    """Case-insensitive pattern matching ``keyword`` as plain text."""
    return re.compile(escape_literal(keyword), re.IGNORECASE)
