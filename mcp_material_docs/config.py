# mcp_material_docs/config.py
"""Paths and constants (env-overrideable)."""
from __future__ import annotations

import os
import pathlib


def _find_project_root() -> pathlib.Path:
    """
    Find the directory holding ``ui-docs``.
    Works in both development and installed modes.
    """
    current = pathlib.Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "ui-docs").is_dir():
            return parent
    # Fallback to the checkout root
    return pathlib.Path(__file__).resolve().parents[1]


PKG_DIR = pathlib.Path(__file__).resolve().parent
PROJECT_ROOT = _find_project_root()

DOCS_ROOT = pathlib.Path(
    os.getenv("MWD_DOCS_ROOT", PROJECT_ROOT / "ui-docs")
).resolve()

# seconds allowed for a single directory listing or file read
IO_TIMEOUT = float(os.getenv("MWD_IO_TIMEOUT", "5.0"))

LOG_LEVEL = os.getenv("MWD_LOG_LEVEL", "INFO").upper()

# ---- docs tree layout ----
MD_SUFFIX = ".md"
COMPONENTS_DIR = "components"
THEMING_DIR = "theming"
THEMING_FILES = ("README.md", "color.md", "shape.md", "typography.md")
QUICK_START = "quick-start.md"

RESOURCE_BASE = "mcp://material-web/docs/"
RESERVED_PREFIX = "md-"

COMPONENT_NOT_FOUND = "Component not found"
DOCUMENTATION_NOT_FOUND = "Documentation not found"
