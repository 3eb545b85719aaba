"""Pytest configuration and fixtures for MCP Material Docs tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mcp_material_docs.service import MaterialDocs

# Configure logging for tests
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(message)s'
)

logger = logging.getLogger(__name__)


BUTTON_MD = """\
# Buttons

Buttons help people take action, such as sending an email or sharing a document.

## Usage

```html
<md-filled-button>Complete</md-filled-button>
```

## API

| Property | Attribute | Type | Default | Description |
| --- | --- | --- | --- | --- |
| disabled | disabled | boolean | false | Whether or not the button is disabled. |
| href | href | string | '' | The URL that the link button points to. |
"""

CHECKBOX_MD = """\
# Checkbox

Checkboxes let users select one or more items from a list.

## Accessibility

Add an `aria-label` when there is no visible label.
"""

THEMING = {
    "README.md": "# Theming\n\nMaterial Web uses CSS custom properties.\n",
    "color.md": "# Color\n\nUse --md-sys-color-primary to set the primary color.\n",
    "shape.md": "# Shape\n\nCorners are rounded via --md-sys-shape-corner-*.\n",
    "typography.md": "# Typography\n\nType scale tokens such as --md-sys-typescale-body-large.\n",
}

QUICK_START_MD = "# Quick start\n\nnpm install @material/web\n"


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> text) under ``root``."""
    for rel, text in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def docs_root(tmp_path: Path) -> Path:
    """A small docs tree with the conventional layout."""
    files = {
        "components/button.md": BUTTON_MD,
        "components/checkbox.md": CHECKBOX_MD,
        "quick-start.md": QUICK_START_MD,
        "guides/nested/deep.md": "# Deep\n\nA Button inside a nested guide.\n",
        "guides/notes.txt": "button but not markdown\n",
    }
    files.update({f"theming/{name}": text for name, text in THEMING.items()})
    return write_tree(tmp_path / "ui-docs", files)


@pytest.fixture
def service(docs_root: Path) -> MaterialDocs:
    """A fresh service with empty caches."""
    return MaterialDocs(docs_root, timeout=5.0)
