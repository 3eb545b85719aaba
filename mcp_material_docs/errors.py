# mcp_material_docs/errors.py
from __future__ import annotations


class AccessDeniedError(ValueError):
    """Raised when a document identifier tries to escape the docs root."""

    def __init__(self, identifier: str):
        super().__init__(f"Access denied: path traversal detected in {identifier!r}")
        self.identifier = identifier
