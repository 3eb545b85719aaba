# mcp_material_docs/models.py
from __future__ import annotations

import pathlib
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---- index ----
class DocumentEntry(BaseModel):
    """One Markdown file under the docs root."""

    model_config = ConfigDict(frozen=True)

    path: pathlib.Path = Field(description="Absolute path on disk")
    relative_path: str = Field(description="POSIX path relative to the docs root")


# ---- search ----
class SearchMatch(BaseModel):
    line: int = Field(description="1-based line number")
    text: str = Field(description="Matching line with surrounding whitespace trimmed")


class SearchResult(BaseModel):
    file: str = Field(description="Path relative to the docs root")
    matches: List[SearchMatch] = Field(default_factory=list)


class SearchResponse(BaseModel):
    results: List[SearchResult]


# ---- api / validation ----
class ApiDescriptor(BaseModel):
    """Attribute names documented in a component's API table(s)."""

    properties: List[str] = Field(default_factory=list)


class ValidationReport(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


# ---- health ----
class HealthReport(BaseModel):
    model_config = ConfigDict(populate_by_name=True, serialize_by_alias=True)

    status: Literal["healthy", "degraded"] = "healthy"
    uptime: int = Field(0, description="Milliseconds since the service started")
    docs_accessible: bool = Field(False, alias="docsAccessible")
    docs_count: int = Field(0, alias="docsCount")
    components_count: int = Field(0, alias="componentsCount")
    errors: List[str] = Field(default_factory=list)


# ---- tool responses ----
class ComponentsResponse(BaseModel):
    components: List[str]


class DocumentationResponse(BaseModel):
    documentation: str


class ModeResponse(BaseModel):
    docs_root: str
    io_timeout: float
    docs_indexed: Optional[int] = None
    components_count: Optional[int] = None
    cached_apis: List[str] = Field(default_factory=list)
