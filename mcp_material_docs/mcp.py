# mcp_material_docs/mcp.py
from __future__ import annotations

import asyncio
import pathlib
from typing import Annotated, Any, Dict

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.resources import FunctionResource
from mcp.types import CallToolResult, TextContent

from .config import (
    COMPONENT_NOT_FOUND,
    DOCS_ROOT,
    DOCUMENTATION_NOT_FOUND,
    IO_TIMEOUT,
    MD_SUFFIX,
    RESOURCE_BASE,
)
from .logger import logger
from .models import (
    ComponentsResponse,
    DocumentationResponse,
    HealthReport,
    ModeResponse,
    SearchResponse,
    ValidationReport,
)
from .search import format_results
from .service import MaterialDocs

# ---- MCP server ----
mcp = FastMCP("material-web-mcp")
docs = MaterialDocs(DOCS_ROOT, IO_TIMEOUT)


def _resource_name(relative_path: str) -> str:
    stem = relative_path[: -len(MD_SUFFIX)] if relative_path.endswith(MD_SUFFIX) else relative_path
    return stem.replace("/", "-").replace("\\", "-")


def _make_reader(relative_path: str):
    async def read() -> str:
        try:
            return await docs.read_document(relative_path)
        except Exception:
            logger.error("Error reading resource %s", relative_path, exc_info=True)
            raise

    return read


async def register_doc_resources() -> int:
    """Expose every indexed document as ``mcp://material-web/docs/<relative path>``."""
    entries = await docs.documents()
    for entry in entries:
        rel = entry.relative_path
        title = pathlib.PurePosixPath(rel).stem
        mcp.add_resource(
            FunctionResource(
                uri=RESOURCE_BASE + rel,
                name=_resource_name(rel),
                description=f"Documentation for {title}",
                mime_type="text/markdown",
                fn=_make_reader(rel),
            )
        )
    logger.info("Registered %d documentation resources", len(entries))
    return len(entries)


@mcp.tool(name="health_ping", description="Returns simple pong")
def ping() -> str:
    return "pong"


@mcp.tool(
    name="health_check",
    description="Performs a health check on the server, verifying uptime, "
    "documentation accessibility, and basic functionality",
)
async def t_health_check() -> HealthReport:
    logger.info("Tool health_check called")
    return await docs.health_check()


@mcp.tool(
    name="list_components",
    description="Returns a JSON array of available Material Web component names",
)
async def t_list_components() -> ComponentsResponse:
    logger.info("Tool list_components called")
    return ComponentsResponse(components=await docs.list_components())


@mcp.tool(
    name="search_docs",
    description="Searches Material Web documentation for a keyword and returns "
    "matching file paths with excerpts",
)
async def t_search(keyword: str) -> Annotated[CallToolResult, SearchResponse]:
    logger.info("Tool search_docs called with keyword: %s", keyword)
    results = await docs.search(keyword)
    return CallToolResult(
        content=[TextContent(type="text", text=format_results(results))],
        structuredContent=SearchResponse(results=results).model_dump(mode="json"),
    )


@mcp.tool(
    name="get_component_doc",
    description="Returns the full documentation for a specific Material Web component",
)
async def t_component_doc(component: str) -> DocumentationResponse:
    logger.info("Tool get_component_doc called with component: %s", component)
    doc = await docs.get_component_doc(component)
    return DocumentationResponse(documentation=doc or COMPONENT_NOT_FOUND)


@mcp.tool(
    name="get_theming_docs",
    description="Returns the theming documentation for Material Web",
)
async def t_theming_docs() -> DocumentationResponse:
    logger.info("Tool get_theming_docs called")
    return DocumentationResponse(documentation=await docs.get_theming_docs())


@mcp.tool(
    name="get_installation_docs",
    description="Returns the installation and quick-start documentation for Material Web",
)
async def t_installation_docs() -> DocumentationResponse:
    logger.info("Tool get_installation_docs called")
    doc = await docs.get_installation_docs()
    return DocumentationResponse(documentation=doc or DOCUMENTATION_NOT_FOUND)


@mcp.tool(
    name="validate_website",
    description="Validates HTML code for correct Material Web component usage",
)
async def t_validate_website(html: str) -> ValidationReport:
    logger.info("Tool validate_website called")
    return await docs.validate_website(html)


@mcp.tool(
    name="refresh_index",
    description="Forget the cached documentation file list so the next call rescans the docs tree.",
)
async def t_refresh_index() -> Dict[str, Any]:
    logger.info("Tool refresh_index called")
    docs.refresh_index()
    return {"refreshed": True}


@mcp.tool(
    name="material_mode",
    description="Report docs root, timeout, component count and cache state.",
)
async def t_mode() -> ModeResponse:
    try:
        components_count = len(await docs.list_components())
    except OSError as e:
        logger.warning("Could not list components for mode report: %s", e)
        components_count = None
    return ModeResponse(
        docs_root=str(docs.root),
        io_timeout=docs.index.timeout,
        docs_indexed=len(await docs.documents()) if docs.index.is_populated else None,
        components_count=components_count,
        cached_apis=docs.apis.cached,
    )


def main() -> None:
    logger.info("Server starting (docs root: %s)", docs.root)
    try:
        asyncio.run(register_doc_resources())
    except OSError as e:
        logger.error("Could not index %s, no document resources registered: %s", docs.root, e)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
