"""Tests for health check tools."""

from __future__ import annotations

from pathlib import Path

import pytest

from mcp_material_docs.mcp import ping
from mcp_material_docs.service import MaterialDocs


@pytest.mark.health
class TestHealthChecks:
    """Test health check functionality."""

    def test_ping_returns_pong(self):
        """Test that ping returns 'pong'."""
        assert ping() == "pong"

    @pytest.mark.asyncio
    async def test_healthy(self, service: MaterialDocs):
        report = await service.health_check()
        assert report.status == "healthy"
        assert report.docs_accessible is True
        assert report.docs_count == 8
        assert report.components_count == 2
        assert report.errors == []
        assert report.uptime >= 0

    @pytest.mark.asyncio
    async def test_wire_names_are_camel_case(self, service: MaterialDocs):
        dumped = (await service.health_check()).model_dump(by_alias=True)
        assert set(dumped) == {
            "status", "uptime", "docsAccessible", "docsCount", "componentsCount", "errors",
        }

    @pytest.mark.asyncio
    async def test_scan_failure_degrades(self, service: MaterialDocs, monkeypatch):
        async def broken_scan():
            raise OSError("disk on fire")

        monkeypatch.setattr(service.index, "scan", broken_scan)
        report = await service.health_check()
        assert report.status == "degraded"
        assert report.docs_accessible is False
        assert report.docs_count == 0
        assert report.components_count == 2
        assert len(report.errors) == 1
        assert "disk on fire" in report.errors[0]
        assert report.errors[0].startswith("Docs scan failed")

    @pytest.mark.asyncio
    async def test_catalog_failure_degrades(self, service: MaterialDocs, monkeypatch):
        async def broken_catalog():
            raise TimeoutError("Operation timed out")

        monkeypatch.setattr(service.index, "list_components", broken_catalog)
        report = await service.health_check()
        assert report.status == "degraded"
        assert report.docs_accessible is True
        assert report.docs_count == 8
        assert report.errors == ["Component extraction failed: Operation timed out"]

    @pytest.mark.asyncio
    async def test_both_failures_never_raise(self, tmp_path: Path):
        report = await MaterialDocs(tmp_path / "missing").health_check()
        assert report.status == "degraded"
        assert report.docs_count == 0
        assert report.components_count == 0
        assert len(report.errors) == 2
