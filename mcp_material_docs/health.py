# mcp_material_docs/health.py
from __future__ import annotations

import time

from .indexer import DocsIndex
from .logger import logger
from .models import HealthReport


async def check_health(index: DocsIndex, started_at: float) -> HealthReport:
    """
    Report whether the docs tree and the component catalog are readable.

    Each check runs independently; a failure marks the report ``degraded`` and
    is recorded in ``errors``. Never raises.
    """
    report = HealthReport(uptime=int((time.monotonic() - started_at) * 1000))

    try:
        docs = await index.scan()
        report.docs_count = len(docs)
        report.docs_accessible = True
    except Exception as e:
        report.status = "degraded"
        report.errors.append(f"Docs scan failed: {e}")
        logger.error("Health check: docs scan failed", exc_info=True)

    try:
        components = await index.list_components()
        report.components_count = len(components)
    except Exception as e:
        report.status = "degraded"
        report.errors.append(f"Component extraction failed: {e}")
        logger.error("Health check: component extraction failed", exc_info=True)

    return report
