# mcp_material_docs/logger.py
"""Shared logger. Logs go to stderr; stdout is reserved for the stdio transport."""
from __future__ import annotations

import logging
import sys

from .config import LOG_LEVEL

logging.basicConfig(
    stream=sys.stderr,
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("mcp_material_docs")
