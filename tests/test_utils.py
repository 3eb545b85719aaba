"""Unit tests for utils.py module."""

from __future__ import annotations

import time
from pathlib import Path

import pytest

from mcp_material_docs.errors import AccessDeniedError
from mcp_material_docs.utils import (
    bs4_has_lxml,
    escape_literal,
    list_dir,
    literal_matcher,
    read_text,
    resolve_doc_path,
    with_timeout,
)


class TestBs4HasLxml:
    """Test lxml parser detection."""

    def test_returns_boolean(self):
        assert isinstance(bs4_has_lxml(), bool)


@pytest.mark.utils
class TestEscapeLiteral:
    """Escaped keywords must match only their literal text."""

    def test_dot_is_literal(self):
        pattern = literal_matcher("a.b")
        assert pattern.search("see a.b here")
        assert not pattern.search("axb")

    def test_all_metacharacters(self):
        raw = "test.*+?^${}()|[]\\"
        pattern = literal_matcher(raw)
        assert pattern.search(f"prefix {raw} suffix")
        assert not pattern.search("test")

    def test_normal_string_unchanged_in_effect(self):
        assert literal_matcher("normal string").search("A Normal String")

    def test_escape_literal_returns_string(self):
        assert isinstance(escape_literal("md-button"), str)

    def test_case_insensitive(self):
        assert literal_matcher("BUTTON").search("filled button")


@pytest.mark.utils
class TestResolveDocPath:
    """Test the path resolver."""

    def test_joins_under_root(self, tmp_path: Path):
        assert resolve_doc_path(tmp_path, "components/button.md") == tmp_path / "components" / "button.md"

    def test_leading_slash_stays_under_root(self, tmp_path: Path):
        assert resolve_doc_path(tmp_path, "/quick-start.md") == tmp_path / "quick-start.md"

    @pytest.mark.parametrize(
        "candidate",
        ["../secret.md", "components/../../etc/passwd", "..", "a\\..\\b.md"],
    )
    def test_rejects_parent_segments(self, tmp_path: Path, candidate: str):
        with pytest.raises(AccessDeniedError):
            resolve_doc_path(tmp_path, candidate)

    def test_dots_inside_names_are_allowed(self, tmp_path: Path):
        assert resolve_doc_path(tmp_path, "v1..2/notes.md").name == "notes.md"


@pytest.mark.utils
class TestTimeouts:
    """Test bounded filesystem access."""

    @pytest.mark.asyncio
    async def test_returns_result_in_time(self):
        assert await with_timeout(lambda x: x * 2, 21, timeout=1.0) == 42

    @pytest.mark.asyncio
    async def test_slow_call_times_out(self):
        with pytest.raises(TimeoutError, match="Operation timed out"):
            await with_timeout(time.sleep, 0.5, timeout=0.01)

    @pytest.mark.asyncio
    async def test_timeout_is_an_os_error(self):
        with pytest.raises(OSError):
            await with_timeout(time.sleep, 0.5, timeout=0.01)

    @pytest.mark.asyncio
    async def test_inner_errors_propagate(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            await read_text(tmp_path / "missing.md")

    @pytest.mark.asyncio
    async def test_read_and_list(self, tmp_path: Path):
        (tmp_path / "a.md").write_text("hello", encoding="utf-8")
        assert await read_text(tmp_path / "a.md") == "hello"
        assert [e.name for e in await list_dir(tmp_path)] == ["a.md"]
