#!/usr/bin/env python3
"""
Validation script for the Material Web MCP documentation server.
Runs every tool against the configured docs root (MWD_DOCS_ROOT).
"""

from __future__ import annotations

import asyncio
import sys

from mcp_material_docs.mcp import (
    docs,
    ping,
    t_component_doc,
    t_health_check,
    t_installation_docs,
    t_list_components,
    t_mode,
    t_refresh_index,
    t_search,
    t_theming_docs,
    t_validate_website,
)


class Colors:
    """ANSI color codes for terminal output."""
    GREEN = '\033[92m'
    RED = '\033[91m'
    YELLOW = '\033[93m'
    BLUE = '\033[94m'
    RESET = '\033[0m'
    BOLD = '\033[1m'


def print_header(text: str) -> None:
    """Print a formatted header."""
    print(f"\n{Colors.BOLD}{Colors.BLUE}{'=' * 70}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.BLUE}{text:^70}{Colors.RESET}")
    print(f"{Colors.BOLD}{Colors.BLUE}{'=' * 70}{Colors.RESET}\n")


def print_test(name: str, status: str, message: str = "") -> None:
    """Print a test result."""
    if status == "PASS":
        symbol = f"{Colors.GREEN}✓{Colors.RESET}"
        status_text = f"{Colors.GREEN}PASS{Colors.RESET}"
    else:
        symbol = f"{Colors.RED}✗{Colors.RESET}"
        status_text = f"{Colors.RED}FAIL{Colors.RESET}"
    print(f"{symbol} {Colors.BOLD}{name:<25}{Colors.RESET} {status_text}")
    if message:
        print(f"   {Colors.YELLOW}{message}{Colors.RESET}")


async def check_health_ping() -> tuple[bool, str]:
    result = ping()
    if result == "pong":
        return True, "Returned 'pong' as expected"
    return False, f"Unexpected response: {result}"


async def check_health_check() -> tuple[bool, str]:
    report = await t_health_check()
    msg = f"{report.docs_count} docs, {report.components_count} components"
    if report.status == "healthy":
        return True, msg
    return False, f"{msg}; errors: {report.errors}"


async def check_material_mode() -> tuple[bool, str]:
    mode = await t_mode()
    return True, (
        f"Docs root: {mode.docs_root}, timeout: {mode.io_timeout}s, "
        f"components: {mode.components_count}"
    )


async def check_list_components() -> tuple[bool, str]:
    result = await t_list_components()
    if result.components:
        return True, f"{len(result.components)} components, e.g. {result.components[:3]}"
    return False, "No components found"


async def check_search_docs() -> tuple[bool, str]:
    result = await t_search(keyword="button")
    files = result.structuredContent["results"]
    if files:
        hits = sum(len(r["matches"]) for r in files)
        return True, f"{hits} matching lines in {len(files)} files"
    return False, "No results returned for 'button'"


async def check_component_doc() -> tuple[bool, str]:
    components = (await t_list_components()).components
    if not components:
        return False, "No component to fetch"
    result = await t_component_doc(component=components[0])
    return True, f"{components[0]}: {len(result.documentation)} chars"


async def check_theming_docs() -> tuple[bool, str]:
    result = await t_theming_docs()
    if result.documentation:
        return True, f"{len(result.documentation)} chars"
    return False, "No theming docs could be read"


async def check_installation_docs() -> tuple[bool, str]:
    result = await t_installation_docs()
    if result.documentation != "Documentation not found":
        return True, f"{len(result.documentation)} chars"
    return False, "quick-start.md not found"


async def check_validate_website() -> tuple[bool, str]:
    report = await t_validate_website(html="<md-unknown-widget></md-unknown-widget>")
    if not report.valid and report.errors:
        return True, f"Rejected unknown component: {report.errors[0]}"
    return False, f"Unexpected report: {report}"


async def check_refresh_index() -> tuple[bool, str]:
    result = await t_refresh_index()
    return bool(result.get("refreshed")), "Cached file list dropped"


async def run_all_checks() -> dict[str, tuple[bool, str]]:
    """Run all tool checks and return results."""
    checks = {
        "health_ping": check_health_ping,
        "health_check": check_health_check,
        "material_mode": check_material_mode,
        "list_components": check_list_components,
        "search_docs": check_search_docs,
        "get_component_doc": check_component_doc,
        "get_theming_docs": check_theming_docs,
        "get_installation_docs": check_installation_docs,
        "validate_website": check_validate_website,
        "refresh_index": check_refresh_index,
    }

    results = {}
    for name, check in checks.items():
        try:
            results[name] = await check()
        except Exception as e:
            results[name] = (False, f"Exception: {e}")
    return results


async def main() -> int:
    """Main entry point."""
    print_header("Material Web MCP Docs Server Validation")
    print(f"{Colors.BOLD}Docs root: {docs.root}{Colors.RESET}\n")

    results = await run_all_checks()

    passed = 0
    failed = 0
    for tool_name, (success, message) in results.items():
        print_test(tool_name, "PASS" if success else "FAIL", message)
        if success:
            passed += 1
        else:
            failed += 1

    print_header("Summary")
    total = passed + failed
    pass_rate = (passed / total * 100) if total > 0 else 0

    print(f"Total Checks: {Colors.BOLD}{total}{Colors.RESET}")
    print(f"Passed: {Colors.GREEN}{passed}{Colors.RESET}")
    print(f"Failed: {Colors.RED}{failed}{Colors.RESET}")
    print(f"Pass Rate: {Colors.BOLD}{pass_rate:.1f}%{Colors.RESET}\n")

    if failed == 0:
        print(f"{Colors.GREEN}✓ All checks passed!{Colors.RESET}\n")
        return 0
    print(f"{Colors.RED}✗ Some checks failed. See details above.{Colors.RESET}\n")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
