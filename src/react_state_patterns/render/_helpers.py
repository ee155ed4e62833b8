"""Shared helpers for render backends (text, markdown)."""

from __future__ import annotations

from react_state_patterns.analyzer.models import AnalysisResult, Issue

# Terminal colour per severity (click.style names)
SEVERITY_COLORS = {"error": "red", "warning": "yellow", "info": "blue"}

# Markdown badge per severity
SEVERITY_BADGES = {"error": "🔴", "warning": "🟡", "info": "🔵"}


def issues_by_file(result: AnalysisResult) -> dict[str, list[Issue]]:
    """Issues grouped by file, files in first-appearance order, issues unsorted."""
    grouped: dict[str, list[Issue]] = {}
    for issue in result.issues:
        grouped.setdefault(issue.file, []).append(issue)
    return grouped


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def xstate_summary(result: AnalysisResult) -> str | None:
    """e.g. ``XState (^5.0.0), @xstate/store``; None when neither is installed."""
    ctx = result.project_context
    if ctx is None or not (ctx.has_xstate or ctx.has_xstate_store):
        return None
    parts: list[str] = []
    if ctx.has_xstate:
        parts.append(f"XState ({ctx.xstate_version})" if ctx.xstate_version else "XState")
    if ctx.has_xstate_store:
        parts.append("@xstate/store")
    return ", ".join(parts)
