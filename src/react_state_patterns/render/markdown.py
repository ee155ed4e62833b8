"""Render analysis results as a Markdown report."""

from __future__ import annotations

from react_state_patterns.analyzer.models import AnalysisResult
from react_state_patterns.render._helpers import SEVERITY_BADGES, issues_by_file, plural, xstate_summary


def render_markdown(result: AnalysisResult) -> str:
    """Produce a full Markdown report from an AnalysisResult."""
    sections: list[str] = []

    # ── Title ────────────────────────────────────────────────────────────
    sections.append("# React State Analysis Report\n")
    overview = [
        f"- **Files analyzed**: {result.files_analyzed} of {result.files_found}",
        f"- **Components found**: {result.components_found}",
    ]
    if result.files_skipped:
        overview.append(
            f"- **Files skipped**: {', '.join(f'`{f}`' for f in result.files_skipped)}"
        )
    xstate = xstate_summary(result)
    if xstate:
        overview.append(f"- **XState available**: {xstate}")
    sections.append("\n".join(overview) + "\n")

    if not result.issues:
        sections.append("No issues found.\n")
        return "\n".join(sections)

    # ── Issues ───────────────────────────────────────────────────────────
    sections.append("## Issues\n")
    for file, issues in issues_by_file(result).items():
        sections.append(f"### `{file}`\n")
        for issue in issues:
            sections.append(
                f"- {SEVERITY_BADGES[issue.severity]} **[{issue.rule}]** "
                f"{issue.message} _(line {issue.line})_"
            )
            if issue.suggestion:
                sections.append(f"  - {issue.suggestion}")
        sections.append("")

    # ── Summary ──────────────────────────────────────────────────────────
    stats = result.stats
    sections.append("## Summary\n")
    sections.append(f"- **Errors**: {stats.errors}")
    sections.append(f"- **Warnings**: {stats.warnings}")
    sections.append(f"- **Info**: {stats.info}")
    if stats.by_rule:
        sections.append("")
        sections.append("| Rule | Issues |")
        sections.append("|---|---|")
        for rule, count in sorted(stats.by_rule.items(), key=lambda kv: (-kv[1], kv[0])):
            sections.append(f"| `{rule}` | {count} |")
    sections.append("")
    sections.append(f"_{plural(len(result.issues), 'issue')} in total._")
    return "\n".join(sections) + "\n"
