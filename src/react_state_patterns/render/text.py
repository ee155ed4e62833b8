"""Render analysis results for the terminal."""

from __future__ import annotations

import click

from react_state_patterns.analyzer.models import AnalysisResult
from react_state_patterns.render._helpers import SEVERITY_COLORS, issues_by_file, plural


def render_text(result: AnalysisResult, color: bool = True) -> str:
    """Issues grouped per file, then severity totals."""

    def style(text: str, **kwargs) -> str:
        return click.style(text, **kwargs) if color else text

    lines = [
        style(
            f"Found {plural(len(result.issues), 'issue')} in "
            f"{plural(result.files_analyzed, 'file')}:",
            bold=True,
        ),
        "",
    ]

    for file, issues in issues_by_file(result).items():
        lines.append(style(file, underline=True))
        for issue in issues:
            tag = style(f"[{issue.rule}]", fg=SEVERITY_COLORS[issue.severity])
            where = style(f"({issue.line}:{issue.column})", dim=True)
            lines.append(f"  {issue.severity.upper():<7} {tag} {issue.message} {where}")
            if issue.suggestion:
                lines.append(style(f"          hint: {issue.suggestion}", dim=True))
        lines.append("")

    stats = result.stats
    lines.append(style("Summary:", bold=True))
    lines.append(f"  Errors: {style(str(stats.errors), fg='red')}")
    lines.append(f"  Warnings: {style(str(stats.warnings), fg='yellow')}")
    lines.append(f"  Info: {style(str(stats.info), fg='blue')}")
    return "\n".join(lines)
