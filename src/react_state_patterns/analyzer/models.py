"""Pydantic models for analysis output."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field

Severity = Literal["error", "warning", "info"]


class Issue(BaseModel):
    model_config = ConfigDict(frozen=True)

    rule: str
    severity: Severity
    message: str
    file: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    end_line: int | None = None
    end_column: int | None = None
    suggestion: str | None = None
    fixable: bool = False  # signal only; no fix is ever applied


class ProjectContext(BaseModel):
    """State-machine libraries found in the project manifest.

    Only ever changes suggestion wording, never what gets detected.
    """
    has_xstate: bool = False
    has_xstate_store: bool = False
    xstate_version: str | None = None


class AnalysisStats(BaseModel):
    errors: int = 0
    warnings: int = 0
    info: int = 0
    by_rule: dict[str, int] = Field(default_factory=dict)

    def merge(self, other: AnalysisStats) -> AnalysisStats:
        by_rule = dict(self.by_rule)
        for rule, count in other.by_rule.items():
            by_rule[rule] = by_rule.get(rule, 0) + count
        return AnalysisStats(
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
            info=self.info + other.info,
            by_rule=by_rule,
        )


class AnalysisResult(BaseModel):
    files_found: int = 0
    files_analyzed: int = 0
    files_skipped: list[str] = Field(default_factory=list)
    components_found: int = 0
    project_context: ProjectContext | None = None
    issues: list[Issue] = Field(default_factory=list)

    @computed_field
    @property
    def stats(self) -> AnalysisStats:
        return summarize(self.issues)


def summarize(issues: list[Issue]) -> AnalysisStats:
    """Counts by severity plus a per-rule tally."""
    stats = AnalysisStats()
    for issue in issues:
        if issue.severity == "error":
            stats.errors += 1
        elif issue.severity == "warning":
            stats.warnings += 1
        else:
            stats.info += 1
        stats.by_rule[issue.rule] = stats.by_rule.get(issue.rule, 0) + 1
    return stats
