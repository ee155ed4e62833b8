"""
Rule aggregator: runs every rule over one parsed file.

Usage:
    from react_state_patterns.analyzer.service import run_all_rules
    from react_state_patterns.tree import parse_source

    tree = parse_source(source, "src/App.tsx")
    issues = run_all_rules(tree, "src/App.tsx")

    # issues: list[Issue] in rule order, then discovery order
    # summarize(issues): AnalysisStats (counts by severity and by rule)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from react_state_patterns.analyzer.components import SourceModule
from react_state_patterns.analyzer.models import AnalysisStats, Issue, ProjectContext, summarize
from react_state_patterns.rules import Rule, default_rules
from react_state_patterns.tree.nodes import Program

log = logging.getLogger(__name__)


def run_all_rules(
    module: SourceModule | Program,
    filename: str | None = None,
    context: ProjectContext | None = None,
    rules: Sequence[Rule] | None = None,
) -> list[Issue]:
    """Run rules over one file and concatenate their issues.

    Args:
        module: A SourceModule, or a bare parsed tree together with filename.
        filename: File identifier stamped on every issue (required for a bare tree).
        context: Optional project context; only changes suggestion wording.
        rules: Rules to run, in order. Defaults to default_rules().

    Returns:
        Issues in rule-then-discovery order. A rule that fails is logged and
        contributes nothing; the remaining rules still run.
    """
    if isinstance(module, Program):
        if filename is None:
            raise ValueError("filename is required when passing a bare tree")
        module = SourceModule(path=filename, tree=module)
    if rules is None:
        rules = default_rules()

    issues: list[Issue] = []
    for rule in rules:
        try:
            found = rule.check(module, context)
        except Exception:
            log.exception("Rule %s failed on %s", rule.name, module.path)
            continue
        if found:
            log.debug("%s: %s reported %d issue(s)", module.path, rule.name, len(found))
        issues.extend(found)
    return issues


def summarize_many(parts: Sequence[AnalysisStats]) -> AnalysisStats:
    """Merge per-file statistics; order does not matter."""
    total = AnalysisStats()
    for part in parts:
        total = total.merge(part)
    return total


__all__ = ["run_all_rules", "summarize", "summarize_many"]
