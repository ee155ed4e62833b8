"""Rule record and the helpers every rule builds issues with."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from react_state_patterns.analyzer.components import Component, SourceModule, StateEntry
from react_state_patterns.analyzer.models import Issue, ProjectContext, Severity
from react_state_patterns.tree.nodes import Node

CheckFn = Callable[[SourceModule, "ProjectContext | None"], list[Issue]]
ComponentCheckFn = Callable[[Component, SourceModule, "ProjectContext | None"], list[Issue]]


@dataclass(frozen=True)
class Rule:
    name: str
    description: str
    severity: Severity
    check: CheckFn

    def __call__(self, module: SourceModule, context: ProjectContext | None = None) -> list[Issue]:
        return self.check(module, context)


def per_component(check_component: ComponentCheckFn) -> CheckFn:
    """Lift a per-component check to a whole-module check, in component order."""

    def check(module: SourceModule, context: ProjectContext | None = None) -> list[Issue]:
        issues: list[Issue] = []
        for component in module.components:
            issues.extend(check_component(component, module, context))
        return issues

    check.__name__ = check_component.__name__
    check.__doc__ = check_component.__doc__
    return check


def make_issue(
    rule: str,
    module: SourceModule,
    at: Node | StateEntry,
    *,
    severity: Severity,
    message: str,
    suggestion: str | None = None,
    fixable: bool = False,
) -> Issue:
    """Build an Issue located at a node (or at a state's declaring call)."""
    node = at.declaration if isinstance(at, StateEntry) else at
    return Issue(
        rule=rule,
        severity=severity,
        message=message,
        file=module.path,
        line=max(node.line, 1),
        column=max(node.column, 1),
        end_line=node.end_line or None,
        end_column=node.end_column or None,
        suggestion=suggestion,
        fixable=fixable,
    )


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]
