"""State that never reaches the rendered output.

Timer ids, previous values, element handles and counters nobody displays
trigger re-renders for nothing; ``useRef`` holds them without rendering.
"""

from __future__ import annotations

from react_state_patterns.analyzer.components import (
    EFFECT_HOOKS,
    Component,
    SourceModule,
    StateEntry,
    hook_name,
    render_roots,
)
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules import patterns
from react_state_patterns.rules.base import Rule, make_issue, per_component
from react_state_patterns.tree.nodes import (
    ArrowFunction,
    CallExpression,
    FunctionExpression,
    Identifier,
    Node,
    Property,
    VariableDeclarator,
)
from react_state_patterns.tree.walk import ancestors, is_binding_identifier, is_within, walk

NAME = "state-vs-refs"

EFFECT = "effect"
HANDLER = "handler"
RENDER = "render"
OTHER = "other"


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    roots = render_roots(component.node)
    issues: list[Issue] = []
    for state in component.states:
        contexts = usage_contexts(state.name, component.node, roots)
        if RENDER in contexts:
            continue
        if not (has_non_render_name(state.name) or contexts):
            continue
        issues.append(make_issue(
            NAME, module, state,
            severity="warning",
            message=(
                f"State '{state.name}' doesn't affect render output and should use "
                "useRef instead of useState"
            ),
            suggestion=(
                f"Use useRef instead of useState for '{state.name}' to prevent "
                f"unnecessary re-renders. {impact_note(state)}"
            ),
            fixable=True,
        ))
    return issues


def has_non_render_name(name: str) -> bool:
    return patterns.contains_any(name.lower(), patterns.NON_RENDER_NAME_WORDS)


def usage_contexts(name: str, component: Node, roots: list[Node]) -> list[str]:
    """Context of every read of name, in source order."""
    contexts: list[str] = []
    for node in walk(component):
        if isinstance(node, Identifier) and node.name == name and not is_binding_identifier(node):
            contexts.append(classify(node, component, roots))
    return contexts


def classify(node: Node, component: Node, roots: list[Node]) -> str:
    if any(is_within(node, root) for root in roots):
        return RENDER
    for anc in ancestors(node, stop=component):
        if isinstance(anc, CallExpression) and hook_name(anc) in EFFECT_HOOKS:
            return EFFECT
        if isinstance(anc, (ArrowFunction, FunctionExpression)) and _is_handler(anc):
            return HANDLER
    return OTHER


def _is_handler(fn: Node) -> bool:
    parent = fn.parent
    if isinstance(parent, Property) and parent.key:
        return parent.key.startswith(patterns.HANDLER_PREFIXES)
    if isinstance(parent, VariableDeclarator) and isinstance(parent.target, Identifier):
        return parent.target.name.startswith(patterns.HANDLER_PREFIXES)
    return False


def impact_note(state: StateEntry) -> str:
    name = state.name.lower()
    if "timer" in name or "interval" in name:
        return "Timer updates cause unnecessary component re-renders on every tick."
    if "count" in name:
        return "Counter updates trigger re-renders without displaying the value."
    if "prev" in name or "previous" in name:
        return "Previous value tracking for comparisons doesn't need to trigger re-renders."
    if "ref" in name or "element" in name:
        return "DOM element references should use useRef to avoid re-renders on assignment."
    return "This change prevents unnecessary re-renders and improves performance."


RULE = Rule(
    name=NAME,
    description="State that doesn't affect render output should use useRef instead of useState",
    severity="warning",
    check=per_component(check_component),
)
