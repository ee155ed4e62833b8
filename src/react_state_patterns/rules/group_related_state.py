"""Related state variables that belong in one object.

``firstName``/``lastName``/``email`` or ``isLoading``/``isSaving`` are updated
together and read together; four ``useState`` calls for them are one state.
"""

from __future__ import annotations

from react_state_patterns.analyzer.components import Component, SourceModule, StateEntry
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules import patterns
from react_state_patterns.rules.base import Rule, capitalize, make_issue, per_component
from react_state_patterns.tree.nodes import (
    ArrayExpression,
    BooleanLiteral,
    Identifier,
    Node,
    NullLiteral,
    NumberLiteral,
    ObjectExpression,
    StringLiteral,
)

NAME = "group-related-state"


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    issues: list[Issue] = []
    for group in find_related_groups(component.states):
        group_name = shared_base(group) or "state"
        fields = ", ".join(f"{s.name}: {initial_value_text(s.initial_value)}" for s in group)
        issues.append(make_issue(
            NAME, module, group[0],
            severity="warning",
            message=(
                f"Found {len(group)} related state variables that should be grouped: "
                + ", ".join(s.name for s in group)
            ),
            suggestion=(
                "Consider combining these into a single state object: "
                f"const [{group_name}, set{capitalize(group_name)}] = useState({{ {fields} }})"
            ),
            fixable=True,
        ))
    return issues


def find_related_groups(states: list[StateEntry]) -> list[list[StateEntry]]:
    """Greedy union-by-first-match: each unclaimed entry claims every later
    unclaimed entry related to it.  Groups of one are dropped."""
    groups: list[list[StateEntry]] = []
    claimed: set[int] = set()
    for i, anchor in enumerate(states):
        if i in claimed:
            continue
        claimed.add(i)
        group = [anchor]
        for j in range(i + 1, len(states)):
            if j not in claimed and are_related(anchor.name, states[j].name):
                group.append(states[j])
                claimed.add(j)
        if len(group) >= 2:
            groups.append(group)
    return groups


def are_related(a: str, b: str) -> bool:
    base_a, base_b = base_name(a), base_name(b)
    if base_a and base_a == base_b:
        return True

    lower_a, lower_b = a.lower(), b.lower()
    if lower_a.endswith(patterns.FORM_FIELD_SUFFIXES) and lower_b.endswith(patterns.FORM_FIELD_SUFFIXES):
        return True
    if (
        patterns.contains_any(lower_a, patterns.STATUS_WORDS)
        and patterns.contains_any(lower_b, patterns.STATUS_WORDS)
    ):
        return True

    prefix_a = patterns.boolean_prefix(a)
    return prefix_a is not None and prefix_a == patterns.boolean_prefix(b)


def base_name(name: str) -> str | None:
    """productId -> product, isOpen -> open."""
    m = patterns.BASE_SUFFIX_RE.match(name)
    if m:
        return m.group(1).lower()
    if patterns.boolean_prefix(name):
        return patterns.strip_boolean_prefix(name) or None
    return None


def shared_base(group: list[StateEntry]) -> str | None:
    bases = {base_name(s.name) for s in group}
    if len(bases) == 1:
        return bases.pop()
    return None


def initial_value_text(node: Node | None) -> str:
    if node is None:
        return "undefined"
    if isinstance(node, StringLiteral):
        return f"'{node.value}'"
    if isinstance(node, NumberLiteral):
        return node.raw
    if isinstance(node, BooleanLiteral):
        return "true" if node.value else "false"
    if isinstance(node, NullLiteral):
        return "null"
    if isinstance(node, Identifier) and node.name == "undefined":
        return "undefined"
    if isinstance(node, ArrayExpression):
        return "[]"
    if isinstance(node, ObjectExpression):
        return "{}"
    return "initialValue"


RULE = Rule(
    name=NAME,
    description="Multiple related state variables should be grouped into a single state object",
    severity="warning",
    check=per_component(check_component),
)
