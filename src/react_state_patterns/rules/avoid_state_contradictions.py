"""Boolean flags that can describe an impossible UI state.

``isLoading`` and ``hasError`` can both be true at once; a single status value
cannot.  Groups of boolean-flavored states from one status family are errors.
"""

from __future__ import annotations

from react_state_patterns.analyzer.components import Component, SourceModule, StateEntry
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules import patterns
from react_state_patterns.rules.base import Rule, make_issue, per_component
from react_state_patterns.tree.nodes import BooleanLiteral

NAME = "avoid-state-contradictions"


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    flags = [s for s in component.states if is_boolean_state(s)]
    issues: list[Issue] = []
    for group in find_contradictory_groups(flags):
        values = enum_values(group)
        union = " | ".join(f"'{v}'" for v in values)
        issues.append(make_issue(
            NAME, module, group[0],
            severity="error",
            message=(
                f"Found {len(group)} boolean states that can contradict: "
                + ", ".join(s.name for s in group)
            ),
            suggestion=(
                "Replace with a single state: "
                f"const [status, setStatus] = useState<{union}>('{values[0]}')"
            ),
            fixable=True,
        ))
    return issues


def is_boolean_state(state: StateEntry) -> bool:
    return (
        patterns.boolean_prefix(state.name) is not None
        or isinstance(state.initial_value, BooleanLiteral)
    )


def find_contradictory_groups(flags: list[StateEntry]) -> list[list[StateEntry]]:
    groups: list[list[StateEntry]] = []
    claimed: set[int] = set()
    for i, anchor in enumerate(flags):
        if i in claimed:
            continue
        claimed.add(i)
        group = [anchor]
        for j in range(i + 1, len(flags)):
            if j not in claimed and can_contradict(anchor.name, flags[j].name):
                group.append(flags[j])
                claimed.add(j)
        if len(group) >= 2:
            groups.append(group)
    return groups


def can_contradict(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    for family in patterns.STATUS_FAMILIES:
        if patterns.contains_any(a, family) and patterns.contains_any(b, family):
            return True

    # Same base, different status word: uploadLoading / uploadComplete
    for word_a in patterns.CONTRADICTION_STATE_WORDS:
        if word_a not in a:
            continue
        for word_b in patterns.CONTRADICTION_STATE_WORDS:
            if word_a != word_b and word_b in b:
                if a.replace(word_a, "", 1) == b.replace(word_b, "", 1):
                    return True
    return False


def enum_values(group: list[StateEntry]) -> list[str]:
    values: list[str] = []
    for state in group:
        value = patterns.strip_boolean_prefix(state.name)
        if value and value not in values:
            values.append(value)

    if "idle" not in values and any(v in patterns.LOADING_LIKE_VALUES for v in values):
        values.insert(0, "idle")
    return values or list(patterns.DEFAULT_STATUS_VALUES)


RULE = Rule(
    name=NAME,
    description="Multiple boolean states can create impossible UI states",
    severity="error",
    check=per_component(check_component),
)
