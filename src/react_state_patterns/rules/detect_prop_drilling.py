"""Props passed through components that never read them.

Works across the whole file: every named component's props are classified as
read locally and/or forwarded to a child element, then grouped by prop name.
A prop inside a larger attribute expression, such as
``value={form.name}`` or ``onClick={() => onSave(form)}``, counts as read.
"""

from __future__ import annotations

from dataclasses import dataclass

from react_state_patterns.analyzer.components import Component, SourceModule
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules.base import Rule, make_issue
from react_state_patterns.tree.nodes import (
    Identifier,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXFragment,
    JSXSpreadAttribute,
    MemberExpression,
    Node,
)
from react_state_patterns.tree.walk import ancestors, is_binding_identifier, walk

NAME = "detect-prop-drilling"

FORWARDED = "forwarded"
USED = "used"


@dataclass
class PropUsage:
    component: Component
    prop: str
    used: bool = False
    forwarded: bool = False


def check(module: SourceModule, context: ProjectContext | None = None) -> list[Issue]:
    per_component: dict[str, list[PropUsage]] = {}
    for component in module.components:
        if component.name is None:
            continue
        per_component[component.name] = [
            prop_usage(component, prop) for prop in component.props.names
        ]

    by_prop: dict[str, list[PropUsage]] = {}
    for usages in per_component.values():
        for usage in usages:
            by_prop.setdefault(usage.prop, []).append(usage)

    issues: list[Issue] = []
    for prop, usages in by_prop.items():
        drillers = [u for u in usages if u.forwarded and not u.used]
        consumers = [u for u in usages if u.used]
        chain = sorted(drillers + consumers, key=lambda u: u.component.index)
        if not drillers or len(chain) < 2:
            continue

        deep = len(chain) >= 3
        names = " → ".join(u.component.name for u in chain)
        first = min(drillers, key=lambda u: u.component.index)
        issues.append(make_issue(
            NAME, module, first.component.node,
            severity="error" if deep else "warning",
            message=(
                f'Prop "{prop}" is drilled through {len(chain)} components ({names}) '
                "without being used in intermediate components - "
                f"{'deep prop drilling' if deep else 'prop drilling'} detected"
            ),
            suggestion=(
                f'Critical: Use React Context or component composition to eliminate '
                f'this deep prop drilling for "{prop}"'
                if deep else
                f'Consider using React Context for "{prop}" or use component '
                "composition to avoid prop drilling"
            ),
            fixable=False,
        ))
    return issues


def prop_usage(component: Component, prop: str) -> PropUsage:
    usage = PropUsage(component=component, prop=prop)
    fn = component.node
    props_object = component.props.object_name

    for node in walk(fn):
        if isinstance(node, Identifier):
            if node.name != prop or is_binding_identifier(node):
                continue
            kind = jsx_position(node, fn)
        elif (
            props_object is not None
            and isinstance(node, MemberExpression)
            and isinstance(node.object, Identifier)
            and node.object.name == props_object
            and node.property == prop
        ):
            parent = node.parent
            if isinstance(parent, JSXExpressionContainer) and isinstance(parent.parent, JSXAttribute):
                kind = FORWARDED
            else:
                kind = USED
        else:
            continue

        if kind == FORWARDED:
            usage.forwarded = True
        elif kind == USED:
            usage.used = True
    return usage


def jsx_position(node: Node, fn: Node) -> str:
    parent = node.parent
    if isinstance(parent, (JSXAttribute, JSXSpreadAttribute)):
        return FORWARDED
    if isinstance(parent, JSXExpressionContainer) and isinstance(parent.parent, JSXAttribute):
        return FORWARDED
    for anc in ancestors(node, stop=fn):
        if isinstance(anc, JSXSpreadAttribute):
            return FORWARDED
        if isinstance(anc, (JSXAttribute, JSXElement, JSXFragment)):
            return USED
    return USED


RULE = Rule(
    name=NAME,
    description=(
        "Props should not be drilled through multiple component layers "
        "(warning for 2 levels, error for 3+ levels)"
    ),
    severity="warning",
    check=check,
)
