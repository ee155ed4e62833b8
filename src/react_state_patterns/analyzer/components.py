"""Component discovery and per-component extraction shared by every rule.

A ``SourceModule`` computes its component list once; each ``Component``
computes its state entries, effect blocks and props once.  Rules only read
these snapshots.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from weakref import WeakKeyDictionary

from react_state_patterns.tree.nodes import (
    ArrayPattern,
    AssignmentPattern,
    AwaitExpression,
    BlockStatement,
    CallExpression,
    ExportDefaultDeclaration,
    Function,
    FunctionDeclaration,
    Identifier,
    JSXElement,
    JSXFragment,
    MemberExpression,
    MethodDefinition,
    Node,
    ObjectPattern,
    PatternProperty,
    Program,
    RestElement,
    ReturnStatement,
    VariableDeclarator,
)
from react_state_patterns.tree.walk import enclosing_function, walk

STATE_HOOK = "useState"
REDUCER_HOOK = "useReducer"
EFFECT_HOOKS = frozenset({"useEffect", "useLayoutEffect"})

_UPPERCASE_START = re.compile(r"^[A-Z]")
_SETTER_NAME = re.compile(r"^set[A-Z]")

# Markers of work an effect legitimately performs outside render.
EXTERNAL_CALLS = frozenset({
    "fetch", "setTimeout", "setInterval", "addEventListener",
})
BROWSER_GLOBALS = frozenset({
    "localStorage", "sessionStorage", "navigator", "window", "document",
})
PROMISE_METHODS = frozenset({"then", "catch", "finally"})
SUBSCRIPTION_METHODS = frozenset({"subscribe"})


# ── Extracted records ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class StateEntry:
    """One ``const [value, setValue] = useState(initial)`` declaration."""
    name: str
    setter_name: str
    initial_value: Node | None
    declaration: CallExpression

    @property
    def line(self) -> int:
        return self.declaration.line

    @property
    def column(self) -> int:
        return self.declaration.column


@dataclass(frozen=True)
class EffectBlock:
    """One ``useEffect(callback, deps)`` registration."""
    call: CallExpression
    callback: Function | None
    setter_calls: tuple[CallExpression, ...] = ()
    has_external_operation: bool = False

    @property
    def callback_body(self) -> Node | None:
        return self.callback.body if self.callback is not None else None

    @property
    def setter_names(self) -> set[str]:
        return {c.callee.name for c in self.setter_calls if isinstance(c.callee, Identifier)}


@dataclass(frozen=True)
class ComponentProps:
    names: tuple[str, ...] = ()
    rest_names: tuple[str, ...] = ()
    object_name: str | None = None   # "props" in function Card(props)


# ── Hook helpers ────────────────────────────────────────────────────────────

def hook_name(call: CallExpression) -> str | None:
    """Name of the called hook for ``useX(...)`` and ``React.useX(...)``."""
    callee = call.callee
    if isinstance(callee, Identifier):
        return callee.name
    if (
        isinstance(callee, MemberExpression)
        and isinstance(callee.object, Identifier)
        and callee.object.name == "React"
    ):
        return callee.property
    return None


def callee_identifier(call: CallExpression) -> str | None:
    return call.callee.name if isinstance(call.callee, Identifier) else None


def is_setter_name(name: str) -> bool:
    return bool(_SETTER_NAME.match(name))


def setter_state_name(setter: str) -> str:
    """setFilteredItems -> filteredItems"""
    rest = setter[3:]
    return rest[:1].lower() + rest[1:]


# ── Component detection ─────────────────────────────────────────────────────

_markup_cache: WeakKeyDictionary[Function, bool] = WeakKeyDictionary()


def contains_markup(fn: Function) -> bool:
    cached = _markup_cache.get(fn)
    if cached is None:
        cached = any(isinstance(n, (JSXElement, JSXFragment)) for n in walk(fn))
        _markup_cache[fn] = cached
    return cached


def is_component(fn: Node) -> bool:
    """Capitalised declaration name, else capitalised variable name, else returns markup."""
    if not isinstance(fn, Function) or isinstance(fn, MethodDefinition):
        return False
    if isinstance(fn, FunctionDeclaration) and fn.name:
        return bool(_UPPERCASE_START.match(fn.name))
    parent = fn.parent
    if isinstance(parent, VariableDeclarator) and isinstance(parent.target, Identifier):
        return bool(_UPPERCASE_START.match(parent.target.name))
    return contains_markup(fn)


def component_name(fn: Function) -> str | None:
    if isinstance(fn, FunctionDeclaration) and fn.name:
        return fn.name
    parent = fn.parent
    if isinstance(parent, VariableDeclarator) and isinstance(parent.target, Identifier):
        return parent.target.name
    if isinstance(parent, ExportDefaultDeclaration):
        return fn.name or "DefaultExport"
    return None


# ── Extraction ──────────────────────────────────────────────────────────────

def extract_state_entries(component: Function) -> list[StateEntry]:
    """State declarations in source order.

    Only the canonical two-identifier array destructuring is recognised;
    any other binding shape is skipped.
    """
    entries: list[StateEntry] = []
    for node in walk(component):
        if not isinstance(node, CallExpression) or hook_name(node) != STATE_HOOK:
            continue
        declarator = node.parent
        if not isinstance(declarator, VariableDeclarator) or declarator.init is not node:
            continue
        pattern = declarator.target
        if not isinstance(pattern, ArrayPattern) or len(pattern.elements) != 2:
            continue
        value, setter = pattern.elements
        if not isinstance(value, Identifier) or not isinstance(setter, Identifier):
            continue
        entries.append(StateEntry(
            name=value.name,
            setter_name=setter.name,
            initial_value=node.arguments[0] if node.arguments else None,
            declaration=node,
        ))
    return entries


def find_effect_blocks(component: Function) -> list[EffectBlock]:
    blocks: list[EffectBlock] = []
    for node in walk(component):
        if not isinstance(node, CallExpression) or hook_name(node) not in EFFECT_HOOKS:
            continue
        callback = node.arguments[0] if node.arguments else None
        if not isinstance(callback, Function):
            blocks.append(EffectBlock(call=node, callback=None))
            continue
        setter_calls = tuple(
            n for n in walk(callback)
            if isinstance(n, CallExpression) and is_setter_name(callee_identifier(n) or "")
        )
        blocks.append(EffectBlock(
            call=node,
            callback=callback,
            setter_calls=setter_calls,
            has_external_operation=has_external_operation(callback),
        ))
    return blocks


def has_external_operation(callback: Function) -> bool:
    """Network, timers, storage/DOM globals, promises, awaits or a cleanup return."""
    for node in walk(callback):
        if isinstance(node, AwaitExpression):
            return True
        if isinstance(node, ReturnStatement):
            if node.argument is not None and enclosing_function(node) is callback:
                return True
            continue
        if isinstance(node, MemberExpression):
            if isinstance(node.object, Identifier) and node.object.name in BROWSER_GLOBALS:
                return True
            continue
        if isinstance(node, CallExpression):
            if callee_identifier(node) in EXTERNAL_CALLS:
                return True
            callee = node.callee
            if isinstance(callee, MemberExpression) and (
                callee.property in PROMISE_METHODS or callee.property in SUBSCRIPTION_METHODS
            ):
                return True
    return False


def extract_props(fn: Function) -> ComponentProps:
    if not fn.params:
        return ComponentProps()
    first = fn.params[0]
    if isinstance(first, AssignmentPattern):
        first = first.left

    if isinstance(first, ObjectPattern):
        names: list[str] = []
        rest: list[str] = []
        for prop in first.properties:
            if isinstance(prop, PatternProperty) and prop.key:
                names.append(prop.key)
            elif isinstance(prop, RestElement) and isinstance(prop.argument, Identifier):
                rest.append(prop.argument.name)
        return ComponentProps(names=tuple(names), rest_names=tuple(rest))

    if isinstance(first, Identifier):
        accessed: list[str] = []
        for node in walk(fn):
            if (
                isinstance(node, MemberExpression)
                and isinstance(node.object, Identifier)
                and node.object.name == first.name
                and node.property
                and node.property not in accessed
            ):
                accessed.append(node.property)
        return ComponentProps(names=tuple(accessed), object_name=first.name)

    return ComponentProps()


def render_roots(component: Function) -> list[Node]:
    """Expressions the component returns: its markup output."""
    if component.body is not None and not isinstance(component.body, BlockStatement):
        return [component.body]
    roots: list[Node] = []
    for node in walk(component):
        if (
            isinstance(node, ReturnStatement)
            and node.argument is not None
            and enclosing_function(node) is component
        ):
            roots.append(node.argument)
    return roots


# ── Per-component / per-module snapshots ────────────────────────────────────

class Component:
    """A component function plus its lazily extracted, shared facts."""

    def __init__(self, node: Function, index: int = 0):
        self.node = node
        self.index = index

    def __repr__(self) -> str:
        return f"Component({self.name or '<anonymous>'} @ {self.node.line})"

    @cached_property
    def name(self) -> str | None:
        return component_name(self.node)

    @cached_property
    def states(self) -> list[StateEntry]:
        return extract_state_entries(self.node)

    @cached_property
    def effects(self) -> list[EffectBlock]:
        return find_effect_blocks(self.node)

    @cached_property
    def props(self) -> ComponentProps:
        return extract_props(self.node)

    @cached_property
    def setter_names(self) -> set[str]:
        return {s.setter_name for s in self.states}

    @cached_property
    def uses_reducer(self) -> bool:
        return any(
            isinstance(n, CallExpression) and hook_name(n) == REDUCER_HOOK
            for n in walk(self.node)
        )


def find_components(tree: Program) -> list[Component]:
    functions = [n for n in walk(tree) if isinstance(n, Function)]
    return [Component(fn, i) for i, fn in enumerate(f for f in functions if is_component(f))]


@dataclass
class SourceModule:
    """A parsed file handed to the rules."""
    path: str
    tree: Program

    @cached_property
    def components(self) -> list[Component]:
        return find_components(self.tree)
