"""Fetched server data kept in hand-managed ``useState``.

Three pathways, each yielding a data/loading/error triple:

* a network call inside an effect whose setters feed data-, loading- or
  error-named state;
* a network call in the component body outside any effect (once per
  component);
* a state whose name alone says it holds server data.

Network calls are recognised from fixed allow-lists of callee names, not by
following values.
"""

from __future__ import annotations

from dataclasses import dataclass

from react_state_patterns.analyzer.components import (
    Component,
    SourceModule,
    StateEntry,
    callee_identifier,
    setter_state_name,
)
from react_state_patterns.analyzer.models import Issue, ProjectContext
from react_state_patterns.rules import patterns
from react_state_patterns.rules.base import Rule, make_issue, per_component
from react_state_patterns.tree.nodes import CallExpression, Identifier, MemberExpression, Node
from react_state_patterns.tree.walk import is_within, walk

NAME = "server-vs-client-state"


@dataclass
class ServerStatePattern:
    data_state: str
    loading_state: str | None
    error_state: str | None
    at: Node | StateEntry

    @property
    def state_names(self) -> list[str]:
        return [n for n in (self.data_state, self.loading_state, self.error_state) if n]


def check_component(
    component: Component, module: SourceModule, context: ProjectContext | None = None,
) -> list[Issue]:
    return [
        make_issue(
            NAME, module, p.at,
            severity="warning",
            message=(
                f"Server data ({', '.join(p.state_names)}) is managed with useState "
                "instead of a data fetching library"
            ),
            suggestion=(
                "Consider using React Query, SWR, or RTK Query for server state management. "
                "These provide caching, deduplication, and automatic refetching."
            ),
            fixable=False,
        )
        for p in find_server_state(component)
    ]


def find_server_state(component: Component) -> list[ServerStatePattern]:
    states = component.states
    loading = [s for s in states if patterns.contains_any(s.name.lower(), patterns.LOADING_STATE_WORDS)]
    errors = [s for s in states if patterns.contains_any(s.name.lower(), patterns.ERROR_STATE_WORDS)]
    # a loading or error flag never doubles as the data state
    status = {s.name for s in loading + errors}
    data = [
        s for s in states
        if s.name not in status and patterns.contains_any(s.name.lower(), patterns.DATA_STATE_WORDS)
    ]
    found: list[ServerStatePattern] = []

    for effect in component.effects:
        if effect.callback is None:
            continue
        setters = [c.callee.name for c in effect.setter_calls]
        data_match = related_state(setters, data)
        loading_match = related_state(setters, loading)
        error_match = related_state(setters, errors)
        if data_match is None and not (loading_match and error_match):
            continue
        for call in network_calls(effect.callback):
            found.append(ServerStatePattern(
                data_state=data_match.name if data_match else "data",
                loading_state=loading_match.name if loading_match else None,
                error_state=error_match.name if error_match else None,
                at=call,
            ))

    if data or (loading and errors):
        for call in network_calls(component.node):
            if any(is_within(call, effect.call) for effect in component.effects):
                continue
            found.append(ServerStatePattern(
                data_state=data[0].name if data else "data",
                loading_state=loading[0].name if loading else None,
                error_state=errors[0].name if errors else None,
                at=call,
            ))
            break

    for state in states:
        if looks_like_server_data(state.name):
            found.append(ServerStatePattern(
                data_state=state.name, loading_state=None, error_state=None, at=state,
            ))
    return found


def network_calls(root: Node) -> list[CallExpression]:
    return [n for n in walk(root) if isinstance(n, CallExpression) and is_network_call(n)]


def is_network_call(call: CallExpression) -> bool:
    if callee_identifier(call) == "fetch":
        return True
    callee = call.callee
    if not isinstance(callee, MemberExpression) or not isinstance(callee.object, Identifier):
        return False
    obj, method = callee.object.name, callee.property
    if obj in patterns.HTTP_CLIENT_OBJECTS and method in patterns.HTTP_CLIENT_METHODS:
        return True
    return obj.lower() in patterns.GRAPHQL_CLIENT_OBJECTS and method in patterns.GRAPHQL_METHODS


def related_state(setters: list[str], candidates: list[StateEntry]) -> StateEntry | None:
    """First candidate fed by one of the setters, trying setters in call order."""
    for setter in setters:
        expected = (setter_state_name(setter), setter[3:])
        for state in candidates:
            if state.name in expected:
                return state
    return None


def looks_like_server_data(name: str) -> bool:
    lowered = name.lower()
    if patterns.contains_any(lowered, patterns.CLIENT_STATE_WORDS):
        return False
    if lowered.endswith("data"):
        return True
    return any(
        lowered == word or lowered.startswith(word) or lowered.endswith(word)
        for word in patterns.SERVER_DATA_WORDS
    )


RULE = Rule(
    name=NAME,
    description="Server data should be managed with dedicated libraries, not useState",
    severity="warning",
    check=per_component(check_component),
)
