"""Rule set. ``default_rules()`` is the fixed evaluation order."""

from __future__ import annotations

from react_state_patterns.rules import (
    avoid_deeply_nested_state,
    avoid_redundant_state,
    avoid_state_contradictions,
    avoid_state_duplication,
    detect_prop_drilling,
    detect_state_in_useeffect,
    form_state_patterns,
    group_related_state,
    prefer_explicit_transitions,
    server_vs_client_state,
    state_vs_refs,
)
from react_state_patterns.rules.base import Rule

_ORDERED: tuple[Rule, ...] = (
    group_related_state.RULE,
    avoid_state_contradictions.RULE,
    avoid_redundant_state.RULE,
    avoid_deeply_nested_state.RULE,
    avoid_state_duplication.RULE,
    prefer_explicit_transitions.RULE,
    detect_state_in_useeffect.RULE,
    detect_prop_drilling.RULE,
    state_vs_refs.RULE,
    server_vs_client_state.RULE,
    form_state_patterns.RULE,
)

RULE_NAMES: tuple[str, ...] = tuple(r.name for r in _ORDERED)


def default_rules(disabled: set[str] | frozenset[str] = frozenset()) -> list[Rule]:
    """A fresh list of every rule in evaluation order, minus the disabled names."""
    return [r for r in _ORDERED if r.name not in disabled]


__all__ = ["RULE_NAMES", "Rule", "default_rules"]
