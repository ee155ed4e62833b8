"""Tests for the rule aggregator and issue statistics."""

from __future__ import annotations

import logging
import textwrap

import pytest

from react_state_patterns.analyzer.components import SourceModule
from react_state_patterns.analyzer.models import AnalysisStats, Issue
from react_state_patterns.analyzer.service import run_all_rules, summarize, summarize_many
from react_state_patterns.rules import RULE_NAMES, Rule, default_rules
from react_state_patterns.tree import parse_source

CLEAN = """
    function Counter() {
      const [count, setCount] = useState(0);
      const [isVisible, setIsVisible] = useState(true);
      return isVisible ? <button onClick={() => setCount(count + 1)}>{count}</button> : null;
    }
"""

MESSY = """
    function Loader() {
      const [isLoading, setIsLoading] = useState(false);
      const [hasError, setHasError] = useState(false);
      const [isSuccess, setIsSuccess] = useState(false);
      return <div>{isLoading}{hasError}{isSuccess}</div>;
    }
"""


def _tree(code: str):
    return parse_source(textwrap.dedent(code), "test.tsx")


def _issue(rule: str, severity: str) -> Issue:
    return Issue(rule=rule, severity=severity, message="m", file="a.tsx", line=1, column=1)


def test_rule_order_is_fixed():
    assert RULE_NAMES == (
        "group-related-state",
        "avoid-state-contradictions",
        "avoid-redundant-state",
        "avoid-deeply-nested-state",
        "avoid-state-duplication",
        "prefer-explicit-transitions",
        "detect-state-in-useeffect",
        "detect-prop-drilling",
        "state-vs-refs",
        "server-vs-client-state",
        "form-state-patterns",
    )
    assert [r.name for r in default_rules({"state-vs-refs"})] == [
        n for n in RULE_NAMES if n != "state-vs-refs"
    ]


def test_clean_component_has_no_structural_issues():
    issues = run_all_rules(_tree(CLEAN), "test.tsx")
    flagged = {i.rule for i in issues}
    assert not flagged & {
        "group-related-state",
        "avoid-state-contradictions",
        "avoid-redundant-state",
        "state-vs-refs",
    }


def test_empty_file_has_no_issues():
    assert run_all_rules(_tree("export const x = 1;"), "x.tsx") == []


def test_issues_carry_filename_and_rule_order():
    issues = run_all_rules(_tree(MESSY), "src/Loader.tsx")
    assert issues
    assert all(i.file == "src/Loader.tsx" for i in issues)
    order = [RULE_NAMES.index(i.rule) for i in issues]
    assert order == sorted(order)


def test_repeat_runs_are_identical():
    tree = _tree(MESSY)
    assert run_all_rules(tree, "a.tsx") == run_all_rules(tree, "a.tsx")


def test_accepts_source_module():
    module = SourceModule(path="m.tsx", tree=_tree(MESSY))
    assert run_all_rules(module) == run_all_rules(module.tree, "m.tsx")


def test_bare_tree_requires_filename():
    with pytest.raises(ValueError):
        run_all_rules(_tree(MESSY))


def test_failing_rule_is_contained(caplog):
    def explode(module, context=None):
        raise RuntimeError("boom")

    broken = Rule(name="broken", description="always fails", severity="error", check=explode)
    rules = [broken, *default_rules()]
    with caplog.at_level(logging.ERROR):
        issues = run_all_rules(_tree(MESSY), "a.tsx", rules=rules)
    assert issues == run_all_rules(_tree(MESSY), "a.tsx")
    assert "Rule broken failed on a.tsx" in caplog.text


def test_summarize_counts():
    stats = summarize([
        _issue("a", "error"),
        _issue("a", "warning"),
        _issue("b", "warning"),
        _issue("c", "info"),
    ])
    assert (stats.errors, stats.warnings, stats.info) == (1, 2, 1)
    assert stats.by_rule == {"a": 2, "b": 1, "c": 1}
    assert summarize([]) == AnalysisStats()


def test_summarize_many_is_order_independent():
    one = summarize([_issue("a", "error")])
    two = summarize([_issue("a", "info"), _issue("b", "warning")])
    merged = summarize_many([one, two])
    assert merged == summarize_many([two, one])
    assert merged.by_rule == {"a": 2, "b": 1}
    assert (merged.errors, merged.warnings, merged.info) == (1, 1, 1)


def test_issue_positions_are_one_based():
    with pytest.raises(ValueError):
        Issue(rule="a", severity="error", message="m", file="a.tsx", line=0, column=1)


def test_component_without_state_has_no_issues():
    tree = _tree("""
        function Clock({ timezone, onTick }) {
          const frame = useRef(null);
          useEffect(() => {
            const id = setInterval(() => onTick(Date.now()), 1000);
            return () => clearInterval(id);
          }, [onTick]);
          useEffect(() => {
            fetch('/api/time?tz=' + timezone).then((r) => r.json());
          }, [timezone]);
          return <time ref={frame} onClick={() => onTick(0)}>{timezone}</time>;
        }
    """)
    module = SourceModule(path="Clock.tsx", tree=tree)
    assert [c.name for c in module.components] == ["Clock"]
    assert module.components[0].states == []
    assert run_all_rules(module, rules=default_rules()) == []
