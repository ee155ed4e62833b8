"""Tests for the prefer-explicit-transitions rule."""

from __future__ import annotations

import textwrap

from react_state_patterns.analyzer.components import SourceModule
from react_state_patterns.analyzer.models import ProjectContext
from react_state_patterns.rules import prefer_explicit_transitions
from react_state_patterns.rules.prefer_explicit_transitions import (
    SetterProfile,
    complexity,
    suggestion_for,
)
from react_state_patterns.tree import parse_source

MODERATE = """
    function Wizard() {
      const [step, setStep] = useState(0);
      const [name, setName] = useState('');
      const [email, setEmail] = useState('');
      const [done, setDone] = useState(false);
      return <div>{step}{name}{email}{done}</div>;
    }
"""


def _issues(code: str, context: ProjectContext | None = None):
    module = SourceModule(path="test.tsx", tree=parse_source(textwrap.dedent(code), "test.tsx"))
    return prefer_explicit_transitions.RULE(module, context)


def test_four_states_is_moderate():
    issues = _issues(MODERATE)
    assert len(issues) == 1
    issue = issues[0]
    assert issue.severity == "info"
    assert issue.message == "Component has 4 state variables with complex update patterns"
    assert issue.suggestion == (
        "Consider using useReducer to make state transitions more explicit and predictable"
    )
    assert issue.line == 2


def test_existing_reducer_is_left_alone():
    issues = _issues("""
        function Wizard() {
          const [state, dispatch] = useReducer(reducer, initial);
          const [a, setA] = useState(0);
          const [b, setB] = useState(0);
          const [c, setC] = useState(0);
          const [d, setD] = useState(0);
          return <div />;
        }
    """)
    assert issues == []


def test_simple_component():
    issues = _issues("""
        function Toggle() {
          const [on, setOn] = useState(false);
          return <button onClick={() => setOn((v) => !v)}>{on}</button>;
        }
    """)
    assert issues == []


def test_coordinated_updates_make_it_moderate():
    issues = _issues("""
        function Upload() {
          const [progress, setProgress] = useState(0);
          const [file, setFile] = useState(null);
          const [message, setMessage] = useState('');
          const start = (f) => {
            setFile(f);
            setProgress(0);
            setMessage('uploading');
          };
          return <div>{progress}{message}</div>;
        }
    """)
    assert len(issues) == 1


def test_xstate_context_changes_suggestion_only():
    plain = _issues(MODERATE)
    with_store = _issues(MODERATE, ProjectContext(has_xstate_store=True))
    assert len(plain) == len(with_store) == 1
    assert plain[0].message == with_store[0].message
    assert "@xstate/store (already in your project)" in with_store[0].suggestion


def test_complexity_levels():
    assert complexity(1, {}) == "simple"
    assert complexity(4, {}) == "moderate"
    assert complexity(8, {}) == "complex"
    coupled = {
        f"set{i}": SetterProfile(f"set{i}", depends_on_previous=True, updated_with=["a", "b"])
        for i in range(3)
    }
    assert complexity(3, coupled) == "complex"


def test_complex_suggestions():
    assert "XState (already in your project)" in suggestion_for(
        "complex", ProjectContext(has_xstate=True)
    )
    assert suggestion_for("complex", None) == (
        "Consider using useReducer or exploring XState for complex state orchestration"
    )
