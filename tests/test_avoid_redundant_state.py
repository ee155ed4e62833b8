"""Tests for the avoid-redundant-state rule."""

from __future__ import annotations

import textwrap

from react_state_patterns.analyzer.components import SourceModule
from react_state_patterns.rules import avoid_redundant_state
from react_state_patterns.tree import parse_source


def _issues(code: str):
    module = SourceModule(path="test.tsx", tree=parse_source(textwrap.dedent(code), "test.tsx"))
    return avoid_redundant_state.RULE(module)


def test_count_next_to_array_state():
    issues = _issues("""
        function List() {
          const [todos, setTodos] = useState([]);
          const [todoCount, setTodoCount] = useState(0);
          return <div />;
        }
    """)
    assert len(issues) == 1
    assert issues[0].message == "State 'todoCount' appears to be computable from other state"
    assert issues[0].severity == "warning"
    assert issues[0].line == 4


def test_count_without_collection_sibling():
    issues = _issues("""
        function Clicker() {
          const [clickCount, setClickCount] = useState(0);
          const [label, setLabel] = useState('');
          return <div />;
        }
    """)
    names = [i.message for i in issues]
    assert "State 'clickCount' appears to be computable from other state" not in names


def test_toggle_needs_boolean_sibling():
    issues = _issues("""
        function Panel() {
          const [isOpen, setIsOpen] = useState(false);
          const [buttonDisabled, setButtonDisabled] = useState(false);
          return <div />;
        }
    """)
    assert [i.message for i in issues] == [
        "State 'buttonDisabled' appears to be computable from other state",
    ]


def test_alone_is_never_redundant():
    issues = _issues("""
        function Total() {
          const [total, setTotal] = useState(0);
          return <div>{total}</div>;
        }
    """)
    assert issues == []
