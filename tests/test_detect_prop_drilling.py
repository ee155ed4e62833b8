"""Tests for the detect-prop-drilling rule."""

from __future__ import annotations

import textwrap

from react_state_patterns.analyzer.components import SourceModule
from react_state_patterns.rules import detect_prop_drilling
from react_state_patterns.tree import parse_source


def _issues(code: str):
    module = SourceModule(path="test.tsx", tree=parse_source(textwrap.dedent(code), "test.tsx"))
    return detect_prop_drilling.RULE(module)


def test_two_component_chain_is_warning():
    issues = _issues("""
        function Page({ user }) {
          return <Header user={user} />;
        }

        function Header({ user }) {
          return <h1>{user.name}</h1>;
        }
    """)
    assert len(issues) == 1
    issue = issues[0]
    assert issue.severity == "warning"
    assert issue.message == (
        'Prop "user" is drilled through 2 components (Page → Header) without being used '
        "in intermediate components - prop drilling detected"
    )
    assert issue.line == 2
    assert "React Context" in issue.suggestion


def test_three_component_chain_is_error():
    issues = _issues("""
        function App({ theme }) {
          return <Layout theme={theme} />;
        }

        function Layout({ theme }) {
          return <Sidebar theme={theme} />;
        }

        function Sidebar({ theme }) {
          return <nav className={theme}>{theme}</nav>;
        }
    """)
    assert len(issues) == 1
    issue = issues[0]
    assert issue.severity == "error"
    assert "(App → Layout → Sidebar)" in issue.message
    assert "deep prop drilling detected" in issue.message
    assert issue.suggestion.startswith("Critical:")


def test_used_at_every_level():
    issues = _issues("""
        function Dashboard({ user }) {
          return <div><span>{user.name}</span><Sidebar user={user} /></div>;
        }

        function Sidebar({ user }) {
          return <aside>{user.email}</aside>;
        }
    """)
    assert issues == []


def test_spread_counts_as_forwarding():
    issues = _issues("""
        function Wrapper({ title }) {
          return <Form {...{ title }} />;
        }

        function Form({ title }) {
          return <h2>{title}</h2>;
        }
    """)
    assert len(issues) == 1
    assert "(Wrapper → Form)" in issues[0].message


def test_props_object_member_forwarded():
    issues = _issues("""
        function Outer(props) {
          return <Inner label={props.label} />;
        }

        function Inner({ label }) {
          return <span>{label}</span>;
        }
    """)
    assert len(issues) == 1
    assert "(Outer → Inner)" in issues[0].message


def test_single_component_never_drills():
    issues = _issues("""
        function Only({ label }) {
          return <Button label={label} />;
        }
    """)
    assert issues == []


def test_reads_inside_attribute_expressions_end_the_chain():
    issues = _issues("""
        function FormContainer(props) {
          return (
            <div className="container">
              <ActualForm formData={props.formData} onSubmit={props.onSubmit} />
            </div>
          );
        }

        function ActualForm({ formData, onSubmit }) {
          return (
            <form onSubmit={() => onSubmit(formData)}>
              <input value={formData.firstName} />
              <input value={formData.email} />
            </form>
          );
        }
    """)
    by_prop = {i.message.split('"')[1]: i for i in issues}
    assert set(by_prop) == {"formData", "onSubmit"}
    issue = by_prop["formData"]
    assert issue.severity == "warning"
    assert "drilled through 2 components (FormContainer → ActualForm)" in issue.message
