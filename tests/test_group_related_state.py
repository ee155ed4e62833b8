"""Tests for the group-related-state rule."""

from __future__ import annotations

import textwrap

from react_state_patterns.analyzer.components import SourceModule
from react_state_patterns.rules import group_related_state
from react_state_patterns.rules.group_related_state import are_related, base_name
from react_state_patterns.tree import parse_source


def _issues(code: str):
    module = SourceModule(path="test.tsx", tree=parse_source(textwrap.dedent(code), "test.tsx"))
    return group_related_state.RULE(module)


def test_form_fields_grouped():
    """firstName/lastName/email/phone form one group of four."""
    issues = _issues("""
        function Profile() {
          const [firstName, setFirstName] = useState('');
          const [lastName, setLastName] = useState('');
          const [email, setEmail] = useState('');
          const [phone, setPhone] = useState('');
          return <form />;
        }
    """)
    assert len(issues) == 1
    issue = issues[0]
    assert issue.rule == "group-related-state"
    assert issue.severity == "warning"
    assert issue.fixable
    assert issue.message == (
        "Found 4 related state variables that should be grouped: "
        "firstName, lastName, email, phone"
    )
    assert issue.line == 3
    assert "useState({ firstName: '', lastName: '', email: '', phone: '' })" in issue.suggestion


def test_shared_base_names_the_group():
    issues = _issues("""
        function Cart() {
          const [productId, setProductId] = useState(null);
          const [productName, setProductName] = useState('');
          const [productPrice, setProductPrice] = useState(0);
          return <div />;
        }
    """)
    assert len(issues) == 1
    assert "const [product, setProduct] = useState({ productId: null, productName: '', productPrice: 0 })" in issues[0].suggestion


def test_unrelated_state_not_grouped():
    issues = _issues("""
        function Counter() {
          const [count, setCount] = useState(0);
          const [theme, setTheme] = useState('light');
          return <div>{count}{theme}</div>;
        }
    """)
    assert issues == []


def test_no_state_no_issues():
    assert _issues("const A = () => <div />;") == []


def test_each_state_in_one_group_only():
    issues = _issues("""
        function Status() {
          const [isLoading, setIsLoading] = useState(false);
          const [hasError, setHasError] = useState(false);
          const [isOpen, setIsOpen] = useState(false);
          return <div />;
        }
    """)
    grouped = [name for i in issues for name in i.message.split(": ", 1)[1].split(", ")]
    assert len(grouped) == len(set(grouped))


def test_relatedness_heuristics():
    assert are_related("userId", "userName")
    assert are_related("billingCity", "shippingCountry")
    assert are_related("fetchError", "isFetching")
    assert are_related("isOpen", "isDirty")
    assert not are_related("count", "theme")


def test_base_name():
    assert base_name("productId") == "product"
    assert base_name("isOpen") == "open"
    assert base_name("count") is None
