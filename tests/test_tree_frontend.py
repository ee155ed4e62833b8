"""Tests for the TSX frontend (tree-sitter lowering) and tree navigation."""

from __future__ import annotations

import textwrap

import pytest

from react_state_patterns.tree import ParseError, parse_source, walk
from react_state_patterns.tree.nodes import (
    ArrayPattern,
    ArrowFunction,
    CallExpression,
    Function,
    FunctionDeclaration,
    Identifier,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXSpreadAttribute,
    MemberExpression,
    NumberLiteral,
    ObjectExpression,
    ObjectPattern,
    Property,
    StringLiteral,
    VariableDeclarator,
)
from react_state_patterns.tree.tsx_frontend import dialect_for
from react_state_patterns.tree.walk import (
    ancestors,
    enclosing_function,
    is_binding_identifier,
    traverse,
)


def _parse(code: str, filename: str = "test.tsx"):
    return parse_source(textwrap.dedent(code), filename)


def _first(tree, cls):
    return next(n for n in walk(tree) if isinstance(n, cls))


class TestLowering:
    def test_function_declaration_and_positions(self):
        tree = _parse("""
            function Counter() {
              return <div />;
            }
        """)
        fn = _first(tree, FunctionDeclaration)
        assert fn.name == "Counter"
        assert fn.line == 2
        assert fn.column == 1

    def test_use_state_destructuring(self):
        tree = _parse("""
            const Counter = () => {
              const [count, setCount] = useState<number>(0);
              return <span>{count}</span>;
            };
        """)
        declarator = next(
            n for n in walk(tree)
            if isinstance(n, VariableDeclarator) and isinstance(n.target, ArrayPattern)
        )
        names = [e.name for e in declarator.target.elements]
        assert names == ["count", "setCount"]
        call = declarator.init
        assert isinstance(call, CallExpression)
        assert call.callee.name == "useState"
        assert isinstance(call.arguments[0], NumberLiteral)
        assert call.arguments[0].raw == "0"

    def test_type_assertions_are_transparent(self):
        tree = _parse("const x = (props.value as string);")
        declarator = _first(tree, VariableDeclarator)
        assert isinstance(declarator.init, MemberExpression)
        assert declarator.init.property == "value"

    def test_object_keys_are_unquoted(self):
        tree = _parse("const users = { '1': { name: 'a' }, b: 2 };")
        obj = _first(tree, ObjectExpression)
        keys = [p.key for p in obj.properties if isinstance(p, Property)]
        assert keys == ["1", "b"]

    def test_string_literal_value(self):
        tree = _parse("const s = 'hello';")
        assert _first(tree, StringLiteral).value == "hello"

    def test_jsx_attribute_expression_container(self):
        tree = _parse("""
            function A({ title }) {
              return <B title={title} {...rest} />;
            }
        """)
        element = _first(tree, JSXElement)
        assert element.name == "B"
        attr, spread = element.attributes
        assert isinstance(attr, JSXAttribute)
        assert attr.name == "title"
        assert isinstance(attr.value, JSXExpressionContainer)
        assert isinstance(attr.value.expression, Identifier)
        assert isinstance(spread, JSXSpreadAttribute)
        assert spread.argument.name == "rest"

    def test_destructured_params(self):
        tree = _parse("""
            function Card({ title, body = '', ...others }) {
              return <div>{title}</div>;
            }
        """)
        fn = _first(tree, FunctionDeclaration)
        pattern = fn.params[0]
        assert isinstance(pattern, ObjectPattern)
        keys = [getattr(p, "key", None) for p in pattern.properties]
        assert keys[:2] == ["title", "body"]


class TestNavigation:
    def test_parent_links_and_enclosing_function(self):
        tree = _parse("""
            function A() {
              const handle = () => setOpen(true);
              return <div />;
            }
        """)
        call = next(
            n for n in walk(tree)
            if isinstance(n, CallExpression) and n.callee.name == "setOpen"
        )
        assert isinstance(enclosing_function(call), ArrowFunction)
        outer = [a for a in ancestors(call) if isinstance(a, FunctionDeclaration)]
        assert outer and outer[0].name == "A"

    def test_binding_identifiers(self):
        tree = _parse("""
            function A({ title }) {
              const [open, setOpen] = useState(false);
              return <div>{title}{open}</div>;
            }
        """)
        titles = [n for n in walk(tree) if isinstance(n, Identifier) and n.name == "title"]
        assert [is_binding_identifier(n) for n in titles] == [True, False]
        opens = [n for n in walk(tree) if isinstance(n, Identifier) and n.name == "open"]
        assert [is_binding_identifier(n) for n in opens] == [True, False]

    def test_traverse_dispatches_on_base_classes(self):
        tree = _parse("""
            function A() {
              const f = () => 1;
              return g(f);
            }
        """)
        seen: list[str] = []
        traverse(tree, {
            Function: lambda n: seen.append(type(n).__name__),
            CallExpression: lambda n: seen.append(n.callee.name),
        })
        assert seen == ["FunctionDeclaration", "ArrowFunction", "g"]

    def test_walk_is_preorder(self):
        tree = _parse("f(a, b);")
        names = [n.name for n in walk(tree) if isinstance(n, Identifier)]
        assert names == ["f", "a", "b"]


class TestParseErrors:
    def test_syntax_error_raises_with_position(self):
        with pytest.raises(ParseError) as info:
            _parse("function A() { return <div>{</div>; }", "broken.tsx")
        assert info.value.filename == "broken.tsx"
        assert info.value.line >= 1
        assert "broken.tsx" in str(info.value)

    def test_empty_source_is_empty_program(self):
        tree = parse_source("", "empty.tsx")
        assert tree.body == []


def test_dialect_for():
    assert dialect_for("a.ts") == "typescript"
    assert dialect_for("a.tsx") == "tsx"
    assert dialect_for("a.jsx") == "tsx"
    assert dialect_for("a.d.ts") == "tsx"
