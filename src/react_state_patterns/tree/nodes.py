"""Syntax tree node classes -- pure data, no logic.

The frontend lowers a tree-sitter concrete syntax tree into these classes.
Only constructs that some rule inspects get a dedicated class; everything
else becomes ``Other`` with its children preserved so walks still reach
nested code.  Positions are 1-based.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    line: int = field(default=0, kw_only=True)
    column: int = field(default=0, kw_only=True)
    end_line: int = field(default=0, kw_only=True)
    end_column: int = field(default=0, kw_only=True)
    parent: Node | None = field(default=None, kw_only=True, repr=False)


# ── Program / declarations ─────────────────────────────────────────────────

@dataclass(eq=False)
class Program(Node):
    body: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class Function(Node):
    name: str | None
    params: list[Node] = field(default_factory=list)
    body: Node | None = None
    is_async: bool = False


@dataclass(eq=False)
class FunctionDeclaration(Function):
    pass


@dataclass(eq=False)
class FunctionExpression(Function):
    pass


@dataclass(eq=False)
class ArrowFunction(Function):
    pass


@dataclass(eq=False)
class MethodDefinition(Function):
    pass


@dataclass(eq=False)
class VariableDeclaration(Node):
    kind: str                   # "const" | "let" | "var"
    declarations: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class VariableDeclarator(Node):
    target: Node
    init: Node | None = None


@dataclass(eq=False)
class ExportDefaultDeclaration(Node):
    declaration: Node | None = None


# ── Expressions ────────────────────────────────────────────────────────────

@dataclass(eq=False)
class Identifier(Node):
    name: str


@dataclass(eq=False)
class StringLiteral(Node):
    value: str


@dataclass(eq=False)
class NumberLiteral(Node):
    raw: str


@dataclass(eq=False)
class BooleanLiteral(Node):
    value: bool


@dataclass(eq=False)
class NullLiteral(Node):
    pass


@dataclass(eq=False)
class TemplateLiteral(Node):
    expressions: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class ArrayExpression(Node):
    elements: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class ObjectExpression(Node):
    properties: list[Node] = field(default_factory=list)  # Property | SpreadElement | MethodDefinition


@dataclass(eq=False)
class Property(Node):
    key: str | None                      # None when the key is computed
    computed_key: Node | None = None
    value: Node | None = None
    shorthand: bool = False


@dataclass(eq=False)
class SpreadElement(Node):
    argument: Node | None = None


@dataclass(eq=False)
class MemberExpression(Node):
    object: Node
    property: str | None = None          # None for computed access: a[b]
    computed_property: Node | None = None
    optional: bool = False


@dataclass(eq=False)
class CallExpression(Node):
    callee: Node
    arguments: list[Node] = field(default_factory=list)
    optional: bool = False


@dataclass(eq=False)
class AwaitExpression(Node):
    argument: Node | None = None


@dataclass(eq=False)
class BinaryExpression(Node):
    operator: str
    left: Node | None = None
    right: Node | None = None


@dataclass(eq=False)
class LogicalExpression(Node):
    operator: str               # "&&" | "||" | "??"
    left: Node | None = None
    right: Node | None = None


@dataclass(eq=False)
class UnaryExpression(Node):
    operator: str
    argument: Node | None = None


@dataclass(eq=False)
class ConditionalExpression(Node):
    test: Node | None = None
    consequent: Node | None = None
    alternate: Node | None = None


@dataclass(eq=False)
class AssignmentExpression(Node):
    operator: str
    left: Node | None = None
    right: Node | None = None


# ── Patterns ───────────────────────────────────────────────────────────────

@dataclass(eq=False)
class ArrayPattern(Node):
    elements: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class ObjectPattern(Node):
    properties: list[Node] = field(default_factory=list)  # PatternProperty | RestElement


@dataclass(eq=False)
class PatternProperty(Node):
    key: str | None
    value: Node | None = None
    shorthand: bool = False


@dataclass(eq=False)
class AssignmentPattern(Node):
    left: Node
    right: Node | None = None


@dataclass(eq=False)
class RestElement(Node):
    argument: Node | None = None


# ── Statements ─────────────────────────────────────────────────────────────

@dataclass(eq=False)
class BlockStatement(Node):
    body: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class ReturnStatement(Node):
    argument: Node | None = None


@dataclass(eq=False)
class IfStatement(Node):
    test: Node | None = None
    consequent: Node | None = None
    alternate: Node | None = None


@dataclass(eq=False)
class SwitchStatement(Node):
    discriminant: Node | None = None
    cases: list[Node] = field(default_factory=list)


# ── JSX ────────────────────────────────────────────────────────────────────

@dataclass(eq=False)
class JSXElement(Node):
    name: str
    attributes: list[Node] = field(default_factory=list)  # JSXAttribute | JSXSpreadAttribute
    children: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class JSXFragment(Node):
    children: list[Node] = field(default_factory=list)


@dataclass(eq=False)
class JSXAttribute(Node):
    name: str
    value: Node | None = None


@dataclass(eq=False)
class JSXSpreadAttribute(Node):
    argument: Node | None = None


@dataclass(eq=False)
class JSXExpressionContainer(Node):
    expression: Node | None = None


@dataclass(eq=False)
class JSXText(Node):
    value: str


# ── Everything else ────────────────────────────────────────────────────────

@dataclass(eq=False)
class Other(Node):
    kind: str                   # tree-sitter node type, e.g. "new_expression"
    children: list[Node] = field(default_factory=list)
