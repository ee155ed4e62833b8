"""Lower tree-sitter TSX/TypeScript syntax trees into tree.nodes.

Usage:
    from react_state_patterns.tree.tsx_frontend import parse_source

    program = parse_source(source_text, "src/App.tsx")
"""

from __future__ import annotations

import logging
from functools import lru_cache

import tree_sitter_typescript
from tree_sitter import Language, Parser
from tree_sitter import Node as TSNode

from react_state_patterns.tree.nodes import (
    ArrayExpression,
    ArrayPattern,
    ArrowFunction,
    AssignmentExpression,
    AssignmentPattern,
    AwaitExpression,
    BinaryExpression,
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    ConditionalExpression,
    ExportDefaultDeclaration,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    IfStatement,
    JSXAttribute,
    JSXElement,
    JSXExpressionContainer,
    JSXFragment,
    JSXSpreadAttribute,
    JSXText,
    LogicalExpression,
    MemberExpression,
    MethodDefinition,
    Node,
    NullLiteral,
    NumberLiteral,
    ObjectExpression,
    ObjectPattern,
    Other,
    PatternProperty,
    Program,
    Property,
    RestElement,
    ReturnStatement,
    SpreadElement,
    StringLiteral,
    SwitchStatement,
    TemplateLiteral,
    UnaryExpression,
    VariableDeclaration,
    VariableDeclarator,
)
from react_state_patterns.tree.walk import link_parents

log = logging.getLogger(__name__)

# Syntax with no runtime meaning for the rules.
_SKIPPED_TYPES = {
    "comment",
    "type_annotation",
    "type_arguments",
    "type_parameters",
    "interface_declaration",
    "type_alias_declaration",
    "accessibility_modifier",
    "override_modifier",
    "optional_chain",
}

# Wrappers that only carry a type; the wrapped expression is kept.
_TYPE_WRAPPERS = {
    "as_expression",
    "satisfies_expression",
    "non_null_expression",
    "type_assertion",
}

_LOGICAL_OPERATORS = {"&&", "||", "??"}


class ParseError(Exception):
    """Raised when a source file cannot be parsed."""

    def __init__(self, filename: str, line: int, column: int, message: str = "syntax error"):
        super().__init__(f"{filename}:{line}:{column}: {message}")
        self.filename = filename
        self.line = line
        self.column = column


@lru_cache(maxsize=None)
def _parser(dialect: str) -> Parser:
    if dialect == "typescript":
        language = Language(tree_sitter_typescript.language_typescript())
    else:
        language = Language(tree_sitter_typescript.language_tsx())
    return Parser(language)


def dialect_for(filename: str) -> str:
    """Plain .ts files use the TypeScript grammar; everything else is TSX."""
    if filename.endswith(".ts") and not filename.endswith(".d.ts"):
        return "typescript"
    return "tsx"


def parse_source(source: str, filename: str = "<source>") -> Program:
    """Parse TSX/JSX/TS source text and return the lowered Program."""
    data = source.encode("utf-8")
    ts_tree = _parser(dialect_for(filename)).parse(data)
    root = ts_tree.root_node
    if root.has_error:
        bad = _first_error(root) or root
        raise ParseError(filename, bad.start_point[0] + 1, bad.start_point[1] + 1)

    program = _Lowering().lower(root)
    if not isinstance(program, Program):
        program = Program(body=[program], **_position(root))
    link_parents(program)
    log.debug("Parsed %s", filename)
    return program


def _first_error(node: TSNode) -> TSNode | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _position(ts: TSNode) -> dict[str, int]:
    return {
        "line": ts.start_point[0] + 1,
        "column": ts.start_point[1] + 1,
        "end_line": ts.end_point[0] + 1,
        "end_column": ts.end_point[1] + 1,
    }


def _text(ts: TSNode | None) -> str:
    if ts is None or ts.text is None:
        return ""
    return ts.text.decode("utf-8", errors="replace")


class _Lowering:
    """One method per tree-sitter node type; unknown types become Other."""

    def lower(self, ts: TSNode | None) -> Node | None:
        if ts is None or ts.type in _SKIPPED_TYPES or ts.is_extra:
            return None
        if ts.type in _TYPE_WRAPPERS:
            return self._first(ts)
        handler = getattr(self, "_" + ts.type, None)
        if handler is None:
            return Other(kind=ts.type, children=self._children(ts), **_position(ts))
        return handler(ts)

    def _children(self, ts: TSNode) -> list[Node]:
        out: list[Node] = []
        for child in ts.named_children:
            node = self.lower(child)
            if node is not None:
                out.append(node)
        return out

    def _first(self, ts: TSNode) -> Node | None:
        children = self._children(ts)
        return children[0] if children else None

    def _field(self, ts: TSNode, name: str) -> Node | None:
        return self.lower(ts.child_by_field_name(name))

    # ── Program / statements ────────────────────────────────────────────

    def _program(self, ts: TSNode) -> Node:
        return Program(body=self._children(ts), **_position(ts))

    def _statement_block(self, ts: TSNode) -> Node:
        return BlockStatement(body=self._children(ts), **_position(ts))

    def _expression_statement(self, ts: TSNode) -> Node | None:
        return self._first(ts)

    def _parenthesized_expression(self, ts: TSNode) -> Node | None:
        return self._first(ts)

    def _else_clause(self, ts: TSNode) -> Node | None:
        return self._first(ts)

    def _return_statement(self, ts: TSNode) -> Node:
        return ReturnStatement(argument=self._first(ts), **_position(ts))

    def _if_statement(self, ts: TSNode) -> Node:
        return IfStatement(
            test=self._field(ts, "condition"),
            consequent=self._field(ts, "consequence"),
            alternate=self._field(ts, "alternative"),
            **_position(ts),
        )

    def _switch_statement(self, ts: TSNode) -> Node:
        body = ts.child_by_field_name("body")
        return SwitchStatement(
            discriminant=self._field(ts, "value"),
            cases=self._children(body) if body is not None else [],
            **_position(ts),
        )

    def _export_statement(self, ts: TSNode) -> Node:
        if any(c.type == "default" for c in ts.children):
            declaration = self._field(ts, "declaration") or self._field(ts, "value")
            return ExportDefaultDeclaration(declaration=declaration, **_position(ts))
        return Other(kind=ts.type, children=self._children(ts), **_position(ts))

    def _lexical_declaration(self, ts: TSNode) -> Node:
        kind = _text(ts.children[0]) if ts.children else "const"
        return VariableDeclaration(kind=kind, declarations=self._children(ts), **_position(ts))

    _variable_declaration = _lexical_declaration

    def _variable_declarator(self, ts: TSNode) -> Node:
        target = self._field(ts, "name")
        if target is None:
            target = Other(kind="missing", **_position(ts))
        return VariableDeclarator(target=target, init=self._field(ts, "value"), **_position(ts))

    # ── Functions ───────────────────────────────────────────────────────

    def _params(self, ts: TSNode | None) -> list[Node]:
        if ts is None:
            return []
        params: list[Node] = []
        for child in ts.named_children:
            if child.type in ("required_parameter", "optional_parameter"):
                pattern = self._field(child, "pattern")
                if pattern is None:
                    continue
                default = child.child_by_field_name("value")
                if default is not None:
                    pattern = AssignmentPattern(
                        left=pattern, right=self.lower(default), **_position(child)
                    )
                params.append(pattern)
            else:
                node = self.lower(child)
                if node is not None:
                    params.append(node)
        return params

    @staticmethod
    def _is_async(ts: TSNode) -> bool:
        return any(c.type == "async" for c in ts.children)

    def _function_declaration(self, ts: TSNode) -> Node:
        return FunctionDeclaration(
            name=_text(ts.child_by_field_name("name")) or None,
            params=self._params(ts.child_by_field_name("parameters")),
            body=self._field(ts, "body"),
            is_async=self._is_async(ts),
            **_position(ts),
        )

    _generator_function_declaration = _function_declaration

    def _function_expression(self, ts: TSNode) -> Node:
        return FunctionExpression(
            name=_text(ts.child_by_field_name("name")) or None,
            params=self._params(ts.child_by_field_name("parameters")),
            body=self._field(ts, "body"),
            is_async=self._is_async(ts),
            **_position(ts),
        )

    _function = _function_expression
    _generator_function = _function_expression

    def _arrow_function(self, ts: TSNode) -> Node:
        single = ts.child_by_field_name("parameter")
        if single is not None:
            params = [p for p in (self.lower(single),) if p is not None]
        else:
            params = self._params(ts.child_by_field_name("parameters"))
        return ArrowFunction(
            name=None,
            params=params,
            body=self._field(ts, "body"),
            is_async=self._is_async(ts),
            **_position(ts),
        )

    def _method_definition(self, ts: TSNode) -> Node:
        return MethodDefinition(
            name=_text(ts.child_by_field_name("name")) or None,
            params=self._params(ts.child_by_field_name("parameters")),
            body=self._field(ts, "body"),
            is_async=self._is_async(ts),
            **_position(ts),
        )

    # ── Literals / identifiers ──────────────────────────────────────────

    def _identifier(self, ts: TSNode) -> Node:
        return Identifier(name=_text(ts), **_position(ts))

    _shorthand_property_identifier = _identifier
    _undefined = _identifier

    def _string(self, ts: TSNode) -> Node:
        raw = _text(ts)
        return StringLiteral(value=raw[1:-1] if len(raw) >= 2 else raw, **_position(ts))

    def _template_string(self, ts: TSNode) -> Node:
        expressions: list[Node] = []
        for child in ts.named_children:
            if child.type == "template_substitution":
                expressions.extend(self._children(child))
        return TemplateLiteral(expressions=expressions, **_position(ts))

    def _number(self, ts: TSNode) -> Node:
        return NumberLiteral(raw=_text(ts), **_position(ts))

    def _true(self, ts: TSNode) -> Node:
        return BooleanLiteral(value=True, **_position(ts))

    def _false(self, ts: TSNode) -> Node:
        return BooleanLiteral(value=False, **_position(ts))

    def _null(self, ts: TSNode) -> Node:
        return NullLiteral(**_position(ts))

    # ── Compound expressions ────────────────────────────────────────────

    def _array(self, ts: TSNode) -> Node:
        return ArrayExpression(elements=self._children(ts), **_position(ts))

    def _object(self, ts: TSNode) -> Node:
        properties: list[Node] = []
        for child in ts.named_children:
            if child.type == "pair":
                properties.append(self._pair(child))
            elif child.type == "shorthand_property_identifier":
                ident = self._identifier(child)
                properties.append(
                    Property(key=ident.name, value=ident, shorthand=True, **_position(child))
                )
            else:
                node = self.lower(child)
                if node is not None:
                    properties.append(node)
        return ObjectExpression(properties=properties, **_position(ts))

    def _pair(self, ts: TSNode) -> Node:
        key_ts = ts.child_by_field_name("key")
        key, computed = self._property_key(key_ts)
        return Property(
            key=key, computed_key=computed, value=self._field(ts, "value"), **_position(ts)
        )

    def _property_key(self, key_ts: TSNode | None) -> tuple[str | None, Node | None]:
        if key_ts is None:
            return None, None
        if key_ts.type == "computed_property_name":
            return None, self._first(key_ts)
        if key_ts.type == "string":
            raw = _text(key_ts)
            return raw[1:-1], None
        return _text(key_ts), None

    def _spread_element(self, ts: TSNode) -> Node:
        return SpreadElement(argument=self._first(ts), **_position(ts))

    def _member_expression(self, ts: TSNode) -> Node:
        return MemberExpression(
            object=self._field(ts, "object") or Other(kind="missing", **_position(ts)),
            property=_text(ts.child_by_field_name("property")) or None,
            optional=any(c.type in ("optional_chain", "?.") for c in ts.children),
            **_position(ts),
        )

    def _subscript_expression(self, ts: TSNode) -> Node:
        return MemberExpression(
            object=self._field(ts, "object") or Other(kind="missing", **_position(ts)),
            property=None,
            computed_property=self._field(ts, "index"),
            optional=any(c.type in ("optional_chain", "?.") for c in ts.children),
            **_position(ts),
        )

    def _call_expression(self, ts: TSNode) -> Node:
        args_ts = ts.child_by_field_name("arguments")
        if args_ts is None:
            arguments: list[Node] = []
        elif args_ts.type == "arguments":
            arguments = self._children(args_ts)
        else:
            # tagged template: tag`...`
            arguments = [n for n in (self.lower(args_ts),) if n is not None]
        return CallExpression(
            callee=self._field(ts, "function") or Other(kind="missing", **_position(ts)),
            arguments=arguments,
            optional=any(c.type in ("optional_chain", "?.") for c in ts.children),
            **_position(ts),
        )

    def _await_expression(self, ts: TSNode) -> Node:
        return AwaitExpression(argument=self._first(ts), **_position(ts))

    def _binary_expression(self, ts: TSNode) -> Node:
        operator = _text(ts.child_by_field_name("operator"))
        left = self._field(ts, "left")
        right = self._field(ts, "right")
        if operator in _LOGICAL_OPERATORS:
            return LogicalExpression(operator=operator, left=left, right=right, **_position(ts))
        return BinaryExpression(operator=operator, left=left, right=right, **_position(ts))

    def _unary_expression(self, ts: TSNode) -> Node:
        return UnaryExpression(
            operator=_text(ts.child_by_field_name("operator")),
            argument=self._field(ts, "argument"),
            **_position(ts),
        )

    def _ternary_expression(self, ts: TSNode) -> Node:
        return ConditionalExpression(
            test=self._field(ts, "condition"),
            consequent=self._field(ts, "consequence"),
            alternate=self._field(ts, "alternative"),
            **_position(ts),
        )

    def _assignment_expression(self, ts: TSNode) -> Node:
        operator = _text(ts.child_by_field_name("operator")) or "="
        return AssignmentExpression(
            operator=operator,
            left=self._field(ts, "left"),
            right=self._field(ts, "right"),
            **_position(ts),
        )

    _augmented_assignment_expression = _assignment_expression

    # ── Patterns ────────────────────────────────────────────────────────

    def _array_pattern(self, ts: TSNode) -> Node:
        return ArrayPattern(elements=self._children(ts), **_position(ts))

    def _object_pattern(self, ts: TSNode) -> Node:
        properties: list[Node] = []
        for child in ts.named_children:
            if child.type == "shorthand_property_identifier_pattern":
                ident = self._identifier(child)
                properties.append(
                    PatternProperty(key=ident.name, value=ident, shorthand=True, **_position(child))
                )
            elif child.type == "object_assignment_pattern":
                left_ts = child.child_by_field_name("left")
                left = self.lower(left_ts) if left_ts is not None else None
                if left is None:
                    continue
                default = AssignmentPattern(
                    left=left, right=self._field(child, "right"), **_position(child)
                )
                key = left.name if isinstance(left, Identifier) else None
                properties.append(
                    PatternProperty(key=key, value=default, shorthand=True, **_position(child))
                )
            elif child.type == "pair_pattern":
                key, _ = self._property_key(child.child_by_field_name("key"))
                properties.append(
                    PatternProperty(key=key, value=self._field(child, "value"), **_position(child))
                )
            else:
                node = self.lower(child)
                if node is not None:
                    properties.append(node)
        return ObjectPattern(properties=properties, **_position(ts))

    def _shorthand_property_identifier_pattern(self, ts: TSNode) -> Node:
        return self._identifier(ts)

    def _assignment_pattern(self, ts: TSNode) -> Node:
        left = self._field(ts, "left") or Other(kind="missing", **_position(ts))
        return AssignmentPattern(left=left, right=self._field(ts, "right"), **_position(ts))

    def _rest_pattern(self, ts: TSNode) -> Node:
        return RestElement(argument=self._first(ts), **_position(ts))

    # ── JSX ─────────────────────────────────────────────────────────────

    def _jsx_attributes(self, tag: TSNode) -> list[Node]:
        attributes: list[Node] = []
        for child in tag.named_children:
            if child.type == "jsx_attribute":
                attributes.append(self._jsx_attribute(child))
            elif child.type == "jsx_expression":
                attributes.append(
                    JSXSpreadAttribute(argument=self._spread_argument(child), **_position(child))
                )
        return attributes

    def _spread_argument(self, ts: TSNode) -> Node | None:
        inner = self._first(ts)
        if isinstance(inner, SpreadElement):
            return inner.argument
        return inner

    def _jsx_element(self, ts: TSNode) -> Node:
        open_tag = ts.child_by_field_name("open_tag")
        children = [
            node
            for child in ts.named_children
            if child.type not in ("jsx_opening_element", "jsx_closing_element")
            for node in (self.lower(child),)
            if node is not None
        ]
        name_ts = open_tag.child_by_field_name("name") if open_tag is not None else None
        if name_ts is None:
            return JSXFragment(children=children, **_position(ts))
        return JSXElement(
            name=_text(name_ts),
            attributes=self._jsx_attributes(open_tag),
            children=children,
            **_position(ts),
        )

    def _jsx_self_closing_element(self, ts: TSNode) -> Node:
        return JSXElement(
            name=_text(ts.child_by_field_name("name")),
            attributes=self._jsx_attributes(ts),
            **_position(ts),
        )

    def _jsx_attribute(self, ts: TSNode) -> Node:
        named = ts.named_children
        name = _text(named[0]) if named else ""
        value = self.lower(named[1]) if len(named) > 1 else None
        return JSXAttribute(name=name, value=value, **_position(ts))

    def _jsx_expression(self, ts: TSNode) -> Node:
        return JSXExpressionContainer(expression=self._first(ts), **_position(ts))

    def _jsx_text(self, ts: TSNode) -> Node:
        return JSXText(value=_text(ts), **_position(ts))
