"""Helpers for walking tree-sitter Ruby syntax trees."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from tree_sitter import Node

from ..models import SourceLocation

MODULE_TYPES = frozenset({"class", "module"})
METHOD_TYPES = frozenset({"method", "singleton_method"})
DEFINITION_TYPES = MODULE_TYPES | METHOD_TYPES

# Fields that make up a definition's header rather than its body.
_HEADER_FIELDS = frozenset({"name", "parameters", "object", "superclass"})


def node_text(node: Node, source: bytes) -> str:
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def node_line(node: Node) -> int:
    """1-based line on which the node starts."""
    return node.start_point[0] + 1


def node_location(node: Node) -> SourceLocation:
    row, column = node.start_point[0], node.start_point[1]
    return SourceLocation(line=row + 1, column=column)


def iter_nodes(
    roots: Iterable[Node] | Node, *, skip: Iterable[str] = ()
) -> Iterator[Node]:
    """Yield nodes in document order, skipping nodes whose type is in ``skip``."""
    skipped = frozenset(skip)
    if isinstance(roots, Node):
        roots = [roots]
    stack = [node for node in reversed(list(roots)) if node.type not in skipped]
    while stack:
        node = stack.pop()
        yield node
        for child in reversed(node.children):
            if child.type not in skipped:
                stack.append(child)


def is_definition(node: Node, types: Iterable[str] = DEFINITION_TYPES) -> bool:
    """True for named definition nodes of ``types``.

    The ``class`` and ``module`` keyword tokens share their definition's type name.
    """
    return node.is_named and node.type in types


def definition_body(node: Node) -> List[Node]:
    """Statements making up the body of a class, module or method definition."""
    body = node.child_by_field_name("body")
    if body is not None:
        if body.type in {"body_statement", "block_body"}:
            return [child for child in body.named_children if child.type != "comment"]
        return [body]

    statements: List[Node] = []
    for index, child in enumerate(node.children):
        if not child.is_named or child.type == "comment":
            continue
        if node.field_name_for_child(index) in _HEADER_FIELDS:
            continue
        statements.append(child)
    return statements


def first_syntax_error(root: Node) -> Optional[Node]:
    if not root.has_error:
        return None
    for node in iter_nodes(root):
        if node.type == "ERROR" or node.is_missing:
            return node
    return root


def describe_syntax_error(node: Node) -> str:
    line = node_line(node)
    column = node.start_point[1]
    if node.is_missing:
        return f"syntax error: missing '{node.type}' at line {line}, column {column}"
    return f"syntax error: unexpected input at line {line}, column {column}"


__all__ = [
    "DEFINITION_TYPES",
    "METHOD_TYPES",
    "MODULE_TYPES",
    "definition_body",
    "describe_syntax_error",
    "first_syntax_error",
    "is_definition",
    "iter_nodes",
    "node_line",
    "node_location",
    "node_text",
]
