"""Code contexts: the definitions of a syntax tree that detectors examine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from tree_sitter import Node

from .models import SourceLocation
from .overrides import OverrideIndex
from .source.code_comment import CodeComment
from .source.nodes import (
    DEFINITION_TYPES,
    METHOD_TYPES,
    MODULE_TYPES,
    definition_body,
    is_definition,
    iter_nodes,
    node_location,
)
from .source.source_code import SyntaxTree

ROOT = "root"
MODULE = "module"
METHOD = "method"


@dataclass(frozen=True)
class Parameter:
    """A single formal parameter of a method definition."""

    name: Optional[str]
    kind: str
    node: Node
    default: Optional[Node] = None


class CodeContext:
    """A fragment of the tree plus the configuration that applies to it."""

    kind = ROOT
    # Nested definition types that belong to their own context.
    nested_types = DEFINITION_TYPES

    def __init__(
        self,
        node: Node,
        tree: SyntaxTree,
        parent: Optional["CodeContext"] = None,
        overrides: Optional[Dict[str, Dict[str, Any]]] = None,
    ) -> None:
        self.node = node
        self.tree = tree
        self.parent = parent
        self.children: List[CodeContext] = []
        self.overrides = overrides or {}
        self.location = node_location(node)
        self.comment = CodeComment(tree.comment_index.get(self.location, ""))

    @property
    def line(self) -> int:
        return self.location.line

    @property
    def name(self) -> str:
        return ""

    @property
    def full_name(self) -> str:
        return self.name

    @property
    def origin(self) -> str:
        return self.tree.origin

    def text(self, node: Node) -> str:
        return self.tree.text(node)

    def config_for(self, smell_type: str) -> Dict[str, Any]:
        """Overrides for ``smell_type`` here, layered over enclosing definitions'."""
        inherited = {} if self.parent is None else self.parent.config_for(smell_type)
        inherited.update(self.overrides.get(smell_type, {}))
        return inherited

    def body(self) -> List[Node]:
        return definition_body(self.node)

    def local_nodes(self) -> Iterator[Node]:
        """Every node of the body, excluding definitions that form their own context."""
        return iter_nodes(self.body(), skip=self.nested_types)

    def iter_contexts(self) -> Iterator["CodeContext"]:
        yield self
        for child in self.children:
            yield from child.iter_contexts()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_name!r}, line={self.line})"


class RootContext(CodeContext):
    def body(self) -> List[Node]:
        return [child for child in self.node.named_children if child.type != "comment"]


class ModuleContext(CodeContext):
    """A ``class`` or ``module`` definition."""

    kind = MODULE
    nested_types = MODULE_TYPES

    @property
    def name(self) -> str:
        name_node = self.node.child_by_field_name("name")
        if name_node is None:
            return ""
        if name_node.type == "scope_resolution":
            last = name_node.child_by_field_name("name")
            if last is not None:
                return self.text(last)
        return self.text(name_node)

    @property
    def qualified_name(self) -> str:
        name_node = self.node.child_by_field_name("name")
        return self.text(name_node) if name_node is not None else ""

    @property
    def full_name(self) -> str:
        enclosing = _enclosing_name(self)
        if enclosing:
            return f"{enclosing}::{self.qualified_name}"
        return self.qualified_name

    @property
    def method_contexts(self) -> List["MethodContext"]:
        return [child for child in self.children if isinstance(child, MethodContext)]

    @property
    def is_namespace(self) -> bool:
        """True for modules whose body holds nothing but nested classes and modules."""
        statements = self.body()
        return bool(statements) and all(
            node.type in MODULE_TYPES for node in statements
        )


_NAMED_PARAMETER_TYPES = {
    "optional_parameter": "optional",
    "keyword_parameter": "keyword",
    "splat_parameter": "splat",
    "hash_splat_parameter": "double_splat",
    "block_parameter": "block",
}


class MethodContext(CodeContext):
    """A ``def`` (instance or singleton) method definition."""

    kind = METHOD

    @property
    def singleton(self) -> bool:
        return self.node.type == "singleton_method"

    @property
    def name(self) -> str:
        name_node = self.node.child_by_field_name("name")
        return self.text(name_node) if name_node is not None else ""

    @property
    def full_name(self) -> str:
        enclosing = _enclosing_name(self)
        if self.singleton:
            receiver = self.node.child_by_field_name("object")
            if receiver is None or receiver.type == "self":
                owner = enclosing
            else:
                owner = self.text(receiver)
            return f"{owner}.{self.name}" if owner else self.name
        return f"{enclosing}#{self.name}" if enclosing else self.name

    @property
    def parameters(self) -> List[Parameter]:
        params_node = self.node.child_by_field_name("parameters")
        if params_node is None:
            return []
        parameters: List[Parameter] = []
        for child in params_node.named_children:
            if child.type == "identifier":
                parameters.append(
                    Parameter(name=self.text(child), kind="required", node=child)
                )
            elif child.type in _NAMED_PARAMETER_TYPES:
                name_node = child.child_by_field_name("name")
                parameters.append(
                    Parameter(
                        name=self.text(name_node) if name_node is not None else None,
                        kind=_NAMED_PARAMETER_TYPES[child.type],
                        node=child,
                        default=child.child_by_field_name("value"),
                    )
                )
            elif child.type == "destructured_parameter":
                parameters.append(Parameter(name=None, kind="destructured", node=child))
        return parameters


def _enclosing_name(context: CodeContext) -> str:
    parent = context.parent
    return parent.full_name if isinstance(parent, ModuleContext) else ""


def build_context_tree(
    tree: SyntaxTree, overrides: Optional[OverrideIndex] = None
) -> RootContext:
    """Arrange the definitions of ``tree`` into nested contexts, in document order."""
    overrides = overrides or OverrideIndex()
    root = RootContext(tree.root, tree)

    def visit(node: Node, parent: CodeContext) -> None:
        for child in node.children:
            if is_definition(child, MODULE_TYPES):
                context: CodeContext = ModuleContext(
                    child, tree, parent, overrides.for_location(node_location(child))
                )
            elif is_definition(child, METHOD_TYPES):
                context = MethodContext(
                    child, tree, parent, overrides.for_location(node_location(child))
                )
            else:
                visit(child, parent)
                continue
            parent.children.append(context)
            visit(child, context)

    visit(tree.root, root)
    return root


__all__ = [
    "CodeContext",
    "METHOD",
    "MODULE",
    "MethodContext",
    "ModuleContext",
    "Parameter",
    "ROOT",
    "RootContext",
    "build_context_tree",
]
