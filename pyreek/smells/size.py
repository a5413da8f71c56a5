"""Detectors for definitions that have grown too large."""

from __future__ import annotations

from typing import List, Set

from ..context import MODULE, CodeContext, MethodContext, ModuleContext
from ..models import SmellWarning
from .base import SmellDetector

# Clauses whose named children are statements.
_STATEMENT_CONTAINERS = frozenset(
    {"body_statement", "block_body", "then", "else", "do", "ensure", "begin"}
)
# Nodes that never count as a statement on their own.
_NOT_STATEMENTS = frozenset(
    {
        "comment",
        "empty_statement",
        "if",
        "unless",
        "while",
        "until",
        "for",
        "case",
        "case_match",
        "begin",
        "elsif",
        "else",
        "when",
        "in_clause",
        "rescue",
        "ensure",
        "then",
        "do",
        "body_statement",
        "block_body",
    }
)


def count_statements(context: CodeContext) -> int:
    count = sum(1 for node in context.body() if node.type not in _NOT_STATEMENTS)
    for node in context.local_nodes():
        if node.type in _STATEMENT_CONTAINERS:
            count += sum(
                1 for child in node.named_children if child.type not in _NOT_STATEMENTS
            )
    return count


class TooManyStatements(SmellDetector):
    MAX_ALLOWED_STATEMENTS_KEY = "max_statements"
    DEFAULT_OPTIONS = {MAX_ALLOWED_STATEMENTS_KEY: 5}

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        count = count_statements(context)
        if count <= self.value(self.MAX_ALLOWED_STATEMENTS_KEY, context):
            return []
        return [self.smell_warning(context, f"has approx {count} statements")]


class LongParameterList(SmellDetector):
    MAX_ALLOWED_PARAMS_KEY = "max_params"
    DEFAULT_OPTIONS = {MAX_ALLOWED_PARAMS_KEY: 3}

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        if not isinstance(context, MethodContext):
            return []
        count = sum(1 for parameter in context.parameters if parameter.kind != "block")
        if count <= self.value(self.MAX_ALLOWED_PARAMS_KEY, context):
            return []
        return [self.smell_warning(context, f"has {count} parameters")]


class TooManyMethods(SmellDetector):
    MAX_ALLOWED_METHODS_KEY = "max_methods"
    DEFAULT_OPTIONS = {MAX_ALLOWED_METHODS_KEY: 15}
    contexts = (MODULE,)

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        if not isinstance(context, ModuleContext):
            return []
        count = len(context.method_contexts)
        if count <= self.value(self.MAX_ALLOWED_METHODS_KEY, context):
            return []
        return [self.smell_warning(context, f"has at least {count} methods")]


class TooManyInstanceVariables(SmellDetector):
    MAX_ALLOWED_IVARS_KEY = "max_instance_variables"
    DEFAULT_OPTIONS = {MAX_ALLOWED_IVARS_KEY: 4}
    contexts = (MODULE,)

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        names: Set[str] = set()
        for node in context.local_nodes():
            if node.type not in {"assignment", "operator_assignment"}:
                continue
            target = node.child_by_field_name("left")
            if target is not None and target.type == "instance_variable":
                names.add(context.text(target))
        count = len(names)
        if count <= self.value(self.MAX_ALLOWED_IVARS_KEY, context):
            return []
        return [self.smell_warning(context, f"has at least {count} instance variables")]


__all__ = [
    "LongParameterList",
    "TooManyInstanceVariables",
    "TooManyMethods",
    "TooManyStatements",
    "count_statements",
]
