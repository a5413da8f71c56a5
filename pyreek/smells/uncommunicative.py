"""Detectors for names that do not communicate their intent."""

from __future__ import annotations

import re
from typing import Dict, Iterator, List, Sequence, Tuple

from tree_sitter import Node

from ..context import MODULE, CodeContext, MethodContext
from ..models import SmellWarning
from ..source.nodes import node_line
from .base import SmellDetector


class _UncommunicativeName(SmellDetector):
    """Shared reject/accept matching; both options hold regular expressions."""

    REJECT_KEY = "reject"
    ACCEPT_KEY = "accept"
    PATTERN_KEYS = frozenset({REJECT_KEY, ACCEPT_KEY})

    def uncommunicative(self, name: str, context: CodeContext) -> bool:
        if _search_any(self.value(self.ACCEPT_KEY, context), name):
            return False
        return _search_any(self.value(self.REJECT_KEY, context), name)


def _search_any(patterns: Sequence[str], name: str) -> bool:
    return any(re.search(str(pattern), name) for pattern in patterns or ())


class UncommunicativeMethodName(_UncommunicativeName):
    DEFAULT_OPTIONS = {
        "reject": ["^[a-z]$", "[0-9]$", "[A-Z]"],
        "accept": [],
    }

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        name = context.name.rstrip("?!=")
        if not name or not self.uncommunicative(name, context):
            return []
        return [self.smell_warning(context, f"has the name '{context.name}'")]


class UncommunicativeModuleName(_UncommunicativeName):
    DEFAULT_OPTIONS = {
        "reject": ["^.$", "[0-9]$"],
        "accept": [],
    }
    contexts = (MODULE,)

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        name = context.name
        if not name or not self.uncommunicative(name, context):
            return []
        return [self.smell_warning(context, f"has the name '{name}'")]


class UncommunicativeParameterName(_UncommunicativeName):
    DEFAULT_OPTIONS = {
        "reject": ["^.$", "[0-9]$", "[A-Z]", "^_"],
        "accept": ["^_$"],
    }

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        if not isinstance(context, MethodContext):
            return []
        return [
            self.smell_warning(
                context,
                f"has the parameter name '{parameter.name}'",
                [node_line(parameter.node)],
            )
            for parameter in context.parameters
            if parameter.name and self.uncommunicative(parameter.name, context)
        ]


_ASSIGNMENT_TYPES = {"assignment", "operator_assignment"}
_ASSIGNMENT_LISTS = {
    "left_assignment_list",
    "destructured_left_assignment",
    "rest_assignment",
}
_NAMED_BLOCK_PARAMETERS = {
    "optional_parameter",
    "keyword_parameter",
    "splat_parameter",
    "hash_splat_parameter",
    "block_parameter",
}


class UncommunicativeVariableName(_UncommunicativeName):
    DEFAULT_OPTIONS = {
        "reject": ["^.$", "[0-9]$", "[A-Z]"],
        "accept": ["^_$"],
    }

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        occurrences: Dict[str, List[int]] = {}
        for name, line in self._variable_names(context):
            occurrences.setdefault(name, []).append(line)
        return [
            self.smell_warning(context, f"has the variable name '{name}'", lines)
            for name, lines in occurrences.items()
            if self.uncommunicative(name, context)
        ]

    def _variable_names(self, context: CodeContext) -> Iterator[Tuple[str, int]]:
        for node in context.local_nodes():
            if node.type in _ASSIGNMENT_TYPES:
                target = node.child_by_field_name("left")
                if target is not None:
                    yield from self._assigned_names(target, context)
            elif node.type == "block_parameters":
                for parameter in node.named_children:
                    yield from self._block_parameter_names(parameter, context)

    def _assigned_names(
        self, target: Node, context: CodeContext
    ) -> Iterator[Tuple[str, int]]:
        if target.type == "identifier":
            yield context.text(target), node_line(target)
        elif target.type in _ASSIGNMENT_LISTS:
            for child in target.named_children:
                yield from self._assigned_names(child, context)

    def _block_parameter_names(
        self, parameter: Node, context: CodeContext
    ) -> Iterator[Tuple[str, int]]:
        if parameter.type == "identifier":
            yield context.text(parameter), node_line(parameter)
        elif parameter.type in _NAMED_BLOCK_PARAMETERS:
            name_node = parameter.child_by_field_name("name")
            if name_node is not None:
                yield context.text(name_node), node_line(name_node)
        elif parameter.type == "destructured_parameter":
            for child in parameter.named_children:
                yield from self._block_parameter_names(child, context)


__all__ = [
    "UncommunicativeMethodName",
    "UncommunicativeModuleName",
    "UncommunicativeParameterName",
    "UncommunicativeVariableName",
]
