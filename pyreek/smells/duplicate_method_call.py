"""Detector for the same call made repeatedly within one method."""

from __future__ import annotations

from typing import Dict, List

from tree_sitter import Node

from ..context import CodeContext
from ..models import SmellWarning
from ..source.nodes import node_line
from .base import SmellDetector, matches_any

_CALL_TYPES = {"call", "method_call"}


class DuplicateMethodCall(SmellDetector):
    """Reports calls whose exact text appears more than ``max_calls`` times.

    Calls with neither a receiver nor arguments are skipped because they read
    exactly like local variables, and calls carrying a block are skipped
    because each block makes the call distinct.
    """

    MAX_ALLOWED_CALLS_KEY = "max_calls"
    ALLOW_CALLS_KEY = "allow_calls"
    DEFAULT_OPTIONS = {
        MAX_ALLOWED_CALLS_KEY: 1,
        ALLOW_CALLS_KEY: [],
    }

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        max_calls = self.value(self.MAX_ALLOWED_CALLS_KEY, context)
        allowed = self.value(self.ALLOW_CALLS_KEY, context)

        calls: Dict[str, List[int]] = {}
        for node in context.local_nodes():
            if node.type not in _CALL_TYPES or not _repeatable(node):
                continue
            text = " ".join(context.text(node).split())
            if matches_any(allowed, text):
                continue
            calls.setdefault(text, []).append(node_line(node))

        return [
            self.smell_warning(context, f"calls '{text}' {len(lines)} times", lines)
            for text, lines in calls.items()
            if len(lines) > max_calls
        ]


def _repeatable(node: Node) -> bool:
    if node.child_by_field_name("block") is not None:
        return False
    receiver = node.child_by_field_name("receiver")
    arguments = node.child_by_field_name("arguments")
    has_arguments = arguments is not None and arguments.named_child_count > 0
    return receiver is not None or has_arguments


__all__ = ["DuplicateMethodCall"]
