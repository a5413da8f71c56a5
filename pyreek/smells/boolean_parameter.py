"""Detector for parameters defaulting to a boolean literal."""

from __future__ import annotations

from typing import List

from ..context import CodeContext, MethodContext
from ..models import SmellWarning
from ..source.nodes import node_line
from .base import SmellDetector

_BOOLEAN_LITERALS = {"true", "false"}


class BooleanParameter(SmellDetector):
    def detect(self, context: CodeContext) -> List[SmellWarning]:
        if not isinstance(context, MethodContext):
            return []
        return [
            self.smell_warning(
                context,
                f"has boolean parameter '{parameter.name}'",
                [node_line(parameter.node)],
            )
            for parameter in context.parameters
            if parameter.default is not None
            and parameter.default.type in _BOOLEAN_LITERALS
        ]


__all__ = ["BooleanParameter"]
