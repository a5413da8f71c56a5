"""Detector for classes and modules nobody bothered to describe."""

from __future__ import annotations

from typing import List

from ..context import MODULE, CodeContext, ModuleContext
from ..models import SmellWarning
from .base import SmellDetector


class IrresponsibleModule(SmellDetector):
    """Classes and modules without a descriptive comment above them.

    Namespace modules, whose bodies hold only nested classes and modules, are
    not reported.
    """

    contexts = (MODULE,)

    def detect(self, context: CodeContext) -> List[SmellWarning]:
        if not isinstance(context, ModuleContext) or context.is_namespace:
            return []
        if context.comment.descriptive:
            return []
        return [self.smell_warning(context, "has no descriptive comment")]


__all__ = ["IrresponsibleModule"]
