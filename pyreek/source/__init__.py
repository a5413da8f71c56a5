"""Syntax provider: reading, decoding and parsing Ruby source."""

from .code_comment import CodeComment, Directive
from .source_code import STRING_ORIGIN, SourceCode, SyntaxTree

__all__ = [
    "CodeComment",
    "Directive",
    "STRING_ORIGIN",
    "SourceCode",
    "SyntaxTree",
]
