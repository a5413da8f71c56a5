"""Turns Ruby source into a tree-sitter syntax tree plus a comment index."""

from __future__ import annotations

import codecs
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import tree_sitter_ruby
from tree_sitter import Language, Node, Parser

from ..errors import EncodingError, IncomprehensibleSourceError
from ..models import SourceLocation
from .nodes import (
    describe_syntax_error,
    first_syntax_error,
    is_definition,
    iter_nodes,
    node_location,
    node_text,
)

STRING_ORIGIN = "string"
DEFAULT_ENCODING = "utf-8"

_MAGIC_COMMENT = re.compile(r"^\s*#.*?coding\s*[:=]\s*([\w.-]+)", re.IGNORECASE)

# Ruby encoding names Python's codec registry does not know.
_RUBY_ENCODING_ALIASES = {
    "ascii-8bit": "latin-1",
    "binary": "latin-1",
    "cp65001": "utf-8",
    "utf8-mac": "utf-8",
    "windows-31j": "cp932",
    "eucjp-ms": "euc_jp",
}


@lru_cache(maxsize=1)
def ruby_language() -> Language:
    """Process-wide Ruby grammar; read-only once loaded."""
    return Language(tree_sitter_ruby.language())


def new_parser() -> Parser:
    return Parser(ruby_language())


@dataclass
class SyntaxTree:
    """A parsed source together with the comments attached to its definitions."""

    root: Node
    source: bytes
    origin: str
    comment_index: Dict[SourceLocation, str] = field(default_factory=dict)

    def text(self, node: Node) -> str:
        return node_text(node, self.source)


class SourceCode:
    """Lazily read, decoded and parsed Ruby source.

    Nothing is read or parsed until :meth:`syntax_tree` is called, so building
    one of these never fails.
    """

    def __init__(
        self, code: object, origin: str = STRING_ORIGIN, path: Optional[Path] = None
    ) -> None:
        self._code = code
        self._path = path
        self.origin = origin

    @classmethod
    def from_source(cls, source: object) -> "SourceCode":
        if isinstance(source, Path):
            return cls(None, origin=str(source), path=source)
        if isinstance(source, SourceCode):
            return source
        return cls(source)

    def syntax_tree(self) -> SyntaxTree:
        text = self._decoded_text()
        source = text.encode("utf-8")
        tree = new_parser().parse(source)
        root = tree.root_node
        error_node = first_syntax_error(root)
        if error_node is not None:
            raise IncomprehensibleSourceError(
                self.origin, describe_syntax_error(error_node)
            )
        return SyntaxTree(
            root=root,
            source=source,
            origin=self.origin,
            comment_index=build_comment_index(root, source),
        )

    def _decoded_text(self) -> str:
        raw = self._path.read_bytes() if self._path is not None else self._code
        if isinstance(raw, bytes):
            return self._decode_bytes(raw)
        if not isinstance(raw, str):
            raise TypeError(f"Cannot examine source of type {type(raw).__name__}")
        encoding = declared_encoding(raw)
        if encoding is not None:
            try:
                raw.encode(encoding)
            except (LookupError, UnicodeError) as exc:
                raise EncodingError(self.origin, str(exc)) from exc
        return raw

    def _decode_bytes(self, raw: bytes) -> str:
        head = raw[:512].decode("ascii", errors="ignore")
        encoding = declared_encoding(head) or DEFAULT_ENCODING
        try:
            if codecs.lookup(encoding).name == DEFAULT_ENCODING:
                encoding = "utf-8-sig"
            return raw.decode(encoding)
        except (LookupError, UnicodeError) as exc:
            raise EncodingError(self.origin, str(exc)) from exc


def declared_encoding(text: str) -> Optional[str]:
    """Encoding named by a magic comment on the first line (second after a shebang)."""
    lines = text.splitlines()[:2]
    if lines and lines[0].startswith("#!"):
        lines = lines[1:]
    if not lines:
        return None
    match = _MAGIC_COMMENT.match(lines[0])
    if match is None:
        return None
    name = match.group(1)
    return _RUBY_ENCODING_ALIASES.get(name.lower(), name)


def build_comment_index(root: Node, source: bytes) -> Dict[SourceLocation, str]:
    """Map each definition's location to the comment lines directly above it.

    Only comments that sit alone on their line count. When several definitions
    start on the same line, the outermost one owns the comment.
    """
    lines = source.split(b"\n")
    comments_by_row: Dict[int, str] = {}
    for node in iter_nodes(root):
        if node.type != "comment":
            continue
        start_row, start_column = node.start_point[0], node.start_point[1]
        if lines[start_row][:start_column].strip():
            continue
        comments_by_row[node.end_point[0]] = node_text(node, source).rstrip()
        for row in range(start_row, node.end_point[0]):
            comments_by_row.setdefault(row, "")

    index: Dict[SourceLocation, str] = {}
    claimed_rows = set()
    for node in iter_nodes(root):
        if not is_definition(node):
            continue
        row = node.start_point[0]
        if row in claimed_rows:
            continue
        claimed_rows.add(row)
        block = []
        previous = row - 1
        while previous in comments_by_row:
            if comments_by_row[previous]:
                block.append(comments_by_row[previous])
            previous -= 1
        if block:
            index[node_location(node)] = "\n".join(reversed(block))
    return index


__all__ = [
    "DEFAULT_ENCODING",
    "STRING_ORIGIN",
    "SourceCode",
    "SyntaxTree",
    "build_comment_index",
    "declared_encoding",
    "new_parser",
    "ruby_language",
]
