"""Tests for the syntax provider."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyreek.errors import EncodingError, IncomprehensibleSourceError
from pyreek.models import SourceLocation
from pyreek.source import CodeComment, SourceCode
from pyreek.source.source_code import declared_encoding


def test_string_source_has_string_origin() -> None:
    tree = SourceCode.from_source("def alfa; end").syntax_tree()

    assert tree.origin == "string"
    assert tree.root.type == "program"


def test_path_source_is_read_lazily(tmp_path: Path) -> None:
    path = tmp_path / "late.rb"
    source = SourceCode.from_source(path)
    path.write_text("def alfa; end\n", encoding="utf-8")

    assert source.origin == str(path)
    assert source.syntax_tree().origin == str(path)


def test_comment_index_maps_definitions_to_leading_comments() -> None:
    source = (
        "# Describes the class\n"
        "class Alfa\n"
        "  # first line\n"
        "  # second line\n"
        "  def bravo; end\n"
        "\n"
        "  def charlie; end # trailing\n"
        "end\n"
    )

    index = SourceCode.from_source(source).syntax_tree().comment_index

    assert index == {
        SourceLocation(2, 0): "# Describes the class",
        SourceLocation(5, 2): "# first line\n# second line",
    }


def test_outermost_definition_claims_shared_line_comment() -> None:
    source = SourceCode.from_source("# About C\nclass C; def f; end; end\n")

    index = source.syntax_tree().comment_index

    assert index == {SourceLocation(2, 0): "# About C"}


def test_syntax_errors_are_incomprehensible() -> None:
    with pytest.raises(IncomprehensibleSourceError) as excinfo:
        SourceCode.from_source("class C; def f(; end )))").syntax_tree()
    assert excinfo.value.origin == "string"


def test_declared_encoding_is_enforced_for_strings() -> None:
    source = "# encoding: US-ASCII\nputs 'こんにちは世界'\n"

    with pytest.raises(EncodingError):
        SourceCode.from_source(source).syntax_tree()


def test_declared_encoding_is_used_for_bytes() -> None:
    raw = "# encoding: latin-1\nputs 'caf\xe9'\n".encode("latin-1")

    tree = SourceCode.from_source(raw).syntax_tree()

    assert "café" in tree.source.decode("utf-8")


def test_unknown_declared_encoding_is_an_encoding_error() -> None:
    with pytest.raises(EncodingError):
        SourceCode.from_source(b"# encoding: klingon\nputs 1\n").syntax_tree()


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("# encoding: US-ASCII\n", "US-ASCII"),
        ("# -*- coding: utf-8 -*-\n", "utf-8"),
        (
            "#!/usr/bin/env ruby\n# frozen_string_literal: true\n# encoding: ascii\n",
            None,
        ),
        ("#!/usr/bin/env ruby\n# coding: ascii\n", "ascii"),
        ("puts 1\n# encoding: ascii\n", None),
        ("# encoding: ASCII-8BIT\n", "latin-1"),
        ("# coding: binary\n", "latin-1"),
        ("# encoding: Windows-31J\n", "cp932"),
    ],
)
def test_declared_encoding(text: str, expected: str | None) -> None:
    assert declared_encoding(text) == expected


def test_code_comment_directives_and_description() -> None:
    comment = CodeComment(
        "# Parses things carefully.\n"
        "# :reek:DuplicateMethodCall { max_calls: 2 }\n"
        "# :reek:TooManyStatements"
    )

    directives = comment.directives()

    assert [(d.detector_name, d.raw_options) for d in directives] == [
        ("DuplicateMethodCall", "{ max_calls: 2 }"),
        ("TooManyStatements", None),
    ]
    assert comment.sanitized() == "Parses things carefully."
    assert comment.descriptive is True


def test_directive_only_comment_is_not_descriptive() -> None:
    assert CodeComment("# :reek:TooManyStatements").descriptive is False
    assert CodeComment("# Short").descriptive is False


def test_ruby_binary_encoding_is_accepted() -> None:
    source = "# encoding: ASCII-8BIT\ndef good() true; end\n"

    for raw in (source, source.encode("ascii")):
        assert SourceCode.from_source(raw).syntax_tree().root.type == "program"
