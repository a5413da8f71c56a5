"""Tests for the DuplicateMethodCall detector."""

from __future__ import annotations

from pyreek.smells import DuplicateMethodCall


def test_repeated_call_is_reported(ruby) -> None:
    context = ruby.context("def foo; bar.call_me(); bar.call_me(); end")

    smells = DuplicateMethodCall().detect(context)

    assert [(smell.smell_type, smell.message, smell.context) for smell in smells] == [
        ("DuplicateMethodCall", "calls 'bar.call_me()' 2 times", "foo")
    ]


def test_lines_of_every_call_are_reported(ruby) -> None:
    context = ruby.context(
        """
        def alfa
          @bravo.charlie
          @bravo.charlie
          @bravo.charlie
        end
        """
    )

    smells = DuplicateMethodCall().detect(context)

    assert [(smell.message, smell.lines) for smell in smells] == [
        ("calls '@bravo.charlie' 3 times", (2, 3, 4))
    ]


def test_max_calls_raises_the_threshold(ruby) -> None:
    context = ruby.context("def foo; bar.call_me(); bar.call_me(); end")

    assert DuplicateMethodCall({"max_calls": 2}).detect(context) == []


def test_allow_calls_skips_listed_calls(ruby) -> None:
    context = ruby.context("def foo; bar.call_me(); bar.call_me(); end")

    assert DuplicateMethodCall({"allow_calls": ["bar.call_me()"]}).detect(context) == []
    assert DuplicateMethodCall({"allow_calls": ["/call_me/"]}).detect(context) == []


def test_calls_without_receiver_or_arguments_are_ignored(ruby) -> None:
    context = ruby.context(
        """
        def alfa
          bravo
          bravo
        end
        """
    )

    assert DuplicateMethodCall().detect(context) == []


def test_calls_with_blocks_are_ignored(ruby) -> None:
    context = ruby.context(
        """
        def alfa
          items.each { |item| item }
          items.each { |item| item }
        end
        """
    )

    smells = DuplicateMethodCall().detect(context)

    assert all("each" not in smell.message for smell in smells)
