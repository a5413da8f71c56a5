"""Tests for the uncommunicative name detectors."""

from __future__ import annotations

from pyreek.smells import (
    UncommunicativeMethodName,
    UncommunicativeModuleName,
    UncommunicativeParameterName,
    UncommunicativeVariableName,
)


def test_single_letter_method_name_is_reported(ruby) -> None:
    context = ruby.context("def x; end")

    smells = UncommunicativeMethodName().detect(context)

    assert [(smell.message, smell.context, smell.lines) for smell in smells] == [
        ("has the name 'x'", "x", (1,))
    ]


def test_communicative_method_names_pass(ruby) -> None:
    detector = UncommunicativeMethodName()

    for source in ("def alfa; end", "def valid?; end", "def save!; end"):
        assert detector.detect(ruby.context(source)) == []


def test_method_names_ending_in_digits_are_reported(ruby) -> None:
    smells = UncommunicativeMethodName().detect(ruby.context("def handler2; end"))

    assert [smell.message for smell in smells] == ["has the name 'handler2'"]


def test_accept_patterns_override_reject(ruby) -> None:
    detector = UncommunicativeMethodName({"accept": ["^x$"]})

    assert detector.detect(ruby.context("def x; end")) == []


def test_module_name_uses_last_segment(ruby) -> None:
    context = ruby.context(
        """
        class Outer::B
        end
        """,
        kind="module",
    )

    smells = UncommunicativeModuleName().detect(context)

    assert [(smell.message, smell.context) for smell in smells] == [
        ("has the name 'B'", "Outer::B")
    ]


def test_nested_module_full_name(ruby) -> None:
    contexts = ruby.contexts(
        """
        module Outer
          class Inner2
          end
        end
        """,
        kind="module",
    )

    detector = UncommunicativeModuleName()
    smells = [smell for context in contexts for smell in detector.detect(context)]

    assert [(smell.message, smell.context) for smell in smells] == [
        ("has the name 'Inner2'", "Outer::Inner2")
    ]


def test_parameter_names(ruby) -> None:
    context = ruby.context("def alfa(a, bravo, charlie1, _delta, _, *e, &blk); end")

    smells = UncommunicativeParameterName().detect(context)

    assert [smell.message for smell in smells] == [
        "has the parameter name 'a'",
        "has the parameter name 'charlie1'",
        "has the parameter name '_delta'",
        "has the parameter name 'e'",
    ]


def test_variable_names_are_reported_once_with_all_lines(ruby) -> None:
    context = ruby.context(
        """
        def alfa
          x = 1
          total = 2
          x += total
          [1].each { |y| puts y }
        end
        """
    )

    smells = UncommunicativeVariableName().detect(context)

    assert [(smell.message, smell.lines) for smell in smells] == [
        ("has the variable name 'x'", (2, 4)),
        ("has the variable name 'y'", (5,)),
    ]


def test_variables_of_nested_methods_belong_to_them(ruby) -> None:
    contexts = ruby.contexts(
        """
        class Alfa
          def bravo
            charlie = 1
          end
        end
        """,
        kind="method",
    )

    assert UncommunicativeVariableName().detect(contexts[0]) == []


def test_underscore_variable_is_accepted(ruby) -> None:
    context = ruby.context(
        """
        def alfa
          _ = compute
        end
        """
    )

    assert UncommunicativeVariableName().detect(context) == []
