"""Tests for pyreek.detector_repository."""

from __future__ import annotations

import pytest

from pyreek.detector_repository import DetectorRepository
from pyreek.errors import ConfigurationError
from pyreek.smells import DuplicateMethodCall, TooManyStatements


def test_eligible_smell_types_lists_builtin_detectors() -> None:
    eligible = DetectorRepository.eligible_smell_types()

    assert "DuplicateMethodCall" in eligible
    assert "UncommunicativeVariableName" in eligible
    assert "DoesNotExist" not in eligible


def test_detectors_are_in_alphabetical_order() -> None:
    names = [detector.smell_type() for detector in DetectorRepository().detectors]

    assert names == sorted(names)
    assert set(names) == DetectorRepository.eligible_smell_types()


def test_smell_types_restrict_the_detectors() -> None:
    repository = DetectorRepository(smell_types=["DuplicateMethodCall"])

    detector_types = [type(detector) for detector in repository.detectors]
    assert detector_types == [DuplicateMethodCall]


def test_empty_smell_types_builds_no_detectors() -> None:
    assert DetectorRepository(smell_types=[]).detectors == []


def test_unknown_smell_type_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        DetectorRepository(smell_types=["DoesNotExist"])


def test_build_applies_global_configuration() -> None:
    repository = DetectorRepository.build({"TooManyStatements": {"max_statements": 12}})

    detector = next(d for d in repository.detectors if isinstance(d, TooManyStatements))
    assert detector.value("max_statements") == 12


def test_configuration_does_not_leak_between_repositories() -> None:
    DetectorRepository.build({"TooManyStatements": {"max_statements": 12}})
    fresh = DetectorRepository.build()

    detector = next(d for d in fresh.detectors if isinstance(d, TooManyStatements))
    assert detector.value("max_statements") == 5


def test_configuration_for_filtered_out_detector_is_still_validated() -> None:
    with pytest.raises(ConfigurationError):
        DetectorRepository.build(
            {"TooManyStatements": {"bogus": 1}}, smell_types=["DuplicateMethodCall"]
        )


def test_unknown_detector_in_configuration_is_rejected() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        DetectorRepository.build({"LongMethod": {"max_statements": 3}})
    assert "LongMethod" in str(excinfo.value)


def test_examine_is_deterministic(ruby) -> None:
    source = """
        class C
          def f(a, b = true)
            x = a.size
            a.size
          end
        end
    """
    repository = DetectorRepository()

    first = repository.examine(ruby.tree(source))
    second = repository.examine(ruby.tree(source))

    assert first == second
    assert {smell.smell_type for smell in first} >= {
        "BooleanParameter",
        "DuplicateMethodCall",
        "IrresponsibleModule",
        "UncommunicativeModuleName",
        "UncommunicativeParameterName",
        "UncommunicativeVariableName",
    }
