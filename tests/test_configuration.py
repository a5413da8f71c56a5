"""Tests for pyreek.configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyreek import Examiner
from pyreek.configuration import ReekConfig, load_configuration
from pyreek.errors import ConfigurationError


def test_load_configuration_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_configuration(tmp_path)

    assert isinstance(config, ReekConfig)
    assert config.root == tmp_path.resolve()
    assert config.detectors == {}


def test_load_configuration_parses_detectors(tmp_path: Path) -> None:
    (tmp_path / ".reek.yml").write_text(
        """
detectors:
  DuplicateMethodCall:
    max_calls: 3
    allow_calls:
      - puts
  IrresponsibleModule:
    enabled: false
  TooManyStatements:
""",
        encoding="utf-8",
    )

    config = load_configuration(tmp_path)

    assert config.detectors == {
        "DuplicateMethodCall": {"max_calls": 3, "allow_calls": ["puts"]},
        "IrresponsibleModule": {"enabled": False},
        "TooManyStatements": {},
    }


def test_load_configuration_accepts_explicit_file(tmp_path: Path) -> None:
    config_file = tmp_path / "custom.yml"
    config_file.write_text(
        "detectors:\n  UncommunicativeVariableName:\n    enabled: false\n",
        encoding="utf-8",
    )

    config = load_configuration(config_file)

    examiner = Examiner("def fine() y = 4; end", configuration=config.detectors)
    assert examiner.smells == []


def test_load_configuration_rejects_malformed_yaml(tmp_path: Path) -> None:
    (tmp_path / ".reek.yml").write_text("detectors: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_configuration(tmp_path)


def test_load_configuration_rejects_non_mapping_options(tmp_path: Path) -> None:
    (tmp_path / ".reek.yml").write_text(
        "detectors:\n  TooManyStatements: 5\n", encoding="utf-8"
    )

    with pytest.raises(ConfigurationError):
        load_configuration(tmp_path)


def test_load_configuration_rejects_non_mapping_root(tmp_path: Path) -> None:
    (tmp_path / ".reek.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_configuration(tmp_path)
