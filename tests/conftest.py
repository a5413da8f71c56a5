from __future__ import annotations

import pytest

from tests._fixtures.ruby_source import RubySource


@pytest.fixture
def ruby() -> RubySource:
    """Provide a parser that turns Ruby snippets into code contexts."""
    return RubySource()
