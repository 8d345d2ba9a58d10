"""Shared fixtures for core unit tests"""

import pytest

from valdiff.core.context import ContextGenerator
from valdiff.core.diff.generator import DiffGenerator
from valdiff.core.models import TerminalEncoding


@pytest.fixture(name="text_diff")
def text_diff_fixture():
    return DiffGenerator(TerminalEncoding.none)


@pytest.fixture(name="context")
def context_fixture(text_settings):
    return ContextGenerator(text_settings)
