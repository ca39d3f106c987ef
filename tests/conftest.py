"""Pytest configuration and fixtures for cmdhelp tests."""

import pytest

from cmdhelp.defaults import HelpDefaults
from cmdhelp.help_builder import HelpTextFactory
from cmdhelp.metadata import ParserMetadata
from cmdhelp.settings import HelpSettings

from fakes import VERBS, specifications_for


@pytest.fixture
def metadata():
    """Metadata for ServeOptions plus two verbs, without usage examples."""
    return ParserMetadata(specifications=specifications_for, verb_info=VERBS.__getitem__)


@pytest.fixture
def help_defaults():
    """Fixed defaults independent of sys.argv and installed packages."""
    return HelpDefaults(
        heading="demo 1.0",
        copyright="Copyright (C) 2026 Demo",
        program_name="demo",
    )


@pytest.fixture
def factory(metadata, help_defaults):
    """Help factory with default settings and fixed defaults."""
    return HelpTextFactory(metadata, HelpSettings(), help_defaults)
