"""Tests for process defaults and builder settings."""

import threading

import pytest
from pydantic import ValidationError

import cmdhelp.defaults as defaults_module
from cmdhelp.constants import DEFAULT_MAXIMUM_DISPLAY_WIDTH
from cmdhelp.defaults import HelpDefaults, get_default_help_defaults
from cmdhelp.help_builder import HelpTextFactory
from cmdhelp.metadata import ParserMetadata
from cmdhelp.sentences import SentenceBuilder
from cmdhelp.settings import HelpSettings

from fakes import specifications_for


class TestHelpSettings:
    """Test builder configuration validation."""

    def test_defaults(self):
        """Test default configuration values."""
        settings = HelpSettings()

        assert settings.maximum_display_width == DEFAULT_MAXIMUM_DISPLAY_WIDTH == 80
        assert settings.add_dashes_to_option is None
        assert settings.additional_new_line_after_option is True
        assert settings.add_value_set_text is False
        assert settings.always_print_copyright is False

    @pytest.mark.parametrize("width", [0, -1])
    def test_display_width_must_be_positive(self, width):
        """Test that a zero-width display is rejected up front."""
        with pytest.raises(ValidationError):
            HelpSettings(maximum_display_width=width)

    def test_settings_are_frozen(self):
        """Test that settings cannot change after creation."""
        settings = HelpSettings()

        with pytest.raises(ValidationError):
            settings.maximum_display_width = 100


class TestHelpDefaults:
    """Test environment-derived defaults."""

    def test_from_environment_uses_program_name(self):
        """Test heading fallback to the executable name."""
        defaults = HelpDefaults.from_environment(argv=["/usr/local/bin/mytool"])

        assert defaults.program_name == "mytool"
        assert defaults.heading == "mytool"
        assert defaults.copyright == ""
        assert isinstance(defaults.sentence_builder, SentenceBuilder)

    def test_from_environment_reads_distribution_metadata(self):
        """Test heading from an installed distribution's name and version."""
        defaults = HelpDefaults.from_environment(distribution="pydantic", argv=["tool.py"])

        assert defaults.program_name == "tool"
        assert defaults.heading.lower().startswith("pydantic ")

    def test_from_environment_ignores_unknown_distribution(self):
        """Test fallback when the distribution is not installed."""
        defaults = HelpDefaults.from_environment(
            distribution="cmdhelp-no-such-distribution", argv=["tool"]
        )

        assert defaults.heading == "tool"

    def test_from_environment_with_empty_argv(self):
        """Test that an empty argv leaves names blank."""
        defaults = HelpDefaults.from_environment(argv=[])

        assert defaults.program_name == ""
        assert defaults.heading == ""


class TestProcessDefaults:
    """Test the lazily created process-wide defaults."""

    def test_computed_once_and_shared(self, monkeypatch):
        """Test that every caller sees the same instance."""
        monkeypatch.setattr(defaults_module, "_default", None)
        monkeypatch.setattr("sys.argv", ["shared-tool"])

        first = get_default_help_defaults()

        assert first is get_default_help_defaults()
        assert first.program_name == "shared-tool"

    def test_concurrent_first_access_builds_one_instance(self, monkeypatch):
        """Test the initialize-once guarantee across threads."""
        monkeypatch.setattr(defaults_module, "_default", None)
        calls = []
        original = HelpDefaults.from_environment

        def counting_from_environment(*args, **kwargs):
            calls.append(1)
            return original(*args, **kwargs)

        monkeypatch.setattr(HelpDefaults, "from_environment", counting_from_environment)

        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(get_default_help_defaults())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(calls) == 1
        assert all(result is results[0] for result in results)

    def test_factory_falls_back_to_process_defaults(self, monkeypatch):
        """Test that a factory without explicit defaults uses the shared ones."""
        shared = HelpDefaults(heading="shared heading")
        monkeypatch.setattr(defaults_module, "_default", shared)

        factory = HelpTextFactory(ParserMetadata(specifications=specifications_for))

        assert factory.defaults is shared
        assert factory.heading == "shared heading"
