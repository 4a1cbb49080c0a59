"""Unit tests for configuration and the component factory."""

import pytest

from regexgen.core.config import Settings
from regexgen.core.factory import ComponentFactory
from regexgen.strategies.derivers import ContextWindowDeriver
from regexgen.strategies.renderers import (
    GroovyScriptRenderer,
    JMeterExtractorRenderer,
    MatchReportRenderer,
)


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self, settings):
        """Test the derivation defaults."""
        assert settings.context_limit == 20
        assert settings.deriver_type == "context_window"
        assert settings.jmeter_escape_xml is False

    def test_log_level_normalized(self, settings):
        """Test that the log level is upper-cased."""
        assert settings.log_level == "DEBUG"

    def test_log_dir_created(self, settings):
        """Test that the log directory exists after validation."""
        assert settings.log_dir.is_dir()

    def test_environment_override(self, monkeypatch, tmp_path):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("CONTEXT_LIMIT", "5")
        monkeypatch.setenv("JMETER_ESCAPE_XML", "true")

        settings = Settings(log_dir=tmp_path)

        assert settings.context_limit == 5
        assert settings.jmeter_escape_xml is True

    def test_rejects_invalid_context_limit(self, tmp_path):
        """Test that a zero context limit fails validation."""
        with pytest.raises(ValueError):
            Settings(log_dir=tmp_path, context_limit=0)


class TestComponentFactory:
    """Test suite for ComponentFactory."""

    @pytest.fixture
    def factory(self, settings):
        """Create a factory bound to test settings."""
        return ComponentFactory(settings)

    def test_default_deriver(self, factory):
        """Test that the configured deriver is built with the configured limit."""
        deriver = factory.get_deriver()

        assert isinstance(deriver, ContextWindowDeriver)
        assert deriver.context_limit == 20

    def test_default_deriver_cached(self, factory):
        """Test that the default deriver is reused."""
        assert factory.get_deriver() is factory.get_deriver()

    def test_context_limit_override(self, factory):
        """Test that an override builds a separate deriver."""
        deriver = factory.get_deriver(context_limit=5)

        assert deriver.context_limit == 5
        assert factory.get_deriver().context_limit == 20

    def test_unknown_deriver(self, factory):
        """Test that an unknown deriver type is rejected."""
        with pytest.raises(ValueError, match="Unknown deriver type"):
            factory.get_deriver("genetic")

    def test_renderers_in_display_order(self, factory):
        """Test that renderers come back as jmeter, groovy, test."""
        renderers = factory.get_renderers()

        assert [type(r) for r in renderers] == [
            JMeterExtractorRenderer,
            GroovyScriptRenderer,
            MatchReportRenderer,
        ]

    def test_renderer_cached(self, factory):
        """Test that renderer instances are reused."""
        assert factory.get_renderer("groovy") is factory.get_renderer("groovy")

    def test_unknown_renderer(self, factory):
        """Test that an unknown renderer type is rejected."""
        with pytest.raises(ValueError, match="Unknown renderer type"):
            factory.get_renderer("postman")
