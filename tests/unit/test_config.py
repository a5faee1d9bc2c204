"""
Unit tests for HelperConfig.
"""

import dataclasses

import pytest

from httphelpers import HelperConfig, InvalidArgumentError, Responder


class TestHelperConfig:
    """Tests for configuration defaults, environment and validation."""

    def test_defaults(self):
        """Test default values."""
        config = HelperConfig()

        assert config.component_name == ""
        assert config.internal_url_prefix == ""
        assert config.words_path is None
        assert config.html_indent_step == 25

    def test_from_env(self, monkeypatch):
        """Test reading every supported variable."""
        monkeypatch.setenv("COMPONENT_NAME", "orders")
        monkeypatch.setenv("INTERNAL_URL_PREFIX", "scheme://authority")
        monkeypatch.setenv("HTTP_HELPERS_WORDS_FILE", "/srv/words")
        monkeypatch.setenv("HTTP_HELPERS_HTML_INDENT", "10")

        config = HelperConfig.from_env()

        assert config.component_name == "orders"
        assert config.internal_url_prefix == "scheme://authority"
        assert config.words_path == "/srv/words"
        assert config.html_indent_step == 10

    def test_from_env_unset(self, monkeypatch):
        """Test that missing variables fall back to defaults."""
        for name in ("COMPONENT_NAME", "INTERNAL_URL_PREFIX",
                     "HTTP_HELPERS_WORDS_FILE", "HTTP_HELPERS_HTML_INDENT"):
            monkeypatch.delenv(name, raising=False)

        assert HelperConfig.from_env() == HelperConfig()

    def test_from_env_bad_indent(self, monkeypatch):
        """Test that a non-integer indent is reported as an invalid argument."""
        monkeypatch.setenv("HTTP_HELPERS_HTML_INDENT", "wide")

        with pytest.raises(InvalidArgumentError) as exc_info:
            HelperConfig.from_env()

        assert "HTTP_HELPERS_HTML_INDENT" in str(exc_info.value)

    def test_frozen(self):
        """Test that settings can't change after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            HelperConfig().component_name = "x"

    def test_invalid_indent(self):
        """Test that the responder refuses a bad indent step at startup."""
        with pytest.raises(InvalidArgumentError):
            Responder(HelperConfig(html_indent_step=0))

    def test_invalid_server_name(self):
        """Test that an empty server name is rejected."""
        with pytest.raises(InvalidArgumentError):
            HelperConfig(server_name="").validate()
