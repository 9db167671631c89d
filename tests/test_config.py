"""
Unit tests for configuration helpers.
"""

import logging

from graphkit import config


class TestSettings:
    """Test effective configuration values."""

    def test_settings_complete(self):
        """Settings should include all expected keys."""
        settings = config.get_settings()
        for key in ["validate_vertices", "allow_multi_edges", "log_level"]:
            assert key in settings, f"Missing key: {key}"

    def test_env_flag_parsing(self, monkeypatch):
        monkeypatch.setenv("GRAPHKIT_TEST_FLAG", "off")
        assert config._env_flag("GRAPHKIT_TEST_FLAG", True) is False
        monkeypatch.setenv("GRAPHKIT_TEST_FLAG", "Yes")
        assert config._env_flag("GRAPHKIT_TEST_FLAG", False) is True
        monkeypatch.delenv("GRAPHKIT_TEST_FLAG")
        assert config._env_flag("GRAPHKIT_TEST_FLAG", True) is True

    def test_configure_logging(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        config.configure_logging("debug")
        assert calls["level"] == "DEBUG"
