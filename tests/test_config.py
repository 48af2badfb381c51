"""Tests for config loading."""

import pytest

from ats_architect.config import AppConfig, LLMConfig, load_config


class TestConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.llm.fast_model == "claude-haiku-4-5-20251001"
        assert config.fix.summary_fallback_role == "Professional"
        assert config.fix.style_hint == "polish"
        assert config.logging.level == "WARNING"

    def test_load_config_defaults(self, tmp_path):
        """Loading from non-existent path returns defaults."""
        config = load_config(tmp_path / "nonexistent.yaml")
        assert config.llm.review_model == "claude-sonnet-4-5-20250929"

    def test_load_config_from_yaml(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("llm:\n  fast_model: test-model\nfix:\n  style_hint: concise\n")
        config = load_config(yaml_path)
        assert config.llm.fast_model == "test-model"
        assert config.fix.style_hint == "concise"
        # Defaults for unspecified
        assert config.llm.max_retries == 3
        assert config.logging.level == "WARNING"

    def test_unknown_key_raises(self, tmp_path):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text("llm:\n  temperature: 0.9\n")
        with pytest.raises(TypeError):
            load_config(yaml_path)

    def test_frozen_config(self):
        config = LLMConfig()
        with pytest.raises(AttributeError):
            config.fast_model = "changed"
