"""Tests for environment-driven configuration."""

from content_intel.config import PipelineConfig


class TestFromEnv:

    def test_defaults(self):
        config = PipelineConfig.from_env({})
        assert config.provider_timeout == 30.0
        assert config.outer_deadline == 75.0
        assert config.max_tokens == 800
        assert config.temperature == 0.7
        assert config.groq_model == "llama-3.1-70b-versatile"
        assert config.openai_model == "gpt-3.5-turbo"
        assert config.configured_providers == []

    def test_credentials_and_models(self):
        config = PipelineConfig.from_env({
            "GROQ_API_KEY": " gsk-1 ",
            "ANTHROPIC_API_KEY": "sk-ant",
            "ANTHROPIC_MODEL": "claude-test",
            "OLLAMA_URL": "http://localhost:11434",
        })
        assert config.groq_api_key == "gsk-1"
        assert config.anthropic_model == "claude-test"
        assert config.configured_providers == ["groq", "anthropic", "ollama"]

    def test_outer_deadline_follows_timeout(self):
        config = PipelineConfig.from_env({"CONTENT_INTEL_PROVIDER_TIMEOUT": "10"})
        assert config.provider_timeout == 10.0
        assert config.outer_deadline == 35.0

    def test_outer_deadline_disabled(self):
        config = PipelineConfig.from_env({"CONTENT_INTEL_OUTER_DEADLINE": "0"})
        assert config.outer_deadline is None

    def test_bad_numbers_fall_back(self):
        config = PipelineConfig.from_env({
            "CONTENT_INTEL_PROVIDER_TIMEOUT": "fast",
            "CONTENT_INTEL_MAX_TOKENS": "lots",
        })
        assert config.provider_timeout == 30.0
        assert config.max_tokens == 800

    def test_non_positive_timeout_rejected(self):
        config = PipelineConfig.from_env({"CONTENT_INTEL_PROVIDER_TIMEOUT": "-5"})
        assert config.provider_timeout == 30.0

    def test_log_level_uppercased(self):
        assert PipelineConfig.from_env({"CONTENT_INTEL_LOG_LEVEL": "debug"}).log_level == "DEBUG"

    def test_non_finite_numbers_fall_back(self):
        config = PipelineConfig.from_env({
            "CONTENT_INTEL_MAX_TOKENS": "inf",
            "CONTENT_INTEL_PROVIDER_TIMEOUT": "nan",
            "CONTENT_INTEL_OUTER_DEADLINE": "-inf",
            "CONTENT_INTEL_TEMPERATURE": "NaN",
        })
        assert config.max_tokens == 800
        assert config.provider_timeout == 30.0
        assert config.outer_deadline == 75.0
        assert config.temperature == 0.7
