"""
Pipeline configuration -- built once at process start, passed by reference.

Everything the pipeline needs to know about its environment lives here:
which provider credentials are present, which models to ask for, and the
timeout budget for provider calls. Nothing else in the package reads
os.environ directly.

Usage:
    config = PipelineConfig.from_env()
    providers = build_providers(config)
    orchestrator = ProviderOrchestrator(providers, config=config)
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER_TIMEOUT = 30.0
DEFAULT_OUTER_DEADLINE_SLACK = 15.0
DEFAULT_MAX_TOKENS = 800
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_PROMPT_CHARS = 2000

ENV_PREFIX = "CONTENT_INTEL_"


@dataclass(frozen=True)
class PipelineConfig:
    """Read-only settings for the content intelligence pipeline.

    Attributes:
        provider_timeout: Seconds allowed for a single provider attempt.
        outer_deadline: Seconds allowed for a whole orchestrator call, across
            all candidates. None disables the outer budget.
        max_prompt_chars: Cap on user content forwarded to a provider.
    """

    groq_api_key: str = ""
    groq_model: str = "llama-3.1-70b-versatile"
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-3-5-haiku-latest"
    ollama_url: str = ""
    ollama_model: str = "llama3:latest"

    provider_timeout: float = DEFAULT_PROVIDER_TIMEOUT
    outer_deadline: float | None = 2 * DEFAULT_PROVIDER_TIMEOUT + DEFAULT_OUTER_DEADLINE_SLACK
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE
    max_prompt_chars: int = DEFAULT_MAX_PROMPT_CHARS
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PipelineConfig":
        """Build a config from environment variables (or an explicit mapping)."""
        env = os.environ if environ is None else environ

        provider_timeout = _env_float(
            env, f"{ENV_PREFIX}PROVIDER_TIMEOUT", DEFAULT_PROVIDER_TIMEOUT
        )
        if provider_timeout <= 0:
            logger.warning(
                f"[Config] {ENV_PREFIX}PROVIDER_TIMEOUT must be positive, "
                f"using {DEFAULT_PROVIDER_TIMEOUT}s"
            )
            provider_timeout = DEFAULT_PROVIDER_TIMEOUT

        outer_default = 2 * provider_timeout + DEFAULT_OUTER_DEADLINE_SLACK
        outer = _env_float(env, f"{ENV_PREFIX}OUTER_DEADLINE", outer_default)

        config = cls(
            groq_api_key=env.get("GROQ_API_KEY", "").strip(),
            groq_model=env.get("GROQ_MODEL") or cls.groq_model,
            openai_api_key=env.get("OPENAI_API_KEY", "").strip(),
            openai_model=env.get("OPENAI_MODEL") or cls.openai_model,
            anthropic_api_key=env.get("ANTHROPIC_API_KEY", "").strip(),
            anthropic_model=env.get("ANTHROPIC_MODEL") or cls.anthropic_model,
            ollama_url=env.get("OLLAMA_URL", "").strip(),
            ollama_model=env.get("OLLAMA_MODEL") or cls.ollama_model,
            provider_timeout=provider_timeout,
            outer_deadline=outer if outer > 0 else None,
            max_tokens=int(_env_float(env, f"{ENV_PREFIX}MAX_TOKENS", DEFAULT_MAX_TOKENS)),
            temperature=_env_float(env, f"{ENV_PREFIX}TEMPERATURE", DEFAULT_TEMPERATURE),
            log_level=(env.get(f"{ENV_PREFIX}LOG_LEVEL") or "WARNING").upper(),
        )
        logger.debug(
            f"[Config] Loaded (timeout={config.provider_timeout}s, "
            f"outer_deadline={config.outer_deadline}s)"
        )
        return config

    @property
    def configured_providers(self) -> list[str]:
        """Provider ids that have credentials or a URL configured, in priority order."""
        providers = []
        if self.groq_api_key:
            providers.append("groq")
        if self.openai_api_key:
            providers.append("openai")
        if self.anthropic_api_key:
            providers.append("anthropic")
        if self.ollama_url:
            providers.append("ollama")
        return providers


def _env_float(env: Mapping[str, str], name: str, default: float) -> float:
    """Read a numeric env var, falling back to the default on bad input."""
    raw = env.get(name, "")
    if not raw.strip():
        return float(default)
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        logger.warning(f"[Config] {name}={raw!r} is not a finite number, using {default}")
        return float(default)
    return value
