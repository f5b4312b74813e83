"""
LLM layer -- provider variants, ordered fallback, and reply parsing.

Supports Groq, OpenAI, Anthropic and a local Ollama server. Every call
either returns the first backend reply or a tagged failure; callers fall
back to the builtin generator on failure.

Usage:
    from .llm import ProviderOrchestrator, build_providers, parse_structured

    orchestrator = ProviderOrchestrator(build_providers(config), config=config)
    result = await orchestrator.try_providers(system_prompt, user_prompt)
    parsed = parse_structured(result.payload) if result.success else None
"""

from .errors import (
    ProviderError,
    ProviderResponseError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)
from .orchestrator import BUILTIN_PROVIDER_ID, ProviderOrchestrator
from .parsing import ParseError, parse_structured
from .providers import (
    AnthropicProvider,
    OllamaProvider,
    OpenAICompatibleProvider,
    Provider,
    ProviderResult,
    build_providers,
)
