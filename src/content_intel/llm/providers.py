"""
Provider variants -- one interface, one class per kind of backend.

Every backend the orchestrator can try implements the Provider protocol:

    provider.id                       -> "groq", "openai", "anthropic", "ollama"
    provider.is_available()           -> bool (credentials/URL present)
    await provider.invoke(system, user, timeout) -> ProviderResult

Supported:
  - Groq and OpenAI via the openai SDK (Groq speaks the OpenAI wire format)
  - Anthropic via the anthropic SDK
  - Ollama (local) via httpx against /api/generate

New backends are added as a new variant plus one line in build_providers().
SDK clients are created lazily per provider instance; there are no
module-level clients. SDK-level retries are disabled: a single miss is
enough to fall through to the next candidate.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import anthropic
import httpx
import openai

from ..config import PipelineConfig
from ..security.validators import ValidationError, validate_url
from .errors import ProviderResponseError, ProviderUnavailableError

logger = logging.getLogger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"


# =============================================================================
# DATA MODELS
# =============================================================================


@dataclass(frozen=True)
class ProviderResult:
    """Outcome of one orchestrator call.

    On success payload is the raw backend text and provider_id names the
    backend that produced it. On failure errors lists why each attempted
    candidate missed.
    """

    success: bool
    payload: str | None = None
    provider_id: str = "none"
    errors: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def failure(cls, errors: list[str] | tuple[str, ...] = ()) -> "ProviderResult":
        return cls(success=False, payload=None, provider_id="none", errors=tuple(errors))


@runtime_checkable
class Provider(Protocol):
    """Interface every backend variant implements."""

    @property
    def id(self) -> str: ...

    def is_available(self) -> bool: ...

    async def invoke(
        self, system_prompt: str, user_prompt: str, timeout: float
    ) -> ProviderResult: ...


def _require_text(provider_id: str, content: Any) -> str:
    if not isinstance(content, str) or not content.strip():
        raise ProviderResponseError(provider_id, "empty completion")
    return content


# =============================================================================
# OPENAI-COMPATIBLE (OpenAI, Groq)
# =============================================================================


class OpenAICompatibleProvider:
    """Chat-completions backend reached through the openai SDK.

    Usage:
        groq = OpenAICompatibleProvider("groq", api_key, "llama-3.1-70b-versatile",
                                        base_url=GROQ_BASE_URL)
    """

    def __init__(
        self,
        provider_id: str,
        api_key: str,
        model: str,
        base_url: str | None = None,
        max_tokens: int = 800,
        temperature: float = 0.7,
    ):
        self._id = provider_id
        self._api_key = api_key
        self._model = model
        self._base_url = base_url
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._client: Any = None

    @property
    def id(self) -> str:
        return self._id

    def is_available(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = openai.AsyncOpenAI(
                api_key=self._api_key, base_url=self._base_url, max_retries=0
            )
        return self._client

    async def invoke(
        self, system_prompt: str, user_prompt: str, timeout: float
    ) -> ProviderResult:
        if not self.is_available():
            raise ProviderUnavailableError(self.id, "not configured")
        client = self._get_client()
        response = await client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            timeout=timeout,
        )
        if not response.choices:
            raise ProviderResponseError(self._id, "no choices in completion")
        content = _require_text(self._id, response.choices[0].message.content)
        return ProviderResult(success=True, payload=content, provider_id=self._id)


# =============================================================================
# ANTHROPIC
# =============================================================================


class AnthropicProvider:
    """Claude via the anthropic SDK (system prompt as a top-level field)."""

    def __init__(
        self,
        api_key: str,
        model: str,
        max_tokens: int = 800,
        temperature: float = 0.7,
    ):
        self._api_key = api_key
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._client: Any = None

    @property
    def id(self) -> str:
        return "anthropic"

    def is_available(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self._api_key, max_retries=0)
        return self._client

    async def invoke(
        self, system_prompt: str, user_prompt: str, timeout: float
    ) -> ProviderResult:
        if not self.is_available():
            raise ProviderUnavailableError(self.id, "not configured")
        client = self._get_client()
        response = await client.messages.create(
            model=self._model,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
            timeout=timeout,
        )
        text = "".join(
            getattr(block, "text", "") for block in (response.content or [])
        )
        content = _require_text(self.id, text)
        return ProviderResult(success=True, payload=content, provider_id=self.id)


# =============================================================================
# OLLAMA (local)
# =============================================================================


class OllamaProvider:
    """Local Ollama server, POST {base_url}/api/generate (non-streaming).

    transport is passed to httpx.AsyncClient (httpx.MockTransport in tests).
    """

    def __init__(
        self,
        base_url: str,
        model: str,
        max_tokens: int = 800,
        temperature: float = 0.7,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = self._validated(base_url)
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        self._transport = transport

    @staticmethod
    def _validated(base_url: str) -> str:
        if not base_url:
            return ""
        try:
            return validate_url(base_url, "OLLAMA_URL", allow_private=True)
        except ValidationError as e:
            logger.warning(f"[Providers] Ignoring OLLAMA_URL: {e}")
            return ""

    @property
    def id(self) -> str:
        return "ollama"

    def is_available(self) -> bool:
        return bool(self._base_url)

    async def invoke(
        self, system_prompt: str, user_prompt: str, timeout: float
    ) -> ProviderResult:
        if not self.is_available():
            raise ProviderUnavailableError(self.id, "not configured")
        payload = {
            "model": self._model,
            "prompt": f"{system_prompt}\n\nUser: {user_prompt}",
            "stream": False,
            "options": {
                "temperature": self._temperature,
                "num_predict": self._max_tokens,
            },
        }
        async with httpx.AsyncClient(timeout=timeout, transport=self._transport) as client:
            try:
                response = await client.post(f"{self._base_url}/api/generate", json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise ProviderResponseError(
                    self.id, f"HTTP {e.response.status_code}"
                ) from e
            try:
                data = response.json()
            except ValueError as e:
                raise ProviderResponseError(self.id, "non-JSON response body") from e

        content = _require_text(self.id, data.get("response") if isinstance(data, dict) else None)
        return ProviderResult(success=True, payload=content, provider_id=self.id)


# =============================================================================
# FACTORY
# =============================================================================


def build_providers(config: PipelineConfig) -> list[Provider]:
    """
    Build the static, priority-ordered provider list from configuration.

    Order: Groq (free and fast) -> OpenAI -> Anthropic -> Ollama (local).
    Unconfigured providers stay in the list and report is_available() False,
    so status reporting sees the full set.
    """
    common = {"max_tokens": config.max_tokens, "temperature": config.temperature}
    return [
        OpenAICompatibleProvider(
            "groq", config.groq_api_key, config.groq_model,
            base_url=GROQ_BASE_URL, **common,
        ),
        OpenAICompatibleProvider(
            "openai", config.openai_api_key, config.openai_model, **common,
        ),
        AnthropicProvider(config.anthropic_api_key, config.anthropic_model, **common),
        OllamaProvider(config.ollama_url, config.ollama_model, **common),
    ]
