"""Tests for the provider variants. SDK clients and HTTP are mocked."""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock

import httpx
import pytest

from content_intel.config import PipelineConfig
from content_intel.llm import (
    AnthropicProvider,
    OllamaProvider,
    OpenAICompatibleProvider,
    Provider,
    ProviderResponseError,
    ProviderUnavailableError,
    build_providers,
)
from content_intel.llm.providers import GROQ_BASE_URL


def chat_completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestOpenAICompatibleProvider:

    @pytest.mark.asyncio
    async def test_invoke_returns_content(self):
        provider = OpenAICompatibleProvider("groq", "key", "llama", base_url=GROQ_BASE_URL)
        provider._client = AsyncMock()
        provider._client.chat.completions.create.return_value = chat_completion('{"a": 1}')

        result = await provider.invoke("system", "user", 12.0)

        assert result.success
        assert result.payload == '{"a": 1}'
        assert result.provider_id == "groq"
        kwargs = provider._client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "llama"
        assert kwargs["timeout"] == 12.0
        assert kwargs["messages"][0] == {"role": "system", "content": "system"}
        assert kwargs["messages"][1] == {"role": "user", "content": "user"}

    @pytest.mark.asyncio
    async def test_empty_completion_raises(self):
        provider = OpenAICompatibleProvider("openai", "key", "gpt")
        provider._client = AsyncMock()
        provider._client.chat.completions.create.return_value = chat_completion(None)

        with pytest.raises(ProviderResponseError):
            await provider.invoke("s", "u", 1.0)

    @pytest.mark.asyncio
    async def test_unconfigured_raises_unavailable(self):
        provider = OpenAICompatibleProvider("openai", "", "gpt")
        assert not provider.is_available()
        with pytest.raises(ProviderUnavailableError):
            await provider.invoke("s", "u", 1.0)


class TestAnthropicProvider:

    @pytest.mark.asyncio
    async def test_invoke_joins_text_blocks(self):
        provider = AnthropicProvider("key", "claude")
        provider._client = AsyncMock()
        provider._client.messages.create.return_value = SimpleNamespace(
            content=[SimpleNamespace(text='{"topics": '), SimpleNamespace(text='["x"]}')]
        )

        result = await provider.invoke("system", "user", 5.0)

        assert result.payload == '{"topics": ["x"]}'
        assert result.provider_id == "anthropic"
        kwargs = provider._client.messages.create.call_args.kwargs
        assert kwargs["system"] == "system"
        assert kwargs["messages"] == [{"role": "user", "content": "user"}]


class TestOllamaProvider:

    @pytest.mark.asyncio
    async def test_posts_to_generate(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"response": "hello"})

        provider = OllamaProvider(
            "http://localhost:11434/", "llama3:latest", transport=httpx.MockTransport(handler)
        )
        result = await provider.invoke("system", "user", 5.0)

        assert result.payload == "hello"
        assert seen["url"] == "http://localhost:11434/api/generate"
        assert seen["body"]["stream"] is False
        assert seen["body"]["prompt"] == "system\n\nUser: user"

    @pytest.mark.asyncio
    async def test_http_error_raises(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        provider = OllamaProvider("http://localhost:11434", "m", transport=transport)

        with pytest.raises(ProviderResponseError, match="HTTP 503"):
            await provider.invoke("s", "u", 5.0)

    def test_unsafe_url_disables_provider(self):
        provider = OllamaProvider("http://169.254.169.254", "m")
        assert not provider.is_available()


class TestBuildProviders:

    def test_priority_order(self):
        providers = build_providers(PipelineConfig())
        assert [p.id for p in providers] == ["groq", "openai", "anthropic", "ollama"]
        assert all(isinstance(p, Provider) for p in providers)
        assert not any(p.is_available() for p in providers)

    def test_availability_follows_config(self):
        config = PipelineConfig(groq_api_key="gsk", ollama_url="http://localhost:11434")
        available = [p.id for p in build_providers(config) if p.is_available()]
        assert available == ["groq", "ollama"]
