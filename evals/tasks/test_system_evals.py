"""
System Evals -- concurrency, provider ordering, status reporting.

Exercises the pipeline as callers use it: many independent requests at
once, over one shared, read-only provider list.
"""

import asyncio
import random

import pytest

from content_intel.config import PipelineConfig
from content_intel.generation import GenerationFacade
from content_intel.llm import ProviderOrchestrator
from content_intel.llm.fake_provider import ScriptedProvider
from content_intel.moderation import Severity, ViolationAggregator
from evals.graders.code_grader import CodeGrader


class TestConcurrentRequests:
    """Eval: Do concurrent calls stay independent?"""

    @pytest.mark.asyncio
    async def test_concurrent_reports_do_not_interfere(self):
        aggregator = ViolationAggregator()
        posts = [
            ("", "You are stupid and I will hurt you"),
            ("", "This is a well-reasoned essay about agriculture."),
            ("Deal", "buy now, click here"),
        ] * 10

        reports = await asyncio.gather(
            *(aggregator.analyze(t, c, use_ai=False) for t, c in posts)
        )

        expected = [Severity.CRITICAL, Severity.NONE, Severity.MEDIUM] * 10
        assert [r.severity for r in reports] == expected

    @pytest.mark.asyncio
    async def test_concurrent_generation_over_shared_providers(self, fast_config):
        backend = ScriptedProvider("groq", ['{"topics": ["One", "Two"]}'])
        facade = GenerationFacade(
            ProviderOrchestrator([backend], config=fast_config), rng=random.Random(1)
        )

        results = await asyncio.gather(
            *(facade.generate_topic_ideas("science") for _ in range(20))
        )

        assert all(r.provider == "groq" and r.topics == ["One", "Two"] for r in results)
        assert backend.call_count == 20


class TestProviderOrdering:
    """Eval: Is priority order respected, with no racing?"""

    @pytest.mark.asyncio
    async def test_first_available_success_wins(self, fast_config):
        groq = ScriptedProvider("groq", available=False)
        openai = ScriptedProvider("openai", [TimeoutError("read timeout")])
        anthropic = ScriptedProvider("anthropic", ['{"topics": ["From Anthropic"]}'])
        ollama = ScriptedProvider("ollama", ['{"topics": ["From Ollama"]}'])
        facade = GenerationFacade(
            ProviderOrchestrator([groq, openai, anthropic, ollama], config=fast_config)
        )

        result = await facade.generate_topic_ideas("technology")

        grader = CodeGrader("provider_ordering")
        grader.add_check("answered_by_anthropic", lambda _: result.provider == "anthropic")
        grader.add_check("skipped_unavailable", lambda _: groq.call_count == 0)
        grader.add_check("tried_openai_once", lambda _: openai.call_count == 1)
        grader.add_check("never_reached_ollama", lambda _: ollama.call_count == 0)
        outcome = grader.grade(result)
        assert outcome.passed, outcome.report()


class TestStatus:
    """Eval: Does status reflect configuration?"""

    def test_status_without_keys(self):
        facade = GenerationFacade.from_config(PipelineConfig())
        status = facade.status()
        assert status == {
            "configured": True,
            "providers": ["builtin"],
            "primaryProvider": "builtin",
            "hasBuiltinFallback": True,
        }

    def test_status_with_keys(self):
        config = PipelineConfig.from_env({
            "OPENAI_API_KEY": "sk-test",
            "OLLAMA_URL": "http://localhost:11434",
        })
        status = GenerationFacade.from_config(config).status()
        assert status["providers"] == ["openai", "ollama", "builtin"]
        assert status["primaryProvider"] == "openai"
