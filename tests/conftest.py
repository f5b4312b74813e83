"""Unit test fixtures -- configs and scripted orchestrators. No network."""

import random

import pytest

from content_intel.config import PipelineConfig
from content_intel.generation import GenerationFacade
from content_intel.llm import ProviderOrchestrator
from content_intel.llm.fake_provider import ScriptedProvider


@pytest.fixture
def config():
    return PipelineConfig(provider_timeout=0.2, outer_deadline=2.0)


@pytest.fixture
def make_orchestrator(config):
    """Build an orchestrator over scripted providers: make_orchestrator(p1, p2, ...)."""

    def _make(*providers):
        return ProviderOrchestrator(list(providers), config=config)

    return _make


@pytest.fixture
def make_facade(make_orchestrator):
    """Facade whose single backend replies with the given script."""

    def _make(*script, provider_id="groq"):
        backend = ScriptedProvider(provider_id, list(script))
        facade = GenerationFacade(make_orchestrator(backend), rng=random.Random(3))
        return facade, backend

    return _make


@pytest.fixture
def offline_facade(make_orchestrator):
    """No backend configured at all."""
    return GenerationFacade(
        make_orchestrator(ScriptedProvider("groq", available=False)), rng=random.Random(3)
    )
