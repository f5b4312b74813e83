"""
content_intel -- moderation verdicts and writing assistance for blog posts.

Two entry points, both total (they always return a well-formed result):

    aggregator = ViolationAggregator(orchestrator)
    report = await aggregator.analyze(title, content, use_ai=True)

    facade = GenerationFacade(orchestrator)
    result = await facade.generate_paragraphs(title, "science")

Backends (Groq, OpenAI, Anthropic, Ollama) are tried in order; when none
answers, the builtin generator and the rule engine still do.
"""

from .config import PipelineConfig
from .generation import GenerationFacade
from .llm import ProviderOrchestrator, build_providers
from .moderation import Severity, ViolationAggregator, ViolationReport

__version__ = "0.1.0"
