#!/usr/bin/env python3
"""
Demo - Moderate a few posts and run the writing assistant, offline.

Usage: python scripts/demo.py

No API keys required -- one scripted backend answers some calls and
misbehaves on others, so both the provider path and the builtin
fallback are visible.
"""

import asyncio
import json
import random

from content_intel import GenerationFacade, PipelineConfig, ViolationAggregator
from content_intel.llm import ProviderOrchestrator
from content_intel.llm.fake_provider import ScriptedProvider

POSTS = [
    ("Garden notes", "Tomatoes need six hours of sun. Water them in the morning."),
    ("Limited offer", "BUY NOW!!! Click here for free money: http://spam.example"),
    ("Reply", "You are stupid and I will hurt you."),
]

REVIEW = json.dumps({
    "isAppropriate": False,
    "flags": ["Promotional spam"],
    "severity": "medium",
    "recommendation": "review",
})


async def main():
    config = PipelineConfig(provider_timeout=1.0, outer_deadline=3.0)

    print("\n" + "=" * 60)
    print("  CONTENT INTEL DEMO")
    print("  Rule engine + scripted backend + builtin fallback")
    print("=" * 60 + "\n")

    # Moderation: the backend flags spam on every post
    reviewer = ScriptedProvider("groq", [REVIEW])
    aggregator = ViolationAggregator(ProviderOrchestrator([reviewer], config=config))
    for title, content in POSTS:
        report = await aggregator.analyze(title, content)
        print(f"  [{report.severity.value.upper():8}] {title}")
        for v in report.violations:
            sources = "+".join(s.value for s in v.contributors)
            print(f"      {v.category.value:22} {sources:8} {v.excerpt or v.description}")

    # Generation: first reply is prose (a miss), the rest are well-formed
    writer = ScriptedProvider("groq", [
        "Sure! Here are some paragraphs for you.",
        '{"topics": ["Composting at home", "Raised beds on a budget"]}',
    ])
    facade = GenerationFacade(
        ProviderOrchestrator([writer], config=config), config, rng=random.Random(1)
    )

    paragraphs = await facade.generate_paragraphs("Growing Tomatoes at Home", "science")
    topics = await facade.generate_topic_ideas("science")
    excerpt = await facade.generate_excerpt(POSTS[0][1], 40)

    print(f"\n{'=' * 60}")
    print("  WRITING ASSISTANT")
    print(f"{'=' * 60}\n")
    print(f"  Paragraphs ({paragraphs.provider}):")
    for p in paragraphs.paragraphs:
        print(f"    [{p.type}] {p.text}")
    print(f"\n  Topics ({topics.provider}): {', '.join(topics.topics)}")
    print(f"  Excerpt ({excerpt.provider}): {excerpt.excerpt}")
    print(f"\n{'=' * 60}\n")


if __name__ == "__main__":
    asyncio.run(main())
