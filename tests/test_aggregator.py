"""Tests for merging rule and backend verdicts."""

import pytest

from content_intel.llm.fake_provider import ScriptedProvider
from content_intel.moderation import (
    Severity,
    ViolationAggregator,
    ViolationCategory,
    ViolationSource,
    map_flag_to_category,
)


def review(flags, severity="medium", recommendation="review"):
    import json

    return json.dumps({
        "isAppropriate": not flags,
        "flags": flags,
        "severity": severity,
        "recommendation": recommendation,
    })


class TestFlagMapping:

    @pytest.mark.parametrize("flag, category", [
        ("Hate speech against a group", ViolationCategory.HATE_SPEECH),
        ("discriminatory remarks", ViolationCategory.HATE_SPEECH),
        ("Self-promotion", ViolationCategory.SPAM),
        ("vulgar language", ViolationCategory.PROFANITY),
        ("Bullying", ViolationCategory.HARASSMENT),
        ("Threatening tone", ViolationCategory.VIOLENCE),
        ("Personal insult", ViolationCategory.PERSONAL_ATTACKS),
        ("Possible plagiarism", ViolationCategory.PLAGIARISM),
        ("False medical claims", ViolationCategory.MISLEADING_INFORMATION),
        ("Something odd", ViolationCategory.INAPPROPRIATE_CONTENT),
        ("", ViolationCategory.INAPPROPRIATE_CONTENT),
    ])
    def test_keyword_containment(self, flag, category):
        assert map_flag_to_category(flag) == category


class TestAnalyze:

    @pytest.mark.asyncio
    async def test_rules_only_without_ai(self, make_orchestrator):
        backend = ScriptedProvider("groq", [review(["spam"])])
        aggregator = ViolationAggregator(make_orchestrator(backend))

        report = await aggregator.analyze("", "You are stupid", use_ai=False)

        assert backend.call_count == 0
        assert report.categories == [ViolationCategory.PERSONAL_ATTACKS]
        assert report.sources_used.ai is False

    @pytest.mark.asyncio
    async def test_ai_adds_new_category(self, make_orchestrator):
        backend = ScriptedProvider("groq", [review(["Possible plagiarism"], severity="high")])
        aggregator = ViolationAggregator(make_orchestrator(backend))

        report = await aggregator.analyze("Essay", "Damn, this essay is good.")

        assert report.categories == [ViolationCategory.PROFANITY, ViolationCategory.PLAGIARISM]
        ai_entry = report.violations[1]
        assert ai_entry.source == ViolationSource.AI
        assert ai_entry.excerpt == ""
        assert ai_entry.description == "Possible plagiarism"
        assert report.severity == Severity.HIGH
        assert report.sources_used.ai is True
        assert report.ai_provider == "groq"

    @pytest.mark.asyncio
    async def test_shared_category_kept_once(self, make_orchestrator):
        backend = ScriptedProvider("groq", [review(["Spam links", "promotional"], severity="low")])
        aggregator = ViolationAggregator(make_orchestrator(backend))

        report = await aggregator.analyze("", "buy now, click here")

        assert report.categories == [ViolationCategory.SPAM]
        entry = report.violations[0]
        assert entry.source == ViolationSource.RULE
        assert entry.excerpt == "buy now, click here"
        assert entry.contributors == (ViolationSource.RULE, ViolationSource.AI)
        assert report.severity == Severity.MEDIUM

    @pytest.mark.asyncio
    async def test_ai_severity_can_raise_result(self, make_orchestrator):
        backend = ScriptedProvider("groq", [review(["harassment"], severity="Critical")])
        aggregator = ViolationAggregator(make_orchestrator(backend))

        report = await aggregator.analyze("", "shut up")

        assert report.severity == Severity.CRITICAL

    @pytest.mark.asyncio
    async def test_unknown_severity_with_flags_is_low(self, make_orchestrator):
        backend = ScriptedProvider("groq", [review(["odd"], severity="severe-ish")])
        report = await ViolationAggregator(make_orchestrator(backend)).analyze("", "fine text")
        assert report.severity == Severity.LOW
        assert report.categories == [ViolationCategory.INAPPROPRIATE_CONTENT]

    @pytest.mark.asyncio
    async def test_clean_review(self, make_orchestrator):
        backend = ScriptedProvider("groq", [review([], severity="none", recommendation="approve")])
        report = await ViolationAggregator(make_orchestrator(backend)).analyze("", "fine text")
        assert report.is_clean
        assert report.sources_used.ai is True
        assert report.ai_recommendation == "approve"

    @pytest.mark.asyncio
    async def test_severity_without_flags_ignored(self, make_orchestrator):
        backend = ScriptedProvider("groq", [review([], severity="critical")])
        report = await ViolationAggregator(make_orchestrator(backend)).analyze(
            "Essay", "A calm essay about gardens."
        )

        assert report.is_clean
        assert report.severity == Severity.NONE
        assert report.sources_used.ai is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("reply", [
        "I cannot review this.",
        '{"flags": "not a list"}',
        '{"flags": [1, 2]}',
        '{"confidence": 900}',
    ])
    async def test_bad_reviews_ignored(self, make_orchestrator, reply):
        backend = ScriptedProvider("groq", [reply])
        report = await ViolationAggregator(make_orchestrator(backend)).analyze("", "I will hurt you")

        assert report.categories == [ViolationCategory.VIOLENCE]
        assert report.severity == Severity.CRITICAL
        assert report.sources_used.ai is False

    @pytest.mark.asyncio
    async def test_orchestrator_exception_ignored(self):
        class Exploding:
            config = None

            async def try_providers(self, *args, **kwargs):
                raise RuntimeError("boom")

        aggregator = ViolationAggregator(Exploding(), max_prompt_chars=100)
        report = await aggregator.analyze("", "shut up")

        assert report.categories == [ViolationCategory.PERSONAL_ATTACKS]
        assert report.sources_used.ai is False

    @pytest.mark.asyncio
    async def test_no_orchestrator_means_rules_only(self):
        report = await ViolationAggregator().analyze("", "I will hurt you", use_ai=True)
        assert report.severity == Severity.CRITICAL
        assert report.sources_used.ai is False

    @pytest.mark.asyncio
    async def test_report_serializes(self, make_orchestrator):
        backend = ScriptedProvider("groq", [review(["threat"], severity="high")])
        report = await ViolationAggregator(make_orchestrator(backend)).analyze("", "I will hurt you")

        data = report.to_dict()
        assert data["hasViolations"] is True
        assert data["isClean"] is False
        assert data["severity"] == "critical"
        assert data["sourcesUsed"] == {"ruleBased": True, "ai": True}
        assert data["violations"][0]["type"] == "violence"
        assert data["violations"][0]["contributors"] == ["rule", "ai"]
        assert data["analyzedAt"]
