"""
ViolationAggregator -- merges the rule engine and a backend review into one report.

  1. PatternRuleEngine.detect()             always, synchronous
  2. ProviderOrchestrator + parse + schema   only when use_ai, may fail
  3. merge by category                       rule entry wins, both recorded
  4. severity = max(rule, ai)

A failed, slow, unparseable or nonsensical backend review counts as "no AI
findings": it never adds a violation and never hides a rule hit.
"""

import logging
from dataclasses import dataclass, field, replace

from ..generation import prompts
from ..generation.schemas import ModerationPayload, SchemaValidationError
from ..llm import ParseError, ProviderOrchestrator, parse_structured
from ..security import build_user_prompt
from .models import (
    Severity,
    SourcesUsed,
    Violation,
    ViolationCategory,
    ViolationReport,
    ViolationSource,
    max_severity,
)
from .rules import PatternRuleEngine

logger = logging.getLogger(__name__)

# First matching keyword group wins; anything unmatched is inappropriate_content.
FLAG_KEYWORDS: list[tuple[tuple[str, ...], ViolationCategory]] = [
    (("hate", "discriminat"), ViolationCategory.HATE_SPEECH),
    (("spam", "promot"), ViolationCategory.SPAM),
    (("profan", "vulgar"), ViolationCategory.PROFANITY),
    (("harass", "bully"), ViolationCategory.HARASSMENT),
    (("violen", "threat"), ViolationCategory.VIOLENCE),
    (("personal", "attack"), ViolationCategory.PERSONAL_ATTACKS),
    (("plagiar",), ViolationCategory.PLAGIARISM),
    (("mislead", "false"), ViolationCategory.MISLEADING_INFORMATION),
]


def map_flag_to_category(flag: str) -> ViolationCategory:
    """Map a backend's free-text flag to a category by keyword containment."""
    lowered = (flag or "").lower()
    for keywords, category in FLAG_KEYWORDS:
        if any(k in lowered for k in keywords):
            return category
    return ViolationCategory.INAPPROPRIATE_CONTENT


@dataclass(frozen=True)
class AIReview:
    """What the backend contributed. Empty when it was skipped or failed."""

    completed: bool = False
    violations: tuple[Violation, ...] = ()
    severity: Severity = Severity.NONE
    provider: str | None = None
    recommendation: str | None = None
    errors: tuple[str, ...] = field(default_factory=tuple)


class ViolationAggregator:
    """
    Produces a ViolationReport for a post.

    Usage:
        aggregator = ViolationAggregator(orchestrator)
        report = await aggregator.analyze(title, content, use_ai=True)
        if report.severity.priority >= Severity.HIGH.priority:
            hold_for_moderation(post, report.to_dict())
    """

    def __init__(
        self,
        orchestrator: ProviderOrchestrator | None = None,
        rule_engine: PatternRuleEngine | None = None,
        max_prompt_chars: int | None = None,
    ):
        self._orchestrator = orchestrator
        self._rules = rule_engine or PatternRuleEngine()
        if max_prompt_chars is None:
            max_prompt_chars = orchestrator.config.max_prompt_chars if orchestrator else 2000
        self._max_prompt_chars = max_prompt_chars

    async def analyze(self, title: str | None, content: str | None, use_ai: bool = True) -> ViolationReport:
        """Rule engine always, backend review when asked. Never raises."""
        rule_result = self._rules.detect(content, title)

        review = AIReview()
        if use_ai and self._orchestrator is not None:
            try:
                review = await self._review(title or "", content or "")
            except Exception as e:
                logger.warning(f"[Aggregator] AI review failed, using rules only: {e}")
                review = AIReview(errors=(str(e),))

        violations = self._merge(rule_result.violations, review.violations)
        severity = max_severity(rule_result.severity, review.severity)

        logger.info(
            f"[Aggregator] {len(violations)} violations, severity={severity.value} "
            f"(rules={rule_result.severity.value}, ai={review.severity.value if review.completed else 'n/a'})"
        )

        return ViolationReport(
            severity=severity,
            violations=tuple(violations),
            sources_used=SourcesUsed(rule_based=True, ai=review.completed),
            ai_provider=review.provider,
            ai_recommendation=review.recommendation,
        )

    async def _review(self, title: str, content: str) -> AIReview:
        user_prompt = build_user_prompt(
            {"Title": title, "Content": content}, max_length=self._max_prompt_chars
        )
        result = await self._orchestrator.try_providers(prompts.MODERATION, user_prompt)
        if not result.success:
            return AIReview(errors=result.errors)

        parsed = parse_structured(result.payload)
        if isinstance(parsed, ParseError):
            logger.info(f"[Aggregator] Unparseable review from {result.provider_id}: {parsed.reason}")
            return AIReview(errors=(f"{result.provider_id}: {parsed.reason}",))
        try:
            payload = ModerationPayload.model_validate(parsed)
        except SchemaValidationError as e:
            logger.info(
                f"[Aggregator] Review from {result.provider_id} has the wrong shape "
                f"({e.error_count()} errors)"
            )
            return AIReview(errors=(f"{result.provider_id}: wrong shape",))

        flags = [f for f in payload.flags if f]
        if flags:
            severity = Severity.parse(payload.severity, default=Severity.LOW)
            if severity == Severity.NONE:
                severity = Severity.LOW
        else:
            # A label without flags is ignored
            severity = Severity.NONE

        violations: list[Violation] = []
        seen: set[ViolationCategory] = set()
        for flag in flags:
            category = map_flag_to_category(flag)
            if category in seen:
                continue
            seen.add(category)
            violations.append(Violation(
                category=category,
                description=flag,
                excerpt="",
                location="content",
                occurrence_count=0,
                source=ViolationSource.AI,
                severity=severity,
            ))

        return AIReview(
            completed=True,
            violations=tuple(violations),
            severity=severity,
            provider=result.provider_id,
            recommendation=payload.recommendation,
        )

    @staticmethod
    def _merge(
        rule_violations: tuple[Violation, ...], ai_violations: tuple[Violation, ...]
    ) -> list[Violation]:
        """Union by category. A category both flagged keeps the rule entry."""
        merged = list(rule_violations)
        index = {v.category: i for i, v in enumerate(merged)}

        for violation in ai_violations:
            position = index.get(violation.category)
            if position is None:
                index[violation.category] = len(merged)
                merged.append(violation)
                continue
            existing = merged[position]
            if ViolationSource.AI not in existing.contributors:
                merged[position] = replace(
                    existing, contributors=existing.contributors + (ViolationSource.AI,)
                )
        return merged
