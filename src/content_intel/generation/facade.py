"""
GenerationFacade -- public entry points for the authoring assistant.

Every operation has the same two-step shape:

  1. ProviderOrchestrator.try_providers(system, user)
       -> parse_structured(reply) -> validate against a pydantic schema
  2. any miss (no provider, timeout, parse failure, wrong shape, exception)
       -> matching builtin function in generation.fallback

So every call returns success=True with provider set to the backend id or
"builtin". The one exception is caller-input errors (a title under 5
characters), reported as success=False before any provider is contacted.

Usage:
    facade = GenerationFacade.from_config(PipelineConfig.from_env())
    result = await facade.generate_paragraphs("Machine Learning in Agriculture", "science")
    print(result.provider, [p.text for p in result.paragraphs])
"""

import logging
import random
from typing import Any, Type, TypeVar

from pydantic import BaseModel

from ..config import PipelineConfig
from ..llm import ParseError, ProviderOrchestrator, build_providers, parse_structured
from ..security import ValidationError, build_user_prompt, validate_length
from . import fallback, prompts
from .results import (
    ChatResult,
    ExcerptResult,
    GrammarIssue,
    GrammarResult,
    ImprovementResult,
    KeywordsResult,
    Paragraph,
    ParagraphsResult,
    SpamResult,
    SuggestionsResult,
    TopicsResult,
)
from .schemas import (
    ExcerptPayload,
    GrammarPayload,
    ImprovePayload,
    KeywordsPayload,
    ParagraphsPayload,
    SchemaValidationError,
    SpamPayload,
    TopicsPayload,
)

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)

MIN_TITLE_LENGTH = 5
DEFAULT_PARAGRAPH_TYPES = ["introduction", "body", "conclusion"]


class GenerationFacade:
    """
    Provider-first, builtin-fallback content generation.

    Args:
        orchestrator: Tries the configured backends. Built from config when omitted.
        config: Pipeline settings (prompt size cap, timeouts).
        rng: Random source for template selection. Seed it for reproducible output.
    """

    def __init__(
        self,
        orchestrator: ProviderOrchestrator | None = None,
        config: PipelineConfig | None = None,
        rng: random.Random | None = None,
    ):
        if orchestrator is None:
            config = config or PipelineConfig.from_env()
            orchestrator = ProviderOrchestrator(build_providers(config), config=config)
        self._orchestrator = orchestrator
        self._config = config or orchestrator.config
        self._rng = rng or random.Random()

    @classmethod
    def from_config(cls, config: PipelineConfig, rng: random.Random | None = None) -> "GenerationFacade":
        return cls(ProviderOrchestrator(build_providers(config), config=config), config, rng)

    @property
    def orchestrator(self) -> ProviderOrchestrator:
        return self._orchestrator

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _user_prompt(self, **fields: str | None) -> str:
        return build_user_prompt(
            {name.capitalize(): value for name, value in fields.items()},
            max_length=self._config.max_prompt_chars,
        )

    async def _ask(self, operation: str, system_prompt: str, user_prompt: str) -> tuple[str, str] | None:
        """Raw reply and provider id, or None on any miss."""
        try:
            result = await self._orchestrator.try_providers(system_prompt, user_prompt)
        except Exception as e:
            logger.warning(f"[Facade] {operation}: orchestrator error, using builtin: {e}")
            return None
        if not result.success or not result.payload:
            logger.debug(f"[Facade] {operation}: no provider answered, using builtin")
            return None
        return result.payload, result.provider_id

    async def _structured(
        self, operation: str, system_prompt: str, user_prompt: str, schema: Type[P]
    ) -> tuple[P, str] | None:
        """Ask, parse and validate. Returns (payload, provider_id) or None on any miss."""
        reply = await self._ask(operation, system_prompt, user_prompt)
        if reply is None:
            return None
        raw, provider_id = reply

        parsed = parse_structured(raw)
        if isinstance(parsed, ParseError):
            logger.info(
                f"[Facade] {operation}: unparseable reply from {provider_id} "
                f"({parsed.reason}), using builtin"
            )
            return None
        try:
            payload = schema.model_validate(parsed)
        except SchemaValidationError as e:
            logger.info(
                f"[Facade] {operation}: reply from {provider_id} has the wrong shape "
                f"({e.error_count()} errors), using builtin"
            )
            return None
        return payload, provider_id

    # =========================================================================
    # PUBLIC OPERATIONS
    # =========================================================================

    async def generate_paragraphs(self, title: str, category: str = "general") -> ParagraphsResult:
        """Three paragraph suggestions (introduction, body, conclusion) for a title."""
        try:
            validate_length((title or "").strip(), "Title", min_length=MIN_TITLE_LENGTH)
        except ValidationError as e:
            return ParagraphsResult(paragraphs=[], provider="none", success=False, message=str(e))

        answer = await self._structured(
            "paragraphs",
            prompts.PARAGRAPHS,
            self._user_prompt(title=title, category=category),
            ParagraphsPayload,
        )
        if answer:
            payload, provider_id = answer
            paragraphs = [
                Paragraph(
                    id=item.id or f"p{index + 1}",
                    text=item.text,
                    type=item.type or DEFAULT_PARAGRAPH_TYPES[index],
                )
                for index, item in enumerate(payload.paragraphs[:3])
            ]
            return ParagraphsResult(paragraphs=paragraphs, provider=provider_id)

        return fallback.generate_paragraphs(title, category, rng=self._rng)

    async def generate_keywords(
        self, title: str, content: str = "", category: str = "general"
    ) -> KeywordsResult:
        answer = await self._structured(
            "keywords",
            prompts.KEYWORDS,
            self._user_prompt(title=title, category=category, content=(content or "")[:1000]),
            KeywordsPayload,
        )
        if answer:
            payload, provider_id = answer
            return KeywordsResult(
                keywords=payload.keywords,
                tags=payload.tags,
                seo_title=payload.seoTitle or (title or ""),
                meta_description=payload.metaDescription,
                provider=provider_id,
            )
        return fallback.generate_keywords(title, content, category)

    async def check_grammar(self, content: str) -> GrammarResult:
        answer = await self._structured(
            "grammar", prompts.GRAMMAR, self._user_prompt(content=content), GrammarPayload
        )
        if answer:
            payload, provider_id = answer
            errors = [
                GrammarIssue(text=e.text, error=e.error, suggestion=e.suggestion)
                for e in payload.errors
            ]
            summary = payload.summary or (
                f"Found {len(errors)} potential issues." if errors
                else "No obvious grammar issues found."
            )
            return GrammarResult(errors=errors, summary=summary, provider=provider_id)
        return fallback.check_grammar(content)

    async def improve_content(self, content: str) -> ImprovementResult:
        answer = await self._structured(
            "improve", prompts.IMPROVE, self._user_prompt(content=content), ImprovePayload
        )
        if answer:
            payload, provider_id = answer
            return ImprovementResult(
                improved_content=payload.improvedContent,
                changes_made=payload.changesMade,
                provider=provider_id,
            )
        return fallback.improve_content(content)

    async def generate_topic_ideas(self, category: str = "general") -> TopicsResult:
        answer = await self._structured(
            "topics", prompts.TOPICS, self._user_prompt(category=category), TopicsPayload
        )
        if answer:
            payload, provider_id = answer
            topics = [t for t in payload.topics if t]
            if topics:
                return TopicsResult(topics=topics, provider=provider_id)
        return fallback.generate_topics(category)

    async def chat_with_assistant(self, message: str, context: str = "") -> ChatResult:
        """Free-text reply. The backend answers in prose, so only emptiness is a miss."""
        reply = await self._ask(
            "chat", prompts.CHAT, self._user_prompt(context=context, message=message)
        )
        if reply:
            raw, provider_id = reply
            if raw.strip():
                return ChatResult(reply=raw.strip(), provider=provider_id)
        return fallback.chat_reply(message, context, rng=self._rng)

    async def detect_spam(self, content: str) -> SpamResult:
        answer = await self._structured(
            "spam", prompts.SPAM, self._user_prompt(content=content), SpamPayload
        )
        if answer:
            payload, provider_id = answer
            return SpamResult(
                is_spam=payload.isSpam,
                confidence=payload.confidence,
                indicators=payload.indicators,
                provider=provider_id,
            )
        return fallback.detect_spam(content)

    async def generate_excerpt(self, content: str, max_length: int = 200) -> ExcerptResult:
        """Short excerpt within max_length. Over-long backend excerpts are a miss."""
        answer = await self._structured(
            "excerpt",
            prompts.EXCERPT.format(max_length=max_length),
            self._user_prompt(content=fallback.plain_text(content)),
            ExcerptPayload,
        )
        if answer:
            payload, provider_id = answer
            if len(payload.excerpt) <= max_length:
                return ExcerptResult(excerpt=payload.excerpt, provider=provider_id)
            logger.info(
                f"[Facade] excerpt: {provider_id} returned {len(payload.excerpt)} chars "
                f"(limit {max_length}), using builtin"
            )
        return fallback.generate_excerpt(content, max_length)

    async def get_content_suggestions(self, content: str) -> SuggestionsResult:
        """Draft feedback. Always answered by the builtin heuristics."""
        return fallback.content_suggestions(content)

    def status(self) -> dict[str, Any]:
        return self._orchestrator.status()
