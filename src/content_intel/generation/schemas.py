"""
Pydantic shapes for parsed backend replies.

Backends are asked for JSON in a given shape and are not trusted to send
it. A parsed object is only used once it validates against the matching
model here; a pydantic ValidationError is a miss, and the facade answers
from the builtin generator instead.

Field names follow the camelCase the backends are prompted with.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError as SchemaValidationError


class _Payload(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")


# =============================================================================
# GENERATION PAYLOADS
# =============================================================================


class ParagraphItem(_Payload):
    id: str = ""
    text: str = Field(..., min_length=1)
    type: str = ""


class ParagraphsPayload(_Payload):
    """At least two usable paragraphs, or the reply is a miss."""

    paragraphs: list[ParagraphItem] = Field(..., min_length=2)


class KeywordsPayload(_Payload):
    keywords: list[str] = Field(..., min_length=1)
    tags: list[str] = Field(default_factory=list)
    seoTitle: str = ""
    metaDescription: str = ""


class GrammarItem(_Payload):
    text: str = ""
    error: str = Field(..., min_length=1)
    suggestion: str = ""


class GrammarPayload(_Payload):
    errors: list[GrammarItem]
    summary: str = ""


class ImprovePayload(_Payload):
    improvedContent: str = Field(..., min_length=1)
    changesMade: int = Field(0, ge=0)


class TopicsPayload(_Payload):
    topics: list[str] = Field(..., min_length=1)


class SpamPayload(_Payload):
    isSpam: bool
    confidence: int = Field(50, ge=0, le=100)
    indicators: list[str] = Field(default_factory=list)


class ExcerptPayload(_Payload):
    excerpt: str = Field(..., min_length=1)


# =============================================================================
# MODERATION PAYLOAD
# =============================================================================


class ModerationPayload(_Payload):
    """Verdict from a backend asked to review a post.

    severity stays a free string here; the aggregator coerces it, since
    backends capitalise and misspell it.
    """

    isAppropriate: bool = True
    flags: list[str] = Field(default_factory=list)
    severity: str = "none"
    recommendation: str | None = None
    confidence: float | None = Field(None, ge=0, le=100)


__all__ = [
    "ExcerptPayload",
    "GrammarItem",
    "GrammarPayload",
    "ImprovePayload",
    "KeywordsPayload",
    "ModerationPayload",
    "ParagraphItem",
    "ParagraphsPayload",
    "SchemaValidationError",
    "SpamPayload",
    "TopicsPayload",
]
