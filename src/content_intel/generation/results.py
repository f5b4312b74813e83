"""Result types returned by the generation facade.

Every result carries `provider`: a backend id when a provider answered,
"builtin" when the fallback generator did. to_dict() gives the camelCase
shape callers serialize.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

BUILTIN = "builtin"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Paragraph:
    id: str
    text: str
    type: str

    def to_dict(self) -> dict:
        return {"id": self.id, "text": self.text, "type": self.type}


@dataclass
class ParagraphsResult:
    """Paragraph suggestions for a post title.

    success is False only for caller-input errors; message says why.
    """

    paragraphs: list[Paragraph] = field(default_factory=list)
    provider: str = BUILTIN
    success: bool = True
    message: str | None = None
    generated_at: datetime = field(default_factory=_now)

    def to_dict(self) -> dict:
        data = {
            "success": self.success,
            "paragraphs": [p.to_dict() for p in self.paragraphs],
            "provider": self.provider,
            "generatedAt": self.generated_at.isoformat(),
        }
        if self.message:
            data["message"] = self.message
        return data


@dataclass
class KeywordsResult:
    keywords: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    seo_title: str = ""
    meta_description: str = ""
    provider: str = BUILTIN
    success: bool = True

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "keywords": list(self.keywords),
            "tags": list(self.tags),
            "seoTitle": self.seo_title,
            "metaDescription": self.meta_description,
            "provider": self.provider,
        }


@dataclass
class GrammarIssue:
    text: str
    error: str
    suggestion: str

    def to_dict(self) -> dict:
        return {"text": self.text, "error": self.error, "suggestion": self.suggestion}


@dataclass
class GrammarResult:
    errors: list[GrammarIssue] = field(default_factory=list)
    summary: str = ""
    provider: str = BUILTIN
    success: bool = True

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "errors": [e.to_dict() for e in self.errors],
            "summary": self.summary,
            "provider": self.provider,
        }


@dataclass
class ImprovementResult:
    improved_content: str = ""
    changes_made: int = 0
    provider: str = BUILTIN
    success: bool = True

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "improvedContent": self.improved_content,
            "changesMade": self.changes_made,
            "provider": self.provider,
        }


@dataclass
class TopicsResult:
    topics: list[str] = field(default_factory=list)
    provider: str = BUILTIN
    success: bool = True

    def to_dict(self) -> dict:
        return {"success": self.success, "topics": list(self.topics), "provider": self.provider}


@dataclass
class ChatResult:
    reply: str = ""
    provider: str = BUILTIN
    success: bool = True

    def to_dict(self) -> dict:
        return {"success": self.success, "reply": self.reply, "provider": self.provider}


@dataclass
class SpamResult:
    is_spam: bool = False
    confidence: int = 0  # 0-100
    indicators: list[str] = field(default_factory=list)
    provider: str = BUILTIN
    success: bool = True

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "isSpam": self.is_spam,
            "confidence": self.confidence,
            "indicators": list(self.indicators),
            "provider": self.provider,
        }


@dataclass
class ExcerptResult:
    excerpt: str = ""
    provider: str = BUILTIN
    success: bool = True

    def to_dict(self) -> dict:
        return {"success": self.success, "excerpt": self.excerpt, "provider": self.provider}


@dataclass
class SuggestionsResult:
    overall_score: int = 5
    suggestions: list[str] = field(default_factory=list)
    strengths: list[str] = field(default_factory=list)
    readability_level: str = "easy"
    provider: str = BUILTIN
    success: bool = True

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "overallScore": self.overall_score,
            "suggestions": list(self.suggestions),
            "strengths": list(self.strengths),
            "readabilityLevel": self.readability_level,
            "provider": self.provider,
        }
