"""Data models for content moderation verdicts."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")


class Severity(str, Enum):
    """Ordered risk level. Compare with .priority, merge with max_severity()."""

    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def priority(self) -> int:
        return SEVERITY_PRIORITY[self]

    @classmethod
    def parse(cls, value: Any, default: "Severity | None" = None) -> "Severity":
        """Coerce a backend-supplied label ("High", "critical ") to a Severity."""
        if isinstance(value, Severity):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return default if default is not None else cls.NONE


SEVERITY_PRIORITY: dict[Severity, int] = {
    Severity.NONE: 0,
    Severity.LOW: 1,
    Severity.MEDIUM: 2,
    Severity.HIGH: 3,
    Severity.CRITICAL: 4,
}

SEVERITY_COLORS: dict[Severity, str] = {
    Severity.CRITICAL: "red",
    Severity.HIGH: "orange",
    Severity.MEDIUM: "yellow",
    Severity.LOW: "blue",
    Severity.NONE: "green",
}


def max_severity(*levels: Severity) -> Severity:
    """Most severe of the given levels (NONE when called with nothing)."""
    return max(levels, key=lambda s: s.priority, default=Severity.NONE)


def severity_color(level: Severity | str) -> str:
    """Display color for a severity, for moderation dashboards."""
    return SEVERITY_COLORS[Severity.parse(level)]


def sort_by_severity(items: Iterable[T], key: Callable[[T], Severity | str]) -> list[T]:
    """Order items most-severe first. Stable for equal severities.

    Usage:
        queue = sort_by_severity(posts, key=lambda p: p.report.severity)
    """
    return sorted(items, key=lambda item: -Severity.parse(key(item)).priority)


class ViolationCategory(str, Enum):
    HATE_SPEECH = "hate_speech"
    SPAM = "spam"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    PERSONAL_ATTACKS = "personal_attacks"
    PLAGIARISM = "plagiarism"
    PROFANITY = "profanity"
    HARASSMENT = "harassment"
    VIOLENCE = "violence"
    MISLEADING_INFORMATION = "misleading_information"


class ViolationSource(str, Enum):
    RULE = "rule"
    AI = "ai"


@dataclass(frozen=True)
class Violation:
    """A single rule-breaking finding in a post.

    Attributes:
        category: Why the content was flagged. De-duplication key.
        description: Human-readable explanation.
        excerpt: Up to 3 matched fragments joined by ", " (empty for AI findings).
        location: Which field the finding is in. Always "content" for now.
        occurrence_count: Number of matches (0 when the backend gave no count).
        source: Which analyzer produced this entry.
        severity: Severity this finding implies on its own.
        contributors: Every analyzer that flagged this category.
    """

    category: ViolationCategory
    description: str
    excerpt: str = ""
    location: str = "content"
    occurrence_count: int = 0
    source: ViolationSource = ViolationSource.RULE
    severity: Severity = Severity.NONE
    contributors: tuple[ViolationSource, ...] = ()

    def __post_init__(self):
        if not self.contributors:
            object.__setattr__(self, "contributors", (self.source,))

    def to_dict(self) -> dict:
        return {
            "type": self.category.value,
            "description": self.description,
            "excerpt": self.excerpt,
            "location": self.location,
            "count": self.occurrence_count,
            "source": self.source.value,
            "severity": self.severity.value,
            "contributors": [c.value for c in self.contributors],
        }


@dataclass(frozen=True)
class SourcesUsed:
    """Which analyzers produced a usable result for a report."""

    rule_based: bool = True
    ai: bool = False


@dataclass(frozen=True)
class ViolationReport:
    """The merged verdict for one post. Never mutated after construction."""

    severity: Severity = Severity.NONE
    violations: tuple[Violation, ...] = ()
    analyzed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    sources_used: SourcesUsed = field(default_factory=SourcesUsed)
    ai_provider: str | None = None
    ai_recommendation: str | None = None

    @property
    def has_violations(self) -> bool:
        return len(self.violations) > 0

    @property
    def is_clean(self) -> bool:
        return not self.has_violations

    @property
    def categories(self) -> list[ViolationCategory]:
        return [v.category for v in self.violations]

    def to_dict(self) -> dict:
        """Serialize to the JSON shape callers snapshot into their own storage."""
        return {
            "hasViolations": self.has_violations,
            "isClean": self.is_clean,
            "severity": self.severity.value,
            "violations": [v.to_dict() for v in self.violations],
            "analyzedAt": self.analyzed_at.isoformat(),
            "sourcesUsed": {
                "ruleBased": self.sources_used.rule_based,
                "ai": self.sources_used.ai,
            },
            "aiProvider": self.ai_provider,
            "aiRecommendation": self.ai_recommendation,
        }
