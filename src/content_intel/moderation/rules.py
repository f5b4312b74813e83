"""
PatternRuleEngine -- scans a post against category-labelled regex rules.

Categories and the severity any match implies:
  - profanity:        low
  - spam:             medium
  - personal_attacks: medium
  - hate_speech:      high
  - violence:         critical

One Violation per matched category, however many patterns hit. Pure and
deterministic: same text in, same violations and severity out. Runs on
every analysis, with or without a backend.
"""

import logging
import re
from dataclasses import dataclass

from .models import Severity, Violation, ViolationCategory, ViolationSource, max_severity

logger = logging.getLogger(__name__)

MAX_EXCERPT_MATCHES = 3

RULE_TABLE: dict[ViolationCategory, dict] = {
    ViolationCategory.PROFANITY: {
        "severity": Severity.LOW,
        "description": "Profanity or vulgar language detected",
        "patterns": [
            r"\b(fuck|shit|damn|ass|bitch|bastard|crap)\b",
            r"(?<!\w)(f\*ck|sh\*t|b\*tch|a\*\*)(?!\w)",
        ],
    },
    ViolationCategory.HATE_SPEECH: {
        "severity": Severity.HIGH,
        "description": "Potential hate speech or discriminatory content",
        "patterns": [
            r"\b(hate|kill|murder|destroy)\s+(all|every)\s+\w+",
            r"\b(racial|ethnic)\s+(slur|insult)",
        ],
    },
    ViolationCategory.SPAM: {
        "severity": Severity.MEDIUM,
        "description": "Spam or promotional content detected",
        "patterns": [
            r"\b(buy now|click here|free money|act now|limited time)\b",
            r"\b(viagra|cialis|casino|lottery|winner)\b",
            r"(?:https?://\S+\s*){5,}",
        ],
    },
    ViolationCategory.PERSONAL_ATTACKS: {
        "severity": Severity.MEDIUM,
        "description": "Personal attacks or insults detected",
        "patterns": [
            r"\b(you are|you're)\s+(stupid|idiot|moron|dumb)\b",
            r"\b(shut up|go away|nobody cares)\b",
        ],
    },
    ViolationCategory.VIOLENCE: {
        "severity": Severity.CRITICAL,
        "description": "Violent or threatening content detected",
        "patterns": [
            r"\b(i will|gonna|going to)\s+(kill|hurt|harm|attack)\b",
            r"\b(bomb|weapon|gun|knife)\s+(threat|attack)\b",
        ],
    },
}

CATEGORY_SEVERITY: dict[ViolationCategory, Severity] = {
    category: rule["severity"] for category, rule in RULE_TABLE.items()
}

_COMPILED: list[tuple[ViolationCategory, list[re.Pattern]]] = [
    (category, [re.compile(p, re.IGNORECASE) for p in rule["patterns"]])
    for category, rule in RULE_TABLE.items()
]


@dataclass(frozen=True)
class RuleResult:
    violations: tuple[Violation, ...] = ()
    severity: Severity = Severity.NONE

    @property
    def categories(self) -> set[ViolationCategory]:
        return {v.category for v in self.violations}


class PatternRuleEngine:
    """Matches post text against the fixed rule table.

    Usage:
        engine = PatternRuleEngine()
        result = engine.detect("You are stupid and I will hurt you", title="")
        # result.severity == Severity.CRITICAL
    """

    def detect(self, content: str | None, title: str | None = "") -> RuleResult:
        """Scan title + content. Returns one violation per matched category."""
        text = f"{title or ''} {content or ''}"
        violations = []

        for category, patterns in _COMPILED:
            matches = [m.group(0) for p in patterns for m in p.finditer(text)]
            if not matches:
                continue
            rule = RULE_TABLE[category]
            violations.append(Violation(
                category=category,
                description=rule["description"],
                excerpt=", ".join(matches[:MAX_EXCERPT_MATCHES]),
                location="content",
                occurrence_count=len(matches),
                source=ViolationSource.RULE,
                severity=rule["severity"],
            ))

        severity = max_severity(*(v.severity for v in violations))

        if violations:
            logger.debug(
                f"[Rules] {len(violations)} categories matched "
                f"({', '.join(v.category.value for v in violations)}): {severity.value}"
            )

        return RuleResult(violations=tuple(violations), severity=severity)
