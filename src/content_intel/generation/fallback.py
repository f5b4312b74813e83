"""
Builtin generator -- the network-free answer for every facade operation.

Each function is pure, synchronous and total: any string in, a well-formed
result with provider="builtin" out. Randomness is limited to template
selection (paragraphs) and the generic chat reply; pass a seeded
random.Random as `rng` to make either reproducible.

Usage:
    from content_intel.generation import fallback

    result = fallback.generate_paragraphs("Machine Learning in Agriculture", "science")
    excerpt = fallback.generate_excerpt(html_body, max_length=200).excerpt
"""

import html
import random
import re
from typing import Any

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
from .templates import (
    CATEGORY_TEMPLATES,
    CHAT_INTENTS,
    COMMON_TYPOS,
    DEFAULT_CATEGORY,
    DEFAULT_CHAT_REPLIES,
    ELLIPSIS,
    GENERIC_KEYWORDS,
    MAX_KEYWORDS,
    MAX_LINKS,
    MAX_TAGS,
    META_DESCRIPTION_TEMPLATE,
    PARAGRAPH_SLOTS,
    PHRASE_SUBSTITUTIONS,
    PROMOTIONAL_PATTERN,
    REPEATED_CHAR_PATTERN,
    SENTENCE_ENDINGS,
    SENTENCE_PATTERN,
    SEO_TITLE_MAX,
    STOP_WORDS,
    TAG_PATTERN,
    TOPIC_IDEAS,
    URL_PATTERN,
    IntentRule,
)

_PUNCTUATION = re.compile(r"[^\w\s]")
_TERMINAL_PUNCTUATION = re.compile(r"[.!?]$")


def _bucket(table: dict[str, Any], category: str | None) -> Any:
    """Look up a per-category entry. Unknown or empty falls back to general."""
    key = (category or "").strip().lower()
    return table.get(key, table[DEFAULT_CATEGORY])


def extract_topic(title: str | None) -> str:
    """
    Reduce a title to its significant words.

    Lowercases, strips punctuation, drops stop words and words of two
    characters or fewer, keeps the first four. Returns the raw title when
    nothing survives. extract_topic(extract_topic(t)) == extract_topic(t).
    """
    title = title or ""
    words = [
        word
        for word in _PUNCTUATION.sub("", title.lower()).split()
        if word not in STOP_WORDS and len(word) > 2
    ]
    return " ".join(words[:4]) or title


# =============================================================================
# PARAGRAPHS / KEYWORDS / TOPICS
# =============================================================================


def generate_paragraphs(
    title: str, category: str | None = DEFAULT_CATEGORY, rng: random.Random | None = None
) -> ParagraphsResult:
    """Introduction, body and conclusion from the category's templates."""
    rng = rng or random.Random()
    topic = extract_topic(title)
    templates = _bucket(CATEGORY_TEMPLATES, category)

    paragraphs = [
        Paragraph(
            id=paragraph_id,
            text=rng.choice(templates[slot]).replace("{topic}", topic),
            type=paragraph_type,
        )
        for paragraph_id, slot, paragraph_type in PARAGRAPH_SLOTS
    ]
    return ParagraphsResult(paragraphs=paragraphs)


def generate_keywords(
    title: str | None, content: str | None = "", category: str | None = DEFAULT_CATEGORY
) -> KeywordsResult:
    """SEO keywords, tags, title and meta description derived from the title."""
    title = title or ""
    category = (category or DEFAULT_CATEGORY).strip() or DEFAULT_CATEGORY
    topic = extract_topic(title)
    words = topic.split()

    candidates = [
        *words,
        category,
        f"{category} {words[0] if words else ''}".strip(),
        *GENERIC_KEYWORDS,
    ]
    keywords: list[str] = []
    for keyword in candidates:
        if keyword and keyword not in keywords:
            keywords.append(keyword)

    seo_title = title
    if len(title) > SEO_TITLE_MAX:
        seo_title = title[:SEO_TITLE_MAX - len(ELLIPSIS)] + ELLIPSIS

    return KeywordsResult(
        keywords=keywords[:MAX_KEYWORDS],
        tags=[w.lower() for w in words[:MAX_TAGS]],
        seo_title=seo_title,
        meta_description=META_DESCRIPTION_TEMPLATE.format(topic=topic),
    )


def generate_topics(category: str | None = DEFAULT_CATEGORY) -> TopicsResult:
    return TopicsResult(topics=list(_bucket(TOPIC_IDEAS, category)))


# =============================================================================
# GRAMMAR / IMPROVE
# =============================================================================


def check_grammar(content: str | None) -> GrammarResult:
    """Missing terminal punctuation plus a fixed typo dictionary."""
    content = content or ""
    errors: list[GrammarIssue] = []

    stripped = content.strip()
    if len(content) > 10 and not _TERMINAL_PUNCTUATION.search(stripped):
        errors.append(GrammarIssue(
            text=content[-5:],
            error="Missing ending punctuation",
            suggestion=stripped + ".",
        ))

    for word in content.split():
        clean = re.sub(r"[^\w]", "", word.lower())
        if clean in COMMON_TYPOS:
            errors.append(GrammarIssue(
                text=word, error="Spelling error", suggestion=COMMON_TYPOS[clean]
            ))

    summary = (
        f"Found {len(errors)} potential issues."
        if errors
        else "No obvious grammar issues found."
    )
    return GrammarResult(errors=errors, summary=summary)


def improve_content(content: str | None) -> ImprovementResult:
    """Apply the phrase-substitution table. changes_made counts substitutions."""
    improved = content or ""
    changes = 0
    for pattern, replacement in PHRASE_SUBSTITUTIONS:
        improved, count = pattern.subn(replacement, improved)
        changes += count
    return ImprovementResult(improved_content=improved, changes_made=changes)


# =============================================================================
# CHAT
# =============================================================================


def chat_reply(
    message: str | None, context: str | None = "", rng: random.Random | None = None
) -> ChatResult:
    """First matching intent's canned reply, else a generic one. Never empty."""
    text = (message or "").lower().strip()
    for _intent, rule, reply in CHAT_INTENTS:
        if _matches(rule, text):
            return ChatResult(reply=reply)
    rng = rng or random.Random()
    return ChatResult(reply=rng.choice(DEFAULT_CHAT_REPLIES))


def match_intent(message: str | None) -> str | None:
    """Name of the intent chat_reply() would answer with (None = generic)."""
    text = (message or "").lower().strip()
    for intent, rule, _reply in CHAT_INTENTS:
        if _matches(rule, text):
            return intent
    return None


def _matches(rule: IntentRule, text: str) -> bool:
    return any(all(p.search(text) for p in alternative) for alternative in rule)


# =============================================================================
# SPAM / EXCERPT / SUGGESTIONS
# =============================================================================


def detect_spam(content: str | None) -> SpamResult:
    """
    Heuristic spam check.

    Indicators: more than 5 links, promotional phrases, one character
    repeated 10+ times in a row. Two or more indicators means spam.
    """
    content = content or ""
    indicators = []
    if len(URL_PATTERN.findall(content)) > MAX_LINKS:
        indicators.append("excessive links")
    if PROMOTIONAL_PATTERN.search(content):
        indicators.append("promotional language")
    if REPEATED_CHAR_PATTERN.search(content):
        indicators.append("repetitive characters")

    confidence = min(100, 60 + 15 * len(indicators)) if indicators else 10
    return SpamResult(
        is_spam=len(indicators) > 1,
        confidence=confidence,
        indicators=indicators,
    )


def plain_text(content: str | None) -> str:
    """Strip markup, decode entities and collapse whitespace."""
    text = TAG_PATTERN.sub(" ", content or "")
    text = html.unescape(text)
    return re.sub(r"\s+", " ", text).strip()


def generate_excerpt(content: str | None, max_length: int = 200) -> ExcerptResult:
    """
    Whole sentences from the start of the text, within max_length.

    Only when the first sentence alone is too long is the text cut
    mid-sentence, ending in "..." and still within max_length.
    """
    max_length = max(0, max_length)
    text = plain_text(content)
    excerpt = ""
    for match in SENTENCE_PATTERN.finditer(text):
        sentence = match.group(0)
        if sentence[-1] not in SENTENCE_ENDINGS or len(excerpt) + len(sentence) > max_length:
            break
        excerpt += sentence
    excerpt = excerpt.strip()

    if not excerpt and text:
        if len(text) <= max_length:
            excerpt = text
        elif max_length <= len(ELLIPSIS):
            excerpt = text[:max_length]
        else:
            excerpt = text[:max_length - len(ELLIPSIS)].rstrip() + ELLIPSIS

    return ExcerptResult(excerpt=excerpt)


def content_suggestions(content: str | None) -> SuggestionsResult:
    """Length, punctuation and paragraphing heuristics for a draft."""
    content = content or ""
    word_count = len(content.split())
    suggestions = []

    if word_count < 100:
        suggestions.append("Consider expanding your content for better engagement")
    if word_count > 2000:
        suggestions.append("Consider breaking this into multiple posts")
    if not _TERMINAL_PUNCTUATION.search(content.strip()):
        suggestions.append("Ensure your content ends with proper punctuation")
    if len(content.split("\n\n")) < 3:
        suggestions.append("Add more paragraph breaks for readability")

    score = 7 + (1 if word_count > 200 else 0) + (2 if not suggestions else 0)

    if word_count < 200:
        readability = "easy"
    elif word_count < 500:
        readability = "moderate"
    else:
        readability = "advanced"

    return SuggestionsResult(
        overall_score=min(10, max(5, score)),
        suggestions=suggestions,
        strengths=["Good content length"] if word_count > 100 else [],
        readability_level=readability,
    )
