"""
Generation -- authoring helpers that always return an answer.

GenerationFacade tries the configured backends first and falls back to the
builtin generator (generation.fallback) on any miss.
"""

from .facade import GenerationFacade
from .fallback import extract_topic
from .results import (
    BUILTIN,
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
