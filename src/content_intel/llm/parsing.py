"""
Permissive extraction of a JSON object from a backend reply.

Backends are told to "respond with ONLY JSON" and regularly don't: they
add a sentence of preamble, wrap the object in a ``` fence, or trail off
with commentary. Strategies, in order:

1. Parse the whole reply
2. Parse the interior of each fenced code block
3. Parse the first top-level {...} span found by brace matching
   (later spans are tried if the first one is broken)

The parser never raises. It returns a dict or a ParseError value that the
caller treats as a miss.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterator

logger = logging.getLogger(__name__)

FENCE_PATTERN = re.compile(r"```[ \t]*(?:json|JSON)?[ \t]*\n?(.*?)```", re.DOTALL)
PREVIEW_CHARS = 120


@dataclass(frozen=True)
class ParseError:
    """Returned (not raised) when no strategy produced a JSON object."""

    reason: str
    preview: str = ""

    def __bool__(self) -> bool:
        return False


def parse_structured(raw_text: str | None) -> dict[str, Any] | ParseError:
    """Extract the first JSON object from raw backend output.

    Usage:
        parsed = parse_structured(reply)
        if isinstance(parsed, ParseError):
            return fallback()
    """
    if not raw_text or not raw_text.strip():
        return ParseError("empty reply")

    text = raw_text.strip()

    parsed = _loads_object(text)
    if parsed is not None:
        return parsed

    for block in FENCE_PATTERN.findall(text):
        parsed = _loads_object(block.strip())
        if parsed is not None:
            logger.debug("[Parser] Recovered JSON from fenced block")
            return parsed

    for span in _top_level_object_spans(text):
        parsed = _loads_object(span)
        if parsed is not None:
            logger.debug("[Parser] Recovered JSON from embedded object")
            return parsed

    preview = text[:PREVIEW_CHARS]
    logger.debug(f"[Parser] No JSON object found in reply ({len(text)} chars)")
    return ParseError("no JSON object found", preview=preview)


def _loads_object(candidate: str) -> dict[str, Any] | None:
    """json.loads that only accepts objects and never raises."""
    if not candidate:
        return None
    try:
        value = json.loads(candidate)
    except (json.JSONDecodeError, ValueError, RecursionError):
        return None
    return value if isinstance(value, dict) else None


def _top_level_object_spans(text: str) -> Iterator[str]:
    """Yield each balanced top-level {...} span, string- and escape-aware."""
    depth = 0
    start = -1
    in_string = False
    escaped = False

    for index, char in enumerate(text):
        if depth > 0 and in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue

        if char == '"' and depth > 0:
            in_string = True
        elif char == "{":
            if depth == 0:
                start = index
            depth += 1
        elif char == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                yield text[start:index + 1]
