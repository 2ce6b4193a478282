"""Console rendering for analysis results.

Each ``render_*`` function turns one response model into the indented lines
shown under its section title. An empty result always yields an explicit
"nothing found" line so no section is ever blank.
"""

from __future__ import annotations

import logging

from comprehend_demo.core.models import (
    DominantLanguageResponse,
    EntitiesResponse,
    KeyPhrasesResponse,
    PiiEntitiesResponse,
    SentimentResponse,
    SyntaxResponse,
)

log = logging.getLogger(__name__)

INDENT = "  "
BANNER = "🔍 AWS Comprehend Demo - Text Analysis"
BANNER_RULE = "=" * 37
SEPARATOR = "-" * 40

NO_LANGUAGES = "No languages detected"
NO_ENTITIES = "No entities found"
NO_KEY_PHRASES = "No key phrases found"
NO_PII = "No PII found"
NO_SYNTAX_TOKENS = "No syntax tokens found"


def format_percent(score: float) -> str:
    """Render a [0, 1] confidence score as a percentage, e.g. ``95.34%``."""
    return f"{score * 100:.2f}%"


def slice_span(text: str, begin: int, end: int) -> str:
    """Return ``text[begin:end]``, or a marker when the span is out of bounds."""
    if 0 <= begin <= end <= len(text):
        return text[begin:end]
    log.warning(
        "Span %d-%d lies outside text of length %d", begin, end, len(text)
    )
    return f"<offsets {begin}-{end} outside text>"


def render_languages(response: DominantLanguageResponse) -> list[str]:
    if not response.languages:
        return [INDENT + NO_LANGUAGES]
    return [
        f"{INDENT}Language: {lang.language_code} "
        f"(Confidence: {format_percent(lang.score)})"
        for lang in response.languages
    ]


def render_sentiment(response: SentimentResponse) -> list[str]:
    s = response.sentiment_score
    return [
        f"{INDENT}Sentiment: {response.sentiment}",
        f"{INDENT}Positive: {format_percent(s.positive)} | "
        f"Negative: {format_percent(s.negative)} | "
        f"Neutral: {format_percent(s.neutral)} | "
        f"Mixed: {format_percent(s.mixed)}",
    ]


def render_entities(response: EntitiesResponse) -> list[str]:
    if not response.entities:
        return [INDENT + NO_ENTITIES]
    return [
        f'{INDENT}{e.type}: "{e.text}" (Confidence: {format_percent(e.score)})'
        for e in response.entities
    ]


def render_key_phrases(response: KeyPhrasesResponse) -> list[str]:
    if not response.key_phrases:
        return [INDENT + NO_KEY_PHRASES]
    return [
        f'{INDENT}"{p.text}" (Confidence: {format_percent(p.score)})'
        for p in response.key_phrases
    ]


def render_pii(text: str, response: PiiEntitiesResponse) -> list[str]:
    """Render PII spans; the matched text is sliced from ``text`` by offset."""
    if not response.entities:
        return [INDENT + NO_PII]
    return [
        f"{INDENT}{e.type}: "
        f'"{slice_span(text, e.begin_offset, e.end_offset)}" '
        f"(Confidence: {format_percent(e.score)})"
        for e in response.entities
    ]


def render_syntax(response: SyntaxResponse, preview: int = 5) -> list[str]:
    """Render at most ``preview`` tokens plus a count of the rest."""
    tokens = response.syntax_tokens
    if not tokens:
        return [INDENT + NO_SYNTAX_TOKENS]
    lines = [
        f'{INDENT}"{t.text}" -> {t.part_of_speech.tag}' for t in tokens[:preview]
    ]
    if len(tokens) > preview:
        lines.append(f"{INDENT}... and {len(tokens) - preview} more tokens")
    return lines
