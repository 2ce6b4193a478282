"""Deterministic adapter used for offline runs and examples (no network)."""

from __future__ import annotations

import re

from comprehend_demo.core.models import (
    DetectedLanguage,
    DominantLanguageResponse,
    EntitiesResponse,
    KeyPhrasesResponse,
    PartOfSpeech,
    PiiEntitiesResponse,
    SentimentResponse,
    SentimentScore,
    SyntaxResponse,
    SyntaxToken,
)

_TOKEN_RE = re.compile(r"\S+")


class MockComprehendAdapter:
    """Returns fixed, plausible-looking responses without calling AWS.

    Language is always reported as the configured default, sentiment is
    neutral, no entities, key phrases or PII are found, and syntax splits on
    whitespace with the catch-all ``X`` tag.
    """

    def __init__(self, language_code: str = "en") -> None:
        self._language_code = language_code

    def detect_dominant_language(self, text: str) -> DominantLanguageResponse:  # noqa: ARG002
        return DominantLanguageResponse(
            languages=[DetectedLanguage(language_code=self._language_code, score=1.0)]
        )

    def detect_sentiment(self, text: str, language_code: str) -> SentimentResponse:  # noqa: ARG002
        return SentimentResponse(
            sentiment="NEUTRAL",
            sentiment_score=SentimentScore(
                positive=0.0, negative=0.0, neutral=1.0, mixed=0.0
            ),
        )

    def detect_entities(self, text: str, language_code: str) -> EntitiesResponse:  # noqa: ARG002
        return EntitiesResponse()

    def detect_key_phrases(self, text: str, language_code: str) -> KeyPhrasesResponse:  # noqa: ARG002
        return KeyPhrasesResponse()

    def detect_pii_entities(self, text: str, language_code: str) -> PiiEntitiesResponse:  # noqa: ARG002
        return PiiEntitiesResponse()

    def detect_syntax(self, text: str, language_code: str) -> SyntaxResponse:  # noqa: ARG002
        tokens = [
            SyntaxToken(
                token_id=i,
                text=m.group(),
                begin_offset=m.start(),
                end_offset=m.end(),
                part_of_speech=PartOfSpeech(tag="X", score=1.0),
            )
            for i, m in enumerate(_TOKEN_RE.finditer(text), 1)
        ]
        return SyntaxResponse(syntax_tokens=tokens)
