"""Provider-neutral interface to the Comprehend service."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from comprehend_demo.core.models import (
    DominantLanguageResponse,
    EntitiesResponse,
    KeyPhrasesResponse,
    PiiEntitiesResponse,
    SentimentResponse,
    SyntaxResponse,
)


@runtime_checkable
class ComprehendAdapter(Protocol):
    """The six operations the dispatcher needs from the service.

    Implementations raise on failure (transport, auth, throttling or
    validation errors); they never return partial results.
    """

    def detect_dominant_language(self, text: str) -> DominantLanguageResponse: ...  # noqa: D102

    def detect_sentiment(self, text: str, language_code: str) -> SentimentResponse: ...  # noqa: D102

    def detect_entities(self, text: str, language_code: str) -> EntitiesResponse: ...  # noqa: D102

    def detect_key_phrases(self, text: str, language_code: str) -> KeyPhrasesResponse: ...  # noqa: D102

    def detect_pii_entities(  # noqa: D102
        self, text: str, language_code: str
    ) -> PiiEntitiesResponse: ...

    def detect_syntax(self, text: str, language_code: str) -> SyntaxResponse: ...  # noqa: D102
