"""boto3-backed Comprehend adapter."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from comprehend_demo.core.models import (
    DominantLanguageResponse,
    EntitiesResponse,
    KeyPhrasesResponse,
    PiiEntitiesResponse,
    SentimentResponse,
    SyntaxResponse,
)

if TYPE_CHECKING:
    from botocore.client import BaseClient

log = logging.getLogger(__name__)


class BotoComprehendAdapter:
    """Issues requests through a boto3 ``comprehend`` client.

    The client is created once and shared; botocore clients are safe to use
    from several threads. Errors from botocore (``ClientError``,
    ``BotoCoreError``) propagate to the caller unchanged.
    """

    def __init__(self, client: BaseClient) -> None:
        self._client = client

    @property
    def region(self) -> str:
        return self._client.meta.region_name

    def _call(self, operation: str, **params: Any) -> dict[str, Any]:
        log.debug(
            "Calling comprehend.%s (%d chars, language=%s)",
            operation,
            len(params.get("Text", "")),
            params.get("LanguageCode", "-"),
        )
        return getattr(self._client, operation)(**params)

    def detect_dominant_language(self, text: str) -> DominantLanguageResponse:
        raw = self._call("detect_dominant_language", Text=text)
        return DominantLanguageResponse.from_response(raw)

    def detect_sentiment(self, text: str, language_code: str) -> SentimentResponse:
        raw = self._call("detect_sentiment", Text=text, LanguageCode=language_code)
        return SentimentResponse.from_response(raw)

    def detect_entities(self, text: str, language_code: str) -> EntitiesResponse:
        raw = self._call("detect_entities", Text=text, LanguageCode=language_code)
        return EntitiesResponse.from_response(raw)

    def detect_key_phrases(self, text: str, language_code: str) -> KeyPhrasesResponse:
        raw = self._call("detect_key_phrases", Text=text, LanguageCode=language_code)
        return KeyPhrasesResponse.from_response(raw)

    def detect_pii_entities(self, text: str, language_code: str) -> PiiEntitiesResponse:
        raw = self._call("detect_pii_entities", Text=text, LanguageCode=language_code)
        return PiiEntitiesResponse.from_response(raw)

    def detect_syntax(self, text: str, language_code: str) -> SyntaxResponse:
        raw = self._call("detect_syntax", Text=text, LanguageCode=language_code)
        return SyntaxResponse.from_response(raw)
