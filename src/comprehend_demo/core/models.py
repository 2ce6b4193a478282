"""Response models for the six Comprehend operations.

The boto3 client returns plain dicts keyed in PascalCase. These models
validate those dicts and expose snake_case attributes; keys the demo does
not use (``ResponseMetadata`` and friends) are ignored.
"""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_pascal

from comprehend_demo.exceptions import MalformedResponseError


class _ServiceModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> Self:
        """Parse a raw service response.

        Raises:
            MalformedResponseError: If the payload does not match the model.
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            first = e.errors()[0]
            loc = ".".join(str(part) for part in first["loc"]) or "<root>"
            raise MalformedResponseError(
                f"Unexpected {cls.__name__} payload: {e.error_count()} validation "
                f"error(s), first at {loc}: {first['msg']}"
            ) from e


# --- Dominant language ---


class DetectedLanguage(_ServiceModel):
    language_code: str
    score: float


class DominantLanguageResponse(_ServiceModel):
    languages: list[DetectedLanguage] = Field(default_factory=list)

    def top(self) -> DetectedLanguage | None:
        """Return the highest-scoring language, if any."""
        if not self.languages:
            return None
        return max(self.languages, key=lambda lang: lang.score)


# --- Sentiment ---


class SentimentScore(_ServiceModel):
    positive: float
    negative: float
    neutral: float
    mixed: float


class SentimentResponse(_ServiceModel):
    sentiment: str
    sentiment_score: SentimentScore


# --- Entities ---


class Entity(_ServiceModel):
    type: str
    text: str
    score: float
    begin_offset: int | None = None
    end_offset: int | None = None


class EntitiesResponse(_ServiceModel):
    entities: list[Entity] = Field(default_factory=list)


# --- Key phrases ---


class KeyPhrase(_ServiceModel):
    text: str
    score: float
    begin_offset: int | None = None
    end_offset: int | None = None


class KeyPhrasesResponse(_ServiceModel):
    key_phrases: list[KeyPhrase] = Field(default_factory=list)


# --- PII ---


class PiiEntity(_ServiceModel):
    """A PII span. The matched text is not returned; slice the input."""

    type: str
    begin_offset: int
    end_offset: int
    score: float


class PiiEntitiesResponse(_ServiceModel):
    entities: list[PiiEntity] = Field(default_factory=list)


# --- Syntax ---


class PartOfSpeech(_ServiceModel):
    tag: str
    score: float | None = None


class SyntaxToken(_ServiceModel):
    text: str
    part_of_speech: PartOfSpeech
    token_id: int | None = None
    begin_offset: int | None = None
    end_offset: int | None = None


class SyntaxResponse(_ServiceModel):
    syntax_tokens: list[SyntaxToken] = Field(default_factory=list)
