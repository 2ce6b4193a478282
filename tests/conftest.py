"""
Global test configuration: environment isolation and test doubles.
"""

from collections.abc import Callable
import logging
import os
from typing import Any

from botocore.exceptions import ClientError
import pytest

from comprehend_demo.core.models import (
    DominantLanguageResponse,
    EntitiesResponse,
    KeyPhrasesResponse,
    PiiEntitiesResponse,
    SentimentResponse,
    SyntaxResponse,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Tests wiring several components")


# --- Environment Isolation (Autouse) ---


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch, tmp_path):
    """Ensure a clean COMPREHEND_*/AWS_* environment for each test.

    - Removes all COMPREHEND_* and AWS_* variables
    - Points the AWS shared files and the home config at empty temp paths
    - Disables the instance metadata lookup so credential resolution stays local
    - Runs each test from an empty directory so no pyproject.toml is found
    """
    for key in list(os.environ):
        if key.startswith(("COMPREHEND_", "AWS_")):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("DEBUG", raising=False)

    isolated = tmp_path / "isolated"
    isolated.mkdir()
    monkeypatch.setenv("AWS_CONFIG_FILE", str(isolated / "aws_config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(isolated / "aws_credentials"))
    monkeypatch.setenv("AWS_EC2_METADATA_DISABLED", "true")
    monkeypatch.setenv("COMPREHEND_DEMO_CONFIG_HOME", str(isolated / "home.toml"))

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture(autouse=True)
def restore_root_log_level():
    """The CLI sets the root logger level; put it back after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.fixture
def aws_env(monkeypatch):
    """Static credentials and a region, as the AWS chain would find them."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIAEXAMPLEEXAMPLE00")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "example-secret-key")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")


# --- Test doubles ---


def client_error(code: str, operation: str, message: str = "boom") -> ClientError:
    """Build the ClientError botocore raises for a service error code."""
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


DEFAULT_RESPONSES: dict[str, dict[str, Any]] = {
    "detect_dominant_language": {"Languages": [{"LanguageCode": "en", "Score": 0.99}]},
    "detect_sentiment": {
        "Sentiment": "POSITIVE",
        "SentimentScore": {
            "Positive": 0.9,
            "Negative": 0.02,
            "Neutral": 0.05,
            "Mixed": 0.03,
        },
    },
    "detect_entities": {
        "Entities": [
            {
                "Type": "PERSON",
                "Text": "John Smith",
                "Score": 0.99,
                "BeginOffset": 0,
                "EndOffset": 10,
            }
        ]
    },
    "detect_key_phrases": {
        "KeyPhrases": [
            {"Text": "this new product", "Score": 0.98, "BeginOffset": 7, "EndOffset": 23}
        ]
    },
    "detect_pii_entities": {"Entities": []},
    "detect_syntax": {
        "SyntaxTokens": [
            {"TokenId": 1, "Text": "I", "PartOfSpeech": {"Tag": "PRON", "Score": 0.99}}
        ]
    },
}

_MODELS = {
    "detect_dominant_language": DominantLanguageResponse,
    "detect_sentiment": SentimentResponse,
    "detect_entities": EntitiesResponse,
    "detect_key_phrases": KeyPhrasesResponse,
    "detect_pii_entities": PiiEntitiesResponse,
    "detect_syntax": SyntaxResponse,
}


class RecordingAdapter:
    """Adapter double that records calls and replays canned responses.

    ``responses`` maps a method name to a raw service dict (parsed with the
    matching model) or to an exception instance to raise.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses = {**DEFAULT_RESPONSES, **(responses or {})}
        self.calls: list[tuple[str, str, str | None]] = []

    def _reply(self, method: str, text: str, language_code: str | None) -> Any:
        self.calls.append((method, text, language_code))
        reply = self.responses[method]
        if isinstance(reply, Exception):
            raise reply
        return _MODELS[method].from_response(reply)

    @property
    def methods(self) -> list[str]:
        return [c[0] for c in self.calls]

    def detect_dominant_language(self, text):
        return self._reply("detect_dominant_language", text, None)

    def detect_sentiment(self, text, language_code):
        return self._reply("detect_sentiment", text, language_code)

    def detect_entities(self, text, language_code):
        return self._reply("detect_entities", text, language_code)

    def detect_key_phrases(self, text, language_code):
        return self._reply("detect_key_phrases", text, language_code)

    def detect_pii_entities(self, text, language_code):
        return self._reply("detect_pii_entities", text, language_code)

    def detect_syntax(self, text, language_code):
        return self._reply("detect_syntax", text, language_code)


@pytest.fixture
def make_adapter() -> Callable[..., RecordingAdapter]:
    """Factory for `RecordingAdapter` with per-method overrides."""

    def _make(**responses: Any) -> RecordingAdapter:
        return RecordingAdapter(responses)

    return _make


@pytest.fixture
def throttling_error() -> ClientError:
    return client_error("ThrottlingException", "DetectKeyPhrases", "Rate exceeded")


@pytest.fixture
def make_client_error() -> Callable[..., ClientError]:
    return client_error
