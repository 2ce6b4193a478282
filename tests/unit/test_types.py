"""Result types and response models."""

from pydantic import ValidationError
import pytest

from comprehend_demo.analysis import OperationKind
from comprehend_demo.core.models import DominantLanguageResponse, PiiEntitiesResponse
from comprehend_demo.core.types import Failure, OperationOutcome, Success, TextReport
from comprehend_demo.exceptions import AnalysisError, MalformedResponseError


def _outcome(kind=OperationKind.ENTITIES, result=None):
    return OperationOutcome(kind, "🏷️  Entity Detection:", result or Success(("  line",)))


class TestOperationOutcome:
    @pytest.mark.unit
    def test_success_block_ends_with_blank_line(self):
        outcome = _outcome()

        assert outcome.ok
        assert outcome.lines() == ("🏷️  Entity Detection:", "  line", "")

    @pytest.mark.unit
    def test_failure_block_ends_at_error_line(self):
        error = AnalysisError("entities", RuntimeError("denied"))
        outcome = _outcome(result=Failure(error))

        assert not outcome.ok
        assert outcome.lines() == ("🏷️  Entity Detection:", "Error: denied")


class TestTextReport:
    @pytest.mark.unit
    def test_outcome_lookup(self):
        entities = _outcome()
        report = TextReport(index=1, text="t", outcomes=(entities,))

        assert report.outcome(OperationKind.ENTITIES) is entities
        with pytest.raises(KeyError):
            report.outcome(OperationKind.PII)

    @pytest.mark.unit
    def test_failures_filter(self):
        failed = _outcome(
            OperationKind.PII, Failure(AnalysisError("pii", ValueError("x")))
        )
        report = TextReport(index=2, text="t", outcomes=(_outcome(), failed))

        assert report.failures == (failed,)

    @pytest.mark.unit
    def test_index_is_one_based(self):
        with pytest.raises(ValueError, match="1-based"):
            TextReport(index=0, text="t", outcomes=())

    @pytest.mark.unit
    def test_text_must_be_str(self):
        with pytest.raises(TypeError):
            TextReport(index=1, text=b"bytes", outcomes=())  # type: ignore[arg-type]


class TestModels:
    @pytest.mark.unit
    def test_top_language_is_highest_score(self):
        response = DominantLanguageResponse.from_response(
            {
                "Languages": [
                    {"LanguageCode": "en", "Score": 0.2},
                    {"LanguageCode": "fr", "Score": 0.7},
                ]
            }
        )

        assert response.top().language_code == "fr"
        assert DominantLanguageResponse().top() is None

    @pytest.mark.unit
    def test_missing_required_field_is_malformed(self):
        with pytest.raises(MalformedResponseError, match="PiiEntitiesResponse"):
            PiiEntitiesResponse.from_response(
                {"Entities": [{"Type": "EMAIL", "Score": 0.9}]}
            )

    @pytest.mark.unit
    def test_malformed_message_is_a_single_line_summary(self):
        with pytest.raises(MalformedResponseError) as exc:
            PiiEntitiesResponse.from_response(
                {"Entities": [{"Type": "EMAIL", "Score": 0.9}]}
            )

        message = str(exc.value)
        assert "\n" not in message
        assert message.startswith("Unexpected PiiEntitiesResponse payload: 2 validation")
        assert "first at Entities.0.BeginOffset: Field required" in message

    @pytest.mark.unit
    def test_models_are_frozen(self):
        response = DominantLanguageResponse()

        with pytest.raises(ValidationError):
            response.languages = []  # type: ignore[misc]
