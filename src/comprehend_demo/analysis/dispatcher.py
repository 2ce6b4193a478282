"""Runs every analysis operation over every text and prints the results.

The dispatcher owns the failure-isolation contract: an error from one
operation becomes a `Failure` outcome for that operation only, and the
remaining operations for the same text (and all later texts) still run.
Output order is always the order of `OPERATIONS`, including when the calls
for a text are issued concurrently.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
import logging
import sys
from typing import TYPE_CHECKING, Any, TextIO

from botocore.exceptions import BotoCoreError, ClientError

from comprehend_demo.config import FrozenConfig
from comprehend_demo.core.models import DominantLanguageResponse
from comprehend_demo.core.types import Failure, OperationOutcome, Success, TextReport
from comprehend_demo.exceptions import AnalysisError, ComprehendDemoError
from comprehend_demo.telemetry import TelemetryContext

from . import formatting
from .operations import OPERATIONS, AnalysisOperation, OperationKind

if TYPE_CHECKING:
    from comprehend_demo.adapters import ComprehendAdapter
    from comprehend_demo.telemetry import TelemetryContextProtocol

log = logging.getLogger(__name__)

# Errors that are reported inline and do not stop the run
PER_CALL_ERRORS: tuple[type[Exception], ...] = (
    ClientError,
    BotoCoreError,
    ComprehendDemoError,
)


class AnalysisDispatcher:
    """Applies the analysis operations to a corpus through one adapter.

    Args:
        adapter: The service handle; shared read-only by every call.
        config: Frozen settings. Defaults to `FrozenConfig()`.
        operations: Operations to run, in presentation order.
        telemetry: Optional telemetry context; a no-op by default.
        out: Stream for console output; ``sys.stdout`` when omitted.
    """

    def __init__(
        self,
        adapter: ComprehendAdapter,
        config: FrozenConfig | None = None,
        *,
        operations: Sequence[AnalysisOperation] = OPERATIONS,
        telemetry: TelemetryContextProtocol | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.adapter = adapter
        self.config = config or FrozenConfig()
        self.operations = tuple(operations)
        if not self.operations:
            raise ValueError("At least one analysis operation is required.")
        self._tele = telemetry or TelemetryContext()
        self._out = out

    # --- Single operation ---

    def _execute(
        self, op: AnalysisOperation, text: str, language_code: str
    ) -> tuple[OperationOutcome, Any]:
        heading = op.heading(self.config)
        try:
            with self._tele(f"analysis.{op.kind.value}"):
                response = op.invoke(
                    self.adapter, text, language_code if op.uses_language else None
                )
        except PER_CALL_ERRORS as e:
            self._tele.count("analysis.error", operation=op.kind.value)
            log.info("%s failed: %s", op.kind.value, e, exc_info=True)
            error = AnalysisError(op.kind.value, e)
            return OperationOutcome(op.kind, heading, Failure(error)), None

        lines = tuple(op.render(text, response, self.config))
        return OperationOutcome(op.kind, heading, Success(lines)), response

    def _next_language(self, op: AnalysisOperation, response: Any, current: str) -> str:
        """Language code for the operations after ``op``."""
        if not self.config.follow_detected_language or op.kind is not OperationKind.LANGUAGE:
            return current
        if isinstance(response, DominantLanguageResponse) and (top := response.top()):
            log.debug("Following detected language %s", top.language_code)
            return top.language_code
        return self.config.language_code

    # --- One text ---

    def analyze(self, text: str, *, index: int = 1) -> TextReport:
        """Run every operation on ``text`` sequentially."""
        language_code = self.config.language_code
        outcomes: list[OperationOutcome] = []
        for op in self.operations:
            outcome, response = self._execute(op, text, language_code)
            outcomes.append(outcome)
            language_code = self._next_language(op, response, language_code)
        return TextReport(index=index, text=text, outcomes=tuple(outcomes))

    async def analyze_async(self, text: str, *, index: int = 1) -> TextReport:
        """Run the operations on ``text`` concurrently on worker threads.

        When the detected language is followed, language detection finishes
        first and the remaining calls use its answer.
        """
        language_code = self.config.language_code
        slots: list[OperationOutcome | None] = [None] * len(self.operations)
        pending = list(enumerate(self.operations))

        if self.config.follow_detected_language:
            for i, op in pending:
                if op.kind is OperationKind.LANGUAGE:
                    outcome, response = await asyncio.to_thread(
                        self._execute, op, text, language_code
                    )
                    slots[i] = outcome
                    language_code = self._next_language(op, response, language_code)
            pending = [(i, op) for i, op in pending if slots[i] is None]

        results = await asyncio.gather(
            *(
                asyncio.to_thread(self._execute, op, text, language_code)
                for _, op in pending
            )
        )
        for (i, _), (outcome, _response) in zip(pending, results, strict=True):
            slots[i] = outcome

        outcomes = tuple(o for o in slots if o is not None)
        return TextReport(index=index, text=text, outcomes=outcomes)

    # --- Corpus ---

    def run(self, corpus: Iterable[str]) -> list[TextReport]:
        """Analyze and print every text in ``corpus``.

        Returns:
            The reports, in corpus order.
        """
        self._emit(formatting.BANNER, formatting.BANNER_RULE, "")
        if self.config.concurrent:
            return asyncio.run(self._run_async(corpus))

        reports = []
        for index, text in enumerate(corpus, 1):
            report = self.analyze(text, index=index)
            self.write_report(report)
            reports.append(report)
        return reports

    async def _run_async(self, corpus: Iterable[str]) -> list[TextReport]:
        reports = []
        for index, text in enumerate(corpus, 1):
            report = await self.analyze_async(text, index=index)
            self.write_report(report)
            reports.append(report)
        return reports

    def write_report(self, report: TextReport) -> None:
        """Print one text's block followed by the separator."""
        self._emit(f"📝 Sample Text {report.index}:", report.text, "")
        for outcome in report.outcomes:
            self._emit(*outcome.lines())
        self._emit(formatting.SEPARATOR, "")

    def _emit(self, *lines: str) -> None:
        out = self._out or sys.stdout
        for line in lines:
            print(line, file=out)
