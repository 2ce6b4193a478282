"""Core data types produced by the analysis dispatcher.

Every analysis call ends in a `Result`: either a `Success` carrying the
rendered lines or a `Failure` carrying the error. Making failures a value
keeps the dispatcher loop free of control-flow exceptions and lets tests
inspect exactly what happened to each operation.
"""

from __future__ import annotations

import dataclasses
import typing

if typing.TYPE_CHECKING:
    from comprehend_demo.analysis.operations import OperationKind
    from comprehend_demo.exceptions import AnalysisError

# --- Result Monad ---

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Success(typing.Generic[TSuccess]):
    """A successful analysis outcome."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(typing.Generic[TFailure]):
    """A failed analysis outcome, containing the error."""

    error: TFailure


Result = Success[TSuccess] | Failure[TFailure]


# --- Dispatcher output ---


@dataclasses.dataclass(frozen=True, slots=True)
class OperationOutcome:
    """What one operation produced for one text."""

    kind: OperationKind
    title: str
    result: Success[tuple[str, ...]] | Failure[AnalysisError]

    @property
    def ok(self) -> bool:
        return isinstance(self.result, Success)

    def lines(self) -> tuple[str, ...]:
        """Console lines for this block, title first.

        A failed block ends at the error line; a successful one ends with a
        blank line.
        """
        if isinstance(self.result, Failure):
            return (self.title, f"Error: {self.result.error}")
        return (self.title, *self.result.value, "")


@dataclasses.dataclass(frozen=True, slots=True)
class TextReport:
    """All outcomes for a single input text, in presentation order."""

    index: int
    text: str
    outcomes: tuple[OperationOutcome, ...]

    def __post_init__(self) -> None:
        """Validate invariants for type safety."""
        if not isinstance(self.text, str):
            raise TypeError("text: must be str")
        if self.index < 1:
            raise ValueError("index: must be 1-based")

    @property
    def failures(self) -> tuple[OperationOutcome, ...]:
        return tuple(o for o in self.outcomes if not o.ok)

    def outcome(self, kind: OperationKind) -> OperationOutcome:
        """Return the outcome of ``kind``.

        Raises:
            KeyError: If the operation was not part of this report.
        """
        for o in self.outcomes:
            if o.kind is kind:
                return o
        raise KeyError(kind)
