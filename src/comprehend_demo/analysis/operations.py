"""The six analysis operations as data.

Each `AnalysisOperation` knows how to call the adapter and how to render the
response; the dispatcher iterates `OPERATIONS` generically instead of
carrying six hand-written call/format blocks.
"""

from __future__ import annotations

from collections.abc import Callable
import dataclasses
from enum import Enum
from typing import TYPE_CHECKING, Any

from . import formatting

if TYPE_CHECKING:
    from comprehend_demo.adapters import ComprehendAdapter
    from comprehend_demo.config import FrozenConfig


class OperationKind(str, Enum):
    """Analysis capabilities, in presentation order."""

    LANGUAGE = "language"
    SENTIMENT = "sentiment"
    ENTITIES = "entities"
    KEY_PHRASES = "key_phrases"
    PII = "pii"
    SYNTAX = "syntax"


Invoke = Callable[["ComprehendAdapter", str, str | None], Any]
Render = Callable[[str, Any, "FrozenConfig"], list[str]]


@dataclasses.dataclass(frozen=True, slots=True)
class AnalysisOperation:
    """One remote capability: how to request it and how to show the result.

    Attributes:
        kind: Which capability this is.
        title: Section heading; ``{preview}`` is filled from the config.
        invoke: ``(adapter, text, language_code) -> response``. Operations
            with ``uses_language=False`` are passed ``None``.
        render: ``(text, response, config) -> lines``.
        uses_language: Whether the request carries a language code.
    """

    kind: OperationKind
    title: str
    invoke: Invoke
    render: Render
    uses_language: bool = True

    def heading(self, config: FrozenConfig) -> str:
        return self.title.format(preview=config.syntax_preview_tokens)


OPERATIONS: tuple[AnalysisOperation, ...] = (
    AnalysisOperation(
        kind=OperationKind.LANGUAGE,
        title="🌍 Language Detection:",
        invoke=lambda adapter, text, _lang: adapter.detect_dominant_language(text),
        render=lambda _text, resp, _cfg: formatting.render_languages(resp),
        uses_language=False,
    ),
    AnalysisOperation(
        kind=OperationKind.SENTIMENT,
        title="😊 Sentiment Analysis:",
        invoke=lambda adapter, text, lang: adapter.detect_sentiment(text, lang),
        render=lambda _text, resp, _cfg: formatting.render_sentiment(resp),
    ),
    AnalysisOperation(
        kind=OperationKind.ENTITIES,
        title="🏷️  Entity Detection:",
        invoke=lambda adapter, text, lang: adapter.detect_entities(text, lang),
        render=lambda _text, resp, _cfg: formatting.render_entities(resp),
    ),
    AnalysisOperation(
        kind=OperationKind.KEY_PHRASES,
        title="🔑 Key Phrases:",
        invoke=lambda adapter, text, lang: adapter.detect_key_phrases(text, lang),
        render=lambda _text, resp, _cfg: formatting.render_key_phrases(resp),
    ),
    AnalysisOperation(
        kind=OperationKind.PII,
        title="🔒 PII Detection:",
        invoke=lambda adapter, text, lang: adapter.detect_pii_entities(text, lang),
        render=lambda text, resp, _cfg: formatting.render_pii(text, resp),
    ),
    AnalysisOperation(
        kind=OperationKind.SYNTAX,
        title="📝 Syntax Analysis (First {preview} tokens):",
        invoke=lambda adapter, text, lang: adapter.detect_syntax(text, lang),
        render=lambda _text, resp, cfg: formatting.render_syntax(
            resp, cfg.syntax_preview_tokens
        ),
    ),
)


def get_operation(kind: OperationKind) -> AnalysisOperation:
    """Look up the registered operation for ``kind``."""
    for op in OPERATIONS:
        if op.kind is kind:
            return op
    raise KeyError(kind)
