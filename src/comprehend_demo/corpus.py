"""Sample texts and corpus loading."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

SAMPLE_TEXTS: tuple[str, ...] = (
    "I love this new product! It's absolutely amazing and works perfectly. "
    "John Smith from New York called me at 555-123-4567.",
    "This service is terrible. I'm very disappointed and frustrated with the "
    "poor quality.",
    "The weather today is nice. My email is john.doe@example.com and my SSN is "
    "123-45-6789.",
)


def read_text_file(path: str | Path) -> list[str]:
    """Read one text per non-blank line of a UTF-8 file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    with Path(path).open(encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def load_corpus(
    texts: Iterable[str] | None = None, files: Iterable[str | Path] = ()
) -> tuple[str, ...]:
    """Collect the texts to analyze.

    Explicit ``texts`` come first, then the lines of each file in order.
    Falls back to `SAMPLE_TEXTS` only when no texts and no files were given.

    Raises:
        ValueError: If texts or files were given but none holds a non-blank
            text.
    """
    texts = list(texts or ())
    files = list(files)
    if not texts and not files:
        return SAMPLE_TEXTS

    corpus = [t for t in texts if t.strip()]
    for path in files:
        corpus.extend(read_text_file(path))
    if not corpus:
        raise ValueError("The supplied texts and files contain no non-blank text")
    return tuple(corpus)
