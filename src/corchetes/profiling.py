"""Corchetes TranslateAccumulator — opt-in profiling for translation.

This module provides accumulated metrics during translation:
- Total elapsed time
- Source length
- Token count

Zero overhead when disabled (get_translate_accumulator() returns None).

Example:
    from corchetes import translate
    from corchetes.profiling import profiled_translate

    with profiled_translate() as metrics:
        html = translate("[b]Hello[/b]")

    print(metrics.summary())
    # {"total_ms": 0.1, "source_length": 12, "token_count": 3, "translate_calls": 1}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class TranslateAccumulator:
    """Accumulated metrics during translation.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources translated.
        token_count: Total number of tokens lexed.
        translate_calls: Number of translate() calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    translate_calls: int = 0

    def record_translate(self, source_length: int, token_count: int) -> None:
        """Record a translate call."""
        self.translate_calls += 1
        self.source_length += source_length
        self.token_count += token_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of translation metrics.

        Returns:
            Dict with total_ms, source_length, token_count, translate_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "translate_calls": self.translate_calls,
        }


_accumulator: ContextVar[TranslateAccumulator | None] = ContextVar(
    "translate_accumulator",
    default=None,
)


def get_translate_accumulator() -> TranslateAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_translate() -> Iterator[TranslateAccumulator]:
    """Context manager for profiled translation.

    Creates a TranslateAccumulator and makes it available via
    get_translate_accumulator() for the duration of the with block.

    Yields:
        TranslateAccumulator populated by translate calls.

    """
    acc = TranslateAccumulator()
    token: Token[TranslateAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
