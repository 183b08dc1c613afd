"""
Assemble display paragraphs from a summary or extracted text.

Strategy order:
1. Newline paragraphs, when the text already has enough of them
2. Nothing, when the text holds no sentences
3. One paragraph per sentence, when there are no more sentences than slots
4. Sentences balanced into the requested number of paragraphs
5. Rebalanced sentences, when step 4 under-produced
"""

from __future__ import annotations

from functools import cached_property
from typing import Callable, List, NamedTuple, Optional, Union

from .balance import balance_units, join_chunk
from .boundaries import split_by_newlines, split_by_sentences
from .lengths import SummaryLength, desired_count_for, require_positive_count


class Assembly(NamedTuple):
    """Paragraphs together with the strategy that produced them."""

    paragraphs: List[str]
    strategy: str


class _Segments:
    """Per-call view of the text; each segmentation runs at most once."""

    def __init__(self, text: Optional[str], desired_count: int):
        self.text = text
        self.desired_count = desired_count

    @cached_property
    def lines(self) -> List[str]:
        return split_by_newlines(self.text)

    @cached_property
    def sentences(self) -> List[str]:
        return split_by_sentences(self.text)

    @cached_property
    def balanced(self) -> List[str]:
        chunks = balance_units(self.sentences, self.desired_count)
        return [p for p in (join_chunk(c) for c in chunks) if p]

    def rebalanced(self) -> List[str]:
        chunks = balance_units(self.sentences, max(1, self.desired_count))
        return [p for p in (join_chunk(c) for c in chunks) if p]


class Strategy(NamedTuple):
    name: str
    applies: Callable[[_Segments], bool]
    build: Callable[[_Segments], List[str]]


STRATEGIES: List[Strategy] = [
    Strategy(
        "newline",
        lambda s: len(s.lines) >= s.desired_count,
        lambda s: s.lines,
    ),
    Strategy(
        "empty",
        lambda s: not s.sentences,
        lambda s: [],
    ),
    Strategy(
        "sentence",
        lambda s: len(s.sentences) <= s.desired_count,
        lambda s: s.sentences,
    ),
    Strategy(
        "balanced",
        lambda s: len(s.balanced) >= s.desired_count,
        lambda s: s.balanced,
    ),
    # Unreachable while balance_units is deterministic; kept as the last resort
    Strategy(
        "rebalanced",
        lambda s: True,
        lambda s: s.rebalanced(),
    ),
]


def assemble(text: Optional[str], desired_count: int) -> Assembly:
    """
    Turn text into at most ``desired_count`` paragraphs.

    Args:
        text: Summary or raw extracted text; None is treated as empty
        desired_count: Number of paragraphs wanted (>= 1)

    Returns:
        Assembly with the paragraphs and the name of the winning strategy

    Raises:
        InvalidArgumentError: if desired_count is not a positive integer
    """
    require_positive_count(desired_count)
    segments = _Segments(text, desired_count)

    for strategy in STRATEGIES:
        if strategy.applies(segments):
            paragraphs = list(strategy.build(segments))[:desired_count]
            return Assembly(paragraphs, strategy.name)

    raise AssertionError("last strategy always applies")  # pragma: no cover


def assemble_paragraphs(text: Optional[str], desired_count: int) -> List[str]:
    """Turn text into at most ``desired_count`` non-empty paragraphs."""
    return assemble(text, desired_count).paragraphs


def paragraphs_for_length(
    text: Optional[str], length: Union[SummaryLength, str]
) -> List[str]:
    return assemble_paragraphs(text, desired_count_for(length))
