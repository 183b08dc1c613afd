"""
Summary length selector and the paragraph count each length maps to.
"""

from enum import Enum
from typing import Union

from ..core.errors import InvalidArgumentError


class SummaryLength(str, Enum):
    """Length options offered to the user for a summary."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"

    @property
    def paragraph_count(self) -> int:
        return PARAGRAPH_COUNTS[self]


PARAGRAPH_COUNTS = {
    SummaryLength.SHORT: 1,
    SummaryLength.MEDIUM: 2,
    SummaryLength.LONG: 3,
}


def parse_length(length: Union[SummaryLength, str]) -> SummaryLength:
    """Coerce a selector value ("short", "MEDIUM", ...) to a SummaryLength."""
    if isinstance(length, SummaryLength):
        return length
    try:
        return SummaryLength(str(length).strip().lower())
    except ValueError as e:
        choices = ", ".join(item.value for item in SummaryLength)
        raise InvalidArgumentError(
            f"Unknown summary length {length!r}; expected one of: {choices}"
        ) from e


def desired_count_for(length: Union[SummaryLength, str]) -> int:
    return parse_length(length).paragraph_count


def require_positive_count(desired_count: int) -> int:
    """Fail fast on a paragraph count the assembler cannot honour."""
    if isinstance(desired_count, bool) or not isinstance(desired_count, int):
        raise InvalidArgumentError(
            f"desired_count must be an integer, got {type(desired_count).__name__}"
        )
    if desired_count < 1:
        raise InvalidArgumentError(
            f"desired_count must be >= 1, got {desired_count}"
        )
    return desired_count
