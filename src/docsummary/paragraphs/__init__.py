"""
Paragraph assembly for document summaries.

Turns an unstructured summary or extracted text into a fixed number of
display paragraphs:
- Newline segmentation (trusted first when it gives enough paragraphs)
- Sentence segmentation with a looser fallback for uncapitalised text
- Balanced grouping of sentences, leading paragraphs taking the remainder
"""

from .assembler import (
    STRATEGIES,
    Assembly,
    assemble,
    assemble_paragraphs,
    paragraphs_for_length,
)
from .balance import balance_units, join_chunk
from .boundaries import (
    collapse_line_breaks,
    iter_newline_units,
    split_by_newlines,
    split_by_sentences,
)
from .lengths import (
    PARAGRAPH_COUNTS,
    SummaryLength,
    desired_count_for,
    parse_length,
    require_positive_count,
)

__all__ = [
    "Assembly",
    "PARAGRAPH_COUNTS",
    "STRATEGIES",
    "SummaryLength",
    "assemble",
    "assemble_paragraphs",
    "balance_units",
    "collapse_line_breaks",
    "desired_count_for",
    "iter_newline_units",
    "join_chunk",
    "paragraphs_for_length",
    "parse_length",
    "require_positive_count",
    "split_by_newlines",
    "split_by_sentences",
]
