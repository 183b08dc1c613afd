"""
docsummary: lay out document summaries as a fixed number of paragraphs.
"""

from .paragraphs import SummaryLength, assemble_paragraphs, paragraphs_for_length

__version__ = "0.1.0"

__all__ = ["SummaryLength", "assemble_paragraphs", "paragraphs_for_length"]
