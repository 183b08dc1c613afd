from typing import Union

from .core.models import DocumentView, SummaryResponse
from .paragraphs import assemble_paragraphs, parse_length
from .paragraphs.lengths import SummaryLength


def render_document(
    response: SummaryResponse, length: Union[SummaryLength, str]
) -> DocumentView:
    """Lay out the summary and the raw text with the same paragraph count."""
    selected = parse_length(length)
    count = selected.paragraph_count
    return DocumentView(
        length=selected,
        summary_paragraphs=assemble_paragraphs(response.summary, count),
        raw_paragraphs=assemble_paragraphs(response.raw_text, count),
        message=response.message,
    )
