"""Tests for laying out a summarization response."""

import pytest

from docsummary.core.errors import InvalidArgumentError
from docsummary.core.models import SummaryResponse
from docsummary.paragraphs import SummaryLength
from docsummary.view import render_document


def test_summary_and_raw_text_share_paragraph_count():
    response = SummaryResponse(
        summary="Point one. Point two. Point three. Point four.",
        raw_text="Page one.\nPage two.\nPage three.\nPage four.",
        message="Summarized",
    )

    view = render_document(response, "long")

    assert view.length is SummaryLength.LONG
    assert view.summary_paragraphs == [
        "Point one. Point two.",
        "Point three.",
        "Point four.",
    ]
    assert view.raw_paragraphs == ["Page one.", "Page two.", "Page three."]
    assert view.message == "Summarized"
    assert view.has_summary


def test_empty_response():
    view = render_document(SummaryResponse(), SummaryLength.MEDIUM)
    assert view.summary_paragraphs == []
    assert view.raw_paragraphs == []
    assert not view.has_summary


def test_unknown_length():
    with pytest.raises(InvalidArgumentError):
        render_document(SummaryResponse(summary="A."), "tiny")
