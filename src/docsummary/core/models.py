from pydantic import BaseModel, field_validator

from ..paragraphs.lengths import SummaryLength


class SummaryResponse(BaseModel):
    """Payload returned by POST /upload_and_summarize."""

    summary: str = ""
    raw_text: str = ""
    message: str | None = None

    @field_validator("summary", "raw_text", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return "" if value is None else value


class DocumentView(BaseModel):
    """What the user is shown for one summarized document."""

    length: SummaryLength
    summary_paragraphs: list[str] = []
    raw_paragraphs: list[str] = []
    message: str | None = None

    @property
    def has_summary(self) -> bool:
        return bool(self.summary_paragraphs)
