class DocSummaryError(Exception):
    """Base class for errors raised by docsummary."""


class InvalidArgumentError(DocSummaryError, ValueError):
    """A caller broke a precondition, e.g. a non-positive paragraph count."""


class SummaryAPIError(DocSummaryError):
    """The summarization backend could not be reached or returned an error."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
