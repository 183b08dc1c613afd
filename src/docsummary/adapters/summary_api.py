import json
from pathlib import Path
from typing import Union

import httpx
from pydantic import ValidationError

from ..core.config import SETTINGS
from ..core.errors import SummaryAPIError
from ..core.logging import log
from ..core.models import SummaryResponse
from ..paragraphs.lengths import SummaryLength, parse_length

UPLOAD_PATH = "/upload_and_summarize"


class SummaryClient:
    """Client for the document summarization backend."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = (base_url or SETTINGS.DOCSUMMARY_API_URL).rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else SETTINGS.DOCSUMMARY_TIMEOUT,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "SummaryClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _post_document(self, path: Path, length: SummaryLength) -> httpx.Response:
        with open(path, "rb") as fh:
            return self._client.post(
                UPLOAD_PATH,
                files={"document": (path.name, fh)},
                data={"length": length.value},
            )

    def upload_and_summarize(
        self,
        document: Union[str, Path, None],
        length: Union[SummaryLength, str] = SummaryLength.MEDIUM,
    ) -> SummaryResponse:
        """
        Upload a document and return the backend's summary and raw text.

        Raises:
            SummaryAPIError: missing file, transport failure, non-JSON body,
                or a non-2xx status (carrying the server's message if any)
        """
        if not document:
            raise SummaryAPIError("No file provided to upload_and_summarize().")
        path = Path(document)
        if not path.is_file():
            raise SummaryAPIError(f"No file provided to upload_and_summarize(): {path}")
        selected = parse_length(length)

        log.debug(
            "summarize.upload",
            url=f"{self.base_url}{UPLOAD_PATH}",
            document=path.name,
            length=selected.value,
        )
        try:
            resp = self._post_document(path, selected)
        except httpx.HTTPError as e:
            log.warning("summarize.error", error=str(e))
            raise SummaryAPIError(f"API Connection Error: {e}") from e

        log.debug("summarize.response", status=resp.status_code)

        try:
            data = resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SummaryAPIError(
                f"Invalid JSON response from server (status {resp.status_code}).",
                status_code=resp.status_code,
            ) from e

        if not resp.is_success:
            server_msg = data.get("message") if isinstance(data, dict) else None
            raise SummaryAPIError(
                server_msg or f"Server error with status {resp.status_code}",
                status_code=resp.status_code,
            )

        if not isinstance(data, dict):
            raise SummaryAPIError(
                f"Unexpected response shape from server (status {resp.status_code}).",
                status_code=resp.status_code,
            )
        try:
            return SummaryResponse.model_validate(data)
        except ValidationError as e:
            raise SummaryAPIError(
                f"Unexpected response shape from server (status {resp.status_code}).",
                status_code=resp.status_code,
            ) from e
