"""Global test configuration for docsummary tests."""

import pytest

from docsummary.core.config import Settings
from docsummary.core.logging import configure_default_logging


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep developer .env files and DOCSUMMARY_* variables out of tests."""
    for name in ["DOCSUMMARY_API_URL", "DOCSUMMARY_TIMEOUT", "DEFAULT_LENGTH", "LOG_FORMAT"]:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    # CLI tests reconfigure logging; restore the quiet library default
    configure_default_logging()


@pytest.fixture
def cli_runner():
    """Provide a CLI runner for the docsummary app."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture
def settings():
    return Settings(DOCSUMMARY_API_URL="http://summarizer.test", DOCSUMMARY_TIMEOUT=5.0)


@pytest.fixture
def sample_document(tmp_path):
    """A small fake PDF on disk for upload tests."""
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4 fake document")
    return path
