import logging
import os
import sys
from typing import Any, Literal

import structlog

LogFormat = Literal["json", "plain", "auto"]


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    # Looked up per logger so a swapped sys.stderr (tests, CliRunner) is honoured
    return structlog.PrintLogger(sys.stderr)


def configure_default_logging() -> None:
    """Library default: INFO and above, rendered to stderr, nothing on stdout."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


def _should_use_json_format() -> bool:
    """Determine if JSON format should be used based on environment."""
    ci_vars = ["CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "JENKINS_URL"]
    if any(os.environ.get(var) for var in ci_vars):
        return True

    # Paragraphs go to stdout, so the TTY check is made on stderr
    return bool(not sys.stderr.isatty())


def setup_logging(format_type: LogFormat = "auto", verbose: bool = False) -> None:
    """
    Setup structured logging with format control.

    Args:
        format_type: "json" for JSON output, "plain" for human-readable,
                "auto" to auto-detect based on TTY/CI.
        verbose: Emit debug events (assembly strategy, request details).
    """
    use_json = format_type == "json" or (format_type == "auto" and _should_use_json_format())

    if use_json:
        processors: list[Any] = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        logger_factory=_stderr_logger,
        cache_logger_on_first_use=False,
    )


configure_default_logging()

log = structlog.get_logger()
