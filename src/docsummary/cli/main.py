import json
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.rule import Rule

from ..core.config import Settings
from ..core.errors import DocSummaryError
from ..core.logging import log, setup_logging
from ..paragraphs import assemble, parse_length
from ..paragraphs.lengths import SummaryLength

app = typer.Typer(add_completion=False, help="Document summary CLI")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config_file: str | None = typer.Option(
        None, "--config", help="Config file (.docsummary.yaml|.toml)"
    ),
    log_format: str | None = typer.Option(None, "--log-format", help="json|plain|auto"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug events to stderr"),
):
    """Load settings and configure logging before any command runs."""
    settings = Settings.load_config(config_file)
    setup_logging(log_format or settings.LOG_FORMAT, verbose=verbose)  # type: ignore[arg-type]
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


def _settings(ctx: typer.Context) -> Settings:
    return ctx.obj if isinstance(ctx.obj, Settings) else Settings()


def _resolve_length(ctx: typer.Context, length: SummaryLength | None) -> SummaryLength:
    if length is not None:
        return length
    try:
        return parse_length(_settings(ctx).DEFAULT_LENGTH)
    except DocSummaryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e


def _read_source(source: str | None) -> str:
    if source is None or source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        typer.echo(f"Error: file not found: {source}", err=True)
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


@app.command()
def paragraphs(
    ctx: typer.Context,
    source: str | None = typer.Argument(None, help="Text file to lay out ('-' or omitted for stdin)"),
    length: SummaryLength | None = typer.Option(
        None, "--length", "-l", case_sensitive=False, help="Summary length (default from settings)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON object instead of text"),
) -> None:
    """Split text into 1-3 display paragraphs."""
    selected = _resolve_length(ctx, length)
    text = _read_source(source)
    result = assemble(text, selected.paragraph_count)
    log.debug(
        "paragraphs.assembled",
        strategy=result.strategy,
        desired=selected.paragraph_count,
        produced=len(result.paragraphs),
        chars=len(text),
    )

    if as_json:
        payload = {
            "length": selected.value,
            "strategy": result.strategy,
            "paragraphs": result.paragraphs,
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    typer.echo("\n\n".join(result.paragraphs))


@app.command()
def summarize(
    ctx: typer.Context,
    document: Path = typer.Argument(..., help="PDF or image to summarize"),
    length: SummaryLength | None = typer.Option(
        None, "--length", "-l", case_sensitive=False, help="Summary length (default from settings)"
    ),
    api_url: str | None = typer.Option(None, "--api-url", help="Summarization backend URL override"),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON object instead of text"),
) -> None:
    """Upload a document and show its summary and raw text as paragraphs."""
    from ..adapters.summary_api import SummaryClient
    from ..view import render_document

    settings = _settings(ctx)
    selected = _resolve_length(ctx, length)

    try:
        with SummaryClient(
            base_url=api_url or settings.DOCSUMMARY_API_URL,
            timeout=settings.DOCSUMMARY_TIMEOUT,
        ) as client:
            response = client.upload_and_summarize(document, selected)
    except DocSummaryError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    view = render_document(response, selected)

    if as_json:
        typer.echo(view.model_dump_json(indent=2))
        return

    console = Console(soft_wrap=True)
    if not view.has_summary:
        console.print("No summary yet.")
        return

    console.print(Rule("Summary"))
    for para in view.summary_paragraphs:
        console.print(para, markup=False, highlight=False)
        console.print()

    console.print(Rule("Raw Extracted Text"))
    for para in view.raw_paragraphs:
        console.print(para, markup=False, highlight=False)
        console.print()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
