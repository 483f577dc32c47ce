"""CLI entrypoint for feedback-triage: typer app exposing the feedback operations."""

import asyncio
import json
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
import typer

from feedback_triage.batch.application.runner import BatchRunner
from feedback_triage.batch.domain.observer import BatchObserver
from feedback_triage.batch.infrastructure.composite_observer import (
    CompositeBatchObserver,
)
from feedback_triage.batch.infrastructure.observer import StructlogBatchObserver
from feedback_triage.batch.infrastructure.progress_observer import (
    ProgressBatchObserver,
)
from feedback_triage.classification.application.classifier import FeedbackClassifier
from feedback_triage.classification.infrastructure.litellm_client import (
    LiteLLMModelClient,
)
from feedback_triage.classification.infrastructure.observer import (
    StructlogClassifierObserver,
)
from feedback_triage.config.infrastructure.observer import StructlogConfigObserver
from feedback_triage.config.infrastructure.yaml_loader import YamlConfigLoader
from feedback_triage.core.errors import FeedbackTriageError
from feedback_triage.feedback.application.service import TriageService
from feedback_triage.feedback.infrastructure.observer import StructlogFeedbackObserver
from feedback_triage.feedback.infrastructure.sqlite_repository import (
    SqliteFeedbackRepository,
)

app = typer.Typer(add_completion=False, no_args_is_help=True)


@dataclass(frozen=True)
class _Options:
    config_path: Path
    log_format: str


def _stderr_logger(*args: Any) -> structlog.PrintLogger:
    """Look up sys.stderr per logger so a live progress bar can redirect log lines."""
    return structlog.PrintLogger(file=sys.stderr)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=_stderr_logger,
    )


@contextmanager
def _exit_on_error() -> Iterator[None]:
    """Turn errors into a message on stderr and exit code 1."""
    try:
        yield
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Interrupted.", err=True)
        raise typer.Exit(code=1)
    except FeedbackTriageError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        raise typer.Exit(code=1) from exc


@contextmanager
def _triage_service(ctx: typer.Context) -> Iterator[TriageService]:
    """Load config and wire the service; the store is closed on exit."""
    options: _Options = ctx.obj
    config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
        path=options.config_path
    )

    classifier = FeedbackClassifier(
        model_client=LiteLLMModelClient(config=config.model),
        observer=StructlogClassifierObserver(),
        max_tokens=config.model.max_tokens,
    )
    batch_observers: list[BatchObserver] = [StructlogBatchObserver()]
    if options.log_format != "json":
        batch_observers.append(ProgressBatchObserver())
    batch_runner = BatchRunner(
        classifier=classifier,
        observer=CompositeBatchObserver(observers=batch_observers),
    )

    repository = SqliteFeedbackRepository(path=config.database.path)
    try:
        yield TriageService(
            repository=repository,
            classifier=classifier,
            batch_runner=batch_runner,
            observer=StructlogFeedbackObserver(),
            batch_limit=config.batch.limit,
        )
    finally:
        repository.close()


def _echo_json(data: Any) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Path = typer.Option(
        Path("feedback-triage.yaml"),
        "--config",
        "-c",
        help="Path to the feedback-triage config YAML",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Collect product feedback and classify its sentiment and urgency."""
    _configure_structlog(log_format=log_format)
    ctx.obj = _Options(config_path=config_path, log_format=log_format)


@app.command()
def add(
    ctx: typer.Context,
    source: str = typer.Option(..., help="Where the feedback came from, e.g. github"),
    content: str = typer.Option(..., help="The feedback text"),
    author: str | None = typer.Option(None, help="Username or handle"),
    sentiment: str | None = typer.Option(None, help="positive, negative or neutral"),
    urgency: int | None = typer.Option(None, help="1 (low) to 5 (critical)"),
    themes: str | None = typer.Option(
        None, help="Comma-separated themes, e.g. performance,ui"
    ),
    analyze: bool = typer.Option(
        False, "--analyze", help="Classify the entry right after storing it"
    ),
) -> None:
    """Store a new feedback entry."""
    with _exit_on_error(), _triage_service(ctx) as service:
        feedback_id = service.add(
            source=source,
            content=content,
            author=author,
            sentiment=sentiment,
            urgency=urgency,
            themes=themes,
        )
        result: dict[str, Any] = {"success": True, "id": feedback_id}
        if analyze:
            judgment = asyncio.run(service.analyze(feedback_id=feedback_id))
            result["analysis"] = judgment.model_dump(exclude_none=True)
        _echo_json(result)


@app.command("list")
def list_feedback(
    ctx: typer.Context,
    source: str | None = typer.Option(None, help="Only entries from this source"),
    sentiment: str | None = typer.Option(None, help="Only entries with this sentiment"),
    limit: int = typer.Option(50, min=1, help="Maximum number of entries"),
) -> None:
    """List stored feedback, newest first."""
    with _exit_on_error(), _triage_service(ctx) as service:
        records = service.list_feedback(source=source, sentiment=sentiment, limit=limit)
        _echo_json(
            {
                "feedback": [record.model_dump() for record in records],
                "count": len(records),
            }
        )


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show counts by source and sentiment, and urgency statistics."""
    with _exit_on_error(), _triage_service(ctx) as service:
        _echo_json(service.stats().model_dump())


@app.command()
def seed(ctx: typer.Context) -> None:
    """Insert a fixed set of mock feedback entries."""
    with _exit_on_error(), _triage_service(ctx) as service:
        count = service.seed()
        _echo_json(
            {
                "success": True,
                "count": count,
                "message": f"Seeded {count} feedback entries",
            }
        )


@app.command()
def analyze(
    ctx: typer.Context,
    content: str | None = typer.Option(None, help="Text to classify"),
    feedback_id: int | None = typer.Option(
        None, "--id", help="Stored entry to classify and update"
    ),
) -> None:
    """Classify one piece of feedback, updating the stored entry when --id is given."""
    with _exit_on_error(), _triage_service(ctx) as service:
        judgment = asyncio.run(
            service.analyze(content=content, feedback_id=feedback_id)
        )
        _echo_json(
            {"success": True, "analysis": judgment.model_dump(exclude_none=True)}
        )


@app.command("analyze-all")
def analyze_all(
    ctx: typer.Context,
    limit: int | None = typer.Option(
        None, min=1, help="Maximum entries to classify (default from config)"
    ),
) -> None:
    """Classify every stored entry that has no sentiment yet."""
    with _exit_on_error(), _triage_service(ctx) as service:
        results = asyncio.run(service.analyze_unscored(limit=limit))
        if not results:
            _echo_json(
                {"success": True, "message": "No feedback to analyze", "count": 0}
            )
            return
        _echo_json(
            {
                "success": True,
                "count": len(results),
                "message": f"Analyzed {len(results)} feedback entries",
            }
        )


if __name__ == "__main__":
    app()
