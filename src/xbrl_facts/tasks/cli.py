# src/xbrl_facts/tasks/cli.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""XBRL Facts CLI: parse instance documents from disk.

Commands:
    parse      Parse an XBRL instance and write its facts as JSON.
    summary    Print fact counts and distinct concepts for an instance.

Environment:
    XBRL_STRIP_DIMENSION_SUFFIXES   Strip "Axis"/"Member" from segment names.
    XBRL_MAX_DOCUMENT_BYTES         Reject larger inputs.
    LOG_LEVEL                       Root log level (default INFO).
"""

from __future__ import annotations

from pathlib import Path

import typer

from xbrl_facts.adapters.presenters.fact_presenter import FactPresenter
from xbrl_facts.application.use_cases.parse_xbrl_document import (
    ParseXBRLDocumentRequest,
    ParseXBRLDocumentResult,
    ParseXBRLDocumentUseCase,
)
from xbrl_facts.config.settings import get_settings
from xbrl_facts.domain.exceptions.xbrl import MalformedDocument
from xbrl_facts.infrastructure.logging.logger import configure_root_logging, get_json_logger

log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)


def _run(path: Path, *, strip_suffixes: bool = False) -> ParseXBRLDocumentResult:
    """Read ``path`` and parse it, exiting with code 1 on failure.

    Args:
        path: Instance document on disk.
        strip_suffixes: Force Axis/Member suffix stripping on.

    Returns:
        ParseXBRLDocumentResult: Parsed facts and statistics.
    """
    settings = get_settings()
    configure_root_logging(settings.log_level)
    if strip_suffixes:
        settings = settings.model_copy(update={"strip_dimension_suffixes": True})

    try:
        content = path.read_bytes()
    except OSError as exc:
        log.error("Cannot read input", extra={"extra": {"path": str(path), "error": str(exc)}})
        raise typer.Exit(code=1) from exc

    use_case = ParseXBRLDocumentUseCase.from_settings(settings)
    try:
        return use_case.execute(ParseXBRLDocumentRequest(content=content, document_id=path.name))
    except MalformedDocument as exc:
        log.error(
            "Parse failed",
            extra={"extra": {"path": str(path), "code": exc.code, "error": str(exc)}},
        )
        raise typer.Exit(code=1) from exc


@app.command("parse")
def parse_cmd(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write JSON here."),
    numeric_only: bool = typer.Option(False, "--numeric-only", help="Keep numeric facts only."),
    strip_suffixes: bool = typer.Option(
        False,
        "--strip-suffixes",
        help="Strip 'Axis'/'Member' suffixes from segment names.",
    ),
    indent: int | None = typer.Option(None, "--indent", min=0, help="Pretty-print JSON."),
) -> None:
    """Parse an XBRL instance and emit its facts as JSON."""
    result = _run(path, strip_suffixes=strip_suffixes)
    facts = result.facts.numeric_facts() if numeric_only else result.facts

    rendered = FactPresenter().to_json(facts, indent=indent)
    log.info(
        "Parsed",
        extra={
            "extra": {
                "path": str(path),
                "facts": len(facts),
                "elapsed_s": round(result.elapsed_s, 6),
            }
        },
    )

    if output is None:
        typer.echo(rendered)
        return
    try:
        output.write_text(rendered, encoding="utf-8")
    except OSError as exc:
        log.error("Cannot write output", extra={"extra": {"path": str(output), "error": str(exc)}})
        raise typer.Exit(code=1) from exc


@app.command("summary")
def summary_cmd(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
) -> None:
    """Print fact counts and the distinct concepts of an XBRL instance."""
    result = _run(path)
    concepts = sorted({f.concept for f in result.facts})

    typer.echo(f"Facts: {len(result.facts)}")
    typer.echo(f"Numeric facts: {len(result.facts.numeric_facts())}")
    typer.echo(f"Dropped (unknown context): {result.stats.dropped_unknown_context}")
    typer.echo(f"Concepts: {len(concepts)}")
    for concept in concepts:
        typer.echo(f"  {concept}")


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
