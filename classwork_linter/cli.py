"""Command-line interface for classwork-linter.

Responsibilities:
- Expose user-facing commands for linting source files.
- Honor the `ignoreFiles` filter before files reach the lint pipeline.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import (
    echo_config_mapping,
    echo_file_summary,
    echo_json_summaries,
    echo_rules,
    echo_skipped,
    exit_with_command_error,
)
from .config import DEFAULT_LINTER_CONFIG, ConfigLoader, LinterConfig
from .engine.lizard_engine import LizardEngine
from .errors import PipelineStageError
from .io.source_files import collect_source_files, read_source
from .models.datatypes import SummaryResult
from .pipeline.orchestrator import lint_source_sync
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="classwork-linter",
    no_args_is_help=True,
    help="Normalize source files and report lizard complexity metrics.",
)


def _load_yaml_config(config_path: Path | None) -> LinterConfig:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return DEFAULT_LINTER_CONFIG

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except Exception as exc:
        raise PipelineStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


@app.command("analyze")
def analyze_command(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Source files or directories to lint."),
    ],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file."),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print summaries as a JSON array."),
    ] = False,
    show_source: Annotated[
        bool,
        typer.Option("--show-source", help="Print the normalized source after each summary."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log pipeline stage events to stderr."),
    ] = False,
) -> None:
    """Lint source files and print complexity summaries."""

    try:
        config = _load_yaml_config(config_file)
        try:
            selection = collect_source_files(paths, config.ignore_files)
        except FileNotFoundError as exc:
            raise PipelineStageError(
                stage="collect",
                detail=str(exc),
                hint="Pass existing source files or directories.",
            ) from exc
    except Exception as exc:
        exit_with_command_error("analyze", exc)

    run_logger = RunLogger(level="DEBUG" if verbose else "INFO")
    engine = LizardEngine()
    entries: list[tuple[Path, SummaryResult]] = []

    for path, reason in selection.skipped:
        run_logger.log_file_skipped(str(path), reason)
        if not as_json:
            echo_skipped(path, reason)

    for path in selection.selected:
        summary = lint_source_sync(
            read_source(path),
            path.name,
            config,
            engine=engine,
            run_logger=run_logger,
        )
        run_logger.log_file_summary(
            str(path), summary.qtd_methods, summary.cyclomatic_complexity
        )
        entries.append((path, summary))
        if not as_json:
            echo_file_summary(path, summary, show_source=show_source)

    if as_json:
        echo_json_summaries(entries, selection.skipped)


@app.command("rules")
def rules_command(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file."),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the effective configuration as JSON."),
    ] = False,
) -> None:
    """List the effective rewrite rules in application order."""

    try:
        config = _load_yaml_config(config_file)
    except Exception as exc:
        exit_with_command_error("rules", exc)

    if as_json:
        echo_config_mapping(config.as_mapping())
        return
    echo_rules(config.ignore_chars)


def main() -> None:
    """Run the classwork-linter CLI application."""

    app()
