"""CLI rendering helpers for command output and diagnostics."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer

from .errors import PipelineStageError
from .models.datatypes import SummaryResult
from .text.rules import AnyRewriteRule, BoundedRule


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_file_summary(path: Path, summary: SummaryResult, show_source: bool = False) -> None:
    """Print a one-line summary for one linted file."""

    if summary.is_error:
        typer.secho(f"{path}: {summary.source}", fg=typer.colors.RED)
        return

    typer.echo(
        f"{path}: lines={summary.qtd_lines} methods={summary.qtd_methods} "
        f"complexity={summary.cyclomatic_complexity} tokens={summary.token}"
    )
    for method in summary.methods:
        typer.echo(
            f"  {method.long_name} ccn={method.cyclomatic_complexity} "
            f"lines={method.start_line}-{method.end_line}"
        )
    if show_source:
        typer.echo(summary.source)


def echo_skipped(path: Path, reason: str) -> None:
    """Print a notice for a file skipped by the `ignoreFiles` filter."""

    typer.secho(f"{path}: skipped ({reason})", fg=typer.colors.YELLOW)


def echo_json_summaries(
    entries: list[tuple[Path, SummaryResult]],
    skipped: tuple[tuple[Path, str], ...] = (),
) -> None:
    """Print lint summaries as a JSON array keyed by file path.

    Files skipped by the `ignoreFiles` filter come first as
    `{"path", "skipped"}` entries.
    """

    payload: list[dict[str, object]] = [
        {"path": str(path), "skipped": reason} for path, reason in skipped
    ]
    payload.extend({"path": str(path), **summary.as_dict()} for path, summary in entries)
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def echo_config_mapping(mapping: dict[str, object]) -> None:
    """Print an effective configuration in its public JSON form."""

    typer.echo(json.dumps(mapping, ensure_ascii=False, indent=2))


def echo_rules(rules: tuple[AnyRewriteRule, ...]) -> None:
    """Print the effective rewrite rules in application order."""

    for index, rule in enumerate(rules, start=1):
        kind = "bounded" if isinstance(rule, BoundedRule) else "direct"
        typer.echo(f"{index}. {kind} pattern={rule.pattern()!r} replace={rule.replace!r}")
