"""CLI entry point for react-state-patterns."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from react_state_patterns import __version__
from react_state_patterns.analyzer.models import AnalysisResult
from react_state_patterns.config import ConfigError, load_config
from react_state_patterns.render import render_markdown, render_text
from react_state_patterns.render._helpers import plural, xstate_summary
from react_state_patterns.rules import RULE_NAMES, default_rules
from react_state_patterns.scanner import analyze


@click.command()
@click.argument("path", type=click.Path(exists=True, resolve_path=True), default=".")
@click.option(
    "-p", "--pattern",
    default=None,
    help="Glob pattern for files to analyze (default: **/*.{jsx,tsx}).",
)
@click.option(
    "-i", "--ignore",
    multiple=True,
    help="Directory name or glob to ignore; repeatable (default: node_modules, dist, build).",
)
@click.option(
    "-f", "--format", "fmt",
    type=click.Choice(["text", "json", "markdown"], case_sensitive=False),
    default="text",
    help="Output format (default: text).",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, resolve_path=True),
    default=None,
    help="Write the report to a file instead of stdout.",
)
@click.option(
    "--config", "config_path",
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    default=None,
    help="YAML config file. Defaults to .react-state-patterns.yml in PATH.",
)
@click.option(
    "--disable-rule", "disabled",
    multiple=True,
    help="Rule to skip; repeatable.",
)
@click.option("--strict", is_flag=True, default=False, help="Exit with code 1 if issues are found.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose logging and summary.")
@click.version_option(version=__version__)
def main(
    path: str,
    pattern: str | None,
    ignore: tuple[str, ...],
    fmt: str,
    output: str | None,
    config_path: str | None,
    disabled: tuple[str, ...],
    strict: bool,
    verbose: bool,
) -> None:
    """Analyze React components under PATH for state management antipatterns."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    project_path = Path(path)
    project_dir = project_path if project_path.is_dir() else project_path.parent
    try:
        config = load_config(Path(config_path) if config_path else None, project_dir)
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc

    unknown = [name for name in disabled if name not in RULE_NAMES]
    if unknown:
        raise click.BadParameter(
            f"unknown rule(s): {', '.join(unknown)}", param_hint="--disable-rule",
        )

    pattern = pattern or config.pattern
    result = analyze(
        project_path,
        pattern=pattern,
        ignore=list(ignore) if ignore else config.ignore,
        rules=default_rules(set(config.disable) | set(disabled)),
    )

    if verbose or result.files_found == 0 or result.components_found == 0:
        _echo_summary(result)
    if result.files_found == 0:
        click.echo(click.style("No files found matching pattern: ", fg="yellow") + pattern, err=True)
        click.echo('Try adjusting the pattern, e.g. --pattern "src/**/*.{js,jsx,ts,tsx}"', err=True)
    elif result.components_found == 0:
        click.echo(click.style("No React components found in analyzed files", fg="yellow"), err=True)

    if fmt == "json":
        _emit(json.dumps(result.model_dump(), indent=2), output)
    elif fmt == "markdown":
        _emit(render_markdown(result), output)
    elif not result.issues:
        _emit(
            click.style("No state management issues found!", fg="green")
            + f"\n  Analyzed {plural(result.components_found, 'React component')} "
            f"in {plural(result.files_analyzed, 'file')}",
            output,
        )
    else:
        _emit(render_text(result, color=output is None), output)

    if (strict or config.strict) and result.issues:
        raise SystemExit(1)


def _echo_summary(result: AnalysisResult) -> None:
    click.echo("Analysis Summary:", err=True)
    click.echo(f"  Files found: {result.files_found}", err=True)
    click.echo(f"  Files analyzed: {result.files_analyzed}", err=True)
    click.echo(f"  React components found: {result.components_found}", err=True)
    if result.files_skipped:
        click.echo(f"  Files skipped: {len(result.files_skipped)}", err=True)
    xstate = xstate_summary(result)
    if xstate:
        click.echo(f"  XState available: {xstate}", err=True)
    click.echo("", err=True)


def _emit(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(click.unstyle(text))
        click.echo(f"Report written to {output}", err=True)
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
