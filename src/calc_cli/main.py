import logging
from enum import Enum
from pathlib import Path

import typer
from calc_analyzer.completion import FunctionSuggester
from calc_analyzer.engine import AnalysisEngine
from calc_analyzer.highlight import classify
from calc_analyzer.registry import registry
from calc_analyzer.session import DocumentSession
from calc_grammar import CalcParser

from .config import ConfigError, LintConfig
from .converters import ast_error_to_lint_issue
from .models import FileReport, LintReport

app = typer.Typer(help="Calculator expression analyzer - check and evaluate calculator files")


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    """Calculator expression analyzer"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def _read(file_path: Path) -> str:
    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: cannot read {file_path}: {e}", err=True)
        raise typer.Exit(code=2)


@app.command()
def check(
    files: list[Path] = typer.Argument(..., help="Files to check"),
    config_file: Path = typer.Option(Path(".calc-lint.toml"), "--config", help="Path to config file"),
    output_format: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", help="Report format"),
):
    """Check calculator files for errors"""
    try:
        config = LintConfig(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    session = DocumentSession(engine=AnalysisEngine(rules=config.apply_to_registry(registry)))
    report = LintReport()

    for file_path in files:
        uri = str(file_path)
        state = session.open(uri, _read(file_path))
        report.files.append(
            FileReport(
                file_path=uri,
                value=state.analysis.value,
                issues=[ast_error_to_lint_issue(e, uri) for e in session.diagnostics(uri)],
            )
        )
        session.close(uri)

    if output_format == OutputFormat.JSON:
        typer.echo(report.model_dump_json(indent=2))
    else:
        total = 0
        for file_report in report.files:
            for issue in file_report.issues:
                typer.echo(
                    f"{issue.severity.value}: {issue.file_path}:{issue.line_number}:{issue.column} "
                    f"[{issue.rule_id}] - {issue.message}"
                )
                total += 1
            if file_report.value is not None:
                typer.echo(f"{file_report.file_path} = {file_report.value!r}")
        typer.echo(f"\nTotal issues found: {total}")

    if report.error_count > 0:
        raise typer.Exit(code=1)


@app.command(name="eval")
def evaluate(expression: str = typer.Argument(..., help="Expression to evaluate")):
    """Evaluate a single expression"""
    session = DocumentSession()
    state = session.open("<expression>", expression)
    errors = session.diagnostics("<expression>")

    if errors:
        for error in errors:
            start = error.range.start
            typer.echo(f"ERROR: {start.line + 1}:{start.character + 1} [{error.rule_id}] - {error.message}")
        raise typer.Exit(code=1)
    if state.analysis.value is None:
        typer.echo("Error: expression has no value", err=True)
        raise typer.Exit(code=1)
    typer.echo(repr(state.analysis.value))


@app.command()
def tokens(file_path: Path = typer.Argument(..., help="File to classify")):
    """Show which part of a file the grammar accepts"""
    content = _read(file_path)
    outcome = CalcParser().parse_string(content)
    for region in classify(outcome):
        typer.echo(f"{region.kind}: [{region.span.start}, {region.span.end}) {region.span.text_of(content)!r}")


@app.command()
def complete(prefix: str = typer.Argument("", help="Start of a function name")):
    """List built-in functions starting with a prefix"""
    for suggestion in FunctionSuggester().suggest_prefix(prefix):
        typer.echo(f"{suggestion.label}\t{suggestion.detail}")


if __name__ == "__main__":
    app()
