from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
import yaml

from .config import AnalysisConfig, load_config
from .errors import DocumentOpenError, DocumentReadError
from .models import MetricDifferences, TextAnalysis
from .pipeline import analyze_file, compare_files
from .reporting import (
    METRIC_NAMES,
    analysis_to_dict,
    export_analysis,
    format_comparison,
    format_detailed_statistics,
    format_metric,
    format_top_words,
    format_word_frequency,
    palindrome_report,
    write_frequency_tsv,
)

app = typer.Typer(help="Text Analysis Engine CLI.", no_args_is_help=True)

INPUT_HELP = "Plain-text document to analyze."
CONFIG_HELP = "YAML configuration file."


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Lexical, structural and stylistic statistics for text documents."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{log_level}'.")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def analyze(
    input_path: Path = typer.Option(..., help=INPUT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON summary."),
) -> None:
    """Print every summary metric of a document."""
    cfg = load_config(config)
    analysis = _load_analysis(input_path, cfg)
    if as_json:
        payload = {"file": str(input_path), **analysis_to_dict(analysis, cfg.top_n)}
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    typer.echo(f"File: {input_path}")
    for name in METRIC_NAMES:
        typer.echo(format_metric(analysis, name))


@app.command()
def metric(
    name: str = typer.Argument(..., help=f"One of: {', '.join(METRIC_NAMES)}."),
    input_path: Path = typer.Option(..., help=INPUT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Print a single named metric."""
    if name not in METRIC_NAMES:
        raise typer.BadParameter(
            f"Unknown metric '{name}'. Expected one of: {', '.join(METRIC_NAMES)}.",
            param_hint="NAME",
        )
    analysis = _load_analysis(input_path, load_config(config))
    typer.echo(format_metric(analysis, name))


@app.command()
def top(
    input_path: Path = typer.Option(..., help=INPUT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    count: int | None = typer.Option(
        None, "--count", "-n", help="Number of words (defaults to config top_n)."
    ),
) -> None:
    """List the most frequent words."""
    cfg = load_config(config)
    analysis = _load_analysis(input_path, cfg)
    typer.echo(format_top_words(analysis, cfg.top_n if count is None else count), nl=False)


@app.command()
def frequencies(
    input_path: Path = typer.Option(..., help=INPUT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    unsorted: bool = typer.Option(
        False, "--unsorted", help="Keep hash-table order instead of sorting."
    ),
    tsv: Path | None = typer.Option(None, "--tsv", help="Also write a TSV table here."),
) -> None:
    """List every word with its frequency."""
    analysis = _load_analysis(input_path, load_config(config))
    typer.echo(format_word_frequency(analysis, sort=not unsorted), nl=False)
    if tsv is not None:
        write_frequency_tsv(analysis, tsv)
        typer.echo(f"Wrote frequency table to {tsv}")


@app.command()
def palindromes(
    input_path: Path = typer.Option(..., help=INPUT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """List palindromic words of three or more characters."""
    analysis = _load_analysis(input_path, load_config(config))
    typer.echo(palindrome_report(analysis), nl=False)


@app.command()
def details(
    input_path: Path = typer.Option(..., help=INPUT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Print character, structure and extremal sentence statistics."""
    analysis = _load_analysis(input_path, load_config(config))
    typer.echo(format_detailed_statistics(analysis), nl=False)


@app.command()
def export(
    input_path: Path = typer.Option(..., help=INPUT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Destination file (defaults to config export_path)."
    ),
) -> None:
    """Save the full analysis as a plain-text report."""
    cfg = load_config(config)
    analysis = _load_analysis(input_path, cfg)
    destination = export_analysis(analysis, output or Path(cfg.export_path))
    typer.echo(f"Analysis saved in file '{destination}'")


@app.command()
def compare(
    first: Path = typer.Option(..., "--first", help="First document."),
    second: Path = typer.Option(..., "--second", help="Second document."),
    config: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    as_json: bool = typer.Option(False, "--json", help="Emit the differences as JSON."),
) -> None:
    """Compare the summary metrics of two documents."""
    cfg = load_config(config)
    try:
        first_analysis, second_analysis, differences = compare_files(first, second, cfg)
    except (DocumentOpenError, DocumentReadError) as exc:
        raise typer.BadParameter(str(exc)) from exc
    if as_json:
        typer.echo(json.dumps(_differences_dict(differences), indent=2))
        return
    typer.echo(
        format_comparison(
            first_analysis,
            second_analysis,
            differences,
            first_label=f"File 1: {first}",
            second_label=f"File 2: {second}",
        ),
        nl=False,
    )


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalysisConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_analysis(input_path: Path, config: AnalysisConfig) -> TextAnalysis:
    """Analyze a document, turning I/O failures into CLI parameter errors."""
    try:
        return analyze_file(input_path, config)
    except (DocumentOpenError, DocumentReadError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc


def _differences_dict(differences: MetricDifferences) -> dict[str, float | int]:
    return {
        "total_words": differences.total_words,
        "unique_words": differences.unique_words,
        "sentences": differences.sentences,
        "average_sentence_length": differences.average_sentence_length,
        "lexical_diversity": differences.lexical_diversity,
        "complexity_score": differences.complexity_score,
        "verbs": differences.verbs,
        "proper_nouns": differences.proper_nouns,
    }


if __name__ == "__main__":
    main()
