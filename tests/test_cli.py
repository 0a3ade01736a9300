import json
from pathlib import Path

from typer.testing import CliRunner

from text_analysis_engine.cli import app
from tests.utils import ENGLISH_SAMPLE, FRENCH_SAMPLE, write_document

runner = CliRunner()


def test_cli_analyze_prints_metrics(tmp_path: Path):
    """analyze lists every summary metric."""
    path = write_document(tmp_path / "doc.txt", "the cat the dog the")
    result = runner.invoke(app, ["analyze", "--input-path", str(path)])

    assert result.exit_code == 0
    assert "Total Words: 5" in result.stdout
    assert "Unique Words: 3" in result.stdout
    assert "Proper Nouns: 0" in result.stdout


def test_cli_analyze_json(tmp_path: Path):
    """analyze --json emits a parseable summary."""
    path = write_document(tmp_path / "doc.txt", ENGLISH_SAMPLE)
    result = runner.invoke(app, ["analyze", "--input-path", str(path), "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["file"] == str(path)
    assert payload["sentences"] == 3
    assert payload["top_words"][0]["word"] == "the"


def test_cli_missing_file_is_a_usage_error(tmp_path: Path):
    """Open failures are reported without a traceback."""
    result = runner.invoke(
        app, ["analyze", "--input-path", str(tmp_path / "nope.txt")]
    )
    assert result.exit_code == 2


def test_cli_metric_single_value(tmp_path: Path):
    path = write_document(tmp_path / "doc.txt", "Hi. Go now!")
    result = runner.invoke(app, ["metric", "sentences", "--input-path", str(path)])
    assert result.exit_code == 0
    assert result.stdout.strip() == "Sentences: 2"

    bad = runner.invoke(app, ["metric", "syllables", "--input-path", str(path)])
    assert bad.exit_code == 2


def test_cli_top_and_frequencies(tmp_path: Path):
    path = write_document(tmp_path / "doc.txt", "b a c a b a")
    top = runner.invoke(app, ["top", "--input-path", str(path), "-n", "1"])
    assert top.exit_code == 0
    assert "1. a: 3 occurrences" in top.stdout
    assert "2." not in top.stdout

    tsv_path = tmp_path / "freq.tsv"
    freq = runner.invoke(
        app, ["frequencies", "--input-path", str(path), "--tsv", str(tsv_path)]
    )
    assert freq.exit_code == 0
    assert "c: 1 occurrence" in freq.stdout
    assert tsv_path.exists()


def test_cli_palindromes_and_details(tmp_path: Path):
    path = write_document(tmp_path / "doc.txt", FRENCH_SAMPLE)
    pal = runner.invoke(app, ["palindromes", "--input-path", str(path)])
    assert pal.exit_code == 0
    assert "radar (frequency: 1)" in pal.stdout

    details = runner.invoke(app, ["details", "--input-path", str(path)])
    assert details.exit_code == 0
    assert "Shortest sentence (20 characters):" in details.stdout


def test_cli_export_writes_report(tmp_path: Path):
    path = write_document(tmp_path / "doc.txt", ENGLISH_SAMPLE)
    output = tmp_path / "analyse.txt"
    result = runner.invoke(
        app, ["export", "--input-path", str(path), "--output", str(output)]
    )

    assert result.exit_code == 0
    text = output.read_text(encoding="utf-8")
    assert text.startswith("Total Words: 14\n")
    assert "Complete Word Frequency:" in text


def test_cli_compare(tmp_path: Path):
    first = write_document(tmp_path / "a.txt", FRENCH_SAMPLE)
    second = write_document(tmp_path / "b.txt", FRENCH_SAMPLE)
    result = runner.invoke(
        app, ["compare", "--first", str(first), "--second", str(second)]
    )

    assert result.exit_code == 0
    assert "Total Words difference: 0" in result.stdout
    assert "Text Complexity difference: 0.00" in result.stdout

    as_json = runner.invoke(
        app, ["compare", "--first", str(first), "--second", str(second), "--json"]
    )
    assert json.loads(as_json.stdout)["complexity_score"] == 0.0


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "max_word_length" in result.stdout
    assert "table_capacity: 10007" in result.stdout
