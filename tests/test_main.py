"""Tests for main module."""

import tempfile
from pathlib import Path

from pull_iterators import main as cli
from pull_iterators.config import AppConfig


def _config(tmpdir: str) -> AppConfig:
    return AppConfig(
        random_seed=11,
        input_file=str(Path(tmpdir) / "dump.txt"),
        output_dir=str(Path(tmpdir) / "output"),
    )


def test_ensure_sample_file_creates_once():
    """Test that the sample input is written only when missing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "data" / "dump.txt"

        assert cli.ensure_sample_file(path) is True
        assert path.read_text(encoding="utf-8").splitlines() == cli.SAMPLE_LINES
        assert cli.ensure_sample_file(path) is False


def test_exercise_pull_prints_ten_pairs_then_false(capsys):
    """Test the full drain exercise output."""
    with tempfile.TemporaryDirectory() as tmpdir:
        cli.exercise_pull(_config(tmpdir))

    out = capsys.readouterr().out
    for i in range(10):
        assert f"{i}: " in out
    assert "0: 0: False;" in out


def test_exercise_early_stop(capsys, caplog):
    """Test that the early stop exercise delivers five pairs and survives a second stop."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with caplog.at_level("INFO"):
            cli.exercise_early_stop(_config(tmpdir))

    out = capsys.readouterr().out
    first_line = out.splitlines()[1]
    assert first_line.count(";") == 5
    assert "0: 0: False;" in out
    assert out.rstrip().endswith("OK")
    assert caplog.text.count("Received stop") == 1


def test_exercise_read_file_stops_at_sentinel(capsys):
    """Test that the file exercise never prints the third line."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config = _config(tmpdir)
        cli.ensure_sample_file(Path(config.input_file))

        cli.exercise_read_file(config)

    out = capsys.readouterr().out
    assert "Read line: Lorem ipsum dolor sit amet" in out
    assert "Stop: Donec malesuada suscipit nulla, STOP HERE" in out
    assert "Should never be read" not in out


def test_exercise_read_file_missing(capsys):
    """Test that a missing input file prints one error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        cli.exercise_read_file(_config(tmpdir))

    out = capsys.readouterr().out
    assert out.count("Error: open: ") == 1


def test_main_runs_all_exercises(monkeypatch, capsys):
    """Test that main runs every exercise and returns 0."""
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("INPUT_FILE", str(Path(tmpdir) / "dump.txt"))
        monkeypatch.setenv("OUTPUT_DIR", str(Path(tmpdir) / "output"))
        monkeypatch.setenv("RANDOM_SEED", "3")

        assert cli.main() == 0
        assert (Path(tmpdir) / "output" / "random_values.parquet").exists()

    out = capsys.readouterr().out
    assert "0: a; 1: b;" in out
    assert "Apple: United States;" in out
    assert "Exercise 7" in out


def test_main_returns_one_on_bad_config(monkeypatch):
    """Test that configuration errors map to exit code 1."""
    monkeypatch.setenv("RANDOM_LIMIT", "0")

    assert cli.main() == 1
