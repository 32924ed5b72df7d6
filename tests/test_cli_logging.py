from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from bem_checker.cli import app


def _args(tmp_path: Path) -> list[str]:
    return ["check", str(tmp_path), "--format", "json", "--project-root", str(tmp_path)]


def test_cli_verbose_enables_debug_logging(tmp_path: Path) -> None:
    (tmp_path / "index.html").write_text('<div class="card"></div>\n', encoding="utf-8")

    runner = CliRunner()
    res = runner.invoke(app, ["--verbose", *_args(tmp_path)])
    assert res.exit_code == 0
    assert "discovered" in res.output.lower()
    assert "wrote report to" in res.output.lower()


def test_cli_default_logging_reports_written_file(tmp_path: Path) -> None:
    (tmp_path / "index.html").write_text('<div class="card"></div>\n', encoding="utf-8")

    runner = CliRunner()
    res = runner.invoke(app, _args(tmp_path))
    assert res.exit_code == 0
    assert "discovered" not in res.output.lower()
    assert "wrote report to" in res.output.lower()


def test_cli_quiet_suppresses_debug_logging(tmp_path: Path) -> None:
    (tmp_path / "index.html").write_text('<div class="card"></div>\n', encoding="utf-8")

    runner = CliRunner()
    res = runner.invoke(app, ["--quiet", *_args(tmp_path)])
    assert res.exit_code == 0
    assert "discovered" not in res.output.lower()
    assert "wrote report to" not in res.output.lower()
