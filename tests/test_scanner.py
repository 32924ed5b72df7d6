from __future__ import annotations

from pathlib import Path

from bem_checker.scanner import discover_files


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


def test_discover_files_filters_by_extension(tmp_path: Path) -> None:
    keep = [_touch(tmp_path / "a.html"), _touch(tmp_path / "src" / "App.TSX"), _touch(tmp_path / "src" / "c.vue")]
    _touch(tmp_path / "style.css")
    _touch(tmp_path / "README.md")
    assert discover_files(tmp_path) == sorted(keep)


def test_discover_files_skips_excluded_and_hidden(tmp_path: Path) -> None:
    keep = _touch(tmp_path / "pages" / "index.html")
    _touch(tmp_path / "node_modules" / "lib" / "x.js")
    _touch(tmp_path / "dist" / "bundle.js")
    _touch(tmp_path / "bem-reports" / "old.js")
    _touch(tmp_path / ".vscode" / "x.js")
    _touch(tmp_path / "pages" / ".hidden.html")
    assert discover_files(tmp_path) == [keep]


def test_discover_files_custom_filters(tmp_path: Path) -> None:
    keep = _touch(tmp_path / "node_modules" / "widget.vue")
    _touch(tmp_path / "vendor" / "x.vue")
    _touch(tmp_path / "page.html")
    found = discover_files(tmp_path, extensions=(".vue",), exclude_dirs=("vendor",))
    assert found == [keep]


def test_discover_files_returns_explicit_file_regardless_of_extension(tmp_path: Path) -> None:
    path = _touch(tmp_path / "template.php")
    assert discover_files(path) == [path]


def test_discover_files_missing_path(tmp_path: Path) -> None:
    assert discover_files(tmp_path / "missing") == []
