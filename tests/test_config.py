from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from bem_checker.config import (
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_EXTENSIONS,
    BemCheckerConfig,
    ConfigError,
    load_config,
    load_config_or_default,
)


def test_load_config_defaults_when_nothing_present(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config == BemCheckerConfig()
    assert config.ignore_list == ()
    assert config.output.path is None
    assert config.extensions == DEFAULT_EXTENSIONS
    assert config.exclude_dirs == DEFAULT_EXCLUDE_DIRS


def test_load_config_reads_rc_json(tmp_path: Path) -> None:
    (tmp_path / ".bem-checker-rc.json").write_text(
        json.dumps(
            {
                "ignoreList": ["^js-", "u-*"],
                "output": {"path": "reports/bem", "filenamePattern": "bem_{YYYY}.json"},
                "extensions": ["html", ".VUE"],
                "excludeDirs": ["vendor"],
            }
        ),
        encoding="utf-8",
    )

    config = load_config(tmp_path)
    assert config.ignore_list == ("^js-", "u-*")
    assert config.output.path == "reports/bem"
    assert config.output.filename_pattern == "bem_{YYYY}.json"
    assert config.extensions == (".html", ".vue")
    assert config.exclude_dirs == ("vendor",)
    assert config.source == tmp_path / ".bem-checker-rc.json"


def test_load_config_reads_pyproject_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[tool.bem-checker]
ignore-list = ["^legacy-"]
exclude-dirs = ["storybook"]

[tool.bem-checker.output]
path = "out"
filename-pattern = "report.json"
""".lstrip(),
        encoding="utf-8",
    )

    config = load_config(tmp_path)
    assert config.ignore_list == ("^legacy-",)
    assert config.exclude_dirs == ("storybook",)
    assert config.extensions == DEFAULT_EXTENSIONS
    assert config.output.path == "out"
    assert config.output.filename_pattern == "report.json"


def test_rc_json_wins_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / ".bem-checker-rc.json").write_text('{"ignoreList": ["from-rc"]}', encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text('[tool.bem-checker]\nignore-list = ["from-toml"]\n', encoding="utf-8")
    assert load_config(tmp_path).ignore_list == ("from-rc",)


def test_pyproject_without_table_gives_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_config(tmp_path) == BemCheckerConfig()


def test_partial_output_config_is_kept_but_incomplete(tmp_path: Path) -> None:
    (tmp_path / ".bem-checker-rc.json").write_text('{"output": {"path": "out"}}', encoding="utf-8")
    config = load_config(tmp_path)
    assert config.output.path == "out"
    assert config.output.filename_pattern is None


@pytest.mark.parametrize(
    "payload",
    [
        "{not json",
        "[1, 2]",
        '{"ignoreList": "^js-"}',
        '{"ignoreList": [1]}',
        '{"output": "out"}',
        '{"output": {"path": 3}}',
        '{"output": {"path": "out", "filenamePattern": false}}',
    ],
)
def test_load_config_rejects_invalid_rc(tmp_path: Path, payload: str) -> None:
    (tmp_path / ".bem-checker-rc.json").write_text(payload, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_toml(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.bem-checker\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(tmp_path)


def test_load_config_rejects_wrong_toml_types(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[tool.bem-checker]\nextensions = ".html"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match="tool.bem-checker.extensions"):
        load_config(tmp_path)


def test_load_config_or_default_logs_and_falls_back(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    (tmp_path / ".bem-checker-rc.json").write_text("{broken", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="bem_checker.config"):
        config = load_config_or_default(tmp_path)
    assert config == BemCheckerConfig()
    assert "Invalid JSON" in caplog.text
