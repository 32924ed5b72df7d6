from __future__ import annotations

import json
import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a bem-checker configuration file is invalid."""


RC_FILENAME = ".bem-checker-rc.json"
PYPROJECT_TABLE = "bem-checker"

DEFAULT_REPORT_DIR = "bem-reports"
DEFAULT_REPORT_FILENAME = "bem-report_{YYYY}-{MM}-{DD}_{HH}{mm}{ss}.json"
DEFAULT_EXTENSIONS: tuple[str, ...] = (".html", ".htm", ".js", ".jsx", ".ts", ".tsx", ".vue")
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = ("node_modules", ".git", "dist", "reports", "bem-reports")


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """
    Report output location.

    Both fields must be set for the config to take effect; otherwise reports go
    to `bem-reports/` with a timestamped default filename.
    """

    path: str | None = None
    filename_pattern: str | None = None


@dataclass(frozen=True, slots=True)
class BemCheckerConfig:
    ignore_list: tuple[str, ...] = ()
    output: OutputConfig = field(default_factory=OutputConfig)
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    source: Path | None = None


def load_config(project_dir: Path | str = ".") -> BemCheckerConfig:
    """
    Load configuration from `project_dir`.

    `.bem-checker-rc.json` wins over a `[tool.bem-checker]` table in
    `pyproject.toml`. Returns defaults when neither exists.
    """

    project_dir_path = Path(project_dir)

    rc_path = project_dir_path / RC_FILENAME
    if rc_path.exists():
        return _load_rc_json(rc_path)

    pyproject_path = project_dir_path / "pyproject.toml"
    if pyproject_path.exists():
        config = _load_pyproject(pyproject_path)
        if config is not None:
            return config

    return BemCheckerConfig()


def load_config_or_default(project_dir: Path | str = ".") -> BemCheckerConfig:
    try:
        return load_config(project_dir)
    except ConfigError as exc:
        logger.warning("%s; falling back to defaults", exc)
        return BemCheckerConfig()


def _load_rc_json(rc_path: Path) -> BemCheckerConfig:
    try:
        data = json.loads(rc_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {rc_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {rc_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{rc_path} must contain a JSON object.")

    logger.debug("loaded config from %s", rc_path)
    return _parse_table(
        data,
        source=rc_path,
        keys={
            "ignore_list": ("ignoreList",),
            "extensions": ("extensions",),
            "exclude_dirs": ("excludeDirs",),
            "output_path": ("path",),
            "filename_pattern": ("filenamePattern",),
        },
        prefix="",
    )


def _load_pyproject(pyproject_path: Path) -> BemCheckerConfig | None:
    try:
        data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {pyproject_path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {exc}") from exc

    tool_table = data.get("tool", {})
    if not isinstance(tool_table, dict):
        return None

    table = tool_table.get(PYPROJECT_TABLE, {})
    if not isinstance(table, dict) or not table:
        return None

    logger.debug("loaded config from %s", pyproject_path)
    return _parse_table(
        table,
        source=pyproject_path,
        keys={
            "ignore_list": ("ignore-list", "ignore_list"),
            "extensions": ("extensions",),
            "exclude_dirs": ("exclude-dirs", "exclude_dirs"),
            "output_path": ("path",),
            "filename_pattern": ("filename-pattern", "filename_pattern"),
        },
        prefix=f"tool.{PYPROJECT_TABLE}.",
    )


def _parse_table(
    table: dict[str, Any],
    *,
    source: Path,
    keys: dict[str, tuple[str, ...]],
    prefix: str,
) -> BemCheckerConfig:
    ignore_key, ignore_raw = _first_present(table, keys["ignore_list"])
    ignore_list = _validate_str_list(ignore_raw, field_name=f"{prefix}{ignore_key}")

    ext_key, ext_raw = _first_present(table, keys["extensions"])
    extensions = (
        tuple(_normalize_extension(e) for e in _validate_str_list(ext_raw, field_name=f"{prefix}{ext_key}"))
        if ext_raw is not None
        else DEFAULT_EXTENSIONS
    )

    exclude_key, exclude_raw = _first_present(table, keys["exclude_dirs"])
    exclude_dirs = (
        _validate_str_list(exclude_raw, field_name=f"{prefix}{exclude_key}")
        if exclude_raw is not None
        else DEFAULT_EXCLUDE_DIRS
    )

    output = _parse_output_config(
        table.get("output"),
        keys=keys,
        field_name=f"{prefix}output",
    )

    return BemCheckerConfig(
        ignore_list=ignore_list,
        output=output,
        extensions=extensions,
        exclude_dirs=exclude_dirs,
        source=source,
    )


def _parse_output_config(value: Any, *, keys: dict[str, tuple[str, ...]], field_name: str) -> OutputConfig:
    if value is None:
        return OutputConfig()
    if not isinstance(value, dict):
        raise ConfigError(f"`{field_name}` must be an object/table.")

    path_key, path = _first_present(value, keys["output_path"])
    if path is not None and not isinstance(path, str):
        raise ConfigError(f"`{field_name}.{path_key}` must be a string path.")

    pattern_key, pattern = _first_present(value, keys["filename_pattern"])
    if pattern is not None and not isinstance(pattern, str):
        raise ConfigError(f"`{field_name}.{pattern_key}` must be a string.")

    return OutputConfig(
        path=path.strip() or None if path is not None else None,
        filename_pattern=pattern.strip() or None if pattern is not None else None,
    )


def _first_present(table: dict[str, Any], candidates: tuple[str, ...]) -> tuple[str, Any]:
    for key in candidates:
        if key in table:
            return key, table[key]
    return candidates[0], None


def _validate_str_list(value: Any, *, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or any(not isinstance(v, str) for v in value):
        raise ConfigError(f"`{field_name}` must be a list of strings.")
    return tuple(value)


def _normalize_extension(value: str) -> str:
    ext = value.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext
