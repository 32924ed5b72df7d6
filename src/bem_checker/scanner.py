from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from bem_checker.config import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXTENSIONS


def discover_files(
    scan_path: Path,
    *,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
) -> list[Path]:
    """
    Collect candidate files under `scan_path`.

    An explicit file is always returned, whatever its extension. Directories are
    walked recursively, skipping excluded and hidden directories and hidden
    files. A missing path yields no files.
    """

    if scan_path.is_file():
        return [scan_path]
    if not scan_path.is_dir():
        return []

    allowed_exts = {ext.lower() for ext in extensions}
    skip_dirs = set(exclude_dirs)

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(scan_path, topdown=True):
        dirnames[:] = [d for d in dirnames if d not in skip_dirs and not d.startswith(".")]
        base = Path(dirpath)

        for filename in filenames:
            if filename.startswith("."):
                continue
            path = base / filename
            if path.suffix.lower() not in allowed_exts:
                continue
            files.append(path)

    return sorted(set(files))
