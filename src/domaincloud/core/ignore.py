# src/domaincloud/core/ignore.py
from pathlib import Path
from typing import List, Optional

import pathspec

from domaincloud.config import DEFAULT_IGNORE_PATTERNS


def load_ignore_spec(ignore_file: Optional[Path] = None,
                     extra_patterns: Optional[List[str]] = None) -> pathspec.PathSpec:
    """
    Builds the gitignore-style rules used when walking directory inputs.
    Rules come from `ignore_file` if given, else from DEFAULT_IGNORE_PATTERNS.
    `extra_patterns` (like the image output name) are always appended.
    """
    if ignore_file is not None:
        with open(ignore_file, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    else:
        lines = list(DEFAULT_IGNORE_PATTERNS)

    if extra_patterns:
        lines.extend(extra_patterns)

    return pathspec.PathSpec.from_lines("gitwildmatch", lines)


def is_path_ignored(spec: pathspec.PathSpec, rel_path: Path, is_directory: bool = False) -> bool:
    """Checks a path relative to the walked root against `spec`."""
    path_str = rel_path.as_posix()
    # Directory patterns like "venv/" only match with a trailing slash
    if is_directory:
        path_str += "/"
    return spec.match_file(path_str)
