# src/domaincloud/core/scanner.py
import os
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, Set

import pathspec

from domaincloud.config import BINARY_PROBE_SIZE, STDIN_SENTINEL
from domaincloud.core.ignore import is_path_ignored
from domaincloud.models import InputSource


class InputScanner:
    """
    Expands command line inputs into the sources to read, in order.

    Plain files and the stdin sentinel are passed through as given, even if
    they do not exist, so that opening them reports the problem. Directories
    are walked; there the ignore rules, the extension filter and the binary
    check decide which files are used.
    Paths in `exclude` (the output file of the run) are never read back.
    """

    def __init__(self, ignore_spec: pathspec.PathSpec, extensions: Set[str],
                 exclude: Optional[Iterable[Path]] = None):
        self.ignore_spec = ignore_spec
        self.extensions = extensions
        self.match_all = "*" in extensions
        self.exclude = {p.resolve() for p in (exclude or [])}

    def _is_excluded(self, path: Path) -> bool:
        return path.resolve() in self.exclude

    def _is_binary_file(self, path: Path) -> bool:
        """Looks for NUL bytes in the first chunk of the file."""
        try:
            with path.open("rb") as f:
                return b"\0" in f.read(BINARY_PROBE_SIZE)
        except OSError:
            # Unreadable files are treated as binary and left out of the walk
            return True

    def _matches_extension(self, path: Path) -> bool:
        return self.match_all or path.suffix in self.extensions or path.name in self.extensions

    def _walk(self, root_dir: Path) -> Iterator[InputSource]:
        for root, dirs, files in os.walk(root_dir):
            root_path = Path(root)

            # Prune in place so os.walk never enters ignored directories
            for d in list(dirs):
                rel_dir = (root_path / d).relative_to(root_dir)
                if is_path_ignored(self.ignore_spec, rel_dir, is_directory=True):
                    dirs.remove(d)
            dirs.sort()

            for name in sorted(files):
                file_path = root_path / name
                rel_path = file_path.relative_to(root_dir)

                if is_path_ignored(self.ignore_spec, rel_path):
                    continue
                if self._is_excluded(file_path):
                    continue
                if not self._matches_extension(file_path):
                    continue
                if self._is_binary_file(file_path):
                    continue

                yield InputSource(label=file_path.as_posix(), path=file_path)

    def scan(self, inputs: Iterable[str]) -> Iterator[InputSource]:
        for arg in inputs:
            if arg == STDIN_SENTINEL:
                yield InputSource(label="<stdin>")
                continue

            path = Path(arg)
            if path.is_dir():
                yield from self._walk(path)
            elif self._is_excluded(path):
                print(f"  > [Warning] Skipping {arg} (it is the output file)", file=sys.stderr)
            else:
                yield InputSource(label=arg, path=path)
