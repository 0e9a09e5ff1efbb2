# src/domaincloud/models.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class InputSource:
    """One input to process: a file path, or stdin when path is None."""
    label: str
    path: Optional[Path] = None

    @property
    def is_stdin(self) -> bool:
        return self.path is None
