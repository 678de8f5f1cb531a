"""In-memory view of one Solidity file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .utils import read_text_file


@dataclass(frozen=True)
class SourceFile:
    """A reported path plus the full text of the file."""

    path: str
    text: str
    lines: List[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", self.text.split("\n"))

    @classmethod
    def load(cls, path: Path, display_path: str | None = None) -> "SourceFile":
        return cls(path=display_path or str(path), text=read_text_file(path))

    def line_of(self, offset: int) -> int:
        """Return the 1-indexed line containing character ``offset``."""

        return self.text.count("\n", 0, offset) + 1
