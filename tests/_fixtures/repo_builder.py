"""Helper utilities for constructing temporary source trees in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

from deadexports.models import DeadExportReport
from deadexports.scanner import DeadExportScanner


class RepoBuilder:
    """Utility for writing files into a throwaway source tree and rescanning it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()
        self._scanner = DeadExportScanner()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the tree."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def scan(self, **options: object) -> DeadExportReport:
        """Return a fresh dead export report for the tree."""
        return self._scanner.scan(self.root, **options)  # type: ignore[arg-type]

    def path(self) -> Path:
        """Return the tree root path."""
        return self.root


__all__ = ["RepoBuilder"]
