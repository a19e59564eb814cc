"""Scan pipeline: discover files, extract exports, cross-reference imports."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

from .analyzers import ImportDetector, extract_exports, find_dead_exports, get_detector
from .config import ScanSettings, load_config
from .discovery import discover_files, relative_posix
from .logging import get_logger
from .models import DeadExportReport, SourceFile


def load_sources(root: Path, paths: Sequence[Path]) -> List[SourceFile]:
    """Read each file and record the exports it declares, in discovery order.

    Bytes that are not valid UTF-8 are decoded as replacement characters.
    """
    sources: List[SourceFile] = []
    for path in paths:
        contents = path.read_text(encoding="utf-8", errors="replace")
        sources.append(
            SourceFile(
                path=relative_posix(path, root),
                contents=contents,
                exported_symbols=tuple(extract_exports(contents)),
            )
        )
    return sources


class DeadExportScanner:
    """Runs the dead export pipeline over a directory tree."""

    def __init__(self, detector: ImportDetector | None = None) -> None:
        self._detector = detector
        self.logger = get_logger("scanner")

    def resolve_settings(
        self,
        root: str | Path,
        *,
        extensions: Optional[Sequence[str]] = None,
        ignore: Optional[Sequence[str]] = None,
        import_mode: Optional[str] = None,
    ) -> ScanSettings:
        """Validate the root and merge explicit options over ``.deadexports.yml``."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Scan path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Scan path is not a directory: {root}")

        settings = load_config(root_path)
        return settings.override(
            extensions=extensions, ignore=ignore, import_mode=import_mode
        )

    def scan(
        self,
        root: str | Path,
        *,
        extensions: Optional[Sequence[str]] = None,
        ignore: Optional[Sequence[str]] = None,
        import_mode: Optional[str] = None,
    ) -> DeadExportReport:
        """Return the dead export report for ``root``."""
        settings = self.resolve_settings(
            root, extensions=extensions, ignore=ignore, import_mode=import_mode
        )
        detector = self._detector or get_detector(settings.import_mode)

        self.logger.info("Scanning %s", settings.root)
        self.logger.debug(
            "Extensions: %s; ignored directories: %s; import mode: %s",
            ", ".join(settings.extensions),
            ", ".join(settings.ignore) or "(none)",
            detector.name or detector.__class__.__name__,
        )

        paths = discover_files(settings.root, settings.extensions, settings.ignore)
        self.logger.debug("Discovered %d candidate files", len(paths))

        sources = load_sources(settings.root, paths)
        export_total = sum(len(source.exported_symbols) for source in sources)
        self.logger.debug(
            "Extracted %d exports from %d files", export_total, len(sources)
        )

        report = find_dead_exports(sources, detector, root=str(settings.root))
        self.logger.info("Found %d files with dead exports", report.total_files)
        return report


__all__ = ["DeadExportScanner", "load_sources"]
