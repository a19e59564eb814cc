"""All-pairs cross-referencing of exports against other files' imports."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..models import DeadExportEntry, DeadExportReport, SourceFile
from .base import ImportDetector
from .imports import LexicalImportDetector


def reference_counts(
    files: Sequence[SourceFile],
    detector: Optional[ImportDetector] = None,
) -> Dict[str, Dict[str, int]]:
    """Count, per file and export name, how many other files import that name.

    Every exported name of every file is tested once against the contents of
    every other file, so the cost is O(files² × exports). A file is never
    tested against itself. Names exported more than once share one counter.
    """
    _ensure_unique_paths(files)
    detector = detector or LexicalImportDetector()

    counts: Dict[str, Dict[str, int]] = {}
    for index, source in enumerate(files):
        counter = dict.fromkeys(source.exported_symbols, 0)
        if counter:
            for other_index, other in enumerate(files):
                if other_index == index:
                    continue
                for name in counter:
                    if detector.is_imported(name, other.contents):
                        counter[name] += 1
        counts[source.path] = counter
    return counts


def find_dead_exports(
    files: Sequence[SourceFile],
    detector: Optional[ImportDetector] = None,
    *,
    root: Optional[str] = None,
) -> DeadExportReport:
    """Return the files whose exports are never imported by any other file.

    Dead names keep their declaration order and files keep the input order;
    files without exports or without dead exports are left out.
    """
    counts = reference_counts(files, detector)

    entries: List[DeadExportEntry] = []
    for source in files:
        dead = tuple(name for name, count in counts[source.path].items() if count == 0)
        if dead:
            entries.append(DeadExportEntry(path=source.path, dead_exports=dead))
    return DeadExportReport(entries=entries, root=root)


def _ensure_unique_paths(files: Sequence[SourceFile]) -> None:
    seen: set[str] = set()
    for source in files:
        if source.path in seen:
            raise ValueError(f"Duplicate source path in scan input: {source.path}")
        seen.add(source.path)


__all__ = ["find_dead_exports", "reference_counts"]
