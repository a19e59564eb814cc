"""Core data models shared across deadexports components."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class SourceFile:
    """One loaded source file and the export names declared in it."""

    path: str
    contents: str
    exported_symbols: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DeadExportEntry:
    """Export names of a single file that nothing else imports."""

    path: str
    dead_exports: Tuple[str, ...]

    @property
    def total(self) -> int:
        return len(self.dead_exports)


@dataclass
class DeadExportReport:
    """Files with at least one dead export, in first-encountered order."""

    entries: List[DeadExportEntry] = field(default_factory=list)
    root: Optional[str] = None

    def __iter__(self) -> Iterator[DeadExportEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, path: object) -> bool:
        return any(entry.path == path for entry in self.entries)

    def get(self, path: str) -> Optional[Tuple[str, ...]]:
        for entry in self.entries:
            if entry.path == path:
                return entry.dead_exports
        return None

    @property
    def total_files(self) -> int:
        return len(self.entries)

    def as_mapping(self) -> Dict[str, List[str]]:
        return {entry.path: list(entry.dead_exports) for entry in self.entries}

    def to_dict(self) -> Dict[str, object]:
        return {
            "root": self.root,
            "files": [
                {
                    "path": entry.path,
                    "dead_exports": list(entry.dead_exports),
                    "total": entry.total,
                }
                for entry in self.entries
            ],
            "total_files": self.total_files,
        }
