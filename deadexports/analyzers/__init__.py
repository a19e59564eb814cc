"""Export extraction, import detection and cross-referencing."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterable, List

from ..config import ConfigError
from .base import ImportDetector
from .engine import find_dead_exports, reference_counts
from .exports import extract_exports
from .imports import LexicalImportDetector, StatementImportDetector

_ENTRY_POINT_GROUP = "deadexports.detectors"

_BUILTIN_FACTORIES: Dict[str, Callable[[], ImportDetector]] = {
    "lexical": LexicalImportDetector,
    "statement": StatementImportDetector,
}


def available_detectors() -> List[str]:
    """Return the names accepted by :func:`get_detector`."""
    names = list(_BUILTIN_FACTORIES)
    for entry in _iter_entry_points():
        if entry.name not in names:
            names.append(entry.name)
    return names


def get_detector(mode: str) -> ImportDetector:
    """Instantiate the import detector registered under ``mode``."""
    key = mode.strip().lower()
    factory = _BUILTIN_FACTORIES.get(key)
    if factory is not None:
        return factory()

    for entry in _iter_entry_points():
        if entry.name.lower() != key:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - plugin import failure
            raise ConfigError(f"Failed to load import detector '{entry.name}': {exc}") from exc
        return _coerce_detector(loaded)

    known = ", ".join(available_detectors())
    raise ConfigError(f"Unknown import mode '{mode}' (expected one of: {known})")


def _coerce_detector(obj: object) -> ImportDetector:
    if isinstance(obj, ImportDetector):
        return obj
    if isinstance(obj, type) and issubclass(obj, ImportDetector):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, ImportDetector):
            return instance
    raise ConfigError("Import detector entry point must be an ImportDetector subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "ImportDetector",
    "LexicalImportDetector",
    "StatementImportDetector",
    "available_detectors",
    "extract_exports",
    "find_dead_exports",
    "get_detector",
    "reference_counts",
]
