"""Configuration loading for deadexports (.deadexports.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".deadexports.yml"

DEFAULT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx")
DEFAULT_IGNORE = (
    "node_modules",
    "build",
    "lib",
    "dist",
    "coverage",
    "public",
    "static",
    "assets",
)
DEFAULT_IMPORT_MODE = "lexical"


class ConfigError(RuntimeError):
    """Raised when scan settings are missing, malformed or contradictory."""


@dataclass
class ScanSettings:
    """Effective settings for a single scan run."""

    root: Path
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    ignore: List[str] = field(default_factory=lambda: list(DEFAULT_IGNORE))
    import_mode: str = DEFAULT_IMPORT_MODE

    def override(
        self,
        *,
        extensions: Optional[Sequence[str]] = None,
        ignore: Optional[Sequence[str]] = None,
        import_mode: Optional[str] = None,
    ) -> "ScanSettings":
        """Return a copy with explicitly provided values taking precedence."""
        updated = self
        if extensions is not None:
            updated = replace(updated, extensions=normalise_extensions(extensions))
        if ignore is not None:
            updated = replace(updated, ignore=normalise_names(ignore))
        if import_mode is not None:
            updated = replace(updated, import_mode=import_mode)
        return updated


def load_config(root: Path) -> ScanSettings:
    """Load settings from ``.deadexports.yml`` inside ``root``, falling back to defaults."""
    root = root.expanduser().resolve()
    config_file = root / CONFIG_FILENAME
    if not config_file.is_file():
        return ScanSettings(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    settings = ScanSettings(root=root)
    if "extensions" in data:
        settings.extensions = normalise_extensions(_as_str_list(data.get("extensions")))
    if "ignore" in data:
        settings.ignore = normalise_names(_as_str_list(data.get("ignore")))
    mode = _as_str(data.get("import_mode"))
    if mode:
        settings.import_mode = mode.strip().lower()
    return settings


def normalise_extensions(values: Sequence[str]) -> List[str]:
    """Trim extensions, drop blanks and ensure each one starts with a dot."""
    extensions: List[str] = []
    for value in values:
        ext = value.strip()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in extensions:
            extensions.append(ext)
    if not extensions:
        raise ConfigError("At least one file extension must be configured")
    return extensions


def normalise_names(values: Sequence[str]) -> List[str]:
    """Trim directory names and drop blanks."""
    return [value.strip() for value in values if value.strip()]


def split_csv(value: str) -> List[str]:
    """Split a comma separated command line value."""
    return value.split(",")


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return split_csv(value)
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_IGNORE",
    "DEFAULT_IMPORT_MODE",
    "ScanSettings",
    "load_config",
    "normalise_extensions",
    "normalise_names",
    "split_csv",
]
