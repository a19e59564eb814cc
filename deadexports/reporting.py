"""Human and machine readable renderings of a dead export report."""

from __future__ import annotations

import json
from typing import Callable, Dict, List

from .models import DeadExportReport


def format_text(report: DeadExportReport) -> str:
    """Render one block per file followed by the number of affected files."""
    lines: List[str] = []
    for index, entry in enumerate(report, start=1):
        lines.append(f"File #{index}")
        lines.append(f"Path: {entry.path}")
        lines.append(f"Dead exports: {list(entry.dead_exports)}")
        lines.append(f"Total: {entry.total}")
        lines.append("")
    lines.append(f"Total files with dead exports: {report.total_files}")
    return "\n".join(lines)


def format_json(report: DeadExportReport) -> str:
    return json.dumps(report.to_dict(), indent=2)


FORMATTERS: Dict[str, Callable[[DeadExportReport], str]] = {
    "text": format_text,
    "json": format_json,
}


def render(report: DeadExportReport, output_format: str = "text") -> str:
    try:
        formatter = FORMATTERS[output_format]
    except KeyError:
        raise ValueError(f"Unsupported output format: {output_format}") from None
    return formatter(report)


__all__ = ["FORMATTERS", "format_json", "format_text", "render"]
