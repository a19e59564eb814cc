"""Import detectors deciding whether a file imports an exported name."""

from __future__ import annotations

import re

from .base import ImportDetector

_IMPORT_KEYWORD = "import"
_FROM_PATTERN = re.compile(r"from.")
_STATEMENT_PATTERN = re.compile(r"\bimport\s+([^;'\"`]*?)\s*\bfrom\s*['\"`]")


class LexicalImportDetector(ImportDetector):
    """Whole-text greedy match of ``import … <name> … from …``.

    Equivalent to searching ``import[\\s\\S]+<name>[\\s\\S]+from.+`` over the
    entire text: the span may cross newlines and unrelated statements, and the
    name is not required to sit on word boundaries (``useFoo`` matches ``Foo``).
    Runs as three forward scans instead of a backtracking regex, which keeps the
    cost linear in the size of the text.
    """

    name = "lexical"

    def is_imported(self, export_name: str, contents: str) -> bool:
        if not export_name:
            return False
        start = contents.find(_IMPORT_KEYWORD)
        if start < 0:
            return False
        # At least one character separates each part of the span.
        name_at = contents.find(export_name, start + len(_IMPORT_KEYWORD) + 1)
        if name_at < 0:
            return False
        return _FROM_PATTERN.search(contents, name_at + len(export_name) + 1) is not None


class StatementImportDetector(ImportDetector):
    """Match the name as a whole word inside a single ``import … from '…'`` clause."""

    name = "statement"

    def is_imported(self, export_name: str, contents: str) -> bool:
        if not export_name:
            return False
        word = re.compile(rf"\b{re.escape(export_name)}\b")
        for match in _STATEMENT_PATTERN.finditer(contents):
            if word.search(match.group(1)):
                return True
        return False


__all__ = ["LexicalImportDetector", "StatementImportDetector"]
