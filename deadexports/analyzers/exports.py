"""Lexical extraction of exported symbol names."""

from __future__ import annotations

import re
from typing import List

# ``export`` followed by a declaration keyword sequence and an identifier
# (group 1), or the bare ``export default <identifier>`` form (group 2).
# Matches anywhere in the text, including comments and string literals.
EXPORT_PATTERN = re.compile(
    r"export\s+"
    r"(?:"
    r"(?:(?:default\s+)?(?:async\s+)?function"
    r"|(?:default\s+)?(?:const|let|var|class|interface|type|enum))"
    r"\s+(?!extends\b)(\w+)"
    r"|default\s+(\w+)"
    r")"
)

_KEYWORDS = frozenset(
    {
        "abstract",
        "async",
        "class",
        "const",
        "default",
        "enum",
        "extends",
        "function",
        "interface",
        "let",
        "new",
        "type",
        "var",
    }
)


def extract_exports(contents: str) -> List[str]:
    """Return exported symbol names in order of appearance.

    Recognised forms are ``export [default] const|let|var|class|interface|type|enum
    <name>``, ``export [default] [async] function <name>`` and
    ``export default <name>``. Re-exports, export lists and ``export *`` are not
    recognised. A declaration exported twice is listed twice.
    """
    names: List[str] = []
    for match in EXPORT_PATTERN.finditer(contents):
        declared, bare = match.group(1), match.group(2)
        if declared:
            names.append(declared)
        # Anonymous defaults (``export default function () {}``) fall through to
        # the bare form and capture a keyword, not a name.
        elif bare not in _KEYWORDS:
            names.append(bare)
    return names


__all__ = ["EXPORT_PATTERN", "extract_exports"]
