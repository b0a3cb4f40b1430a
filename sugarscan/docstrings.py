"""
Declared exception extraction from docstrings.

Python has no throws clause; the conventional declaration of the
exceptions a function raises is its docstring. Supported forms:

    Google style::

        Raises:
            ValueError: If the pattern is empty
            re.error: If the pattern does not compile

    NumPy style::

        Raises
        ------
        ValueError
            If the pattern is empty

    Sphinx fields::

        :raises ValueError: If the pattern is empty

Only the exception names are extracted, in declaration order, without
duplicates.
"""

import re
from typing import Optional

_RAISES_HEADERS = {"Raises", "Raise", "Throws", "Exceptions"}
_GOOGLE_HEADER = re.compile(r"^([A-Z][A-Za-z ]*):$")
_NUMPY_UNDERLINE = re.compile(r"^-{3,}$")
_ENTRY = re.compile(r"^([A-Za-z_][\w.]*)\s*(?::|$)")
_SPHINX_RAISES = re.compile(r"^\s*:(?:raises?|except|exception)\s+([A-Za-z_][\w.]*)\s*:", re.MULTILINE)


def parse_raises(doc: Optional[str]) -> list[str]:
    """
    Extract declared exception names from a docstring.

    Args:
        doc: A cleaned docstring (see inspect.getdoc), or None

    Returns:
        Exception names as written, e.g. ["ValueError", "re.error"]
    """
    if not doc:
        return []

    names: list[str] = []
    lines = doc.splitlines()
    in_raises = False
    entry_indent: Optional[int] = None

    for index, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or _NUMPY_UNDERLINE.match(stripped):
            continue

        indent = len(line) - len(line.lstrip())
        header = _section_header(lines, index) if indent == 0 else None
        if header is not None:
            in_raises = header in _RAISES_HEADERS
            entry_indent = None
            continue

        if not in_raises:
            continue
        if entry_indent is None:
            entry_indent = indent
        if indent > entry_indent:
            continue  # description continuation
        if indent < entry_indent:
            in_raises = False
            continue

        match = _ENTRY.match(stripped)
        if match:
            _append_unique(names, match.group(1))

    for match in _SPHINX_RAISES.finditer(doc):
        _append_unique(names, match.group(1))

    return names


def _section_header(lines: list[str], index: int) -> Optional[str]:
    """Return the section name if an unindented lines[index] opens a section."""
    stripped = lines[index].strip()
    google = _GOOGLE_HEADER.match(stripped)
    if google:
        return google.group(1)
    if index + 1 < len(lines) and _NUMPY_UNDERLINE.match(lines[index + 1].strip()):
        return stripped
    return None


def _append_unique(names: list[str], name: str) -> None:
    if name not in names:
        names.append(name)
