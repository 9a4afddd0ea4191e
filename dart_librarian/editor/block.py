"""Line-level recognition of export and library directives."""

from __future__ import annotations

import re

from dart_librarian.models import ExportBlock

_LIBRARY_LINE_RE = re.compile(r"^library\s+")
_PACKAGE_EXPORT_RE = re.compile(r"^export\s+'package:")

RELATIVE_EXPORT_PREFIX = "export '"
PACKAGE_EXPORT_PREFIX = "export 'package:"


def split_lines(text: str) -> list[str]:
    return text.split("\n")


def is_relative_export(line: str) -> bool:
    stripped = line.strip()
    return (
        stripped.startswith(RELATIVE_EXPORT_PREFIX)
        and not stripped.startswith(PACKAGE_EXPORT_PREFIX)
    )


def is_anchor_line(line: str) -> bool:
    """A ``library`` declaration or a ``package:`` export."""
    stripped = line.strip()
    return bool(_LIBRARY_LINE_RE.match(stripped) or _PACKAGE_EXPORT_RE.match(stripped))


def find_export_block(lines: list[str]) -> ExportBlock | None:
    """Locate the first maximal run of relative export lines.

    Scanning stops at the first line that breaks the run, so a second
    run further down the file is never part of the block.
    """
    start = -1
    end = -1
    for i, line in enumerate(lines):
        if is_relative_export(line):
            if start == -1:
                start = i
            end = i
        elif end != -1:
            break
    if start == -1:
        return None
    return ExportBlock(
        start_line=start,
        end_line=end,
        lines=[line.strip() for line in lines[start:end + 1]],
    )


def find_fallback_line(lines: list[str]) -> int:
    """Line just past the last anchor line, or the end of the document."""
    position = len(lines)
    for i, line in enumerate(lines):
        if is_anchor_line(line):
            position = i + 1
    return position


def find_statement_line(lines: list[str], statement: str) -> int | None:
    for i, line in enumerate(lines):
        if line.strip() == statement:
            return i
    return None
