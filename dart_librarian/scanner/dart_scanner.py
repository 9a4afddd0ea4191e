"""Dart export-target scanner using regex patterns."""

from __future__ import annotations

import os
import re
from pathlib import Path

from dart_librarian.models import ExportCandidate
from dart_librarian.scanner.base import BaseScanner

_LIBRARY_RE = re.compile(r"^\s*library\s+", re.MULTILINE)


def has_library_declaration(source: str) -> bool:
    return _LIBRARY_RE.search(source) is not None


class DartScanner(BaseScanner):
    extensions = (".dart",)

    def scan_file(self, file_path: Path, root: Path) -> ExportCandidate:
        source = file_path.read_text(encoding="utf-8", errors="replace")
        relative = os.path.relpath(file_path, root).replace("\\", "/")
        return ExportCandidate(
            path=file_path,
            relative_path=relative,
            has_library=has_library_declaration(source),
        )
