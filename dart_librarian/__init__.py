"""dart-librarian: maintain export (barrel) files in Dart packages."""

from __future__ import annotations

from dart_librarian.editor import (
    add_export,
    apply_edits,
    compare_exports,
    compute_relative_export_path,
    export_statement_for,
    remove_export,
    sort_export_statements,
)
from dart_librarian.locator import is_in_lib_folder, locate_lib_root
from dart_librarian.models import (
    AddExportResult,
    EditOp,
    ExportCandidate,
    LibrarianConfig,
    RemoveExportResult,
)
from dart_librarian.scanner import scan_export_candidates

__version__ = "0.1.0"

__all__ = [
    "AddExportResult",
    "EditOp",
    "ExportCandidate",
    "LibrarianConfig",
    "RemoveExportResult",
    "add_export",
    "apply_edits",
    "compare_exports",
    "compute_relative_export_path",
    "export_statement_for",
    "is_in_lib_folder",
    "locate_lib_root",
    "remove_export",
    "scan_export_candidates",
    "sort_export_statements",
]
