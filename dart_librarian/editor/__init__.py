"""Export block editor: plan and apply export statement edits."""

from __future__ import annotations

from dart_librarian.editor.block import find_export_block, is_relative_export
from dart_librarian.editor.exports import (
    add_export,
    compute_relative_export_path,
    export_statement_for,
    exports_statement,
    make_export_statement,
    remove_export,
)
from dart_librarian.editor.ordering import compare_exports, sort_export_statements
from dart_librarian.editor.plan import apply_edits

__all__ = [
    "add_export",
    "apply_edits",
    "compare_exports",
    "compute_relative_export_path",
    "export_statement_for",
    "exports_statement",
    "find_export_block",
    "is_relative_export",
    "make_export_statement",
    "remove_export",
    "sort_export_statements",
]
