"""Plan insertions and removals of relative export statements.

Both planners are pure: they take the document text and a statement and
return the edits to apply. Nothing here reads or writes files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dart_librarian.editor.block import (
    find_export_block,
    find_fallback_line,
    find_statement_line,
    split_lines,
)
from dart_librarian.editor.ordering import sort_export_statements
from dart_librarian.models import AddExportResult, EditOp, RemoveExportResult

logger = logging.getLogger(__name__)


def compute_relative_export_path(from_dir: str | Path, to_file: str | Path) -> str:
    """Relative path from ``from_dir`` to ``to_file`` using forward slashes."""
    return os.path.relpath(to_file, from_dir).replace("\\", "/")


def make_export_statement(relative_path: str) -> str:
    return f"export '{relative_path}';"


def export_statement_for(library_file: str | Path, target_file: str | Path) -> str:
    """The statement ``library_file`` needs in order to export ``target_file``."""
    relative = compute_relative_export_path(Path(library_file).parent, target_file)
    return make_export_statement(relative)


def exports_statement(document_text: str, statement: str) -> bool:
    return find_statement_line(split_lines(document_text), statement) is not None


def add_export(document_text: str, statement: str) -> AddExportResult:
    """Plan the insertion of ``statement`` into the document's export block."""
    statement = statement.strip()
    lines = split_lines(document_text)

    if find_statement_line(lines, statement) is not None:
        logger.debug("Duplicate export statement: %s", statement)
        return AddExportResult(duplicate=True)

    block = find_export_block(lines)
    if block is not None:
        merged = sort_export_statements([*block.lines, statement])
        logger.debug(
            "Merging into export block at lines %d-%d", block.start_line, block.end_line,
        )
        edit = EditOp(
            start_line=block.start_line,
            end_line=block.end_line + 1,
            replacement="\n".join(merged) + "\n",
        )
        return AddExportResult(
            edits=[edit],
            line=block.start_line + merged.index(statement),
        )

    insert_line = find_fallback_line(lines)
    replacement = statement + "\n\n"
    line = insert_line
    if insert_line >= len(lines):
        # Inserting past the last line lands at the end of the text.
        if lines[-1]:
            replacement = "\n" + replacement
        else:
            line = len(lines) - 1
    logger.debug("No export block, inserting at line %d", insert_line)
    return AddExportResult(
        edits=[EditOp(start_line=insert_line, end_line=insert_line, replacement=replacement)],
        line=line,
    )


def remove_export(document_text: str, statement: str) -> RemoveExportResult:
    """Plan the removal of ``statement`` from the document."""
    statement = statement.strip()
    lines = split_lines(document_text)

    block = find_export_block(lines)
    if block is not None:
        remaining = [line for line in block.lines if line != statement]
        if len(remaining) != len(block.lines):
            replacement = "\n".join(remaining) + ("\n" if remaining else "")
            logger.debug(
                "Removing from export block at lines %d-%d", block.start_line, block.end_line,
            )
            return RemoveExportResult(edits=[EditOp(
                start_line=block.start_line,
                end_line=block.end_line + 1,
                replacement=replacement,
            )])

    index = find_statement_line(lines, statement)
    if index is None:
        logger.debug("Export statement not found: %s", statement)
        return RemoveExportResult(not_found=True)

    return RemoveExportResult(edits=[EditOp(start_line=index, end_line=index + 1)])
