"""Export and remove-export commands: locate -> scan -> choose -> plan -> apply."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from dart_librarian.editor import (
    add_export,
    apply_edits,
    export_statement_for,
    exports_statement,
    remove_export,
)
from dart_librarian.locator import locate_lib_root
from dart_librarian.models import (
    CommandResult,
    CommandStatus,
    ExportCandidate,
    LibrarianConfig,
)
from dart_librarian.scanner import has_library_declaration, scan_export_candidates

logger = logging.getLogger(__name__)

NEW_FILE_PLACEHOLDER = "e.g., exports.dart or subfolder/exports.dart"


class NotInLibError(ValueError):
    """The selected file is not a Dart file under a lib directory."""


class LibRootNotFoundError(ValueError):
    """No lib directory could be found for the selected file."""


@dataclass(frozen=True)
class Choice:
    label: str
    description: str = ""
    candidate: ExportCandidate | None = None
    create_new: bool = False


class Prompter(Protocol):
    """User interaction the commands depend on."""

    def choose(self, options: list[Choice], placeholder: str) -> Choice | None: ...

    def ask_text(self, prompt: str, placeholder: str = "") -> str | None: ...

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...


def resolve_source(path: str | Path, config: LibrarianConfig | None = None) -> tuple[Path, Path]:
    """Validate a source file and return ``(source, lib_root)``."""
    config = config or LibrarianConfig()
    source = Path(path)
    if source.suffix != config.extension:
        raise NotInLibError("Please select a Dart file within the lib directory.")
    lib_root = locate_lib_root(source, config.lib_dir_name)
    if lib_root is None:
        raise LibRootNotFoundError(
            f"Could not find a '{config.lib_dir_name}' directory above {source}."
        )
    return source, lib_root


def _same_file(a: Path, b: Path) -> bool:
    return os.path.abspath(a) == os.path.abspath(b)


def create_export_file(lib_root: Path, file_name: str) -> ExportCandidate:
    """Create an empty export file (and its directories) under ``lib_root``.

    An existing file is left untouched and returned as the target.
    """
    full_path = lib_root / file_name
    full_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(full_path, "x", encoding="utf-8"):
            pass
        logger.info("Created export file %s", full_path)
        has_library = False
    except FileExistsError:
        logger.info("Export file %s already exists, reusing it", full_path)
        has_library = has_library_declaration(
            full_path.read_text(encoding="utf-8", errors="replace")
        )
    return ExportCandidate(
        path=full_path,
        relative_path=os.path.relpath(full_path, lib_root).replace("\\", "/"),
        has_library=has_library,
    )


def _ask_new_file(prompter: Prompter, lib_root: Path, prompt: str) -> ExportCandidate | None:
    file_name = prompter.ask_text(prompt, NEW_FILE_PLACEHOLDER)
    if not file_name or not file_name.strip():
        return None
    return create_export_file(lib_root, file_name.strip())


def _choose_target(
    candidates: list[ExportCandidate],
    prompter: Prompter,
    lib_root: Path,
) -> ExportCandidate | None:
    if not candidates:
        return _ask_new_file(
            prompter, lib_root,
            "No export file found. Enter the new file name (relative to lib)",
        )

    options = [
        Choice(label=c.label, description=c.description, candidate=c)
        for c in candidates
    ]
    options.append(Choice(label="Create new file...", create_new=True))
    selected = prompter.choose(options, "Select or create a file to export to")
    if selected is None:
        return None
    if selected.create_new:
        return _ask_new_file(
            prompter, lib_root, "Enter the new file name (relative to lib)",
        )
    return selected.candidate


def add_export_to_file(source: Path, target: Path) -> CommandResult:
    """Add the export of ``source`` to ``target`` and save it."""
    statement = export_statement_for(target, source)
    text = target.read_text(encoding="utf-8")
    plan = add_export(text, statement)
    if plan.duplicate:
        return CommandResult(
            status=CommandStatus.DUPLICATE,
            target=target,
            message="This export statement already exists.",
        )
    target.write_text(apply_edits(text, plan.edits), encoding="utf-8")
    logger.info("Added %s to %s", statement, target)
    return CommandResult(
        status=CommandStatus.APPLIED,
        target=target,
        message=f"Added {statement}",
        line=plan.line,
    )


def remove_export_from_file(source: Path, target: Path) -> CommandResult:
    """Remove the export of ``source`` from ``target`` and save it."""
    statement = export_statement_for(target, source)
    text = target.read_text(encoding="utf-8")
    plan = remove_export(text, statement)
    if plan.not_found:
        return CommandResult(
            status=CommandStatus.NOT_FOUND,
            target=target,
            message="Export statement not found in the selected library file.",
        )
    target.write_text(apply_edits(text, plan.edits), encoding="utf-8")
    logger.info("Removed %s from %s", statement, target)
    return CommandResult(
        status=CommandStatus.APPLIED,
        target=target,
        message=f"Removed {statement}",
    )


def export_file(
    path: str | Path,
    prompter: Prompter,
    config: LibrarianConfig | None = None,
    target: str | Path | None = None,
) -> CommandResult:
    """Export a Dart file from a chosen (or newly created) export file."""
    config = config or LibrarianConfig()
    source, lib_root = resolve_source(path, config)

    if target is not None:
        target_path = Path(target)
    else:
        candidates = [
            c for c in scan_export_candidates(lib_root, config=config)
            if not _same_file(c.path, source)
        ]
        chosen = _choose_target(candidates, prompter, lib_root)
        if chosen is None:
            return CommandResult(status=CommandStatus.CANCELLED)
        target_path = chosen.path

    result = add_export_to_file(source, target_path)
    if result.status is CommandStatus.DUPLICATE:
        prompter.warning(result.message)
    return result


def remove_file_export(
    path: str | Path,
    prompter: Prompter,
    config: LibrarianConfig | None = None,
    target: str | Path | None = None,
) -> CommandResult:
    """Remove a Dart file's export from one of the files that export it."""
    config = config or LibrarianConfig()
    source, lib_root = resolve_source(path, config)

    if target is not None:
        result = remove_export_from_file(source, Path(target))
        if result.status is CommandStatus.NOT_FOUND:
            prompter.warning(result.message)
        return result

    library_files = [
        c for c in scan_export_candidates(
            lib_root, recursive=True, exclude_private=False, config=config,
        )
        if not _same_file(c.path, source)
    ]
    if not library_files:
        message = "No library file is available."
        prompter.info(message)
        return CommandResult(status=CommandStatus.NO_CANDIDATES, message=message)

    exporting = []
    for candidate in library_files:
        statement = export_statement_for(candidate.path, source)
        text = candidate.path.read_text(encoding="utf-8", errors="replace")
        if exports_statement(text, statement):
            exporting.append(candidate)

    if not exporting:
        message = "No library file exports this file."
        prompter.warning(message)
        return CommandResult(status=CommandStatus.NO_CANDIDATES, message=message)

    options = [
        Choice(label=c.label, description=c.description, candidate=c)
        for c in exporting
    ]
    selected = prompter.choose(options, "Select the library file to remove export from")
    if selected is None or selected.candidate is None:
        return CommandResult(status=CommandStatus.CANCELLED)

    result = remove_export_from_file(source, selected.candidate.path)
    if result.status is CommandStatus.NOT_FOUND:
        prompter.warning(result.message)
    return result
