"""Export inventory: list the files under a lib root that can hold exports."""

from __future__ import annotations

from pathlib import Path

from dart_librarian.models import ExportCandidate, LibrarianConfig
from dart_librarian.scanner.base import BaseScanner
from dart_librarian.scanner.dart_scanner import DartScanner, has_library_declaration


def scan_export_candidates(
    lib_root: str | Path,
    recursive: bool = False,
    exclude_private: bool = True,
    config: LibrarianConfig | None = None,
) -> list[ExportCandidate]:
    """Scan ``lib_root`` for Dart files and flag those declaring a library."""
    config = config or LibrarianConfig()
    scanner = DartScanner(skip_dirs=config.skip_dirs)
    if config.extension not in scanner.extensions:
        scanner.extensions = (config.extension,)

    def is_public(path: Path) -> bool:
        return not path.name.startswith(config.private_prefix)

    return scanner.scan_directory(
        Path(lib_root),
        recursive=recursive,
        predicate=is_public if exclude_private else None,
    )


__all__ = [
    "BaseScanner",
    "DartScanner",
    "has_library_declaration",
    "scan_export_candidates",
]
