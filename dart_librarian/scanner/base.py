"""Abstract base scanner."""

from __future__ import annotations

import abc
import fnmatch
import logging
from pathlib import Path
from typing import Callable

from dart_librarian.models import ExportCandidate

logger = logging.getLogger(__name__)


class BaseScanner(abc.ABC):
    """Base class for scanners that list export targets under a directory."""

    extensions: tuple[str, ...]

    def __init__(self, skip_dirs: list[str] | None = None):
        self.skip_dirs = skip_dirs or [
            ".dart_tool", ".git", "build", ".idea", ".fvm",
        ]

    @abc.abstractmethod
    def scan_file(self, file_path: Path, root: Path) -> ExportCandidate:
        """Describe a single file relative to ``root``."""

    def list_files(self, directory: Path, recursive: bool = False) -> list[Path]:
        """Files with a known extension, direct children unless ``recursive``."""
        pattern = "*"
        paths = directory.rglob(pattern) if recursive else directory.glob(pattern)
        files: list[Path] = []
        for path in sorted(paths):
            if path.is_dir():
                continue
            if recursive and self._should_skip(path.relative_to(directory)):
                continue
            if path.suffix in self.extensions:
                files.append(path)
        return files

    def scan_directory(
        self,
        directory: Path,
        recursive: bool = False,
        predicate: Callable[[Path], bool] | None = None,
    ) -> list[ExportCandidate]:
        """Scan matching files; unreadable files are logged and skipped."""
        candidates: list[ExportCandidate] = []
        for path in self.list_files(directory, recursive=recursive):
            if predicate is not None and not predicate(path):
                continue
            try:
                candidates.append(self.scan_file(path, directory))
            except (OSError, UnicodeError) as e:
                logger.warning("Skipping unreadable file %s: %s", path, e)
        return candidates

    def _should_skip(self, path: Path) -> bool:
        for part in path.parts[:-1]:
            for pattern in self.skip_dirs:
                if fnmatch.fnmatch(part, pattern):
                    return True
        return False
